"""Catalog bounded context: lexical records, boards and lessons."""
