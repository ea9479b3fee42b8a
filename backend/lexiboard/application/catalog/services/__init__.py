from .schema_normalizer import (
    DictionaryFetchInput,
    IngestionSource,
    JsonImportInput,
    ManualInput,
    SchemaNormalizer,
)

__all__ = [
    "DictionaryFetchInput",
    "IngestionSource",
    "JsonImportInput",
    "ManualInput",
    "SchemaNormalizer",
]
