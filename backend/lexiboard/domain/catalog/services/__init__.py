from .record_validator import RecordValidator

__all__ = ["RecordValidator"]
