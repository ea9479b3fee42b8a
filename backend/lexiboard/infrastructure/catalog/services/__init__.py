from .dictionary_service import DictionaryApiService, transform_dictionary_entry

__all__ = ["DictionaryApiService", "transform_dictionary_entry"]
