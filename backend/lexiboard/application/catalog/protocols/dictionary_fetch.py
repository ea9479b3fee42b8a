"""Port for the external dictionary lookup."""

from collections.abc import Mapping
from typing import Any, Protocol


class DictionaryFetchPort(Protocol):
    """Looks a word up in an external dictionary."""

    async def lookup(self, word: str) -> Mapping[str, Any]:
        """
        Fetch a best-effort partial record document for a word.

        The document uses the canonical camelCase keys (`headword`,
        `phonetic`, `audioUrl`, `types`, `examples`, `synonyms`, ...). Keys the
        dictionary cannot fill may be missing.

        Raises:
            DictionaryLookupError: If the word is unknown or the service fails
        """
        ...
