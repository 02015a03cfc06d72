"""Typed value extraction from loosely typed mapping objects."""
from typing import Any, List, Mapping, Optional, Sequence
import logging

from ..exceptions import MissingRequiredKeyError, TypeMismatchError

logger = logging.getLogger(__name__)

_TRUE_STRINGS = ("true",)
_FALSE_STRINGS = ("false",)


class MapValueReader:
    """Reads typed values out of a generic key/value mapping.

    Every shape check for mapping definitions lives here so the models only
    deal with already-typed values.
    """

    def __init__(self, mapping: Mapping[str, Any], context: str = "mapping"):
        """Initialize reader.

        Args:
            mapping: Generic mapping to read from
            context: Description used in error messages
        """
        self.mapping = mapping
        self.context = context

    def _get(self, key: str) -> Any:
        return self.mapping.get(key)

    def get_required_string(self, key: str) -> str:
        """Get a string value that must be present.

        Args:
            key: Key to read

        Returns:
            str: The value

        Raises:
            MissingRequiredKeyError: If the key is absent or None
            TypeMismatchError: If the value is not a string
        """
        value = self._get(key)
        if value is None:
            raise MissingRequiredKeyError(key, self.context)
        if not isinstance(value, str):
            raise TypeMismatchError(key, "a string", value)
        return value

    def get_optional_string(self, key: str) -> Optional[str]:
        """Get a string value, or None when absent."""
        value = self._get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeMismatchError(key, "a string", value)
        return value

    def get_optional_bool(self, key: str, default: bool) -> bool:
        """Get a boolean value.

        Accepts real booleans and the strings "true"/"false" in any case.

        Args:
            key: Key to read
            default: Value returned when the key is absent

        Returns:
            bool: The value
        """
        value = self._get(key)
        if value is None:
            logger.debug(f"No '{key}' in {self.context}, defaulting to {default}")
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            if text in _TRUE_STRINGS:
                return True
            if text in _FALSE_STRINGS:
                return False
        raise TypeMismatchError(key, "a boolean or 'true'/'false'", value)

    def get_optional_string_list(self, key: str) -> List[str]:
        """Get a sequence of strings, or an empty list when absent.

        Args:
            key: Key to read

        Returns:
            List[str]: New list holding the values in their original order
        """
        value = self._get(key)
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            raise TypeMismatchError(key, "a sequence of strings", value)
        return self._check_items(key, value)

    def _check_items(self, key: str, values: Sequence[Any]) -> List[str]:
        result = []
        for index, item in enumerate(values):
            if not isinstance(item, str):
                raise TypeMismatchError(f"{key}[{index}]", "a string", item)
            result.append(item)
        return result

    def unknown_keys(self, known: Sequence[str]) -> List[str]:
        """Keys present in the mapping but not in ``known``."""
        return [key for key in self.mapping if key not in known]
