"""
Exceptions raised by textfilters.
"""

from typing import Any, Dict


class TextFilterError(Exception):
    """Base class for all textfilters errors."""


class InputTypeError(TextFilterError, TypeError):
    """
    Raised when a filter receives a value that is not a string.

    The filter name, argument name and expected type are kept as attributes
    so a template engine can report which expression failed.
    """

    def __init__(
        self,
        filter_name: str,
        value: Any,
        arg_name: str = "value",
        expected: str = "String",
    ):
        self.filter_name = filter_name
        self.value = value
        self.arg_name = arg_name
        self.expected = expected
        super().__init__(
            f"Filter `{filter_name}` received an incorrect type for arg `{arg_name}`: "
            f"got `{value!r}` but expected a {expected}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "filter_name": self.filter_name,
            "arg_name": self.arg_name,
            "expected": self.expected,
            "got": type(self.value).__name__,
            "message": str(self),
        }
