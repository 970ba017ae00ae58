"""Cast errors and the success/failure value returned by the codecs."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from .shapes import COLLECTION_TYPES


def format_token(token: Any) -> str:
    """Render a token the way it should appear in an error message."""
    if isinstance(token, Enum):
        return f"{type(token).__name__}.{token.name}"
    if isinstance(token, COLLECTION_TYPES):
        return "[" + ", ".join(format_token(item) for item in token) + "]"
    return repr(token)


class CastError(Exception):
    """Raised when a value does not belong to an enumeration.

    Attributes:
        value: The rejected input, as given by the caller
        valid_values: Every token the enumeration accepts, in reflection order
        token: The offending element when ``value`` is a collection, else None
        enum_name: Name of the enumeration that rejected the value
    """

    def __init__(
        self,
        value: Any,
        valid_values: Sequence[Any],
        token: Any = None,
        enum_name: str = "enum",
        accepts_sums: bool = False
    ):
        self.value = value
        self.valid_values = list(valid_values)
        self.token = token
        self.enum_name = enum_name
        super().__init__(self._build_message(accepts_sums))

    def _build_message(self, accepts_sums: bool) -> str:
        valid = format_token(self.valid_values)
        message = f"`{format_token(self.value)}` is not a valid enum value for `{self.enum_name}`."
        if accepts_sums:
            message += (
                f" Valid enum values are list or set of values `{valid}`,"
                " or integer representing a sum of integer enum values."
            )
        else:
            message += f" Valid enum values are `{valid}`."
        return message


@dataclass(frozen=True)
class CastResult:
    """Outcome of a cast or dump: either a value or a CastError, never both."""
    value: Any = None
    error: Optional[CastError] = None

    @classmethod
    def success(cls, value: Any) -> "CastResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CastError) -> "CastResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, raising the carried CastError on failure."""
        if self.error is not None:
            raise self.error
        return self.value
