"""Classification of codec input into a closed set of shapes."""

from enum import Enum
from typing import Any


class InputShape(Enum):
    """The forms of input a codec knows how to handle."""
    INTEGER = "integer"
    LABEL = "label"
    TEXT = "text"
    COLLECTION = "collection"
    UNSUPPORTED = "unsupported"


COLLECTION_TYPES = (list, tuple, set, frozenset)


def classify(value: Any) -> InputShape:
    """Return the InputShape of ``value``.

    Enum members are checked first so IntEnum labels count as labels, not
    integers. ``bool`` is an int subclass but never a valid token.
    """
    if isinstance(value, Enum):
        return InputShape.LABEL
    if isinstance(value, bool):
        return InputShape.UNSUPPORTED
    if isinstance(value, int):
        return InputShape.INTEGER
    if isinstance(value, str):
        return InputShape.TEXT
    if isinstance(value, COLLECTION_TYPES):
        return InputShape.COLLECTION
    return InputShape.UNSUPPORTED
