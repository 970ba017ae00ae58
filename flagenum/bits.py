"""Bit packing between integers and sets of labels.

Both functions take the lookup table they need rather than a registry, so they
can be used on any label/code table.
"""

from functools import reduce
import operator
from typing import Any, FrozenSet, Iterable, Mapping


def contains(code: int, value: int) -> bool:
    """True if every bit of ``code`` is set in ``value``."""
    return (code & value) == code


def encode(labels: Iterable[Any], label_to_code: Mapping[Any, int]) -> int:
    """OR together the codes of ``labels``. The empty set encodes to 0.

    Every label must be a key of ``label_to_code``; callers validate first.
    """
    return reduce(operator.or_, (label_to_code[label] for label in labels), 0)


def decode(code_to_label: Mapping[int, Any], value: int) -> FrozenSet[Any]:
    """Return every label whose code is contained in ``value``.

    This is a subset test, not an equality test, so composite codes (a label
    whose code is the OR of other codes) are reported alongside the primitives
    they cover, and a label with code 0 is contained in every value.
    """
    return frozenset(
        label for code, label in code_to_label.items()
        if contains(code, value)
    )
