"""Kinds of enumeration types supported by the codec."""

from enum import IntEnum


class EnumKind(IntEnum):
    """Whether an enumeration stores one value or a set of flags."""
    SCALAR = 1
    FLAGS = 2

    @property
    def display_name(self) -> str:
        """Get user-friendly display name for the kind."""
        names = {
            EnumKind.SCALAR: "Enum",
            EnumKind.FLAGS: "Flaggable Enum",
        }
        return names.get(self, "Unknown")

    @property
    def accepts_sums(self) -> bool:
        """Whether a stored integer may be a sum (bitwise OR) of several codes."""
        return self == EnumKind.FLAGS
