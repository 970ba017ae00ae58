"""Static catalogs of enum definitions."""

from typing import Dict, List

from .definitions import EnumType
from .kinds import EnumKind


class EnumCatalog:
    """Base class for a table of enum definitions declared as class attributes.

        class Inventory(EnumCatalog):
            PROPERTIES = define_flag_enum('PropertiesEnum', {...})
            STATUS = define_enum('StatusEnum', {...})

    Each subclass is its own table; nothing is shared between catalogs.
    """

    @classmethod
    def get_all_enums(cls) -> Dict[str, EnumType]:
        """Get all enum definitions as a dictionary keyed by enum name."""
        enums = {}
        for attr_name in dir(cls):
            attr = getattr(cls, attr_name)
            if isinstance(attr, EnumType):
                enums[attr.name] = attr
        return enums

    @classmethod
    def get_enums_by_kind(cls) -> Dict[EnumKind, List[EnumType]]:
        """Get enum definitions organized by kind."""
        by_kind = {}
        for enum_type in cls.get_all_enums().values():
            if enum_type.kind not in by_kind:
                by_kind[enum_type.kind] = []
            by_kind[enum_type.kind].append(enum_type)
        return by_kind
