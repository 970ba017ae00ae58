"""
Enum codecs between symbolic values and integer columns.

Key features:
- Flaggable enums: sets of labels stored as a bitmask, with composite codes
- Scalar enums: one label stored as its code
- Input as label members, label names, or integer codes
- Validation failures returned as values carrying every valid token
- Reflection of the definition and valid values
"""

from .bits import contains, decode, encode
from .catalog import EnumCatalog
from .definitions import EnumType, FlaggableEnum, ScalarEnum, define_enum, define_flag_enum
from .errors import CastError, CastResult
from .kinds import EnumKind
from .registry import EnumRegistry
from .shapes import InputShape, classify
from .version import __version__

__all__ = [
    'CastError',
    'CastResult',
    'EnumCatalog',
    'EnumKind',
    'EnumRegistry',
    'EnumType',
    'FlaggableEnum',
    'InputShape',
    'ScalarEnum',
    'classify',
    'contains',
    'decode',
    'define_enum',
    'define_flag_enum',
    'encode',
    '__version__',
]
