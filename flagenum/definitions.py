"""Enum definitions: one codec handle per defined enumeration."""

import logging as log
from enum import Enum
from typing import Any, FrozenSet, Iterator, List, Tuple

from . import bits
from .errors import CastError, CastResult
from .kinds import EnumKind
from .registry import Definition, EnumRegistry
from .shapes import InputShape, classify


class EnumType:
    """Base class for enum codecs bound to one EnumRegistry.

    Subclasses implement cast, dump and load for their storage semantics.
    """

    kind: EnumKind = None

    # Storage column type
    type = "integer"

    def __init__(self, registry: EnumRegistry):
        self.registry = registry

    @property
    def name(self) -> str:
        return self.registry.name

    @property
    def labels(self):
        """The Enum class whose members are this enumeration's labels."""
        return self.registry.labels

    def __getitem__(self, name: str) -> Enum:
        """Look up a label by its textual form: handle['poisonous']"""
        return self.registry.string_to_label[name]

    def __iter__(self) -> Iterator[Enum]:
        return iter(label for label, _ in self.registry.definition)

    def __len__(self) -> int:
        return len(self.registry.definition)

    def __repr__(self) -> str:
        return f"<{self.kind.display_name} {self.name}>"

    # Reflection
    def enum_map(self) -> List[Tuple[str, int]]:
        return self.registry.enum_map()

    def valid_values(self) -> List[Any]:
        return list(self.registry.valid_values)

    def cast(self, value: Any) -> CastResult:
        """Normalize external input into this enum's in-memory value."""
        raise NotImplementedError

    def dump(self, value: Any) -> CastResult:
        """Convert a value into the integer to store."""
        raise NotImplementedError

    def load(self, code: int) -> Any:
        """Convert a stored integer back into the in-memory value."""
        raise NotImplementedError

    def _invalid(self, value: Any, token: Any = None) -> CastResult:
        log.debug(f"Rejected {value!r} for enum '{self.name}'")
        return CastResult.failure(CastError(
            value,
            self.registry.valid_values,
            token=token,
            enum_name=self.name,
            accepts_sums=self.kind.accepts_sums,
        ))


class FlaggableEnum(EnumType):
    """A set of flags stored as the bitwise OR of their codes.

    Integers are trusted: they are decoded by bit containment and never
    checked against the defined codes. Labels, names and integer tokens inside
    a collection must each match a defined value exactly.
    """

    kind = EnumKind.FLAGS

    def cast(self, value: Any) -> CastResult:
        shape = classify(value)

        if shape is InputShape.INTEGER:
            return CastResult.success(bits.decode(self.registry.code_to_label, value))

        if shape is InputShape.COLLECTION:
            labels = set()
            for token in value:
                try:
                    labels.add(self.registry.resolve(token))
                except KeyError:
                    return self._invalid(value, token)
            return CastResult.success(frozenset(labels))

        # Single labels and names must be wrapped in a collection
        return self._invalid(value)

    def dump(self, value: Any) -> CastResult:
        shape = classify(value)

        if shape is InputShape.INTEGER:
            return CastResult.success(value)

        if shape is InputShape.COLLECTION:
            result = self.cast(value)
            if not result.ok:
                return result
            return CastResult.success(bits.encode(result.value, self.registry.label_to_code))

        return self._invalid(value)

    def load(self, code: int) -> FrozenSet[Enum]:
        if classify(code) is not InputShape.INTEGER:
            raise TypeError(f"Enum '{self.name}' loads integers, got {type(code).__name__}")
        return bits.decode(self.registry.code_to_label, code)


class ScalarEnum(EnumType):
    """A single value stored as its code. Integers must be defined codes."""

    kind = EnumKind.SCALAR

    def cast(self, value: Any) -> CastResult:
        if not self.registry.accepts(value):
            return self._invalid(value)
        return CastResult.success(self.registry.resolve(value))

    def dump(self, value: Any) -> CastResult:
        result = self.cast(value)
        if not result.ok:
            return result
        return CastResult.success(self.registry.label_to_code[result.value])

    def load(self, code: int) -> Enum:
        if classify(code) is InputShape.INTEGER and code in self.registry.code_to_label:
            return self.registry.code_to_label[code]
        log.warning(f"Stored value {code!r} is not defined for enum '{self.name}'")
        raise CastError(code, self.registry.valid_values, enum_name=self.name)


def define_flag_enum(name: str, definition: Definition) -> FlaggableEnum:
    """Define a flaggable enum from (label, code) pairs, a dict, or an Enum class.

        Properties = define_flag_enum('PropertiesEnum', [
            ('poisonous', 1), ('explosive', 2), ('radioactive', 4),
            ('dangerous', 7), ('packaged', 8),
        ])
    """
    return FlaggableEnum(EnumRegistry.build(name, definition))


def define_enum(name: str, definition: Definition) -> ScalarEnum:
    """Define a single-valued enum from (label, code) pairs, a dict, or an Enum class."""
    return ScalarEnum(EnumRegistry.build(name, definition))
