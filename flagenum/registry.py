"""Immutable lookup tables derived from one enum definition."""

import logging as log
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple, Type, Union

Definition = Union[Mapping[str, int], Sequence[Tuple[str, int]], Type[Enum]]


def _check_pairs(name: str, pairs: List[Tuple[str, Any]]) -> None:
    """Validate label/code pairs before any table is built."""
    if not pairs:
        raise ValueError(f"Enum '{name}' must define at least one value")

    seen_labels = set()
    seen_codes: Dict[int, str] = {}
    for label, code in pairs:
        if not isinstance(label, str) or not label:
            raise TypeError(f"Enum '{name}' labels must be non-empty strings, got {label!r}")
        if label.startswith('_'):
            raise ValueError(f"Enum '{name}' label '{label}' must not start with an underscore")
        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError(
                f"Enum '{name}' code for '{label}' must be an integer, got {type(code).__name__}"
            )
        if code < 0:
            raise ValueError(f"Enum '{name}' code for '{label}' must be non-negative, got {code}")
        if label in seen_labels:
            raise ValueError(f"Enum '{name}' defines label '{label}' more than once")
        if code in seen_codes:
            raise ValueError(
                f"Enum '{name}' code {code} is used by both '{seen_codes[code]}' and '{label}'"
            )
        seen_labels.add(label)
        seen_codes[code] = label


def _as_pairs(definition: Any) -> List[Tuple[str, Any]]:
    if isinstance(definition, Mapping):
        return list(definition.items())
    if isinstance(definition, (str, bytes)):
        raise TypeError("Enum definition must be a mapping or a sequence of (label, code) pairs")

    pairs = []
    for pair in definition:
        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            raise TypeError(f"Enum definition entries must be (label, code) pairs, got {pair!r}")
        pairs.append((pair[0], pair[1]))
    return pairs


@dataclass(frozen=True, eq=False)
class EnumRegistry:
    """Lookup tables for one enumeration, built once and never mutated.

    Labels are members of ``labels``, an ``enum.Enum`` class. A label's member
    is its symbolic form and the member's name is its textual form.

    Attributes:
        name: Enumeration name, used in error messages
        labels: Enum class whose members are the labels
        definition: (label, code) pairs in definition order
        code_to_label, label_to_code, string_to_label, string_to_code:
            Read-only lookup tables, all in definition order
        valid_values: Every accepted token: codes, then labels, then sorted names
        accepted: valid_values as a set
    """
    name: str
    labels: Type[Enum]
    definition: Tuple[Tuple[Enum, int], ...]
    code_to_label: Mapping[int, Enum] = field(repr=False)
    label_to_code: Mapping[Enum, int] = field(repr=False)
    string_to_label: Mapping[str, Enum] = field(repr=False)
    string_to_code: Mapping[str, int] = field(repr=False)
    valid_values: Tuple[Any, ...] = field(repr=False)
    accepted: FrozenSet[Any] = field(repr=False)

    @classmethod
    def build(cls, name: str, definition: Definition) -> "EnumRegistry":
        """Build a registry from (label, code) pairs, a dict, or an Enum class."""
        if isinstance(definition, type) and issubclass(definition, Enum):
            return cls.from_enum(definition, name)

        pairs = _as_pairs(definition)
        _check_pairs(name, pairs)
        labels = Enum(name, pairs)
        return cls._from_members(name, labels, [(labels[label], code) for label, code in pairs])

    @classmethod
    def from_enum(cls, enum_cls: Type[Enum], name: Optional[str] = None) -> "EnumRegistry":
        """Build a registry whose labels are the members of an existing Enum class.

        Aliases are skipped; member values must be integer codes.
        """
        name = name or enum_cls.__name__
        members = [
            member for key, member in enum_cls.__members__.items()
            if member.name == key
        ]
        _check_pairs(name, [(member.name, member.value) for member in members])
        return cls._from_members(name, enum_cls, [(member, member.value) for member in members])

    @classmethod
    def _from_members(
        cls,
        name: str,
        labels: Type[Enum],
        pairs: List[Tuple[Enum, int]]
    ) -> "EnumRegistry":
        code_to_label = {code: label for label, code in pairs}
        label_to_code = {label: code for label, code in pairs}
        string_to_label = {label.name: label for label, _ in pairs}
        string_to_code = {label.name: code for label, code in pairs}

        valid_values = tuple(
            [code for _, code in pairs]
            + [label for label, _ in pairs]
            + sorted(string_to_label)
        )

        log.debug(f"Built enum registry '{name}' with {len(pairs)} values")

        return cls(
            name=name,
            labels=labels,
            definition=tuple(pairs),
            code_to_label=MappingProxyType(code_to_label),
            label_to_code=MappingProxyType(label_to_code),
            string_to_label=MappingProxyType(string_to_label),
            string_to_code=MappingProxyType(string_to_code),
            valid_values=valid_values,
            accepted=frozenset(valid_values),
        )

    def resolve(self, token: Any) -> Enum:
        """Return the label for a label member, textual form, or exact code.

        Raises KeyError if the token is not defined. Integers are matched
        exactly, never decomposed into bits.
        """
        if isinstance(token, Enum):
            if isinstance(token, self.labels) and token in self.label_to_code:
                return token
            raise KeyError(token)
        if isinstance(token, bool):
            raise KeyError(token)
        if isinstance(token, int):
            return self.code_to_label[token]
        if isinstance(token, str):
            return self.string_to_label[token]
        raise KeyError(token)

    def accepts(self, token: Any) -> bool:
        """Whether ``token`` resolves to a label of this enumeration."""
        try:
            self.resolve(token)
        except KeyError:
            return False
        return True

    def enum_map(self) -> List[Tuple[str, int]]:
        """The definition as (name, code) pairs, in definition order."""
        return [(label.name, code) for label, code in self.definition]
