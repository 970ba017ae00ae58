"""Tests for ScalarEnum cast, dump and load."""

import logging
import pytest
import sys
from enum import IntEnum
from pathlib import Path

# Add parent directory to path to import flagenum
sys.path.insert(0, str(Path(__file__).parent.parent))

from flagenum import CastError, EnumKind, ScalarEnum, define_enum, define_flag_enum


@pytest.fixture(scope="module")
def status():
    return define_enum('StatusEnum', [('registered', 0), ('active', 1), ('inactive', 2), ('archived', 3)])


def test_define_returns_scalar_handle(status):
    assert isinstance(status, ScalarEnum)
    assert status.kind is EnumKind.SCALAR
    assert status.type == 'integer'


def test_reflection(status):
    labels = status.labels
    assert status.enum_map() == [('registered', 0), ('active', 1), ('inactive', 2), ('archived', 3)]
    assert status.valid_values() == [
        0, 1, 2, 3,
        labels.registered, labels.active, labels.inactive, labels.archived,
        'active', 'archived', 'inactive', 'registered',
    ]


def test_cast_each_form(status):
    labels = status.labels
    assert status.cast('active').unwrap() is labels.active
    assert status.cast(3).unwrap() is labels.archived
    assert status.cast(labels.inactive).unwrap() is labels.inactive


@pytest.mark.parametrize('value', ['retroactive', 4, True, None, ['active'], 2.0])
def test_cast_rejects_unknown_values(status, value):
    result = status.cast(value)
    assert not result.ok
    assert result.error.value == value
    assert result.error.token is None


def test_integer_cast_asymmetry():
    """A scalar enum matches integers exactly; a flaggable enum decodes them."""
    scalar = define_enum('ScalarLetters', [('a', 1), ('b', 2), ('c', 4)])
    flags = define_flag_enum('FlagLetters', [('a', 1), ('b', 2), ('c', 4)])

    assert not scalar.cast(3).ok
    assert flags.cast(3).unwrap() == {flags.labels.a, flags.labels.b}


def test_dump(status):
    assert status.dump('inactive').unwrap() == 2
    assert status.dump(status.labels.archived).unwrap() == 3
    assert status.dump(0).unwrap() == 0


def test_dump_rejects_undefined_values(status):
    with pytest.raises(CastError) as exc_info:
        status.dump(5).unwrap()
    assert exc_info.value.value == 5
    assert str(exc_info.value) == (
        "`5` is not a valid enum value for `StatusEnum`. Valid enum values are"
        " `[0, 1, 2, 3, StatusEnum.registered, StatusEnum.active, StatusEnum.inactive,"
        " StatusEnum.archived, 'active', 'archived', 'inactive', 'registered']`."
    )
    assert not status.dump('retroactive').ok


def test_load(status):
    assert status.load(0) is status.labels.registered
    assert status.load(3) is status.labels.archived


def test_load_undefined_code_raises(status):
    with pytest.raises(CastError):
        status.load(4)


def test_dump_then_load_round_trip(status):
    for label in status:
        assert status.load(status.dump(label).unwrap()) is label


def test_existing_int_enum_as_definition():
    class Status(IntEnum):
        REGISTERED = 0
        ACTIVE = 1

    status = define_enum('StatusEnum', Status)
    assert status.labels is Status
    assert status.cast('ACTIVE').unwrap() is Status.ACTIVE
    assert status.cast(Status.REGISTERED).unwrap() is Status.REGISTERED
    assert status.dump(Status.ACTIVE).unwrap() == 1
    assert status.load(1) is Status.ACTIVE


def test_load_undefined_code_is_logged(status, caplog):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(CastError):
            status.load(9)
    assert "Stored value 9 is not defined for enum 'StatusEnum'" in caplog.text
