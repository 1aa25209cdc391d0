import dataclasses

import pytest

from pwkit.keys import PckKey


def test_default_keys():
    key = PckKey()
    assert key.key_1 == -1466731422
    assert key.key_2 == -240896429


def test_default_signatures():
    key = PckKey()
    assert (key.asig_1, key.asig_2) == (-33685778, -267534609)
    assert (key.fsig_1, key.fsig_2) == (1305093103, 1453361591)


def test_custom_keys_keep_default_signatures():
    key = PckKey(1, 2)
    assert (key.key_1, key.key_2) == (1, 2)
    assert key.asig_1 == PckKey().asig_1


def test_keys_are_immutable():
    key = PckKey()
    with pytest.raises(dataclasses.FrozenInstanceError):
        key.key_1 = 0
    assert key.key_1 == -1466731422


def test_keys_compare_by_value():
    assert PckKey(1, 2, 3, 4, 5, 6) == PckKey(1, 2, 3, 4, 5, 6)
    assert PckKey(1, 2) != PckKey()