"""Tests for PIN locking of keys."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from pinotp import (
    InvalidKeyLength,
    MalformedInput,
    Settings,
    default_salt,
    derive_mask,
    keyguard,
    lock_key,
    unlock_key,
)

KEY = bytes.fromhex("3132333435363738393031323334353637383930")


@pytest.fixture
def salt_setting(monkeypatch):
    def _set(salt: str) -> None:
        monkeypatch.setattr("pinotp.config.settings", Settings(_env_file=None, salt=salt))

    _set("")
    return _set


def test_default_salt(salt_setting):
    assert default_salt(1234) == b"1522756"
    salt_setting("pepper")
    assert default_salt(1234) == b"1522756pepper"


def test_lock_matches_single_hmac(salt_setting):
    mask = hmac.new((4321).to_bytes(2, "big"), b"18671041", hashlib.sha1).digest()
    expected = bytes(k ^ m for k, m in zip(KEY, mask))
    assert lock_key(4321, KEY) == expected


def test_lock_unlock_round_trip(salt_setting):
    locked = lock_key(4321, KEY)
    assert locked != KEY
    assert len(locked) == len(KEY)
    assert unlock_key(4321, locked) == KEY


def test_wrong_pin_does_not_unlock(salt_setting):
    locked = lock_key(4321, KEY)
    assert unlock_key(4322, locked) != KEY


def test_configured_salt_changes_mask(salt_setting):
    plain = lock_key(4321, KEY)
    salt_setting("deployment-a")
    salted = lock_key(4321, KEY)
    assert salted != plain
    assert unlock_key(4321, salted) == KEY


def test_explicit_salt_text_and_bytes_agree():
    assert lock_key(1000, KEY, "abc") == lock_key(1000, KEY, b"abc")
    assert unlock_key(1000, lock_key(1000, KEY, "abc"), "abc") == KEY


def test_short_key_uses_mask_prefix():
    short = KEY[:7]
    mask = derive_mask(5555, b"salt", 20)
    assert lock_key(5555, short, b"salt") == bytes(k ^ m for k, m in zip(short, mask))


def test_long_key_round_trip():
    long_key = bytes(range(64))
    locked = lock_key(9876, long_key, b"salt")
    assert len(locked) == 64
    assert unlock_key(9876, locked, b"salt") == long_key


def test_long_mask_extends_first_block():
    pin = (9876).to_bytes(2, "big")
    mask = derive_mask(9876, b"salt", 45)
    assert mask[:20] == hmac.new(pin, b"salt", hashlib.sha1).digest()
    assert mask[20:40] == hmac.new(pin, b"salt\x00\x00\x00\x01", hashlib.sha1).digest()
    assert mask[40:] == hmac.new(pin, b"salt\x00\x00\x00\x02", hashlib.sha1).digest()[:5]


def test_long_key_tail_is_masked():
    long_key = bytes(40)
    locked = lock_key(9876, long_key, b"salt")
    assert locked[20:] != bytes(20)


def test_empty_key_rejected():
    with pytest.raises(MalformedInput):
        lock_key(1234, b"", b"salt")


@pytest.mark.parametrize("pin", [-1, 65536, "1234", 12.0, None])
def test_bad_pin_rejected(pin):
    with pytest.raises(MalformedInput):
        lock_key(pin, KEY, b"salt")


def test_bad_salt_rejected():
    with pytest.raises(MalformedInput):
        lock_key(1234, KEY, 42)


def test_mask_length_mismatch(monkeypatch):
    monkeypatch.setattr(keyguard, "derive_mask", lambda pin, salt, length: bytes(length - 1))
    with pytest.raises(InvalidKeyLength):
        lock_key(1234, KEY, b"salt")


@pytest.mark.parametrize("length", [2.5, True, -1, "20", None])
def test_derive_mask_rejects_length(length):
    with pytest.raises(MalformedInput):
        derive_mask(1234, b"salt", length)


@pytest.mark.parametrize("pin", [0, 1, 999, 1000, 9999, 10000, 65534, 65535])
def test_round_trip_across_pin_field(pin, salt_setting):
    locked = lock_key(pin, KEY)
    assert unlock_key(pin, locked) == KEY
    assert unlock_key(pin, lock_key(pin, KEY[:5], b"salt"), b"salt") == KEY[:5]


def test_round_trip_pin_sweep():
    long_key = bytes(range(33))
    for pin in range(0, 65536, 97):
        assert unlock_key(pin, lock_key(pin, long_key, b"salt"), b"salt") == long_key
