"""
Protection of OTP keys at rest.

A key is locked by exclusive-ORing it with a mask derived from the user's PIN
and a salt, so the stored value is useless without the PIN. Locking and
unlocking are the same operation.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from . import config
from .exceptions import InvalidKeyLength, MalformedInput
from .utils import hmac_sha1_stream, to_bytes

logger = logging.getLogger(__name__)

MAX_PIN = 0xFFFF  # PIN is fed to the HMAC as a 2 byte field

SaltLike = Union[str, bytes]


def _pin_bytes(pin: int) -> bytes:
    if isinstance(pin, bool) or not isinstance(pin, int):
        raise MalformedInput("pin must be an integer, got {}".format(type(pin).__name__))
    if not 0 <= pin <= MAX_PIN:
        raise MalformedInput("pin must be between 0 and {}".format(MAX_PIN))
    return pin.to_bytes(2, "big")


def default_salt(pin: int) -> bytes:
    """
    Returns ``str(pin * pin)`` followed by the configured salt constant.
    """
    _pin_bytes(pin)
    return (str(pin * pin) + config.settings.salt).encode("utf-8")


def derive_mask(pin: int, salt: SaltLike, length: int) -> bytes:
    """
    Derives a ``length`` byte mask from ``pin`` and ``salt``.

    The first 20 bytes are ``HMAC-SHA1(key=pin as 2 bytes, msg=salt)``. Longer
    masks append ``HMAC-SHA1(pin, salt || i)`` blocks for i = 1, 2, ... with
    ``i`` as a 4 byte big-endian integer.

    :param pin: numeric PIN, 0 to 65535
    :param salt: salt as bytes or UTF-8 text
    :param length: mask length in bytes
    :returns: the mask
    """
    return hmac_sha1_stream(_pin_bytes(pin), to_bytes(salt, "salt", allow_text=True), length)


def lock_key(pin: int, key: bytes, salt: Optional[SaltLike] = None) -> bytes:
    """
    Locks ``key`` with ``pin``.

    :param pin: numeric PIN, normally from generate_pin()
    :param key: raw key, or a locked key to unlock
    :param salt: explicit salt; defaults to default_salt(pin)
    :returns: key XOR mask, same length as ``key``
    """
    key = to_bytes(key, "key")
    if not key:
        raise MalformedInput("key must not be empty")
    if salt is None:
        salt = default_salt(pin)

    mask = derive_mask(pin, salt, len(key))
    if len(mask) != len(key):
        raise InvalidKeyLength("mask is {} bytes but key is {} bytes".format(len(mask), len(key)))

    logger.debug("Applied %d byte PIN mask", len(key))
    return bytes(k ^ m for k, m in zip(key, mask))


def unlock_key(pin: int, locked_key: bytes, salt: Optional[SaltLike] = None) -> bytes:
    """
    Recovers the raw key from ``locked_key``; the inverse of lock_key().
    """
    return lock_key(pin, locked_key, salt)
