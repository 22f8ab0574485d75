"""Random material for new keys and PINs."""

from __future__ import annotations

import logging
import random
import secrets
import time
from typing import Optional

from . import config
from .exceptions import EntropySourceUnavailable, MalformedInput
from .utils import hmac_sha1_stream

logger = logging.getLogger(__name__)

KEY_SEED_BYTES = 64
PIN_SEED_BYTES = 12


def random_bytes(n: int) -> bytes:
    """
    Reads ``n`` bytes from the operating system's secure random generator.

    There is no fallback to a weaker source: if the platform cannot deliver,
    EntropySourceUnavailable is raised.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise MalformedInput("byte count must be a non-negative integer")
    if n == 0:
        return b""
    try:
        data = secrets.token_bytes(n)
    except (OSError, NotImplementedError) as exc:
        logger.error("Secure random source failed reading %d bytes", n, exc_info=True)
        raise EntropySourceUnavailable("secure random source unavailable") from exc
    if len(data) != n:
        logger.error("Secure random source returned %d of %d bytes", len(data), n)
        raise EntropySourceUnavailable("short read from secure random source")
    return data


def _time_words() -> bytes:
    # Megaseconds, seconds and microseconds as three 32 bit words
    micros = time.time_ns() // 1000
    seconds, usec = divmod(micros, 1_000_000)
    mega, sec = divmod(seconds, 1_000_000)
    return b"".join(word.to_bytes(4, "big") for word in (mega & 0xFFFFFFFF, sec, usec))


def generate_random_key(length: Optional[int] = None) -> bytes:
    """
    Generates a fresh OTP key.

    64 secure random bytes are run through HMAC-SHA1 keyed with the current
    time. The time only perturbs the output; all of the unpredictability
    comes from random_bytes().

    :param length: key size in bytes; defaults to ``settings.key_length`` (20)
    :returns: the key
    """
    if length is None:
        length = config.settings.key_length
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise MalformedInput("key length must be a positive integer")
    key = hmac_sha1_stream(_time_words(), random_bytes(KEY_SEED_BYTES), length)
    logger.debug("Generated %d byte key", len(key))
    return key


def generate_pin() -> int:
    """
    Generates a 4 digit PIN in [1000, 9999].

    A generator private to this call is seeded from the secure random source,
    so no PRNG state is shared between calls.
    """
    rng = random.Random(int.from_bytes(random_bytes(PIN_SEED_BYTES), "big"))
    lead = rng.randint(1, 9)
    rest = [rng.randrange(10) for _ in range(3)]
    return lead * 1000 + rest[0] * 100 + rest[1] * 10 + rest[2]
