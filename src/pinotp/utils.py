import hashlib
import hmac
import unicodedata
from hmac import compare_digest
from typing import Union

from .exceptions import MalformedInput

SHA1_DIGEST_SIZE = 20


def hmac_sha1(key: bytes, message: bytes) -> bytes:
    """
    Returns the 20 byte HMAC-SHA1 of ``message`` under ``key``.
    """
    return hmac.new(key, message, hashlib.sha1).digest()


def hmac_sha1_stream(key: bytes, message: bytes, length: int) -> bytes:
    """
    Derives ``length`` bytes from HMAC-SHA1 under ``key``.

    The first block is ``HMAC(key, message)``, so any request of up to 20
    bytes is a prefix of a single HMAC. Each further block ``i`` (starting at
    1) is ``HMAC(key, message || i)`` with ``i`` as a 4 byte big-endian
    integer. Blocks are concatenated and cut to ``length``.

    For module-internal use.

    :param key: HMAC key
    :param message: HMAC message shared by every block
    :param length: number of bytes wanted
    :returns: derived bytes
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise MalformedInput("length must be a non-negative integer")

    blocks = [hmac_sha1(key, message)]
    index = 1
    while len(blocks) * SHA1_DIGEST_SIZE < length:
        blocks.append(hmac_sha1(key, message + index.to_bytes(4, "big")))
        index += 1
    return b"".join(blocks)[:length]


def to_bytes(value: Union[bytes, bytearray, memoryview, str], name: str, allow_text: bool = False) -> bytes:
    """
    Coerces a bytes-like argument to ``bytes``.

    With ``allow_text`` a ``str`` is encoded as UTF-8. Anything else raises
    MalformedInput.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if allow_text and isinstance(value, str):
        return value.encode("utf-8")
    raise MalformedInput("{} must be bytes, got {}".format(name, type(value).__name__))


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
