from enum import IntEnum
from typing import Union

from .exceptions import InvalidDigitCount, MalformedInput
from .utils import SHA1_DIGEST_SIZE, hmac_sha1, to_bytes

MAX_COUNTER = 2**64 - 1


class Digits(IntEnum):
    """
    Supported OTP lengths.
    """

    SIX = 6
    SEVEN = 7
    EIGHT = 8

    @property
    def modulus(self) -> int:
        return 10**self.value

    @classmethod
    def coerce(cls, digits: Union["Digits", int]) -> "Digits":
        if isinstance(digits, bool) or not isinstance(digits, int):
            raise InvalidDigitCount("digits must be 6, 7 or 8, got {!r}".format(digits))
        try:
            return cls(digits)
        except ValueError:
            raise InvalidDigitCount("digits must be 6, 7 or 8, got {!r}".format(digits)) from None


def truncate(digest: bytes, digits: Union[Digits, int]) -> int:
    """
    RFC 4226 dynamic truncation.

    The low nibble of the last digest byte picks an offset; the four bytes
    starting there are read big-endian with the top bit cleared, and the
    resulting 31 bit value is reduced modulo 10^digits.

    :param digest: 20 byte HMAC-SHA1 output
    :param digits: OTP length, one of 6, 7 or 8
    :returns: the OTP as an integer; callers zero-pad for display
    """
    digits = Digits.coerce(digits)
    digest = to_bytes(digest, "digest")
    if len(digest) != SHA1_DIGEST_SIZE:
        raise MalformedInput("digest must be exactly {} bytes".format(SHA1_DIGEST_SIZE))

    offset = digest[-1] & 0xF
    code = int.from_bytes(digest[offset : offset + 4], "big") & 0x7FFFFFFF
    return code % digits.modulus


class OTP(object):
    """
    Base class for OTP handlers working on a raw byte key.
    """

    def __init__(self, key: bytes, digits: Union[Digits, int] = Digits.SIX) -> None:
        self.key = to_bytes(key, "key")
        self.digits = Digits.coerce(digits)

    def generate_code(self, counter: int) -> int:
        """
        :param counter: the HMAC counter value to use as the OTP input
        :returns: the OTP as an integer in [0, 10^digits)
        """
        mac = hmac_sha1(self.key, self.int_to_bytestring(counter))
        return truncate(mac, self.digits)

    def generate_otp(self, counter: int) -> str:
        """
        :param counter: the HMAC counter value to use as the OTP input
        :returns: the OTP zero-padded to ``digits`` characters
        """
        return "{:0{width}d}".format(self.generate_code(counter), width=int(self.digits))

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns a counter into the 8 byte big-endian string fed to the HMAC
        along with the key.
        """
        if isinstance(i, bool) or not isinstance(i, int):
            raise MalformedInput("counter must be an integer, got {}".format(type(i).__name__))
        if i < 0 or i > MAX_COUNTER:
            raise MalformedInput("counter must fit in an unsigned 64 bit integer")
        return i.to_bytes(padding, "big")
