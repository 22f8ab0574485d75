from typing import Union

from . import utils
from .otp import OTP, Digits


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        key: bytes,
        digits: Union[Digits, int] = Digits.SIX,
        initial_count: int = 0,
    ) -> None:
        """
        :param key: raw shared secret
        :param digits: number of integers in the OTP, 6, 7 or 8
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = initial_count
        super().__init__(key=key, digits=digits)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)

    def verify(self, otp: Union[str, int], counter: int) -> bool:
        """
        Verifies the OTP passed in against the OTP for exactly ``counter``.

        Integer codes are zero-padded before comparison. No look-ahead window
        is applied; callers that need one own the counter bookkeeping.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        if isinstance(otp, int):
            otp = "{:0{width}d}".format(otp, width=int(self.digits))
        return utils.strings_equal(str(otp), self.at(counter))


def hotp(key: bytes, counter: int, digits: Union[Digits, int] = Digits.SIX) -> int:
    """
    Computes the RFC 4226 HOTP value of ``key`` at ``counter``.

    :param key: raw shared secret
    :param counter: unsigned 64 bit counter
    :param digits: OTP length, one of 6, 7 or 8
    :returns: the OTP as an integer; callers zero-pad for display
    """
    return OTP(key, digits).generate_code(counter)


def hotp6(key: bytes, counter: int) -> int:
    return hotp(key, counter, Digits.SIX)


def hotp7(key: bytes, counter: int) -> int:
    return hotp(key, counter, Digits.SEVEN)


def hotp8(key: bytes, counter: int) -> int:
    return hotp(key, counter, Digits.EIGHT)
