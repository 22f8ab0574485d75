class PinOTPError(Exception):
    """
    Base class for every error raised by pinotp.
    """


class InvalidDigitCount(PinOTPError, ValueError):
    """
    Raised when an OTP length other than 6, 7 or 8 digits is requested.
    """


class InvalidKeyLength(PinOTPError, ValueError):
    """
    Raised when a key and its PIN-derived mask differ in length.
    """


class MalformedInput(PinOTPError, ValueError):
    """
    Raised for keys, digests, counters, PINs or salts of the wrong type or size.
    """


class EntropySourceUnavailable(PinOTPError, RuntimeError):
    """
    Raised when the operating system cannot supply secure random bytes.
    """
