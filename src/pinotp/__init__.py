import logging

from .config import Settings as Settings
from .config import settings as settings
from .entropy import generate_pin as generate_pin
from .entropy import generate_random_key as generate_random_key
from .entropy import random_bytes as random_bytes
from .exceptions import EntropySourceUnavailable as EntropySourceUnavailable
from .exceptions import InvalidDigitCount as InvalidDigitCount
from .exceptions import InvalidKeyLength as InvalidKeyLength
from .exceptions import MalformedInput as MalformedInput
from .exceptions import PinOTPError as PinOTPError
from .hotp import HOTP as HOTP
from .hotp import hotp as hotp
from .hotp import hotp6 as hotp6
from .hotp import hotp7 as hotp7
from .hotp import hotp8 as hotp8
from .keyguard import default_salt as default_salt
from .keyguard import derive_mask as derive_mask
from .keyguard import lock_key as lock_key
from .keyguard import unlock_key as unlock_key
from .otp import OTP as OTP
from .otp import Digits as Digits
from .otp import truncate as truncate
from .record import TokenRecord as TokenRecord

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
