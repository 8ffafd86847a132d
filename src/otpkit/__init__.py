import logging

from . import utils as utils
from .account import OtpInfo as OtpInfo
from .exceptions import InvalidParameter as InvalidParameter
from .hotp import HOTP as HOTP
from .otp import OTP as OTP
from .otp import derive as derive
from .totp import TOTP as TOTP

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
