import hashlib
import hmac
import logging
from typing import Any, Tuple, Union

from .exceptions import InvalidParameter

logger = logging.getLogger(__name__)

DEFAULT_DIGITS = 6
# 10**10 already exceeds 2**31, so more digits would never change the code.
MAX_DIGITS = 10
MAX_COUNTER = 2**64 - 1

SecretType = Union[bytes, bytearray, memoryview]


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret
    """
    if isinstance(i, bool) or not isinstance(i, int):
        raise InvalidParameter("counter", "must be an integer")
    if i < 0 or i > MAX_COUNTER:
        raise InvalidParameter("counter", "must fit in an unsigned 64-bit integer")
    result = bytearray()
    while i != 0:
        result.append(i & 0xFF)
        i >>= 8
    # least significant byte was appended first
    return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))


def dynamic_truncation_offset(mac: bytes) -> int:
    """
    RFC 4226 dynamic truncation: the low nibble of the last MAC byte
    selects where the 4-byte window starts. Always in 0..15.
    """
    return mac[-1] & 0xF


def derive(secret: SecretType, counter: int, digits: int = DEFAULT_DIGITS) -> int:
    """
    Derives the HOTP value for ``counter`` (RFC 4226).

    The result is the raw number; it is not padded to ``digits`` width, so
    callers displaying it must zero-pad (see :func:`otpkit.utils.format_code`).

    :param secret: shared secret, any length, may be empty
    :param counter: unsigned 64-bit moving factor
    :param digits: number of decimal digits to keep, 1 to 10
    :returns: the code, in ``[0, 10**digits)``
    """
    check_digits(digits)
    hasher = hmac.new(bytes(check_secret(secret)), int_to_bytestring(counter), hashlib.sha1)
    hmac_hash = bytearray(hasher.digest())
    offset = dynamic_truncation_offset(hmac_hash)
    # top bit masked off, leaving a non-negative 31-bit value
    code = (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )
    return code % 10**digits


def check_digits(digits: Any) -> int:
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidParameter("digits", "must be an integer")
    if digits < 1 or digits > MAX_DIGITS:
        raise InvalidParameter("digits", "must be between 1 and {}".format(MAX_DIGITS))
    return digits


def check_secret(secret: Any) -> SecretType:
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise InvalidParameter("secret", "must be bytes, decode text keys before use")
    return secret


class OTP(object):
    """
    Base class for OTP entries.

    An entry owns its secret and digit count; subclasses add the moving
    factor (a stored counter or a time interval).
    """

    def __init__(self, secret: SecretType, digits: int = DEFAULT_DIGITS) -> None:
        self.secret = bytes(check_secret(secret))
        self.digits = check_digits(digits)
        if not self.secret:
            logger.warning("%s entry created with an empty secret", type(self).__name__)

    def generate_otp(self, input: int) -> int:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        return derive(self.secret, input, self.digits)

    def code(self) -> int:
        raise NotImplementedError

    def get_current_code(self) -> int:
        return self.code()

    def get_display_value(self) -> int:
        raise NotImplementedError

    def _payload(self) -> Tuple[Any, ...]:
        return (self.secret, self.digits)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore

    # counter entries mutate, so no entry is hashable
    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return "{}(digits={})".format(type(self).__name__, self.digits)
