import logging
import threading
from typing import Any, Tuple

from .otp import DEFAULT_DIGITS, MAX_COUNTER, OTP, SecretType, int_to_bytestring

logger = logging.getLogger(__name__)


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(self, secret: SecretType, digits: int = DEFAULT_DIGITS, counter: int = 0) -> None:
        """
        :param secret: shared secret as raw bytes
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param counter: the next HMAC counter value to use, defaults to 0
        """
        super().__init__(secret, digits=digits)
        # validates the range up front rather than on the first code()
        int_to_bytestring(counter)
        self._counter = counter
        # set once the code for MAX_COUNTER has been handed out
        self._exhausted = False
        self._lock = threading.Lock()

    @property
    def counter(self) -> int:
        return self._counter

    def at(self, count: int) -> int:
        """
        Generates the OTP for the given count without touching the stored counter.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(count)

    def code(self) -> int:
        """
        Generates the OTP for the stored counter and advances it by one.

        The code for 2**64 - 1 is still returned, but the counter cannot move
        past it, so the entry stays at that value and refuses further codes.

        :returns: OTP
        :raises OverflowError: when the code for 2**64 - 1 was already used
        """
        with self._lock:
            if self._exhausted:
                raise OverflowError("HOTP counter exhausted")
            counter = self._counter
            otp = self.generate_otp(counter)
            if counter == MAX_COUNTER:
                self._exhausted = True
                logger.debug("HOTP counter exhausted at %d", counter)
                return otp
            self._counter = counter + 1
        logger.debug("HOTP counter advanced to %d", counter + 1)
        return otp

    def get_display_value(self) -> int:
        return self._counter

    def _payload(self) -> Tuple[Any, ...]:
        return (self.secret, self.digits, self._counter, self._exhausted)

    def __repr__(self) -> str:
        return "HOTP(digits={}, counter={})".format(self.digits, self._counter)
