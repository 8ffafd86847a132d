import math
import numbers
from typing import Any, Optional, Tuple

from .exceptions import InvalidParameter
from .otp import DEFAULT_DIGITS, OTP, SecretType
from .utils import TimeType, timestamp

DEFAULT_INTERVAL = 30.0


class TOTP(OTP):
    """
    Handler for time-based OTP counters.

    Holds no counter of its own: every call recomputes the time step from the
    clock, so a caller that misses ticks is correct again on its next call.
    """

    def __init__(self, secret: SecretType, digits: int = DEFAULT_DIGITS, interval: float = DEFAULT_INTERVAL) -> None:
        """
        :param secret: shared secret as raw bytes
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        """
        if isinstance(interval, bool) or not isinstance(interval, numbers.Real):
            raise InvalidParameter("interval", "must be a number of seconds")
        if not math.isfinite(interval) or interval <= 0:
            raise InvalidParameter("interval", "must be a positive number of seconds")
        self.interval = float(interval)
        super().__init__(secret, digits=digits)

    def timecode(self, for_time: Optional[TimeType] = None) -> int:
        """
        Time step containing ``for_time``: ``floor(t / interval)``.
        """
        return int(math.floor(timestamp(for_time) / self.interval))

    def _elapsed(self, t: float) -> float:
        # measured from the start of timecode(t) so both agree on the window
        elapsed = t - self.timecode(t) * self.interval
        return min(max(elapsed, 0.0), self.interval)

    def at(self, for_time: TimeType) -> int:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time))

    def code(self, for_time: Optional[TimeType] = None) -> int:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(timestamp(for_time))

    def get_display_value(self, for_time: Optional[TimeType] = None) -> int:
        """
        Whole seconds left before the code changes.

        At an exact step boundary the full interval is reported, since a new
        window has just begun.
        """
        remaining = self.interval - self._elapsed(timestamp(for_time))
        # rounds halves up, and never past the interval itself
        return min(int(math.floor(remaining + 0.5)), int(math.floor(self.interval)))

    def progress(self, for_time: Optional[TimeType] = None) -> float:
        """
        Fraction of the countdown ring to fill, in ``(0.0, 1.0]``.

        Reaches 1.0 exactly at a step boundary, when the previous window has
        just run out.
        """
        elapsed = self._elapsed(timestamp(for_time))
        if elapsed == 0.0:
            return 1.0
        return elapsed / self.interval

    def _payload(self) -> Tuple[Any, ...]:
        return (self.secret, self.digits, self.interval)

    def __repr__(self) -> str:
        return "TOTP(digits={}, interval={})".format(self.digits, self.interval)
