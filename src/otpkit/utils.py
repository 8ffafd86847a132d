import datetime
import time
from typing import Optional, Union

TimeType = Union[int, float, datetime.datetime]


def timestamp(for_time: Optional[TimeType] = None) -> float:
    """
    Seconds since the Unix epoch for ``for_time``, or for now when omitted.

    Naive datetimes are read as local time, the same way
    :meth:`datetime.datetime.timestamp` reads them.
    """
    if for_time is None:
        return time.time()
    if isinstance(for_time, datetime.datetime):
        return for_time.timestamp()
    return float(for_time)


def key_from_text(text: str) -> bytes:
    """
    Turns a key typed into a form into the raw secret bytes.

    Surrounding whitespace is dropped and the rest is used verbatim as UTF-8;
    no base32 decoding takes place.
    """
    return text.strip().encode("utf-8")


def format_code(code: int, digits: int, separator: str = " ") -> str:
    """
    Zero-pads ``code`` to ``digits`` and groups it in threes from the right.

    >>> format_code(755224, 6)
    '755 224'
    >>> format_code(12345678, 10)
    '0 012 345 678'
    """
    text = str(code).rjust(digits, "0")
    groups = []
    while text:
        groups.insert(0, text[-3:])
        text = text[:-3]
    return separator.join(groups)
