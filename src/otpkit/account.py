import uuid
from typing import Optional

from .otp import OTP


def _clean_label(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class OtpInfo(object):
    """
    An account as shown in an authenticator list: an issuer and an account
    name wrapped around an :class:`~otpkit.otp.OTP` entry.

    Each instance gets its own identity. Two accounts are equal when they
    share that identity, or when issuer, name and entry all match, so the
    same credential added twice compares equal.
    """

    def __init__(self, entry: OTP, issuer: Optional[str] = None, name: Optional[str] = None) -> None:
        """
        :param entry: the HOTP or TOTP entry producing the codes
        :param issuer: the name of the OTP issuer, blank values become None
        :param name: account name, blank values become None
        """
        self.id = uuid.uuid4()
        self.entry = entry
        self.issuer = _clean_label(issuer)
        self.name = _clean_label(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OtpInfo):
            return NotImplemented
        return self.id == other.id or (
            self.issuer == other.issuer and self.name == other.name and self.entry == other.entry
        )

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return "OtpInfo(issuer={!r}, name={!r}, entry={!r})".format(self.issuer, self.name, self.entry)
