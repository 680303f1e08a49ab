import datetime
import logging
from typing import Optional, Union

from . import utils
from .clock import Clock, SystemClock, to_timestamp
from .keys import parse_secret
from .otp import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_PERIOD, OTP, check_period

logger = logging.getLogger(__name__)


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = DEFAULT_DIGITS,
        algorithm: str = DEFAULT_ALGORITHM,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
        interval: int = DEFAULT_PERIOD,
        offset: int = 0,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP, 6 to 8
        :param algorithm: digest used in the HMAC: SHA1, SHA256 or SHA512
        :param name: account name
        :param issuer: issuer
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param offset: seconds added to the current time before the window is
            picked, to make up for clock drift between the two sides
        :param clock: time source for :meth:`now`, defaults to the system clock
        """
        self.credential = parse_secret(s)
        super().__init__(s=s, digits=digits, algorithm=algorithm, name=name, issuer=issuer)
        self.interval = check_period(interval)
        self.offset = int(offset)
        self.clock = clock or SystemClock()

    def at(self, for_time: Union[int, float, datetime.datetime], counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(self.clock.now())

    def verify(self, otp: str, for_time: Optional[Union[int, float, datetime.datetime]] = None) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        Only the window picked by ``offset`` is checked; to accept a
        neighbouring window, verify again with another offset.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = self.clock.now()

        ok = utils.strings_equal(str(otp), str(self.at(for_time)))
        if not ok:
            logger.debug("time-step code mismatch for %s", self.name)
        return ok

    def provisioning_uri(self, name: Optional[str] = None, issuer_name: Optional[str] = None) -> str:
        """
        Returns the provisioning URI for the OTP.  This can then be
        encoded in a QR Code and used to provision an OTP app like
        Google Authenticator.

        :param name: name of the user account
        :param issuer_name: the name of the OTP issuer
        :returns: provisioning URI
        """
        return utils.build_uri(
            name if name else self.name,
            self.secret,
            digits=self.digits,
            period=self.interval,
            issuer=issuer_name if issuer_name else self.issuer,
            algorithm=self.algorithm,
        )

    def timecode(self, for_time: Union[int, float, datetime.datetime]) -> int:
        """
        Window index for a time: ``(timestamp + offset) // interval``.
        """
        counter = (to_timestamp(for_time) + self.offset) // self.interval
        logger.debug("resolved time-step counter %d", counter)
        return counter
