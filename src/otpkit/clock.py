import calendar
import datetime
import time
from typing import NamedTuple, Protocol, Union

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class Expiry(NamedTuple):
    # seconds from deadline to reference; negative while the deadline is ahead
    elapsed: int
    expired: bool


class Clock(Protocol):
    """
    Time collaborator consulted by expiring secrets.

    Anything with these two methods can be passed as ``clock=``; tests use a
    frozen one.
    """

    def now(self) -> int:
        ...

    def elapsed_and_expired(self, reference: int, deadline: int) -> Expiry:
        ...


class SystemClock(object):
    """
    Wall-clock implementation of :class:`Clock`, in whole UTC epoch seconds.
    """

    def now(self) -> int:
        return int(time.time())

    def elapsed_and_expired(self, reference: int, deadline: int) -> Expiry:
        elapsed = int(reference) - int(deadline)
        return Expiry(elapsed=elapsed, expired=elapsed >= 0)

    @staticmethod
    def format(timestamp: int) -> str:
        return datetime.datetime.fromtimestamp(timestamp, datetime.timezone.utc).strftime(TIME_FORMAT)

    @staticmethod
    def parse(text: str) -> int:
        parsed = datetime.datetime.strptime(text, TIME_FORMAT)
        return calendar.timegm(parsed.timetuple())


def to_timestamp(for_time: Union[int, float, datetime.datetime]) -> int:
    """
    Converts an epoch number or a datetime into whole epoch seconds.

    Naive datetimes are read as local time, aware ones are converted.
    """
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo:
            return calendar.timegm(for_time.utctimetuple())
        return int(time.mktime(for_time.timetuple()))
    return int(for_time)
