from otpkit.clock import Expiry, SystemClock

# RFC 4226 / RFC 6238 SHA1 reference key, "12345678901234567890"
RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
RFC_KEY = b"12345678901234567890"


class FrozenClock(object):
    def __init__(self, now):
        self.timestamp = now

    def now(self):
        return self.timestamp

    def elapsed_and_expired(self, reference, deadline):
        return SystemClock().elapsed_and_expired(reference, deadline)


class CountingClock(FrozenClock):
    """Records every expiry question it is asked."""

    def __init__(self, now):
        super().__init__(now)
        self.calls = []

    def elapsed_and_expired(self, reference, deadline):
        self.calls.append((reference, deadline))
        return Expiry(elapsed=reference - deadline, expired=reference >= deadline)
