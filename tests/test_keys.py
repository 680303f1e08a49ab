import unittest

from otpkit import base32
from otpkit.exceptions import InvalidCharset, InvalidLength
from otpkit.keys import ExpiringSecret, Mode, TimeStepSecret, check_secret, parse_secret, random_base32

from tests.helpers import RFC_KEY, RFC_SECRET, FrozenClock


class ModeTest(unittest.TestCase):
    def test_names(self):
        self.assertIs(Mode("TOTP"), Mode.TIME_STEP)
        self.assertIs(Mode("totp"), Mode.TIME_STEP)
        self.assertIs(Mode("OTP"), Mode.EXPIRING)
        self.assertIs(Mode("otp"), Mode.EXPIRING)

    def test_unknown(self):
        self.assertRaises(ValueError, Mode, "hotp")


class RandomBase32Test(unittest.TestCase):
    def test_default(self):
        secret = random_base32()
        self.assertEqual(len(secret), 24)
        self.assertTrue(all(c in base32.ALPHABET for c in secret))

    def test_lengths(self):
        for length in (16, 24, 32, 64):
            secret = random_base32(length)
            self.assertEqual(len(secret), length)
            check_secret(secret)

    def test_invalid_lengths(self):
        for length in (0, 8, 15, 17, 20, 31):
            with self.assertRaises(InvalidLength):
                random_base32(length)

    def test_secrets_differ(self):
        self.assertNotEqual(random_base32(32), random_base32(32))

    def test_expiring_suffix(self):
        secret = random_base32(16, Mode.EXPIRING, clock=FrozenClock(1600000000))
        self.assertEqual(len(secret), 24)
        self.assertEqual(secret[-8:], "5f5e1000")
        check_secret(secret[:-8])

    def test_expiring_mode_by_name(self):
        secret = random_base32(16, "otp", clock=FrozenClock(59))
        self.assertEqual(secret[-8:], "0000003b")


class ParseSecretTest(unittest.TestCase):
    def test_time_step(self):
        credential = parse_secret(RFC_SECRET)
        self.assertEqual(credential, TimeStepSecret(RFC_SECRET))
        self.assertEqual(credential.byte_secret(), RFC_KEY)

    def test_expiring(self):
        credential = parse_secret(RFC_SECRET + "5F5E1000", Mode.EXPIRING)
        self.assertEqual(credential, ExpiringSecret(RFC_SECRET, 1600000000))
        self.assertEqual(credential.byte_secret(), RFC_KEY)
        self.assertEqual(credential.deadline(30), 1600000030)

    def test_time_step_rejects(self):
        self.assertRaises(InvalidLength, parse_secret, "A" * 15)
        self.assertRaises(InvalidLength, parse_secret, "A" * 17)
        self.assertRaises(InvalidCharset, parse_secret, "GEZDGNBVGY3TQOJ1")
        self.assertRaises(InvalidCharset, parse_secret, "GEZDGNBVGY3TQOJ8")

    def test_length_checked_before_charset(self):
        self.assertRaises(InvalidLength, parse_secret, "1" * 15)

    def test_expiring_rejects(self):
        self.assertRaises(InvalidLength, parse_secret, "0000003b", Mode.EXPIRING)
        self.assertRaises(InvalidLength, parse_secret, "A" * 15 + "0000003b", Mode.EXPIRING)
        self.assertRaises(InvalidCharset, parse_secret, "GEZDGNBVGY3TQOJ1" + "0000003b", Mode.EXPIRING)
        self.assertRaises(InvalidCharset, parse_secret, RFC_SECRET + "0000003z", Mode.EXPIRING)
        self.assertRaises(InvalidCharset, parse_secret, RFC_SECRET + "0x00003b", Mode.EXPIRING)
