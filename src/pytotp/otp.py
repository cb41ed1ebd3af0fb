import base64
import binascii
import enum
import hashlib
import hmac
from typing import Any, Callable, Optional, Union

from .exceptions import InvalidSecretError


class Algorithm(enum.Enum):
    """
    HMAC hash functions usable for OTP generation.

    The value is the canonical name used in otpauth URIs.
    """

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    def __str__(self) -> str:
        return self.value

    @property
    def hash(self) -> Callable[..., Any]:
        return getattr(hashlib, self.value.lower())


class Digits(enum.IntEnum):
    """
    Number of digits in a generated passcode.
    """

    SIX = 6
    EIGHT = 8

    def __str__(self) -> str:
        return str(self.value)

    @property
    def length(self) -> int:
        return self.value

    def format(self, code: int) -> str:
        # the modulo drops the high digits, zfill keeps the leading zeros
        return str(code % 10**self.value).zfill(self.value)


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(
        self,
        s: str,
        digits: Union[int, Digits] = Digits.SIX,
        algorithm: Union[str, Algorithm] = Algorithm.SHA1,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
    ) -> None:
        # Digits() and Algorithm() raise ValueError for unsupported values
        self.digits = Digits(digits)
        self.algorithm = Algorithm(algorithm)
        self.secret = s
        self.name = name or "Secret"
        self.issuer = issuer

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        # Implements RFC 4226
        if input < 0:
            raise ValueError("input must be positive integer")
        hasher = hmac.new(self.byte_secret(), self.int_to_bytestring(input), self.algorithm.hash)
        hmac_hash = bytearray(hasher.digest())

        # Dynamic truncation: the low nibble of the last byte picks
        # where the 31-bit code starts.
        offset = hmac_hash[-1] & 0xF
        code = (
            (hmac_hash[offset] & 0x7F) << 24
            | (hmac_hash[offset + 1] & 0xFF) << 16
            | (hmac_hash[offset + 2] & 0xFF) << 8
            | (hmac_hash[offset + 3] & 0xFF)
        )
        return self.digits.format(code)

    def byte_secret(self) -> bytes:
        # Authenticator apps hand out secrets without padding, sometimes lower case
        # and with stray whitespace around them.
        secret = self.secret.strip().upper()
        missing_padding = len(secret) % 8
        if missing_padding != 0:
            secret += "=" * (8 - missing_padding)
        try:
            return base64.b32decode(secret)
        except binascii.Error as exc:
            raise InvalidSecretError() from exc

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        result = bytearray()
        while i != 0:
            result.append(i & 0xFF)
            i >>= 8
        # bytes come out least significant first; HMAC wants big-endian
        return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))
