from typing import Sequence

from . import totp as totp
from .compat import SystemRandomReader as SystemRandomReader
from .compat import random
from .config import GenerateOpts as GenerateOpts
from .config import ValidateOpts as ValidateOpts
from .exceptions import InvalidKeyURIError as InvalidKeyURIError
from .exceptions import InvalidPasscodeLengthError as InvalidPasscodeLengthError
from .exceptions import InvalidSecretError as InvalidSecretError
from .exceptions import MissingAccountNameError as MissingAccountNameError
from .exceptions import MissingIssuerError as MissingIssuerError
from .exceptions import OTPError as OTPError
from .exceptions import RandomSourceError as RandomSourceError
from .hotp import HOTP as HOTP
from .key import Key as Key
from .key import parse_uri as parse_uri
from .otp import OTP as OTP
from .otp import Algorithm as Algorithm
from .otp import Digits as Digits


def random_base32(length: int = 32, chars: Sequence[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567") -> str:
    # Note: the otpauth scheme DOES NOT use base32 padding for secret lengths not divisible by 8.
    # Some third-party tools have bugs when dealing with such secrets.
    if length < 32:
        raise ValueError("Secrets should be at least 160 bits")

    return "".join(random.choice(chars) for _ in range(length))
