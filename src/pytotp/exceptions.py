class OTPError(ValueError):
    """
    Base class for errors raised by pytotp.
    """


class InvalidSecretError(OTPError):
    def __init__(self, message: str = "Decoding of secret as base32 failed.") -> None:
        super().__init__(message)


class InvalidPasscodeLengthError(OTPError):
    def __init__(self, message: str = "Input length unexpected") -> None:
        super().__init__(message)


class MissingIssuerError(OTPError):
    def __init__(self, message: str = "Issuer must be set") -> None:
        super().__init__(message)


class MissingAccountNameError(OTPError):
    def __init__(self, message: str = "AccountName must be set") -> None:
        super().__init__(message)


class RandomSourceError(OTPError):
    """
    Raised when the random source fails or returns fewer bytes than requested.
    """


class InvalidKeyURIError(OTPError):
    pass
