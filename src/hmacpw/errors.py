"""Exception hierarchy for hashing and verification failures."""


class HasherError(Exception):
    """Base class for every error raised by hmacpw."""


class ValidationError(HasherError, ValueError):
    """A caller-supplied argument was rejected before any work was done."""


class EmptyPasswordError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Password cannot be empty")


class EmptySecretKeyError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Secret key cannot be empty")


class EmptyRecordError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Encoded record cannot be empty")


class InvalidTextError(ValidationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is not encodable as UTF-8")
        self.name = name


class InvalidSaltLengthError(ValidationError):
    def __init__(self, salt_length: object, minimum: int) -> None:
        super().__init__(f"Salt length must be an integer >= {minimum}, got {salt_length!r}")
        self.salt_length = salt_length
        self.minimum = minimum


class RandomnessError(HasherError, RuntimeError):
    """The secure random source failed; the call is aborted."""


class FormatError(HasherError, ValueError):
    """An encoded record is structurally unusable."""


class InvalidFormatError(FormatError):
    pass


class UnsupportedAlgorithmError(FormatError):
    def __init__(self, algorithm: str, expected: str) -> None:
        super().__init__(f"Unsupported algorithm {algorithm!r}, expected {expected!r}")
        self.algorithm = algorithm
        self.expected = expected


class DecodeError(FormatError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid base64 in {field} field")
        self.field = field
