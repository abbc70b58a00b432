"""Custom exceptions for argon2id-hash."""


class Argon2idError(Exception):
    """Base exception for argon2id-hash."""

    code = "argon2id_error"


class PasswordRequired(Argon2idError):
    """No password was provided."""

    code = "password_required"


class SaltRequired(Argon2idError):
    """No salt was provided."""

    code = "salt_required"


class CredentialRequired(Argon2idError):
    """No credential string was provided."""

    code = "credential_required"


class CredentialFormatError(Argon2idError):
    """Credential string does not match the expected format."""

    code = "credential_format"


class InvalidFormat(CredentialFormatError):
    """Credential string does not split into six segments."""

    code = "invalid_format"


class ParseError(CredentialFormatError):
    """A version or cost field is not a valid integer in the expected pattern."""

    code = "parse_error"


class VersionMismatch(CredentialFormatError):
    """Credential was produced by a different Argon2 version."""

    code = "version_mismatch"

    def __init__(self, found: int, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(f"Argon2 version mismatch: got {found}, expected {expected}")


class DecodeError(CredentialFormatError, ValueError):
    """Base64 segment contains invalid characters or has an invalid length."""

    code = "decode_error"


class HashMismatch(Argon2idError):
    """Password does not match the stored hash."""

    code = "hash_mismatch"


class DerivationError(Argon2idError):
    """The derivation primitive rejected its inputs."""

    code = "derivation_error"


class OptionsError(Argon2idError):
    """Derivation options are outside the supported range."""

    code = "invalid_options"
