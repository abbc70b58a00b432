"""Hash passwords into credential strings and verify them."""

from __future__ import annotations

import logging
import secrets

from cryptography.hazmat.primitives.constant_time import bytes_eq

from argon2id_hash.credential.format import (
    format_credential,
    parse_credential,
    parse_params,
    parse_version,
    split_credential,
)
from argon2id_hash.crypto.encoding import decode_base64
from argon2id_hash.crypto.kdf import (
    DEFAULT_OPTIONS,
    DEFAULT_PRIMITIVE,
    DerivationPrimitive,
    Options,
    check_representable,
    derive_key_from_password,
)
from argon2id_hash.errors import (
    CredentialRequired,
    HashMismatch,
    PasswordRequired,
    SaltRequired,
    VersionMismatch,
)

logger = logging.getLogger(__name__)

DEFAULT_SALT_BYTES = 16


def generate_salt(nbytes: int = DEFAULT_SALT_BYTES) -> str:
    """Return a random URL-safe salt suitable for :func:`hash_password`."""

    return secrets.token_urlsafe(nbytes)


def hash_password(
    password: str,
    salt: str,
    options: Options = DEFAULT_OPTIONS,
    *,
    kdf: DerivationPrimitive | None = None,
) -> str:
    """Hash ``password`` with ``salt`` and return a credential string.

    The result is deterministic for identical arguments and is meant to be
    stored verbatim and later handed back to :func:`verify_password`.
    """

    if not password:
        raise PasswordRequired("Password must not be empty")
    if not salt:
        raise SaltRequired("Salt must not be empty")

    primitive = kdf or DEFAULT_PRIMITIVE
    check_representable(options)
    salt_bytes = salt.encode("utf-8")
    logger.debug(
        "hashing password (m=%d, t=%d, p=%d, key_len=%d)",
        options.memory,
        options.time,
        options.threads,
        options.key_len,
    )
    hash = derive_key_from_password(password, salt_bytes, options, kdf=primitive)
    return format_credential(primitive.version, options, salt_bytes, hash)


def verify_password(
    password: str,
    credential: str,
    *,
    kdf: DerivationPrimitive | None = None,
) -> None:
    """Check ``password`` against a stored credential string.

    Returns ``None`` on success. Raises :class:`HashMismatch` when the
    password is wrong and a :class:`CredentialFormatError` subclass when the
    credential itself is malformed or from another Argon2 version.
    """

    if not password:
        raise PasswordRequired("Password must not be empty")
    if not credential:
        raise CredentialRequired("Credential must not be empty")

    primitive = kdf or DEFAULT_PRIMITIVE
    segments = split_credential(credential)

    version = parse_version(segments[2])
    if version != primitive.version:
        logger.debug("credential version %d does not match primitive version %d", version, primitive.version)
        raise VersionMismatch(version, primitive.version)

    memory, time, threads = parse_params(segments[3])
    salt = decode_base64(segments[4])
    expected = decode_base64(segments[5])

    stored = Options(time=time, memory=memory, threads=threads, key_len=len(expected))
    control = derive_key_from_password(password, salt, stored, kdf=primitive)
    if not bytes_eq(control, expected):
        logger.debug("password verification failed")
        raise HashMismatch("Password does not match credential")


def check_password(
    password: str,
    credential: str,
    *,
    kdf: DerivationPrimitive | None = None,
) -> bool:
    """Boolean form of :func:`verify_password`.

    Only a wrong password maps to ``False``; malformed credentials and
    missing inputs still raise.
    """

    try:
        verify_password(password, credential, kdf=kdf)
    except HashMismatch:
        return False
    return True


def needs_rehash(
    credential: str,
    options: Options = DEFAULT_OPTIONS,
    *,
    kdf: DerivationPrimitive | None = None,
) -> bool:
    """Return True if ``credential`` was produced with other version or options."""

    primitive = kdf or DEFAULT_PRIMITIVE
    parsed = parse_credential(credential)
    return parsed.version != primitive.version or parsed.options != options
