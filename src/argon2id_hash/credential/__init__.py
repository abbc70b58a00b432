"""Public credential API re-exported for external users.

The objects listed in ``__all__`` form the supported public surface for
Python consumers. Everything else in :mod:`argon2id_hash.credential` is
considered internal and may change without notice.
"""
from __future__ import annotations

from argon2id_hash.credential.api import (
    DEFAULT_SALT_BYTES,
    check_password,
    generate_salt,
    hash_password,
    needs_rehash,
    verify_password,
)
from argon2id_hash.credential.format import (
    ALGORITHM,
    SEGMENT_COUNT,
    Credential,
    format_credential,
    parse_credential,
)

__all__ = [
    "ALGORITHM",
    "Credential",
    "DEFAULT_SALT_BYTES",
    "SEGMENT_COUNT",
    "check_password",
    "format_credential",
    "generate_salt",
    "hash_password",
    "needs_rehash",
    "parse_credential",
    "verify_password",
]
