"""Key derivation helpers using Argon2id."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from argon2id_hash.errors import DerivationError, OptionsError

logger = logging.getLogger(__name__)

DEFAULT_TIME_COST = 1
DEFAULT_MEM_COST_KIB = 64 * 1024  # 64 MiB
DEFAULT_THREADS = 4
DEFAULT_KEY_LEN = 32

TIME_MIN = 1
THREADS_MIN = 1
THREADS_MAX = 255
KEY_LEN_MIN = 4
# Cost fields are 32-bit unsigned in Argon2.
UINT32_MAX = 2**32 - 1
# Argon2 needs at least 8 KiB of memory per lane.
MEMORY_KIB_PER_THREAD_MIN = 8


@dataclass(frozen=True)
class Options:
    time: int = DEFAULT_TIME_COST
    memory: int = DEFAULT_MEM_COST_KIB
    threads: int = DEFAULT_THREADS
    key_len: int = DEFAULT_KEY_LEN


# Defaults chosen for interactive logins in a web application.
DEFAULT_OPTIONS = Options()


def recommended_options() -> Options:
    """Return recommended default Argon2id options."""

    return DEFAULT_OPTIONS


def resolve_options(
    *,
    time: int | None = None,
    memory: int | None = None,
    threads: int | None = None,
    key_len: int | None = None,
    base: Options | None = None,
) -> Options:
    """Build validated options using overrides when provided."""

    defaults = base or recommended_options()
    candidate = Options(
        time=time if time is not None else defaults.time,
        memory=memory if memory is not None else defaults.memory,
        threads=threads if threads is not None else defaults.threads,
        key_len=key_len if key_len is not None else defaults.key_len,
    )
    return validate_options(candidate)


def validate_options(options: Options) -> Options:
    """Check options against the ranges Argon2id and the credential format accept."""

    if not (TIME_MIN <= options.time <= UINT32_MAX):
        raise OptionsError(f"Argon2 time cost must be between {TIME_MIN} and {UINT32_MAX}")
    if not (THREADS_MIN <= options.threads <= THREADS_MAX):
        raise OptionsError(f"Argon2 threads must be between {THREADS_MIN} and {THREADS_MAX}")
    memory_min = MEMORY_KIB_PER_THREAD_MIN * options.threads
    if not (memory_min <= options.memory <= UINT32_MAX):
        raise OptionsError(
            f"Argon2 memory must be between {memory_min} and {UINT32_MAX} KiB for {options.threads} thread(s)",
        )
    if not (KEY_LEN_MIN <= options.key_len <= UINT32_MAX):
        raise OptionsError(f"Argon2 key length must be between {KEY_LEN_MIN} and {UINT32_MAX} bytes")
    return options


def check_representable(options: Options) -> Options:
    """Reject options a credential string cannot carry back to verification."""

    if options.threads > THREADS_MAX:
        raise OptionsError(f"Argon2 threads must not exceed {THREADS_MAX}, got {options.threads}")
    if options.memory > UINT32_MAX or options.time > UINT32_MAX:
        raise OptionsError(f"Argon2 memory and time cost must not exceed {UINT32_MAX}")
    return options


@runtime_checkable
class DerivationPrimitive(Protocol):
    """Deterministic memory-hard password-to-key function."""

    version: int

    def derive(
        self,
        password: bytes,
        salt: bytes,
        time: int,
        memory: int,
        threads: int,
        key_len: int,
    ) -> bytes:
        ...


@dataclass(frozen=True)
class Argon2idPrimitive:
    """Argon2id backed by the argon2-cffi low-level binding."""

    version: int = ARGON2_VERSION

    def derive(
        self,
        password: bytes,
        salt: bytes,
        time: int,
        memory: int,
        threads: int,
        key_len: int,
    ) -> bytes:
        try:
            return hash_secret_raw(
                secret=password,
                salt=salt,
                time_cost=time,
                memory_cost=memory,
                parallelism=threads,
                hash_len=key_len,
                type=Type.ID,
                version=self.version,
            )
        except (HashingError, OverflowError) as exc:
            logger.debug("argon2id derivation rejected inputs: %s", exc)
            raise DerivationError(str(exc)) from exc


DEFAULT_PRIMITIVE = Argon2idPrimitive()


def derive_key_from_password(
    password: str,
    salt: bytes,
    options: Options = DEFAULT_OPTIONS,
    *,
    kdf: DerivationPrimitive | None = None,
) -> bytes:
    """Derive ``options.key_len`` bytes from password using Argon2id."""

    primitive = kdf or DEFAULT_PRIMITIVE
    return primitive.derive(
        password.encode("utf-8"),
        salt,
        options.time,
        options.memory,
        options.threads,
        options.key_len,
    )
