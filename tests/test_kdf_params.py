from __future__ import annotations

import pytest

from argon2id_hash.crypto.kdf import (
    DEFAULT_OPTIONS,
    DEFAULT_PRIMITIVE,
    THREADS_MAX,
    Argon2idPrimitive,
    DerivationPrimitive,
    Options,
    derive_key_from_password,
    recommended_options,
    resolve_options,
)
from argon2id_hash.errors import DerivationError, OptionsError

from conftest import FAST_OPTIONS


def test_default_options_values() -> None:
    assert DEFAULT_OPTIONS == Options(time=1, memory=65536, threads=4, key_len=32)
    assert recommended_options() is DEFAULT_OPTIONS


def test_options_are_immutable() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_OPTIONS.time = 5  # type: ignore[misc]


def test_resolve_options_applies_overrides() -> None:
    options = resolve_options(time=3, threads=2)
    assert options == Options(time=3, memory=DEFAULT_OPTIONS.memory, threads=2, key_len=DEFAULT_OPTIONS.key_len)


def test_resolve_options_uses_base() -> None:
    options = resolve_options(key_len=16, base=FAST_OPTIONS)
    assert options == Options(time=1, memory=64, threads=1, key_len=16)


@pytest.mark.parametrize(
    "overrides",
    [
        {"time": 0},
        {"threads": 0},
        {"threads": THREADS_MAX + 1},
        {"memory": 31, "threads": 4},
        {"key_len": 3},
        {"time": 2**32},
        {"memory": 99999999999},
        {"key_len": 2**32},
    ],
)
def test_resolve_options_rejects_out_of_range(overrides: dict[str, int]) -> None:
    with pytest.raises(OptionsError):
        resolve_options(**overrides)


def test_default_primitive_reports_version_19() -> None:
    assert DEFAULT_PRIMITIVE.version == 19
    assert isinstance(DEFAULT_PRIMITIVE, DerivationPrimitive)


def test_argon2id_known_answer() -> None:
    # Argon2id reference test vector: password/somesalt, t=2, m=2^16, p=1.
    raw = Argon2idPrimitive().derive(b"password", b"somesalt", 2, 65536, 1, 32)
    assert raw.hex() == "09316115d5cf24ed5a15a31a3ba326e5cf32edc24702987c02b6566f61913cf7"


def test_derive_key_from_password_honours_key_len() -> None:
    options = Options(time=1, memory=64, threads=1, key_len=48)
    key = derive_key_from_password("pw", b"somesalt", options)
    assert len(key) == 48
    assert key == derive_key_from_password("pw", b"somesalt", options)


def test_derive_key_from_password_uses_injected_kdf(recorded_kdf) -> None:
    derive_key_from_password("pw", b"salt", FAST_OPTIONS, kdf=recorded_kdf)
    assert recorded_kdf.calls == [(b"pw", b"salt", 1, 64, 1, 32)]


def test_short_salt_rejected_by_primitive() -> None:
    with pytest.raises(DerivationError):
        Argon2idPrimitive().derive(b"password", b"salt", 1, 64, 1, 32)


def test_oversized_cost_from_primitive_is_derivation_error() -> None:
    with pytest.raises(DerivationError):
        Argon2idPrimitive().derive(b"password", b"somesalt", 1, 2**32, 1, 32)
