"""Credential string format helpers.

A credential string has the form::

    $argon2id$v=19$m=65536,t=1,p=4$<salt>$<hash>

Splitting it on ``$`` yields exactly six segments, the first of which is
empty. The salt and hash segments use URL-safe base64 without padding. The
key length is not stored; it is the decoded length of the hash segment.
"""

from __future__ import annotations

from dataclasses import dataclass

from argon2id_hash.crypto.encoding import decode_base64, encode_to_base64
from argon2id_hash.crypto.kdf import THREADS_MAX, UINT32_MAX, Options
from argon2id_hash.errors import InvalidFormat, ParseError

ALGORITHM = "argon2id"
SEPARATOR = "$"
SEGMENT_COUNT = 6
PARAM_KEYS = ("m", "t", "p")

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Credential:
    version: int
    memory: int
    time: int
    threads: int
    salt: bytes
    hash: bytes

    @property
    def key_len(self) -> int:
        return len(self.hash)

    @property
    def options(self) -> Options:
        return Options(time=self.time, memory=self.memory, threads=self.threads, key_len=self.key_len)

    def encode(self) -> str:
        return format_credential(self.version, self.options, self.salt, self.hash)


def format_credential(version: int, options: Options, salt: bytes, hash: bytes) -> str:
    """Serialize derivation parameters, salt and hash into a credential string."""

    return (
        f"{SEPARATOR}{ALGORITHM}"
        f"{SEPARATOR}v={version}"
        f"{SEPARATOR}m={options.memory},t={options.time},p={options.threads}"
        f"{SEPARATOR}{encode_to_base64(salt)}"
        f"{SEPARATOR}{encode_to_base64(hash)}"
    )


def split_credential(text: str) -> list[str]:
    segments = text.split(SEPARATOR)
    if len(segments) != SEGMENT_COUNT:
        raise InvalidFormat(
            f"Credential must have {SEGMENT_COUNT} '{SEPARATOR}'-separated segments, got {len(segments)}",
        )
    return segments


def _parse_uint(value: str, field: str) -> int:
    if not value or not _DIGITS.issuperset(value):
        raise ParseError(f"Field {field!r} must be an unsigned integer, got {value!r}")
    return int(value)


def _parse_pair(token: str, key: str) -> int:
    name, sep, value = token.partition("=")
    if not sep or name != key:
        raise ParseError(f"Expected '{key}=<int>', got {token!r}")
    return _parse_uint(value, key)


def parse_version(segment: str) -> int:
    """Parse a ``v=<int>`` segment."""

    return _parse_pair(segment, "v")


def parse_params(segment: str) -> tuple[int, int, int]:
    """Parse an ``m=<int>,t=<int>,p=<int>`` segment into (memory, time, threads)."""

    tokens = segment.split(",")
    if len(tokens) != len(PARAM_KEYS):
        raise ParseError(f"Expected parameters 'm=<int>,t=<int>,p=<int>', got {segment!r}")
    memory, time, threads = (_parse_pair(token, key) for token, key in zip(tokens, PARAM_KEYS))
    for key, value in (("m", memory), ("t", time)):
        if value > UINT32_MAX:
            raise ParseError(f"Field {key!r} must not exceed {UINT32_MAX}, got {value}")
    if threads > THREADS_MAX:
        raise ParseError(f"Field 'p' must not exceed {THREADS_MAX}, got {threads}")
    return memory, time, threads


def parse_credential(text: str) -> Credential:
    """Tokenize and decode a credential string.

    The version number is parsed but not compared against any primitive;
    that check belongs to verification.
    """

    segments = split_credential(text)
    version = parse_version(segments[2])
    memory, time, threads = parse_params(segments[3])
    salt = decode_base64(segments[4])
    hash = decode_base64(segments[5])
    return Credential(
        version=version,
        memory=memory,
        time=time,
        threads=threads,
        salt=salt,
        hash=hash,
    )
