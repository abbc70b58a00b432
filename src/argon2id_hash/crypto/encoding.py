"""URL-safe, unpadded base64 helpers for credential segments."""

from __future__ import annotations

import base64
import binascii
import re

from argon2id_hash.errors import DecodeError

_ALPHABET_RE = re.compile(r"[A-Za-z0-9_-]*")


def encode_to_base64(data: bytes) -> str:
    """Encode bytes as URL-safe base64 without ``=`` padding."""

    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode_base64(text: str) -> bytes:
    """Decode URL-safe base64 produced by :func:`encode_to_base64`.

    Padding characters are rejected, as are characters from the standard
    alphabet (``+`` and ``/``) and lengths that no unpadded encoding can have.
    """

    if not _ALPHABET_RE.fullmatch(text):
        raise DecodeError("Base64 segment contains invalid characters")
    if len(text) % 4 == 1:
        raise DecodeError(f"Base64 segment has invalid length {len(text)}")

    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, ValueError) as exc:  # pragma: no cover - guarded above
        raise DecodeError("Base64 segment could not be decoded") from exc
