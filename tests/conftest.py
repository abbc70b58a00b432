import hashlib
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if SRC_DIR.exists():
    sys.path.insert(0, str(SRC_DIR))

from argon2id_hash.crypto.kdf import Options  # noqa: E402

# password:salt hashed with the default options
KNOWN_CREDENTIAL = "$argon2id$v=19$m=65536,t=1,p=4$c2FsdA$OWwmnKFemKE2ILjM60j1so1oRXDFJYqvOiYlZTByvuU"
KNOWN_RAW_HASH = bytes.fromhex("396c269ca15e98a13620b8cceb48f5b28d684570c5258aaf3a2625653072bee5")

# Cheap parameters for tests that run the real primitive.
FAST_OPTIONS = Options(time=1, memory=64, threads=1, key_len=32)


class RecordedPrimitive:
    """Replays the Argon2id output for ``password``/``salt`` with default options.

    The C reference implementation rejects salts shorter than eight bytes, so
    the four-byte ``salt`` vector is served from a recording. Any other input
    gets a deterministic SHAKE-256 digest.
    """

    version = 19

    def __init__(self) -> None:
        self.calls: list[tuple[bytes, bytes, int, int, int, int]] = []

    def derive(self, password: bytes, salt: bytes, time: int, memory: int, threads: int, key_len: int) -> bytes:
        call = (password, salt, time, memory, threads, key_len)
        self.calls.append(call)
        if call == (b"password", b"salt", 1, 65536, 4, 32):
            return KNOWN_RAW_HASH
        material = b"|".join([password, salt, str((time, memory, threads)).encode()])
        return hashlib.shake_256(material).digest(key_len)


@pytest.fixture
def recorded_kdf() -> RecordedPrimitive:
    return RecordedPrimitive()
