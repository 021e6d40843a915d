"""Seed source for the per-run random generator."""

import random
from pathlib import Path

from .errors import EntropyUnavailableError


RANDOM_DEVICE = Path("/dev/urandom")
SEED_BYTES = 4


def read_seed(device: Path = RANDOM_DEVICE) -> int:
    """Read an unsigned seed from the random device."""

    try:
        with device.open("rb") as f:
            data = f.read(SEED_BYTES)
    except OSError as e:
        raise EntropyUnavailableError(device, "open") from e

    if len(data) != SEED_BYTES:
        raise EntropyUnavailableError(device, "read from")
    return int.from_bytes(data, "little")


def make_rng(device: Path = RANDOM_DEVICE) -> random.Random:
    """Create a generator seeded once from the random device."""

    return random.Random(read_seed(device))
