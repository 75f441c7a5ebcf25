"""Process-wide seed for the object hash function."""

from __future__ import annotations

import os
import threading
import time

_UINT32_MASK = 0xFFFFFFFF

_lock = threading.Lock()
_seed = 0


def _seed_from_urandom():
    try:
        data = os.urandom(4)
    except (OSError, NotImplementedError):
        return None
    if len(data) != 4:
        return None
    return int.from_bytes(data, "big")


def _seed_from_timestamp_and_pid():
    now = time.time_ns()
    seconds, rest = divmod(now, 1_000_000_000)
    microseconds = rest // 1000
    value = (seconds & _UINT32_MASK) ^ microseconds
    return (value ^ os.getpid()) & _UINT32_MASK


def generate_seed():
    """Return a fresh random 32-bit seed that is never zero."""
    value = _seed_from_urandom()
    if value is None:
        value = _seed_from_timestamp_and_pid()
    return value or 1


def object_seed(seed):
    """Set the hash seed once; later calls have no effect.

    A seed of zero asks for a randomly generated one. The value is
    truncated to 32 bits.
    """
    global _seed
    if _seed:
        return
    with _lock:
        if _seed:
            return
        new_seed = int(seed) & _UINT32_MASK
        if new_seed == 0:
            new_seed = generate_seed()
        _seed = new_seed


def current_seed():
    """Return the hash seed, or zero if none has been set yet."""
    return _seed