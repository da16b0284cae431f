"""Process-wide barcode policy.

The active policy is one immutable BarcodePolicy snapshot. Updates build a new
snapshot and swap it in under a lock, so a normalization that read the policy
once never sees a partially applied change. Existing Barcode instances are
never re-normalized when the policy changes.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from ..schemas.barcode import Alignment, BarcodePolicy

__all__ = [
    "get_policy",
    "set_policy",
    "reset_policy",
    "override_policy",
    "get_length",
    "set_length",
    "get_alignment",
    "set_alignment",
    "is_padded",
    "set_padded",
    "get_padder",
    "set_padder",
]

_lock = threading.Lock()
_policy = BarcodePolicy()


def get_policy() -> BarcodePolicy:
    with _lock:
        return _policy


def set_policy(policy: BarcodePolicy) -> BarcodePolicy:
    """Install ``policy`` as the process-wide policy and return the previous one."""
    global _policy
    if not isinstance(policy, BarcodePolicy):
        raise TypeError(f"Expected BarcodePolicy, got {type(policy).__name__}")
    with _lock:
        previous = _policy
        _policy = policy
    logging.info(f"Barcode policy changed: {previous!r} -> {policy!r}")
    return previous


def reset_policy() -> BarcodePolicy:
    return set_policy(BarcodePolicy())


def _update(**fields) -> BarcodePolicy:
    global _policy
    with _lock:
        previous = _policy
        # Validation happens before the swap; a bad value leaves the policy untouched
        _policy = previous.with_changes(**fields)
        current = _policy
    logging.info(f"Barcode policy changed: {previous!r} -> {current!r}")
    return current


@contextmanager
def override_policy(**fields) -> Iterator[BarcodePolicy]:
    """Temporarily replace fields of the process-wide policy.

    The previous snapshot is captured and the new one installed under a single
    lock acquisition. On exit the previous snapshot is restored only if the
    override is still the active policy; a policy installed by anyone else
    while the block ran is kept.
    """
    global _policy
    with _lock:
        previous = _policy
        current = previous.with_changes(**fields)
        _policy = current
    logging.info(f"Barcode policy overridden: {previous!r} -> {current!r}")
    try:
        yield current
    finally:
        with _lock:
            restored = _policy is current
            if restored:
                _policy = previous
        if restored:
            logging.info(f"Barcode policy restored: {previous!r}")


def get_length() -> int:
    return get_policy().length


def set_length(length: int) -> None:
    _update(length=length)


def get_alignment() -> Alignment:
    return get_policy().alignment


def set_alignment(alignment: Alignment | str) -> None:
    if isinstance(alignment, str) and not isinstance(alignment, Alignment):
        alignment = alignment.strip().upper()
    _update(alignment=alignment)


def is_padded() -> bool:
    return get_policy().padded


def set_padded(padded: bool) -> None:
    _update(padded=padded)


def get_padder() -> str:
    return get_policy().padder


def set_padder(padder: str) -> None:
    """Set the padding character. Padding is switched on as a side effect."""
    _update(padder=padder, padded=True)
