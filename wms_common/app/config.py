import logging
import os

from .schemas.barcode import BARCODE_LENGTH, BarcodePolicy
from .transport.policy import set_policy

__all__ = [
    "policy_from_env",
    "configure_from_env",
]


def policy_from_env() -> BarcodePolicy:
    """Build a barcode policy from BARCODE_* environment variables.

    - BARCODE_LENGTH: target width (default 20)
    - BARCODE_PADDED: 1/true/yes/on or 0/false/no/off (default true)
    - BARCODE_PAD_CHAR: single padding character (default "0")
    - BARCODE_ALIGNMENT: LEFT or RIGHT (default RIGHT)

    Invalid values raise instead of falling back to defaults.
    """
    return BarcodePolicy(
        length=os.getenv("BARCODE_LENGTH", str(BARCODE_LENGTH)),
        padded=os.getenv("BARCODE_PADDED", "true"),
        padder=os.getenv("BARCODE_PAD_CHAR", "0"),
        alignment=os.getenv("BARCODE_ALIGNMENT", "RIGHT").strip().upper(),
    )


def configure_from_env() -> BarcodePolicy:
    """Install the environment policy as the process-wide policy."""
    policy = policy_from_env()
    set_policy(policy)
    logging.info(f"Barcode policy loaded from environment: {policy!r}")
    return policy
