from .barcode import Barcode, normalize_barcode
from .converter import format_barcode, parse_barcode
from .policy import (
    get_alignment,
    get_length,
    get_padder,
    get_policy,
    is_padded,
    override_policy,
    reset_policy,
    set_alignment,
    set_length,
    set_padded,
    set_padder,
    set_policy,
)

__all__ = [
    "Barcode",
    "normalize_barcode",
    "parse_barcode",
    "format_barcode",
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
