from typing import Optional

from ..schemas.barcode import BarcodePolicy
from .barcode import Barcode


def parse_barcode(text: str, policy: Optional[BarcodePolicy] = None) -> Barcode:
    """Convert an external string into a Barcode. None raises InvalidArgument."""
    return Barcode.of(text, policy)


def format_barcode(barcode: Optional[Barcode]) -> Optional[str]:
    return str(barcode) if barcode is not None else None
