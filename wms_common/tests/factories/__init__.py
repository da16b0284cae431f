from .barcode import BarcodePolicyFactory

__all__ = [
    "BarcodePolicyFactory",
]
