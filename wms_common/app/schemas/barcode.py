from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, constr

BARCODE_LENGTH = 20

PadChar = constr(min_length=1, max_length=1)


class Alignment(str, Enum):
    """Where the original content sits inside the fixed-width field.

    RIGHT pads on the left, LEFT pads on the right.
    """

    LEFT = "LEFT"
    RIGHT = "RIGHT"


class BarcodePolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int = Field(default=BARCODE_LENGTH, gt=0)
    padded: bool = True
    padder: PadChar = "0"
    alignment: Alignment = Alignment.RIGHT

    def with_changes(self, **fields: Any) -> "BarcodePolicy":
        """Return a validated copy with ``fields`` replaced."""
        data = self.model_dump()
        data.update(fields)
        return BarcodePolicy(**data)
