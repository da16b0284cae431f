"""Barcodes used to label transport units.

A barcode has a fixed number of characters. Content shorter than that is
aligned left or right and the free positions are filled with a padding
character. Content that already reaches the width is kept as is.
"""
import logging
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ..errors import InvalidArgument
from ..schemas.barcode import Alignment, BarcodePolicy
from .policy import get_policy

__all__ = [
    "Barcode",
    "normalize_barcode",
]


def normalize_barcode(raw: Optional[str], policy: Optional[BarcodePolicy] = None) -> str:
    """Return the canonical form of ``raw`` under ``policy``.

    Without an explicit policy the process-wide snapshot at call time is used.
    Raises InvalidArgument when ``raw`` is None.
    """
    if raw is None:
        raise InvalidArgument()
    if policy is None:
        policy = get_policy()
    if not policy.padded:
        return raw
    if len(raw) >= policy.length:
        # No truncation: over-long values pass through unchanged
        logging.debug(f"Barcode {raw!r} already reaches length {policy.length}")
        return raw
    if policy.alignment == Alignment.RIGHT:
        return raw.rjust(policy.length, policy.padder)
    return raw.ljust(policy.length, policy.padder)


class Barcode:
    """Printable, padded identifier of a transport unit.

    Two barcodes are equal when their canonical values are equal. The value is
    not guaranteed to be unique.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str, policy: Optional[BarcodePolicy] = None) -> None:
        self._value = normalize_barcode(value, policy)

    @classmethod
    def of(cls, value: str, policy: Optional[BarcodePolicy] = None) -> "Barcode":
        return cls(value, policy)

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str, policy: Optional[BarcodePolicy] = None) -> str:
        """Re-normalize ``value`` with the current policy and store it.

        The hash follows the value, so a barcode held in a set or used as a
        dict key can no longer be found there after this call.
        """
        self._value = normalize_barcode(value, policy)
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Barcode({self._value!r})"

    def __eq__(self, other: object) -> object:
        if self is other:
            return True
        if not isinstance(other, Barcode):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.of),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
