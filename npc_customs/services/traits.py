"""Trait normalization and filtering."""

from typing import Any, Mapping

from ..errors import DataFormatError
from ..models import Trait, TraitSlot, TraitVector

TRAIT_FIELD_COUNT = len(TraitSlot)


def normalize_traits(raw: Mapping[str, Any]) -> TraitVector:
    """
    Build a trait vector from a raw contract record.

    Each slot is read from the field named after it, so extra metadata
    fields in the record (token id etc.) are ignored whatever their position.

    Raises:
        DataFormatError: Record too short, slot field missing, or a value
            that is not a non-negative integer
    """
    if len(raw) < TRAIT_FIELD_COUNT:
        raise DataFormatError(
            f"Trait record has {len(raw)} fields, expected at least {TRAIT_FIELD_COUNT}"
        )

    traits = []
    for slot in TraitSlot:
        if slot.value not in raw:
            raise DataFormatError(f"Trait record is missing field '{slot.value}'")
        traits.append(Trait(slot=slot, value=_to_int(raw[slot.value], slot.value)))

    return TraitVector(traits=tuple(traits))


def filter_traits(traits: TraitVector) -> TraitVector:
    """Drop unequipped slots (value 0). Background 0 is a real background and stays."""
    return TraitVector(traits=tuple(
        trait for trait in traits
        if trait.value != 0 or trait.slot == TraitSlot.BACKGROUND
    ))


def _to_int(value: Any, field_name: str) -> int:
    """Coerce a wide on-chain integer (int, decimal or 0x string) to int."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise DataFormatError(f"Field '{field_name}' is not numeric: {value!r}")

    try:
        if isinstance(value, str):
            text = value.strip()
            number = int(text, 16) if text.lower().startswith("0x") else int(text)
        else:
            number = int(value)
    except (TypeError, ValueError):
        raise DataFormatError(f"Field '{field_name}' is not numeric: {value!r}")

    if number < 0:
        raise DataFormatError(f"Field '{field_name}' is negative: {number}")
    return number
