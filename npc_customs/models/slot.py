"""Trait slot definitions."""

from dataclasses import dataclass
from enum import Enum


class TraitSlot(Enum):
    """Customization dimensions, in layer-stacking order.

    Values are the field names of the contract's trait struct.
    """
    BACKGROUND = "background"
    MOOD = "mood"
    TORSO = "torso"
    FACE_SLOT_1 = "faceSlot1"
    FACE_SLOT_2 = "faceSlot2"
    PIERCINGS = "piercings"
    EYEWEAR_AND_GLASSES = "eyewearAndGlasses"
    HAIRSTYLE_AND_HATS = "hairstyleAndHats"
    ITEM = "item"


@dataclass(frozen=True)
class SlotDefinition:
    """Static description of one slot."""
    slot: TraitSlot
    label: str                 # Attribute label in metadata
    directory: str             # Asset directory under full/
    item_names: tuple[str, ...]  # Indexed by the on-chain value
