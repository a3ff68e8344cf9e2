"""Asset resolution - maps filtered traits to image layer locators."""

from ..errors import AssetResolutionError
from ..models import TraitSlot, TraitVector
from ..models.items import get_slot_definition
from ..utils import item_name_to_asset_path

ASSET_ROOT = "full"
ASSET_EXTENSION = ".webp"

BASE_LAYER_LOCATOR = f"{ASSET_ROOT}/base_npc/base-npc{ASSET_EXTENSION}"

# Resolvable assets that add nothing to the picture
NO_OP_LOCATORS = frozenset({f"{ASSET_ROOT}/mood/neutral{ASSET_EXTENSION}"})


def resolve_item_name(slot: TraitSlot, value: int) -> str:
    """Display name of the item stored in a slot.

    Raises:
        AssetResolutionError: Value has no entry in the slot's item table
    """
    item_names = get_slot_definition(slot).item_names
    if not 0 <= value < len(item_names):
        raise AssetResolutionError(
            f"{slot.value}={value} is out of range (table has {len(item_names)} items)"
        )
    return item_names[value]


def resolve_asset_locator(slot: TraitSlot, value: int) -> str:
    """Asset locator for one slot value, e.g. "full/torso/suit.webp"."""
    section_dir = get_slot_definition(slot).directory
    item_name = resolve_item_name(slot, value)
    return f"{ASSET_ROOT}{item_name_to_asset_path(section_dir, item_name)}{ASSET_EXTENSION}"


def resolve_asset_locators(traits: TraitVector) -> list[str]:
    """
    Resolve filtered traits to layer locators, in slot order.

    No-op layers (mood "Neutral") are left out. Resolution is all or
    nothing: one unknown value fails the whole list.
    """
    locators = []
    for trait in traits:
        locator = resolve_asset_locator(trait.slot, trait.value)
        if locator not in NO_OP_LOCATORS:
            locators.append(locator)
    return locators
