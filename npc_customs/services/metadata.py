"""Metadata builder - describes a token's equipped traits."""

from ..models import Attribute, NpcMetadata, TraitVector
from ..models.items import get_slot_definition
from .assets import resolve_item_name

NAME_TEMPLATE = "NPC Custom #{token_id}"
DESCRIPTION = "A collection of over 8 billion unique, special and customized NPCs on the Ethereum blockchain."
DEFAULT_IMAGE_URL_TEMPLATE = "https://customsv2.onrender.com/Image?Id={token_id}"


def build_metadata(
    traits: TraitVector,
    token_id,
    image_url_template: str = DEFAULT_IMAGE_URL_TEMPLATE,
    description: str = DESCRIPTION,
) -> NpcMetadata:
    """
    Build the metadata document for a token.

    One attribute per surviving slot, labelled by that slot's own label,
    so dropped slots never shift labels onto other values.

    Raises:
        AssetResolutionError: A value has no entry in its item table
    """
    attributes = tuple(
        Attribute(
            trait_type=get_slot_definition(trait.slot).label,
            value=resolve_item_name(trait.slot, trait.value),
        )
        for trait in traits
    )

    return NpcMetadata(
        name=NAME_TEMPLATE.format(token_id=token_id),
        description=description,
        image=image_url_template.format(token_id=token_id),
        attributes=attributes,
    )
