"""Item name tables and slot definitions for the NPC Customs collection."""

from .slot import SlotDefinition, TraitSlot

# Index 0 of every table except BACKGROUND means "nothing equipped".
BACKGROUND_ITEM_NAMES: tuple[str, ...] = (
    "Blue",
    "Green",
    "Red",
    "Yellow",
    "Purple",
    "Orange",
    "Pink",
    "Grey",
    "Sunset",
    "Night Sky",
)

MOOD_ITEM_NAMES: tuple[str, ...] = (
    "None",
    "Neutral",
    "Happy",
    "Sad",
    "Angry",
    "Surprised",
    "Sleepy",
    "Smug",
    "Crying",
    "Laughing",
)

TORSO_ITEM_NAMES: tuple[str, ...] = (
    "None",
    "White T-Shirt",
    "Black Hoodie",
    "Denim Jacket",
    "Tank Top",
    "Suit",
    "Hawaiian Shirt",
    "Leather Jacket",
    "Sweater",
    "Lab Coat",
)

FACE_SLOT_1_ITEM_NAMES: tuple[str, ...] = (
    "None",
    "Freckles",
    "Blush",
    "Mole",
    "Scar",
    "Face Paint",
    "Band-Aid",
    "Tattoo",
    "Beauty Mark",
)

FACE_SLOT_2_ITEM_NAMES: tuple[str, ...] = (
    "None",
    "Mustache",
    "Beard",
    "Goatee",
    "Stubble",
    "Mutton Chops",
    "Soul Patch",
)

PIERCINGS_ITEM_NAMES: tuple[str, ...] = (
    "None",
    "Nose Ring",
    "Eyebrow Ring",
    "Lip Ring",
    "Septum",
    "Earrings",
    "Gold Hoops",
)

EYEWEAR_GLASSES_ITEM_NAMES: tuple[str, ...] = (
    "None",
    "Sunglasses",
    "Reading Glasses",
    "3D Glasses",
    "Monocle",
    "Eye Patch",
    "VR Headset",
    "Ski Goggles",
)

HAIRSTYLE_HATS_ITEM_NAMES: tuple[str, ...] = (
    "None",
    "Buzz Cut",
    "Mohawk",
    "Ponytail",
    "Afro",
    "Baseball Cap",
    "Beanie",
    "Cowboy Hat",
    "Top Hat",
    "Crown",
)

ITEM_ITEM_NAMES: tuple[str, ...] = (
    "None",
    "Coffee Cup",
    "Skateboard",
    "Sword",
    "Phone",
    "Balloon",
    "Guitar",
    "Pizza Slice",
)


# Declaration order is the layer-stacking and attribute order
SLOT_DEFINITIONS: tuple[SlotDefinition, ...] = (
    SlotDefinition(TraitSlot.BACKGROUND, "Background", "background", BACKGROUND_ITEM_NAMES),
    SlotDefinition(TraitSlot.MOOD, "Mood", "mood", MOOD_ITEM_NAMES),
    SlotDefinition(TraitSlot.TORSO, "Torso", "torso", TORSO_ITEM_NAMES),
    SlotDefinition(TraitSlot.FACE_SLOT_1, "Face Slot #1", "face_slot_1", FACE_SLOT_1_ITEM_NAMES),
    SlotDefinition(TraitSlot.FACE_SLOT_2, "Face Slot #2", "face_slot_2", FACE_SLOT_2_ITEM_NAMES),
    SlotDefinition(TraitSlot.PIERCINGS, "Piercings", "piercings", PIERCINGS_ITEM_NAMES),
    SlotDefinition(TraitSlot.EYEWEAR_AND_GLASSES, "Eyewear & Glasses", "eyewear_and_glasses", EYEWEAR_GLASSES_ITEM_NAMES),
    SlotDefinition(TraitSlot.HAIRSTYLE_AND_HATS, "Hairstyle & Hats", "hairstyle_and_hats", HAIRSTYLE_HATS_ITEM_NAMES),
    SlotDefinition(TraitSlot.ITEM, "Item", "item", ITEM_ITEM_NAMES),
)

_DEFINITIONS_BY_SLOT: dict[TraitSlot, SlotDefinition] = {
    definition.slot: definition for definition in SLOT_DEFINITIONS
}


def get_slot_definitions() -> tuple[SlotDefinition, ...]:
    """Get all slot definitions in declaration order."""
    return SLOT_DEFINITIONS


def get_slot_definition(slot: TraitSlot) -> SlotDefinition:
    """Get the definition for one slot."""
    return _DEFINITIONS_BY_SLOT[slot]
