"""Data models."""

from .metadata import Attribute, NpcMetadata
from .slot import SlotDefinition, TraitSlot
from .traits import Trait, TraitVector

__all__ = ["Attribute", "NpcMetadata", "SlotDefinition", "TraitSlot", "Trait", "TraitVector"]
