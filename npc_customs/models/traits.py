"""Trait vector models."""

from dataclasses import dataclass
from typing import Iterator

from .slot import TraitSlot


@dataclass(frozen=True)
class Trait:
    """One slot and its on-chain value."""
    slot: TraitSlot
    value: int


@dataclass(frozen=True)
class TraitVector:
    """Per-token slot values, in slot order.

    Used both for the full vector (one entry per slot) and the filtered one.
    Entries carry their slot, so lookups are always by slot.
    """
    traits: tuple[Trait, ...]

    def __iter__(self) -> Iterator[Trait]:
        return iter(self.traits)

    def __len__(self) -> int:
        return len(self.traits)

    def __contains__(self, slot: TraitSlot) -> bool:
        return any(trait.slot == slot for trait in self.traits)

    def get(self, slot: TraitSlot) -> int | None:
        """Value for slot, or None if the slot is absent."""
        for trait in self.traits:
            if trait.slot == slot:
                return trait.value
        return None

    def slots(self) -> list[TraitSlot]:
        return [trait.slot for trait in self.traits]

    def to_dict(self) -> dict[str, int]:
        """Contract field name -> value."""
        return {trait.slot.value: trait.value for trait in self.traits}
