"""Token metadata model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Attribute:
    """One displayed trait, e.g. Background -> Sunset."""
    trait_type: str
    value: str


@dataclass(frozen=True)
class NpcMetadata:
    """Metadata document served for a token."""

    name: str
    description: str
    image: str
    attributes: tuple[Attribute, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "attributes": [
                {"trait_type": a.trait_type, "value": a.value}
                for a in self.attributes
            ],
            "image": self.image,
        }
