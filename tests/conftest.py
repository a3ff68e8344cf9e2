from pathlib import Path

import pytest
from PIL import Image

from npc_customs.clients.assets import AssetStore
from npc_customs.services.layers import LayerLoader
from npc_customs.services.npc import NpcService

CANVAS = (1000, 1000)

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
YELLOW = (255, 255, 0, 255)
TRANSPARENT = (0, 0, 0, 0)

# Patches drawn by the fixture layers
BASE_BOX = (200, 200, 800, 800)
TORSO_BOX = (400, 600, 600, 1000)
MOOD_BOX = (300, 300, 700, 400)


def make_layer(color, box=None) -> Image.Image:
    """Transparent 1000x1000 layer with `color` over `box` (whole canvas if None)."""
    if box is None:
        return Image.new("RGBA", CANVAS, color)
    img = Image.new("RGBA", CANVAS, TRANSPARENT)
    img.paste(Image.new("RGBA", (box[2] - box[0], box[3] - box[1]), color), box[:2])
    return img


def write_layer(root: Path, locator: str, img: Image.Image):
    # Stored as PNG data under the .webp name; decoding sniffs the content
    path = root / locator
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, format="PNG")


def raw_record(**values) -> dict:
    """Contract record with every slot at 0 unless overridden."""
    record = {
        "tokenId": values.pop("tokenId", 7),
        "background": 0,
        "mood": 0,
        "torso": 0,
        "faceSlot1": 0,
        "faceSlot2": 0,
        "piercings": 0,
        "eyewearAndGlasses": 0,
        "hairstyleAndHats": 0,
        "item": 0,
    }
    record.update(values)
    return record


class FakeContract:
    """Contract stand-in returning a fixed record per token id."""

    def __init__(self, records: dict):
        self.records = records
        self.calls = []

    def token_traits_by_id(self, token_id):
        self.calls.append(token_id)
        return self.records[str(token_id)]


@pytest.fixture
def asset_dir(tmp_path) -> Path:
    """Asset tree with the layers used by the end-to-end tests."""
    write_layer(tmp_path, "full/base_npc/base-npc.webp", make_layer(GREEN, BASE_BOX))
    write_layer(tmp_path, "full/background/red.webp", make_layer(RED))
    write_layer(tmp_path, "full/background/blue.webp", make_layer(BLUE))
    write_layer(tmp_path, "full/torso/suit.webp", make_layer(BLUE, TORSO_BOX))
    write_layer(tmp_path, "full/mood/happy.webp", make_layer(YELLOW, MOOD_BOX))
    write_layer(tmp_path, "full/mood/neutral.webp", make_layer(YELLOW))
    return tmp_path


@pytest.fixture
def loader(asset_dir):
    loader = LayerLoader(AssetStore(str(asset_dir)), max_workers=4, timeout=5)
    yield loader
    loader.close()


@pytest.fixture
def scenario_contract() -> FakeContract:
    """background=2 (Red), torso=5 (Suit), everything else empty."""
    return FakeContract({
        "42": raw_record(tokenId=42, background=2, torso=5),
        "43": raw_record(tokenId=43, background=0, mood=1, torso=5),
        "44": raw_record(tokenId=44, background=2, mood=2),
        "99": raw_record(tokenId=99, background=2, torso=9999),
    })


@pytest.fixture
def service(scenario_contract, loader) -> NpcService:
    return NpcService(scenario_contract, loader, image_url_template="https://example.test/Image?Id={token_id}")
