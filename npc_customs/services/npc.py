"""NPC service - orchestrates trait lookup, metadata and image generation."""

import logging
from functools import cache

from ..clients.assets import AssetStore
from ..clients.contract import ContractClient
from ..config import (
    ASSET_TIMEOUT,
    ASSETS_BASE,
    CONTRACT_ADDRESS,
    IMAGE_URL_TEMPLATE,
    LAYER_WORKERS,
    RPC_TIMEOUT,
    RPC_URL,
)
from ..models import NpcMetadata, TraitVector
from .assets import resolve_asset_locators
from .compositor import composite_layers
from .layers import LayerLoader
from .metadata import DEFAULT_IMAGE_URL_TEMPLATE, build_metadata
from .traits import filter_traits, normalize_traits

logger = logging.getLogger(__name__)


class NpcService:
    """Serve metadata and composited images for NPC tokens."""

    def __init__(
        self,
        contract: ContractClient,
        loader: LayerLoader,
        image_url_template: str = DEFAULT_IMAGE_URL_TEMPLATE,
    ):
        self.contract = contract
        self.loader = loader
        self.image_url_template = image_url_template

    def get_traits(self, token_id) -> TraitVector:
        """Read and normalize a token's traits from the contract."""
        raw = self.contract.token_traits_by_id(token_id)
        traits = normalize_traits(raw)
        logger.debug(f"Token {token_id} traits: {traits.to_dict()}")
        return traits

    def build_image(self, token_id) -> bytes:
        """
        Build the composited PNG for a token.

        1. Read traits and drop unequipped slots
        2. Resolve the remaining slots to layer locators
        3. Load the base template and the layers in one concurrent batch
        4. Composite
        """
        traits = filter_traits(self.get_traits(token_id))
        locators = resolve_asset_locators(traits)
        logger.info(f"Token {token_id}: compositing {len(locators)} layers")

        base, layers = self.loader.load_with_base(locators)
        return composite_layers(layers, base)

    def build_metadata(self, token_id) -> NpcMetadata:
        """Build the metadata document for a token."""
        traits = filter_traits(self.get_traits(token_id))
        return build_metadata(traits, token_id, image_url_template=self.image_url_template)


@cache
def create_npc_service() -> NpcService:
    """Wire the process-wide NpcService from configuration."""
    contract = ContractClient(RPC_URL, CONTRACT_ADDRESS, timeout=RPC_TIMEOUT)
    store = AssetStore(ASSETS_BASE, timeout=ASSET_TIMEOUT)
    loader = LayerLoader(store, max_workers=LAYER_WORKERS, timeout=ASSET_TIMEOUT)
    return NpcService(contract, loader, image_url_template=IMAGE_URL_TEMPLATE)
