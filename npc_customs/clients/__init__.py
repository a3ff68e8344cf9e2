"""Clients for external collaborators."""

from .assets import AssetStore
from .contract import ContractClient

__all__ = ["AssetStore", "ContractClient"]
