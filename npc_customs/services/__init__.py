"""Business logic services."""

from .layers import LayerLoader
from .npc import NpcService, create_npc_service

__all__ = ["LayerLoader", "NpcService", "create_npc_service"]
