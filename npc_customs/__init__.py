"""NPC Customs metadata and image service."""
