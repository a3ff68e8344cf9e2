"""Errors raised by the trait pipeline.

Every stage raises one of these and lets it propagate; the HTTP shells turn
any of them into an opaque 500.
"""


class NpcCustomsError(Exception):
    """Base exception for the NPC Customs service."""
    pass


class UpstreamLookupError(NpcCustomsError):
    """The contract lookup failed or timed out."""
    pass


class DataFormatError(NpcCustomsError):
    """The raw trait record could not be read."""
    pass


class AssetResolutionError(NpcCustomsError):
    """A trait value has no entry in its item table."""
    pass


class AssetLoadError(NpcCustomsError):
    """An image layer could not be fetched or decoded."""
    pass


class ImageCompositionError(NpcCustomsError):
    """Nothing to composite."""
    pass
