"""Asset store client - loads trait layer images from disk or over HTTP."""

from io import BytesIO
from pathlib import Path

import requests
from PIL import Image, UnidentifiedImageError

from ..errors import AssetLoadError


class AssetStore:
    """Load image layers by asset locator (e.g. "full/mood/happy.webp").

    `base` is either a local directory holding `full/`, or an http(s) base URL.
    """

    def __init__(self, base: str = ".", timeout: float = 10):
        self.base = base
        self.timeout = timeout
        self.is_remote = base.startswith(("http://", "https://"))

    def load(self, locator: str) -> Image.Image:
        """
        Fetch and decode one layer.

        Args:
            locator: Asset path relative to the store base

        Returns:
            Decoded RGBA image
        """
        if self.is_remote:
            data = self._download(locator)
        else:
            data = self._read(locator)
        return self._decode(data, locator)

    def url_for(self, locator: str) -> str:
        """Full URL of a locator (remote stores only)."""
        return f"{self.base.rstrip('/')}/{locator.lstrip('/')}"

    def _download(self, locator: str) -> bytes:
        url = self.url_for(locator)
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.content
        except requests.RequestException as e:
            raise AssetLoadError(f"Failed to download {locator} from {url}: {e}")

    def _read(self, locator: str) -> bytes:
        path = Path(self.base) / locator
        try:
            return path.read_bytes()
        except OSError as e:
            raise AssetLoadError(f"Failed to read {locator}: {e}")

    def _decode(self, data: bytes, locator: str) -> Image.Image:
        try:
            img = Image.open(BytesIO(data))
            img.load()
        except (UnidentifiedImageError, OSError) as e:
            raise AssetLoadError(f"Failed to decode {locator}: {e}")

        if img.mode != "RGBA":
            img = img.convert("RGBA")
        return img
