"""Layer loader - fetches trait layers concurrently."""

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait

from PIL import Image

from ..clients.assets import AssetStore
from ..errors import AssetLoadError
from .assets import BASE_LAYER_LOCATOR

logger = logging.getLogger(__name__)


class LayerLoader:
    """
    Load image layers through an asset store, all or nothing.

    One worker pool is shared by every batch, so a read that hangs past the
    batch timeout holds at most one of `max_workers` threads.
    """

    def __init__(self, store: AssetStore, max_workers: int = 9, timeout: float = 10):
        self.store = store
        self.max_workers = max_workers
        self.timeout = timeout
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="layer-loader")

    def load_all(self, locators: list[str]) -> list[Image.Image]:
        """
        Load every locator concurrently.

        Results come back in input order regardless of completion order.
        The first failure (or the timeout) fails the whole batch; loads
        still queued are cancelled and no partial list is returned.

        Raises:
            AssetLoadError: Any layer failed or the batch timed out
        """
        if not locators:
            return []

        futures = [self.executor.submit(self.store.load, locator) for locator in locators]
        try:
            done, not_done = wait(futures, timeout=self.timeout, return_when=FIRST_EXCEPTION)

            for locator, future in zip(locators, futures):
                if future in done and future.exception() is not None:
                    error = future.exception()
                    if isinstance(error, AssetLoadError):
                        raise error
                    raise AssetLoadError(f"Failed to load {locator}: {error}")

            if not_done:
                pending = [loc for loc, f in zip(locators, futures) if f in not_done]
                raise AssetLoadError(f"Timed out after {self.timeout}s loading {pending}")
        except AssetLoadError:
            for future in futures:
                future.cancel()
            raise

        logger.debug(f"Loaded {len(futures)} layers")
        return [future.result() for future in futures]

    def load_with_base(self, locators: list[str]) -> tuple[Image.Image, list[Image.Image]]:
        """
        Load the base template together with the trait layers in one batch.

        Returns:
            (base, layers) with layers in input order
        """
        base, *layers = self.load_all([BASE_LAYER_LOCATOR, *locators])
        return base, layers

    def close(self) -> None:
        """Stop the worker pool; queued loads are cancelled."""
        self.executor.shutdown(wait=False, cancel_futures=True)
