# storefront/services/catalog_state.py

"""Observable view state for the product list."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from storefront.models.product import Product
from storefront.services.catalog_client import CatalogClient, CatalogError

logger = logging.getLogger("storefront.state")

Listener = Callable[["CatalogState"], None]


class CatalogState:
    """Holds the products, loading flag and error message the UI renders.

    Every write goes through :meth:`_update`, which notifies listeners.
    Loads run the blocking fetch in a worker thread and apply the result
    back on the event loop. Each load takes a ticket; only the latest
    ticket may write its result, so a slow stale response never replaces
    a newer one.
    """

    def __init__(self, client: CatalogClient | None = None) -> None:
        self.client = client if client is not None else CatalogClient()
        self.category: str | None = None
        self.products: list[Product] = []
        self.is_loading: bool = False
        self.error_message: str | None = None
        self._listeners: list[Listener] = []
        self._ticket: int = 0

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _update(self, **changes: Any) -> None:
        for name, value in changes.items():
            setattr(self, name, value)
        for listener in list(self._listeners):
            listener(self)

    async def select_category(self, category: str) -> None:
        """Switch to *category*, clearing the list before it loads.

        Reselecting the current category reloads it and keeps the list.
        """
        if category != self.category:
            logger.info("Category changed to '%s'", category)
            self._update(category=category, products=[])
        await self.load()

    async def load(self, category: str | None = None) -> None:
        """Fetch *category* (default: the current one) and publish it."""
        if category is not None and category != self.category:
            self._update(category=category)
        target = self.category
        if target is None:
            logger.warning("load() called with no category selected")
            return

        self._ticket += 1
        ticket = self._ticket
        self._update(is_loading=True, error_message=None)

        try:
            products = await asyncio.to_thread(self.client.fetch, target)
        except CatalogError as exc:
            if ticket != self._ticket:
                logger.info(
                    "Dropping stale error for '%s' (request %d)",
                    target,
                    ticket,
                )
                return
            logger.error("Loading '%s' failed: %s", target, exc)
            self._update(is_loading=False, error_message=str(exc))
            return

        if ticket != self._ticket:
            logger.info(
                "Dropping stale response for '%s' (request %d)",
                target,
                ticket,
            )
            return
        self._update(products=products, is_loading=False)
