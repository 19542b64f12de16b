# storefront/ui/detail.py

"""Detail screen for a single product."""

import logging
import webbrowser
from string import capwords

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from storefront.models.product import Product

logger = logging.getLogger("storefront.ui")


class ProductDetailScreen(Screen[None]):
    """Read-only view of one product."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
        Binding("o", "open_image", "Open Image"),
    ]

    def __init__(self, product: Product) -> None:
        super().__init__()
        self.product = product

    def compose(self) -> ComposeResult:
        p = self.product
        yield Header()
        yield VerticalScroll(
            Static(p.title, id="detail_title", markup=False),
            Static(f"${p.price:,.2f}", id="detail_price"),
            Static(capwords(p.category), id="detail_category", markup=False),
            Static(p.description, id="detail_description", markup=False),
            Static(f"🖼  {p.image}", id="detail_image", markup=False),
            id="detail_container",
        )
        yield Footer()

    def action_open_image(self) -> None:
        """Open the product image URL in the default browser."""
        if not self.product.image:
            self.notify("No image for this product", severity="warning")
            return
        logger.info("Opening image for product %d", self.product.id)
        webbrowser.open(self.product.image)
