# storefront/ui/app.py

"""Terminal UI for the storefront catalog."""

import logging
from collections.abc import Callable
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import (
    DataTable,
    Footer,
    Header,
    LoadingIndicator,
    Select,
    Static,
)

from storefront.config.settings import Settings
from storefront.services.catalog_client import CatalogClient
from storefront.services.catalog_state import CatalogState
from storefront.ui.detail import ProductDetailScreen

logger = logging.getLogger("storefront.ui")


class StorefrontApp(App[object]):
    """Category picker, product list and product detail."""

    CSS_PATH = "styles.css"
    TITLE = "Storefront"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "reload", "Reload"),
    ]

    def __init__(self, client: CatalogClient | None = None) -> None:
        super().__init__()
        self.settings = Settings()
        self.state = CatalogState(client)
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        options = [
            (cat["label"], cat["id"]) for cat in self.settings.CATEGORIES
        ]

        yield Header()
        yield Container(
            Static("🛍  Storefront", id="title"),
            Select(
                options,
                prompt="Choose a category",
                id="category_select",
            ),
            Static("Pick a category to browse", id="status"),
            LoadingIndicator(id="loader"),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="results_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure the table and start observing the view state."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )
        table.add_columns("ID", "Title", "Price", "Category")
        self.query_one("#loader", LoadingIndicator).display = False
        self._unsubscribe = self.state.subscribe(self._render_state)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_select_changed(self, event: Select.Changed) -> None:
        """Load the newly chosen category in a background worker."""
        if event.select.id != "category_select":
            return
        if not isinstance(event.value, str):
            return
        self.run_worker(
            self.load_category(event.value),
            group="catalog",
        )

    async def load_category(self, category: str) -> None:
        """Switch the view state to *category* and wait for the result."""
        logger.info("User selected category '%s'", category)
        await self.state.select_category(category)

    def action_reload(self) -> None:
        """Re-fetch the current category."""
        if self.state.category is None:
            self.notify("Pick a category first", severity="warning")
            return
        self.run_worker(self.state.load(), group="catalog")

    def _render_state(self, state: CatalogState) -> None:
        """Redraw status, loader and table from *state*."""
        status = self.query_one("#status", Static)
        loader = self.query_one("#loader", LoadingIndicator)
        loader.display = state.is_loading

        if state.is_loading:
            status.update(Text(f"🔍 Loading '{state.category}'..."))
        elif state.error_message:
            status.update(Text(f"❌ {state.error_message}"))
        elif state.category is None:
            status.update(Text("Pick a category to browse"))
        elif not state.products:
            status.update(Text(f"No products in '{state.category}'"))
        else:
            status.update(
                Text(
                    f"✅ {len(state.products)} products "
                    f"in '{state.category}'"
                )
            )

        self.populate_table()

    def populate_table(self) -> None:
        """Fill the DataTable with the current products."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )
        table.clear()
        for p in self.state.products:
            table.add_row(
                str(p.id),
                Text(p.title[:60]),
                Text(f"${p.price:,.2f}", style="bold green"),
                Text(p.category),
                key=str(p.id),
            )

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Open the detail screen for the selected row."""
        self.show_product(event.cursor_row)

    def show_product(self, index: int) -> None:
        """Push the detail screen for the product at *index*."""
        if not 0 <= index < len(self.state.products):
            return
        product = self.state.products[index]
        logger.debug("Showing detail for product %d", product.id)
        self.push_screen(ProductDetailScreen(product))
