"""End-to-end tests for the storefront page with fake repositories."""

import asyncio

import pytest

from storefront.application.dto import StorefrontView
from storefront.application.notifications import (
    ALREADY_IN_CART,
    CART_UPDATE_FAILED,
    LOGIN_REQUIRED,
    Severity,
)
from storefront.application.storefront_page import StorefrontPage
from storefront.domain.exceptions import CartUpdateError, FetchError
from storefront.domain.model.session import Session
from tests.fakes import (
    FakeCartRepository,
    FakeCatalogRepository,
    FakeNotifier,
    entry,
    make_product,
)

CATALOG = [
    make_product("A", name="Basketball", category="Sports", cost="10"),
    make_product("B", name="iPhone XR", category="Phones", cost="20"),
]
QUIET = 0.05


def _page(
    session: Session | None = None,
    catalog_repo: FakeCatalogRepository | None = None,
    cart_repo: FakeCartRepository | None = None,
) -> tuple[StorefrontPage, list[StorefrontView], FakeNotifier, FakeCartRepository]:
    views: list[StorefrontView] = []
    notifier = FakeNotifier()
    cart_repo = cart_repo or FakeCartRepository()
    page = StorefrontPage(
        catalog_repo=catalog_repo or FakeCatalogRepository(CATALOG),
        cart_repo=cart_repo,
        session=session if session is not None else Session(token="t", username="crio.do"),
        notifier=notifier,
        render=views.append,
        debounce_delay=QUIET,
    )
    return page, views, notifier, cart_repo


class TestLoad:

    @pytest.mark.asyncio
    async def test_reconciles_cart_with_catalog(self):
        cart_repo = FakeCartRepository([entry("A", 2), entry("Z", 5)])
        page, views, _, _ = _page(cart_repo=cart_repo)
        view = await page.load()
        assert view.loading is False
        assert [p.id for p in view.products] == ["A", "B"]
        assert [(i.product_id, i.quantity) for i in view.cart_items] == [("A", 2)]
        assert view.cart_total == "$20.00"

    @pytest.mark.asyncio
    async def test_renders_loading_then_loaded(self):
        page, views, _, _ = _page()
        await page.load()
        assert [v.loading for v in views] == [True, False]

    @pytest.mark.asyncio
    async def test_fetches_run_concurrently(self):
        catalog_repo = FakeCatalogRepository(CATALOG, delay=0.1)
        cart_repo = FakeCartRepository([entry("B", 1)], delay=0.1)
        page, _, _, _ = _page(catalog_repo=catalog_repo, cart_repo=cart_repo)
        loop = asyncio.get_running_loop()
        started = loop.time()
        await page.load()
        assert loop.time() - started < 0.19

    @pytest.mark.asyncio
    @pytest.mark.parametrize("catalog_delay,cart_delay", [(0.05, 0), (0, 0.05)])
    async def test_result_independent_of_completion_order(self, catalog_delay, cart_delay):
        page, _, _, _ = _page(
            catalog_repo=FakeCatalogRepository(CATALOG, delay=catalog_delay),
            cart_repo=FakeCartRepository([entry("B", 1), entry("A", 3)], delay=cart_delay),
        )
        view = await page.load()
        assert [(i.product_id, i.quantity) for i in view.cart_items] == [("B", 1), ("A", 3)]

    @pytest.mark.asyncio
    async def test_anonymous_has_empty_cart(self):
        cart_repo = FakeCartRepository([entry("A", 1)])
        page, _, notifier, _ = _page(session=Session.anonymous(), cart_repo=cart_repo)
        view = await page.load()
        assert view.cart_items == []
        assert cart_repo.fetch_calls == []
        assert notifier.notifications == []

    @pytest.mark.asyncio
    async def test_catalog_failure_shows_empty_state(self):
        page, _, _, _ = _page(catalog_repo=FakeCatalogRepository(error=FetchError("down")))
        view = await page.load()
        assert view.loading is False
        assert view.products == []

    @pytest.mark.asyncio
    async def test_cart_failure_is_notified(self):
        cart_repo = FakeCartRepository(
            fetch_error=FetchError("x", status_code=400, server_message="Bad token")
        )
        page, _, notifier, _ = _page(cart_repo=cart_repo)
        view = await page.load()
        assert view.cart_items == []
        assert [p.id for p in view.products] == ["A", "B"]
        assert notifier.messages == ["Bad token"]


class TestSearch:

    @pytest.mark.asyncio
    async def test_debounced_search_updates_products(self):
        catalog_repo = FakeCatalogRepository(CATALOG)
        page, views, _, _ = _page(catalog_repo=catalog_repo)
        await page.load()
        for text in ["p", "ph", "pho"]:
            page.on_search_input(text)
        await asyncio.sleep(QUIET * 4)
        await page.debouncer.join()
        assert catalog_repo.searches == ["pho"]
        assert [p.id for p in views[-1].products] == ["B"]

    @pytest.mark.asyncio
    async def test_search_keeps_cart_lines_for_hidden_products(self):
        cart_repo = FakeCartRepository([entry("A", 1)])
        page, _, _, _ = _page(cart_repo=cart_repo)
        await page.load()
        page.on_search_input("phones")
        await asyncio.sleep(QUIET * 4)
        await page.debouncer.join()
        assert [p.id for p in page.view.products] == ["B"]

        await page.on_quantity_change("A", 2)
        assert [(i.product_id, i.quantity) for i in page.view.cart_items] == [("A", 2)]

    @pytest.mark.asyncio
    async def test_failed_search_shows_no_products(self):
        catalog_repo = FakeCatalogRepository(CATALOG)
        page, _, _, _ = _page(catalog_repo=catalog_repo)
        await page.load()
        catalog_repo._error = FetchError("down")
        page.on_search_input("ball")
        await asyncio.sleep(QUIET * 4)
        await page.debouncer.join()
        assert page.view.products == []

    @pytest.mark.asyncio
    async def test_close_cancels_pending_search(self):
        catalog_repo = FakeCatalogRepository(CATALOG)
        page, _, _, _ = _page(catalog_repo=catalog_repo)
        await page.load()
        page.on_search_input("ball")
        page.close()
        await asyncio.sleep(QUIET * 4)
        assert catalog_repo.searches == []


class TestAddToCart:

    @pytest.mark.asyncio
    async def test_add_renders_updated_cart(self):
        page, views, notifier, cart_repo = _page()
        await page.load()
        assert await page.on_add_to_cart("B") is True
        assert cart_repo.upsert_calls == [("t", "B", 1)]
        assert [(i.product_id, i.quantity) for i in views[-1].cart_items] == [("B", 1)]
        assert notifier.notifications == []

    @pytest.mark.asyncio
    async def test_duplicate_add_warns_without_request(self):
        cart_repo = FakeCartRepository([entry("A", 1)])
        page, views, notifier, _ = _page(cart_repo=cart_repo)
        await page.load()
        rendered = len(views)
        assert await page.on_add_to_cart("A") is False
        assert cart_repo.upsert_calls == []
        assert notifier.messages == [ALREADY_IN_CART]
        assert notifier.severities == [Severity.WARNING]
        assert len(views) == rendered

    @pytest.mark.asyncio
    async def test_anonymous_add_asks_for_login(self):
        page, _, notifier, cart_repo = _page(session=Session.anonymous())
        await page.load()
        assert await page.on_add_to_cart("A") is False
        assert cart_repo.upsert_calls == []
        assert notifier.messages == [LOGIN_REQUIRED]

    @pytest.mark.asyncio
    async def test_failed_update_keeps_previous_cart(self):
        cart_repo = FakeCartRepository(
            [entry("A", 1)], upsert_error=CartUpdateError("boom", status_code=500)
        )
        page, _, notifier, _ = _page(cart_repo=cart_repo)
        await page.load()
        assert await page.on_quantity_change("A", 4) is False
        assert [(i.product_id, i.quantity) for i in page.view.cart_items] == [("A", 1)]
        assert notifier.messages == [CART_UPDATE_FAILED]
        assert notifier.severities == [Severity.ERROR]

    @pytest.mark.asyncio
    async def test_unknown_product_shows_backend_message(self):
        cart_repo = FakeCartRepository(known_products={"A", "B"})
        page, _, notifier, _ = _page(cart_repo=cart_repo)
        await page.load()
        assert await page.on_add_to_cart("GONE") is False
        assert notifier.messages == ["Product doesn't exist"]

    @pytest.mark.asyncio
    async def test_zero_quantity_is_rejected_locally(self):
        cart_repo = FakeCartRepository([entry("A", 1)])
        page, _, notifier, _ = _page(cart_repo=cart_repo)
        await page.load()
        assert await page.on_quantity_change("A", 0) is False
        assert cart_repo.upsert_calls == []
        assert notifier.messages == ["Quantity must be positive"]

    @pytest.mark.asyncio
    async def test_stepper_updates_existing_item(self):
        cart_repo = FakeCartRepository([entry("A", 1), entry("B", 1)])
        page, _, _, _ = _page(cart_repo=cart_repo)
        await page.load()
        await page.on_quantity_change("A", 3)
        view = page.view
        assert [(i.product_id, i.quantity) for i in view.cart_items] == [("A", 3), ("B", 1)]
        assert view.cart_total == "$50.00"
