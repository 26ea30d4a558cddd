"""Unit tests for DirectoryLoader."""

import pytest

from diskclient.exceptions import ServerError
from nsbrowser.errors import LoadError
from nsbrowser.loader import DirectoryLoader
from nsbrowser.models import BrowsingContext, EntryType, Listing
from tests.fixtures.gateways import ScriptedGateway, create_gateway


def create_home_gateway(auto_home: str = "/home/user") -> ScriptedGateway:
    """Gateway whose root listing suggests ``auto_home``."""
    return create_gateway(
        listings={
            "/": {"path": "/", "entries": [{"name": "home", "type": "dir"}], "autoHome": auto_home},
            "/home/user": {
                "path": "/home/user",
                "entries": [{"name": "notes.md", "type": "file"}],
                "autoHome": "/elsewhere",
            },
        }
    )


# =============================================================================
# Plain Loads
# =============================================================================

class TestDirectoryLoaderLoad:
    """Tests for loads that do not redirect."""

    async def test_load_root(self, gateway: ScriptedGateway, context: BrowsingContext) -> None:
        listing = await DirectoryLoader(gateway).load(context, "/")

        assert isinstance(listing, Listing)
        assert listing.path == "/"
        assert [e.name for e in listing.entries] == ["docs", "etc", "readme.txt"]
        assert listing.entries[0].type is EntryType.DIR
        assert gateway.calls == [("list", "/")]

    async def test_load_passes_context(self, gateway: ScriptedGateway, context: BrowsingContext) -> None:
        await DirectoryLoader(gateway).load(context, "/docs")

        assert gateway.contexts == [("/tmp/disco1.mia", "part1")]

    async def test_load_normalizes_path(self, gateway: ScriptedGateway, context: BrowsingContext) -> None:
        listing = await DirectoryLoader(gateway).load(context, "docs//guides/")

        assert listing.path == "/docs/guides"
        assert listing.entries == ()
        assert gateway.calls == [("list", "/docs/guides")]

    @pytest.mark.parametrize("path", [None, ""])
    async def test_empty_path_means_root(
        self, gateway: ScriptedGateway, context: BrowsingContext, path: str | None
    ) -> None:
        listing = await DirectoryLoader(gateway).load(context, path)

        assert listing.path == "/"

    async def test_entries_keep_backend_order(self, context: BrowsingContext) -> None:
        gateway = create_gateway(
            listings={
                "/z": {
                    "entries": [
                        {"name": "b.txt", "type": "file"},
                        {"name": "a", "type": "dir"},
                        {"name": "c.txt", "type": "file"},
                    ]
                }
            }
        )

        listing = await DirectoryLoader(gateway).load(context, "/z")

        assert [e.name for e in listing.entries] == ["b.txt", "a", "c.txt"]


# =============================================================================
# Auto-Home Redirect
# =============================================================================

class TestDirectoryLoaderAutoHome:
    """Tests for the one-shot auto-home redirect."""

    async def test_root_redirects_to_home(self, context: BrowsingContext) -> None:
        gateway = create_home_gateway()

        listing = await DirectoryLoader(gateway).load(context, "/")

        assert listing.path == "/home/user"
        assert [e.name for e in listing.entries] == ["notes.md"]

    async def test_redirect_happens_once(self, context: BrowsingContext) -> None:
        """A suggestion on the redirected listing is not followed."""
        gateway = create_home_gateway()

        await DirectoryLoader(gateway).load(context, "/")

        assert gateway.calls == [("list", "/"), ("list", "/home/user")]

    async def test_home_is_normalized(self, context: BrowsingContext) -> None:
        gateway = create_home_gateway(auto_home="home//user/")

        listing = await DirectoryLoader(gateway).load(context, "/")

        assert listing.path == "/home/user"

    async def test_no_redirect_below_root(self, context: BrowsingContext) -> None:
        gateway = create_gateway(
            listings={"/docs": {"entries": [], "autoHome": "/home/user"}}
        )

        listing = await DirectoryLoader(gateway).load(context, "/docs")

        assert listing.path == "/docs"
        assert gateway.count("list") == 1

    async def test_empty_suggestion_is_ignored(self, context: BrowsingContext) -> None:
        gateway = create_gateway(
            listings={"/": {"entries": [{"name": "etc", "type": "dir"}], "autoHome": ""}}
        )

        listing = await DirectoryLoader(gateway).load(context, "/")

        assert listing.path == "/"
        assert gateway.count("list") == 1

    async def test_failed_redirect_raises(self, context: BrowsingContext) -> None:
        gateway = create_home_gateway(auto_home="/gone")

        with pytest.raises(LoadError) as exc_info:
            await DirectoryLoader(gateway).load(context, "/")

        assert exc_info.value.path == "/gone"


# =============================================================================
# Failures
# =============================================================================

class TestDirectoryLoaderErrors:
    """Tests for gateway failures surfacing as LoadError."""

    async def test_gateway_error_becomes_load_error(
        self, gateway: ScriptedGateway, context: BrowsingContext
    ) -> None:
        with pytest.raises(LoadError) as exc_info:
            await DirectoryLoader(gateway).load(context, "/missing")

        assert exc_info.value.path == "/missing"
        assert "cannot read path" in exc_info.value.message
        assert exc_info.value.cause is not None

    async def test_server_error_message(self, context: BrowsingContext) -> None:
        gateway = create_gateway(listings={"/x": ServerError("disk not mounted")})

        with pytest.raises(LoadError) as exc_info:
            await DirectoryLoader(gateway).load(context, "/x")

        assert exc_info.value.message == "[HTTP 500] [server_error] disk not mounted"
        assert isinstance(exc_info.value.cause, ServerError)

    async def test_malformed_body_becomes_load_error(self, context: BrowsingContext) -> None:
        gateway = create_gateway(
            listings={"/bad": {"entries": [{"name": "x", "type": "symlink"}]}}
        )

        with pytest.raises(LoadError):
            await DirectoryLoader(gateway).load(context, "/bad")

    async def test_exception_without_message_uses_class_name(self, context: BrowsingContext) -> None:
        gateway = create_gateway(listings={"/x": RuntimeError()})

        with pytest.raises(LoadError) as exc_info:
            await DirectoryLoader(gateway).load(context, "/x")

        assert exc_info.value.message == "RuntimeError"

    async def test_entry_rejected_by_core_model_becomes_load_error(
        self, context: BrowsingContext
    ) -> None:
        """A body the transport accepts but the core cannot use still fails as LoadError."""
        gateway = create_gateway(
            listings={"/bad": {"entries": [{"name": "", "type": "file"}]}}
        )

        with pytest.raises(LoadError) as exc_info:
            await DirectoryLoader(gateway).load(context, "/bad")

        assert exc_info.value.path == "/bad"
        assert exc_info.value.cause is not None

    async def test_unusable_home_listing_becomes_load_error(self, context: BrowsingContext) -> None:
        gateway = create_gateway(
            listings={
                "/": {"entries": [], "autoHome": "/home/user"},
                "/home/user": {"entries": [{"name": "", "type": "dir"}]},
            }
        )

        with pytest.raises(LoadError) as exc_info:
            await DirectoryLoader(gateway).load(context, "/")

        assert exc_info.value.path == "/home/user"
