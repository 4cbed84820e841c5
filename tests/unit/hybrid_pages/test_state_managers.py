"""Unit tests for the partial registry."""

import asyncio
import logging
from unittest.mock import patch

import pytest

from hybrid_pages.state_managers import PartialRegistry


@pytest.mark.asyncio
async def test_partial_registry_initialize_is_lazy(site_dir, write_partial):
    """Test initialize does not scan the directory."""
    write_partial("menu.html", "<nav></nav>")
    registry = PartialRegistry(site_dir / "partials")

    await registry.initialize()

    assert registry.loaded is False
    assert registry.partials == {}


@pytest.mark.asyncio
async def test_partial_registry_loads_template_files(site_dir, write_partial):
    """Test partials are registered under their filename minus extension."""
    write_partial("menu.html", "<nav>{{ currentPath }}</nav>")
    write_partial("footer.hbs", "<footer></footer>")
    write_partial("notes.txt", "ignored")
    write_partial("README.md", "ignored")
    registry = PartialRegistry(site_dir / "partials", extensions=(".hbs", ".html"))

    await registry.ensure_loaded()

    assert registry.loaded is True
    assert registry.partials == {
        "menu": "<nav>{{ currentPath }}</nav>",
        "footer": "<footer></footer>",
    }


@pytest.mark.asyncio
async def test_partial_registry_extension_match_is_case_insensitive(site_dir, write_partial):
    """Test upper-case extensions still count as partials."""
    write_partial("Header.HTML", "<header></header>")
    registry = PartialRegistry(site_dir / "partials", extensions=(".html",))

    await registry.ensure_loaded()

    assert registry.partials == {"Header": "<header></header>"}


@pytest.mark.asyncio
async def test_partial_registry_missing_directory(tmp_path):
    """Test a missing partials directory is not an error."""
    registry = PartialRegistry(tmp_path / "does-not-exist")

    await registry.ensure_loaded()

    assert registry.loaded is True
    assert registry.partials == {}


@pytest.mark.asyncio
async def test_partial_registry_second_call_is_noop(site_dir, write_partial):
    """Test partials added after the first load are not picked up."""
    write_partial("menu.html", "v1")
    registry = PartialRegistry(site_dir / "partials")
    await registry.ensure_loaded()

    write_partial("late.html", "late")
    write_partial("menu.html", "v2")
    await registry.ensure_loaded()

    assert registry.partials == {"menu": "v1"}


@pytest.mark.asyncio
async def test_partial_registry_concurrent_first_calls_register_once(site_dir, write_partial):
    """Test N simultaneous first calls register each partial exactly once."""
    write_partial("menu.html", "<nav></nav>")
    write_partial("footer.html", "<footer></footer>")
    registry = PartialRegistry(site_dir / "partials")

    with patch.object(registry, "register", wraps=registry.register) as register_spy:
        await asyncio.gather(*[registry.ensure_loaded() for _ in range(20)])

    assert register_spy.call_count == 2
    assert sorted(call.args[0] for call in register_spy.call_args_list) == ["footer", "menu"]
    assert registry.loaded is True


@pytest.mark.asyncio
async def test_partial_registry_waiters_see_complete_registry(site_dir, write_partial):
    """Test concurrent callers only return once every partial is registered."""
    for i in range(5):
        write_partial(f"p{i}.html", str(i))
    registry = PartialRegistry(site_dir / "partials")

    async def load_and_count() -> int:
        await registry.ensure_loaded()
        return len(registry.partials)

    counts = await asyncio.gather(*[load_and_count() for _ in range(10)])

    assert counts == [5] * 10


@pytest.mark.asyncio
async def test_partial_registry_unreadable_partial_is_skipped(site_dir, write_partial, caplog):
    """Test a partial that cannot be decoded is logged and skipped."""
    write_partial("good.html", "ok")
    (site_dir / "partials" / "bad.html").write_bytes(b"\xff\xfe\xfa")
    registry = PartialRegistry(site_dir / "partials")

    with caplog.at_level(logging.WARNING, logger="hybrid_pages.state_managers"):
        await registry.ensure_loaded()

    assert registry.loaded is True
    assert registry.partials == {"good": "ok"}
    assert any(r.getMessage() == "Could not read partial" for r in caplog.records)


@pytest.mark.asyncio
async def test_partial_registry_enumeration_error_marks_loaded(site_dir, caplog):
    """Test an unexpected discovery failure is swallowed and not retried."""
    registry = PartialRegistry(site_dir / "partials")

    with patch.object(registry, "_discover", side_effect=RuntimeError("disk on fire")) as discover:
        with caplog.at_level(logging.WARNING, logger="hybrid_pages.state_managers"):
            await registry.ensure_loaded()
            await registry.ensure_loaded()

    assert registry.loaded is True
    assert registry.partials == {}
    assert discover.call_count == 1
    assert any(r.getMessage() == "Error loading partials" for r in caplog.records)


@pytest.mark.asyncio
async def test_partial_registry_directory_path_is_file(site_dir, caplog):
    """Test a partials path that is not a directory is logged, not raised."""
    (site_dir / "not-a-dir").write_text("x", encoding="utf-8")
    registry = PartialRegistry(site_dir / "not-a-dir")

    with caplog.at_level(logging.WARNING, logger="hybrid_pages.state_managers"):
        await registry.ensure_loaded()

    assert registry.loaded is True
    assert any(r.getMessage() == "Could not load partials" for r in caplog.records)


@pytest.mark.asyncio
async def test_partial_registry_cleanup_allows_reload(site_dir, write_partial):
    """Test cleanup clears partials and the next call rediscovers them."""
    write_partial("menu.html", "v1")
    registry = PartialRegistry(site_dir / "partials")
    await registry.ensure_loaded()

    write_partial("menu.html", "v2")
    await registry.cleanup()

    assert registry.loaded is False
    assert registry.partials == {}

    await registry.ensure_loaded()
    assert registry.partials == {"menu": "v2"}
