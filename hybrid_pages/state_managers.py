"""State managers for handling application-wide mutable state.

This module provides race-safe state management using asyncio.Lock
for async operations. All state managers inherit from StateManager ABC.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

import anyio

from hybrid_pages.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class StateManager(ABC):
    """Base class for all state managers.

    State managers provide race-safe access to mutable application state.
    All subclasses must implement lifecycle methods.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the state manager (called during app startup)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Cleanup resources (called during app shutdown)."""
        pass


class PartialRegistry(StateManager):
    """Discovers partial templates once and holds them for the template engine.

    The ``partials`` mapping is handed to the engine's loader, so a partial
    registered here is includable by name. Discovery runs on the first
    ``ensure_loaded()`` call; concurrent first callers wait on one lock and
    only one of them scans the directory.
    """

    def __init__(self, partials_dir: Path, extensions: Iterable[str] = (".hbs", ".html")):
        """Initialize the partial registry."""
        self.partials_dir = Path(partials_dir)
        self.extensions = tuple(ext.lower() for ext in extensions)
        self._partials: dict[str, str] = {}
        self._loaded = False
        self._lock = asyncio.Lock()

    @property
    def partials(self) -> dict[str, str]:
        """Registered partial sources keyed by name."""
        return self._partials

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def initialize(self) -> None:
        """Initialize the partial registry."""
        # Discovery is deferred to the first render
        pass

    async def cleanup(self) -> None:
        """Forget registered partials so the next render rediscovers them."""
        async with self._lock:
            self._partials.clear()
            self._loaded = False

    async def ensure_loaded(self) -> None:
        """Discover and register partials on the first call; no-op afterwards.

        A missing partials directory registers nothing. Any other failure is
        logged as a warning and the registry is still marked loaded.
        """
        if self._loaded:
            return

        async with self._lock:
            if self._loaded:
                return

            try:
                discovered = await self._discover()
            except Exception as e:
                log_with_context(
                    logger,
                    "warning",
                    "Error loading partials",
                    partials_dir=str(self.partials_dir),
                    error=str(e),
                    error_type=type(e).__name__,
                    event_type="partials_error",
                )
                discovered = {}

            for name, content in discovered.items():
                self.register(name, content)
            self._loaded = True

            log_with_context(
                logger,
                "info",
                "Partials loaded",
                partials_dir=str(self.partials_dir),
                partial_count=len(self._partials),
                event_type="partials_loaded",
            )

    def register(self, name: str, content: str) -> None:
        """Register one partial source under a name."""
        self._partials[name] = content
        log_with_context(
            logger,
            "debug",
            "Partial registered",
            partial_name=name,
            event_type="partial_registered",
        )

    async def _discover(self) -> dict[str, str]:
        """Read every partial file in the partials directory.

        Returns:
            Partial sources keyed by filename without extension
        """
        directory = anyio.Path(self.partials_dir)

        try:
            entries = [entry async for entry in directory.iterdir()]
        except FileNotFoundError:
            log_with_context(
                logger,
                "debug",
                "Partials directory not found, no partials registered",
                partials_dir=str(self.partials_dir),
                event_type="partials_missing",
            )
            return {}
        except OSError as e:
            log_with_context(
                logger,
                "warning",
                "Could not load partials",
                partials_dir=str(self.partials_dir),
                error=str(e),
                event_type="partials_error",
            )
            return {}

        discovered: dict[str, str] = {}
        for entry in sorted(entries, key=lambda p: p.name):
            if entry.suffix.lower() not in self.extensions:
                continue
            try:
                discovered[entry.stem] = await entry.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                log_with_context(
                    logger,
                    "warning",
                    "Could not read partial",
                    partial_file=entry.name,
                    error=str(e),
                    event_type="partial_read_error",
                )
        return discovered
