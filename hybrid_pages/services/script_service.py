"""Execution of route script sections.

Route scripts are trusted Python written by the site author. Each run gets a
fresh namespace holding a fixed binding set; the only way a script hands
data to its template is by assigning onto ``exports``::

    resp = await fetch("https://api.example.com/posts")
    exports.posts = resp.json()
    exports.title = req.query.get("title", "Posts")

Top-level ``await`` is allowed, so a script may be a plain synchronous body
or may suspend on network calls.
"""

import ast
import builtins
import inspect
import logging
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

import httpx

from hybrid_pages.exceptions import ScriptExecutionError
from hybrid_pages.logging_config import SCRIPT_LOGGER_NAME, get_logger, log_with_context
from hybrid_pages.models import RouteRequest

logger = get_logger(__name__)
script_logger = get_logger(SCRIPT_LOGGER_NAME)


class Exports(MutableMapping):
    """Record a script populates by attribute or item assignment.

    Values live in the instance ``__dict__``, so an export named ``items``
    or ``keys`` reads back as the stored value rather than a mapping method.
    """

    def __getitem__(self, key: str) -> Any:
        return self.__dict__[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.__dict__[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__dict__[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__dict__)

    def __len__(self) -> int:
        return len(self.__dict__)

    def __repr__(self) -> str:
        return f"Exports({self.__dict__!r})"


class ScriptConsole:
    """``console`` binding that forwards script output to structured logs."""

    def __init__(self, route_path: str, target: logging.Logger = script_logger):
        self._route_path = route_path
        self._logger = target

    def _emit(self, level: str, *args: Any) -> None:
        log_with_context(
            self._logger,
            level,
            " ".join(str(arg) for arg in args),
            route_path=self._route_path,
            event_type="script_console",
        )

    def log(self, *args: Any) -> None:
        self._emit("info", *args)

    def info(self, *args: Any) -> None:
        self._emit("info", *args)

    def debug(self, *args: Any) -> None:
        self._emit("debug", *args)

    def warn(self, *args: Any) -> None:
        self._emit("warning", *args)

    def error(self, *args: Any) -> None:
        self._emit("error", *args)


class ScriptFetcher:
    """``fetch`` binding backed by httpx.

    Uses the application's shared client when one is supplied, otherwise
    opens a short-lived client per call. No retry or caching is applied.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float | None = None):
        self._client = client
        self._timeout = timeout

    async def __call__(
        self,
        resource: str | httpx.URL | httpx.Request,
        method: str = "GET",
        **kwargs: Any,
    ) -> httpx.Response:
        """Perform an HTTP request.

        Args:
            resource: URL or a prepared httpx.Request
            method: HTTP method when resource is a URL
            **kwargs: Passed through to httpx (params, headers, json, content, ...)

        Returns:
            The fully read httpx.Response
        """
        if self._client is not None:
            return await self._send(self._client, resource, method, **kwargs)

        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            return await self._send(client, resource, method, **kwargs)

    @staticmethod
    async def _send(
        client: httpx.AsyncClient,
        resource: str | httpx.URL | httpx.Request,
        method: str,
        **kwargs: Any,
    ) -> httpx.Response:
        if isinstance(resource, httpx.Request):
            return await client.send(resource)
        return await client.request(method, resource, **kwargs)


class ScriptEvaluator:
    """Runs a script section in an isolated, request-scoped namespace."""

    def __init__(self, fetch: ScriptFetcher | None = None):
        self.fetch = fetch or ScriptFetcher()

    def build_context(self, request: RouteRequest | None, route_path: str) -> dict[str, Any]:
        """Build the binding set for one evaluation.

        A new ``exports`` record and console are created on every call.
        """
        return {
            "exports": Exports(),
            "fetch": self.fetch,
            "Request": httpx.Request,
            "Response": httpx.Response,
            "URL": httpx.URL,
            "console": ScriptConsole(route_path),
            "req": request,
        }

    async def evaluate(
        self,
        script: str,
        request: RouteRequest | None = None,
        route_path: str = "<script>",
    ) -> dict[str, Any]:
        """Execute a script and return what it assigned onto ``exports``.

        Args:
            script: Python source of the script section
            request: Inbound request, bound as ``req``
            route_path: Route path used for the code filename and logs

        Returns:
            Plain dict copy of the final ``exports`` (empty if nothing was set)

        Raises:
            ScriptExecutionError: If the script fails to compile or raises
        """
        namespace: dict[str, Any] = {
            "__builtins__": builtins,
            "__name__": "__route_script__",
            **self.build_context(request, route_path),
        }

        try:
            code = compile(
                script,
                f"<route {route_path}>",
                "exec",
                flags=ast.PyCF_ALLOW_TOP_LEVEL_AWAIT,
                dont_inherit=True,
            )
            result = eval(code, namespace)  # noqa: S307
            if inspect.iscoroutine(result):
                await result
        except (Exception, SystemExit) as e:
            log_with_context(
                logger,
                "warning",
                "Route script failed",
                route_path=route_path,
                error=str(e),
                error_type=type(e).__name__,
                event_type="script_error",
            )
            raise ScriptExecutionError(
                str(e) or type(e).__name__,
                details={"route_path": route_path, "error_type": type(e).__name__},
            ) from e

        exports = namespace.get("exports")
        if not isinstance(exports, Mapping):
            return {}
        return {key: exports[key] for key in exports}
