"""Hybrid Pages: file-routed server-side HTML rendering"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hybrid-pages")
except PackageNotFoundError:
    __version__ = "dev"
