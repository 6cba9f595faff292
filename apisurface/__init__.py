"""apisurface - public API surface reports over a compiled type graph."""

from apisurface.__version__ import __version__

__all__ = ["__version__"]
