"""Unit tests for apisurface.helpers.exceptions module.

Tests custom exception classes.
"""

import pytest

from apisurface.helpers.exceptions import (
    ApiSurfaceError,
    GraphDocumentError,
    UnresolvedNodeError,
    UnresolvedProjectError,
)


class TestHierarchy:
    """All errors share one base class."""

    @pytest.mark.unit
    @pytest.mark.parametrize("cls", [GraphDocumentError, UnresolvedNodeError, UnresolvedProjectError])
    def test_subclasses_base(self, cls) -> None:
        assert issubclass(cls, ApiSurfaceError)
        assert issubclass(cls, Exception)


class TestUnresolvedNodeError:
    """Tests for UnresolvedNodeError."""

    @pytest.mark.unit
    def test_message_with_origin(self) -> None:
        error = UnresolvedNodeError("System.Object", "plugins.PluginHost")

        assert str(error) == "Symbol 'System.Object' is not in the graph (referenced from 'plugins.PluginHost')"
        assert error.key == "System.Object"
        assert error.referenced_from == "plugins.PluginHost"

    @pytest.mark.unit
    def test_message_without_origin(self) -> None:
        assert str(UnresolvedNodeError("X")) == "Symbol 'X' is not in the graph"


class TestUnresolvedProjectError:
    """Tests for UnresolvedProjectError."""

    @pytest.mark.unit
    def test_message_with_reason(self) -> None:
        error = UnresolvedProjectError("src/A", "compilation failed")

        assert str(error) == "Project 'src/A' could not be resolved: compilation failed"
        assert error.project == "src/A"
        assert error.reason == "compilation failed"

    @pytest.mark.unit
    def test_can_be_caught_as_base(self) -> None:
        with pytest.raises(ApiSurfaceError, match="src/A"):
            raise UnresolvedProjectError("src/A")
