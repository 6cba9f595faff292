"""
Pytest fixtures and configuration for the test suite.

Graphs are built from graph-document dicts through the real loader, so
every test exercises the same validation path as the CLI.

- make_graph: compact factory for small hierarchy graphs
- sample_document / sample_graph: a realistic multi-project solution
"""

import copy
import json
import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add project root to path so tests can import the apisurface package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from apisurface.helpers.dto.graph_dto import SymbolGraph  # noqa: E402
from apisurface.helpers.logging_helper import clear_log_context  # noqa: E402
from apisurface.persistence.graph_document import build_symbol_graph, parse_graph_document  # noqa: E402


def _expand_type(key: str, fields: dict[str, Any]) -> dict[str, Any]:
    fields = dict(fields)
    members = []
    for member in fields.pop("members", []):
        if isinstance(member, str):
            member = {"name": member}
        member = dict(member)
        member.setdefault("id", f"{key}.{member['name']}")
        members.append(member)
    name = fields.pop("name", key.rsplit(".", 1)[-1])
    return {"id": key, "name": name, "members": members, **fields}


@pytest.fixture
def make_graph() -> Callable[..., SymbolGraph]:
    """
    Build a SymbolGraph from {type key: fields}.

    Members may be given as plain names; their ids become "<type key>.<name>".
    Without explicit projects, one project "src/App" declares every type.
    """

    def factory(
        types: dict[str, dict[str, Any]],
        projects: list[dict[str, Any]] | None = None,
        source: str = "Test.sln",
    ) -> SymbolGraph:
        if projects is None:
            projects = [{"path": "src/App", "declarations": list(types)}]
        document = {
            "source": source,
            "projects": projects,
            "types": [_expand_type(key, fields) for key, fields in types.items()],
        }
        return build_symbol_graph(parse_graph_document(document))

    return factory


SAMPLE_DOCUMENT: dict[str, Any] = {
    "source": "Acme.sln",
    "projects": [
        {
            "path": "tests/Core.Tests/Core.Tests.csproj",
            "declarations": ["tests.TestBus"],
        },
        {
            "path": "src/Plugins/Plugins.csproj",
            "declarations": ["plugins.PluginHost", "missing.Type", "plugins.PluginOptions"],
        },
        {
            "path": "src/Core/Core.csproj",
            "declarations": [
                "core.IEventSource",
                "core.EventBusBase",
                "core.EventBus",
                "core.EventBus.Handle",
                "core.HiddenBus",
                "core.Silent",
                "core.EventBusExtensions",
                "core.StringHelpers",
                "core.BusOptions",
                "core.BusOptions.RetryOptions",
                "core.IBusOptions",
            ],
        },
        {
            "path": "src/Broken/Broken.csproj",
            "resolved": False,
            "error": "compilation failed",
        },
    ],
    "types": [
        {
            "id": "core.IEventSource",
            "name": "IEventSource",
            "display": "Acme.Core.IEventSource",
            "kind": "interface",
            "members": [
                {
                    "id": "core.IEventSource.Subscribe",
                    "name": "Subscribe",
                    "display": "Acme.Core.IEventSource.Subscribe(System.Action)",
                },
                {
                    "id": "core.IEventSource.Unsubscribe",
                    "name": "Unsubscribe",
                    "display": "Acme.Core.IEventSource.Unsubscribe(System.Action)",
                },
            ],
        },
        {
            "id": "core.EventBusBase",
            "name": "EventBusBase",
            "display": "Acme.Core.EventBusBase",
            "interfaces": ["core.IEventSource"],
            "members": [
                {
                    "id": "core.EventBusBase.SubscribeAll",
                    "name": "SubscribeAll",
                    "display": "Acme.Core.EventBusBase.SubscribeAll()",
                },
                {
                    "id": "core.EventBusBase.SubscribeCore",
                    "name": "SubscribeCore",
                    "display": "Acme.Core.EventBusBase.SubscribeCore()",
                    "visibility": "internal",
                },
            ],
        },
        {
            "id": "core.EventBus",
            "name": "EventBus",
            "display": "Acme.Core.EventBus",
            "base_type": "core.EventBusBase",
            "members": [
                {"id": "core.EventBus.Publish", "name": "Publish", "display": "Acme.Core.EventBus.Publish(object)"},
                {
                    "id": "core.EventBus.SubscribeToTopic",
                    "name": "SubscribeToTopic",
                    "display": "Acme.Core.EventBus.SubscribeToTopic(string)",
                },
            ],
        },
        {
            "id": "core.EventBus.Handle",
            "name": "Handle",
            "display": "Acme.Core.EventBus.Handle",
            "containing_type": "core.EventBus",
            "members": [{"id": "core.EventBus.Handle.Subscribe", "name": "Subscribe"}],
        },
        {
            "id": "core.HiddenBus",
            "name": "HiddenBus",
            "display": "Acme.Core.HiddenBus",
            "visibility": "internal",
            "members": [{"id": "core.HiddenBus.Subscribe", "name": "Subscribe"}],
        },
        {
            "id": "core.Silent",
            "name": "Silent",
            "display": "Acme.Core.Silent",
            "members": [{"id": "core.Silent.SubscribeSecret", "name": "SubscribeSecret", "visibility": "private"}],
        },
        {
            "id": "core.EventBusExtensions",
            "name": "EventBusExtensions",
            "display": "Acme.Core.EventBusExtensions",
            "is_static": True,
            "members": [
                {
                    "id": "core.EventBusExtensions.WhenPublished",
                    "name": "WhenPublished",
                    "display": "Acme.Core.EventBusExtensions.WhenPublished(this Acme.Core.EventBus)",
                    "is_static": True,
                    "extends": "core.EventBus",
                },
            ],
        },
        {
            "id": "core.StringHelpers",
            "name": "StringHelpers",
            "display": "Acme.Core.StringHelpers",
            "is_static": True,
            "members": [{"id": "core.StringHelpers.Clean", "name": "Clean", "is_static": True}],
        },
        {"id": "core.BusOptions", "name": "BusOptions", "display": "Acme.Core.BusOptions"},
        {
            "id": "core.BusOptions.RetryOptions",
            "name": "RetryOptions",
            "display": "Acme.Core.BusOptions.RetryOptions",
            "kind": "record",
            "visibility": "internal",
            "containing_type": "core.BusOptions",
        },
        {"id": "core.IBusOptions", "name": "IBusOptions", "display": "Acme.Core.IBusOptions", "kind": "interface"},
        {
            "id": "plugins.PluginHost",
            "name": "PluginHost",
            "display": "Acme.Plugins.PluginHost",
            "base_type": "System.Object",
            "members": [
                {
                    "id": "plugins.PluginHost.OnSubscribed",
                    "name": "OnSubscribed",
                    "display": "Acme.Plugins.PluginHost.OnSubscribed",
                    "kind": "event",
                },
            ],
        },
        {"id": "plugins.PluginOptions", "name": "PluginOptions", "display": "Acme.Plugins.PluginOptions"},
        {
            "id": "tests.TestBus",
            "name": "TestBus",
            "display": "Acme.Core.Tests.TestBus",
            "members": [{"id": "tests.TestBus.Subscribe", "name": "Subscribe"}],
        },
    ],
}


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A fresh copy of the sample solution document."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_graph(sample_document: dict[str, Any]) -> SymbolGraph:
    return build_symbol_graph(parse_graph_document(sample_document))


@pytest.fixture
def sample_graph_file(tmp_path: Path, sample_document: dict[str, Any]) -> Path:
    """The sample document written to a JSON file."""
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep config files, APISURFACE_* variables and root log handlers from leaking between tests."""
    for key in list(os.environ):
        if key.startswith("APISURFACE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_log_context()
