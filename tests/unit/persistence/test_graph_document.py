"""Unit tests for graph document loading."""

import json

import pytest
import yaml

from apisurface.helpers.dto.graph_dto import MemberKind, TypeKind, Visibility
from apisurface.helpers.exceptions import GraphDocumentError
from apisurface.persistence.graph_document import build_symbol_graph, load_graph, parse_graph_document


class TestLoadGraph:
    """Test reading documents from disk."""

    @pytest.mark.unit
    def test_loads_json(self, sample_graph_file):
        graph = load_graph(sample_graph_file)

        assert graph.source == "Acme.sln"
        assert len(graph.projects) == 4
        assert graph.types["core.EventBus"].base_type == "core.EventBusBase"
        assert graph.members["core.EventBusExtensions.WhenPublished"].extends == "core.EventBus"

    @pytest.mark.unit
    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_loads_yaml(self, tmp_path, sample_document, suffix):
        path = tmp_path / f"graph{suffix}"
        path.write_text(yaml.safe_dump(sample_document), encoding="utf-8")

        graph = load_graph(path)

        assert set(graph.types) == {t["id"] for t in sample_document["types"]}

    @pytest.mark.unit
    def test_source_falls_back_to_path(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps({"projects": [], "types": []}), encoding="utf-8")

        assert load_graph(path).source == str(path)

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(GraphDocumentError, match="Failed to read"):
            load_graph(tmp_path / "nope.json")

    @pytest.mark.unit
    def test_malformed_json(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(GraphDocumentError, match="Failed to parse"):
            load_graph(path)

    @pytest.mark.unit
    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "graph.yaml"
        path.write_text("types: [unclosed", encoding="utf-8")

        with pytest.raises(GraphDocumentError, match="Failed to parse"):
            load_graph(path)


class TestValidation:
    """Test schema validation."""

    @pytest.mark.unit
    def test_defaults_applied(self):
        document = parse_graph_document(
            {"types": [{"id": "T", "name": "Thing", "members": [{"id": "T.M", "name": "M"}]}]}
        )
        graph = build_symbol_graph(document)

        node = graph.types["T"]
        member = graph.members["T.M"]
        assert node.display == "Thing"
        assert node.kind is TypeKind.CLASS
        assert node.visibility is Visibility.PUBLIC
        assert node.member_keys == ("T.M",)
        assert member.kind is MemberKind.METHOD
        assert member.owner == "T"
        assert member.display == "M"

    @pytest.mark.unit
    def test_duplicate_type_id(self):
        data = {"types": [{"id": "T", "name": "A"}, {"id": "T", "name": "B"}]}

        with pytest.raises(GraphDocumentError, match="Duplicate type id 'T'"):
            parse_graph_document(data)

    @pytest.mark.unit
    def test_duplicate_member_id_across_types(self):
        data = {
            "types": [
                {"id": "A", "name": "A", "members": [{"id": "M", "name": "M"}]},
                {"id": "B", "name": "B", "members": [{"id": "M", "name": "M"}]},
            ]
        }

        with pytest.raises(GraphDocumentError, match="Duplicate member id 'M'"):
            parse_graph_document(data)

    @pytest.mark.unit
    def test_unknown_visibility(self):
        with pytest.raises(GraphDocumentError, match="Invalid graph document"):
            parse_graph_document({"types": [{"id": "T", "name": "T", "visibility": "friend"}]})

    @pytest.mark.unit
    def test_top_level_not_a_mapping(self):
        with pytest.raises(GraphDocumentError):
            parse_graph_document(["not", "a", "document"])

    @pytest.mark.unit
    def test_dangling_references_allowed(self):
        graph = build_symbol_graph(
            parse_graph_document(
                {
                    "projects": [{"path": "src/A", "declarations": ["missing"]}],
                    "types": [{"id": "T", "name": "T", "base_type": "System.Object", "interfaces": ["IGone"]}],
                }
            )
        )

        assert graph.types["T"].interfaces == ("IGone",)
        assert graph.projects[0].declarations == ("missing",)
