"""Tests for the public API (sesemit.api)."""

import hashlib
import json

import pytest

from sesemit import api
from sesemit.kernel.graph import CanonicalGraph


def test_convert_text_basic_fixture(scenarios_dir):
    raw = (scenarios_dir / "basic.json").read_text(encoding="utf-8")
    expected = (scenarios_dir / "basic.ses").read_text(encoding="utf-8")
    assert api.convert_text(raw) == expected


def test_convert_text_nested_fixture(scenarios_dir):
    raw = (scenarios_dir / "nested.json").read_text(encoding="utf-8")
    expected = (scenarios_dir / "nested.ses").read_text(encoding="utf-8")
    assert api.convert_text(raw) == expected


def test_convert_text_invalid_json():
    with pytest.raises(ValueError) as excinfo:
        api.convert_text("{not json")
    assert "Invalid JSON" in str(excinfo.value)


def test_convert_is_repeatable(scenarios_dir):
    root = json.loads((scenarios_dir / "nested.json").read_text(encoding="utf-8"))
    assert api.convert(root) == api.convert(root)


def test_extract_graph_is_immutable():
    graph = api.extract_graph({"nodes": [{"id": "a", "name": "A"}]})
    assert isinstance(graph, CanonicalGraph)
    with pytest.raises(Exception):
        graph.nodes[0].name = "B"
    with pytest.raises(Exception):
        graph.nodes = ()


def test_convert_file_writes_output_and_reports(scenarios_dir, tmp_path):
    out = tmp_path / "deep" / "dir" / "out.ses"
    result = api.convert_file(scenarios_dir / "nested.json", out)

    text = out.read_text(encoding="utf-8")
    assert text == (scenarios_dir / "nested.ses").read_text(encoding="utf-8")
    assert result.output_path == str(out.resolve())
    assert result.node_count == 6
    assert result.edge_count == 5
    assert result.scope_count == 3
    assert result.flow_count == 3
    assert result.ses_sha256 == hashlib.sha256(text.encode("utf-8")).hexdigest()
    assert result.graph_path is None


def test_convert_file_truncates_existing_output(scenarios_dir, tmp_path):
    out = tmp_path / "out.ses"
    out.write_text("stale content " * 100, encoding="utf-8")
    api.convert_file(str(scenarios_dir / "basic.json"), str(out), overwrite=False)
    assert out.read_text(encoding="utf-8") == (scenarios_dir / "basic.ses").read_text(encoding="utf-8")


def test_convert_file_graph_dump(scenarios_dir, tmp_path):
    graph_out = tmp_path / "graph.json"
    result = api.convert_file(scenarios_dir / "basic.json", tmp_path / "out.ses", graph_path=graph_out)

    assert result.graph_path == str(graph_out.resolve())
    dumped = graph_out.read_text(encoding="utf-8")
    assert dumped.endswith("\n")
    data = json.loads(dumped)
    assert data["nodes"][1] == {"id": "2", "name": "Beta", "parent_id": "1"}
    assert data["edges"] == [{"from_id": "2", "to_id": "3", "label": None}]
    assert CanonicalGraph.model_validate(data) == api.extract_graph(
        json.loads((scenarios_dir / "basic.json").read_text(encoding="utf-8"))
    )


def test_convert_file_missing_input(tmp_path):
    out = tmp_path / "out.ses"
    with pytest.raises(FileNotFoundError):
        api.convert_file(tmp_path / "nope.json", out)
    assert not out.exists()


def test_convert_file_invalid_json_writes_nothing(tmp_path):
    src = tmp_path / "bad.json"
    src.write_text("[1, 2", encoding="utf-8")
    out = tmp_path / "out.ses"
    with pytest.raises(ValueError):
        api.convert_file(src, out)
    assert not out.exists()


def test_convert_file_invalid_utf8(tmp_path):
    src = tmp_path / "latin1.json"
    src.write_bytes(b'{"nodes":[{"name":"caf\xe9"}]}')
    with pytest.raises(ValueError):
        api.convert_file(src, tmp_path / "out.ses")


def test_convert_file_unwritable_graph_path_writes_nothing(scenarios_dir, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    out = tmp_path / "out.ses"
    with pytest.raises(OSError):
        api.convert_file(scenarios_dir / "basic.json", out, graph_path=blocker / "graph.json")
    assert not out.exists()


def test_convert_file_graph_path_is_directory_keeps_existing_output(scenarios_dir, tmp_path):
    out = tmp_path / "out.ses"
    out.write_text("previous", encoding="utf-8")
    graph_dir = tmp_path / "graph_dir"
    graph_dir.mkdir()
    with pytest.raises(OSError):
        api.convert_file(scenarios_dir / "basic.json", out, graph_path=graph_dir)
    assert out.read_text(encoding="utf-8") == "previous"


def test_emit_matches_kernel_emitter(scenarios_dir):
    from sesemit.kernel.emit import emit_ses

    root = json.loads((scenarios_dir / "nested.json").read_text(encoding="utf-8"))
    graph = api.extract_graph(root)
    assert api.emit(graph) == emit_ses(graph)
