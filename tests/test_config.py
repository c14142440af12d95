"""Tests for YAML graph configuration."""

from pathlib import Path

from digraph.config import GraphConfig

PATH = Path("graph.yml")


def load(content):
    cfg = GraphConfig.parse(PATH, content)
    cfg.validate()
    return cfg


def test_valid_file():
    cfg = load(
        """\
name: sample
nodes: [d]
edges:
  a: [b, c]
  b: c
  c:
"""
    )
    assert cfg["name"] == "sample"
    assert cfg["nodes"] == ["d"]
    assert cfg["edges"] == {"a": ["b", "c"], "b": ["c"], "c": []}


def test_defaults(caplog):
    cfg = load("edges: {}\n")
    assert cfg["name"] == "graph"
    assert cfg["nodes"] == []
    assert caplog.records == []


def test_scalar_types_preserved():
    cfg = load("edges:\n  1: [2, 3.5, true]\n")
    assert cfg["edges"] == {1: [2, 3.5, True]}


def test_missing_edges(caplog):
    cfg = load("name: x\n")
    assert cfg["edges"] == {}
    assert "graph.yml: missing 'edges'" in caplog.text


def test_unparseable_yaml(caplog):
    cfg = load("edges: [unclosed\n")
    assert cfg["edges"] == {}
    assert "cannot parse graph.yml" in caplog.text


def test_not_a_mapping(caplog):
    cfg = load("- a\n- b\n")
    assert cfg["nodes"] == []
    assert "invalid YAML in graph.yml" in caplog.text


def test_nodes_must_be_list(caplog):
    cfg = load("nodes: a\nedges: {}\n")
    assert cfg["nodes"] == []
    assert "'nodes' must be a list" in caplog.text


def test_edges_must_be_mapping(caplog):
    cfg = load("edges: [a, b]\n")
    assert cfg["edges"] == {}
    assert "'edges' must be a mapping" in caplog.text


def test_unhashable_entries_dropped(caplog):
    cfg = load("nodes: [a, [b]]\nedges:\n  a: [c, {d: e}]\n")
    assert cfg["nodes"] == ["a"]
    assert cfg["edges"] == {"a": ["c"]}
    assert "node ['b'] is not hashable" in caplog.text
    assert "node {'d': 'e'} is not hashable" in caplog.text


def test_load_from_file(tmp_path):
    path = tmp_path / "g.yml"
    path.write_text("edges:\n  a: [b]\n")
    cfg = GraphConfig.load(path)
    cfg.validate()
    assert cfg.path == path
    assert cfg["edges"] == {"a": ["b"]}
    assert repr(cfg).startswith("GraphConfig(path=")


def test_load_missing_file(tmp_path, caplog):
    assert GraphConfig.load(tmp_path / "nope.yml") is None
    assert "cannot read" in caplog.text


def test_load_undecodable_file(tmp_path, caplog):
    path = tmp_path / "bad.yml"
    path.write_bytes(b"edges:\n  a: [\xff\xfe]\n")
    assert GraphConfig.load(path) is None
    assert f"cannot read {path}" in caplog.text


def test_load_utf8_regardless_of_locale(tmp_path):
    path = tmp_path / "utf8.yml"
    path.write_bytes("edges:\n  caf\u00e9: [na\u00efve]\n".encode("utf-8"))
    cfg = GraphConfig.load(path)
    cfg.validate()
    assert cfg["edges"] == {"caf\u00e9": ["na\u00efve"]}
