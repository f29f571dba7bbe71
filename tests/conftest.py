import json

import pytest

from dyngraph.loader import build_session, parse_description
from dyngraph.schema import Node


SIMPLE = {
    "header": {"title": "Simple", "description": "Three nodes in a row"},
    "nodes": [
        {"id": "a", "group": 1, "targets": ["b"]},
        {"id": "b", "group": 2, "targets": ["c"], "link": "https://example.com/b"},
        {"id": "c", "group": 3, "targets": []},
    ],
    "customNodes": {"x": ["a"], "y": ["b", "c"]},
}


@pytest.fixture
def description():
    return json.loads(json.dumps(SIMPLE))


@pytest.fixture
def session(description):
    return build_session("simple", parse_description(description))


@pytest.fixture
def store(session):
    return session.store


@pytest.fixture
def data_dir(tmp_path, description):
    (tmp_path / "graph.json").write_text(json.dumps(description), encoding="utf-8")
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "wrong.json").write_text(json.dumps({"nodes": [{"group": 1}]}), encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_node():
    def _make(node_id, group=0, targets=(), link=None):
        return Node(id=node_id, group=group, targets=list(targets), link=link)
    return _make
