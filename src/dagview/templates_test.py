# templates_test.py
from __future__ import annotations

from dagview.dsl import container, dag, task
from dagview.model import Template
from dagview.templates import build_template_index


def test_index_classifies_container_and_dag():
    index = build_template_index([
        container("run", "busybox"),
        dag("root", task("t1", "run")),
    ])
    assert index.lookup("run").node_type == "container"
    assert index.lookup("root").node_type == "dag"
    assert index.lookup("root").template.name == "root"
    assert len(index) == 2


def test_index_omits_unclassified_templates():
    index = build_template_index([Template(name="resource-only"), container("run")])
    assert "resource-only" not in index
    assert index.lookup("resource-only") is None
    assert list(index) == ["run"]


def test_lookup_missing_or_none_is_absent():
    index = build_template_index([])
    assert index.lookup("nope") is None
    assert index.lookup(None) is None


def test_duplicate_names_last_wins():
    index = build_template_index([
        container("same", "first"),
        dag("same", task("t", "x")),
    ])
    assert index.lookup("same").node_type == "dag"


def test_empty_container_block_still_counts_as_container():
    index = build_template_index([Template.model_validate({"name": "c", "container": {}})])
    assert index.lookup("c").node_type == "container"
