# info_test.py
from __future__ import annotations

import pytest

from dagview.dsl import container, dag, param, task
from dagview.info import output_value, populate_info_from_template
from dagview.model import NodeInfo, Template


def test_populates_container_fields():
    t = container(
        "run", "busybox",
        command=["echo"], args=["hello", "world"],
        inputs=[param("msg", "hi"), param("empty")],
        outputs=[param("out", "42")],
    )
    info = populate_info_from_template(NodeInfo(), t)
    assert info.node_type == "container"
    assert info.image == "busybox"
    assert info.command == ["echo"]
    assert info.args == ["hello", "world"]
    assert info.inputs == [["msg", "hi"], ["empty", ""]]
    assert info.outputs == [["out", "42"]]


def test_returns_same_record():
    info = NodeInfo()
    assert populate_info_from_template(info, container("run")) is info


def test_missing_fields_default_empty():
    info = populate_info_from_template(NodeInfo(), container("run"))
    assert info.image == ""
    assert info.command == []
    assert info.args == []
    # no inputs/outputs block declared: placeholder shape survives
    assert info.inputs == [[]]
    assert info.outputs == [[]]


def test_declared_but_empty_parameter_blocks():
    t = container("run", inputs=[], outputs=[])
    info = populate_info_from_template(NodeInfo(), t)
    assert info.inputs == []
    assert info.outputs == []


def test_non_container_left_unmodified():
    info = NodeInfo(condition="a == b")
    populate_info_from_template(info, dag("d", task("t", "x")))
    assert info == NodeInfo(condition="a == b")

    populate_info_from_template(info, Template(name="other"))
    assert info.node_type == "unknown"


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        (dict(value="v"), "v"),
        (dict(jq_filter="jq"), "jq"),
        (dict(json_path="jp"), "jp"),
        (dict(parameter="p"), "p"),
        (dict(path="/tmp/out"), "/tmp/out"),
        ({}, ""),
    ],
)
def test_output_value_single_source(kwargs, expected):
    assert output_value(param("o", **kwargs)) == expected


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        (dict(value="v", jq_filter="jq", json_path="jp", parameter="p", path="f"), "v"),
        (dict(jq_filter="jq", json_path="jp", parameter="p", path="f"), "jq"),
        (dict(json_path="jp", parameter="p", path="f"), "jp"),
        (dict(parameter="p", path="f"), "p"),
        (dict(value="", path="f"), "f"),
    ],
)
def test_output_value_priority(kwargs, expected):
    assert output_value(param("o", **kwargs)) == expected


def test_output_value_with_empty_value_from():
    p = param("o", jq_filter="")
    assert p.value_from is not None
    assert output_value(p) == ""


def test_outputs_use_priority_resolution():
    t = container("run", outputs=[
        param("a", "direct"),
        param("b", jq_filter=".x", path="/p"),
        param("c", parameter="{{tasks.x.outputs.parameters.y}}"),
        param("d"),
    ])
    info = populate_info_from_template(NodeInfo(), t)
    assert info.outputs == [
        ["a", "direct"],
        ["b", ".x"],
        ["c", "{{tasks.x.outputs.parameters.y}}"],
        ["d", ""],
    ]
