# info.py
from __future__ import annotations

from .model import NodeInfo, Parameter, Template


def output_value(param: Parameter) -> str:
    """
    Resolve the display value of an output parameter.

    Priority: value > jqFilter > jsonPath > parameter > path > "".
    """
    if param.value:
        return param.value
    if param.value_from:
        vf = param.value_from
        return vf.jq_filter or vf.json_path or vf.parameter or vf.path or ""
    return ""


def populate_info_from_template(info: NodeInfo, template: Template) -> NodeInfo:
    """
    Fill `info` from a container template and return it.

    Non-container templates leave `info` untouched; callers check
    `info.node_type` before trusting the other fields.
    """
    if not template.container:
        return info

    container = template.container
    info.node_type = "container"
    info.args = list(container.args or [])
    info.command = list(container.command or [])
    info.image = container.image or ""

    if template.inputs:
        info.inputs = [[p.name, p.value or ""] for p in (template.inputs.parameters or [])]
    if template.outputs:
        info.outputs = [[p.name, output_value(p)] for p in (template.outputs.parameters or [])]
    return info
