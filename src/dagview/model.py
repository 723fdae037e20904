# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


NodeType = Literal["container", "dag", "unknown"]


# ---------------------------------------------------------------------
# Workflow document (already deserialized; camelCase keys accepted)
# ---------------------------------------------------------------------

class _Doc(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)


class ValueFrom(_Doc):
    """Alternative sources for an output parameter's value."""
    jq_filter: Optional[str] = Field(default=None, alias="jqFilter")
    json_path: Optional[str] = Field(default=None, alias="jsonPath")
    parameter: Optional[str] = None
    path: Optional[str] = None


class Parameter(_Doc):
    name: str
    value: Optional[str] = None
    value_from: Optional[ValueFrom] = Field(default=None, alias="valueFrom")


class Parameters(_Doc):
    parameters: Optional[List[Parameter]] = None


class ContainerSpec(_Doc):
    """Leaf execution unit."""
    image: Optional[str] = None
    command: Optional[List[str]] = None
    args: Optional[List[str]] = None


class DagTask(_Doc):
    """
    One reference to a template inside a dag.

    `dependencies` lists sibling task names that must complete before this one.
    `when` is the branch condition; its presence makes the task conditional.
    """
    name: str
    template: Optional[str] = None
    when: Optional[str] = None
    dependencies: Optional[List[str]] = None


class DagSpec(_Doc):
    tasks: Optional[List[DagTask]] = None


class Template(_Doc):
    name: str
    container: Optional[ContainerSpec] = None
    dag: Optional[DagSpec] = None
    inputs: Optional[Parameters] = None
    outputs: Optional[Parameters] = None


class WorkflowSpec(_Doc):
    entrypoint: Optional[str] = None
    templates: Optional[List[Template]] = None
    on_exit: Optional[str] = Field(default=None, alias="onExit")


class Workflow(_Doc):
    spec: Optional[WorkflowSpec] = None


# ---------------------------------------------------------------------
# Display metadata attached to graph nodes
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class ConditionalInfo:
    condition: str
    task_name: str


@dataclass
class NodeInfo:
    """
    Inspection metadata for one graph node. Never used for execution.

    inputs/outputs default to [[]] (a single empty pair): "not populated yet",
    as opposed to [] which means the template declared none. Consumers index
    [0] unconditionally, so keep the shape.
    """
    node_type: NodeType = "unknown"
    command: List[str] = field(default_factory=list)
    args: List[str] = field(default_factory=list)
    condition: str = ""
    # reserved for multi-branch tracking
    conditional_tasks: List[ConditionalInfo] = field(default_factory=list)
    image: str = ""
    inputs: List[List[str]] = field(default_factory=lambda: [[]])
    outputs: List[List[str]] = field(default_factory=lambda: [[]])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "node_type": self.node_type,
            "command": list(self.command),
            "args": list(self.args),
            "condition": self.condition,
            "conditional_tasks": [
                {"condition": c.condition, "task_name": c.task_name}
                for c in self.conditional_tasks
            ],
            "image": self.image,
            "inputs": [list(p) for p in self.inputs],
            "outputs": [list(p) for p in self.outputs],
        }
