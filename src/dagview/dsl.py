# src/dagview/dsl.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .model import (
    ContainerSpec,
    DagSpec,
    DagTask,
    Parameter,
    Parameters,
    Template,
    ValueFrom,
    Workflow,
    WorkflowSpec,
)


# ---------------------------------------------------------------------
# Parameter helper
# ---------------------------------------------------------------------

def param(
    name: str,
    value: str | None = None,
    *,
    jq_filter: str | None = None,
    json_path: str | None = None,
    parameter: str | None = None,
    path: str | None = None,
) -> Parameter:
    """Create a parameter. Any value_from source given creates a valueFrom block."""
    sources: Dict[str, Optional[str]] = dict(
        jq_filter=jq_filter, json_path=json_path, parameter=parameter, path=path,
    )
    value_from = ValueFrom(**sources) if any(v is not None for v in sources.values()) else None
    return Parameter(name=name, value=value, value_from=value_from)


def _parameters(params: Optional[Sequence[Parameter]]) -> Optional[Parameters]:
    if params is None:
        return None
    return Parameters(parameters=list(params))


# ---------------------------------------------------------------------
# Template helpers
# ---------------------------------------------------------------------

def container(
    name: str,
    image: str | None = None,
    *,
    command: Optional[List[str]] = None,
    args: Optional[List[str]] = None,
    inputs: Optional[Sequence[Parameter]] = None,
    outputs: Optional[Sequence[Parameter]] = None,
) -> Template:
    """Leaf template. Pass inputs=[] to declare an empty inputs block."""
    return Template(
        name=name,
        container=ContainerSpec(image=image, command=command, args=args),
        inputs=_parameters(inputs),
        outputs=_parameters(outputs),
    )


def task(
    name: str,
    template: str,
    *,
    dependencies: Optional[List[str]] = None,
    when: str | None = None,
) -> DagTask:
    return DagTask(name=name, template=template, dependencies=dependencies, when=when)


def dag(name: str, *tasks: DagTask, tasks_list: Optional[List[DagTask]] = None) -> Template:
    """
    Composite template.

    Example:
        dag("main", task("a", "run"), task("b", "run", dependencies=["a"]))
    """
    tasks_final: List[DagTask] = list(tasks_list or []) + list(tasks)
    return Template(name=name, dag=DagSpec(tasks=tasks_final))


# ---------------------------------------------------------------------
# Workflow helper
# ---------------------------------------------------------------------

def workflow(entrypoint: str, *templates: Template, on_exit: str | None = None) -> Workflow:
    """
    Workflow document helper:

        wf = workflow(
            "main",
            dag("main", task("hello", "say")),
            container("say", "busybox", command=["echo"]),
        )
    """
    return Workflow(
        spec=WorkflowSpec(entrypoint=entrypoint, templates=list(templates), on_exit=on_exit)
    )
