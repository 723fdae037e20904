# dag.py
from __future__ import annotations

import logging
from typing import Optional, Tuple

from . import settings
from .errors import InvalidSpec
from .info import populate_info_from_template
from .layout import LayoutGraph
from .model import DagTask, NodeInfo, Workflow
from .templates import TemplateIndex, build_template_index

logger = logging.getLogger(__name__)


def _node_attrs(label: str, info: Optional[NodeInfo] = None, bg_color: Optional[str] = None) -> dict:
    attrs = {
        "bg_color": bg_color,
        "height": settings.NODE_HEIGHT,
        "label": label,
        "width": settings.NODE_WIDTH,
    }
    if info is not None:
        attrs["info"] = info
    return attrs


def _is_exit_handler(task: DagTask) -> bool:
    return task.name.startswith(settings.EXIT_HANDLER_PREFIX)


def build_subgraph(
    graph: LayoutGraph,
    template_name: str | None,
    templates: TemplateIndex,
    parent: Optional[str] = None,
    expanding: Tuple[str, ...] = (),
) -> None:
    """
    Emit nodes/edges for the dag template `template_name` into `graph`.

    - Non-dag or unknown `template_name`: nothing happens.
    - `parent`: the task whose template is this dag; gets a nesting edge
      to every task emitted at this level.
    - A task whose template is a dag is drawn as a node too, with
      node_type "dag" and its own condition.
    - `expanding`: dag templates on the current recursion path. A dag that
      references one of them is skipped (recursive templates are not drawn).
    """
    root = templates.lookup(template_name)
    if root is None or root.node_type != "dag":
        return

    if template_name in expanding:
        logger.warning(
            "Skipping recursive expansion of template %r (path: %s)",
            template_name, " -> ".join(expanding + (template_name,)),
        )
        return
    expanding = expanding + (template_name,)

    for task in root.template.dag.tasks or []:
        logger.debug("task %s -> template %s", task.name, task.template)

        # The compiler wraps the whole dag in its own exit-handler when the
        # user declares one; treat the wrapped dag as the root.
        if _is_exit_handler(task):
            build_subgraph(graph, task.template, templates, expanding=expanding)
        else:
            if parent:
                graph.set_edge(parent, task.name)

            info = NodeInfo()
            if task.when:
                info.condition = task.when

            child = templates.lookup(task.template)
            if child is not None:
                if child.node_type == "dag":
                    info.node_type = "dag"
                    build_subgraph(graph, task.template, templates, task.name, expanding)
                elif child.node_type == "container":
                    populate_info_from_template(info, child.template)

            graph.set_node(
                task.name,
                _node_attrs(
                    task.name,
                    info,
                    bg_color=settings.CONDITION_COLOR if task.when else None,
                ),
            )

        # Dependencies point from the task(s) that must finish first.
        for dep in task.dependencies or []:
            graph.set_edge(dep, task.name)


def create_graph(workflow: Workflow) -> LayoutGraph:
    """
    Flatten `workflow` into one LayoutGraph.

    Raises:
      InvalidSpec: the workflow has no spec or no template list.
    """
    graph = LayoutGraph()
    graph.set_graph({})
    graph.set_default_edge_label(dict)

    spec = workflow.spec
    if spec is None or spec.templates is None:
        raise InvalidSpec()

    # Argo allows a single global exit handler; it gets its own highlighted node.
    for template in spec.templates:
        if spec.on_exit and template.name == spec.on_exit:
            info = populate_info_from_template(NodeInfo(), template)
            graph.set_node(
                template.name,
                _node_attrs(
                    settings.ON_EXIT_LABEL_PREFIX + template.name,
                    info,
                    bg_color=settings.ON_EXIT_COLOR,
                ),
            )

    templates = build_template_index(spec.templates)
    build_subgraph(graph, spec.entrypoint, templates)

    # A workflow without any dag, just an entry point container.
    if graph.node_count() == 0:
        entry = next((t for t in spec.templates if t.name == spec.entrypoint), None)
        if entry is not None:
            logger.debug("No dag found, drawing entry point %s on its own", entry.name)
            graph.set_node(entry.name, {
                "height": settings.NODE_HEIGHT,
                "label": entry.name,
                "width": settings.NODE_WIDTH,
            })
        else:
            logger.warning("Entry point %r is not a declared template", spec.entrypoint)

    return graph
