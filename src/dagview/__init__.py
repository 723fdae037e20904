from .dag import build_subgraph, create_graph
from .dsl import container, dag, param, task, workflow
from .errors import GraphError, InvalidSpec
from .info import output_value, populate_info_from_template
from .layout import LayoutGraph
from .model import NodeInfo, Template, Workflow
from .templates import TemplateIndex, build_template_index

__all__ = [
    "create_graph", "build_subgraph", "build_template_index", "TemplateIndex",
    "populate_info_from_template", "output_value", "LayoutGraph", "NodeInfo",
    "Template", "Workflow", "GraphError", "InvalidSpec",
    "container", "dag", "param", "task", "workflow",
]
