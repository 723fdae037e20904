# layout.py
"""Mutable directed graph handed to the layout step.

Wraps a networkx DiGraph with the node/edge operations the builder needs.
Edges may name nodes that do not exist yet; they are created implicitly and
get their attributes when `set_node` is later called for them.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

import networkx as nx


Attrs = Dict[str, Any]


class LayoutGraph:
    def __init__(self) -> None:
        self._graph: nx.DiGraph = nx.DiGraph()
        self._default_edge_label: Callable[[], Attrs] = dict

    # ---- graph-level ----

    def set_graph(self, attrs: Optional[Attrs] = None) -> "LayoutGraph":
        self._graph.graph.clear()
        self._graph.graph.update(attrs or {})
        return self

    def graph(self) -> Attrs:
        return self._graph.graph

    def set_default_edge_label(self, factory: Callable[[], Attrs]) -> "LayoutGraph":
        """Attributes factory used for edges set without explicit attributes."""
        self._default_edge_label = factory
        return self

    # ---- nodes ----

    def set_node(self, name: str, attrs: Optional[Attrs] = None) -> "LayoutGraph":
        """Create or replace node `name` with `attrs`."""
        if self._graph.has_node(name):
            self._graph.nodes[name].clear()
        self._graph.add_node(name)
        self._graph.nodes[name].update(attrs or {})
        return self

    def has_node(self, name: str) -> bool:
        return self._graph.has_node(name)

    def node(self, name: str) -> Optional[Attrs]:
        if not self._graph.has_node(name):
            return None
        return self._graph.nodes[name]

    def nodes(self) -> List[str]:
        return list(self._graph.nodes)

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    # ---- edges ----

    def set_edge(self, source: str, target: str, attrs: Optional[Attrs] = None) -> "LayoutGraph":
        """Create or replace edge source -> target (endpoints created if missing)."""
        label = attrs if attrs is not None else self._default_edge_label()
        if self._graph.has_edge(source, target):
            self._graph.edges[source, target].clear()
        self._graph.add_edge(source, target)
        self._graph.edges[source, target].update(label)
        return self

    def has_edge(self, source: str, target: str) -> bool:
        return self._graph.has_edge(source, target)

    def edge(self, source: str, target: str) -> Optional[Attrs]:
        if not self._graph.has_edge(source, target):
            return None
        return self._graph.edges[source, target]

    def edges(self) -> List[Tuple[str, str]]:
        return list(self._graph.edges)

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def successors(self, name: str) -> List[str]:
        return list(self._graph.successors(name)) if self._graph.has_node(name) else []

    def predecessors(self, name: str) -> List[str]:
        return list(self._graph.predecessors(name)) if self._graph.has_node(name) else []

    # ---- interop ----

    def to_networkx(self) -> nx.DiGraph:
        """Frozen copy of the underlying graph for layout/analysis code."""
        return nx.freeze(self._graph.copy())

    def __iter__(self) -> Iterator[str]:
        return iter(self._graph.nodes)

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __repr__(self) -> str:
        return f"LayoutGraph(nodes={self.node_count()}, edges={self.edge_count()})"
