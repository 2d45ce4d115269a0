from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from dotgraph.attributes import AttributeSet
from dotgraph.catalog import GraphKind, UsageContext
from dotgraph.edge import Edge, Endpoint
from dotgraph.errors import SubgraphError, SubgraphKindError
from dotgraph.node import HTMLNode, Node
from dotgraph.output import write_dot
from dotgraph.validation import ValidationResult


class Graph:
    """Undirected graph, or a cluster once attached to a parent with :meth:`add_subgraph`.

    Nodes, HTML nodes, clusters and edges are emitted in insertion order, so
    graphs built by the same sequence of calls serialize identically.

    With ``strict=True`` attributes that are invalid for their context raise
    :class:`~dotgraph.errors.InvalidAttributeError` instead of logging a warning.
    """

    kind = GraphKind.GRAPH

    def __init__(self, id: str = "", *, strict: bool = False):
        self.id = id
        self.strict = strict
        self._parent: Graph | None = None
        self._clusters: dict[str, Graph] = {}
        self._nodes: dict[str, Node] = {}
        self._html_nodes: dict[str, HTMLNode] = {}
        self._edges: list[Edge] = []
        self._graph_attributes = AttributeSet(UsageContext.GRAPH, strict=strict)
        self._nodes_attributes = AttributeSet(UsageContext.NODE, strict=strict)
        self._edges_attributes = AttributeSet(UsageContext.EDGE, strict=strict)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"

    @property
    def parent(self) -> Graph | None:
        return self._parent

    @property
    def is_subgraph(self) -> bool:
        return self._parent is not None

    @property
    def nodes(self) -> Mapping[str, Node]:
        return MappingProxyType(self._nodes)

    @property
    def html_nodes(self) -> Mapping[str, HTMLNode]:
        return MappingProxyType(self._html_nodes)

    @property
    def clusters(self) -> Mapping[str, Graph]:
        return MappingProxyType(self._clusters)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def add_subgraph(self, graph: Graph) -> Graph:
        """Attach ``graph`` as a subgraph/cluster of this graph.

        Example:
            >>> g = Graph("parent")
            >>> c = g.add_subgraph(Graph("cluster0"))
            >>> c.parent is g
            True
        """
        if graph.kind != self.kind:
            raise SubgraphKindError(
                f"Cannot add {graph.kind.value} '{graph.id}' as a subgraph of {self.kind.value} '{self.id}'",
                expected=self.kind.value,
                actual=graph.kind.value,
            )
        if graph._parent is not None and graph._parent is not self:
            raise SubgraphError(f"Graph '{graph.id}' is already a subgraph of '{graph._parent.id}'")
        ancestor: Graph | None = self
        while ancestor is not None:
            if ancestor is graph:
                raise SubgraphError(f"Graph '{graph.id}' cannot be a subgraph of itself")
            ancestor = ancestor._parent

        replaced = self._clusters.get(graph.id)
        if replaced is not None and replaced is not graph:
            replaced._parent = None
        self._clusters[graph.id] = graph
        graph._parent = self
        return graph

    def add_node(self, id: str, attributes: Mapping[str, Any] | None = None) -> Node:
        """Create a node, replacing any existing node with the same id."""
        node = Node(id=id, attributes=AttributeSet(UsageContext.NODE, strict=self.strict))
        node.set(attributes)
        self._nodes[id] = node
        return node

    def add_html_node(self, id: str, attributes: Mapping[str, Any] | None = None) -> HTMLNode:
        """Create a node with an HTML table label, replacing any existing HTML node with the same id."""
        node = HTMLNode(
            id=id,
            attributes=AttributeSet(UsageContext.NODE, html=True, strict=self.strict),
        )
        node.set(attributes)
        self._html_nodes[id] = node
        return node

    def get_node(self, id: str) -> Node | None:
        if id in self._nodes:
            return self._nodes[id]
        return self._html_nodes.get(id)

    def remove_node(self, id: str, force: bool = False) -> None:
        """Remove a node. With ``force`` also drop every edge touching it."""
        if force:
            self._edges = [
                edge
                for edge in self._edges
                if edge.source.node.id != id and edge.target.node.id != id
            ]
        self._nodes.pop(id, None)
        self._html_nodes.pop(id, None)

    def node_count(self) -> int:
        return len(self._nodes)

    def add_edge(
        self,
        source: Node | str,
        target: Node | str,
        attributes: Mapping[str, Any] | None = None,
    ) -> Edge:
        """Connect two nodes. Ids not yet in this graph create bare nodes."""
        edge_attributes = AttributeSet(UsageContext.EDGE, strict=self.strict)
        edge_attributes.set(attributes)
        edge = Edge(
            graph=self,
            source=Endpoint(self._resolve(source)),
            target=Endpoint(self._resolve(target)),
            attributes=edge_attributes,
        )
        self._edges.append(edge)
        return edge

    def edge_count(self) -> int:
        return len(self._edges)

    def set(self, attributes: Mapping[str, Any] | None) -> ValidationResult:
        return self._graph_attributes.set(attributes)

    def get(self) -> Mapping[str, Any]:
        return self._graph_attributes.get()

    def set_nodes_attributes(self, attributes: Mapping[str, Any] | None) -> ValidationResult:
        return self._nodes_attributes.set(attributes)

    def get_nodes_attributes(self) -> Mapping[str, Any]:
        return self._nodes_attributes.get()

    def set_edges_attributes(self, attributes: Mapping[str, Any] | None) -> ValidationResult:
        return self._edges_attributes.set(attributes)

    def get_edges_attributes(self) -> Mapping[str, Any]:
        return self._edges_attributes.get()

    def to_dot(self) -> str:
        """Serialize the graph, and its subgraphs, to DOT source."""
        # Subgraph indentation is fixed and does not deepen with nesting.
        if self._parent is None:
            spacer = "  "
            lines = [f'{self.kind.value} "{self.id}" {{\n']
        else:
            spacer = "    "
            lines = [f'  subgraph "{self.id}" {{\n']

        for scope, attributes in (
            ("graph", self._graph_attributes),
            ("node", self._nodes_attributes),
            ("edge", self._edges_attributes),
        ):
            rendered = attributes.to_dot()
            if rendered:
                lines.append(spacer + scope + rendered + ";\n")

        for cluster in self._clusters.values():
            lines.append(cluster.to_dot() + "\n")
        for node in self._nodes.values():
            lines.append(spacer + node.to_dot() + ";\n")
        for html_node in self._html_nodes.values():
            lines.append(spacer + html_node.to_dot() + ";\n")
        for edge in self._edges:
            lines.append(spacer + edge.to_dot() + ";\n")

        lines.append("  }" if self._parent is not None else "}\n")
        return "".join(lines)

    def render(self, filename: str | None = None, directory: str | Path | None = None) -> Path:
        """Write :meth:`to_dot` output to ``<filename or 'out'>.dot``."""
        return write_dot(self.to_dot(), stem=filename, directory=directory)

    def _resolve(self, node: Node | str) -> Node:
        if isinstance(node, Node):
            return node
        existing = self.get_node(node)
        if existing is None:
            existing = self.add_node(node)
        return existing


class Digraph(Graph):
    """Directed graph."""

    kind = GraphKind.DIGRAPH
