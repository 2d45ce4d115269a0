from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from dotgraph.catalog import UsageContext, get_attribute_info

if TYPE_CHECKING:
    from dotgraph.graph import Graph

# A graph-level set accepts cluster attributes too, since any graph can be attached as a cluster.
_ACCEPTED_CONTEXTS: dict[UsageContext, frozenset[UsageContext]] = {
    UsageContext.NODE: frozenset({UsageContext.NODE}),
    UsageContext.EDGE: frozenset({UsageContext.EDGE}),
    UsageContext.GRAPH: frozenset({UsageContext.GRAPH, UsageContext.CLUSTER}),
    UsageContext.CLUSTER: frozenset({UsageContext.CLUSTER}),
}


@dataclass(slots=True)
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def extend(self, other: ValidationResult) -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


def validate_attribute(name: str, context: UsageContext) -> ValidationResult:
    result = ValidationResult()
    info = get_attribute_info(name)
    if info is None or not (info.contexts & _ACCEPTED_CONTEXTS[context]):
        result.warnings.append(f"Invalid attribute '{name}' for {context.value}")
    return result


def validate_graph(graph: Graph) -> ValidationResult:
    """Lint a graph and every subgraph below it.

    Errors are structural problems (an id shared by a plain node and an HTML
    node of the same graph). Warnings cover attributes that are invalid for
    their context and edges whose endpoints are no longer part of the tree.
    """
    result = ValidationResult()
    graphs = list(_walk(graph))

    known_ids: set[str] = set()
    for current in graphs:
        known_ids.update(current.nodes)
        known_ids.update(current.html_nodes)

    for current in graphs:
        for node_id in current.nodes:
            if node_id in current.html_nodes:
                result.errors.append(f"duplicate node id in graph '{current.id}': {node_id}")

        graph_context = UsageContext.CLUSTER if current.is_subgraph else UsageContext.GRAPH
        _check_attributes(result, current.get(), graph_context)
        _check_attributes(result, current.get_nodes_attributes(), UsageContext.NODE)
        _check_attributes(result, current.get_edges_attributes(), UsageContext.EDGE)

        for node in current.nodes.values():
            _check_attributes(result, node.get(), UsageContext.NODE)
        for html_node in current.html_nodes.values():
            _check_attributes(result, html_node.get(), UsageContext.NODE)

        for edge in current.edges:
            _check_attributes(result, edge.get(), UsageContext.EDGE)
            for endpoint in (edge.source, edge.target):
                if endpoint.node.id not in known_ids:
                    result.warnings.append(f"edge references missing node: {endpoint.node.id}")

    return result


def _check_attributes(result: ValidationResult, attributes, context: UsageContext) -> None:
    for name in attributes:
        result.extend(validate_attribute(name, context))


def _walk(graph: Graph) -> Iterator[Graph]:
    yield graph
    for cluster in graph.clusters.values():
        yield from _walk(cluster)
