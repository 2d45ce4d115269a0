from dotgraph.attributes import AttributeSet
from dotgraph.catalog import (
    AttributeInfo,
    GraphKind,
    UsageContext,
    ValueType,
    get_attribute_info,
    list_attributes,
)
from dotgraph.edge import CompassPoint, Edge, Endpoint
from dotgraph.errors import (
    CompassPointError,
    DotGraphError,
    InvalidAttributeError,
    SubgraphError,
    SubgraphKindError,
)
from dotgraph.graph import Digraph, Graph
from dotgraph.node import Cell, HTMLNode, Node
from dotgraph.output import write_dot
from dotgraph.validation import ValidationResult, validate_attribute, validate_graph

__all__ = [
    "AttributeInfo",
    "AttributeSet",
    "Cell",
    "CompassPoint",
    "CompassPointError",
    "Digraph",
    "DotGraphError",
    "Edge",
    "Endpoint",
    "Graph",
    "GraphKind",
    "HTMLNode",
    "InvalidAttributeError",
    "Node",
    "SubgraphError",
    "SubgraphKindError",
    "UsageContext",
    "ValidationResult",
    "ValueType",
    "get_attribute_info",
    "list_attributes",
    "validate_attribute",
    "validate_graph",
    "write_dot",
]
