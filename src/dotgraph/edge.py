from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from dotgraph.attributes import AttributeSet
from dotgraph.catalog import GraphKind, UsageContext
from dotgraph.errors import CompassPointError
from dotgraph.node import Node
from dotgraph.validation import ValidationResult

if TYPE_CHECKING:
    from dotgraph.graph import Graph


class CompassPoint(str, Enum):
    N = "n"
    NE = "ne"
    E = "e"
    SE = "se"
    S = "s"
    SW = "sw"
    W = "w"
    NW = "nw"


@dataclass(slots=True)
class Endpoint:
    node: Node
    port: str | None = None
    compass_point: CompassPoint | None = None

    def to_dot(self) -> str:
        output = f'"{self.node.id}"'
        if self.port:
            output += f":{self.port}"
        if self.compass_point is not None:
            output += f":{self.compass_point.value}"
        return output


@dataclass(slots=True)
class Edge:
    """Relation between two nodes.

    The edge operator comes from the owning graph's kind when the edge is
    serialized, not when it is created.
    """

    graph: Graph = field(repr=False, compare=False)
    source: Endpoint
    target: Endpoint
    attributes: AttributeSet = field(default_factory=lambda: AttributeSet(UsageContext.EDGE))

    def set(self, attributes: Mapping[str, Any] | None) -> ValidationResult:
        return self.attributes.set(attributes)

    def get(self) -> Mapping[str, Any]:
        return self.attributes.get()

    def set_source_port(self, port: str | None, compass_point: CompassPoint | str | None = None) -> None:
        compass = _compass(compass_point)
        self.source.port = port
        self.source.compass_point = compass

    def set_target_port(self, port: str | None, compass_point: CompassPoint | str | None = None) -> None:
        compass = _compass(compass_point)
        self.target.port = port
        self.target.compass_point = compass

    def to_dot(self) -> str:
        operator = "--" if self.graph.kind is GraphKind.GRAPH else "->"
        return f"{self.source.to_dot()} {operator} {self.target.to_dot()}" + self.attributes.to_dot()


def _compass(value: CompassPoint | str | None) -> CompassPoint | None:
    if value is None or value == "":
        return None
    try:
        return CompassPoint(value)
    except ValueError as exc:
        raise CompassPointError(f"Unknown compass point: {value!r}", cause=exc) from exc
