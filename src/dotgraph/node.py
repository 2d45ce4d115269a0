from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from dotgraph.attributes import AttributeSet
from dotgraph.catalog import UsageContext
from dotgraph.validation import ValidationResult


@dataclass(slots=True)
class Node:
    id: str
    attributes: AttributeSet = field(default_factory=lambda: AttributeSet(UsageContext.NODE))

    def set(self, attributes: Mapping[str, Any] | None) -> ValidationResult:
        return self.attributes.set(attributes)

    def get(self) -> Mapping[str, Any]:
        return self.attributes.get()

    def to_dot(self) -> str:
        return f'"{self.id}"' + self.attributes.to_dot()


@dataclass(slots=True, frozen=True)
class Cell:
    content: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def to_html(self) -> str:
        if not self.attributes:
            return f"<td>{self.content}</td>"
        return f"<td {_html_attributes(self.attributes)}>{self.content}</td>"


@dataclass(slots=True)
class HTMLNode(Node):
    """Node whose label is an HTML-like table built row by row.

    Table and cell attributes belong to the HTML vocabulary, not the Graphviz
    attribute catalog, and are written verbatim.
    """

    attributes: AttributeSet = field(
        default_factory=lambda: AttributeSet(UsageContext.NODE, html=True)
    )
    table_attributes: dict[str, Any] = field(default_factory=dict)
    _rows: list[str] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.attributes.html = True

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple(self._rows)

    def add_row(self, cells: Iterable[Cell | Mapping[str, Any]]) -> str:
        row = "<tr>" + "".join(_as_cell(cell).to_html() for cell in cells) + "</tr>"
        self._rows.append(row)
        return row

    def set_table_attributes(self, attributes: Mapping[str, Any]) -> None:
        self.table_attributes = dict(attributes)

    def table(self) -> str:
        if self.table_attributes:
            opening = f"<table {_html_attributes(self.table_attributes)}>"
        else:
            opening = "<table>"
        return opening + "".join(self._rows) + "</table>"

    def to_dot(self) -> str:
        label = "<" + self.table() + ">"
        return f'"{self.id}"' + self.attributes.to_dot(extra={"label": label})


def _as_cell(cell: Cell | Mapping[str, Any]) -> Cell:
    if isinstance(cell, Cell):
        return cell
    content = cell.get("content", cell.get("data", ""))
    return Cell(content=str(content), attributes=dict(cell.get("attributes") or {}))


def _html_attributes(attributes: Mapping[str, Any]) -> str:
    return " ".join(f'{name}="{value}"' for name, value in attributes.items())
