import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from dotgraph.catalog import UsageContext, get_attribute_info
from dotgraph.errors import InvalidAttributeError
from dotgraph.validation import ValidationResult, validate_attribute

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AttributeSet:
    """Attribute name/value pairs for one usage context, in first-write order."""

    context: UsageContext
    html: bool = False
    strict: bool = False
    entries: dict[str, Any] = field(default_factory=dict)

    def set(self, attributes: Mapping[str, Any] | None) -> ValidationResult:
        """Store ``attributes``, overwriting existing names in place.

        Names that are unknown or not valid for this context are reported as
        warnings and stored anyway. A strict set raises
        :class:`InvalidAttributeError` instead and stores nothing.
        """
        result = ValidationResult()
        if not attributes:
            return result

        for name in attributes:
            check = validate_attribute(name, self.context)
            if check.warnings and self.strict:
                raise InvalidAttributeError(check.warnings[0], name=name, context=self.context)
            result.extend(check)

        for warning in result.warnings:
            logger.warning(warning)
        self.entries.update(attributes)
        return result

    def get(self) -> Mapping[str, Any]:
        return MappingProxyType(self.entries)

    def count(self) -> int:
        return len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def to_dot(self, extra: Mapping[str, Any] | None = None) -> str:
        # None values are unset and not emitted.
        items = {
            name: value
            for name, value in {**self.entries, **(extra or {})}.items()
            if value is not None
        }
        if not items:
            return ""
        pairs = [f"{name}={self._quote(name, value)}" for name, value in items.items()]
        return " [" + ", ".join(pairs) + "]"

    def _quote(self, name: str, value: Any) -> str:
        text = format_value(value)
        if name == "label" and self.html:
            return text
        if must_be_quoted(name):
            return f'"{text}"'
        return text


def must_be_quoted(name: str) -> bool:
    info = get_attribute_info(name)
    # Unknown names have no declared type, so they are quoted.
    if info is None:
        return True
    return info.quoted


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
