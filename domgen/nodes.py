"""Closed node model consumed by the element converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

# Elements whose DOM interface reflects the ``name`` attribute as a property.
FORM_NAME_TAGS = frozenset(
    {
        "a",
        "button",
        "embed",
        "fieldset",
        "form",
        "frame",
        "iframe",
        "img",
        "input",
        "map",
        "meta",
        "object",
        "output",
        "param",
        "select",
        "slot",
        "textarea",
    }
)


@dataclass(frozen=True)
class ElementNode:
    tag: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["Node", ...] = field(default_factory=tuple)

    @property
    def node_name(self) -> str:
        return self.tag

    def get(self, name: str) -> str | None:
        for attr_name, value in self.attributes:
            if attr_name == name:
                return value
        return None

    @property
    def form_name(self) -> str | None:
        if self.tag.lower() not in FORM_NAME_TAGS:
            return None
        return self.get("name")

    @property
    def element_id(self) -> str | None:
        return self.get("id")

    @property
    def text_content(self) -> str:
        parts = []
        for child in self.children:
            if isinstance(child, TextNode):
                parts.append(child.content)
            elif isinstance(child, ElementNode):
                parts.append(child.text_content)
        return "".join(parts)


@dataclass(frozen=True)
class TextNode:
    content: str

    @property
    def node_name(self) -> str:
        return "#text"


@dataclass(frozen=True)
class OtherNode:
    """Comments, doctypes and other nodes that produce no statements."""

    name: str = "#comment"

    @property
    def node_name(self) -> str:
        return self.name


Node = Union[ElementNode, TextNode, OtherNode]


def element(tag: str, attributes: dict[str, str] | None = None, *children: Node) -> ElementNode:
    """Build an element node with attributes kept in insertion order."""
    attrs = tuple((attributes or {}).items())
    return ElementNode(tag=tag, attributes=attrs, children=tuple(children))
