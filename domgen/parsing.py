"""Parse HTML fragments into converter nodes with BeautifulSoup."""

from __future__ import annotations

from typing import List, Sequence

from bs4 import BeautifulSoup, CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from .nodes import ElementNode, Node, OtherNode, TextNode

DOCUMENT_TEMPLATE = "<!DOCTYPE html><html><body>{markup}</body></html>"

_OTHER_STRINGS = (
    (Comment, "#comment"),
    (CData, "#cdata-section"),
    (ProcessingInstruction, "#processing-instruction"),
    (Doctype, "#doctype"),
    (Declaration, "#declaration"),
)

# SVG elements whose camelCase name is restored after html.parser lowercases it.
SVG_TAG_NAMES = {
    name.lower(): name
    for name in (
        "altGlyph",
        "altGlyphDef",
        "altGlyphItem",
        "animateColor",
        "animateMotion",
        "animateTransform",
        "clipPath",
        "feBlend",
        "feColorMatrix",
        "feComponentTransfer",
        "feComposite",
        "feConvolveMatrix",
        "feDiffuseLighting",
        "feDisplacementMap",
        "feDistantLight",
        "feDropShadow",
        "feFlood",
        "feFuncA",
        "feFuncB",
        "feFuncG",
        "feFuncR",
        "feGaussianBlur",
        "feImage",
        "feMerge",
        "feMergeNode",
        "feMorphology",
        "feOffset",
        "fePointLight",
        "feSpecularLighting",
        "feSpotLight",
        "feTile",
        "feTurbulence",
        "foreignObject",
        "glyphRef",
        "linearGradient",
        "radialGradient",
        "textPath",
    )
}


def _tag_name(tag: Tag) -> str:
    if tag.name in SVG_TAG_NAMES and tag.find_parent("svg") is not None:
        return SVG_TAG_NAMES[tag.name]
    return tag.name


def _from_soup(child: object) -> Node:
    if isinstance(child, Tag):
        attributes = tuple((name, str(value)) for name, value in child.attrs.items())
        children = tuple(_from_soup(grandchild) for grandchild in child.contents)
        return ElementNode(tag=_tag_name(child), attributes=attributes, children=children)
    for string_type, node_name in _OTHER_STRINGS:
        if isinstance(child, string_type):
            return OtherNode(name=node_name)
    if isinstance(child, NavigableString):
        return TextNode(content=str(child))
    return OtherNode(name=f"#{type(child).__name__.lower()}")


def parse_fragment(markup: str, parser: str = "html.parser") -> List[Node]:
    """Parse ``markup`` as the content of a document body and return its child nodes.

    Attribute values are kept as written; ``class`` and friends are not split.
    """
    soup = BeautifulSoup(DOCUMENT_TEMPLATE.format(markup=markup), parser, multi_valued_attributes=None)
    body = soup.body
    if body is None:
        return []
    return [_from_soup(child) for child in body.contents]


def top_level_elements(nodes: Sequence[Node]) -> List[ElementNode]:
    return [node for node in nodes if isinstance(node, ElementNode)]
