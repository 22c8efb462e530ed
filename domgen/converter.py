"""Convert node trees into JavaScript statements that rebuild them."""

from __future__ import annotations

import re
from typing import Iterable, List, Set

from .attributes import AttributeConverter, default_converters, find_converter
from .nodes import ElementNode, Node, TextNode
from .settings import ConverterSettings
from .statements import (
    Statement,
    append_child,
    append_new_element,
    append_new_text,
    declare_element,
    declare_text,
    set_text_content,
)

LOWERCASE_RE = re.compile(r"[a-z]")
INVALID_NAME_CHARS_RE = re.compile(r"[^\w-]", re.ASCII)
SEPARATOR_RE = re.compile(r"[-_].")
# Whitespace as matched by JavaScript \s and String.prototype.trim.
JS_WHITESPACE = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
BLANK_RE = re.compile(f"[{JS_WHITESPACE}]*")
TRIM_RE = re.compile(rf"\A[{JS_WHITESPACE}]+|[{JS_WHITESPACE}]+\Z")


class NameResolutionError(ValueError):
    """No identifier can be derived from a node's name, id or node name."""


def normalize_node_name(name: str | None) -> str | None:
    """Turn a raw name into a camelCase identifier, or None if nothing is left."""
    if not name:
        return None
    if not LOWERCASE_RE.search(name):
        name = name.lower()
    name = INVALID_NAME_CHARS_RE.sub("", name)
    name = SEPARATOR_RE.sub(lambda match: match.group(0)[1:].upper(), name)
    name = name[:1].lower() + name[1:]
    return name or None


def _is_blank(text: str) -> bool:
    return BLANK_RE.fullmatch(text) is not None


def _trim(text: str) -> str:
    return TRIM_RE.sub("", text)


class ElementConverter:
    """Recursive tree walker owning the identifiers allocated in one session.

    Reusing an instance across conversions keeps ``used_names``, so names in
    later trees avoid names from earlier ones. Build a new converter for an
    independent namespace.
    """

    def __init__(self, settings: ConverterSettings | None = None) -> None:
        self.settings = settings or ConverterSettings()
        self.attribute_converters: List[AttributeConverter] = default_converters(self.settings)
        self.used_names: Set[str] = set()

    def reserve(self, name: str) -> None:
        self.used_names.add(name)

    def convert(self, node: Node, append_to: str | None = None, name: str | None = None) -> List[Statement]:
        """Return the statements for ``node`` and its descendants.

        On ``NameResolutionError`` the used names are restored to their state
        before the call.
        """
        snapshot = set(self.used_names)
        try:
            return self._convert(node, append_to, name)
        except NameResolutionError:
            self.used_names = snapshot
            raise

    def convert_all(self, nodes: Iterable[Node], append_to: str | None = None) -> List[Statement]:
        snapshot = set(self.used_names)
        res: List[Statement] = []
        try:
            for node in nodes:
                res.extend(self._convert(node, append_to, None))
        except NameResolutionError:
            self.used_names = snapshot
            raise
        return res

    def _convert(self, node: Node, append_to: str | None, name: str | None) -> List[Statement]:
        if not name:
            name = self.get_valid_name(node)
        if isinstance(node, TextNode):
            return self._convert_text(node, append_to, name)
        if not isinstance(node, ElementNode):
            return []
        if append_to and not node.attributes and not node.children:
            return [append_new_element(append_to, node.tag)]

        self.used_names.add(name)
        res = [declare_element(name, node.tag)]
        for attr_name, value in node.attributes:
            converter = find_converter(self.attribute_converters, attr_name)
            if converter is None:
                continue
            res.extend(converter.apply(name, attr_name, value))
        if append_to:
            res.append(append_child(append_to, name))

        if len(node.children) == 1 and isinstance(node.children[0], TextNode):
            text = node.text_content
            if self.settings.ignore_whitespaces:
                if _is_blank(text):
                    return res
                text = _trim(text)
            res.append(set_text_content(name, text))
            return res

        for child in node.children:
            res.extend(self._convert(child, name, None))
        return res

    def _convert_text(self, node: TextNode, append_to: str | None, name: str) -> List[Statement]:
        value = node.content
        if not value:
            return []
        if self.settings.ignore_whitespaces:
            if _is_blank(value):
                return []
            value = _trim(value)
        if not append_to:
            self.used_names.add(name)
            return [declare_text(name, value)]
        return [append_new_text(append_to, value)]

    def get_valid_name(self, node: Node) -> str:
        """Derive an unused identifier from the node's form name, id or node name."""
        form_name = element_id = None
        if isinstance(node, ElementNode):
            form_name = node.form_name
            element_id = node.element_id
        base = (
            normalize_node_name(form_name)
            or normalize_node_name(element_id)
            or normalize_node_name(node.node_name)
        )
        if not base:
            raise NameResolutionError(f"Unable to find a name for node {node.node_name!r}")
        if base not in self.used_names:
            return base
        suffix = 1
        while f"{base}{suffix}" in self.used_names:
            suffix += 1
        return f"{base}{suffix}"
