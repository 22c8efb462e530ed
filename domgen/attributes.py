"""Attribute converters mapping markup attributes to JavaScript statements.

Each converter claims a set of attribute names through ``can_handle`` and
emits the statements setting that attribute on a target reference. The
chain returned by :func:`default_converters` is queried in order and the
first converter that claims an attribute wins; the generic
:class:`AttributeConverter` claims everything and is always last.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from .settings import ConverterSettings
from .statements import Statement, add_classes, set_attribute, set_property


class AttributeConverter:
    """Fallback converter emitting a plain ``setAttribute`` call."""

    def __init__(self, settings: ConverterSettings | None = None) -> None:
        self.settings = settings or ConverterSettings()

    def can_handle(self, name: str) -> bool:
        return True

    def apply(self, target: str, name: str, value: str) -> List[Statement]:
        return [set_attribute(target, name, value)]


class MappedPropertyConverter(AttributeConverter):
    """Attributes whose DOM property has a different name."""

    mapped_properties: Dict[str, str] = {"for": "htmlFor"}

    def can_handle(self, name: str) -> bool:
        return name in self.mapped_properties

    def apply(self, target: str, name: str, value: str) -> List[Statement]:
        return [set_property(target, self.mapped_properties[name], value)]


class StringPropertyConverter(AttributeConverter):
    properties = frozenset({"name", "value", "id", "lang", "style", "title", "label", "type"})

    def can_handle(self, name: str) -> bool:
        return name in self.properties

    def apply(self, target: str, name: str, value: str) -> List[Statement]:
        return [set_property(target, name, value)]


class BooleanPropertyConverter(AttributeConverter):
    """Presence-only attributes; the attribute value is ignored."""

    properties = frozenset({"checked", "disabled", "selected", "readonly"})

    def can_handle(self, name: str) -> bool:
        return name in self.properties

    def apply(self, target: str, name: str, value: str) -> List[Statement]:
        return [set_property(target, name, True)]


class ClassListConverter(AttributeConverter):
    def can_handle(self, name: str) -> bool:
        return name == "class"

    def apply(self, target: str, name: str, value: str) -> List[Statement]:
        tokens = value.split()
        if not tokens:
            return []
        return [add_classes(target, tokens)]


def default_converters(settings: ConverterSettings | None = None) -> List[AttributeConverter]:
    return [
        MappedPropertyConverter(settings),
        StringPropertyConverter(settings),
        BooleanPropertyConverter(settings),
        ClassListConverter(settings),
        AttributeConverter(settings),
    ]


def find_converter(converters: Sequence[AttributeConverter], name: str) -> AttributeConverter | None:
    for converter in converters:
        if converter.can_handle(name):
            return converter
    return None
