"""Host wiring: turn raw markup into a complete DOM-building script."""

from __future__ import annotations

from typing import List

from .converter import ElementConverter
from .parsing import parse_fragment, top_level_elements
from .settings import ConverterSettings
from .statements import Statement, declare_fragment, render_script

FRAGMENT_NAME = "fragment"


def convert_markup(markup: str, settings: ConverterSettings | None = None) -> List[Statement]:
    """Convert every top-level element of ``markup`` in one converter session.

    With ``settings.fragment`` the elements are appended to a new
    DocumentFragment declared first. Raises ``NameResolutionError`` without
    partial output when any node cannot be named.
    """
    settings = settings or ConverterSettings()
    roots = top_level_elements(parse_fragment(markup, settings.parser))
    converter = ElementConverter(settings)

    res: List[Statement] = []
    append_to = None
    if settings.fragment:
        res.append(declare_fragment(FRAGMENT_NAME))
        converter.reserve(FRAGMENT_NAME)
        append_to = FRAGMENT_NAME
    res.extend(converter.convert_all(roots, append_to))
    return res


def markup_to_script(markup: str, settings: ConverterSettings | None = None) -> str:
    return render_script(convert_markup(markup, settings))
