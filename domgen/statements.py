"""JavaScript statement emitters for DOM reconstruction."""

from __future__ import annotations

import json
from typing import Sequence

Statement = str


def js_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def declare_element(name: str, tag: str) -> Statement:
    return f"let {name} = document.createElement({js_string(tag.lower())});"


def declare_text(name: str, value: str) -> Statement:
    return f"let {name} = document.createTextNode({js_string(value)});"


def declare_fragment(name: str) -> Statement:
    return f"let {name} = new DocumentFragment();"


def append_child(parent: str, child: str) -> Statement:
    return f"{parent}.appendChild({child});"


def append_new_element(parent: str, tag: str) -> Statement:
    return append_child(parent, f"document.createElement({js_string(tag.lower())})")


def append_new_text(parent: str, value: str) -> Statement:
    return append_child(parent, f"document.createTextNode({js_string(value)})")


def set_property(target: str, prop: str, value: str | bool) -> Statement:
    if isinstance(value, bool):
        literal = "true" if value else "false"
    else:
        literal = js_string(value)
    return f"{target}.{prop} = {literal};"


def set_attribute(target: str, name: str, value: str) -> Statement:
    return f"{target}.setAttribute({js_string(name)}, {js_string(value)});"


def add_classes(target: str, tokens: Sequence[str]) -> Statement:
    args = ", ".join(js_string(token) for token in tokens)
    return f"{target}.classList.add({args});"


def set_text_content(target: str, value: str) -> Statement:
    return set_property(target, "textContent", value)


def render_script(statements: Sequence[Statement]) -> str:
    """Join statements into a script body, one statement per line."""
    return "\n".join(statements)
