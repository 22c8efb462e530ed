import pytest

from domgen.converter import NameResolutionError
from domgen.session import convert_markup, markup_to_script
from domgen.settings import ConverterSettings


def test_sibling_divs_are_numbered() -> None:
    assert convert_markup("<div></div><div></div>") == [
        'let div = document.createElement("div");',
        'let div1 = document.createElement("div");',
    ]


def test_fragment_wraps_top_level_elements() -> None:
    settings = ConverterSettings(fragment=True)
    assert convert_markup('<div></div><p class="note">Hi</p>', settings) == [
        "let fragment = new DocumentFragment();",
        'fragment.appendChild(document.createElement("div"));',
        'let p = document.createElement("p");',
        'p.classList.add("note");',
        "fragment.appendChild(p);",
        'p.textContent = "Hi";',
    ]


def test_fragment_name_is_reserved() -> None:
    settings = ConverterSettings(fragment=True)
    statements = convert_markup('<form name="fragment"><input name="q"></form>', settings)
    assert statements[1] == 'let fragment1 = document.createElement("form");'
    assert statements[-1] == "fragment1.appendChild(q);"


def test_top_level_text_is_not_converted() -> None:
    assert convert_markup("intro <b>x</b> outro") == [
        'let b = document.createElement("b");',
        'b.textContent = "x";',
    ]


def test_ignore_whitespaces_trims_indented_markup() -> None:
    markup = """
    <ul id="menu">
        <li>One</li>
        <li>Two</li>
    </ul>
    """
    script = markup_to_script(markup, ConverterSettings(ignore_whitespaces=True))
    assert script.splitlines() == [
        'let menu = document.createElement("ul");',
        'menu.id = "menu";',
        'let li = document.createElement("li");',
        "menu.appendChild(li);",
        'li.textContent = "One";',
        'let li1 = document.createElement("li");',
        "menu.appendChild(li1);",
        'li1.textContent = "Two";',
    ]


def test_whitespace_kept_without_trimming() -> None:
    statements = convert_markup("<ul>\n<li>One</li>\n</ul>")
    assert statements[1] == 'ul.appendChild(document.createTextNode("\\n"));'
    assert statements[-1] == 'ul.appendChild(document.createTextNode("\\n"));'


def test_conversion_failure_propagates(monkeypatch: pytest.MonkeyPatch) -> None:
    from domgen import session
    from domgen.nodes import ElementNode

    monkeypatch.setattr(session, "parse_fragment", lambda markup, parser: [ElementNode(tag="???")])
    with pytest.raises(NameResolutionError):
        convert_markup("<div></div>")


def test_attribute_values_reach_statements_unchanged() -> None:
    assert convert_markup('<td headers="h1\th2">x</td>') == [
        'let td = document.createElement("td");',
        'td.setAttribute("headers", "h1\\th2");',
        'td.textContent = "x";',
    ]
    statements = convert_markup('<a rel="  noopener   nofollow ">x</a>')
    assert statements[1] == 'a.setAttribute("rel", "  noopener   nofollow ");'


def test_class_tokens_split_after_parsing() -> None:
    statements = convert_markup('<p class=" a\tb  ">x</p>')
    assert statements[1] == 'p.classList.add("a", "b");'


def test_svg_identifier_keeps_camel_case() -> None:
    statements = convert_markup('<svg><linearGradient x1="0"></linearGradient></svg>')
    assert statements[1] == 'let linearGradient = document.createElement("lineargradient");'
