from pathlib import Path

import pytest

from scripts import convert_html_dir
from scripts.convert_html_dir import convert_directory
from domgen.converter import NameResolutionError
from domgen.settings import ConverterSettings


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_converts_nested_directories(tmp_path: Path) -> None:
    src = tmp_path / "src"
    _write(src / "a.html", "<div></div><div></div>")
    _write(src / "nested" / "b.html", '<label for="q">Search</label>')
    _write(src / "notes.txt", "<p>ignored</p>")
    out = tmp_path / "out"

    failed = convert_directory(src, out, ConverterSettings())

    assert failed == []
    assert (out / "a.js").read_text(encoding="utf-8") == (
        'let div = document.createElement("div");\n'
        'let div1 = document.createElement("div");\n'
    )
    assert (out / "nested" / "b.js").read_text(encoding="utf-8").splitlines() == [
        'let label = document.createElement("label");',
        'label.htmlFor = "q";',
        'label.textContent = "Search";',
    ]
    assert not (out / "notes.js").exists()


def test_failures_are_reported_and_skipped(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    src = tmp_path / "src"
    _write(src / "bad.html", "<p>bad</p>")
    _write(src / "good.html", "<p>good</p>")
    out = tmp_path / "out"

    real = convert_html_dir.markup_to_script

    def _fake(markup, settings):
        if "bad" in markup:
            raise NameResolutionError("Unable to find a name for node 'p'")
        return real(markup, settings)

    monkeypatch.setattr(convert_html_dir, "markup_to_script", _fake)

    assert convert_html_dir.main(["--src", str(src), "--out", str(out)]) == 1
    assert "bad.html: Unable to find a name" in capsys.readouterr().err
    assert not (out / "bad.js").exists()
    assert (out / "good.js").exists()


def test_missing_source_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        convert_directory(tmp_path / "nope", tmp_path / "out", ConverterSettings())
