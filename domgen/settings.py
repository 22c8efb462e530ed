"""Pydantic settings for the converter and its host."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConverterSettings(BaseModel):
    """Options recognised by the converter and the command-line host."""

    ignore_whitespaces: bool = Field(
        False,
        alias="ignoreWhitespaces",
        description="Skip whitespace-only text nodes and trim text before emission.",
    )
    fragment: bool = Field(
        False,
        alias="addFragment",
        description="Append top-level nodes to a new DocumentFragment named 'fragment'.",
    )
    parser: str = Field(
        "html.parser",
        description="BeautifulSoup tree builder used to parse the markup.",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


def load_settings(path: Path) -> ConverterSettings:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of settings.")
    try:
        return ConverterSettings.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid settings in {path}: {exc}") from exc
