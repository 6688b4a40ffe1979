"""Converter options and their YAML loader."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Dict, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_STYLE_TAGS: Mapping[str, str] = MappingProxyType(
    {
        "NAMED_STYLE_TYPE_UNSPECIFIED": "div",
        "NORMAL_TEXT": "p",
        "TITLE": "h1",
        "SUBTITLE": "h1",
        "HEADING_1": "h1",
        "HEADING_2": "h2",
        "HEADING_3": "h3",
        "HEADING_4": "h4",
        "HEADING_5": "h5",
        "HEADING_6": "h6",
    }
)


class ConverterOptions(BaseModel):
    """Toggles controlling how a document is turned into HTML."""

    skip_blank_runs: bool = Field(
        False, description="Drop text runs made only of whitespace."
    )
    render_suggestions: bool = Field(
        True, description="Wrap suggested insertions/deletions in ins/del."
    )
    render_highlight: bool = Field(
        True, description="Wrap runs with a background colour in mark."
    )
    merge_inline: bool = Field(
        True,
        description="Extend a trailing wrapper with the same tag instead of opening a new one.",
    )
    default_block_tag: str = Field(
        "div", min_length=1, description="Block tag for unknown or missing named styles."
    )
    default_list_tag: str = Field(
        "ul", min_length=1, description="Container tag for bullets whose list is unknown."
    )
    style_tags: Dict[str, Annotated[str, Field(min_length=1)]] = Field(
        default_factory=lambda: dict(DEFAULT_STYLE_TAGS),
        description="Named style type to block tag.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


def load_options(path: Path) -> ConverterOptions:
    """Read options from a YAML mapping; an empty file yields the defaults."""
    if not path.is_file():
        raise SystemExit(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Invalid converter options in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of converter options.")
    # Partial style tables extend the defaults rather than replacing them.
    if "style_tags" in data and isinstance(data["style_tags"], dict):
        data["style_tags"] = {**DEFAULT_STYLE_TAGS, **data["style_tags"]}
    try:
        return ConverterOptions.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid converter options in {path}: {exc}") from exc


__all__ = ["ConverterOptions", "DEFAULT_STYLE_TAGS", "load_options"]
