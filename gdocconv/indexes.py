"""Lookup tables built once per conversion from the document registries."""

from __future__ import annotations

from typing import Dict, List, Mapping

from .models import InlineObject, ListDefinition


def build_list_info(lists: Mapping[str, ListDefinition]) -> Dict[str, str]:
    """Map list ids to the container tag their items render into.

    A list whose top nesting level declares a glyph type is numbered (``ol``);
    anything else is a bulleted ``ul``. Lists without properties are left out.
    """
    info: Dict[str, str] = {}
    for list_id, definition in lists.items():
        props = definition.list_properties
        if props is None:
            continue
        list_type = "ul"
        if props.nesting_levels and props.nesting_levels[0].glyph_type:
            list_type = "ol"
        info[list_id] = list_type
    return info


def build_object_info(objects: Mapping[str, InlineObject]) -> Dict[str, List[str]]:
    """Map inline object ids to flat ``img`` attributes (src, title, alt)."""
    info: Dict[str, List[str]] = {}
    for object_id, obj in objects.items():
        props = obj.inline_object_properties
        if props is None:
            continue
        embedded = props.embedded_object
        src = ""
        if embedded.image_properties is not None:
            src = embedded.image_properties.content_uri
        info[object_id] = [
            "src", src,
            "title", embedded.title,
            "alt", embedded.description,
        ]
    return info


__all__ = ["build_list_info", "build_object_info"]
