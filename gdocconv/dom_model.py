"""Simple DOM model for the converted HTML tree."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from bs4 import BeautifulSoup

Attr = Tuple[str, str]

VOID_ELEMENTS = frozenset({"br", "hr", "img"})


@dataclass
class DomNode:
    tag: str
    attrs: List[Attr] = field(default_factory=list)
    children: List["DomContent"] = field(default_factory=list)
    # Grouping key used when merging siblings; never rendered.
    key: str | None = field(default=None, compare=False, repr=False)

    def append(self, child: "DomContent") -> "DomContent":
        self.children.append(child)
        return child

    def get(self, name: str, default: str | None = None) -> str | None:
        for attr_name, value in self.attrs:
            if attr_name == name:
                return value
        return default


@dataclass
class DomDocument:
    """Root of a converted tree. Holds children but has no tag of its own."""

    children: List["DomContent"] = field(default_factory=list)

    def append(self, child: "DomContent") -> "DomContent":
        self.children.append(child)
        return child


# Text nodes are plain strings.
DomContent = DomNode | str
DomParent = DomNode | DomDocument


def new_element(tag: str, *attrs: str) -> DomNode:
    """Create an element from flat ``key, value, key, value...`` strings."""
    if len(attrs) % 2 != 0:
        raise ValueError("uneven number of attr/value pairs")
    pairs = [(attrs[i], attrs[i + 1]) for i in range(0, len(attrs), 2)]
    return DomNode(tag=tag, attrs=pairs)


class Cursor:
    """Insertion point into a tree under construction.

    All appends during conversion go through a cursor so that the merging
    rule (extend the trailing sibling when it matches) lives in one place.
    """

    def __init__(self, node: DomParent) -> None:
        self.node = node

    def _last_child(self) -> DomContent | None:
        if not self.node.children:
            return None
        return self.node.children[-1]

    def append(self, child: DomNode) -> "Cursor":
        self.node.append(child)
        return Cursor(child)

    def append_text(self, text: str) -> None:
        self.node.append(text)

    def reuse_or_create(self, tag: str, *attrs: str, key: str | None = None) -> "Cursor":
        """Return a cursor into the trailing ``tag`` child, appending one if needed.

        A trailing element is only reused when its attributes and ``key`` match
        too, so two adjacent links with different targets stay separate.
        """
        wanted = new_element(tag, *attrs)
        wanted.key = key
        last = self._last_child()
        if (
            isinstance(last, DomNode)
            and last.tag == tag
            and last.attrs == wanted.attrs
            and last.key == key
        ):
            return Cursor(last)
        return self.append(wanted)


def _attr_text(attrs: Sequence[Attr]) -> str:
    # Each pair renders with a leading space so an empty list renders as "".
    return "".join(
        " %s=\"%s\"" % (name, html.escape(value, quote=True)) for name, value in attrs
    )


def _render_children(children: Sequence[DomContent]) -> str:
    html_parts: List[str] = []
    for child in children:
        if isinstance(child, DomNode):
            html_parts.append(_render_node(child))
        else:
            html_parts.append(html.escape(child, quote=False))
    return "".join(html_parts)


def _render_node(node: DomNode) -> str:
    attrs = _attr_text(node.attrs)
    if node.tag in VOID_ELEMENTS:
        return f"<{node.tag}{attrs}/>"
    return f"<{node.tag}{attrs}>{_render_children(node.children)}</{node.tag}>"


def dom_to_html(root: DomParent) -> str:
    if isinstance(root, DomDocument):
        return _render_children(root.children)
    return _render_node(root)


def prettify_html(html_text: str) -> str:
    """Re-indent serialized HTML for reading."""
    soup = BeautifulSoup(html_text, "html.parser")
    return soup.prettify()


def dom_to_dict(root: DomParent) -> Dict[str, Any]:
    """JSON-friendly dump of a tree, used for debugging snapshots."""
    children = [
        dom_to_dict(child) if isinstance(child, DomNode) else {"text": child}
        for child in root.children
    ]
    if isinstance(root, DomDocument):
        return {"document": children}
    payload: Dict[str, Any] = {"tag": root.tag}
    if root.attrs:
        payload["attrs"] = [list(pair) for pair in root.attrs]
    if children:
        payload["children"] = children
    return payload


__all__ = [
    "Attr",
    "Cursor",
    "DomContent",
    "DomDocument",
    "DomNode",
    "DomParent",
    "VOID_ELEMENTS",
    "dom_to_dict",
    "dom_to_html",
    "new_element",
    "prettify_html",
]
