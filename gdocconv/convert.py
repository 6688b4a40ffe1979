"""Conversion from the Docs document model to an HTML tree."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .config import ConverterOptions
from .dom_model import Cursor, DomDocument, new_element
from .indexes import build_list_info, build_object_info
from .models import (
    Document,
    HorizontalRule,
    InlineObjectElement,
    Paragraph,
    StructuralElement,
    Table,
    TextRun,
    TextStyle,
)

# An image whose id is not in the registry still gets all three attributes.
MISSING_OBJECT_ATTRS: Tuple[str, ...] = ("src", "", "title", "", "alt", "")


@dataclass(frozen=True)
class _Indexes:
    lists: Mapping[str, str]
    objects: Mapping[str, List[str]]


class Converter:
    """Walks a document body and emits the equivalent HTML tree.

    ``style_tags`` replaces the options' style table wholesale; styles it does
    not name fall back to ``default_block_tag``. Empty tag values count as
    missing.
    """

    def __init__(
        self,
        options: Optional[ConverterOptions] = None,
        style_tags: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.options = options if options is not None else ConverterOptions()
        tags = style_tags if style_tags is not None else self.options.style_tags
        self.style_tags: Mapping[str, str] = MappingProxyType(dict(tags))

    def convert(self, document: Document) -> DomDocument:
        root = DomDocument()
        indexes = _Indexes(
            lists=build_list_info(document.lists),
            objects=build_object_info(document.inline_objects),
        )
        cursor = Cursor(root)
        for element in document.body.content:
            self._convert_element(cursor, element, indexes)
        return root

    def block_tag(self, named_style_type: Optional[str]) -> str:
        if named_style_type is None:
            return self.options.default_block_tag
        return self.style_tags.get(named_style_type) or self.options.default_block_tag

    def _convert_element(
        self, cursor: Cursor, element: StructuralElement, indexes: _Indexes
    ) -> None:
        for variant in element.variants():
            if isinstance(variant, Table):
                self._convert_table(cursor, variant, indexes)
            elif isinstance(variant, Paragraph):
                self._convert_paragraph(cursor, variant, indexes)

    def _convert_table(self, cursor: Cursor, table: Table, indexes: _Indexes) -> None:
        table_cursor = cursor.append(new_element("table"))
        for row in table.table_rows or []:
            row_cursor = table_cursor.append(new_element("tr"))
            for cell in row.table_cells or []:
                cell_cursor = row_cursor.append(new_element("td"))
                for content in cell.content:
                    self._convert_element(cell_cursor, content, indexes)

    def _convert_paragraph(
        self, cursor: Cursor, paragraph: Paragraph, indexes: _Indexes
    ) -> None:
        if paragraph.bullet is not None:
            list_id = paragraph.bullet.list_id
            list_tag = indexes.lists.get(list_id, self.options.default_list_tag)
            container = cursor.reuse_or_create(list_tag, key=list_id)
            cursor = container.append(new_element("li"))

        block_tag = self.block_tag(paragraph.named_style_type)
        cursor.append(new_element(block_tag))

        for element in paragraph.elements:
            for variant in element.variants():
                if isinstance(variant, HorizontalRule):
                    # Rules sit beside the block, which ends the current block run.
                    cursor.append(new_element("hr"))
                elif isinstance(variant, InlineObjectElement):
                    attrs = indexes.objects.get(
                        variant.inline_object_id, MISSING_OBJECT_ATTRS
                    )
                    block = cursor.reuse_or_create(block_tag)
                    block.append(new_element("img", *attrs))
                elif isinstance(variant, TextRun):
                    self._convert_text_run(cursor, block_tag, variant)

    def _convert_text_run(self, cursor: Cursor, block_tag: str, run: TextRun) -> None:
        if self.options.skip_blank_runs and not run.content.strip():
            return
        inner = cursor.reuse_or_create(block_tag)
        if run.text_style is not None:
            for tag, attrs in self._wrappers(run, run.text_style):
                if self.options.merge_inline:
                    inner = inner.reuse_or_create(tag, *attrs)
                else:
                    inner = inner.append(new_element(tag, *attrs))
        inner.append_text(run.content)

    def _wrappers(self, run: TextRun, style: TextStyle) -> List[Tuple[str, Tuple[str, ...]]]:
        """Wrapper tags for a styled run, outermost first."""
        wrappers: List[Tuple[str, Tuple[str, ...]]] = []
        if self.options.render_suggestions:
            if run.suggested_insertion_ids:
                wrappers.append(("ins", ()))
            if run.suggested_deletion_ids:
                wrappers.append(("del", ()))
        if style.link is not None:
            wrappers.append(("a", ("href", style.link.url or "")))
        if self.options.render_highlight and style.background_color is not None:
            wrappers.append(("mark", ()))
        if style.bold:
            wrappers.append(("strong", ()))
        if style.italic:
            wrappers.append(("em", ()))
        # Links already carry an underline.
        if style.underline and style.link is None:
            wrappers.append(("u", ()))
        return wrappers


def convert(document: Document, options: Optional[ConverterOptions] = None) -> DomDocument:
    """Convert ``document`` with a one-off :class:`Converter`."""
    return Converter(options).convert(document)


__all__ = ["Converter", "MISSING_OBJECT_ATTRS", "convert"]
