"""Pydantic models for the Google Docs API document resource."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """Base for API payloads: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Link(ApiModel):
    url: Optional[str] = Field(None, description="External URL the text links to.")
    bookmark_id: Optional[str] = Field(None, alias="bookmarkId")
    heading_id: Optional[str] = Field(None, alias="headingId")


class OptionalColor(ApiModel):
    """A colour that is either set or explicitly transparent."""

    color: Optional[Dict[str, Any]] = None


class TextStyle(ApiModel):
    """Character level styling of a text run."""

    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    strikethrough: Optional[bool] = None
    link: Optional[Link] = None
    background_color: Optional[OptionalColor] = Field(None, alias="backgroundColor")


class TextRun(ApiModel):
    """A run of text sharing one style."""

    content: str = Field("", description="Raw text, including trailing newlines.")
    text_style: Optional[TextStyle] = Field(None, alias="textStyle")
    suggested_insertion_ids: List[str] = Field(
        default_factory=list, alias="suggestedInsertionIds"
    )
    suggested_deletion_ids: List[str] = Field(
        default_factory=list, alias="suggestedDeletionIds"
    )


class InlineObjectElement(ApiModel):
    """Position of an inline object (usually an image) inside a paragraph."""

    inline_object_id: str = Field("", alias="inlineObjectId")


class HorizontalRule(ApiModel):
    """Marker for a horizontal line; carries no payload we use."""


class ParagraphElement(ApiModel):
    """Inline content of a paragraph.

    The API models this as a record of optional fields. ``variants`` resolves
    it into the payloads actually present, in the order the converter handles
    them.
    """

    start_index: Optional[int] = Field(None, alias="startIndex")
    end_index: Optional[int] = Field(None, alias="endIndex")
    text_run: Optional[TextRun] = Field(None, alias="textRun")
    inline_object_element: Optional[InlineObjectElement] = Field(
        None, alias="inlineObjectElement"
    )
    horizontal_rule: Optional[HorizontalRule] = Field(None, alias="horizontalRule")

    def variants(self) -> Tuple["InlineVariant", ...]:
        found: List[InlineVariant] = []
        if self.horizontal_rule is not None:
            found.append(self.horizontal_rule)
        if self.inline_object_element is not None:
            found.append(self.inline_object_element)
        if self.text_run is not None:
            found.append(self.text_run)
        return tuple(found)


InlineVariant = Union[HorizontalRule, InlineObjectElement, TextRun]


class ParagraphStyle(ApiModel):
    named_style_type: Optional[str] = Field(None, alias="namedStyleType")
    heading_id: Optional[str] = Field(None, alias="headingId")


class Bullet(ApiModel):
    """Marks a paragraph as a list item of ``list_id``."""

    list_id: str = Field("", alias="listId")
    nesting_level: int = Field(0, alias="nestingLevel")


class Paragraph(ApiModel):
    paragraph_style: Optional[ParagraphStyle] = Field(None, alias="paragraphStyle")
    bullet: Optional[Bullet] = None
    elements: List[ParagraphElement] = Field(default_factory=list)

    @property
    def named_style_type(self) -> Optional[str]:
        if self.paragraph_style is None:
            return None
        return self.paragraph_style.named_style_type


class TableCell(ApiModel):
    content: List["StructuralElement"] = Field(default_factory=list)


class TableRow(ApiModel):
    table_cells: Optional[List[TableCell]] = Field(None, alias="tableCells")


class Table(ApiModel):
    rows: Optional[int] = None
    columns: Optional[int] = None
    table_rows: Optional[List[TableRow]] = Field(None, alias="tableRows")


class StructuralElement(ApiModel):
    """Top-level unit of body content.

    A well-formed element carries exactly one payload, but nothing in the
    schema enforces that. ``variants`` returns every payload the converter
    handles, table first.
    """

    start_index: Optional[int] = Field(None, alias="startIndex")
    end_index: Optional[int] = Field(None, alias="endIndex")
    paragraph: Optional[Paragraph] = None
    table: Optional[Table] = None
    section_break: Optional[Dict[str, Any]] = Field(None, alias="sectionBreak")
    table_of_contents: Optional[Dict[str, Any]] = Field(None, alias="tableOfContents")

    def variants(self) -> Tuple["BlockVariant", ...]:
        found: List[BlockVariant] = []
        if self.table is not None and self.table.table_rows is not None:
            found.append(self.table)
        if self.paragraph is not None:
            found.append(self.paragraph)
        return tuple(found)


BlockVariant = Union[Table, Paragraph]


class Body(ApiModel):
    content: List[StructuralElement] = Field(default_factory=list)


class NestingLevel(ApiModel):
    glyph_type: Optional[str] = Field(None, alias="glyphType")
    glyph_symbol: Optional[str] = Field(None, alias="glyphSymbol")


class ListProperties(ApiModel):
    nesting_levels: List[NestingLevel] = Field(default_factory=list, alias="nestingLevels")


class ListDefinition(ApiModel):
    """A list definition referenced by paragraph bullets."""

    list_properties: Optional[ListProperties] = Field(None, alias="listProperties")


class ImageProperties(ApiModel):
    content_uri: str = Field("", alias="contentUri")
    source_uri: Optional[str] = Field(None, alias="sourceUri")


class EmbeddedObject(ApiModel):
    title: str = ""
    description: str = ""
    image_properties: Optional[ImageProperties] = Field(None, alias="imageProperties")


class InlineObjectProperties(ApiModel):
    embedded_object: EmbeddedObject = Field(
        default_factory=EmbeddedObject, alias="embeddedObject"
    )


class InlineObject(ApiModel):
    object_id: Optional[str] = Field(None, alias="objectId")
    inline_object_properties: Optional[InlineObjectProperties] = Field(
        None, alias="inlineObjectProperties"
    )


class Document(ApiModel):
    """Schema for a documents.get response."""

    document_id: Optional[str] = Field(None, alias="documentId")
    title: str = Field("", description="Document title.")
    body: Body = Field(default_factory=Body)
    lists: Dict[str, ListDefinition] = Field(default_factory=dict)
    inline_objects: Dict[str, InlineObject] = Field(
        default_factory=dict, alias="inlineObjects"
    )


for _model in (TableCell, TableRow, Table, StructuralElement, Body, Document):
    _model.model_rebuild()


__all__ = [
    "BlockVariant",
    "Body",
    "Bullet",
    "Document",
    "EmbeddedObject",
    "HorizontalRule",
    "ImageProperties",
    "InlineObject",
    "InlineObjectElement",
    "InlineObjectProperties",
    "InlineVariant",
    "Link",
    "ListDefinition",
    "ListProperties",
    "NestingLevel",
    "OptionalColor",
    "Paragraph",
    "ParagraphElement",
    "ParagraphStyle",
    "StructuralElement",
    "Table",
    "TableCell",
    "TableRow",
    "TextRun",
    "TextStyle",
]
