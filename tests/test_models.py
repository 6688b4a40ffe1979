import pytest
from pydantic import ValidationError

from gdocconv.models import (
    Document,
    HorizontalRule,
    InlineObjectElement,
    Paragraph,
    ParagraphElement,
    StructuralElement,
    Table,
    TextRun,
    TextStyle,
)


def test_document_parses_api_payload() -> None:
    doc = Document.model_validate(
        {
            "documentId": "1abc",
            "title": "Notes",
            "revisionId": "ignored",
            "body": {
                "content": [
                    {"startIndex": 1, "endIndex": 2, "sectionBreak": {"sectionStyle": {}}},
                    {
                        "paragraph": {
                            "paragraphStyle": {"namedStyleType": "HEADING_1"},
                            "bullet": {"listId": "kix.list", "nestingLevel": 1},
                            "elements": [
                                {
                                    "textRun": {
                                        "content": "Hi\n",
                                        "textStyle": {"bold": True, "link": {"url": "https://x"}},
                                    }
                                }
                            ],
                        }
                    },
                ]
            },
        }
    )

    assert doc.document_id == "1abc"
    paragraph = doc.body.content[1].paragraph
    assert paragraph is not None
    assert paragraph.named_style_type == "HEADING_1"
    assert paragraph.bullet is not None
    assert paragraph.bullet.list_id == "kix.list"
    assert paragraph.bullet.nesting_level == 1
    run = paragraph.elements[0].text_run
    assert run is not None
    assert run.text_style is not None
    assert run.text_style.bold is True
    assert run.text_style.link is not None
    assert run.text_style.link.url == "https://x"


def test_models_accept_field_names() -> None:
    run = TextRun(content="x", text_style=TextStyle(italic=True), suggested_insertion_ids=["s"])

    assert run.text_style is not None
    assert run.text_style.italic is True
    assert run.suggested_insertion_ids == ["s"]


def test_paragraph_element_variants_in_handling_order() -> None:
    element = ParagraphElement.model_validate(
        {
            "textRun": {"content": "x"},
            "inlineObjectElement": {"inlineObjectId": "kix.1"},
            "horizontalRule": {},
        }
    )

    kinds = [type(variant) for variant in element.variants()]

    assert kinds == [HorizontalRule, InlineObjectElement, TextRun]


def test_structural_element_variants() -> None:
    both = StructuralElement.model_validate(
        {"paragraph": {"elements": []}, "table": {"tableRows": []}}
    )
    rowless = StructuralElement.model_validate({"table": {"rows": 1}})
    empty = StructuralElement.model_validate({"sectionBreak": {}})

    assert [type(variant) for variant in both.variants()] == [Table, Paragraph]
    assert rowless.variants() == ()
    assert empty.variants() == ()


def test_nested_table_cells_parse() -> None:
    element = StructuralElement.model_validate(
        {
            "table": {
                "tableRows": [
                    {
                        "tableCells": [
                            {"content": [{"table": {"tableRows": [{"tableCells": []}]}}]}
                        ]
                    }
                ]
            }
        }
    )

    assert element.table is not None
    inner = element.table.table_rows[0].table_cells[0].content[0]
    assert inner.table is not None


def test_invalid_payload_raises() -> None:
    with pytest.raises(ValidationError):
        Document.model_validate({"body": {"content": "not a list"}})
