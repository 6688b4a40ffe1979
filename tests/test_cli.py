import json
import subprocess
import sys
from pathlib import Path

import pytest

from gdocconv.cli import main

REPO_ROOT = Path(__file__).resolve().parents[1]

SAMPLE_DOC = {
    "documentId": "doc-1",
    "title": "My Doc",
    "body": {
        "content": [
            {"sectionBreak": {}},
            {
                "paragraph": {
                    "paragraphStyle": {"namedStyleType": "HEADING_1"},
                    "elements": [{"textRun": {"content": "Intro", "textStyle": {}}}],
                }
            },
            {
                "paragraph": {
                    "paragraphStyle": {"namedStyleType": "NORMAL_TEXT"},
                    "bullet": {"listId": "kix.list"},
                    "elements": [
                        {"textRun": {"content": "first", "textStyle": {"bold": True}}},
                        {"textRun": {"content": "\n", "textStyle": {}}},
                    ],
                }
            },
        ]
    },
    "lists": {"kix.list": {"listProperties": {"nestingLevels": [{"glyphType": "DECIMAL"}]}}},
    "inlineObjects": {},
}


def _write_doc(tmp_path: Path, payload: dict = SAMPLE_DOC) -> Path:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_convert_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc_path = _write_doc(tmp_path)

    main(["convert", "--read-doc", str(doc_path)])

    captured = capsys.readouterr()
    assert captured.out == "<h1>Intro</h1><ol><li><p><strong>first</strong>\n</p></li></ol>"
    assert f"reading '{doc_path}'" in captured.err
    assert "got 'My Doc'" in captured.err


def test_convert_silent_with_flags(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc_path = _write_doc(tmp_path)

    main(["convert", "--read-doc", str(doc_path), "--silent", "--skip-blank-runs"])

    captured = capsys.readouterr()
    assert captured.out == "<h1>Intro</h1><ol><li><p><strong>first</strong></p></li></ol>"
    assert captured.err == ""


def test_convert_uses_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc_path = _write_doc(tmp_path)
    config_path = tmp_path / "options.yaml"
    config_path.write_text("skip_blank_runs: true\nstyle_tags:\n  HEADING_1: header\n", encoding="utf-8")

    main(["convert", "--read-doc", str(doc_path), "--config", str(config_path), "--silent"])

    assert capsys.readouterr().out.startswith("<header>Intro</header>")


def test_convert_writes_page_and_tree(tmp_path: Path) -> None:
    doc_path = _write_doc(tmp_path)
    out_path = tmp_path / "out" / "doc.html"
    tree_path = tmp_path / "out" / "tree.json"

    main(
        [
            "convert",
            "--read-doc",
            str(doc_path),
            "--out",
            str(out_path),
            "--standalone",
            "--dump-tree",
            str(tree_path),
            "--silent",
        ]
    )

    page = out_path.read_text(encoding="utf-8")
    assert "<title>My Doc</title>" in page
    assert "<h1>Intro</h1>" in page
    tree = json.loads(tree_path.read_text(encoding="utf-8"))
    assert tree["document"][0] == {"tag": "h1", "children": [{"text": "Intro"}]}
    assert tree["document"][1]["tag"] == "ol"


def test_empty_document_warns(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc_path = _write_doc(tmp_path, {"title": "Blank"})

    main(["convert", "--read-doc", str(doc_path), "--silent"])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "produced no HTML" in captured.err


def test_validate_prints_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc_path = _write_doc(tmp_path)

    main(["validate", "--read-doc", str(doc_path)])

    assert capsys.readouterr().out.splitlines() == [
        "title: My Doc",
        "elements: 3",
        "lists: 1 (1 ordered)",
        "inline objects: 0",
    ]


def test_missing_document_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["convert", "--read-doc", str(tmp_path / "missing.json")])


def test_malformed_document_exits(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["validate", "--read-doc", str(bad)])


def test_document_path_is_directory_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Invalid document"):
        main(["validate", "--read-doc", str(tmp_path)])


def test_document_with_invalid_utf8_exits(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_bytes(b"\xff\xfe{")

    with pytest.raises(SystemExit, match="Invalid document"):
        main(["validate", "--read-doc", str(bad)])


def test_missing_config_file_exits_from_cli(tmp_path: Path) -> None:
    doc = _write_doc(tmp_path)

    with pytest.raises(SystemExit, match="Config file not found"):
        main(["convert", "--read-doc", str(doc), "--config", str(tmp_path / "nope.yaml"), "--silent"])


def test_module_reads_stdin() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "gdocconv", "convert", "--read-doc", "-", "--silent"],
        input=json.dumps(SAMPLE_DOC),
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith("<h1>Intro</h1><ol>")
