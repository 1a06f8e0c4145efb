"""Test the command-line entry point."""

import json

from slide_elements.cli import main


def test_markdown_to_json(tmp_path, capsys):
    source = tmp_path / "deck.md"
    source.write_text("# Hi\n\n| a | b |\n|---|---|\n| 1 | 2 |\n", encoding="utf-8")

    assert main([str(source)]) == 0

    data = json.loads(capsys.readouterr().out)
    assert [el["type"] for el in data] == ["text", "table"]
    assert data[1]["columnWidths"] == [150, 150]


def test_text_only_to_file(tmp_path):
    source = tmp_path / "deck.md"
    source.write_text("| a | b |\n|---|---|\n", encoding="utf-8")
    output = tmp_path / "out" / "content.json"

    assert main([str(source), "--text-only", "-o", str(output)]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert [p["runs"][0]["text"] for p in data["paragraphs"]] == ["a  |  b"]


def test_html_input(tmp_path, capsys):
    source = tmp_path / "paste.html"
    source.write_text("<p><b>bold</b></p>", encoding="utf-8")

    assert main([str(source), "--html", "--theme", "dark"]) == 0

    (element,) = json.loads(capsys.readouterr().out)
    run = element["content"]["paragraphs"][0]["runs"][0]
    assert run["style"]["fontWeight"] == "bold"
    assert run["style"]["color"] == "#F3F4F6"


def test_missing_input(tmp_path):
    assert main([str(tmp_path / "nope.md")]) == 1
