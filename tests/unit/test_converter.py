"""Test the markdown conversion entry points."""

import pytest
from slide_elements.converter import MarkdownConverter, markdown_to_elements, markdown_to_text_content
from slide_elements.factory import RULE_GLYPH
from slide_elements.ids import SequentialIdGenerator
from slide_elements.models import TableElement, TextElement, to_dict

DOCUMENT = """# Quarterly Report

Revenue is **up** this quarter.

- North
- South

| Region | Sales |
|:-------|------:|
| North  | 10    |
| South  | 12    |

1. Hire
2. Ship
"""


def _all_ids(value):
    """Every id in a serialized element tree."""
    if isinstance(value, dict):
        found = [value["id"]] if "id" in value else []
        for child in value.values():
            found.extend(_all_ids(child))
        return found
    if isinstance(value, list):
        return [i for child in value for i in _all_ids(child)]
    return []


class TestMarkdownToElements:
    """Full pipeline: text boxes and tables stacked on the canvas."""

    def test_mixed_document(self, converter):
        elements = converter.to_elements(DOCUMENT)

        assert [type(el) for el in elements] == [TextElement, TableElement, TextElement]
        intro, table, outro = elements
        assert [p.text for p in intro.content.paragraphs] == [
            "Quarterly Report",
            "Revenue is up this quarter.",
            "North",
            "South",
        ]
        assert [p.bullet_type for p in intro.content.paragraphs] == [None, None, "bullet", "bullet"]
        assert (table.rows, table.columns) == (3, 2)
        assert [p.bullet_type for p in outro.content.paragraphs] == ["number", "number"]

    def test_layout_of_mixed_document(self, converter):
        intro, table, outro = converter.to_elements(DOCUMENT)

        # 200 + 108 + 200 plus two gaps overflows 540, so the stack starts at 20
        assert intro.position.y == 20
        assert table.position.y == 240
        assert outro.position.y == 368
        assert intro.position.x == 280
        assert table.position.x == 330

    def test_consecutive_lines_share_one_text_box(self, converter):
        elements = converter.to_elements("one\ntwo\n\nthree")

        assert len(elements) == 1
        assert [p.text for p in elements[0].content.paragraphs] == ["one", "two", "three"]

    def test_two_text_boxes_around_table(self, converter):
        elements = converter.to_elements("before\n| a |\n|---|\nafter")

        assert [el.type for el in elements] == ["text", "table", "text"]

    def test_text_box_defaults(self, converter):
        (element,) = converter.to_elements("hello")

        assert (element.size.width, element.size.height) == (400, 200)
        assert (element.position.x, element.position.y) == (280, 170)
        assert element.z_index == 0
        assert element.style.vertical_align == "top"
        assert element.style.padding.left == 10
        assert element.style.word_wrap is True

    def test_plain_line_round_trips(self, converter):
        (element,) = converter.to_elements("   no markup here   ")
        (paragraph,) = element.content.paragraphs

        assert len(paragraph.runs) == 1
        assert paragraph.runs[0].text == "no markup here"
        assert paragraph.alignment == "left"

    def test_horizontal_rule(self, converter):
        (element,) = converter.to_elements("above\n---\nbelow")

        assert [p.text for p in element.content.paragraphs] == ["above", RULE_GLYPH, "below"]
        assert element.content.paragraphs[1].alignment == "center"

    @pytest.mark.parametrize("markdown", ["", "   ", "\n\n", " \r\n\t\n"])
    def test_empty_input_falls_back(self, converter, markdown):
        elements = converter.to_elements(markdown)

        assert len(elements) == 1
        (paragraph,) = elements[0].content.paragraphs
        assert [run.text for run in paragraph.runs] == [" "]

    @pytest.mark.parametrize(
        "markdown",
        ["x", "***", "|", "| a |\n|---|", "**", "# ", "-", "|---|\n|---|", "\r\n"],
    )
    def test_never_empty(self, converter, markdown):
        assert len(converter.to_elements(markdown)) >= 1

    def test_crlf_input(self, converter):
        (element,) = converter.to_elements("# Title\r\n- item\r\n")

        heading, item = element.content.paragraphs
        assert heading.runs[0].style.font_size == 36
        assert item.bullet_type == "bullet"

    def test_pending_paragraphs_kept_when_table_starts(self, converter):
        elements = converter.to_elements("intro\n| a | b |\n|---|---|")

        assert elements[0].content.paragraphs[0].text == "intro"
        assert isinstance(elements[1], TableElement)

    def test_pipe_row_without_separator_stays_text(self, converter):
        elements = converter.to_elements("intro\n| a | b |\nafter")

        assert len(elements) == 1
        assert [p.text for p in elements[0].content.paragraphs] == ["intro", "| a | b |", "after"]

    def test_whitespace_only_heading_and_items_keep_a_run(self, converter):
        elements = converter.to_elements("#  \n-  \n1.  ")

        paragraphs = elements[0].content.paragraphs
        assert len(paragraphs) == 3
        assert all(len(p.runs) == 1 and p.text == "" for p in paragraphs)
        assert paragraphs[0].runs[0].style.font_weight == "bold"
        assert [p.bullet_type for p in paragraphs[1:]] == ["bullet", "number"]

    def test_table_followed_by_blank_and_text(self, converter):
        elements = converter.to_elements("| a |\n|---|\n| 1 |\n\nafter")

        assert elements[0].rows == 2
        assert elements[1].content.text == "after"

    def test_ids_are_unique(self, converter):
        elements = converter.to_elements(DOCUMENT)

        ids = _all_ids(to_dict(elements))
        assert len(ids) == len(set(ids))
        assert len(ids) > 20

    def test_injected_ids_are_deterministic(self):
        first = markdown_to_elements(DOCUMENT, ids=SequentialIdGenerator())
        second = markdown_to_elements(DOCUMENT, ids=SequentialIdGenerator())

        assert to_dict(first) == to_dict(second)
        assert first[0].content.paragraphs[0].runs[0].id == "el-1"

    def test_default_ids_are_uuids(self):
        (element,) = markdown_to_elements("hi")

        assert len(element.id) == 36

    def test_dark_theme_styles(self):
        (element,) = markdown_to_elements("hi `code`", theme="dark")
        plain, code = element.content.paragraphs[0].runs

        assert plain.style.color == "#F3F4F6"
        assert code.style.font_family == "Consolas"

    def test_unknown_theme_raises(self):
        with pytest.raises(FileNotFoundError):
            MarkdownConverter(theme="missing")


class TestMarkdownToTextContent:
    """Paragraph-only variant."""

    def test_tables_flatten(self):
        content = markdown_to_text_content("# T\n| a | b |\n|:--|--:|\n| 1 | 2 |")

        assert [p.text for p in content.paragraphs] == ["T", "a  |  b", "1  |  2"]
        assert all(p.alignment == "left" for p in content.paragraphs)

    def test_same_block_rules(self, converter):
        content = converter.to_text_content("## Sub\n- a\n2. b\n***\nplain *it*")

        paragraphs = content.paragraphs
        assert paragraphs[0].runs[0].style.font_size == 28
        assert paragraphs[1].bullet_type == "bullet"
        assert paragraphs[2].bullet_type == "number"
        assert paragraphs[3].text == "*"
        assert paragraphs[3].alignment == "left"
        assert paragraphs[4].runs[1].style.font_style == "italic"

    def test_rules_stay_literal_text(self, converter):
        content = converter.to_text_content("a\n---\n***")

        assert [p.text for p in content.paragraphs] == ["a", "---", "*"]
        assert content.paragraphs[2].runs[0].style.font_style == "italic"
        assert RULE_GLYPH not in content.text

    def test_separator_only_input_falls_back_to_raw_lines(self, converter):
        content = converter.to_text_content("|---|\n\n")

        assert [p.text for p in content.paragraphs] == ["|---|"]

    def test_blank_input_falls_back_to_space(self, converter):
        content = converter.to_text_content("  \n")

        assert [p.text for p in content.paragraphs] == [" "]

    def test_returns_text_content_not_elements(self, converter):
        content = converter.to_text_content("| a |\n|---|")

        assert not isinstance(content, TableElement)
        assert content.text == "a"


def test_serialized_shape():
    """Serialization uses the editor's camelCase keys and type tags."""
    (element,) = markdown_to_elements("- **hi**", ids=SequentialIdGenerator())

    data = to_dict(element)
    assert data["type"] == "text"
    assert data["zIndex"] == 0
    assert data["size"] == {"width": 400, "height": 200}
    paragraph = data["content"]["paragraphs"][0]
    assert paragraph["bulletType"] == "bullet"
    assert paragraph["indentLevel"] == 0
    assert paragraph["runs"][0]["style"]["fontWeight"] == "bold"
    assert "backgroundColor" not in paragraph["runs"][0]["style"]
    assert data["style"]["padding"] == {"top": 5, "right": 10, "bottom": 5, "left": 10}
