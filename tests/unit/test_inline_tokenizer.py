"""Test inline markup tokenization."""

import pytest
from slide_elements.inline import InlineTokenizer, tokenize
from slide_elements.models import TextStyle


def _texts(runs):
    return [run.text for run in runs]


def test_plain_line_is_single_run():
    """A line without markup comes back as one run of the base style."""
    runs = tokenize("Just some words.")

    assert _texts(runs) == ["Just some words."]
    assert runs[0].style == TextStyle()


def test_empty_text_gives_no_runs():
    assert tokenize("") == []


def test_bold_italic():
    runs = tokenize("***x***")

    assert len(runs) == 1
    assert runs[0].text == "x"
    assert runs[0].style.font_weight == "bold"
    assert runs[0].style.font_style == "italic"


def test_mixed_bold_plain_italic():
    """`**a** b *c*` splits into bold, plain and italic runs."""
    runs = tokenize("**a** b *c*")

    assert _texts(runs) == ["a", " b ", "c"]
    assert runs[0].style.font_weight == "bold"
    assert runs[0].style.font_style == "normal"
    assert runs[1].style == TextStyle()
    assert runs[2].style.font_style == "italic"
    assert runs[2].style.font_weight == "normal"


@pytest.mark.parametrize(
    "markup,attr,expected",
    [
        ("__x__", "font_weight", "bold"),
        ("_x_", "font_style", "italic"),
        ("`x`", "font_family", "Courier New"),
        ("~~x~~", "text_decoration", "line-through"),
    ],
)
def test_each_marker_form(markup, attr, expected):
    runs = tokenize(markup)

    assert _texts(runs) == ["x"]
    assert getattr(runs[0].style, attr) == expected


@pytest.mark.parametrize("text", ["**unclosed", "a * b", "*", "**", "~~", "`", "snake_case"])
def test_unbalanced_markers_stay_literal(text):
    """Markers that never close degrade to literal text."""
    runs = tokenize(text)

    assert "".join(_texts(runs)) == text
    assert all(run.style == TextStyle() for run in runs)


def test_markers_never_retained():
    runs = tokenize("a **b** c `d` e ~~f~~")

    assert "".join(_texts(runs)) == "a b c d e f"


def test_nearest_closer_wins():
    """Content is the shortest span, so `**a** **b**` is two bold runs."""
    runs = tokenize("**a** and **b**")

    assert _texts(runs) == ["a", " and ", "b"]
    assert runs[2].style.font_weight == "bold"


def test_nested_markup_not_decomposed():
    """Only the outer form applies; inner markers survive as text."""
    runs = tokenize("**bold with `code` inside**")

    assert _texts(runs) == ["bold with `code` inside"]
    assert runs[0].style.font_family == "Calibri"


def test_extra_closing_star_is_plain():
    runs = tokenize("**a***")

    assert _texts(runs) == ["a", "*"]


def test_underscores_inside_words_match():
    """Without word-boundary rules `a_b_c` italicises the middle."""
    runs = tokenize("a_b_c")

    assert _texts(runs) == ["a", "b", "c"]
    assert runs[1].style.font_style == "italic"


def test_overrides_apply_to_every_run():
    runs = tokenize("plain **bold**", {"font_size": 36, "font_weight": "bold"})

    assert [run.style.font_size for run in runs] == [36, 36]
    assert all(run.style.font_weight == "bold" for run in runs)


def test_custom_base_style_and_code_font():
    tokenizer = InlineTokenizer(TextStyle(font_family="Arial", color="#ffffff"), code_font_family="Consolas")

    runs = tokenizer.tokenize("x `y`")

    assert runs[0].style.font_family == "Arial"
    assert runs[1].style.font_family == "Consolas"
    assert runs[1].style.color == "#ffffff"


def test_adversarial_markers_are_linear():
    """Many unmatched openers must not blow up."""
    text = "*a" * 20000

    runs = tokenize(text)

    assert "".join(_texts(runs)).replace("*", "") == "a" * 20000
