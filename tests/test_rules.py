from __future__ import annotations

import pytest

from md2html.rules import BLOCK_RULES, INLINE_RULES, apply_inline, apply_rules


def names(rules) -> list[str]:
    return [rule.name for rule in rules]


def test_block_rules_keep_precedence_order() -> None:
    order = names(BLOCK_RULES)

    assert order[:6] == [f"heading_{level}" for level in range(6, 0, -1)]
    assert order.index("horizontal_rule") < order.index("bold_italic_star")
    assert order.index("bold_italic_star") < order.index("bold_star") < order.index("italic_star")
    assert order.index("link") < order.index("image")
    assert order.index("task_item") < order.index("unordered_item") < order.index("ordered_item")
    assert order[-1] == "paragraph"


def test_inline_rules_have_no_block_rules() -> None:
    assert "paragraph" not in names(INLINE_RULES)
    assert not any(name.startswith("heading") for name in names(INLINE_RULES))


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("***both***", "<strong><em>both</em></strong>"),
        ("___both___", "<strong><em>both</em></strong>"),
        ("**bold**", "<strong>bold</strong>"),
        ("__bold__", "<strong>bold</strong>"),
        ("*it*", "<em>it</em>"),
        ("_it_", "<em>it</em>"),
        ("~~gone~~", "<del>gone</del>"),
        ("[site](https://example.com)", '<a href="https://example.com">site</a>'),
        ("![logo](logo.png)", '<img src="logo.png" alt="logo">'),
    ],
)
def test_inline_formatting(source: str, expected: str) -> None:
    assert apply_inline(source) == expected


def test_inline_leaves_spaced_and_intraword_markers() -> None:
    assert apply_inline("2 * 3 * 4") == "2 * 3 * 4"
    assert apply_inline("snake_case_name") == "snake_case_name"


def test_image_is_not_mistaken_for_link() -> None:
    html = apply_inline("![alt](a.png) and [text](b.html)")

    assert html == '<img src="a.png" alt="alt"> and <a href="b.html">text</a>'


def test_six_hashes_produce_a_single_h6() -> None:
    html = apply_rules("###### Deep", BLOCK_RULES)

    assert html == "<h6>Deep</h6>"


def test_heading_strips_closing_hashes() -> None:
    assert apply_rules("## Title ##", BLOCK_RULES) == "<h2>Title</h2>"
    assert apply_rules("# C#", BLOCK_RULES) == "<h1>C#</h1>"


def test_seven_hashes_are_not_a_heading() -> None:
    assert apply_rules("####### too deep", BLOCK_RULES) == "<p>####### too deep</p>"


@pytest.mark.parametrize("marker", ["---", "***", "___", "-----"])
def test_horizontal_rules(marker: str) -> None:
    assert apply_rules(marker, BLOCK_RULES) == "<hr>"


def test_list_items_are_wrapped_individually() -> None:
    html = apply_rules("* one\n2. two", BLOCK_RULES)

    assert html == "<ul><li>one</li></ul>\n<ol><li>two</li></ol>"


def test_task_items_checked_case_insensitively() -> None:
    html = apply_rules("- [X] shipped", BLOCK_RULES)

    assert html == (
        '<ul class="task-list"><li class="task-item">'
        '<input type="checkbox" checked disabled> shipped</li></ul>'
    )


def test_paragraph_wraps_lines_starting_with_inline_markup() -> None:
    assert apply_rules("**Bold** start", BLOCK_RULES) == "<p><strong>Bold</strong> start</p>"


def test_whitespace_only_lines_produce_nothing() -> None:
    assert apply_rules("a\n   \nb", BLOCK_RULES) == "<p>a</p>\n\n<p>b</p>"
