from __future__ import annotations

import pytest

from htmltokendiff import Action, DiffConfig, Operation, calculate_operations, html_to_tokens
from htmltokendiff import render_operations
from htmltokendiff.render import consecutive_where, render_operation, wrap
from htmltokendiff.utils import is_tag, is_void_tag, is_wrappable


def test_consecutive_where():
    content = ["<p>", "a", "b", "<i>", "c"]
    assert consecutive_where(1, content, lambda t: not is_tag(t)) == ["a", "b"]
    assert consecutive_where(0, content, lambda t: not is_tag(t)) == []
    assert consecutive_where(4, content, lambda t: not is_tag(t)) == ["c"]


def test_wrappable_tokens():
    assert is_wrappable("word")
    assert is_wrappable(" ")
    assert is_wrappable('<img src="a.jpg"/>')
    assert is_wrappable("<svg><circle/></svg>")
    assert not is_wrappable("<!-- note -->")
    assert not is_wrappable("<p>")
    assert not is_wrappable("</p>")
    assert not is_wrappable("<br>")
    assert is_void_tag("<br/>")


def test_wrap_text():
    assert wrap("ins", ["a", " ", "b"]) == "<ins>a b</ins>"


def test_wrap_with_class_name():
    assert wrap("del", ["a"], "diff-class") == '<del class="diff-class">a</del>'


def test_wrap_leaves_plain_tags_outside():
    assert wrap("del", ["<p>", "a", "</p>"]) == "<p><del>a</del></p>"
    assert wrap("ins", ["<br>"]) == "<br>"


def test_wrap_drops_whitespace_only_runs():
    assert wrap("ins", [" ", "\n"]) == ""
    assert wrap("ins", ["<p>", " ", "</p>"]) == "<p></p>"


def test_wrap_leaves_comments_outside():
    assert wrap("ins", [" ", "<!-- note -->"]) == "<!-- note -->"
    assert wrap("del", ["a", "<!-- x -->", "b"]) == "<del>a</del><!-- x --><del>b</del>"


def test_wrap_void_and_atomic_tags():
    assert wrap("ins", ['<img src="x"/>', " ", "a"]) == '<ins><img src="x"/> a</ins>'
    assert wrap("del", ["<svg><circle/></svg>"]) == "<del><svg><circle/></svg></del>"


def test_render_operations_for_deleted_word():
    before = html_to_tokens("<p>a b c</p>")
    after = html_to_tokens("<p>a c</p>")
    ops = calculate_operations(before, after)
    assert render_operations(before, after, ops) == "<p>a <del>b </del>c</p>"


def test_replace_renders_delete_before_insert():
    before = html_to_tokens("red")
    after = html_to_tokens("blue")
    op = Operation(Action.REPLACE, 0, 0, 0, 0)
    assert render_operation(op, before, after) == "<del>red</del><ins>blue</ins>"


def test_equal_renders_after_text():
    before = html_to_tokens("<div>x</div>")
    after = html_to_tokens('<div class="y">x</div>')
    op = Operation(Action.EQUAL, 0, 2, 0, 2)
    assert render_operation(op, before, after) == '<div class="y">x</div>'


def test_unknown_action_is_rejected():
    op = Operation("equal", 0, 0, 0, 0)
    with pytest.raises(ValueError):
        render_operation(op, html_to_tokens("a"), html_to_tokens("a"))


def test_config_marker_tags_and_default_class():
    cfg = DiffConfig()
    cfg.insert_tag = "span"
    cfg.delete_tag = "s"
    cfg.class_name = "changed"
    before = html_to_tokens("a b")
    after = html_to_tokens("a c")
    ops = calculate_operations(before, after)
    assert render_operations(before, after, ops, config=cfg) == (
        'a <s class="changed">b</s><span class="changed">c</span>'
    )
    assert render_operations(before, after, ops, "other", cfg) == (
        'a <s class="other">b</s><span class="other">c</span>'
    )
