"""Tests for rebuilding selectors from text."""

import logging

import pytest

from selectorkit import (
    DuplicateSelectorPartError,
    SelectorOrderError,
    SelectorSyntaxError,
    css_selector_builder as builder,
    parse_selector,
)
from selectorkit.parser import SelectorTokenizer, TokenType


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


class TestTokenizer:
    def test_compound_parts(self):
        tokens = SelectorTokenizer("a#b.c[d]:e::f").tokenize()
        kinds = [(t.kind, t.value) for t in tokens if t.type == TokenType.PART]
        assert kinds == [
            ("element", "a"),
            ("id", "b"),
            ("class", "c"),
            ("attribute", "d"),
            ("pseudo-class", "e"),
            ("pseudo-element", "f"),
        ]
        assert tokens[-1].type == TokenType.EOF

    def test_descendant_combinator_from_whitespace(self):
        tokens = SelectorTokenizer("div  p").tokenize()
        assert [t.type for t in tokens] == [TokenType.PART, TokenType.COMBINATOR, TokenType.PART, TokenType.EOF]
        assert tokens[1].value == " "

    def test_explicit_combinator_absorbs_whitespace(self):
        tokens = SelectorTokenizer("div  >  p").tokenize()
        combinators = [t.value for t in tokens if t.type == TokenType.COMBINATOR]
        assert combinators == [">"]

    def test_positions(self):
        tokens = SelectorTokenizer("ul > li.item").tokenize()
        assert [t.position for t in tokens] == [0, 3, 5, 7, 12]


# ---------------------------------------------------------------------------
# Parsing valid selectors
# ---------------------------------------------------------------------------


class TestParseSelector:
    @pytest.mark.parametrize(
        "text",
        [
            "div",
            "*",
            "*.x",
            "#main.container.editable",
            'a[href$=".png"]:focus',
            "li:nth-child(2n+1)::before",
            "input[type=checkbox]:checked",
            "div#main.container.draggable + table#data ~ tr:nth-of-type(even)",
            "p::first-line",
        ],
    )
    def test_text_is_preserved(self, text):
        assert parse_selector(text).stringify() == text

    def test_matches_builder_output(self):
        built = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert parse_selector('a[href$=".png"]:focus').stringify() == built.stringify()

    def test_descendant_combinator(self):
        assert parse_selector("div p").stringify() == "div   p"

    def test_combinators_are_normalized(self):
        assert parse_selector("div>p+span~em").stringify() == "div > p + span ~ em"

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_selector("  ul > li  \n").stringify() == "ul > li"

    def test_bracket_inside_quoted_attribute(self):
        assert parse_selector('[title="a]b"]').stringify() == '[title="a]b"]'

    def test_functional_pseudo_class_with_nested_parens_and_quotes(self):
        text = ':not(.a, [title="x)"]):is(p, :has(b))'
        assert parse_selector(text).stringify() == text

    def test_functional_pseudo_element(self):
        assert parse_selector("::slotted(span)").stringify() == "::slotted(span)"

    def test_singletons_may_repeat_across_compounds(self):
        assert parse_selector("div#a > div#b").stringify() == "div#a > div#b"

    def test_debug_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="selectorkit.parser"):
            parse_selector("a.b")
        assert "Tokenized 'a.b'" in caplog.text
        assert "Adding class part 'b'" in caplog.text


# ---------------------------------------------------------------------------
# Builder rules applied to text
# ---------------------------------------------------------------------------


class TestBuilderRules:
    def test_order_violation(self):
        with pytest.raises(SelectorOrderError):
            parse_selector(".a#b")

    def test_duplicate_id(self):
        with pytest.raises(DuplicateSelectorPartError):
            parse_selector("#a#b")

    def test_duplicate_element_via_universal(self):
        with pytest.raises(DuplicateSelectorPartError):
            parse_selector("*div")

    def test_order_violation_in_later_compound(self):
        with pytest.raises(SelectorOrderError):
            parse_selector("div > p:hover.x")


# ---------------------------------------------------------------------------
# Syntax errors
# ---------------------------------------------------------------------------


class TestSyntaxErrors:
    @pytest.mark.parametrize(
        "text, code, position",
        [
            ("", "empty-selector", 0),
            ("   ", "empty-selector", 0),
            ("div,p", "unexpected-character", 3),
            ("> a", "unexpected-character", 0),
            ("a > + b", "unexpected-character", 4),
            ("a  >", "dangling-combinator", 3),
            ("#", "expected-identifier", 1),
            ("div.", "expected-identifier", 4),
            ("a:", "expected-identifier", 2),
            ("a::", "expected-identifier", 3),
            ("[]", "expected-identifier", 1),
            ("[href", "unterminated-attribute", 0),
            ('[title="abc]', "unterminated-string", 7),
            ("a:hover(", "unterminated-parenthesis", 7),
            ("a!", "unexpected-character", 1),
        ],
    )
    def test_error(self, text, code, position):
        with pytest.raises(SelectorSyntaxError) as excinfo:
            parse_selector(text)
        assert excinfo.value.code == code
        assert excinfo.value.position == position

    def test_message_mentions_position(self):
        with pytest.raises(SelectorSyntaxError, match="Unexpected character ',' at position 3"):
            parse_selector("div,p")
