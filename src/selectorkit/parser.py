# Selector text parser for selectorkit
# Replays a selector string through the builder so text input obeys the same rules

from __future__ import annotations

import logging

from .selector import (
    PartKind,
    SelectorBuilder,
    SelectorSyntaxError,
    combine,
    css_selector_builder,
)

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r\f"


class TokenType:
    PART: str = "PART"  # one simple selector inside a compound
    COMBINATOR: str = "COMBINATOR"  # >, +, ~, or whitespace (descendant)
    EOF: str = "EOF"


class Token:
    __slots__ = ("kind", "position", "type", "value")

    type: str
    value: str | None
    kind: str | None
    position: int

    def __init__(self, token_type: str, value: str | None = None, kind: str | None = None, position: int = 0) -> None:
        self.type = token_type
        self.value = value
        self.kind = kind
        self.position = position

    def __repr__(self) -> str:
        if self.kind:
            return f"Token({self.type}, {self.kind}, {self.value!r})"
        return f"Token({self.type}, {self.value!r})"


class SelectorTokenizer:
    """Tokenizes a CSS selector string into parts and combinators."""

    __slots__ = ("length", "pos", "selector")

    selector: str
    pos: int
    length: int

    def __init__(self, selector: str) -> None:
        self.selector = selector
        self.pos = 0
        self.length = len(selector)

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos < self.length:
            return self.selector[pos]
        return ""

    def _skip_whitespace(self) -> None:
        while self.pos < self.length and self.selector[self.pos] in _WHITESPACE:
            self.pos += 1

    def _is_name_start(self, ch: str) -> bool:
        # CSS identifier start: letter, underscore, hyphen, or non-ASCII
        return ch.isalpha() or ch == "_" or ch == "-" or ord(ch) > 127

    def _is_name_char(self, ch: str) -> bool:
        return self._is_name_start(ch) or ch.isdigit()

    def _read_name(self) -> str:
        start = self.pos
        while self.pos < self.length and self._is_name_char(self.selector[self.pos]):
            self.pos += 1
        return self.selector[start : self.pos]

    def _expect_name(self, after: str) -> str:
        name = self._read_name()
        if not name:
            raise SelectorSyntaxError("expected-identifier", self.pos, after)
        return name

    def _skip_string(self) -> None:
        # Positioned on the opening quote; leaves pos after the closing quote
        quote = self.selector[self.pos]
        start = self.pos
        self.pos += 1
        while self.pos < self.length:
            ch = self.selector[self.pos]
            if ch == "\\":
                self.pos += 2
                continue
            self.pos += 1
            if ch == quote:
                return
        raise SelectorSyntaxError("unterminated-string", start)

    def _read_attribute(self) -> str:
        # Positioned on "["; returns the raw text between the brackets
        open_pos = self.pos
        self.pos += 1
        start = self.pos
        while self.pos < self.length:
            ch = self.selector[self.pos]
            if ch == '"' or ch == "'":
                self._skip_string()
                continue
            if ch == "]":
                value = self.selector[start : self.pos]
                self.pos += 1
                if not value.strip():
                    raise SelectorSyntaxError("expected-identifier", start, "[")
                return value
            self.pos += 1
        raise SelectorSyntaxError("unterminated-attribute", open_pos)

    def _read_arguments(self, name: str) -> str:
        # Positioned on "("; returns the text up to and including the matching ")"
        open_pos = self.pos
        start = self.pos
        paren_depth = 0
        while self.pos < self.length:
            ch = self.selector[self.pos]
            if ch == '"' or ch == "'":
                self._skip_string()
                continue
            self.pos += 1
            if ch == "(":
                paren_depth += 1
            elif ch == ")":
                paren_depth -= 1
                if paren_depth == 0:
                    return self.selector[start : self.pos]
        raise SelectorSyntaxError("unterminated-parenthesis", open_pos, name)

    def _read_pseudo(self, prefix: str) -> str:
        name = self._expect_name(prefix)
        if self._peek() == "(":
            return name + self._read_arguments(prefix + name)
        return name

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []
        pending_whitespace = False

        while self.pos < self.length:
            ch = self.selector[self.pos]
            start = self.pos

            # Skip whitespace but remember it for combinator detection
            if ch in _WHITESPACE:
                pending_whitespace = True
                self._skip_whitespace()
                continue

            if ch in ">+~":
                if not tokens or tokens[-1].type == TokenType.COMBINATOR:
                    raise SelectorSyntaxError("unexpected-character", self.pos, ch)
                pending_whitespace = False
                self.pos += 1
                self._skip_whitespace()
                tokens.append(Token(TokenType.COMBINATOR, ch, position=start))
                continue

            # Whitespace between two compounds is the descendant combinator.
            # Explicit combinators consume trailing whitespace, so this never
            # follows another combinator.
            if pending_whitespace and tokens:
                tokens.append(Token(TokenType.COMBINATOR, " ", position=start))
            pending_whitespace = False

            if ch == "*":
                self.pos += 1
                tokens.append(Token(TokenType.PART, "*", PartKind.ELEMENT, start))
                continue

            if ch == "#":
                self.pos += 1
                tokens.append(Token(TokenType.PART, self._expect_name("#"), PartKind.ID, start))
                continue

            if ch == ".":
                self.pos += 1
                tokens.append(Token(TokenType.PART, self._expect_name("."), PartKind.CLASS, start))
                continue

            if ch == "[":
                tokens.append(Token(TokenType.PART, self._read_attribute(), PartKind.ATTRIBUTE, start))
                continue

            if ch == ":":
                if self._peek(1) == ":":
                    self.pos += 2
                    tokens.append(Token(TokenType.PART, self._read_pseudo("::"), PartKind.PSEUDO_ELEMENT, start))
                else:
                    self.pos += 1
                    tokens.append(Token(TokenType.PART, self._read_pseudo(":"), PartKind.PSEUDO_CLASS, start))
                continue

            if self._is_name_start(ch):
                tokens.append(Token(TokenType.PART, self._read_name(), PartKind.ELEMENT, start))
                continue

            raise SelectorSyntaxError("unexpected-character", self.pos, ch)

        if tokens and tokens[-1].type == TokenType.COMBINATOR:
            last = tokens[-1]
            raise SelectorSyntaxError("dangling-combinator", last.position, last.value)

        tokens.append(Token(TokenType.EOF, position=self.length))
        return tokens


class SelectorParser:
    """Replays a token list through the selector builder."""

    __slots__ = ("pos", "tokens")

    tokens: list[Token]
    pos: int

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    def _peek(self) -> Token:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return Token(TokenType.EOF)

    def _advance(self) -> Token:
        token = self._peek()
        self.pos += 1
        return token

    def parse(self) -> SelectorBuilder:
        """Parse a complex selector, folding compounds left to right."""
        result = self._parse_compound_selector()

        while self._peek().type == TokenType.COMBINATOR:
            combinator = self._advance().value or " "
            right = self._parse_compound_selector()
            result = combine(result, combinator, right)

        return result

    def _parse_compound_selector(self) -> SelectorBuilder:
        builder = css_selector_builder
        while self._peek().type == TokenType.PART:
            token = self._advance()
            logger.debug("Adding %s part %r", token.kind, token.value)
            builder = builder.add(token.kind or PartKind.ELEMENT, token.value or "")
        return builder


def parse_selector(selector_string: str) -> SelectorBuilder:
    """
    Parse selector text into a SelectorBuilder.

    Each compound selector is rebuilt part by part, so ordering and
    uniqueness violations raise the same errors as the builder methods.

    Args:
        selector_string: A CSS selector such as 'a[href$=".png"]:focus'

    Returns:
        The rebuilt SelectorBuilder

    Raises:
        SelectorSyntaxError: If the text cannot be tokenized
        DuplicateSelectorPartError: If a singleton part repeats in a compound
        SelectorOrderError: If parts of a compound are out of order
    """
    if not selector_string or not selector_string.strip():
        raise SelectorSyntaxError("empty-selector", 0)

    tokens = SelectorTokenizer(selector_string).tokenize()
    logger.debug("Tokenized %r into %d tokens", selector_string, len(tokens))
    return SelectorParser(tokens).parse()
