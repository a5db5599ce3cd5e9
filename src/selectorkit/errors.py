"""Centralized error message definitions for selector building and parsing.

Every selector error carries a kebab-case code. This module turns those codes
into human-readable messages so the builder, the parser and the CLI report
problems consistently.
"""

from __future__ import annotations


def generate_error_message(
    code: str,
    value: str | None = None,
    position: int | None = None,
) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        value: Optional offending value (part kind, combinator, character)
        position: Optional character offset for syntax errors

    Returns:
        Human-readable error message string
    """
    messages = {
        # ================================================================
        # BUILDER ERRORS
        # ================================================================
        "duplicate-selector-part": (
            "Element, id and pseudo-element should not occur more than one time inside the selector"
            f" (got a second {value})"
        ),
        "selector-order": (
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
            f" (got {value} too late)"
        ),
        "invalid-combinator": (
            f'Combinator parsing error! Only " ", +, ~, > combinators are allowed to use (got {value!r})'
        ),
        # ================================================================
        # PARSER ERRORS
        # ================================================================
        "empty-selector": "Empty selector",
        "unexpected-character": f"Unexpected character {value!r} at position {position}",
        "expected-identifier": f"Expected identifier after {value} at position {position}",
        "unterminated-string": f"Unterminated string starting at position {position}",
        "unterminated-attribute": f"Expected ] to close attribute selector opened at position {position}",
        "unterminated-parenthesis": f"Expected ) to close {value}( opened at position {position}",
        "dangling-combinator": f"Expected selector after combinator {value!r} at position {position}",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)
