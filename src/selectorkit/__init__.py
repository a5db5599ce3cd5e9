from .parser import parse_selector
from .selector import (
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    SelectorBuilder,
    SelectorError,
    SelectorOrderError,
    SelectorSyntaxError,
    combine,
    css_selector_builder,
)
from .serialize import from_json, to_json
from .shapes import Rectangle

__all__ = [
    "DuplicateSelectorPartError",
    "InvalidCombinatorError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "SelectorOrderError",
    "SelectorSyntaxError",
    "combine",
    "css_selector_builder",
    "from_json",
    "parse_selector",
    "to_json",
]
