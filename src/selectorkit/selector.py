# CSS selector builder for selectorkit
# Composes selector text through chained calls that never mutate the receiver

from __future__ import annotations

from typing import Protocol

from .errors import generate_error_message


class SelectorError(ValueError):
    """Raised when a CSS selector is invalid."""

    code: str

    def __init__(self, code: str, value: str | None = None, position: int | None = None) -> None:
        self.code = code
        super().__init__(generate_error_message(code, value, position))


class DuplicateSelectorPartError(SelectorError):
    """Raised when element, id or pseudo-element is added twice to one selector."""

    kind: str

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__("duplicate-selector-part", kind)


class SelectorOrderError(SelectorError):
    """Raised when a part is added after a part that must follow it."""

    kind: str

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__("selector-order", kind)


class InvalidCombinatorError(SelectorError):
    """Raised when combine() gets something other than ' ', '+', '~' or '>'."""

    combinator: object

    def __init__(self, combinator: object) -> None:
        self.combinator = combinator
        super().__init__("invalid-combinator", str(combinator))


class SelectorSyntaxError(SelectorError):
    """Raised when selector text cannot be tokenized."""

    position: int

    def __init__(self, code: str, position: int, value: str | None = None) -> None:
        self.position = position
        super().__init__(code, value, position)


# Part kinds, listed in the order they must appear within one selector
class PartKind:
    ELEMENT: str = "element"  # div
    ID: str = "id"  # #main
    CLASS: str = "class"  # .container
    ATTRIBUTE: str = "attribute"  # [href$=".png"]
    PSEUDO_CLASS: str = "pseudo-class"  # :hover
    PSEUDO_ELEMENT: str = "pseudo-element"  # ::before


RANKS: dict[str, int] = {
    PartKind.ELEMENT: 0,
    PartKind.ID: 1,
    PartKind.CLASS: 2,
    PartKind.ATTRIBUTE: 3,
    PartKind.PSEUDO_CLASS: 4,
    PartKind.PSEUDO_ELEMENT: 5,
}

SINGLETON_KINDS: frozenset[str] = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

# (prefix, suffix) wrapped around the raw value
_RENDERING: dict[str, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}

COMBINATORS: frozenset[str] = frozenset({" ", "+", "~", ">"})


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


class SelectorBuilder:
    """Accumulated selector text plus the state needed to validate the next part.

    Every part method returns a new builder; the receiver is left untouched,
    so a failed call never invalidates the chain it was made on.
    """

    __slots__ = ("last_rank", "text", "used_kinds")

    text: str
    last_rank: int
    used_kinds: frozenset[str]

    def __init__(self, text: str = "", last_rank: int = -1, used_kinds: frozenset[str] = frozenset()) -> None:
        self.text = text
        self.last_rank = last_rank  # -1 until the first part is added
        self.used_kinds = used_kinds

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.text!r})"

    def __str__(self) -> str:
        return self.text

    def _append(self, kind: str, value: str) -> SelectorBuilder:
        if kind in SINGLETON_KINDS and kind in self.used_kinds:
            raise DuplicateSelectorPartError(kind)

        rank = RANKS[kind]
        if rank < self.last_rank:
            raise SelectorOrderError(kind)

        prefix, suffix = _RENDERING[kind]
        used_kinds = self.used_kinds | {kind} if kind in SINGLETON_KINDS else self.used_kinds
        return SelectorBuilder(f"{self.text}{prefix}{value}{suffix}", rank, used_kinds)

    def element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        """Add a class part (``class`` is reserved in Python)."""
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Add an attribute part. The value goes between the brackets verbatim."""
        return self._append(PartKind.ATTRIBUTE, value)

    attribute = attr

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    def add(self, kind: str, value: str) -> SelectorBuilder:
        """Add a part by kind name, e.g. ``add("pseudo-class", "hover")``."""
        if kind not in RANKS:
            raise ValueError(f"Unknown selector part kind: {kind!r}")
        return self._append(kind, value)

    def combine(self, left: Stringifiable, combinator: str, right: Stringifiable) -> SelectorBuilder:
        """Join two selectors with a combinator. The receiver's own state is not used."""
        return combine(left, combinator, right)

    def stringify(self) -> str:
        return self.text


def combine(left: Stringifiable, combinator: str, right: Stringifiable) -> SelectorBuilder:
    """
    Join two built selectors with a combinator.

    The result renders as ``"<left> <combinator> <right>"`` and starts a fresh
    chain: no ordering or uniqueness state is carried over from either side.

    Args:
        left: Selector on the left of the combinator
        combinator: One of " ", "+", "~", ">"
        right: Selector on the right of the combinator

    Returns:
        A new SelectorBuilder holding the combined text

    Raises:
        InvalidCombinatorError: If the combinator is not recognized
    """
    if not isinstance(combinator, str) or combinator not in COMBINATORS:
        raise InvalidCombinatorError(combinator)
    return SelectorBuilder(f"{left.stringify()} {combinator} {right.stringify()}")


# Facade: the empty builder every chain starts from
css_selector_builder: SelectorBuilder = SelectorBuilder()
