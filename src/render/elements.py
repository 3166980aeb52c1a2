"""Immutable display tree produced by every component.

A component returns an ``Element`` (or ``None`` for an empty render).
Publishers serialize the tree; nothing here knows about an output
format.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

Node = Union["Element", str]
Child = Union[Node, None, Iterable["Child"]]


@dataclass(frozen=True)
class Element:
    """A tagged node with ordered attributes and children."""

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()

    def attr(self, name: str) -> str | None:
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    @property
    def classes(self) -> list[str]:
        return (self.attr("class") or "").split()

    @property
    def text(self) -> str:
        """All text below this node, in document order."""
        parts: list[str] = []
        for child in self.children:
            parts.append(child if isinstance(child, str) else child.text)
        return "".join(parts)

    def iter(self) -> Iterator[Element]:
        """Walk this element and its descendants depth-first."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def find_all(self, class_name: str) -> list[Element]:
        return [el for el in self.iter() if class_name in el.classes]

    def find(self, class_name: str) -> Element | None:
        for el in self.iter():
            if class_name in el.classes:
                return el
        return None


def _flatten(children: Iterable[Child]) -> Iterator[Node]:
    for child in children:
        if child is None:
            continue
        if isinstance(child, (str, Element)):
            yield child
        else:
            yield from _flatten(child)


def h(tag: str, *children: Child, **attrs: str | None) -> Element:
    """Build an element.

    ``None`` children are dropped and nested iterables are flattened, so
    optional sections can be passed straight through.  ``class_`` maps to
    the ``class`` attribute; attributes set to ``None`` are omitted.
    """
    pairs = tuple(
        (key.rstrip("_").replace("_", "-"), value)
        for key, value in attrs.items()
        if value is not None
    )
    return Element(tag=tag, attrs=pairs, children=tuple(_flatten(children)))
