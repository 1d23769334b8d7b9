from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from .attrs import Attribute, AttributeList, AttributeSource, write_attributes
from .escape import write_escaped

Write = Callable[[str], object]


class Event(ABC):
    """Base class for the structural events of an HTML document stream."""

    __slots__ = ()

    @abstractmethod
    def write_to(self, write: Write) -> None: ...

    def closed(self) -> Event:
        return self

    def __str__(self) -> str:
        parts: list[str] = []
        self.write_to(parts.append)
        return "".join(parts)


class StartTag(Event):
    __slots__ = ("attrs", "name", "self_closing")

    name: str
    attrs: AttributeList
    self_closing: bool

    def __init__(
        self,
        name: str,
        attrs: AttributeList | AttributeSource | None = None,
        self_closing: bool = False,
    ) -> None:
        self.name = name
        self.attrs = attrs if isinstance(attrs, AttributeList) else AttributeList(attrs)
        self.self_closing = bool(self_closing)

    def write_to(self, write: Write) -> None:
        write("<")
        write(self.name)
        write_attributes(write, self.attrs)
        write(" />" if self.self_closing else ">")

    def closed(self) -> StartTag:
        """Return a copy rendered with a trailing ``/>``."""
        return StartTag(self.name, self.attrs.copy(), self_closing=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StartTag):
            return NotImplemented
        return self.name == other.name and self.attrs == other.attrs and self.self_closing == other.self_closing

    __hash__ = None  # type: ignore[assignment]  # Holds a mutable AttributeList

    def __repr__(self) -> str:
        return f"StartTag({self.name!r}, {self.attrs!r}, self_closing={self.self_closing})"


class EndTag(Event):
    __slots__ = ("name",)

    name: str

    def __init__(self, name: str) -> None:
        self.name = name

    def write_to(self, write: Write) -> None:
        write("</")
        write(self.name)
        write(">")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EndTag):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((EndTag, self.name))

    def __repr__(self) -> str:
        return f"EndTag({self.name!r})"


class _DataEvent(Event):
    __slots__ = ("data",)

    data: str

    def __init__(self, data: str) -> None:
        self.data = data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _DataEvent):
            return NotImplemented
        return type(self) is type(other) and self.data == other.data

    def __hash__(self) -> int:
        return hash((type(self), self.data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


class Text(_DataEvent):
    """Character data, escaped when rendered."""

    __slots__ = ()

    def write_to(self, write: Write) -> None:
        write_escaped(write, self.data)


class RawText(_DataEvent):
    """Markup written verbatim. The producer guarantees it is safe."""

    __slots__ = ()

    def write_to(self, write: Write) -> None:
        if self.data:
            write(self.data)


class Comment(_DataEvent):
    __slots__ = ()

    def write_to(self, write: Write) -> None:
        write("<!--")
        write(self.data)
        write("-->")


class Doctype(Event):
    __slots__ = ()

    def write_to(self, write: Write) -> None:
        write("<!DOCTYPE html>")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Doctype):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Doctype)

    def __repr__(self) -> str:
        return "Doctype()"


def closed(event: Event) -> Event:
    """Mark a start tag as self-closing; any other event is returned unchanged."""
    return event.closed()


# Builders


def _attr_name(keyword: str) -> str:
    # class_ -> class, for_ -> for
    if keyword.endswith("_") and len(keyword) > 1:
        return keyword[:-1]
    return keyword


def attribute(name: str, value: str = "") -> Attribute:
    return Attribute(name, value)


def attribute_list(pairs: AttributeSource | None = None, **kwargs: str) -> AttributeList:
    """Build an AttributeList from pairs or a mapping, then keyword attributes.

    Keyword names lose one trailing underscore so that reserved words can be
    passed: ``attribute_list(class_="fun")`` gives ``class="fun"``.
    """
    attrs = AttributeList(pairs)
    for keyword, value in kwargs.items():
        attrs.set(_attr_name(keyword), value)
    return attrs


def start_tag(name: str, attrs: AttributeList | AttributeSource | None = None, **kwargs: str) -> StartTag:
    if kwargs:
        attrs = attribute_list(attrs.items() if isinstance(attrs, AttributeList) else attrs, **kwargs)
    return StartTag(name, attrs)


def closed_tag(name: str, attrs: AttributeList | AttributeSource | None = None, **kwargs: str) -> StartTag:
    return start_tag(name, attrs, **kwargs).closed()


def end_tag(name: str) -> EndTag:
    return EndTag(name)


def text(data: str) -> Text:
    return Text(data)


def raw_text(data: str) -> RawText:
    return RawText(data)


def comment(data: str) -> Comment:
    return Comment(data)


def doctype() -> Doctype:
    return Doctype()
