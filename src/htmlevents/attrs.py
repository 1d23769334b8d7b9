"""Attributes and ordered attribute lists for start tags."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping

from .escape import write_escaped


class Attribute:
    __slots__ = ("name", "value")

    name: str
    value: str

    def __init__(self, name: str, value: str = "") -> None:
        self.name = name
        self.value = value

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {self.value!r})"

    def __str__(self) -> str:
        return render_attribute(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name, self.value))

    def _sort_key(self) -> tuple[str, str]:
        return (self.name, self.value)


AttributeSource = Mapping[str, str] | Iterable[Attribute | tuple[str, str]]


def _coerce(item: Attribute | tuple[str, str]) -> Attribute:
    if isinstance(item, Attribute):
        return item
    name, value = item
    return Attribute(name, value)


class AttributeList:
    """Ordered name/value pairs of a start tag.

    Rendering follows insertion order, but two lists compare equal when they
    hold the same attributes in any order. Construction keeps duplicates as
    given; only ``set`` keeps a name unique from then on.
    """

    __slots__ = ("_attrs",)

    _attrs: list[Attribute]

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, attrs: AttributeSource | None = None) -> None:
        if attrs is None:
            self._attrs = []
        elif isinstance(attrs, Mapping):
            self._attrs = [Attribute(name, value) for name, value in attrs.items()]
        else:
            self._attrs = [_coerce(item) for item in attrs]

    @classmethod
    def empty(cls) -> AttributeList:
        return cls()

    def get(self, name: str) -> str | None:
        for attr in self._attrs:
            if attr.name == name:
                return attr.value
        return None

    def set(self, name: str, value: str) -> None:
        """Overwrite the value of ``name`` in place, or append it at the end."""
        for i, attr in enumerate(self._attrs):
            if attr.name == name:
                self._attrs[i] = Attribute(name, value)
                return
        self._attrs.append(Attribute(name, value))

    def remove(self, name: str) -> Attribute | None:
        for i, attr in enumerate(self._attrs):
            if attr.name == name:
                return self._attrs.pop(i)
        return None

    def items(self) -> list[tuple[str, str]]:
        return [(attr.name, attr.value) for attr in self._attrs]

    def copy(self) -> AttributeList:
        return AttributeList(self._attrs)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._attrs)

    def __len__(self) -> int:
        return len(self._attrs)

    def __bool__(self) -> bool:
        return bool(self._attrs)

    def __contains__(self, name: object) -> bool:
        return any(attr.name == name for attr in self._attrs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeList):
            return NotImplemented
        if len(self._attrs) != len(other._attrs):
            return False
        key = Attribute._sort_key
        return sorted(self._attrs, key=key) == sorted(other._attrs, key=key)

    def __repr__(self) -> str:
        return f"AttributeList({self.items()!r})"

    def __str__(self) -> str:
        parts: list[str] = []
        write_attributes(parts.append, self)
        return "".join(parts)


def write_attribute(write: Callable[[str], object], attr: Attribute) -> None:
    # Names are written verbatim; an empty value uses the bare-name syntax.
    write(attr.name)
    if attr.value == "":
        return
    write('="')
    write_escaped(write, attr.value)
    write('"')


def write_attributes(write: Callable[[str], object], attrs: Iterable[Attribute]) -> None:
    """Write each attribute preceded by a single space, in list order."""
    for attr in attrs:
        write(" ")
        write_attribute(write, attr)


def render_attribute(attr: Attribute) -> str:
    parts: list[str] = []
    write_attribute(parts.append, attr)
    return "".join(parts)
