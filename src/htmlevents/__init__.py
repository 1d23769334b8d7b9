"""Render streams of HTML events to escaped HTML text or bytes."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .attrs import Attribute, AttributeList
from .errors import RenderError
from .escape import escape_html, write_escaped
from .serialize import render_event, to_html, write_event, write_events
from .stream import HTMLReader, ReaderState, iter_chunks
from .tokens import (
    Comment,
    Doctype,
    EndTag,
    Event,
    RawText,
    StartTag,
    Text,
    attribute,
    attribute_list,
    closed,
    closed_tag,
    comment,
    doctype,
    end_tag,
    raw_text,
    start_tag,
    text,
)

try:
    __version__ = version("htmlevents")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "dev"

__all__ = [
    "Attribute",
    "AttributeList",
    "Comment",
    "Doctype",
    "EndTag",
    "Event",
    "HTMLReader",
    "RawText",
    "ReaderState",
    "RenderError",
    "StartTag",
    "Text",
    "attribute",
    "attribute_list",
    "closed",
    "closed_tag",
    "comment",
    "doctype",
    "end_tag",
    "escape_html",
    "iter_chunks",
    "raw_text",
    "render_event",
    "start_tag",
    "text",
    "to_html",
    "write_escaped",
    "write_event",
    "write_events",
]
