"""Output encoding for rendered HTML.

Rendering produces Unicode text; the pull reader hands out bytes. Each reader
encodes through a single incremental encoder, so codecs that open with a byte
order mark write it once per stream, and stateful codecs are flushed at the
end. Text that cannot be represented in the chosen encoding is reported as a
RenderError instead of being silently replaced.
"""

from __future__ import annotations

import codecs

from .errors import RenderError

DEFAULT_ENCODING = "utf-8"

# Security: never emit utf-7.
_REFUSED_ENCODINGS: set[str] = {"utf-7"}


def resolve_encoding(label: str | bytes | None) -> str:
    """Return the canonical codec name for ``label``.

    An empty label selects UTF-8. Raises LookupError for labels Python does
    not know and for refused encodings.
    """
    if isinstance(label, bytes):
        label = label.decode("ascii", "ignore")
    s = (label or "").strip()
    if not s:
        return DEFAULT_ENCODING

    name = codecs.lookup(s).name
    if name in _REFUSED_ENCODINGS:
        raise LookupError(f"refusing to encode HTML as {name}")
    return name


class HTMLEncoder:
    """Strict incremental encoder shared by all events of one stream."""

    __slots__ = ("_encoder", "_started", "encoding")

    encoding: str
    _started: bool

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = resolve_encoding(encoding)
        self._encoder = codecs.getincrementalencoder(self.encoding)(errors="strict")
        self._started = False

    def encode(self, html: str, final: bool = False) -> bytes:
        try:
            data = self._encoder.encode(html, final)
        except UnicodeEncodeError as e:
            if not self._started:
                # Some encoders drop their BOM flag before failing.
                self._encoder.reset()
            raise RenderError("unencodable-text", detail=self.encoding) from e
        if data:
            self._started = True
        return data


def encode_html(html: str, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Encode a complete rendering in one go."""
    return HTMLEncoder(encoding).encode(html, final=True)
