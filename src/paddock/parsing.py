"""Document parsing: one node interface over XML markup and JSON feeds.

Ergast-style feeds come as XML (``<Driver driverId="..."><GivenName>``) or as
JSON (``{"driverId": ..., "givenName": ...}``). The extractors only see the
:class:`FeedNode` interface, so both encodings go through the same code.

Naming bridge for JSON: a child element ``GivenName`` is looked up as the key
``GivenName`` first and ``givenName`` second, a repeated element ``Race`` is
found under the list key ``Races``.
"""

from __future__ import annotations

import json
from typing import Any, Iterator, Protocol, runtime_checkable

from bs4 import BeautifulSoup, Tag

from paddock.exceptions import FeedParseError

RawDocument = str | bytes | dict[str, Any]

# JSON objects that stand in for XML elements carrying text content,
# e.g. {"millis": "5504742", "time": "1:31:44.742"} for <Time millis=...>.
_JSON_TEXT_KEYS = ("time", "speed")


@runtime_checkable
class FeedNode(Protocol):
    """Read-only accessors the extractors rely on."""

    @property
    def name(self) -> str: ...

    @property
    def text(self) -> str: ...

    def attr(self, name: str) -> str | None: ...

    def child(self, tag: str) -> FeedNode | None: ...

    def first(self, tag: str) -> FeedNode | None: ...

    def all(self, tag: str) -> list[FeedNode]: ...


class DocumentParser(Protocol):
    """Turns a raw feed document into a tree of :class:`FeedNode`."""

    def parse(self, raw: RawDocument) -> FeedNode: ...


class XmlNode:
    """FeedNode backed by a BeautifulSoup tag."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def __repr__(self) -> str:
        return f"XmlNode({self.name!r})"

    @property
    def name(self) -> str:
        return self._tag.name or ""

    @property
    def text(self) -> str:
        return self._tag.get_text().strip()

    def attr(self, name: str) -> str | None:
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def child(self, tag: str) -> XmlNode | None:
        found = self._tag.find(tag, recursive=False)
        return XmlNode(found) if isinstance(found, Tag) else None

    def first(self, tag: str) -> XmlNode | None:
        found = self._tag.find(tag)
        return XmlNode(found) if isinstance(found, Tag) else None

    def all(self, tag: str) -> list[FeedNode]:
        return [XmlNode(t) for t in self._tag.find_all(tag) if isinstance(t, Tag)]


def _json_keys(tag: str) -> tuple[str, str]:
    return tag, tag[:1].lower() + tag[1:]


class JsonNode:
    """FeedNode backed by a decoded Ergast JSON value."""

    __slots__ = ("_name", "_value")

    def __init__(self, value: Any, name: str = "") -> None:
        self._value = value
        self._name = name

    def __repr__(self) -> str:
        return f"JsonNode({self._name!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def text(self) -> str:
        value = self._value
        if isinstance(value, dict):
            for key in _JSON_TEXT_KEYS:
                if isinstance(value.get(key), (str, int, float)):
                    return str(value[key]).strip()
            return ""
        if value is None or isinstance(value, list):
            return ""
        return str(value).strip()

    def attr(self, name: str) -> str | None:
        if not isinstance(self._value, dict):
            return None
        value = self._value.get(name)
        if value is None or isinstance(value, (dict, list)):
            return None
        return str(value)

    def child(self, tag: str) -> JsonNode | None:
        if not isinstance(self._value, dict):
            return None
        for key in _json_keys(tag):
            value = self._value.get(key)
            if value is not None and not isinstance(value, list):
                return JsonNode(value, tag)
        return None

    def first(self, tag: str) -> JsonNode | None:
        return next(self._walk(self._value, tag), None)

    def all(self, tag: str) -> list[FeedNode]:
        return list(self._walk(self._value, tag))

    @classmethod
    def _walk(cls, value: Any, tag: str) -> Iterator[JsonNode]:
        """Yield descendants matching ``tag`` in document order."""
        plural = tag + "s"
        if isinstance(value, list):
            for item in value:
                yield from cls._walk(item, tag)
            return
        if not isinstance(value, dict):
            return
        for key, item in value.items():
            if key == plural and isinstance(item, list):
                for element in item:
                    yield JsonNode(element, tag)
            elif key == tag and isinstance(item, dict):
                yield JsonNode(item, tag)
            else:
                yield from cls._walk(item, tag)


def parse_document(raw: RawDocument) -> FeedNode:
    """Parse an XML string or a JSON string/object into a :class:`FeedNode`.

    Raises:
        FeedParseError: if the document is empty or not decodable.
    """
    if isinstance(raw, dict):
        return JsonNode(raw, "MRData")
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if not isinstance(raw, str) or not raw.strip():
        raise FeedParseError("Empty or invalid feed document")

    text = raw.strip()
    if text[0] in "{[":
        try:
            return JsonNode(json.loads(text), "MRData")
        except json.JSONDecodeError as exc:
            raise FeedParseError(f"Invalid JSON feed document: {exc}") from exc

    soup = BeautifulSoup(text, "xml")
    root = soup.find()
    if not isinstance(root, Tag):
        raise FeedParseError("Feed document contains no elements")
    return XmlNode(root)


class SoupDocumentParser:
    """Default :class:`DocumentParser` (lxml-backed BeautifulSoup + json)."""

    def parse(self, raw: RawDocument) -> FeedNode:
        return parse_document(raw)


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML article."""
    return BeautifulSoup(html, "html.parser")
