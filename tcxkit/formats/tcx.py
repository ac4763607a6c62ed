"""TCX file format parser for tcxkit.

This module decodes TCX (Training Center XML) data into the immutable records
defined in :mod:`tcxkit.models`. Decoding is permissive: fields are filled by
walking the path table in ``tcxkit.models.SCHEMA``, elements are matched by
local name (namespaces are ignored) and any path missing from the source
leaves the field at its default value. Only malformed markup, a foreign root
element or a value that cannot be converted is treated as an error.
"""

import gzip
import logging
import os
import re
import xml.etree.ElementTree as ET
from datetime import UTC, datetime

from dateutil import parser as dt_parser

from tcxkit.models import SCHEMA, Tcx, new_tcx

log = logging.getLogger(__name__)

ROOT_ELEMENT = "TrainingCenterDatabase"

# Full date and time, e.g. "2024-05-27T12:00:00"; the offset may be omitted
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}")


class TcxParseError(ValueError):
    """Raised when data cannot be decoded as a TCX document."""


def _local(name: str) -> str:
    # "{namespace}Local" -> "Local"
    return name.rsplit("}", 1)[-1]


def _find_all(elem: ET.Element, path: str) -> list[ET.Element]:
    """Return every element reachable from *elem* along *path*, in document order."""
    nodes = [elem]
    for step in filter(None, path.split("/")):
        nodes = [child for node in nodes for child in node if _local(child.tag) == step]
    return nodes


def _attribute(elem: ET.Element, name: str) -> str | None:
    for key, value in elem.attrib.items():
        if _local(key) == name:
            return value
    return None


def _lookup(elem: ET.Element, paths: tuple[str, ...]) -> str | None:
    """Return the raw text (or attribute value) at the first path present.

    Within that path a repeated element overwrites earlier ones, so the last
    occurrence wins.
    """
    for path in paths:
        steps, _, attr = path.partition("@")
        nodes = _find_all(elem, steps)
        if attr:
            values = [value for value in (_attribute(node, attr) for node in nodes) if value is not None]
        else:
            values = [node.text or "" for node in nodes]
        if values:
            return values[-1]
    return None


def _to_datetime(text: str) -> datetime:
    text = text.strip()
    if not _TIMESTAMP_RE.match(text):
        raise ValueError(f"not an ISO-8601 date and time: {text!r}")
    dt = dt_parser.isoparse(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def _to_float(text: str) -> float:
    text = text.strip()
    if "_" in text:
        raise ValueError(f"invalid number: {text!r}")
    return float(text) if text else 0.0


def _to_int(text: str) -> int:
    text = text.strip()
    if "_" in text:
        raise ValueError(f"invalid integer: {text!r}")
    return int(text) if text else 0


_CONVERTERS = {
    str: str,
    int: _to_int,
    float: _to_float,
    datetime: _to_datetime,
}


def _decode_fields(record_type: type, elem: ET.Element) -> dict:
    values = {}
    for name, paths, kind in SCHEMA[record_type]:
        if isinstance(kind, list):
            item_type = kind[0]
            values[name] = tuple(
                _decode(item_type, child) for path in paths for child in _find_all(elem, path)
            )
        elif kind in SCHEMA:
            nodes = [node for path in paths for node in _find_all(elem, path)]
            if nodes:
                values[name] = kind(**_overlay(kind, nodes))
        else:
            raw = _lookup(elem, paths)
            if raw is not None:
                try:
                    values[name] = _CONVERTERS[kind](raw)
                except ValueError as e:
                    raise ValueError(f"invalid value {raw!r} for {record_type.__name__}.{name}: {e}") from e
    return values


def _overlay(record_type: type, nodes: list[ET.Element]) -> dict:
    """Decode repeated elements into one record, later elements overwriting earlier fields.

    Repeated collections are concatenated instead.
    """
    collections = {name for name, _, kind in SCHEMA[record_type] if isinstance(kind, list)}
    merged: dict = {}
    for node in nodes:
        for name, value in _decode_fields(record_type, node).items():
            if name in collections and name in merged:
                value = merged[name] + value
            merged[name] = value
    return merged


def _decode(record_type: type, elem: ET.Element):
    return record_type(**_decode_fields(record_type, elem))


def parse(source) -> Tcx:
    """Parse a readable TCX stream and return a ``Tcx`` document.

    *source* may yield bytes or text. The whole stream is read and decoded in
    one pass; on failure ``TcxParseError`` is raised and no document is
    returned.
    """
    data = source.read()
    # Garmin exports sometimes carry whitespace ahead of the XML declaration
    data = data.lstrip()

    parser = ET.XMLPullParser(events=("start-ns", "start"))
    try:
        parser.feed(data)
        parser.close()
    except ET.ParseError as e:
        log.debug("Malformed TCX markup: %s", e)
        raise TcxParseError(f"could not parse data: {e}") from e

    namespaces: dict[str, str] = {}
    root = None
    for event, payload in parser.read_events():
        if event == "start-ns":
            prefix, uri = payload
            namespaces.setdefault(prefix, uri)
        else:
            root = payload
            break

    if _local(root.tag) != ROOT_ELEMENT:
        log.debug("Unexpected root element %s", root.tag)
        raise TcxParseError(
            f"could not parse data: expected element type <{ROOT_ELEMENT}> but have <{_local(root.tag)}>"
        )

    try:
        fields = _decode_fields(Tcx, root)
    except ValueError as e:
        log.debug("Could not decode TCX fields: %s", e)
        raise TcxParseError(f"could not parse data: {e}") from e

    tcx = new_tcx()._replace(
        xmlns=namespaces.get("", ""),
        xmlns_xsi=namespaces.get("xsi", ""),
        xmlns_xsd=namespaces.get("xsd", ""),
        **fields,
    )
    log.debug("Decoded TCX document with %d activities", len(tcx.activities))
    return tcx


def parse_file(file_path) -> Tcx:
    """Read a TCX file (optionally gzipped, ``.tcx.gz``) and parse it.

    Errors opening the file propagate unchanged.
    """
    file_path = os.fspath(file_path)
    if file_path.lower().endswith(".gz"):
        with gzip.open(file_path, "rb") as f:
            try:
                return parse(f)
            except (gzip.BadGzipFile, EOFError) as e:
                raise TcxParseError(f"could not parse data: {e}") from e

    with open(file_path, "rb") as f:
        return parse(f)
