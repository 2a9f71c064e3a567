"""Load resource entries from a .resx file.

Reads the <data name="..."> elements in document order and extracts
their text payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lxml import etree


class ResxParseError(ValueError):
    """Raised when a resx file is missing or is not well-formed XML."""


@dataclass(frozen=True)
class ResourceEntry:
    """A single localizable string."""

    key: str
    value: str


def _create_parser() -> etree.XMLParser:
    """Return an XML parser that never loads DTDs or external entities."""
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        dtd_validation=False,
        load_dtd=False,
        recover=False,
    )


_PARSER = _create_parser()


def _entry_value(data: etree._Element) -> str:
    """Return the payload of a <data> element.

    Standard resx files keep the text in a <value> child; bare
    <data name="x">text</data> elements are read as-is.
    """
    value = data.find("value")
    if value is not None:
        return "".join(value.itertext())
    return "".join(data.itertext())


def parse_entries(xml: bytes) -> list[ResourceEntry]:
    """Parse raw resx bytes into entries, keeping document order.

    Bytes are required so the parser honours the encoding declared in the
    XML prolog.
    """
    try:
        root = etree.fromstring(xml, _PARSER)
    except etree.XMLSyntaxError as exc:
        raise ResxParseError(f"Could not parse resx document: {exc}") from exc

    entries = []
    for data in root.iterchildren("data"):
        name = data.get("name")
        if name is None:
            continue
        entries.append(ResourceEntry(key=name, value=_entry_value(data)))
    return entries


def load_entries(path: Path | str) -> list[ResourceEntry]:
    """Load the resource entries of a resx file from disk."""
    resx_file = Path(path)
    try:
        content = resx_file.read_bytes()
    except OSError as exc:
        raise ResxParseError(f"Could not read resx file {resx_file}: {exc}") from exc
    try:
        return parse_entries(content)
    except ResxParseError as exc:
        raise ResxParseError(f"{resx_file}: {exc}") from exc
