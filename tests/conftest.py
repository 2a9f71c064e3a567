"""Shared fixtures for resgen tests.

Fixtures write small resx documents to tmp_path so the loader and CLI
run against real files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


# ---------------------------------------------------------------------------
# Resx document builders
# ---------------------------------------------------------------------------

_RESX_HEADER = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <xsd:schema id="root" xmlns="" xmlns:xsd="http://www.w3.org/2001/XMLSchema">
    <xsd:element name="root" />
  </xsd:schema>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <resheader name="version">
    <value>2.0</value>
  </resheader>
"""

_RESX_FOOTER = "</root>\n"


def make_resx(entries: list[tuple[str, str]]) -> str:
    """Build a standard resx document from (name, value) pairs."""
    body = "".join(
        f'  <data name="{name}" xml:space="preserve">\n'
        f"    <value>{value}</value>\n"
        f"  </data>\n"
        for name, value in entries
    )
    return _RESX_HEADER + body + _RESX_FOOTER


SAMPLE_ENTRIES = [
    ("Hello", "Hello, world!"),
    ("Error_Code", "An error occurred:\n{0}"),
]


@pytest.fixture
def write_resx(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a resx file and returns its path."""

    def _write(
        entries: list[tuple[str, str]],
        name: str = "Resources.resx",
        folder: str = "Strings",
    ) -> Path:
        directory = tmp_path / folder
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(make_resx(entries), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_resx(write_resx) -> Path:
    """Resx file with the two SAMPLE_ENTRIES."""
    return write_resx(SAMPLE_ENTRIES)
