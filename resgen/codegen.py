"""Render templates and write generated output.

Takes the context from context_builder and produces the C# source of a
strongly-typed resource class. Rendering is deterministic: the same
entries and names always give byte-identical text.
"""

from __future__ import annotations

import re
from pathlib import Path

import jinja2

from .context_builder import build_context
from .loader import ResourceEntry, load_entries

TEMPLATE_DIR = Path(__file__).parent / "templates"

# Generated files always use Windows line endings
LINE_ENDING = "\r\n"

_LINE_BREAK = re.compile(r"\r\n?|\n")

_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_entry(name: str, key: str, doc: str) -> str:
    """Render one accessor property."""
    return _ENV.get_template("entry.cs.j2").render(name=name, key=key, doc=doc)


def render_body(class_name: str, resource_namespace: str, members: str) -> str:
    """Render the class with its ResourceManager/Culture members."""
    return _ENV.get_template("body.cs.j2").render(
        class_name=class_name,
        resource_namespace=resource_namespace,
        members=members,
    )


def render_namespace(namespace: str, body: str) -> str:
    """Wrap code in a namespace block."""
    return _ENV.get_template("namespace.cs.j2").render(namespace=namespace, body=body)


def render_banner(body: str) -> str:
    """Prepend the auto-generated file banner."""
    return _ENV.get_template("banner.cs.j2").render(body=body)


def normalize_line_endings(text: str) -> str:
    """Convert every line break to LINE_ENDING."""
    return _LINE_BREAK.sub(LINE_ENDING, text)


def render_source(
    entries: list[ResourceEntry],
    resource_namespace: str,
    class_full_name: str,
) -> str:
    """Render the complete C# file for the given entries."""
    context = build_context(entries, resource_namespace, class_full_name)

    members = "".join(
        render_entry(m["name"], m["key"], m["doc"]) for m in context["members"]
    )
    code = render_body(context["class_name"], context["resource_namespace"], members)
    if context["namespace"] is not None:
        code = render_namespace(context["namespace"], code)

    return normalize_line_endings(render_banner(code))


def generate(
    resx_path: Path | str,
    resource_namespace: str,
    class_full_name: str,
) -> str:
    """Generate C# source for a resx file.

    Raises ResxParseError if the file cannot be read or parsed.
    """
    entries = load_entries(resx_path)
    return render_source(entries, resource_namespace, class_full_name)


def write_output(path: Path | str, text: str) -> Path:
    """Write generated source without newline translation."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    return output_path
