"""Build Jinja2 template context from parsed resx entries.

Turns each resource entry into a member definition and assembles the
context dict consumed by the codegen templates.
"""

from __future__ import annotations

from typing import Any

from .loader import ResourceEntry
from .naming import member_name, reindent_value, split_class_name


def build_member(entry: ResourceEntry) -> dict[str, str]:
    """Build the template context for one accessor property."""
    return {
        "name": member_name(entry.key),
        "key": entry.key,
        "doc": reindent_value(entry.value),
    }


def build_context(
    entries: list[ResourceEntry],
    resource_namespace: str,
    class_full_name: str,
) -> dict[str, Any]:
    """Build the full template context for one generated class.

    Members keep the order of the entries; duplicate keys are not merged.
    """
    namespace, class_name = split_class_name(class_full_name)
    members = [build_member(entry) for entry in entries]

    return {
        "namespace": namespace,
        "class_name": class_name,
        "resource_namespace": resource_namespace,
        "members": members,
    }
