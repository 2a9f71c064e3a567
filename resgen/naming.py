"""Derive C# names and doc-comment text from resx input.

Examples:
  split_class_name("App.Strings.Resources") -> ("App.Strings", "Resources")
  split_class_name("Resources")             -> (None, "Resources")
  member_name("Error Message One")          -> "Error_Message_One"
  reindent_value("line one\\nline two")      -> "line one\\n    ///line two"

Member names are not validated: characters that are illegal in a C#
identifier pass through unchanged.
"""

from __future__ import annotations

# Continuation prefix for multi-line values inside a /// summary block
DOC_CONTINUATION = "\n    ///"


def split_class_name(class_full_name: str) -> tuple[str | None, str]:
    """Split a dotted class name into (namespace, short name).

    The namespace is None when the name has no dot.
    """
    namespace, dot, short_name = class_full_name.rpartition(".")
    if not dot:
        return None, class_full_name
    return namespace, short_name


def member_name(key: str) -> str:
    """Build the accessor identifier for a resource key."""
    return key.replace(" ", "_")


def reindent_value(value: str) -> str:
    """Keep continuation lines of a value inside the doc comment."""
    return value.replace("\n", DOC_CONTINUATION)


def strip_reindent(doc_value: str) -> str:
    """Undo reindent_value."""
    return doc_value.replace(DOC_CONTINUATION, "\n")
