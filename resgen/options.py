"""Resolve generation parameters from command-line input."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .naming import split_class_name

CS_EXTENSION = ".cs"


@dataclass(frozen=True)
class GenerationOptions:
    resx_path: Path
    resource_namespace: str
    class_full_name: str
    out_path: Path


def resolve_options(
    resx_path: Path | str,
    resource_namespace: str | None = None,
    class_full_name: str | None = None,
    out_path: Path | str | None = None,
) -> GenerationOptions:
    """Fill in defaults for anything not given explicitly.

    - resource_namespace: name of the directory holding the resx file
    - class_full_name: resx file name without its extension
    - out_path: <short class name>.cs next to the resx file
    """
    resx = Path(resx_path)
    folder = resx.parent

    if resource_namespace is None:
        resource_namespace = resx.absolute().parent.name
    if class_full_name is None:
        class_full_name = resx.stem
    if out_path is None:
        _, class_name = split_class_name(class_full_name)
        out_path = folder / f"{class_name}{CS_EXTENSION}"

    return GenerationOptions(
        resx_path=resx,
        resource_namespace=resource_namespace,
        class_full_name=class_full_name,
        out_path=Path(out_path),
    )
