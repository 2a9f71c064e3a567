"""Entry point: python -m resgen <resx> <namespace> [<classFullName>] [<outPath>]

Reads a .resx file, generates a strongly-typed C# resource class.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from .codegen import generate, write_output
from .options import resolve_options

USAGE = (
    "resgen <pathToResxFile.resx> <resourcesNamespace> [<classFullName>] [<outCsFilePath>]\n"
    "example: resgen StringResources.resx System.Fabric.Strings.StringResources"
    " System.Fabric.Strings.StringResources StringResources.cs"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resgen",
        usage=USAGE,
        description="Generate a strongly-typed C# resource class from a .resx file.",
    )
    parser.add_argument("resx_path", help="Path to the .resx file.")
    parser.add_argument(
        "resource_namespace",
        help="Resource namespace passed to the generated ResourceManager.",
    )
    parser.add_argument(
        "class_full_name",
        nargs="?",
        default=None,
        help="Dotted name of the generated class (defaults to the resx file name).",
    )
    parser.add_argument(
        "out_path",
        nargs="?",
        default=None,
        help="Output .cs path (defaults to <ClassName>.cs next to the resx file).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    options = resolve_options(
        args.resx_path,
        args.resource_namespace,
        args.class_full_name,
        args.out_path,
    )

    print(
        f"Resource Namespace : {options.resource_namespace},"
        f" ClassFullName : {options.class_full_name},"
        f" CsFilePath : {options.out_path}"
    )

    source = generate(options.resx_path, options.resource_namespace, options.class_full_name)

    print(f"ResGen for {options.out_path}")
    write_output(options.out_path, source)


if __name__ == "__main__":
    main()
