"""Command line converter.

Usage:
    vectorflatten icon.svg                  # XML to stdout
    vectorflatten icon.svg -o ic_icon.xml
    vectorflatten icons/ -o drawable/       # every .svg in a folder
    vectorflatten --kotlin                  # print the Kotlin converter source
"""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys

from vectorflatten.codegen.kotlin import get_kotlin_converter_source
from vectorflatten.engine.config import ConverterConfig
from vectorflatten.engine.pipeline import create_pipeline
from vectorflatten.errors import ParseError

logger = logging.getLogger(__name__)


def resource_name(filename: str) -> str:
    """Android drawable name for an SVG file: ``My Icon-2.svg`` -> ``my_icon_2.xml``."""
    stem = os.path.splitext(os.path.basename(filename))[0].lower()
    stem = re.sub(r"[^a-z0-9_]+", "_", stem).strip("_") or "icon"
    if stem[0].isdigit():
        stem = "ic_" + stem
    return stem + ".xml"


def process_file(input_path: str, output_path: str | None, config: ConverterConfig) -> bool:
    """Convert one SVG file. Returns False when the file could not be read or parsed."""
    try:
        # Raw bytes, so the XML declaration decides the encoding.
        with open(input_path, "rb") as f:
            raw = f.read()
        result = create_pipeline(config).convert(raw)
    except (OSError, UnicodeError, ParseError) as e:
        print(f"  ERROR: {e}", file=sys.stderr)
        return False

    summary = f"{result.path_count} paths"
    if result.gradient_count:
        summary += f", {result.gradient_count} with gradients"
    if result.warnings:
        summary += f", {len(result.warnings)} warnings"

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(result.xml)
        print(f"  {summary}")
        print(f"  → Saved: {output_path}")
    else:
        print(f"  {summary}", file=sys.stderr)
        sys.stdout.write(result.xml)
    for warning in result.warnings:
        print(f"  warning: {warning}", file=sys.stderr)
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="SVG to Android VectorDrawable converter")
    parser.add_argument("input", nargs="?", help="SVG file or folder of SVGs")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument("-p", "--precision", type=int, default=3, help="Decimal places in coordinates")
    parser.add_argument("--no-names", action="store_true", help="Do not copy element ids to android:name")
    parser.add_argument("--kotlin", action="store_true", help="Print the Kotlin converter source and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.kotlin:
        sys.stdout.write(get_kotlin_converter_source())
        return 0
    if not args.input:
        parser.error("input is required unless --kotlin is given")

    config = ConverterConfig(precision=args.precision, emit_names=not args.no_names)

    if os.path.isdir(args.input):
        # Batch mode
        svg_files = [f for f in os.listdir(args.input) if f.lower().endswith(".svg")]
        if not svg_files:
            print("No .svg files found in folder.", file=sys.stderr)
            return 1

        out_dir = args.output or args.input.rstrip("/\\") + "_drawable"
        os.makedirs(out_dir, exist_ok=True)

        print(f"Processing {len(svg_files)} files...\n")
        success = 0
        for fname in sorted(svg_files):
            print(f"[{fname}]")
            out_path = os.path.join(out_dir, resource_name(fname))
            if process_file(os.path.join(args.input, fname), out_path, config):
                success += 1
            print()

        print(f"Done: {success}/{len(svg_files)} converted → {out_dir}")
        return 0 if success == len(svg_files) else 1

    # Single file
    if not os.path.exists(args.input):
        print(f"File not found: {args.input}", file=sys.stderr)
        return 1

    print(f"[{os.path.basename(args.input)}]", file=sys.stderr)
    return 0 if process_file(args.input, args.output, config) else 1


if __name__ == "__main__":
    sys.exit(main())
