# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""swatchcodec: inspect and convert color palette and gradient files.

Usage: python -m swatchcodec <command> [options]

Commands:
  info FILE         Print the palette or gradients held in FILE
  convert SRC DST   Decode SRC by its suffix and encode DST by its suffix
  formats           List supported extensions

A gradient file converted to a palette format becomes one group per
gradient; a palette converted to a gradient format becomes a single
gradient through all of its colors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Union

from swatchcodec import registry
from swatchcodec.errors import CodecError
from swatchcodec.schema import Gradient, Gradients, Palette

logger = logging.getLogger("swatchcodec")


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  python -m swatchcodec info brand.ase\n'
        '  python -m swatchcodec convert brand.ase brand.gpl\n'
        '  python -m swatchcodec convert sunset.grd sunset.ggr\n'
        '  python -m swatchcodec formats\n'
    )
    parser = argparse.ArgumentParser(
        prog='swatchcodec',
        description='Inspect and convert color palette and gradient files.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    info = sub.add_parser('info', help='Print the contents of a palette or gradient file')
    info.add_argument('path', help='Palette or gradient file')

    convert = sub.add_parser('convert', help='Convert between formats')
    convert.add_argument('source', help='Input file')
    convert.add_argument('destination', help='Output file; its suffix selects the format')

    sub.add_parser('formats', help='List supported file extensions')
    return parser


def _load(path: Path) -> Union[Palette, Gradients]:
    """Palette when the suffix has a palette coder, gradients otherwise."""
    suffix = path.suffix
    if registry.palette_coders(suffix):
        try:
            return registry.load_palette(path)
        except CodecError:
            if not registry.gradients_coders(suffix):
                raise
    return registry.load_gradients(path)


def _describe_palette(palette: Palette) -> list[str]:
    lines = [f"Palette {palette.name!r} ({palette.format.value if palette.format else 'unknown'})"]

    def describe(colors, indent: str) -> None:
        for color in colors:
            components = ", ".join(f"{c:g}" for c in color.components)
            label = f" {color.name!r}" if color.name else ""
            lines.append(f"{indent}{color.hex_rgba}  {color.color_space.value}({components}){label}")

    describe(palette.colors, "  ")
    for group in palette.groups:
        lines.append(f"  Group {group.name!r} ({len(group.colors)} colors)")
        describe(group.colors, "    ")
    return lines


def _describe_gradients(gradients: Gradients) -> list[str]:
    fmt = gradients.format.value if gradients.format else 'unknown'
    lines = [f"{len(gradients)} gradients ({fmt})"]
    for gradient in gradients:
        lines.append(f"  Gradient {gradient.name!r}: {len(gradient.stops)} stops")
        for stop in gradient.stops:
            lines.append(f"    {stop.position:8.4f}  {stop.color.hex_rgba}")
        for tstop in gradient.transparency_stops or ():
            lines.append(f"    {tstop.position:8.4f}  opacity {tstop.value:.3f}")
    return lines


def _convert(source: Path, destination: Path) -> None:
    model = _load(source)
    suffix = destination.suffix
    if isinstance(model, Palette):
        if registry.palette_coders(suffix):
            registry.save_palette(model, destination)
        else:
            gradient = Gradient.from_colors(model.all_colors(), name=model.name or None)
            registry.save_gradients(Gradients((gradient,), name=model.name or None), destination)
    else:
        if registry.gradients_coders(suffix):
            registry.save_gradients(model, destination)
        else:
            registry.save_palette(model.palette(), destination)
    logger.info("Wrote %s", destination)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == 'formats':
        print('Palettes: ' + ', '.join(registry.palette_extensions()))
        print('Gradients: ' + ', '.join(registry.gradients_extensions()))
        return 0

    try:
        if args.command == 'info':
            model = _load(Path(args.path))
            lines = _describe_palette(model) if isinstance(model, Palette) else _describe_gradients(model)
            print('\n'.join(lines))
        elif args.command == 'convert':
            _convert(Path(args.source), Path(args.destination))
    except CodecError as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
