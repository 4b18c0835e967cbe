# NeonStag command line
"""
Add a neon glow to an SVG file.

Usage:
    # Glow with default options, print to stdout
    neonstag logo.svg

    # Magenta preset, written to a file
    neonstag logo.svg --preset magenta -o logo-neon.svg

    # Two-tone glow without the original fill
    neonstag logo.svg --multi-color --mid-color "#ffbf00" --no-preserve-fill

    # Export at 1024x512 on a dark background
    neonstag logo.svg --export-width 1024 --export-height 512 --background "#111111"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import settings
from .exceptions import NeonError
from .export import package_export
from .ingest import read_svg_file
from .options import DEFAULT_OPTIONS, NEON_PRESETS, ExportOptions, NeonOptions, get_preset
from .processor import process

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser of the neonstag command."""
    preset_names = ', '.join(preset.name for preset in NEON_PRESETS)
    parser = argparse.ArgumentParser(
        prog='neonstag',
        description='Add a neon glow effect to an SVG file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Presets: {preset_names}

Examples:
  %(prog)s logo.svg                          # Print result to stdout
  %(prog)s logo.svg -o out.svg --preset lime # Lime glow into out.svg
  %(prog)s logo.svg --intensity 20 --width 3 # Wide, thin glow
"""
    )
    parser.add_argument('input', type=Path, help='SVG file to process')
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=None,
        help='Output file (default: stdout)'
    )
    parser.add_argument('--preset', '-p', help='Named glow color')
    parser.add_argument('--color', help=f'Outer glow color (default: {DEFAULT_OPTIONS.color})')
    parser.add_argument('--inner', help=f'Inner core color (default: {DEFAULT_OPTIONS.inner})')
    parser.add_argument('--mid-color', help=f'Mid glow color (default: {DEFAULT_OPTIONS.mid_color})')
    parser.add_argument(
        '--intensity',
        type=float,
        help=f'Blur spread, 1-30 (default: {DEFAULT_OPTIONS.intensity:g})'
    )
    parser.add_argument(
        '--width',
        type=float,
        help=f'Additional glow stroke width, 1-30 (default: {DEFAULT_OPTIONS.width:g})'
    )
    parser.add_argument(
        '--opacity',
        type=float,
        help=f'Glow opacity, 0.1-1.0 (default: {DEFAULT_OPTIONS.opacity:g})'
    )
    parser.add_argument('--multi-color', action='store_true', help='Add a mid glow layer')
    parser.add_argument(
        '--no-preserve-fill',
        action='store_true',
        help='Remove the fill of the original shapes'
    )
    parser.add_argument(
        '--no-scale-aware',
        action='store_true',
        help='Do not adapt the blur to the viewBox scale'
    )
    parser.add_argument('--export-width', type=float, help='Wrap the result at this pixel width')
    parser.add_argument('--export-height', type=float, help='Wrap the result at this pixel height')
    parser.add_argument('--background', help='Background color of the export (needs the export size)')
    parser.add_argument(
        '--background-image',
        type=Path,
        help='Raster image drawn behind the export'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress warnings'
    )
    return parser


def options_from_args(args: argparse.Namespace) -> NeonOptions:
    """Default options, updated by the preset and explicit arguments."""
    changes = {}
    if args.preset:
        changes['color'] = get_preset(args.preset).color
    for name in ('color', 'inner', 'mid_color', 'intensity', 'width', 'opacity'):
        value = getattr(args, name)
        if value is not None:
            changes[name] = value
    if args.multi_color:
        changes['multi_color'] = True
    if args.no_preserve_fill:
        changes['preserve_fill'] = False
    if args.no_scale_aware:
        changes['scale_aware'] = False
    return DEFAULT_OPTIONS.with_changes(**changes)


def export_options_from_args(args: argparse.Namespace) -> ExportOptions | None:
    if args.export_width is None and args.export_height is None:
        if args.background or args.background_image:
            raise ValueError('--background and --background-image require --export-width and --export-height')
        return None
    if args.export_width is None or args.export_height is None:
        raise ValueError('--export-width and --export-height must be given together')
    return ExportOptions(
        width=args.export_width,
        height=args.export_height,
        background_color=args.background,
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else settings.LOG_LEVEL.upper(),
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        options = options_from_args(args)
        export_options = export_options_from_args(args)
    except KeyError as e:
        parser.error(str(e.args[0]))
    except (ValueError, ValidationError) as e:
        parser.error(str(e))

    try:
        svg_text = read_svg_file(args.input)
        result = process(svg_text, options)
        output = result.svg
        if export_options is not None:
            background = args.background_image.read_bytes() if args.background_image else None
            output = package_export(output, export_options, background)
    except (NeonError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if not args.quiet:
        for warning in result.warnings:
            print(f'Warning: {warning}', file=sys.stderr)

    if args.output:
        args.output.write_text(output, encoding='utf-8')
        logger.info(f'Wrote {args.output}')
    else:
        sys.stdout.write(output)
        sys.stdout.write('\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
