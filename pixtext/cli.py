# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for PixText

Renders an image file as text art on stdout. Metadata warnings go to
stderr; a file that cannot be opened or decoded ends the program with
exit status 1.

Copyright 2025 DNAi inc.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from pixtext import __version__
from pixtext.config import RenderConfig, load_config_file
from pixtext.core import PixText
from pixtext.exceptions import PixTextError
from pixtext.orientation import describe_orientation


def format_orientation(info: Dict[str, Any], format_type: str = "text") -> str:
    """
    Format orientation information.

    Args:
        info: Dictionary with file, orientation, name and warnings
        format_type: Output format ('text' or 'json')

    Returns:
        Formatted output string
    """
    if format_type == "json":
        return json.dumps(info, indent=2, ensure_ascii=False)
    return f"{info['file']}: {info['orientation']} ({info['name']})"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixtext",
        description="PixText - Render an image as text art, honouring EXIF orientation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render in grey characters
  pixtext photo.jpg

  # Render with 24-bit terminal colors at 120x50
  pixtext -c -W 120 -H 50 photo.jpg

  # Show the EXIF orientation only
  pixtext --orientation -j photo.jpg
        """
    )
    parser.add_argument('file', help='Image file to render')
    parser.add_argument('-c', '--color', action='store_true', default=None,
                        help='Emit 24-bit ANSI color escapes')
    parser.add_argument('-W', '--width', type=int, help='Output width in characters (default 80)')
    parser.add_argument('-H', '--height', type=int, help='Output height in characters (default 40)')
    parser.add_argument('--characters', help='Density ramp, darkest character first')
    parser.add_argument('--mirror', action='store_true', default=None, dest='apply_mirroring',
                        help='Also apply mirrored EXIF orientations (2, 4, 5, 7)')
    parser.add_argument('--config', help='key=value configuration file')
    parser.add_argument('--orientation', action='store_true',
                        help='Print the EXIF orientation instead of rendering')
    parser.add_argument('-j', '--json', action='store_true', help='JSON output for --orientation')
    parser.add_argument('-q', '--quiet', action='store_true', default=None,
                        help='Suppress warnings')
    parser.add_argument('--version', action='version', version=f'PixText {__version__}')
    return parser


def build_config(args: argparse.Namespace) -> RenderConfig:
    """
    Build the render configuration from an optional file and the flags.

    Raises:
        ConfigError: If the file or a value is invalid
    """
    config = RenderConfig()
    if args.config:
        config = config.with_options(load_config_file(args.config))
    return config.with_options({
        'width': args.width,
        'height': args.height,
        'color': args.color,
        'characters': args.characters,
        'apply_mirroring': args.apply_mirroring,
        'quiet': args.quiet,
    })


def print_warnings(warnings: List[str], quiet: bool) -> None:
    if quiet:
        return
    for warning in warnings:
        print(f"Warning: {warning}", file=sys.stderr)


def write_output(text: str) -> None:
    """
    Write rendered text to stdout.

    Characters the stdout encoding cannot represent, such as the block
    characters of the default ramp on an ASCII terminal, are written as '?'.
    """
    try:
        sys.stdout.write(text)
    except UnicodeEncodeError:
        encoding = sys.stdout.encoding or 'ascii'
        sys.stdout.write(text.encode(encoding, errors='replace').decode(encoding))


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = build_config(args)
    except PixTextError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    converter = PixText(args.file, config)
    try:
        if args.orientation:
            orientation = converter.read_orientation()
            print_warnings(converter.warnings, config.quiet)
            info = {
                'file': str(converter.file_path),
                'orientation': orientation,
                'name': describe_orientation(orientation),
                'warnings': converter.warnings,
            }
            print(format_orientation(info, "json" if args.json else "text"))
            return

        output = converter.render()
    except PixTextError as e:
        print_warnings(converter.warnings, config.quiet)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print_warnings(converter.warnings, config.quiet)
    write_output(output)


if __name__ == "__main__":
    main()
