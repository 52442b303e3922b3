"""
Drawlings - Main Entry Point
"""
import argparse
import logging
import sys

from config.settings import settings


def configure_logging(verbosity: int):
    """Map the -v count onto a log level"""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    logging.basicConfig(level=level, format=settings.log_format)


def run_vector_dump(input_path: str, output_path: str, render_mode: str) -> int:
    """Trace the input and render it to PNG"""
    from src.pipeline import run_pipeline

    result = run_pipeline(
        input_path=input_path,
        output_path=output_path,
        render_mode=render_mode,
        background=settings.background_rgba,
    )

    if result.success:
        print(f"Path length: {result.metadata['path_length']} ({result.metadata['trace_status']})")
        for f in result.output_files:
            print(f"  - {f}")
        return 0

    print(f"Failed: {result.error}", file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drawlings",
        description="Drawlings - Trace the outline of black-on-white line art",
    )
    parser.add_argument("input", metavar="INPUT", help="Input image (format detected from contents)")
    parser.add_argument("-v", action="count", default=0, dest="verbose", help="Sets the level of verbosity")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    dump_parser = subparsers.add_parser("vector_dump", help="Dump vectors from image")
    dump_parser.add_argument(
        "-o", "--output",
        default=str(settings.output_file),
        help="Output PNG (default: %(default)s)",
    )
    dump_parser.add_argument(
        "--render",
        choices=["path", "grid"],
        default=settings.render_mode,
        help="Draw the traced path or the raw cell grid",
    )

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.command == "vector_dump":
        return run_vector_dump(args.input, args.output, args.render)

    return 0


if __name__ == "__main__":
    sys.exit(main())
