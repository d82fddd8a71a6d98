"""Command-line entry point: print the fingering table as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chord_shapes.chords import parse_chord_symbol, parse_quality
from chord_shapes.pitch_class import note_to_pc
from chord_shapes.report import build_report


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chord-shapes",
        description="Enumerate playable guitar fingerings for every chord and print them as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s > chords.json
  %(prog)s --root C --quality Major --tab
  %(prog)s --chord Am7 --chord F#dim --compact
        """,
    )
    parser.add_argument(
        "--root",
        action="append",
        default=None,
        help="Only include this root note, e.g. C, F#, Bb (repeatable)",
    )
    parser.add_argument(
        "--quality",
        action="append",
        default=None,
        help="Only include this chord quality, e.g. Major, MinorSeventh (repeatable)",
    )
    parser.add_argument(
        "--chord",
        action="append",
        default=None,
        help=(
            "Only include this chord symbol, e.g. Cm7 or Am7/G (repeatable); "
            "combined with --root or --quality, chords outside those are dropped"
        ),
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output JSON file (default: stdout)",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Write single-line JSON instead of pretty-printing",
    )
    parser.add_argument(
        "--tab",
        action="store_true",
        help='Write fingerings as tab strings ("x32010") instead of fret lists',
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log per-chord statistics to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        roots = [note_to_pc(r) for r in args.root] if args.root else None
        qualities = [parse_quality(q) for q in args.quality] if args.quality else None
        chords = [parse_chord_symbol(c) for c in args.chord] if args.chord else None
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report = build_report(roots=roots, qualities=qualities, chords=chords, progress=args.progress)

    indent = None if args.compact else 2
    json_output = report.to_json(indent=indent, tab=args.tab)

    if args.output:
        args.output.write_text(json_output + "\n")
        print(f"Wrote output to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(json_output + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
