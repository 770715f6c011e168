"""
TraceSight command line — analyze the traces of a PCB SVG.

Usage:
  tracesight board.svg                   # summary + sample trace
  tracesight board.svg --verbose         # also every junction and connection
  tracesight board.svg --tolerance 0.05  # tighter endpoint matching
  tracesight board.svg --json            # full analysis as JSON
  tracesight board.svg -o clean.svg      # also write absolute path data
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tracesight.engine.config import AnalysisConfig
from tracesight.engine.context import AnalysisContext
from tracesight.models.responses import context_to_response
from tracesight.svg.parser import analyze_svg
from tracesight.svg.serializer import normalize_trace, update_svg_with_traces

logger = logging.getLogger(__name__)


def print_report(ctx: AnalysisContext, verbose: bool = False) -> None:
    print(f"Analyzed {ctx.num_traces} traces and found {len(ctx.junctions)} junctions")

    if verbose:
        for i, junction in enumerate(ctx.junctions, start=1):
            print(f"Junction {i}: connects traces [{', '.join(sorted(junction.trace_ids))}]")
        for trace in ctx.traces:
            if trace.connected_traces:
                print(f"Trace {trace.id} connects to: [{', '.join(sorted(trace.connected_traces))}]")
            print(f"Trace {trace.id} primary direction: {trace.direction.value}")
        for trace in ctx.invalid_traces:
            print(f"Trace {trace.id} has malformed coordinates")

    if ctx.traces:
        sample = ctx.traces[0]
        print("\nSample trace analysis:")
        print(f"ID: {sample.id}")
        print(f"Width: {sample.width}")
        print(f"Direction: {sample.direction.value}")
        print(f"Number of points: {len(sample.points)}")
        print(f"Connected to: {', '.join(sorted(sample.connected_traces)) or 'none'}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="TraceSight — PCB trace connectivity from SVG")
    parser.add_argument("input", help="Path to input SVG file")
    parser.add_argument("--tolerance", type=float, default=0.1,
                        help="Max endpoint distance treated as one point (default: 0.1)")
    parser.add_argument("--verbose", action="store_true", help="Print every junction and connection")
    parser.add_argument("--json", action="store_true", help="Print the full analysis as JSON")
    parser.add_argument("-o", "--output", help="Write the SVG with normalized path data to this file")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = AnalysisConfig(tolerance=args.tolerance)
    except ValueError as e:
        parser.error(str(e))

    try:
        svg_text = Path(args.input).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading SVG file %s: %s", args.input, e)
        return 1

    ctx = analyze_svg(svg_text, config)

    if args.output:
        normalized = update_svg_with_traces(svg_text, [normalize_trace(t) for t in ctx.traces])
        try:
            Path(args.output).write_text(normalized, encoding="utf-8")
        except OSError as e:
            logger.error("Error writing SVG file %s: %s", args.output, e)
            return 1
        logger.info("Normalized SVG written to %s", args.output)

    if args.json:
        print(context_to_response(ctx).model_dump_json(indent=2))
    else:
        print_report(ctx, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
