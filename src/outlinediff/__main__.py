"""Command line interface for outlinediff."""
from __future__ import annotations

import argparse
import enum
import logging
import sys
import time
from typing import Iterable, Optional

from .compare import Status, compare_files
from .presets import DEFAULT_PRESET, ScanParams, get_preset, parse_color
from .report import write_json_report


class ExitCode(enum.IntEnum):
    OK = 0
    COMPARISON_ERROR = 1
    DIFFERENCE = 2
    INCORRECT_OPTIONS = 3


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(ExitCode.INCORRECT_OPTIONS, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="outlinediff",
        description="Compare two images pixel by pixel and outline the differences.",
    )
    parser.add_argument("file1", help="Path to the baseline image")
    parser.add_argument("file2", help="Path to the candidate image; outlines are drawn on a copy of it")
    parser.add_argument("output", help="Where to write the outlined image when the inputs differ")
    parser.add_argument("--preset", default=DEFAULT_PRESET, help="Preset name (precise|balanced|coarse)")
    parser.add_argument("--cell-width", type=int, help="Override scan cell width (px)")
    parser.add_argument("--cell-height", type=int, help="Override scan cell height (px)")
    parser.add_argument("--highlight", help="Outline color (#RRGGBB or r,g,b)")
    parser.add_argument("--page", type=int, help="Zero based page to rasterise for PDF inputs")
    parser.add_argument("--dpi", type=int, help="Raster DPI for PDF inputs")
    parser.add_argument(
        "--join-corners",
        action="store_true",
        help="Treat regions touching only at a corner as one contour",
    )
    parser.add_argument("--json", help="Write a JSON report of the result to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def _version() -> str:
    from . import __version__

    return __version__


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(None if argv is None else list(argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        preset = get_preset(args.preset)
        params = _override_params(preset.params, args)
    except (KeyError, ValueError) as exc:
        parser.error(str(exc))
        return ExitCode.INCORRECT_OPTIONS

    start = time.perf_counter()
    result = compare_files(args.file1, args.file2, params=params)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    print(f"Comparison duration: {elapsed_ms:.0f}ms. Contours found: {result.contour_count}")

    if args.json:
        write_json_report(result, args.json, params=params, duration_ms=elapsed_ms)

    if not result.ok:
        print(result.error_message, file=sys.stderr)
        return ExitCode.COMPARISON_ERROR

    if result.status is Status.DIFFERENT:
        if result.image is not None and result.image.save(args.output):
            return ExitCode.DIFFERENCE
        print("Failed to save result image")
        return ExitCode.COMPARISON_ERROR

    print("Images are identical")
    return ExitCode.OK


def _override_params(preset_params: ScanParams, args: argparse.Namespace) -> ScanParams:
    overrides = {}
    for field_name, arg_name in (
        ("cell_width", "cell_width"),
        ("cell_height", "cell_height"),
        ("pdf_page", "page"),
        ("pdf_dpi", "dpi"),
    ):
        value = getattr(args, arg_name)
        if value is not None:
            overrides[field_name] = value
    if args.join_corners:
        overrides["join_corners"] = True
    color = parse_color(args.highlight)
    if color is not None:
        overrides["highlight_color"] = color
    return preset_params.copy(**overrides)


if __name__ == "__main__":
    sys.exit(main())
