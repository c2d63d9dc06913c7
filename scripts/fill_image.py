"""Fill sentinel-marked gaps in RGB image files.

Reads each input (``.npy`` via NumPy, anything else via scikit-image),
fills gap pixels with :func:`rgb_gapfill.fill_missing_rgb`, and writes
``<stem>_filled<suffix>`` next to the input or into ``--output-dir``.
Files are processed concurrently.

Usage:
    uv run python scripts/fill_image.py photo.png --method linear
    uv run python scripts/fill_image.py scan.npy --method pchip \
        --gap-value 0 0 255 --output-dir restored/
    uv run python scripts/fill_image.py *.png --config config/default.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

import numpy as np
from skimage import io as skio

from rgb_gapfill.config import FillConfig, load_config
from rgb_gapfill.exceptions import GapFillError
from rgb_gapfill.fill import GapFiller
from rgb_gapfill.logging_utils import setup_logging
from rgb_gapfill.methods.registry import list_methods

log = logging.getLogger(__name__)

OUTPUT_SUFFIX = "_filled"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fill gap pixels in RGB images by interpolation.",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="Image files (.npy, .png, .tif, ...).",
    )
    parser.add_argument(
        "--method",
        choices=list_methods(),
        default=None,
        help="Interpolation method (overrides --config).",
    )
    parser.add_argument(
        "--gap-value",
        nargs="+",
        type=float,
        default=None,
        help="Sentinel: one value for all channels or three values. "
        "Use nan to fill existing NaN entries.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config with a 'fill' section.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for outputs (default: next to each input).",
    )
    parser.add_argument(
        "--output-dtype",
        choices=["uint8", "input"],
        default=None,
        help="Output dtype policy (default: uint8).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker threads (default: one per input, max 8).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> FillConfig:
    """Merge ``--config`` with command-line overrides."""
    options: dict[str, object] = {}
    if args.config is not None:
        base = load_config(args.config)
        options = {
            "method": base.method,
            "gap_value": base.gap_value.values,
            "output_dtype": base.output_dtype,
        }
    if args.method is not None:
        options["method"] = args.method
    if args.gap_value is not None:
        options["gap_value"] = args.gap_value
    if args.output_dtype is not None:
        options["output_dtype"] = args.output_dtype
    return FillConfig.from_mapping(options)


def read_image(path: Path) -> np.ndarray:
    if path.suffix.lower() == ".npy":
        return np.load(path)
    return skio.imread(path)


def write_image(path: Path, image: np.ndarray) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".npy":
        np.save(path, image)
    else:
        skio.imsave(path, image, check_contrast=False)


def output_path_for(path: Path, output_dir: Path | None) -> Path:
    target_dir = output_dir if output_dir is not None else path.parent
    return target_dir / f"{path.stem}{OUTPUT_SUFFIX}{path.suffix}"


def process_file(
    filler: GapFiller,
    path: Path,
    output_dir: Path | None,
) -> Path:
    """Fill one file and return the path written."""
    image = read_image(path)
    filled = filler.apply(image)
    out_path = output_path_for(path, output_dir)
    write_image(out_path, filled)
    return out_path


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        cfg = build_config(args)
    except (GapFillError, FileNotFoundError) as exc:
        log.error("Invalid configuration: %s", exc)
        return 2

    filler = GapFiller.from_config(cfg)
    log.info("Using %r on %d file(s)", filler, len(args.inputs))

    workers = args.workers or min(8, len(args.inputs))
    failures = 0
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {
            pool.submit(process_file, filler, path, args.output_dir): path
            for path in args.inputs
        }
        for future in as_completed(futures):
            path = futures[future]
            try:
                out_path = future.result()
            except (GapFillError, OSError, ValueError) as exc:
                log.error("Failed to fill %s: %s", path, exc)
                failures += 1
                continue
            log.info("Wrote %s", out_path)

    if failures:
        log.error("%d of %d file(s) failed", failures, len(args.inputs))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
