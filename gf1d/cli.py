"""
Command-line entry point: destripe one grayscale image.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import cv2

from gf1d.core.exceptions import GuidedFilterError
from gf1d.core.pipeline import denoise
from gf1d.instrumentation.stats import PerformanceStats
from gf1d.io import load_grayscale, save_image, to_uint8

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Remove column stripe noise with a 1D guided filter")
    p.add_argument("image", type=str, help="Path to a grayscale input image")
    p.add_argument("-o", "--output", type=str, default="output.png", help="Where to write the result")

    g_filt = p.add_argument_group("Filter")
    g_filt.add_argument("--row-radius", type=int, default=4)
    g_filt.add_argument("--row-eps", type=float, default=0.16)
    g_filt.add_argument("--col-eps", type=float, default=0.04)
    g_filt.add_argument("--col-radius", type=int, default=None,
                        help="Override the height-derived column radius")

    g_out = p.add_argument_group("Reporting")
    g_out.add_argument("--show", action="store_true", help="Display the result window")
    g_out.add_argument("--no-report", action="store_true", help="Skip the performance report")
    g_out.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        image = load_grayscale(args.image)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Loaded %s: %dx%d", args.image, image.shape[1], image.shape[0])

    stats = PerformanceStats()
    try:
        result = denoise(
            image,
            row_radius=args.row_radius,
            row_eps=args.row_eps,
            col_eps=args.col_eps,
            stats=stats,
            col_radius=args.col_radius,
        )
    except GuidedFilterError as exc:
        logger.error("Cannot denoise %s: %s", args.image, exc)
        return 2

    if not args.no_report:
        print(stats.format_report())
        for hint in stats.optimization_suggestions():
            print(f"  - {hint}")

    try:
        save_image(args.output, result)
    except OSError as exc:
        logger.error("%s", exc)
        return 1
    logger.info("Result saved to %s", args.output)

    if args.show:
        try:
            cv2.imshow("gf1d result", to_uint8(result))
            cv2.waitKey(0)
            cv2.destroyAllWindows()
        except cv2.error as exc:
            # Headless OpenCV builds ship without HighGUI.
            logger.error("Cannot display the result: %s", exc)
            return 3

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
