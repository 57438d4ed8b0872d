#!/usr/bin/env python3
"""Demo drawings for the Pen and the primitive rasterizers.

Demos:
    tree    recursive fractal tree plus a turtle "sun" (branch isolation
            through get_state()/set_state())
    shapes  filled rectangle and circle, outlined circle and a diagonal
            line on a light-green background

Usage:
    python scripts/pen_demo.py --demo tree --output outputs/pen.ppm
    python scripts/pen_demo.py --demo shapes --size 256 --output outputs/shapes.png
"""

import argparse
import logging
import sys
from pathlib import Path

from rasterpen import Canvas, Color, Pen
from rasterpen.raster import fill_circle, fill_rect, line, outline_circle
from rasterpen.utils import fs, logging_config, ppm

logger = logging.getLogger(__name__)


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a Pen / rasterizer demo image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--demo', choices=['tree', 'shapes'], default='tree', help='Which demo')
    parser.add_argument('--size', type=int, default=512, help='Square canvas size (px)')
    parser.add_argument('--depth', type=int, default=10, help='Tree recursion depth')
    parser.add_argument('--output', type=str, default=None, help='Output .ppm or image file')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose logging')
    return parser.parse_args()


def tree(pen: Pen, size: float, depth: int) -> None:
    """Three-way branching tree; the pen ends where it started."""
    state = pen.get_state()
    green = min(max((20 - depth) * 15, 0), 255)
    pen.set_color((0, green, 0))

    if depth <= 0 or size < 5.0:
        pen.forward(size).backward(size)
        return

    pen.forward(size / 3.0).turn_left(30.0)
    tree(pen, size * 2.0 / 3.0, depth - 1)
    pen.turn_right(30.0).forward(size / 6.0).turn_right(25.0)
    tree(pen, size / 2.0, depth - 1)
    pen.turn_left(25.0).forward(size / 3.0).turn_right(25.0)
    tree(pen, size / 2.0, depth - 1)
    pen.turn_left(25.0).forward(size / 6.0).set_state(state)


def sun(pen: Pen, scale: float) -> None:
    pen.repeat(18, lambda p: (
        p.forward(0.5 * scale)
        .turn_right(150.0)
        .forward(0.6 * scale)
        .turn_right(100.0)
        .forward(0.3 * scale)
        .turn_right(90.0)
    ))


def draw_tree_demo(size: int, depth: int) -> Canvas:
    canvas = Canvas.blank(size, size, (15, 15, 35))
    pen = Pen(canvas)

    pen.set_position(size / 2.0, float(size)).set_direction(-90.0)
    tree(pen, size * 0.635, depth)

    pen.set_color(Color.YELLOW).set_position(size * 0.078, size * 0.117)
    sun(pen, size * 0.17)
    return canvas


def draw_shapes_demo(size: int) -> Canvas:
    canvas = Canvas.blank(size, size, (180, 255, 100))
    s = size / 256.0
    fill_rect(canvas, int(80 * s), int(40 * s), int(128 * s), int(192 * s), Color.GREEN)
    fill_circle(canvas, int(-40 * s), int(-40 * s), int(128 * s), Color.BLUE)
    outline_circle(canvas, int(-40 * s), int(-40 * s), int(178 * s), Color.RED)
    line(canvas, size, 0, 0, size, Color.MAGENTA)
    return canvas


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = "DEBUG" if args.verbose else "INFO"
    logging_config.setup_logging(log_level=log_level, log_file=None, context={'app': 'pen_demo'})
    logging_config.install_excepthook()

    if args.demo == 'tree':
        canvas = draw_tree_demo(args.size, args.depth)
    else:
        canvas = draw_shapes_demo(args.size)

    output = Path(args.output or f"outputs/{args.demo}.ppm")
    if output.suffix.lower() == '.ppm':
        ppm.write_ppm(canvas, output)
    else:
        fs.atomic_save_image(canvas.to_rgb(), output)

    logger.info(f"Demo '{args.demo}' saved: {output}")
    logging_config.shutdown()
    return 0


if __name__ == '__main__':
    sys.exit(main())
