#!/usr/bin/env python3
"""Render a scene.v1 YAML file to PPM or PNG.

Usage:
    python scripts/render_scene.py configs/scenes/demo.yaml --output outputs/demo.ppm
    python scripts/render_scene.py configs/scenes/demo.yaml --output outputs/demo.png --verbose

The output format follows the extension: .ppm is written by the built-in
P6 encoder, anything else (.png, .bmp, ...) goes through Pillow.

Exit codes:
    0  image written
    1  scene file missing or invalid
    2  output could not be written
"""

import argparse
import logging
import sys
from pathlib import Path

from rasterpen.scene.render import render_scene
from rasterpen.utils import fs, logging_config, ppm, validators


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scene.v1 YAML file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('scene', type=str, help='Scene YAML file')
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Output image (default: outputs/<scene name>.ppm)'
    )
    parser.add_argument(
        '--log_file',
        type=str,
        default=None,
        help='Optional log file'
    )
    parser.add_argument(
        '--json_logs',
        action='store_true',
        help='Emit JSON log lines'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    return parser.parse_args()


def save_canvas(canvas, path: Path) -> Path:
    """Write canvas as PPM (.ppm) or through Pillow (other extensions)."""
    if path.suffix.lower() == '.ppm':
        return ppm.write_ppm(canvas, path)
    fs.atomic_save_image(canvas.to_rgb(), path)
    return path


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = "DEBUG" if args.verbose else "INFO"
    logging_config.setup_logging(
        log_level=log_level,
        log_file=args.log_file,
        json=args.json_logs,
        context={'app': 'render_scene'}
    )
    logging_config.install_excepthook()
    logger = logging.getLogger(__name__)

    scene_path = Path(args.scene)
    try:
        scene = validators.load_scene(scene_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    canvas = render_scene(scene)

    output = Path(args.output) if args.output else Path('outputs') / f"{scene.name or scene_path.stem}.ppm"
    try:
        save_canvas(canvas, output)
    except (ppm.EncodingError, RuntimeError) as e:
        logger.error(f"Could not write {output}: {e}")
        return 2

    logger.info(f"Saved: {output}")
    logging_config.shutdown()
    return 0


if __name__ == '__main__':
    sys.exit(main())
