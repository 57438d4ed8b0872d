"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Packed colors and named constants (color)
    - Coordinate mapping & span clipping (compute)
    - Atomic I/O and YAML (fs)
    - PPM encoding (ppm)
    - Scene schema validation (validators)
    - Unified logging (logging_config)

No module in utils/ may import from upper layers (raster, pen, scene).

Convenience imports:
    from rasterpen.utils import fs, compute, color, validators
    from rasterpen.utils.logging_config import setup_logging, get_logger
"""

# Re-export commonly used modules for convenience
from . import color
from . import compute
from . import fs
from . import logging_config
from . import ppm
from . import validators

# Common functions for direct import
from .logging_config import get_logger, log_context, push_context, setup_logging

__all__ = [
    # Modules
    'color',
    'compute',
    'fs',
    'logging_config',
    'ppm',
    'validators',
    # Direct exports
    'setup_logging',
    'get_logger',
    'log_context',
    'push_context',
]
