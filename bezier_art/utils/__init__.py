"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Bézier evaluation and thick-segment geometry (geometry)
    - Config validation (validators)
    - Atomic I/O (fs)
    - Hashing for provenance (hashing)
    - Unified logging (logging_config)

No module in utils/ may import from upper layers (renderer, scene).

Convenience imports:
    from bezier_art.utils import fs, geometry, validators
    from bezier_art.utils.logging_config import setup_logging, get_logger
"""

from . import fs
from . import geometry
from . import hashing
from . import logging_config
from . import validators

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    # Modules
    'fs',
    'geometry',
    'hashing',
    'logging_config',
    'validators',
    # Direct exports
    'setup_logging',
    'get_logger',
    'push_context',
]
