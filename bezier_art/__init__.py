"""Bezier Art: procedural curve art generator.

Random control points → explicit-form Bézier sampling → chains of thick
quadrilateral segments (circle fallback for short segments) → optional
thin connecting lines over a shuffled subsample → single PNG.

Architecture layers (strict one-way dependency):
    scripts/ → bezier_art/scene.py → bezier_art/renderer/ → bezier_art/utils/

Key invariants:
    - Pixel coordinates, image frame (top-left origin, +Y down)
    - Sampled curves are open-ended: t runs over [0, 1), never 1
    - Degenerate segments are values, not exceptions
    - Randomness only through an injected numpy Generator
    - YAML-only configs
"""

__version__ = "0.1.0"
