"""Scene driver: random Bézier curves → PNG.

Pipeline per curve:
    1. Draw `curves.control_points` random integer control points in the canvas
    2. Sample the curve at `curves.precision` parameters (t ∈ [0, 1))
    3. Render the samples as a thick polyline (circle fallback on short segments)
    4. Optionally connect a shuffled subsample of the samples with thin lines

Then save the raster atomically and write a YAML manifest next to it
(resolved config, seed, segment stats, PNG and pixel SHA-256).

Randomness comes exclusively from the numpy Generator passed in; a run
is fully reproducible from (config, seed).

Usage:
    from bezier_art import scene
    from bezier_art.utils import validators

    cfg = validators.default_scene_config()
    result = scene.generate_main(cfg, output_path="out/bezier.png", seed=7)
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from bezier_art import __version__
from bezier_art.renderer import RasterCanvas, RenderStats, draw_line_for_points, draw_thick_polyline
from bezier_art.utils import fs, hashing, logging_config
from bezier_art.utils.geometry import Point, sample_curve
from bezier_art.utils.validators import SceneV1

logger = logging.getLogger(__name__)

# Progress is logged this many times per render
_PROGRESS_STEPS = 10


def generate_random_points(
    rng: np.random.Generator,
    num: int,
    width: int,
    height: int
) -> List[Point]:
    """Uniform integer points in [0, width) × [0, height), as floats."""
    xs = rng.integers(0, width, size=num)
    ys = rng.integers(0, height, size=num)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def subsample_points(
    rng: np.random.Generator,
    points: Sequence[Point],
    fraction: float
) -> List[Point]:
    """Shuffled copy of `points` truncated to round(fraction · len), at least 2.

    The input sequence is left untouched. Fewer than 2 input points
    returns them all (shuffled).
    """
    shuffled = list(points)
    rng.shuffle(shuffled)
    keep = max(2, int(round(fraction * len(shuffled))))
    return shuffled[:keep]


def draw_bezier_line(
    canvas: RasterCanvas,
    rng: np.random.Generator,
    cfg: SceneV1
) -> RenderStats:
    """Draw one random curve (and its secondary lines) onto the canvas."""
    curves = cfg.curves
    control_points = generate_random_points(
        rng, curves.control_points, canvas.width, canvas.height
    )
    logger.debug(f"Control points: {control_points}")

    bezier_points = sample_curve(control_points, curves.precision)
    stats = draw_thick_polyline(
        canvas,
        bezier_points,
        curves.color,
        curves.stroke_width,
        curves.min_segment_length,
    )

    secondary = cfg.secondary
    if secondary.enabled:
        subset = subsample_points(rng, bezier_points, secondary.fraction)
        if secondary.stroke_width == 1:
            draw_line_for_points(canvas, subset, secondary.color)
        else:
            stats = stats + draw_thick_polyline(
                canvas,
                subset,
                secondary.color,
                secondary.stroke_width,
                curves.min_segment_length,
            )

    return stats


def render_scene(
    cfg: SceneV1,
    rng: np.random.Generator
) -> Tuple[RasterCanvas, RenderStats]:
    """Background fill + `cfg.curves.count` random curves on a new canvas."""
    canvas = RasterCanvas(cfg.canvas.width, cfg.canvas.height, cfg.canvas.antialias)
    canvas.fill_background(cfg.canvas.background)
    stats = render_curves(canvas, cfg, rng)
    logger.info(
        f"Rendered {cfg.curves.count} curves: {stats.segments} segments, "
        f"{stats.quads} quads, {stats.fallbacks} circle fallbacks"
    )
    return canvas, stats


def render_curves(
    canvas: RasterCanvas,
    cfg: SceneV1,
    rng: np.random.Generator
) -> RenderStats:
    """Draw all curves onto an existing canvas, return accumulated stats."""
    total = RenderStats()
    count = cfg.curves.count
    step = max(1, count // _PROGRESS_STEPS)

    for i in range(count):
        total = total + draw_bezier_line(canvas, rng, cfg)
        if (i + 1) % step == 0 or i + 1 == count:
            logger.info(f"Curves drawn: {i + 1}/{count}")

    return total


def resolve_seed(cfg: SceneV1, seed: Optional[int] = None) -> int:
    """Explicit seed, else config seed, else fresh OS entropy."""
    if seed is not None:
        return int(seed)
    if cfg.seed is not None:
        return int(cfg.seed)
    return int(np.random.SeedSequence().generate_state(1)[0])


def generate_main(
    cfg: SceneV1,
    output_path: Optional[Union[str, Path]] = None,
    seed: Optional[int] = None
) -> Dict[str, Any]:
    """Render a full scene and persist it.

    Parameters
    ----------
    cfg : SceneV1
        Validated scene config
    output_path : str or Path, optional
        PNG path; defaults to cfg.output.path
    seed : int, optional
        RNG seed; overrides cfg.seed

    Returns
    -------
    Dict[str, Any]
        - output_path: Path of the PNG
        - manifest_path: Path of the manifest YAML, or None
        - sha256: PNG digest
        - seed: seed actually used
        - stats: RenderStats

    Raises
    ------
    RuntimeError
        If the image or manifest cannot be written
    """
    out_path = Path(output_path if output_path is not None else cfg.output.path)
    seed = resolve_seed(cfg, seed)
    logging_config.push_context(seed=seed)

    try:
        logger.info(
            f"Generating {cfg.canvas.width}×{cfg.canvas.height} scene: "
            f"{cfg.curves.count} curves, {cfg.curves.control_points} control points, "
            f"precision {cfg.curves.precision}"
        )

        canvas, stats = render_scene(cfg, np.random.default_rng(seed))
        canvas.save(out_path)
        digest = hashing.sha256_file(out_path)

        manifest_path = None
        if cfg.output.manifest:
            manifest_path = out_path.with_name(f"{out_path.stem}_manifest.yaml")
            fs.atomic_yaml_dump(
                {
                    'schema': 'scene_manifest.v1',
                    'version': __version__,
                    'seed': seed,
                    'output': {
                        'path': str(out_path),
                        'sha256': digest,
                        'pixels_sha256': hashing.sha256_array(canvas.buffer),
                    },
                    'stats': stats.to_dict(),
                    'config': cfg.model_dump(mode='json', by_alias=True),
                },
                manifest_path,
            )
            logger.info(f"Manifest written to {manifest_path}")
    finally:
        logging_config.pop_context(keys=['seed'])

    return {
        'output_path': out_path,
        'manifest_path': manifest_path,
        'sha256': digest,
        'seed': seed,
        'stats': stats,
    }
