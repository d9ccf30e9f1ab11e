"""Generate a Bézier curve art PNG.

Runs the full scene pipeline:
    1. Load scene config (reference constants when no --config is given)
    2. Set up logging from the config's logging section
    3. Draw random curves onto a fresh canvas
    4. Save the PNG atomically, plus <stem>_manifest.yaml

CLI:
    python scripts/generate_art.py
    python scripts/generate_art.py --config configs/scene.v1.yaml --seed 7
    python scripts/generate_art.py --output out/art.png --log-level DEBUG

With no flags the reference scene is produced: 2000×2000 px, dark blue
background, 1000 curves of 5 control points sampled at precision 1000,
written to bezier.png.

Exit codes:
    0: Image written
    1: Config invalid or image could not be written
"""

import argparse
import logging
import sys

from bezier_art import scene
from bezier_art.utils import logging_config, validators

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate procedural Bézier curve art as a PNG"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to scene.v1 YAML config (default: built-in reference scene)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output PNG path (overrides output.path)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed (overrides config seed)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (overrides logging.log_level)",
    )
    args = parser.parse_args(argv)

    try:
        if args.config:
            cfg = validators.load_scene_config(args.config)
        else:
            cfg = validators.default_scene_config()
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logging_config.setup_logging(
        log_level=args.log_level or cfg.logging.log_level,
        log_file=cfg.logging.log_file,
        json=cfg.logging.json_format,
        quiet_libs=["PIL"],
        context={"app": "generate"},
    )
    logging_config.install_excepthook()

    try:
        result = scene.generate_main(cfg, output_path=args.output, seed=args.seed)
    except RuntimeError as e:
        logger.error(f"Could not write output: {e}")
        return 1

    print(f"Image: {result['output_path']}")
    if result['manifest_path']:
        print(f"Manifest: {result['manifest_path']}")
    print(f"Seed: {result['seed']}")
    return 0


if __name__ == "__main__":
    exit_code = main()
    logging_config.shutdown()
    sys.exit(exit_code)
