"""YAML schema validation and config loading.

Provides centralized validation of the scene configuration using pydantic:
    - Scene schema (scene.v1.yaml): canvas size/background, curve count,
      control points, precision, stroke widths, colors, secondary lines,
      output paths, logging

Configs are validated on load for fail-fast error detection with
actionable messages (offending keys, expected ranges).

Units:
    - Geometry: pixels (px)
    - Colors: RGB triples, integers in [0, 255]

Usage:
    from bezier_art.utils import validators

    cfg = validators.load_scene_config("configs/scene.v1.yaml")
    cfg = validators.default_scene_config()
"""

from pathlib import Path
from typing import Annotated, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .geometry import MIN_SEGMENT_LENGTH

Channel = Annotated[int, Field(ge=0, le=255)]
RGB = Tuple[Channel, Channel, Channel]


# ============================================================================
# SCENE SCHEMA V1
# ============================================================================

class CanvasSection(BaseModel):
    """Output raster dimensions and background fill."""
    width: int = Field(2000, gt=0, description="Canvas width (px)")
    height: int = Field(2000, gt=0, description="Canvas height (px)")
    background: RGB = Field((0, 0, 100), description="Background RGB")
    antialias: bool = Field(True, description="Antialiased polygon and circle edges")


class CurvesSection(BaseModel):
    """Primary Bézier curves."""
    count: int = Field(1000, ge=0, description="Number of curves to draw")
    control_points: int = Field(5, ge=1, description="Control points per curve")
    precision: int = Field(1000, ge=1, description="Samples per curve")
    stroke_width: int = Field(6, ge=1, description="Thick-segment width (px)")
    color: RGB = Field((255, 100, 100), description="Stroke RGB")
    min_segment_length: float = Field(
        MIN_SEGMENT_LENGTH, gt=0.0,
        description="Segments at or below this length (px) use the circle fallback"
    )


class SecondarySection(BaseModel):
    """Thin connecting lines between a shuffled subsample of curve points."""
    enabled: bool = Field(True, description="Draw secondary lines")
    fraction: float = Field(0.01, gt=0.0, le=1.0, description="Share of curve points kept")
    stroke_width: int = Field(1, ge=1, description="Line width (px); 1 = antialiased hairline")
    color: RGB = Field((255, 200, 160), description="Line RGB")


class OutputSection(BaseModel):
    """Output artifacts."""
    path: str = Field("bezier.png", description="Output PNG path")
    manifest: bool = Field(True, description="Write <stem>_manifest.yaml next to the PNG")

    @field_validator('path')
    @classmethod
    def validate_png(cls, v: str) -> str:
        if Path(v).suffix.lower() != ".png":
            raise ValueError(f"Output path must end in .png, got '{v}'")
        return v


class LoggingSection(BaseModel):
    """Arguments for logging_config.setup_logging()."""
    log_level: str = Field("INFO", description="Root log level")
    log_file: Optional[str] = Field(None, description="Optional log file path")
    json_format: bool = Field(False, alias="json", description="JSON lines in the log file")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('log_level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}, got '{v}'")
        return v.upper()


class SceneV1(BaseModel):
    """Scene config schema v1 (scene.v1.yaml)."""
    schema_version: str = Field("scene.v1", alias="schema", description="Schema version")
    seed: Optional[int] = Field(None, ge=0, description="RNG seed; None = fresh entropy")
    canvas: CanvasSection = Field(default_factory=CanvasSection)
    curves: CurvesSection = Field(default_factory=CurvesSection)
    secondary: SecondarySection = Field(default_factory=SecondarySection)
    output: OutputSection = Field(default_factory=OutputSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "scene.v1":
            raise ValueError(f"Expected schema 'scene.v1', got '{v}'")
        return v


# ============================================================================
# PUBLIC API
# ============================================================================

def default_scene_config() -> SceneV1:
    """Reference scene: 2000×2000, 1000 curves of 5 points at precision 1000."""
    return SceneV1()


def load_scene_config(path: Union[str, Path]) -> SceneV1:
    """Load and validate scene config from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to scene.v1.yaml file

    Returns
    -------
    SceneV1
        Validated scene configuration

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails (with actionable error message)
    """
    from . import fs

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scene config not found: {path}")

    data = fs.load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Scene config at {path} must be a mapping, got {type(data).__name__}")
    try:
        return SceneV1(**data)
    except ValidationError as e:
        raise ValueError(f"Scene config validation failed at {path}: {e}") from e
