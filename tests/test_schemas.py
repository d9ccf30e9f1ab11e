"""Test YAML schema validation and config loading.

Tests for bezier_art.utils.validators:
    - Defaults reproduce the reference scene
    - Shipped configs/scene.v1.yaml loads and matches the defaults
    - Aliased keys (schema, json) accepted in YAML and by field name
    - Out-of-range values rejected (colors, sizes, fractions, thresholds)
    - Wrong schema version, non-PNG output, unknown log level rejected
    - Loader errors: missing file, non-mapping document

Run:
    pytest tests/test_schemas.py -v
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from bezier_art.utils import validators

REPO_ROOT = Path(__file__).resolve().parents[1]
SCENE_YAML = REPO_ROOT / "configs" / "scene.v1.yaml"


def _write(tmp_path, data, name="scene.yaml"):
    path = tmp_path / name
    path.write_text(yaml.safe_dump(data))
    return path


# ============================================================================
# DEFAULTS & SHIPPED CONFIG
# ============================================================================

def test_default_scene_config():
    cfg = validators.default_scene_config()

    assert cfg.schema_version == "scene.v1"
    assert cfg.seed is None
    assert (cfg.canvas.width, cfg.canvas.height) == (2000, 2000)
    assert cfg.canvas.background == (0, 0, 100)
    assert cfg.curves.count == 1000
    assert cfg.curves.control_points == 5
    assert cfg.curves.precision == 1000
    assert cfg.curves.stroke_width == 6
    assert cfg.curves.color == (255, 100, 100)
    assert cfg.curves.min_segment_length == 5.0
    assert cfg.secondary.fraction == 0.01
    assert cfg.secondary.stroke_width == 1
    assert cfg.secondary.color == (255, 200, 160)
    assert cfg.output.path == "bezier.png"
    assert cfg.logging.log_level == "INFO"


def test_shipped_config_matches_defaults():
    cfg = validators.load_scene_config(SCENE_YAML)
    assert cfg == validators.default_scene_config()


def test_dump_by_alias_reloads(tmp_path):
    cfg = validators.default_scene_config()
    dumped = cfg.model_dump(mode='json', by_alias=True)

    assert dumped['schema'] == 'scene.v1'
    assert 'json' in dumped['logging']
    assert validators.load_scene_config(_write(tmp_path, dumped)) == cfg


def test_partial_config_fills_defaults(tmp_path):
    path = _write(tmp_path, {'schema': 'scene.v1', 'curves': {'count': 3}})
    cfg = validators.load_scene_config(path)
    assert cfg.curves.count == 3
    assert cfg.curves.precision == 1000
    assert cfg.canvas.width == 2000


def test_populate_by_field_name():
    cfg = validators.SceneV1(
        schema_version="scene.v1",
        logging={'log_level': 'debug', 'json_format': True},
    )
    assert cfg.logging.log_level == "DEBUG"
    assert cfg.logging.json_format is True


# ============================================================================
# REJECTIONS
# ============================================================================

@pytest.mark.parametrize("section,values", [
    ('canvas', {'width': 0}),
    ('canvas', {'height': -4}),
    ('canvas', {'background': [0, 0, 256]}),
    ('canvas', {'background': [0, 0]}),
    ('curves', {'count': -1}),
    ('curves', {'control_points': 0}),
    ('curves', {'precision': 0}),
    ('curves', {'stroke_width': 0}),
    ('curves', {'color': [-1, 0, 0]}),
    ('curves', {'min_segment_length': 0.0}),
    ('secondary', {'fraction': 0.0}),
    ('secondary', {'fraction': 1.5}),
    ('secondary', {'stroke_width': 0}),
    ('output', {'path': 'bezier.jpg'}),
    ('logging', {'log_level': 'LOUD'}),
])
def test_invalid_values_rejected(section, values):
    with pytest.raises(ValidationError):
        validators.SceneV1(**{section: values})


def test_wrong_schema_version(tmp_path):
    path = _write(tmp_path, {'schema': 'scene.v2'})
    with pytest.raises(ValueError, match="scene.v1"):
        validators.load_scene_config(path)


def test_negative_seed_rejected():
    with pytest.raises(ValidationError):
        validators.SceneV1(seed=-1)


def test_error_message_names_offending_key(tmp_path):
    path = _write(tmp_path, {'curves': {'precision': 0}})
    with pytest.raises(ValueError) as exc_info:
        validators.load_scene_config(path)
    message = str(exc_info.value)
    assert "precision" in message
    assert str(path) in message


# ============================================================================
# LOADER
# ============================================================================

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        validators.load_scene_config(tmp_path / "missing.yaml")


def test_non_mapping_document(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError, match="mapping"):
        validators.load_scene_config(path)


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert validators.load_scene_config(path) == validators.default_scene_config()
