"""トグル定義ローダーのユニットテスト"""

from pathlib import Path

import pytest
from k1s0_toggler import Toggler, TogglerConfig, TogglerError, TogglerErrorCodes, load

BASE_YAML = """\
globals:
  environment: test
  version: 15
features:
  beta:
    conditions:
      - [environment, in, [test, staging]]
      - [userId, ">", 140]
  legacy: false
  banner:
    active: true
"""


def test_load_base(tmp_path: Path) -> None:
    base_file = tmp_path / "toggles.yaml"
    base_file.write_text(BASE_YAML)
    config = load(base_file)
    assert config.globals == {"environment": "test", "version": 15}
    assert config.features["legacy"] is False
    assert config.features["beta"]["conditions"][1] == ["userId", ">", 140]


def test_load_empty_file(tmp_path: Path) -> None:
    """空ファイルは空の設定。"""
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load(empty) == TogglerConfig()


def test_load_empty_sections(tmp_path: Path) -> None:
    config_file = tmp_path / "toggles.yaml"
    config_file.write_text("globals:\nfeatures:\n")
    config = load(config_file)
    assert config.globals == {}
    assert config.features == {}


def test_env_override(tmp_path: Path) -> None:
    """環境別定義で globals はキー単位、features は定義単位で上書きされること。"""
    base_file = tmp_path / "toggles.yaml"
    base_file.write_text(BASE_YAML)
    env_file = tmp_path / "toggles.prod.yaml"
    env_file.write_text(
        "globals:\n"
        "  environment: production\n"
        "features:\n"
        "  beta:\n"
        "    conditions:\n"
        "      - [userId, '<', 10]\n"
    )
    config = load(base_file, env_file)
    assert config.globals == {"environment": "production", "version": 15}
    assert config.features["beta"] == {"conditions": [["userId", "<", 10]]}
    assert config.features["banner"] == {"active": True}


def test_env_not_exists(tmp_path: Path) -> None:
    base_file = tmp_path / "toggles.yaml"
    base_file.write_text(BASE_YAML)
    config = load(base_file, tmp_path / "missing.yaml")
    assert config.globals["environment"] == "test"


def test_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(TogglerError) as exc_info:
        load(tmp_path / "missing.yaml")
    assert exc_info.value.code == TogglerErrorCodes.READ_FILE
    assert exc_info.value.__cause__ is not None


def test_invalid_yaml(tmp_path: Path) -> None:
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("features: {invalid: yaml: content:\n")
    with pytest.raises(TogglerError) as exc_info:
        load(bad_file)
    assert exc_info.value.code == TogglerErrorCodes.PARSE_YAML


def test_top_level_not_mapping(tmp_path: Path) -> None:
    bad_file = tmp_path / "list.yaml"
    bad_file.write_text("- a\n- b\n")
    with pytest.raises(TogglerError) as exc_info:
        load(bad_file)
    assert exc_info.value.code == TogglerErrorCodes.VALIDATION


def test_section_not_mapping(tmp_path: Path) -> None:
    bad_file = tmp_path / "bad_config.yaml"
    bad_file.write_text("features:\n  - a\n")
    with pytest.raises(TogglerError) as exc_info:
        load(bad_file)
    assert exc_info.value.code == TogglerErrorCodes.VALIDATION


def test_toggler_from_file(tmp_path: Path) -> None:
    base_file = tmp_path / "toggles.yaml"
    base_file.write_text(BASE_YAML)
    toggler = Toggler.from_file(base_file)
    assert toggler.enabled("beta", {"userId": 150}) is True
    assert toggler.enabled("beta", {"userId": 130}) is False
    assert toggler.enabled("legacy") is False
    assert toggler.enabled("banner") is True
