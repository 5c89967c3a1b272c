"""YAML からの設定読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .config import TogglerConfig
from .exceptions import TogglerError, TogglerErrorCodes


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TogglerError(
            code=TogglerErrorCodes.READ_FILE,
            message=f"Failed to read toggle file: {path}",
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise TogglerError(
            code=TogglerErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise TogglerError(
            code=TogglerErrorCodes.VALIDATION,
            message=f"Toggle file must contain a mapping: {path}",
        )
    return data


def _overlay(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """override レイヤーを base に重ねた新しい辞書を返す。

    globals はキー単位で上書き、features は定義ごと置換する（conditions は連結しない）。
    """
    result: dict[str, Any] = dict(base)
    for section in ("globals", "features"):
        layer = override.get(section)
        if layer is None:
            continue
        current = result.get(section)
        if isinstance(current, dict) and isinstance(layer, dict):
            result[section] = {**current, **layer}
        else:
            result[section] = layer
    return result


def load(base_path: Path, env_path: Path | None = None) -> TogglerConfig:
    """トグル定義ファイルを読み込んで TogglerConfig を返す。

    base_path: ベース定義ファイルパス（必須）
    env_path: 環境別定義ファイルパス（オプション）。存在する場合はベースに重ねる。
    """
    data = _read_yaml(base_path)
    if env_path is not None and env_path.exists():
        data = _overlay(data, _read_yaml(env_path))
    try:
        return TogglerConfig.model_validate(data)
    except ValidationError as e:
        raise TogglerError(
            code=TogglerErrorCodes.VALIDATION,
            message=f"Toggle config validation failed: {e}",
            cause=e,
        ) from e
