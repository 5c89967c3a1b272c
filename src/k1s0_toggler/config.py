"""設定型定義（pydantic BaseModel）"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class TogglerConfig(BaseModel):
    """Toggler の構築設定。

    トップレベルが mapping であることだけを検証する。
    フィーチャー定義の形は検証せず、評価時に解釈する。
    """

    globals: dict[str, Any] = Field(default_factory=dict)
    features: dict[str, Any] = Field(default_factory=dict)

    @field_validator("globals", "features", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        # YAML の空セクション (`features:`) は None になる
        return {} if value is None else value
