"""Toggler 実装"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .config import TogglerConfig
from .evaluator import evaluate_feature
from .loader import load
from .models import (
    CustomOperator,
    EvaluationReason,
    EvaluationResult,
    Feature,
    parse_feature,
)
from .operators import OperatorRegistry

logger = logging.getLogger(__name__)


class Toggler:
    """フィーチャートグルのレジストリ。

    グローバルコンテキスト、フィーチャー定義、カスタム演算子テーブルを保持する。
    グローバルとカスタム演算子の更新はロックで保護されるため、
    評価と登録を別スレッドから並行して呼び出してよい。
    """

    def __init__(
        self,
        config: TogglerConfig | Mapping[str, Any] | None = None,
        operators: OperatorRegistry | Mapping[str, CustomOperator] | None = None,
    ) -> None:
        if isinstance(config, TogglerConfig):
            globals_, features = config.globals, config.features
        elif config is not None:
            globals_ = config.get("globals") or {}
            features = config.get("features") or {}
        else:
            globals_, features = {}, {}

        self._globals: dict[str, Any] = dict(globals_)
        self._features: dict[str, Feature] = {
            name: parse_feature(definition) for name, definition in features.items()
        }
        if isinstance(operators, OperatorRegistry):
            self._operators = operators
        else:
            self._operators = OperatorRegistry(operators)
        self._lock = threading.Lock()

    @classmethod
    def from_file(cls, base_path: Path, env_path: Path | None = None) -> Toggler:
        """YAML のトグル定義ファイルから Toggler を構築する。"""
        return cls(load(base_path, env_path))

    @property
    def globals(self) -> dict[str, Any]:
        """グローバルコンテキストのコピー。"""
        with self._lock:
            return dict(self._globals)

    @property
    def features(self) -> list[str]:
        """定義済みフィーチャー名の一覧。"""
        return list(self._features)

    @property
    def operators(self) -> OperatorRegistry:
        """カスタム演算子テーブル。"""
        return self._operators

    def has_feature(self, feature: str) -> bool:
        """フィーチャーが定義済みかどうか。"""
        return feature in self._features

    def add_global(self, name: str, value: Any) -> Toggler:
        """グローバルコンテキストに値を追加（上書き）する。チェーン可能。"""
        with self._lock:
            self._globals[name] = value
        return self

    def register_operator(self, sign: str, predicate: CustomOperator) -> None:
        """カスタム演算子を登録する。同じ記号は後勝ちで上書きされる。"""
        self._operators.register(sign, predicate)

    def evaluate(
        self, feature: str, data: Mapping[str, Any] | None = None
    ) -> EvaluationResult:
        """フィーチャーを評価して理由付きの結果を返す。

        Args:
            feature: フィーチャー名
            data: 呼び出し側コンテキスト。同じキーはグローバルより優先される。

        Raises:
            UnregisteredOperatorError: 条件が未登録の演算子を参照した場合
        """
        definition = self._features.get(feature)
        if definition is None:
            logger.debug("Feature not found", extra={"feature": feature})
            return EvaluationResult(
                feature=feature,
                enabled=False,
                reason=EvaluationReason.FEATURE_NOT_FOUND,
            )

        with self._lock:
            context = {**self._globals, **(data or {})}

        enabled, reason = evaluate_feature(definition, context, self._operators)
        logger.debug(
            "Feature evaluated",
            extra={"feature": feature, "enabled": enabled, "reason": reason.value},
        )
        return EvaluationResult(feature=feature, enabled=enabled, reason=reason)

    def enabled(self, feature: str, data: Mapping[str, Any] | None = None) -> bool:
        """フィーチャーが有効かどうかを返す。未定義のフィーチャーは False。"""
        return self.evaluate(feature, data).enabled
