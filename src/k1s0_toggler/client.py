"""Toggler プロトコル"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .models import CustomOperator, EvaluationResult


@runtime_checkable
class TogglerProtocol(Protocol):
    """フィーチャートグルの呼び出し面。テストダブルの差し替えに使う。"""

    def enabled(self, feature: str, data: Mapping[str, Any] | None = None) -> bool: ...

    def evaluate(
        self, feature: str, data: Mapping[str, Any] | None = None
    ) -> EvaluationResult: ...

    def add_global(self, name: str, value: Any) -> TogglerProtocol: ...

    def register_operator(self, sign: str, predicate: CustomOperator) -> None: ...
