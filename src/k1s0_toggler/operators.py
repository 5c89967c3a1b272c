"""演算子のディスパッチとカスタム演算子テーブル"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, Callable

from .exceptions import UnregisteredOperatorError
from .models import CustomOperator, Operator

logger = logging.getLogger(__name__)


def _equals(value: Any, argument: Any) -> bool:
    # bool と数値は一致させない (True == 1 を偽とする)
    if isinstance(value, bool) != isinstance(argument, bool):
        return False
    return value == argument


def _in_set(value: Any, argument: Any) -> bool:
    return value in argument


def _not_in_set(value: Any, argument: Any) -> bool:
    return value not in argument


def _greater_than(value: Any, argument: Any) -> bool:
    return value > argument


def _less_than(value: Any, argument: Any) -> bool:
    return value < argument


BUILTIN_OPERATORS: dict[Operator, Callable[[Any, Any], bool]] = {
    Operator.EQUALS: _equals,
    Operator.IN_SET: _in_set,
    Operator.NOT_IN_SET: _not_in_set,
    Operator.GREATER_THAN: _greater_than,
    Operator.LESS_THAN: _less_than,
}


def is_builtin(sign: Any) -> bool:
    """sign が組み込み演算子の記号かどうか。"""
    return isinstance(sign, str) and sign in BUILTIN_OPERATORS


class OperatorRegistry:
    """カスタム演算子テーブル。

    登録はいつでも可能で、同じ記号への再登録は黙って上書きする。
    参照は評価のたびに行うため、失敗した評価の後に登録した演算子も次回から使われる。
    """

    def __init__(self, operators: Mapping[str, CustomOperator] | None = None) -> None:
        self._operators: dict[str, CustomOperator] = dict(operators or {})
        self._lock = threading.Lock()

    def register(self, sign: str, predicate: CustomOperator) -> None:
        """sign に predicate を登録する。"""
        with self._lock:
            replaced = sign in self._operators
            self._operators[sign] = predicate
        logger.debug(
            "Custom operator registered",
            extra={"sign": sign, "replaced": replaced},
        )

    def get(self, sign: Any) -> CustomOperator | None:
        """登録済みの predicate を返す。未登録なら None。"""
        if not isinstance(sign, str):
            return None
        with self._lock:
            return self._operators.get(sign)

    def signs(self) -> list[str]:
        """登録済みの記号一覧。"""
        with self._lock:
            return sorted(self._operators)

    def __contains__(self, sign: object) -> bool:
        return self.get(sign) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._operators)


def apply_operator(
    sign: Any,
    value: Any,
    context: Mapping[str, Any],
    argument: Any,
    registry: OperatorRegistry,
) -> bool:
    """演算子を適用する。

    組み込み演算子は直接ディスパッチし、それ以外は registry から引く。

    Raises:
        UnregisteredOperatorError: sign が組み込みでも登録済みでもない場合
    """
    if is_builtin(sign):
        return BUILTIN_OPERATORS[Operator(sign)](value, argument)

    predicate = registry.get(sign)
    if predicate is None:
        logger.warning("Operator is not registered", extra={"sign": str(sign)})
        raise UnregisteredOperatorError(sign)
    return bool(predicate(value, context, argument))
