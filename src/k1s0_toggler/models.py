"""toggler データモデル"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

CustomOperator = Callable[[Any, Mapping[str, Any], Any], bool]


class Operator(str, Enum):
    """組み込み演算子。値は設定ファイルに書く記号そのもの。"""

    IN_SET = "in"
    NOT_IN_SET = "notIn"
    EQUALS = "="
    LESS_THAN = "<"
    GREATER_THAN = ">"


class EvaluationReason(str, Enum):
    """評価結果の理由。"""

    FEATURE_NOT_FOUND = "FEATURE_NOT_FOUND"
    BOOLEAN = "BOOLEAN"
    ACTIVE_FLAG = "ACTIVE_FLAG"
    NO_CONDITIONS = "NO_CONDITIONS"
    CONDITIONS_MET = "CONDITIONS_MET"
    CONDITION_FAILED = "CONDITION_FAILED"


@dataclass(frozen=True)
class Condition:
    """条件 (field, operator, argument)。argument は省略可能。"""

    field: Any
    operator: Any
    argument: Any = None

    @classmethod
    def from_raw(cls, raw: Any) -> Condition:
        """設定に書かれた [field, operator, argument?] から Condition を作る。

        形式の検証はしない。要素が足りない場合は None で埋め、
        評価時に不一致またはエラーとして表面化させる。
        """
        if isinstance(raw, Condition):
            return raw
        items: list[Any] = []
        if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
            items = list(raw)
        return cls(
            field=items[0] if len(items) > 0 else None,
            operator=items[1] if len(items) > 1 else None,
            argument=items[2] if len(items) > 2 else None,
        )


@dataclass(frozen=True)
class BooleanFeature:
    """コンテキストに関係なく固定値を返すフィーチャー。"""

    value: bool


@dataclass(frozen=True)
class ActiveFeature:
    """active 属性の値をそのまま返すフィーチャー。"""

    active: bool


@dataclass(frozen=True)
class ConditionFeature:
    """全条件の論理積で判定するフィーチャー。空なら無効。"""

    conditions: tuple[Condition, ...] = ()


Feature = Union[BooleanFeature, ActiveFeature, ConditionFeature]


def parse_feature(raw: Any) -> Feature:
    """設定上のフィーチャー定義を Feature に正規化する。

    active と conditions が両方ある場合は active が優先され、
    conditions は読まれない。どちらも無い定義は空の ConditionFeature になる。
    """
    if isinstance(raw, (BooleanFeature, ActiveFeature, ConditionFeature)):
        return raw
    if isinstance(raw, bool):
        return BooleanFeature(raw)
    if isinstance(raw, Mapping):
        if "active" in raw:
            return ActiveFeature(raw["active"])
        if "conditions" in raw:
            conditions = raw["conditions"]
            # 列挙できない conditions は評価時に False となる空リスト扱い
            if not isinstance(conditions, Sequence) or isinstance(
                conditions, (str, bytes)
            ):
                return ConditionFeature()
            return ConditionFeature(tuple(Condition.from_raw(c) for c in conditions))
    return ConditionFeature()


@dataclass
class EvaluationResult:
    """フィーチャー評価結果。"""

    feature: str
    enabled: bool
    reason: EvaluationReason
