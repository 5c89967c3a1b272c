"""条件評価"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .models import (
    ActiveFeature,
    BooleanFeature,
    Condition,
    ConditionFeature,
    EvaluationReason,
    Feature,
)
from .operators import OperatorRegistry, apply_operator


def evaluate_condition(
    condition: Condition,
    context: Mapping[str, Any],
    registry: OperatorRegistry,
) -> bool:
    """単一条件を評価する。

    field がコンテキストに無ければ演算子に関係なく False（notIn も False）。
    """
    if condition.field not in context:
        return False
    value = context[condition.field]
    return apply_operator(
        condition.operator, value, context, condition.argument, registry
    )


def evaluate_conditions(
    conditions: Sequence[Condition],
    context: Mapping[str, Any],
    registry: OperatorRegistry,
) -> bool:
    """条件リストを先頭から評価し、最初の False で打ち切る。空リストは False。"""
    if not conditions:
        return False
    for condition in conditions:
        if not evaluate_condition(condition, context, registry):
            return False
    return True


def evaluate_feature(
    feature: Feature,
    context: Mapping[str, Any],
    registry: OperatorRegistry,
) -> tuple[bool, EvaluationReason]:
    """フィーチャーを評価して (有効か, 理由) を返す。"""
    if isinstance(feature, BooleanFeature):
        return feature.value, EvaluationReason.BOOLEAN
    if isinstance(feature, ActiveFeature):
        return feature.active, EvaluationReason.ACTIVE_FLAG
    if isinstance(feature, ConditionFeature):
        if not feature.conditions:
            return False, EvaluationReason.NO_CONDITIONS
        if evaluate_conditions(feature.conditions, context, registry):
            return True, EvaluationReason.CONDITIONS_MET
        return False, EvaluationReason.CONDITION_FAILED
    raise TypeError(f"Unsupported feature type: {type(feature).__name__}")
