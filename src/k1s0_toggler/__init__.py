"""k1s0 toggler library."""

from .client import TogglerProtocol
from .config import TogglerConfig
from .evaluator import evaluate_condition, evaluate_conditions, evaluate_feature
from .exceptions import TogglerError, TogglerErrorCodes, UnregisteredOperatorError
from .loader import load
from .models import (
    ActiveFeature,
    BooleanFeature,
    Condition,
    ConditionFeature,
    CustomOperator,
    EvaluationReason,
    EvaluationResult,
    Feature,
    Operator,
    parse_feature,
)
from .operators import BUILTIN_OPERATORS, OperatorRegistry, apply_operator
from .toggler import Toggler

__all__ = [
    "ActiveFeature",
    "BooleanFeature",
    "BUILTIN_OPERATORS",
    "Condition",
    "ConditionFeature",
    "CustomOperator",
    "EvaluationReason",
    "EvaluationResult",
    "Feature",
    "Operator",
    "OperatorRegistry",
    "Toggler",
    "TogglerConfig",
    "TogglerError",
    "TogglerErrorCodes",
    "TogglerProtocol",
    "UnregisteredOperatorError",
    "apply_operator",
    "evaluate_condition",
    "evaluate_conditions",
    "evaluate_feature",
    "load",
    "parse_feature",
]
