"""Describe strategy updates for feature-strategy-update events.

A strategy update is described either as a flexible rollout change (rollout
percentage and stickiness) or as a constraint change (old and new constraint
lists). The branch is picked by the strategy type of the new strategy state.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from events.models import Constraint, StrategyPayload

logger = logging.getLogger(__name__)

EMPTY_CONSTRAINTS_TEXT = "empty set of constraints"

CONSTRAINT_OPERATOR_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "IN": "is one of",
        "NOT_IN": "is not one of",
        "STR_CONTAINS": "is a string that contains",
        "STR_STARTS_WITH": "is a string that starts with",
        "STR_ENDS_WITH": "is a string that ends with",
        "NUM_EQ": "is a number equal to",
        "NUM_GT": "is a number greater than",
        "NUM_GTE": "is a number greater than or equal to",
        "NUM_LT": "is a number less than",
        "NUM_LTE": "is a number less than or equal to",
        "DATE_BEFORE": "is a date before",
        "DATE_AFTER": "is a date after",
        "SEMVER_EQ": "is a SemVer equal to",
        "SEMVER_GT": "is a SemVer greater than",
        "SEMVER_LT": "is a SemVer less than",
    }
)


def describe_operator(operator: str) -> str:
    """Return the phrase for an operator tag, or the tag itself if unknown."""
    return CONSTRAINT_OPERATOR_DESCRIPTIONS.get(operator, operator)


def format_constraint(constraint: Constraint) -> str:
    """Render a constraint as "{context} {not }{operator phrase} {value}".

    Args:
        constraint: Constraint to render.

    Returns:
        Rendered constraint, e.g. "country is one of (NO,SE)".
    """
    if constraint.has_single_value:
        value = constraint.value
    else:
        value = f"({','.join(str(v) for v in constraint.values)})"
    negation = "not " if constraint.inverted else ""
    operator = describe_operator(constraint.operator)
    return f"{constraint.context_name} {negation}{operator} {value}"


def format_constraints(constraints: list[Constraint]) -> str:
    """Render a constraint list as "[c1, c2]" or the empty-set phrase."""
    if not constraints:
        return EMPTY_CONSTRAINTS_TEXT
    return f"[{', '.join(format_constraint(c) for c in constraints)}]"


def describe_strategy_change(
    pre_data: StrategyPayload | None,
    data: StrategyPayload | None,
    environment: str,
) -> str:
    """Describe how a strategy changed between two states.

    Args:
        pre_data: Strategy state before the update.
        data: Strategy state after the update.
        environment: Environment the strategy belongs to.

    Returns:
        Clause starting with "by updating strategy ...".
    """
    if data is None or pre_data is None:
        name = data.name if data is not None else ""
        logger.warning(
            "Strategy update without previous or new strategy state",
            extra={"strategy": name, "environment": environment},
        )
        return f"by updating strategy {name} in *{environment}*"

    if data.is_flexible_rollout:
        return _flexible_rollout_change_text(pre_data, data, environment)
    return _constraint_change_text(pre_data, data, environment)


def _flexible_rollout_change_text(
    pre_data: StrategyPayload, data: StrategyPayload, environment: str
) -> str:
    stickiness_text = ""
    if pre_data.stickiness != data.stickiness:
        stickiness_text = (
            f" from {pre_data.stickiness} stickiness to {data.stickiness} stickiness"
        )

    rollout_text = ""
    if pre_data.rollout != data.rollout:
        rollout_text = f" from {pre_data.rollout}% to {data.rollout}%"

    return (
        f"by updating strategy {data.name} in *{environment}*"
        f"{stickiness_text}{rollout_text}"
    )


def _constraint_change_text(
    pre_data: StrategyPayload, data: StrategyPayload, environment: str
) -> str:
    old_constraints = format_constraints(pre_data.constraints)
    new_constraints = format_constraints(data.constraints)
    return (
        f"by updating strategy {data.name} in *{environment}* "
        f"from {old_constraints} to {new_constraints}"
    )
