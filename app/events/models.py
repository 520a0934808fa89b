"""Feature event model consumed by the event formatters.

This module defines the FeatureEvent dataclass and supporting types that
represent a single change to a feature toggle. Events are produced and
validated upstream; parsing here only maps the camelCase event record onto
Python types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Strategy type with percentage rollout parameters
FLEXIBLE_ROLLOUT_STRATEGY = "flexibleRollout"


class EventType(Enum):
    """Types of feature toggle events.

    Tags outside this enumeration are kept as raw strings, see parse().
    """

    # Lifecycle events
    FEATURE_CREATED = "feature-created"
    FEATURE_UPDATED = "feature-updated"
    FEATURE_ARCHIVED = "feature-archived"
    FEATURE_REVIVED = "feature-revived"
    FEATURE_PROJECT_CHANGE = "feature-project-change"

    # Environment events
    FEATURE_ENVIRONMENT_ENABLED = "feature-environment-enabled"
    FEATURE_ENVIRONMENT_DISABLED = "feature-environment-disabled"

    # Stale marking
    FEATURE_STALE_ON = "feature-stale-on"
    FEATURE_STALE_OFF = "feature-stale-off"

    # Strategy events
    FEATURE_STRATEGY_ADD = "feature-strategy-add"
    FEATURE_STRATEGY_REMOVE = "feature-strategy-remove"
    FEATURE_STRATEGY_UPDATE = "feature-strategy-update"

    # Configuration events
    FEATURE_METADATA_UPDATED = "feature-metadata-updated"
    FEATURE_VARIANTS_UPDATED = "feature-variants-updated"

    @classmethod
    def parse(cls, tag: "EventType | str") -> "EventType | str":
        """Resolve a type tag to an EventType member.

        Args:
            tag: EventType member or raw tag string.

        Returns:
            The matching member, or the raw tag unchanged when it is not a
            known event type.
        """
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return tag


def event_type_tag(event_type: "EventType | str") -> str:
    """Return the raw string tag for a parsed event type."""
    if isinstance(event_type, EventType):
        return event_type.value
    return event_type


@dataclass
class Constraint:
    """A single strategy constraint.

    Attributes:
        context_name: Context field the constraint compares (e.g., "country").
        operator: Operator tag (e.g., "IN", "NUM_GT").
        inverted: Whether the comparison is negated.
        value: Single comparison value, if the operator takes one.
        values: Comparison values for list operators.
    """

    context_name: str
    operator: str
    inverted: bool = False
    value: str | None = None
    values: list[str] = field(default_factory=list)

    @property
    def has_single_value(self) -> bool:
        """True if the constraint compares against a single value."""
        return self.value is not None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Constraint":
        """Build a Constraint from a camelCase constraint record."""
        return cls(
            context_name=payload.get("contextName", ""),
            operator=payload.get("operator", ""),
            inverted=bool(payload.get("inverted", False)),
            value=payload.get("value"),
            values=list(payload.get("values") or []),
        )


@dataclass
class StrategyPayload:
    """Strategy state carried in an event's data or preData.

    Attributes:
        name: Strategy type identifier (e.g., "flexibleRollout", "default").
        parameters: Strategy parameters (rollout, stickiness, groupId, ...).
        constraints: Ordered constraint list.
    """

    name: str
    parameters: dict[str, Any] = field(default_factory=dict)
    constraints: list[Constraint] = field(default_factory=list)

    @property
    def is_flexible_rollout(self) -> bool:
        return self.name == FLEXIBLE_ROLLOUT_STRATEGY

    @property
    def rollout(self) -> Any:
        return self.parameters.get("rollout")

    @property
    def stickiness(self) -> Any:
        return self.parameters.get("stickiness")

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "StrategyPayload":
        return cls(
            name=payload.get("name", ""),
            parameters=dict(payload.get("parameters") or {}),
            constraints=[
                Constraint.from_dict(constraint)
                for constraint in payload.get("constraints") or []
            ],
        )


@dataclass
class FeatureEvent:
    """A recorded change to a feature toggle.

    Attributes:
        type: EventType member, or the raw tag for unknown types.
        created_by: Display name of the user who made the change.
        feature_name: Name of the affected feature toggle.
        project: Project identifier; empty for legacy/global events.
        environment: Environment name for environment and strategy events.
        data: New strategy state for strategy events.
        pre_data: Previous strategy state for strategy events.
    """

    type: EventType | str
    created_by: str
    feature_name: str | None = None
    project: str = ""
    environment: str = ""
    data: StrategyPayload | None = None
    pre_data: StrategyPayload | None = None

    def __post_init__(self) -> None:
        self.type = EventType.parse(self.type)
        self.project = self.project or ""
        self.environment = self.environment or ""

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "FeatureEvent":
        """Build a FeatureEvent from a camelCase event record.

        Args:
            payload: Event record with type, createdBy, featureName, project,
                environment, data and preData keys.

        Returns:
            FeatureEvent with missing optional fields defaulted.
        """
        return cls(
            type=payload.get("type", ""),
            created_by=payload.get("createdBy", ""),
            feature_name=payload.get("featureName"),
            project=payload.get("project") or "",
            environment=payload.get("environment") or "",
            data=_strategy_payload(payload.get("data")),
            pre_data=_strategy_payload(payload.get("preData")),
        )


def _strategy_payload(raw: Any) -> StrategyPayload | None:
    if isinstance(raw, dict):
        return StrategyPayload.from_dict(raw)
    return None
