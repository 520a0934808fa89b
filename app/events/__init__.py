"""Feature toggle event model.

Usage:
    from events import EventType, FeatureEvent

    event = FeatureEvent.from_dict(payload)
    if event.type is EventType.FEATURE_ARCHIVED:
        ...
"""

from events.exceptions import FeatureEventError, InvalidLinkStyle
from events.models import (
    FLEXIBLE_ROLLOUT_STRATEGY,
    Constraint,
    EventType,
    FeatureEvent,
    StrategyPayload,
    event_type_tag,
)

__all__ = [
    "FLEXIBLE_ROLLOUT_STRATEGY",
    "Constraint",
    "EventType",
    "FeatureEvent",
    "FeatureEventError",
    "InvalidLinkStyle",
    "StrategyPayload",
    "event_type_tag",
]
