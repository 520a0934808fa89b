import pytest
from events.models import Constraint, EventType, FeatureEvent, StrategyPayload
from formatters.base import LinkStyle
from formatters.feature_event import FeatureEventFormatter

BASE_URL = "https://u"


@pytest.fixture
def md_formatter() -> FeatureEventFormatter:
    """Formatter producing markdown links"""
    return FeatureEventFormatter(BASE_URL)


@pytest.fixture
def slack_formatter() -> FeatureEventFormatter:
    """Formatter producing Slack mrkdwn links"""
    return FeatureEventFormatter(BASE_URL, LinkStyle.SLACK)


@pytest.fixture
def created_event() -> FeatureEvent:
    return FeatureEvent(
        type=EventType.FEATURE_CREATED,
        created_by="bob",
        feature_name="f2",
        project="p2",
    )


@pytest.fixture
def rollout_update_event() -> FeatureEvent:
    """Flexible rollout strategy moved from 25% to 50%"""
    return FeatureEvent(
        type=EventType.FEATURE_STRATEGY_UPDATE,
        created_by="carol",
        feature_name="checkout",
        project="shop",
        environment="production",
        pre_data=StrategyPayload(
            name="flexibleRollout",
            parameters={"rollout": "25", "stickiness": "default", "groupId": "checkout"},
        ),
        data=StrategyPayload(
            name="flexibleRollout",
            parameters={"rollout": "50", "stickiness": "default", "groupId": "checkout"},
        ),
    )


@pytest.fixture
def constraint_update_event() -> FeatureEvent:
    """Default strategy gained a country constraint"""
    return FeatureEvent(
        type=EventType.FEATURE_STRATEGY_UPDATE,
        created_by="dave",
        feature_name="banner",
        project="web",
        environment="development",
        pre_data=StrategyPayload(name="default", constraints=[]),
        data=StrategyPayload(
            name="default",
            constraints=[
                Constraint(context_name="country", operator="IN", values=["NO", "SE"])
            ],
        ),
    )
