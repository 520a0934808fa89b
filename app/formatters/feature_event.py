"""Feature event formatter for chat and markdown notifications.

This module converts FeatureEvent objects into one line of descriptive text
with an embedded link to the affected feature toggle, using either Slack
mrkdwn link syntax or markdown link syntax.
"""

import logging
from typing import Any, Callable

from events.models import EventType, FeatureEvent, event_type_tag
from formatters.base import BaseFormatter, LinkStyle
from formatters.strategy import describe_strategy_change

logger = logging.getLogger(__name__)

# Action words for the generic generator; other tags are used verbatim
ACTIONS: dict[EventType, str] = {
    EventType.FEATURE_CREATED: "created",
    EventType.FEATURE_UPDATED: "updated",
    EventType.FEATURE_VARIANTS_UPDATED: "updated variants for",
}


class FeatureEventFormatter(BaseFormatter):
    """Formats feature toggle events as text with a styled feature link.

    The base URL and link style are fixed at construction, so an instance
    can be shared freely between threads.

    Example:
        >>> formatter = FeatureEventFormatter("https://unleash.example.com")
        >>> formatter.format(event)
        'bob created feature toggle [f2](https://...) in project *p2*'
    """

    def __init__(self, base_url: str, link_style: LinkStyle | str = LinkStyle.MD):
        self._base_url = base_url
        self._link_style = LinkStyle.parse(link_style)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def link_style(self) -> LinkStyle:
        return self._link_style

    def format(self, event: FeatureEvent | dict[str, Any]) -> str:
        """Describe an event in one line of text.

        Unknown event types are described with the generic generator, using
        the raw type tag as the action word.

        Args:
            event: FeatureEvent, or a camelCase event record.

        Returns:
            Descriptive text for the event.
        """
        if not isinstance(event, FeatureEvent):
            event = FeatureEvent.from_dict(event)

        generator = self._GENERATORS.get(event.type)
        if generator is None:
            if not isinstance(event.type, EventType):
                logger.debug(
                    "Formatting unknown event type with generic text",
                    extra={"event_type": event.type},
                )
            generator = FeatureEventFormatter._default_text
        return generator(self, event)

    def feature_link(self, event: FeatureEvent | dict[str, Any]) -> str:
        """Build the deep link URL for the feature referenced by an event.

        Archived features link to the (project) archive view, everything
        else links to the feature page.
        """
        if not isinstance(event, FeatureEvent):
            event = FeatureEvent.from_dict(event)

        if event.type is EventType.FEATURE_ARCHIVED:
            if event.project:
                return f"{self._base_url}/projects/{event.project}/archive"
            return f"{self._base_url}/archive"

        return (
            f"{self._base_url}/projects/{event.project}/features/{event.feature_name}"
        )

    def generate_feature_link(self, event: FeatureEvent) -> str:
        """Render the feature name as a hyperlink in the configured style."""
        url = self.feature_link(event)
        if self._link_style is LinkStyle.SLACK:
            return f"<{url}|{event.feature_name}>"
        return f"[{event.feature_name}]({url})"

    def _archived_text(self, event: FeatureEvent) -> str:
        if event.type is EventType.FEATURE_ARCHIVED:
            action = "archived"
        else:
            action = "revived"
        feature = self.generate_feature_link(event)
        return f" {event.created_by} just {action} feature toggle *{feature}*"

    def _stale_text(self, event: FeatureEvent) -> str:
        feature = self.generate_feature_link(event)
        if event.type is EventType.FEATURE_STALE_ON:
            return (
                f"{event.created_by} marked {feature}  as stale and this feature "
                "toggle is now *ready to be removed* from the code."
            )
        return f"{event.created_by} removed the stale marking on *{feature}*."

    def _environment_toggle_text(self, event: FeatureEvent) -> str:
        if event.type is EventType.FEATURE_ENVIRONMENT_ENABLED:
            toggle_status = "enabled"
        else:
            toggle_status = "disabled"
        feature = self.generate_feature_link(event)
        return (
            f"{event.created_by} *{toggle_status}* {feature} in "
            f"*{event.environment}* environment in project *{event.project}*"
        )

    def _strategy_update_prefix(self, event: FeatureEvent) -> str:
        feature = self.generate_feature_link(event)
        return f"{event.created_by} updated *{feature}* in project *{event.project}*"

    def _strategy_remove_text(self, event: FeatureEvent) -> str:
        name = event.pre_data.name if event.pre_data is not None else ""
        return (
            f"{self._strategy_update_prefix(event)} by removing strategy "
            f"{name} in *{event.environment}*"
        )

    def _strategy_add_text(self, event: FeatureEvent) -> str:
        name = event.data.name if event.data is not None else ""
        return (
            f"{self._strategy_update_prefix(event)} by adding strategy "
            f"{name} in *{event.environment}*"
        )

    def _strategy_change_text(self, event: FeatureEvent) -> str:
        strategy_text = describe_strategy_change(
            event.pre_data, event.data, event.environment
        )
        return f"{self._strategy_update_prefix(event)} {strategy_text}"

    def _metadata_text(self, event: FeatureEvent) -> str:
        feature = self.generate_feature_link(event)
        return (
            f"{event.created_by} updated the metadata for {feature} "
            f"in project *{event.project}*"
        )

    def _project_change_text(self, event: FeatureEvent) -> str:
        return f"{event.created_by} moved {event.feature_name} to {event.project}"

    def _default_text(self, event: FeatureEvent) -> str:
        action = get_action(event.type)
        feature = self.generate_feature_link(event)
        return (
            f"{event.created_by} {action} feature toggle {feature} "
            f"in project *{event.project}*"
        )

    _GENERATORS: dict[EventType, Callable[..., str]] = {
        EventType.FEATURE_ARCHIVED: _archived_text,
        EventType.FEATURE_REVIVED: _archived_text,
        EventType.FEATURE_STALE_ON: _stale_text,
        EventType.FEATURE_STALE_OFF: _stale_text,
        EventType.FEATURE_ENVIRONMENT_ENABLED: _environment_toggle_text,
        EventType.FEATURE_ENVIRONMENT_DISABLED: _environment_toggle_text,
        EventType.FEATURE_STRATEGY_REMOVE: _strategy_remove_text,
        EventType.FEATURE_STRATEGY_ADD: _strategy_add_text,
        EventType.FEATURE_STRATEGY_UPDATE: _strategy_change_text,
        EventType.FEATURE_METADATA_UPDATED: _metadata_text,
        EventType.FEATURE_PROJECT_CHANGE: _project_change_text,
    }


def get_action(event_type: EventType | str) -> str:
    """Return the action word for the generic event text."""
    if isinstance(event_type, EventType) and event_type in ACTIONS:
        return ACTIONS[event_type]
    return event_type_tag(event_type)
