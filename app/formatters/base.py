"""Base formatter interface and link styles for feature event text.

This module defines the LinkStyle enumeration and the BaseFormatter abstract
class implemented by feature event formatters.
"""

from abc import ABC, abstractmethod
from enum import Enum

from events.exceptions import InvalidLinkStyle
from events.models import FeatureEvent


class LinkStyle(Enum):
    """Hyperlink syntax used when embedding feature links in text."""

    SLACK = "slack"  # <url|text>
    MD = "md"  # [text](url)

    @classmethod
    def parse(cls, style: "LinkStyle | str") -> "LinkStyle":
        """Resolve a link style from a member or a configuration string.

        Args:
            style: LinkStyle member, or a name such as "slack", "md" or
                "markdown" (case-insensitive).

        Returns:
            The matching LinkStyle.

        Raises:
            InvalidLinkStyle: If the name is not a known link style.
        """
        if isinstance(style, cls):
            return style
        normalized = str(style).strip().lower()
        if normalized == "markdown":
            return cls.MD
        try:
            return cls(normalized)
        except ValueError:
            available = ", ".join(member.value for member in cls)
            raise InvalidLinkStyle(
                f"Unknown link style '{style}'. Available: {available}, markdown"
            ) from None


class BaseFormatter(ABC):
    """Abstract base class for feature event formatters.

    Formatters convert FeatureEvent objects into a line of descriptive text
    and expose the deep link they embed for the affected feature.
    """

    @abstractmethod
    def format(self, event: FeatureEvent) -> str:
        """Describe an event in one line of text.

        Args:
            event: FeatureEvent to describe.

        Returns:
            Descriptive text containing a styled feature link.
        """
        pass

    @abstractmethod
    def feature_link(self, event: FeatureEvent) -> str:
        """Build the deep link URL for the feature referenced by an event.

        Args:
            event: FeatureEvent whose feature should be linked.

        Returns:
            Absolute URL string.
        """
        pass
