"""Feature event formatters package.

This package contains formatters that convert FeatureEvent objects into
one line of text with a Slack or markdown link to the affected feature.
"""

from .base import BaseFormatter, LinkStyle
from .feature_event import FeatureEventFormatter

__all__ = [
    "BaseFormatter",
    "FeatureEventFormatter",
    "LinkStyle",
]
