class FeatureEventError(Exception):
    """Base class for feature event formatting errors"""

    def __init__(self, message: str, error_code: str = "FEATURE_EVENT_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class InvalidLinkStyle(FeatureEventError):
    """Raised when a link style name is not recognised"""

    def __init__(self, message: str = "Invalid link style"):
        super().__init__(message, "INVALID_LINK_STYLE")
