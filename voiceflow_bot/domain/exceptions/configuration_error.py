"""
ConfigurationError - Raised at startup when a required setting is missing or invalid.
"""


class ConfigurationError(Exception):
    """Exception raised for missing or invalid configuration."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
