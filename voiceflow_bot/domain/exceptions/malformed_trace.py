"""
MalformedTraceError - Raised when a Voiceflow response does not have the expected shape.
"""


class MalformedTraceError(ValueError):
    """Exception raised for an unparseable interact response or trace."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
