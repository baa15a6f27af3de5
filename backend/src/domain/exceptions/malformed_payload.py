"""
MalformedPayloadError - Raised when an inbound socket frame cannot be understood.
Maps to: {"type": "error"} frame, connection stays open
"""


class MalformedPayloadError(Exception):
    """Exception raised for unparsable or incomplete inbound frames."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
