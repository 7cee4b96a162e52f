"""
Exceptions raised along the contact pipeline.

ParseError maps to a 400, DeliveryError to a 502. ConfigError is a deployment
problem and is left to the generic 500 handler.
"""


class ParseError(ValueError):
    """Request body is not a JSON object."""


class ConfigError(ValueError):
    """A required setting is missing or empty."""


class DeliveryError(RuntimeError):
    """The mail API answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Resend API error: {status_code} {body}")
