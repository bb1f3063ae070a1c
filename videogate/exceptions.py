"""Exceptions raised by the gateway services and client."""

from typing import Optional


class GatewayError(Exception):
    """Base class for gateway errors."""


class MissingCredentialsError(GatewayError):
    """An upstream API key is not configured."""

    def __init__(self, env_var: str, provider: Optional[str] = None):
        self.env_var = env_var
        self.provider = provider
        if provider:
            message = f"Missing API key for {provider}. Expected environment variable: {env_var}"
        else:
            message = f"{env_var} is not configured"
        super().__init__(message)


class UpstreamError(GatewayError):
    """An upstream API failed or returned a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class UnsupportedGenerationTypeError(GatewayError):
    """The requested video generation mode is not known."""

    def __init__(self, generation_type: str):
        self.generation_type = generation_type
        super().__init__(f"Unsupported video generation type: {generation_type}")


class GatewayRequestError(GatewayError):
    """The gateway answered a client request with an error status."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class PollTimeoutError(GatewayError):
    """A generation task did not reach a terminal status within the poll budget."""

    def __init__(self, task_id: str, attempts: int, interval_seconds: float):
        self.task_id = task_id
        self.attempts = attempts
        self.interval_seconds = interval_seconds
        waited = attempts * interval_seconds
        super().__init__(f"Video generation timed out after {waited:g} seconds")
