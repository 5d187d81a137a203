class FlowError(Exception):
    """Base error for the generation flow. Carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NarrativeValidationError(FlowError):
    status_code = 400


class MissingAPIKeyError(FlowError):
    def __init__(self, message: str = "Missing OPENAI_API_KEY"):
        super().__init__(message)


class UpstreamError(FlowError):
    """The chat-completions API answered with a non-success status."""

    def __init__(self, upstream_status: int, body: str):
        super().__init__(f"OpenAI error ({upstream_status}): {body}")
        self.upstream_status = upstream_status
        self.body = body


class InvalidModelOutputError(FlowError):
    """The model answered, but not with something we can render."""
