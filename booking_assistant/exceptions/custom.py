class UpstreamUnavailableError(Exception):
    kind = "upstream_unavailable"

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MissingFallbackDataError(Exception):
    kind = "missing_fallback_data"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ModelUnavailableError(Exception):
    kind = "model_unavailable"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnsupportedToolError(Exception):
    kind = "unsupported_tool"

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        self.message = f"Unsupported tool requested by model: {tool_name}"
        super().__init__(self.message)


class EmptyMessageError(Exception):
    kind = "validation_error"

    def __init__(self, message: str = "Message is required"):
        self.message = message
        super().__init__(message)
