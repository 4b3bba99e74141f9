"""Custom exceptions for metadata and subtitle provider errors."""


class APIError(Exception):
    """Base class for every provider error."""

    pass


class APIConfigurationError(APIError):
    """Missing or unusable provider configuration (credentials, keys)."""

    def __init__(self, missing=()):
        self.missing = tuple(missing)
        if self.missing:
            message = f"Missing required environment variables: {', '.join(self.missing)}"
        else:
            message = "Invalid provider configuration"
        super().__init__(message)


class APIConnectionError(APIError):
    """Provider unreachable (network failure, timeout, expired deadline)."""

    pass


class APIResponseError(APIError):
    """Malformed response or failure reported by the provider itself."""

    pass
