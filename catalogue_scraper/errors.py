class ScraperError(Exception):
    """Base exception for all scraper-related errors."""
    pass


class ValidationError(ScraperError):
    """Raised when validation fails (e.g., a negative page count in the config)."""
    pass


class ProviderError(ScraperError):
    """Raised when a requested provider does not exist or cannot be loaded."""
    pass


class FetchError(ScraperError):
    """Base for anything that stops us from getting a response body back."""
    pass


class NetworkError(FetchError):
    """Raised for connectivity and timeout issues when making HTTP requests."""
    pass


class HTTPStatusError(FetchError):
    """Raised when an HTTP request returns an unexpected status code."""

    def __init__(self, status_code: int | None, url: str, message: str | None = None):
        self.status_code = status_code
        self.url = url
        super().__init__(message or f"HTTP error {status_code} for URL: {url}")


class ExtractError(ScraperError):
    """Raised when the HTML we got back is missing the markup we expect."""
    pass
