class ComparisonError(Exception):
    """Raised when a comparison request fails."""


class ExtractionError(ComparisonError):
    """Raised when the model returns no text or text that is not a valid result."""


class UnsupportedFormatError(ComparisonError):
    """Raised when the AI provider rejects the content type of an uploaded file."""

    DEFAULT_MESSAGE = (
        "Desteklenmeyen dosya formatı. "
        "Lütfen PDF veya Excel dosyası yüklediğinizden emin olun."
    )

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)


class ComparisonNetworkError(ComparisonError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
