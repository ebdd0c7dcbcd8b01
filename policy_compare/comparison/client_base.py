from abc import ABC, abstractmethod

from policy_compare.comparison.models import ContentPart


class BaseComparisonClient(ABC):
    """Contract for provider-specific comparison AI clients."""

    @abstractmethod
    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        parts: list[ContentPart],
        json_schema: dict[str, object],
    ) -> str:
        """Return provider response as plain text.

        Raises:
            UnsupportedFormatError: if the provider rejects a content type.
            ComparisonNetworkError: on transport or API failures.
            ExtractionError: if the provider returned no text.
        """
