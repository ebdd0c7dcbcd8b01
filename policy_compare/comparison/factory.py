from typing import ClassVar

from policy_compare.comparison.example_client_adapter import ExampleClientAdapter
from policy_compare.comparison.openai_client_adapter import OpenAIClientAdapter
from policy_compare.comparison.requester import ComparisonRequester
from policy_compare.config.settings import Settings
from policy_compare.documents.normalizer import DocumentNormalizer
from policy_compare.workbook.factory import WorkbookReaderFactory


class RequesterFactory:
    """Creates the comparison requester for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> ComparisonRequester:
        """Create a configured requester from application settings."""
        normalizer = DocumentNormalizer(WorkbookReaderFactory.create(settings))
        provider = settings.comparison_provider.lower()
        if provider == "example":
            return ComparisonRequester(
                client=ExampleClientAdapter(),
                normalizer=normalizer,
                model="example",
            )
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=cls._resolve_base_url(provider, settings),
        )
        return ComparisonRequester(
            client=client,
            normalizer=normalizer,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.comparison_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.comparison_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "comparison_openai_compatible_base_url is required for "
                    "comparison_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown comparison provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.comparison_openai_api_key,
            "openai_compatible": settings.comparison_openai_compatible_api_key,
            "gemini": settings.comparison_gemini_api_key,
            "openrouter": settings.comparison_openrouter_api_key,
            "ollama": settings.comparison_ollama_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.comparison_openai_model_name,
            "openai_compatible": settings.comparison_openai_compatible_model_name,
            "gemini": settings.comparison_gemini_model_name,
            "openrouter": settings.comparison_openrouter_model_name,
            "ollama": settings.comparison_ollama_model_name,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        key_map = {
            "openai": settings.comparison_openai_timeout_seconds,
            "openai_compatible": settings.comparison_openai_compatible_timeout_seconds,
            "gemini": settings.comparison_gemini_timeout_seconds,
            "openrouter": settings.comparison_openrouter_timeout_seconds,
            "ollama": settings.comparison_ollama_timeout_seconds,
        }
        return key_map.get(provider, 120) or 120
