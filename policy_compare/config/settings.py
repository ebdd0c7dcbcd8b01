from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_files: int = 6
    min_files: int = 2

    workbook_engine: str = "pandas"

    comparison_provider: str = "gemini"
    comparison_temperature: float = 0.0

    comparison_gemini_api_key: str = ""
    comparison_gemini_model_name: str = "gemini-2.5-flash"
    comparison_gemini_timeout_seconds: int = 120

    comparison_openai_api_key: str = ""
    comparison_openai_model_name: str = "gpt-4o-mini"
    comparison_openai_timeout_seconds: int = 120

    comparison_openrouter_api_key: str = ""
    comparison_openrouter_model_name: str = ""
    comparison_openrouter_timeout_seconds: int = 120

    comparison_ollama_api_key: str = ""
    comparison_ollama_model_name: str = ""
    comparison_ollama_timeout_seconds: int = 120

    comparison_openai_compatible_api_key: str = ""
    comparison_openai_compatible_model_name: str = ""
    comparison_openai_compatible_base_url: str = ""
    comparison_openai_compatible_timeout_seconds: int = 120
