from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    llm_provider: str = "openai"
    llm_api_key: str = ""
    llm_base_url: str = ""

    ocr_engine: str = "vision"
    pdf_engine: str = "pdfplumber"
    pdf_text_min_chars: int = 40
    ocr_model_name: str = "gpt-4o-mini"
    ocr_timeout_seconds: int = 20

    extraction_model_name: str = "gpt-4o-mini"
    extraction_temperature: float = 0.0
    extraction_timeout_seconds: int = 20

    chat_model_name: str = "gpt-4o-mini"
    chat_temperature: float = 0.2
    chat_timeout_seconds: int = 30

    max_document_bytes: int = 10 * 1024 * 1024
