"""Application settings and configuration."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # AI CONFIG
    ai_enabled: bool = Field(
        default=False,
        description="Try the AI provider before the local generator",
        validation_alias="AI_ENABLED",
    )

    llm_provider: Literal["anthropic", "bedrock"] = Field(
        default="anthropic",
        description="Which LangChain chat model backs the AI provider",
        validation_alias="LLM_PROVIDER",
    )

    anthropic_api_key: str | None = Field(
        default=None,
        description="Anthropic API key",
        validation_alias="ANTHROPIC_API_KEY",
    )

    aws_api_key_id: str | None = Field(
        default=None,
        description="AWS API key ID",
        validation_alias="AWS_ACCESS_KEY_ID",
    )
    aws_api_key_secret: str | None = Field(
        default=None,
        description="AWS API key",
        validation_alias="AWS_SECRET_ACCESS_KEY",
    )
    aws_default_region: str | None = Field(
        default=None,
        description="AWS API region",
        validation_alias="AWS_DEFAULT_REGION",
    )

    # Model Configuration
    model_name: str = Field(
        default="claude-3-5-haiku-latest",
        description="Model to use (Anthropic model name or AWS Bedrock model ID)",
        validation_alias="MODEL_NAME",
    )

    ai_temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Temperature for question generation",
        validation_alias="AI_TEMPERATURE",
    )

    ai_timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="Seconds to wait for one AI request",
        validation_alias="AI_TIMEOUT_SECONDS",
    )

    # verbal prompts carry vocabulary lists and take longer
    ai_verbal_timeout_seconds: float = Field(
        default=45.0,
        gt=0.0,
        description="Seconds to wait for one verbal AI request",
        validation_alias="AI_VERBAL_TIMEOUT_SECONDS",
    )

    # Quiz Settings
    total_questions: int = Field(
        default=50,
        ge=1,
        le=200,
        description="Questions per quiz session",
        validation_alias="TOTAL_QUESTIONS",
    )

    exam_time_limit: int = Field(
        default=900,
        ge=60,
        description="Exam mode time limit in seconds",
        validation_alias="EXAM_TIME_LIMIT",
    )

    # Storage / Output Settings
    history_path: str = Field(
        default=".prepquiz/history.json",
        description="JSON file holding completed quiz sessions",
        validation_alias="HISTORY_PATH",
    )

    default_output_path: str = Field(
        default="worksheet",
        description="Default output file path",
        validation_alias="DEFAULT_OUTPUT",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level",
        validation_alias="LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_ai_configured(self) -> bool:
        """True when the selected provider has credentials."""
        if self.llm_provider == "bedrock":
            return bool(
                self.aws_api_key_id
                and self.aws_api_key_secret
                and self.aws_default_region
            )
        return bool(self.anthropic_api_key)


# This is loaded the first time and then cached for further use
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
