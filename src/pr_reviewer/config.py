# src/pr_reviewer/config.py
import logging
from pathlib import Path
from typing import Literal

from pydantic import SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pr_reviewer.errors import ConfigurationError
from pr_reviewer.models.config import RepoTarget


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "bitbucket_username",
    "bitbucket_app_password",
    "bitbucket_workspace",
    "bitbucket_repo",
    "pr_number",
    "ai_api_key",
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Bitbucket
    bitbucket_api_url: str = "https://api.bitbucket.org/2.0"
    bitbucket_username: str | None = None
    bitbucket_app_password: SecretStr | None = None
    bitbucket_workspace: str | None = None
    bitbucket_repo: str | None = None

    # Pull request
    pr_number: int | None = None

    # LLM
    ai_provider: str = "http"
    ai_api_key: SecretStr | None = None
    ai_endpoint: str = "https://api.openai.com/v1/chat/completions"
    ai_model: str = "gpt-4"

    # Defaults
    prompt_file_path: str = "./review-prompt.txt"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    def check_required(self) -> None:
        """Raise ConfigurationError listing every missing required variable."""
        missing = [name.upper() for name in REQUIRED_FIELDS if not getattr(self, name)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

    def target(self) -> RepoTarget:
        return RepoTarget(workspace=self.bitbucket_workspace, repo_slug=self.bitbucket_repo)


def load_settings(**overrides) -> Settings:
    """Load settings from env/.env; non-None overrides win over the environment."""
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_rules_guide(path: str | Path) -> str:
    """Read the review rules guide. There is no built-in fallback guide."""
    prompt_path = Path(path).resolve()
    try:
        text = prompt_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Please provide a prompt file: could not read {prompt_path} ({e})"
        ) from e

    if not text.strip():
        raise ConfigurationError(f"Please provide a prompt file: {prompt_path} is empty")

    logger.info(f"Loaded review prompt from {prompt_path}")
    return text
