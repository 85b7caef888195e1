from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_SUMMARY__",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application settings
    app_name: str = Field(default="github-summary", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")

    # Logging settings
    logging_level: str = Field(default="INFO", description="Logging level")
    logging_format: str = Field(
        default=(
            "{time:YYYY-MM-DD HH:mm:ss} | {extra[app]} v{extra[version]} | "
            "{level: <8} | {name}:{function}:{line} - {message} | {extra}"
        ),
        description="Console log format",
    )

    # GitHub API settings
    github_token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("GITHUB_SUMMARY__GITHUB_TOKEN", "GITHUB_TOKEN"),
        description="GitHub Personal Access Token for API authentication",
    )
    github_login: str | None = Field(
        default=None,
        description="Login to summarize; defaults to the owner of the token",
    )
    github_api_url: str = Field(
        default="https://api.github.com/graphql",
        description="GitHub GraphQL API URL",
    )
    github_rest_url: str = Field(
        default="https://api.github.com",
        description="GitHub REST API base URL, used to look up the token owner",
    )
    github_api_version: str = Field(
        default="2022-11-28",
        description="Value of the X-GitHub-Api-Version header",
    )
    user_agent: str = Field(
        default="github-summary",
        description="Client identification sent with every request",
    )
    github_api_timeout: float = Field(
        default=120.0,
        description="GitHub API request timeout in seconds",
    )


def get_settings() -> Settings:
    """Retrieve application settings"""
    return Settings()
