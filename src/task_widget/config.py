"""Configuration for TaskWidget."""

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

ACTIVE_SCOPE = "active"
UPCOMING_SCOPE = "upcoming"


class WidgetConfig(BaseSettings):
    """Application configuration.

    Values come from init kwargs, TASK_WIDGET_* environment variables,
    a .env file and finally an optional task_widget.yaml file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TASK_WIDGET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        yaml_file="task_widget.yaml",
    )

    base_url: str
    auth_token: str = Field(default="")
    show_active_tasks: bool = Field(default=True)
    show_upcoming_tasks: bool = Field(default=True)
    max_tasks_to_show: int = Field(default=5, ge=0)
    request_timeout: float = Field(default=10.0, gt=0)
    widget_width: int = Field(default=44, ge=20)
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Add the YAML file as the lowest-priority source."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    def enabled_scopes(self) -> list[str]:
        """Scopes to fetch, in merge order (active before upcoming)."""
        scopes: list[str] = []
        if self.show_active_tasks:
            scopes.append(ACTIVE_SCOPE)
        if self.show_upcoming_tasks:
            scopes.append(UPCOMING_SCOPE)
        return scopes
