from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Comma-separated context property names copied into every problem body.
    # Example: "traceId,requestId"
    PROBLEM_CONTEXT_PROPERTIES: str = ""

    # Log every outgoing problem (5xx at ERROR, the rest at INFO).
    PROBLEM_LOGGING_ENABLED: bool = True
    # Level of the problem log channel; empty inherits LOG_LEVEL.
    PROBLEM_LOG_LEVEL: str = ""

    @property
    def context_properties_list(self) -> list[str]:
        return [p.strip() for p in self.PROBLEM_CONTEXT_PROPERTIES.split(",") if p.strip()]


settings = Settings()
