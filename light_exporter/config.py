from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_TARGET = "http://127.0.0.1:12380/cgi-bin/index.cgi?p=dataget"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LIGHT_EXPORTER_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    app_name: str = "light-exporter"
    log_level: str = "INFO"

    # upstream controller API (WTY2001 dataget endpoint)
    target: str = DEFAULT_TARGET

    # when non-empty, the upstream response is read from this file instead
    mock: str = ""

    @property
    def uses_mock(self) -> bool:
        return bool(self.mock)


settings = Settings()
