# branding_studio_bot/data/settings.py
from pydantic import BaseModel, Field, SecretStr, AnyHttpUrl, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotConfig(BaseModel):
    token: SecretStr
    admin_id: int | None = None
    max_updates_in_queue: int = 100
    support_email: str = "support@example.com"

    @computed_field
    @property
    def id(self) -> int:
        return int(self.token.get_secret_value().split(":")[0])


class WebhookConfig(BaseModel):
    address: AnyHttpUrl
    secret_token: SecretStr
    listening_host: str = "0.0.0.0"
    listening_port: int = 8080


class GeminiConfig(BaseModel):
    """
    Image model settings.

    Either ``api_key`` (Gemini Developer API) or the three Vertex AI fields
    must be set when ``client`` is ``google``.
    """
    client: str = "google"
    model: str = "gemini-2.5-flash-image"
    api_key: SecretStr | None = None
    project_id: str | None = None
    location: str = "global"
    service_account_creds_json: SecretStr | None = None
    temperature: float | None = None


class ImageConfig(BaseModel):
    jpeg_quality: int = Field(default=95, ge=1, le=100)
    # Telegram Bot API refuses to serve files above 20 MB
    max_upload_bytes: int = 20 * 1024 * 1024


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    bot: BotConfig
    webhook: WebhookConfig | None = None
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    image: ImageConfig = Field(default_factory=ImageConfig)

    logging_level: int = 20


settings = Settings()
