from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    telegram_bot_token: str
    openai_api_key: str
    openai_model: str
    log_level: str = "INFO"
    rate_limit_calls: int = 3
    rate_limit_window_seconds: float = 60.0
    max_retries: int = 3
    retry_base_delay_seconds: float = 1.0
    max_manual_retries: int = 3
    request_timeout_seconds: float = 90.0

    model_config = SettingsConfigDict(
        env_file='.env',
        case_sensitive=False
    )

    @field_validator('telegram_bot_token')
    @classmethod
    def validate_telegram_token(cls, v):
        if not v or v == 'your_telegram_bot_token_here':
            raise ValueError('TELEGRAM_BOT_TOKEN must be provided')
        return v

    @field_validator('openai_api_key')
    @classmethod
    def validate_openai_key(cls, v):
        if not v or v == 'your_openai_api_key_here':
            raise ValueError('OPENAI_API_KEY must be provided')
        return v

    @field_validator('openai_model')
    @classmethod
    def validate_openai_model(cls, v):
        if not v or not v.strip():
            raise ValueError('OPENAI_MODEL must be provided')
        return v.strip()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if level not in {'DEBUG', 'INFO', 'WARNING', 'WARN', 'ERROR', 'CRITICAL'}:
            raise ValueError(f'LOG_LEVEL must be a logging level name, got {v!r}')
        return level

    @field_validator('rate_limit_calls', 'max_manual_retries')
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError('must be >= 1')
        return v

    @field_validator('max_retries')
    @classmethod
    def validate_max_retries(cls, v):
        if v < 0:
            raise ValueError('MAX_RETRIES must be >= 0')
        return v


def get_settings() -> Settings:
    return Settings()
