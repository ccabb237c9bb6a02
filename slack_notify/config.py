from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Incoming webhook mode
    SLACK_WEBHOOK_URL: str = ""

    # Bot token mode
    SLACK_TOKEN: str = ""
    SLACK_CHANNEL: str = ""
    SLACK_API_URL: str = "https://slack.com/api/chat.postMessage"

    # Shared HTTP client
    SLACK_HTTP_TIMEOUT: float = 300  # 5 minutes


settings = Settings()
