"""Конфигурация приложения"""
from pydantic_settings import BaseSettings
from typing import Literal, Optional


class Settings(BaseSettings):
    """Настройки приложения"""

    # Telegram (нужен только боту)
    telegram_bot_token: Optional[str] = None

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Провайдер расширенных толкований
    insight_provider: Literal["local", "http"] = "local"
    insight_api_url: Optional[str] = None

    # Анализ ладони
    palm_provider: Literal["stub", "http"] = "stub"
    palm_api_url: Optional[str] = None

    # Таймаут внешних запросов, секунды
    request_timeout: float = 30

    # Минимальный год рождения для бота
    min_birth_year: int = 1900

    # Максимальный размер загружаемого изображения, байты
    max_upload_size: int = 10 * 1024 * 1024

    class Config:
        env_file = ".env"
        case_sensitive = False
        # Игнорируем неизвестные поля из окружения
        extra = "ignore"


settings = Settings()
