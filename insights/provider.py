"""Провайдеры расширенных толкований числа судьбы"""
import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

import aiohttp
from pydantic import ValidationError

from destiny_calculator import interpretations as tables
from destiny_calculator.models import EnhancedDestiny
from destiny_calculator.numerology import destiny_number

from .config import HTTP_HEADERS, INSIGHT_TEMPLATES

logger = logging.getLogger(__name__)


class DestinyInsightProvider(ABC):
    """Базовый провайдер толкований"""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass

    @abstractmethod
    async def get_enhanced_destiny(self, birth_date: date) -> EnhancedDestiny:
        """Возвращает число судьбы с инсайтами и совместимостью"""


class LocalInsightProvider(DestinyInsightProvider):
    """Локальный расчет инсайтов по таблицам"""

    async def get_enhanced_destiny(self, birth_date: date) -> EnhancedDestiny:
        number = destiny_number(birth_date.year, birth_date.month, birth_date.day)
        strength, attunement, planet = (
            tables.INSIGHT_STRENGTHS.get(number),
            tables.INSIGHT_ATTUNEMENTS.get(number),
            tables.INSIGHT_PLANETS.get(number),
        )
        insights = [
            INSIGHT_TEMPLATES[0].format(number=number, strength=strength),
            INSIGHT_TEMPLATES[1].format(attunement=attunement),
            INSIGHT_TEMPLATES[2].format(planet=planet),
        ]
        return EnhancedDestiny(
            destiny_number=number,
            insights=insights,
            compatibility=tables.lookup(
                tables.INSIGHT_COMPATIBILITY, number, tables.DEFAULT_INSIGHT_COMPATIBILITY
            ),
            source="local",
        )


class HttpInsightProvider(DestinyInsightProvider):
    """Внешний сервис толкований с откатом на локальный расчет"""

    def __init__(self, url: str, timeout: float = 30):
        self.url = url
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None
        self.fallback = LocalInsightProvider()

    async def __aenter__(self):
        """Асинхронный контекстный менеджер - вход"""
        self.session = aiohttp.ClientSession(
            headers=HTTP_HEADERS,
            timeout=aiohttp.ClientTimeout(total=self.timeout)
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Асинхронный контекстный менеджер - выход"""
        if self.session:
            await self.session.close()
            self.session = None

    async def get_enhanced_destiny(self, birth_date: date) -> EnhancedDestiny:
        if self.session is None:
            async with self:
                return await self._request(birth_date)
        return await self._request(birth_date)

    async def _request(self, birth_date: date) -> EnhancedDestiny:
        payload = {"birth_date": birth_date.isoformat()}
        try:
            async with self.session.post(self.url, json=payload) as response:
                if response.status == 200:
                    data = await response.json()
                    return EnhancedDestiny(
                        destiny_number=data["destiny_number"],
                        insights=data.get("insights", []),
                        compatibility=data.get("compatibility", []),
                        source="http",
                    )
                logger.warning(f"Сервис толкований {self.url} вернул статус {response.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Ошибка при обращении к сервису толкований {self.url}: {e}")
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            logger.error(f"Некорректный ответ сервиса толкований {self.url}: {e}")

        logger.info("Используем локальный расчет инсайтов")
        return await self.fallback.get_enhanced_destiny(birth_date)


def get_insight_provider(settings) -> DestinyInsightProvider:
    """Выбирает провайдера по настройкам"""
    if settings.insight_provider == "http":
        if not settings.insight_api_url:
            logger.warning("insight_api_url не задан, используется локальный провайдер")
            return LocalInsightProvider()
        return HttpInsightProvider(settings.insight_api_url, timeout=settings.request_timeout)
    return LocalInsightProvider()
