"""Анализ фотографии ладони"""
import asyncio
import hashlib
import io
import logging
from abc import ABC, abstractmethod
from typing import Optional

import aiohttp
from PIL import Image, UnidentifiedImageError
from pydantic import ValidationError

from destiny_calculator.models import PalmAnalysis, PalmFeatures
from destiny_calculator.numerology import MASTER_NUMBERS, reduce_digits

from .config import FINGER_RATIO, HTTP_HEADERS, PALM_CONFIG, PALM_MOUNTS

logger = logging.getLogger(__name__)

# Числа, которые может вернуть успешный анализ
DESTINY_NUMBERS = frozenset(range(1, 10)) | MASTER_NUMBERS


class ImageTooLargeError(ValueError):
    """Изображение превышает допустимое число пикселей"""


def failed_analysis(error: str) -> PalmAnalysis:
    return PalmAnalysis(success=False, destiny_number=0, confidence=0.0, error=error)


class PalmAnalysisProvider(ABC):
    """Базовый анализатор ладони"""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass

    @abstractmethod
    async def analyze(self, image_bytes: bytes, advanced: bool = False) -> PalmAnalysis:
        """Анализирует изображение; ошибки возвращаются как success=False"""


class StubPalmAnalyzer(PalmAnalysisProvider):
    """
    Заглушка анализа ладони.

    Число выводится из SHA-256 нормализованных пикселей, поэтому одно и то же
    изображение всегда дает одинаковый результат. Линии руки не распознаются.
    """

    def normalize_image(self, image_bytes: bytes) -> bytes:
        """Декодирует изображение и приводит к RGB фиксированного размера"""
        img = Image.open(io.BytesIO(image_bytes))
        width, height = img.size
        if width * height > PALM_CONFIG['max_pixels']:
            raise ImageTooLargeError(f"Image size {width}x{height} exceeds the pixel limit")
        # JPEG декодируется сразу в уменьшенном масштабе
        img.draft('RGB', PALM_CONFIG['normalized_size'])
        img = img.convert('RGB')
        img.thumbnail(PALM_CONFIG['normalized_size'], Image.Resampling.LANCZOS)
        return img.tobytes()

    async def analyze(self, image_bytes: bytes, advanced: bool = False) -> PalmAnalysis:
        try:
            pixels = self.normalize_image(image_bytes)
        except (ImageTooLargeError, Image.DecompressionBombError) as e:
            logger.warning(f"Изображение ладони слишком большое: {e}")
            return failed_analysis("Palm image is too large")
        except (UnidentifiedImageError, OSError, ValueError) as e:
            logger.warning(f"Не удалось декодировать изображение ладони: {e}")
            return failed_analysis("Could not decode palm image")

        digest = hashlib.sha256(pixels).digest()
        seed = int.from_bytes(digest[:4], 'big')
        number = reduce_digits(seed % 999999 + 1)

        features = None
        if advanced:
            features = PalmFeatures(
                life_line_length=seed % 10 + 1,
                life_line_clarity=(seed % 10) / 10,
                heart_line_strength=((seed >> 4) % 10) / 10,
                head_line_depth=((seed >> 8) % 10) / 10,
                fate_line_presence=seed % 2 == 0,
                dominant_mount=PALM_MOUNTS[seed % len(PALM_MOUNTS)],
                finger_ratio=list(FINGER_RATIO),
            )

        confidence = PALM_CONFIG['advanced_confidence'] if advanced else PALM_CONFIG['basic_confidence']
        logger.info(f"Анализ ладони: число={number}, расширенный={advanced}")
        return PalmAnalysis(
            success=True,
            destiny_number=number,
            confidence=confidence,
            palm_features=features,
        )


class HttpPalmAnalyzer(PalmAnalysisProvider):
    """Внешний сервис анализа ладони"""

    def __init__(self, url: str, timeout: float = 30):
        self.url = url
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None

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

    async def analyze(self, image_bytes: bytes, advanced: bool = False) -> PalmAnalysis:
        if self.session is None:
            async with self:
                return await self._upload(image_bytes, advanced)
        return await self._upload(image_bytes, advanced)

    async def _upload(self, image_bytes: bytes, advanced: bool) -> PalmAnalysis:
        form = aiohttp.FormData()
        form.add_field(
            PALM_CONFIG['upload_field'],
            image_bytes,
            filename=PALM_CONFIG['upload_filename'],
            content_type='image/jpeg',
        )
        form.add_field('advanced', 'true' if advanced else 'false')

        try:
            async with self.session.post(self.url, data=form) as response:
                if response.status != 200:
                    logger.warning(f"Сервис анализа ладони {self.url} вернул статус {response.status}")
                    return failed_analysis(f"Palm analysis service returned status {response.status}")
                data = await response.json()
                analysis = PalmAnalysis.model_validate(data)
                if analysis.success and analysis.destiny_number not in DESTINY_NUMBERS:
                    raise ValueError(f"unexpected destiny number {analysis.destiny_number}")
                return analysis
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Ошибка при обращении к сервису анализа ладони {self.url}: {e}")
            return failed_analysis("API connection failed")
        except (ValueError, ValidationError) as e:
            logger.error(f"Некорректный ответ сервиса анализа ладони {self.url}: {e}")
            return failed_analysis("Invalid response from palm analysis service")


def get_palm_analyzer(settings) -> PalmAnalysisProvider:
    """Выбирает анализатор по настройкам"""
    if settings.palm_provider == "http":
        if not settings.palm_api_url:
            logger.warning("palm_api_url не задан, используется заглушка")
            return StubPalmAnalyzer()
        return HttpPalmAnalyzer(settings.palm_api_url, timeout=settings.request_timeout)
    return StubPalmAnalyzer()
