"""Калькулятор судьбы: нумерология + астрология"""
import logging

from . import numerology
from .models import BirthData, DestinyReading
from .zodiac import astrological_details

logger = logging.getLogger(__name__)


class DestinyCalculator:
    """Класс для полного расчета по дате рождения"""

    def calculate_reading(self, data: BirthData) -> DestinyReading:
        """Основной метод расчета"""
        birth_date = data.birth_date
        day = birth_date.day
        month = birth_date.month
        year = birth_date.year

        # Число судьбы (все цифры даты)
        destiny = numerology.destiny_number(year, month, day)

        profile = numerology.numerology_profile(year, month, day)
        astrology = astrological_details(birth_date, data.birth_time, data.birth_location)

        logger.info(
            f"Расчет для {birth_date.isoformat()}: судьба={destiny}, "
            f"знак={astrology.sun_sign.name}"
        )

        return DestinyReading(
            birth_data=data,
            destiny=numerology.destiny_result(destiny),
            numerology=profile,
            astrology=astrology,
        )
