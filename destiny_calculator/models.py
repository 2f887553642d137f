"""Модели данных для расчета судьбы"""
import re
from datetime import date
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import InvalidBirthDateError

TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


class BirthData(BaseModel):
    """Входные данные для расчета"""
    model_config = ConfigDict(frozen=True)

    birth_date: date
    birth_time: Optional[str] = None  # 'HH:MM', 24 часа
    birth_location: Optional[str] = None
    name: Optional[str] = None

    @field_validator('birth_date')
    @classmethod
    def check_not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise InvalidBirthDateError("Birth date cannot be in the future")
        return value

    @field_validator('birth_time', 'birth_location', 'name', mode='before')
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value

    @field_validator('birth_time')
    @classmethod
    def check_time(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        match = TIME_PATTERN.match(value)
        if not match:
            raise ValueError("Birth time must be in HH:MM format")
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > 23 or minute > 59:
            raise ValueError("Birth time must be a valid 24-hour time")
        return f"{hour:02d}:{minute:02d}"


class NumberMeaning(BaseModel):
    """Число с толкованием и чертами"""
    number: int
    meaning: str
    traits: List[str]


class PowerNumber(BaseModel):
    number: int
    meaning: str


class RulingPlanet(BaseModel):
    name: str
    influence: str


class NumerologyProfile(BaseModel):
    """Полный нумерологический профиль"""
    # Ключевые числа
    mulank: NumberMeaning      # Корневое число (день рождения)
    bhagyank: NumberMeaning    # Число судьбы (вся дата)
    power_number: PowerNumber  # Сумма муланка и бхагьянка

    ruling_planet: RulingPlanet
    compatible_numbers: List[int]
    incompatible_numbers: List[int]
    personality_overview: str

    # Производные списки
    career_paths: List[str]
    relationship_traits: List[str]
    financial_traits: List[str]
    health_traits: List[str]
    life_challenges: List[str]
    life_lessons: List[str]
    lucky_colors: List[str]
    lucky_gemstones: List[str]


class ZodiacSign(BaseModel):
    """Знак зодиака"""
    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    symbol: str
    date_range: str
    start: Tuple[int, int]  # (месяц, день), включительно
    end: Tuple[int, int]    # (месяц, день), включительно
    element: str
    element_description: str
    quality: str
    ruling_planet: str
    lucky_colors: List[str]
    lucky_gemstones: List[str]
    lucky_numbers: List[int]
    traits: List[str]
    weaknesses: List[str]
    challenges: str
    life_path_focus: str

    def contains(self, month: int, day: int) -> bool:
        """Попадает ли (месяц, день) в диапазон знака"""
        point = (month, day)
        if self.start <= self.end:
            return self.start <= point <= self.end
        # Диапазон через конец года (Козерог)
        return point >= self.start or point <= self.end


class ElementInfluence(BaseModel):
    primary_element: str
    element_description: str
    element_traits: List[str]


class PlanetaryInfluence(BaseModel):
    dominant_planet: str
    planet_description: str
    planetary_traits: List[str]


class SignInfluence(BaseModel):
    """Приближенный знак Луны или асцендента"""
    name: str
    influence: str


class AstrologicalDetails(BaseModel):
    sun_sign: ZodiacSign
    moon_sign: Optional[SignInfluence] = None
    ascendant_sign: Optional[SignInfluence] = None
    element_influence: ElementInfluence
    planetary_influence: PlanetaryInfluence


class DestinyResult(BaseModel):
    """Краткий результат: число судьбы"""
    number: int
    meaning: str
    traits: List[str]
    is_master_number: bool


class DestinyReading(BaseModel):
    """Результат полного расчета"""
    birth_data: BirthData
    destiny: DestinyResult
    numerology: NumerologyProfile
    astrology: AstrologicalDetails


class EnhancedDestiny(BaseModel):
    """Расширенные данные от провайдера"""
    destiny_number: int
    insights: List[str]
    compatibility: List[int]
    source: str = "local"


class PalmFeatures(BaseModel):
    # Непрозрачные значения, без семантики
    life_line_length: Optional[int] = None
    life_line_clarity: Optional[float] = None
    heart_line_strength: Optional[float] = None
    head_line_depth: Optional[float] = None
    fate_line_presence: Optional[bool] = None
    dominant_mount: Optional[str] = None
    finger_ratio: Optional[List[float]] = None


class PalmAnalysis(BaseModel):
    success: bool
    destiny_number: int
    confidence: float
    palm_features: Optional[PalmFeatures] = None
    error: Optional[str] = None
