"""
Нумерологический движок.

Предоставляет:
  - редукцию до корневого числа с сохранением мастер-чисел 11, 22, 33
  - бхагьянк (число судьбы) по полной дате
  - муланк (корневое число) по дню рождения
  - число силы (муланк + бхагьянк)
  - сборку полного нумерологического профиля
"""
import logging
from datetime import date
from typing import Iterable, List

from . import interpretations as tables
from .exceptions import InvalidBirthDateError
from .models import (
    DestinyResult,
    NumberMeaning,
    NumerologyProfile,
    PowerNumber,
    RulingPlanet,
)

logger = logging.getLogger(__name__)

MASTER_NUMBERS = tables.MASTER_NUMBERS


def reduce_digits(n: int) -> int:
    """
    Редуцирует число до однозначного, кроме мастер-чисел 11, 22, 33.

    Проверка мастер-числа выполняется перед каждым шагом:
      29 → 11 (стоп), 38 → 11 (стоп), 99 → 18 → 9
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Expected a positive integer, got {n!r}")
    if n < 1:
        raise ValueError(f"Expected a positive integer, got {n}")
    while n > 9 and n not in MASTER_NUMBERS:
        n = sum(int(digit) for digit in str(n))
    return n


def validate_date(year: int, month: int, day: int) -> date:
    """Проверяет, что дата существует в календаре"""
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidBirthDateError(f"Invalid date {year}-{month}-{day}: {e}") from e


def date_digits(year: int, month: int, day: int) -> List[int]:
    """Цифры даты в порядке месяц, день, год без разделителей и ведущих нулей"""
    return [int(ch) for ch in f"{month}{day}{year}"]


def destiny_number(year: int, month: int, day: int) -> int:
    """
    Бхагьянк (число судьбы) по полной дате.

    Пример для 1990-05-07:
      "5" + "7" + "1990" = "571990" → 5+7+1+9+9+0 = 31 → 3+1 = 4
    """
    validate_date(year, month, day)
    return reduce_digits(sum(date_digits(year, month, day)))


def mulank(day: int) -> int:
    """Муланк (корневое число) по дню месяца"""
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 31:
        raise InvalidBirthDateError(f"Day of month must be between 1 and 31, got {day!r}")
    return reduce_digits(day)


def power_number(mulank_number: int, destiny: int) -> int:
    """Число силы: редукция суммы муланка и бхагьянка"""
    return reduce_digits(mulank_number + destiny)


def is_master_number(number: int) -> bool:
    return number in MASTER_NUMBERS


def _unique(items: Iterable[str]) -> List[str]:
    """Убирает дубликаты, сохраняя порядок"""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def personality_overview(mulank_number: int, bhagyank: int, power: int) -> str:
    return tables.PERSONALITY_TEMPLATE.format(
        mulank=tables.MULANK_OVERVIEW.get(mulank_number, tables.DEFAULT_MULANK_OVERVIEW),
        bhagyank=tables.BHAGYANK_OVERVIEW.get(bhagyank, tables.DEFAULT_BHAGYANK_OVERVIEW),
        power=tables.POWER_OVERVIEW.get(power, tables.DEFAULT_POWER_OVERVIEW),
    )


def career_paths(bhagyank: int, mulank_number: int) -> List[str]:
    """Профессии бхагьянка плюс две первые профессии муланка"""
    primary = tables.lookup(tables.CAREER_PATHS, bhagyank, ())
    secondary = tables.lookup(tables.CAREER_PATHS, mulank_number, ())
    return _unique(primary + secondary[:2])


def health_traits(mulank_number: int, bhagyank: int) -> List[str]:
    """Три черты бхагьянка плюс две черты муланка"""
    primary = tables.lookup(tables.HEALTH_TRAITS, bhagyank, ())
    secondary = tables.lookup(tables.HEALTH_TRAITS, mulank_number, ())
    return _unique(primary[:3] + secondary[:2])


def destiny_result(number: int) -> DestinyResult:
    """Краткое толкование числа судьбы"""
    return DestinyResult(
        number=number,
        meaning=tables.lookup(tables.DESTINY_MEANINGS, number, tables.DEFAULT_DESTINY_MEANING),
        traits=tables.lookup(tables.DESTINY_TRAITS, number, tables.DEFAULT_DESTINY_TRAITS),
        is_master_number=is_master_number(number),
    )


def numerology_profile(year: int, month: int, day: int) -> NumerologyProfile:
    """Собирает полный нумерологический профиль по дате рождения"""
    validate_date(year, month, day)
    root = mulank(day)
    bhagyank = destiny_number(year, month, day)
    power = power_number(root, bhagyank)
    logger.debug(f"Профиль {year}-{month:02d}-{day:02d}: муланк={root}, бхагьянк={bhagyank}, сила={power}")

    planet_name, planet_influence = tables.lookup(
        tables.RULING_PLANETS, bhagyank, tables.DEFAULT_RULING_PLANET
    )

    return NumerologyProfile(
        mulank=NumberMeaning(
            number=root,
            meaning=tables.lookup(tables.MULANK_MEANINGS, root, tables.DEFAULT_MEANING),
            traits=tables.lookup(tables.MULANK_TRAITS, root, tables.DEFAULT_TRAITS),
        ),
        bhagyank=NumberMeaning(
            number=bhagyank,
            meaning=tables.lookup(tables.BHAGYANK_MEANINGS, bhagyank, tables.DEFAULT_MEANING),
            traits=tables.lookup(tables.BHAGYANK_TRAITS, bhagyank, tables.DEFAULT_TRAITS),
        ),
        power_number=PowerNumber(
            number=power,
            meaning=tables.lookup(tables.POWER_NUMBER_MEANINGS, power, tables.DEFAULT_POWER_MEANING),
        ),
        ruling_planet=RulingPlanet(name=planet_name, influence=planet_influence),
        compatible_numbers=tables.lookup(tables.COMPATIBLE_NUMBERS, bhagyank, tables.DEFAULT_COMPATIBLE),
        incompatible_numbers=tables.lookup(tables.INCOMPATIBLE_NUMBERS, bhagyank, tables.DEFAULT_INCOMPATIBLE),
        personality_overview=personality_overview(root, bhagyank, power),
        career_paths=career_paths(bhagyank, root),
        relationship_traits=tables.lookup(
            tables.RELATIONSHIP_TRAITS, bhagyank, tables.DEFAULT_RELATIONSHIP_TRAITS
        ),
        financial_traits=tables.lookup(tables.FINANCIAL_TRAITS, bhagyank, tables.DEFAULT_FINANCIAL_TRAITS),
        health_traits=health_traits(root, bhagyank),
        life_challenges=tables.lookup(tables.LIFE_CHALLENGES, bhagyank, tables.DEFAULT_LIFE_CHALLENGES),
        life_lessons=tables.lookup(tables.LIFE_LESSONS, bhagyank, tables.DEFAULT_LIFE_LESSONS),
        lucky_colors=tables.lookup(tables.LUCKY_COLORS, bhagyank, tables.DEFAULT_LUCKY_COLORS),
        lucky_gemstones=tables.lookup(tables.LUCKY_GEMSTONES, bhagyank, tables.DEFAULT_LUCKY_GEMSTONES),
    )
