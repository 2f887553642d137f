from datetime import date

import pytest

from destiny_calculator import BirthData, DestinyCalculator, InvalidBirthDateError
from destiny_calculator.numerology import validate_date


@pytest.fixture
def calculator():
    return DestinyCalculator()


def test_calculate_reading(calculator):
    reading = calculator.calculate_reading(BirthData(birth_date=date(1990, 5, 7), name="Asha"))

    assert reading.birth_data.name == "Asha"
    assert reading.destiny.number == 4
    assert reading.destiny.is_master_number is False
    assert reading.numerology.mulank.number == 7
    assert reading.numerology.bhagyank.number == reading.destiny.number
    assert reading.numerology.power_number.number == 11
    assert reading.astrology.sun_sign.name == "Taurus"
    assert reading.astrology.moon_sign is None


def test_calculate_reading_with_time_and_location(calculator):
    data = BirthData(birth_date=date(1990, 5, 7), birth_time="14:30", birth_location="Delhi")
    reading = calculator.calculate_reading(data)

    assert reading.astrology.moon_sign.name == "Gemini Moon"
    assert reading.astrology.ascendant_sign.name == "Scorpio Ascendant"


def test_calculate_reading_master_destiny(calculator):
    reading = calculator.calculate_reading(BirthData(birth_date=date(2009, 2, 9)))
    assert reading.destiny.number == 22
    assert reading.destiny.is_master_number is True
    assert reading.numerology.ruling_planet.name == "Uranus and Neptune"


def test_calculate_reading_is_deterministic(calculator):
    data = BirthData(birth_date=date(1977, 12, 25), birth_time="06:15", birth_location="Paris")
    assert calculator.calculate_reading(data) == calculator.calculate_reading(data)


def test_reading_serializes(calculator):
    reading = calculator.calculate_reading(BirthData(birth_date=date(2000, 2, 29)))
    dumped = reading.model_dump(mode="json")
    assert dumped["birth_data"]["birth_date"] == "2000-02-29"
    assert dumped["astrology"]["sun_sign"]["name"] == "Pisces"


def test_invalid_birth_date_error_message():
    with pytest.raises(InvalidBirthDateError, match="Invalid date"):
        validate_date(2001, 2, 29)
