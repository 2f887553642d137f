import pytest

from destiny_calculator import interpretations as tables
from destiny_calculator import (
    InvalidBirthDateError,
    destiny_number,
    destiny_result,
    mulank,
    numerology_profile,
    power_number,
    reduce_digits,
)
from destiny_calculator.numerology import career_paths, health_traits, personality_overview


def test_reduce_digits_single_digits_unchanged():
    for n in range(1, 10):
        assert reduce_digits(n) == n


@pytest.mark.parametrize("n", [11, 22, 33])
def test_reduce_digits_master_numbers_are_fixed_points(n):
    assert reduce_digits(n) == n


@pytest.mark.parametrize("n, expected", [(29, 11), (38, 11), (99, 9), (31, 4), (15, 6), (1999, 1), (999999, 9)])
def test_reduce_digits_known_values(n, expected):
    assert reduce_digits(n) == expected


def test_reduce_digits_range_and_idempotence():
    for n in list(range(10, 20000)) + [123456, 654321, 999998]:
        result = reduce_digits(n)
        if n not in (11, 22, 33):
            assert result in set(range(1, 10)) | {11, 22, 33}
        assert reduce_digits(result) == result


def test_reduce_digits_checks_master_before_each_step():
    # 49 → 13 → 4, 47 → 11 (стоп)
    assert reduce_digits(49) == 4
    assert reduce_digits(47) == 11


@pytest.mark.parametrize("bad", [0, -5, True, 3.5, "12"])
def test_reduce_digits_rejects_invalid_input(bad):
    with pytest.raises(ValueError):
        reduce_digits(bad)


def test_destiny_number_example_date():
    assert destiny_number(1990, 5, 7) == 4


@pytest.mark.parametrize("year, month, day, expected", [
    (2000, 1, 8, 11),
    (2009, 2, 9, 22),
    (1951, 8, 9, 33),
])
def test_destiny_number_master_numbers(year, month, day, expected):
    assert destiny_number(year, month, day) == expected


def test_destiny_number_is_deterministic():
    assert destiny_number(1985, 12, 31) == destiny_number(1985, 12, 31)


@pytest.mark.parametrize("year, month, day", [(2001, 2, 29), (1990, 4, 31), (1990, 13, 1), (1990, 0, 10)])
def test_destiny_number_rejects_impossible_dates(year, month, day):
    with pytest.raises(InvalidBirthDateError):
        destiny_number(year, month, day)


def test_destiny_number_accepts_leap_day():
    # "2292000" → 15 → 6
    assert destiny_number(2000, 2, 29) == 6


@pytest.mark.parametrize("day, expected", [(1, 1), (9, 9), (10, 1), (22, 22), (29, 11), (31, 4)])
def test_mulank(day, expected):
    assert mulank(day) == expected


@pytest.mark.parametrize("day", [0, 32, -1])
def test_mulank_rejects_out_of_range_day(day):
    with pytest.raises(InvalidBirthDateError):
        mulank(day)


def test_power_number():
    assert power_number(11, 4) == 6
    assert power_number(7, 4) == 11


def test_numerology_profile_for_example_date():
    profile = numerology_profile(1990, 5, 7)

    assert profile.mulank.number == 7
    assert profile.bhagyank.number == 4
    assert profile.power_number.number == 11
    assert profile.mulank.meaning == tables.MULANK_MEANINGS[7]
    assert profile.bhagyank.traits == list(tables.BHAGYANK_TRAITS[4])
    assert profile.power_number.meaning == tables.POWER_NUMBER_MEANINGS[11]
    assert profile.ruling_planet.name == "Uranus"
    assert profile.compatible_numbers == list(tables.COMPATIBLE_NUMBERS[4])
    assert profile.incompatible_numbers == list(tables.INCOMPATIBLE_NUMBERS[4])
    assert profile.financial_traits == list(tables.FINANCIAL_TRAITS[4])
    assert profile.lucky_colors == list(tables.LUCKY_COLORS[4])


def test_numerology_profile_master_mulank():
    profile = numerology_profile(1990, 5, 29)
    assert profile.mulank.number == 11
    assert profile.mulank.meaning.startswith("The Intuitive")


def test_numerology_profile_rejects_invalid_date():
    with pytest.raises(InvalidBirthDateError):
        numerology_profile(2023, 2, 29)


def test_career_paths_combines_bhagyank_and_mulank():
    paths = career_paths(4, 7)
    primary = list(tables.CAREER_PATHS[4])
    assert paths[:len(primary)] == primary
    assert len(paths) == len(set(paths))
    for extra in tables.CAREER_PATHS[7][:2]:
        assert extra in paths


def test_career_paths_without_duplicates_for_same_numbers():
    assert career_paths(3, 3) == list(tables.CAREER_PATHS[3])


def test_health_traits_takes_three_plus_two():
    traits = health_traits(7, 4)
    assert traits[:3] == list(tables.HEALTH_TRAITS[4][:3])
    assert len(traits) <= 5


def test_personality_overview_uses_defaults_for_unknown_numbers():
    text = personality_overview(10, 12, 13)
    assert tables.DEFAULT_MULANK_OVERVIEW in text
    assert tables.DEFAULT_BHAGYANK_OVERVIEW in text
    assert tables.DEFAULT_POWER_OVERVIEW in text


def test_lookup_falls_back_to_default():
    assert tables.lookup(tables.MULANK_MEANINGS, 10, tables.DEFAULT_MEANING) == "Unknown meaning"
    assert tables.lookup(tables.MULANK_TRAITS, 10, tables.DEFAULT_TRAITS) == ["Unknown traits"]
    assert tables.lookup(tables.RULING_PLANETS, 10, tables.DEFAULT_RULING_PLANET)[0] == "Cosmic Forces"
    assert tables.lookup(tables.COMPATIBLE_NUMBERS, 10, tables.DEFAULT_COMPATIBLE) == [1, 3, 9]
    assert tables.lookup(tables.INCOMPATIBLE_NUMBERS, 10, tables.DEFAULT_INCOMPATIBLE) == [4, 8]


def test_lookup_returns_fresh_lists():
    first = tables.lookup(tables.LUCKY_COLORS, 1, tables.DEFAULT_LUCKY_COLORS)
    first.append("Mutated")
    assert "Mutated" not in tables.lookup(tables.LUCKY_COLORS, 1, tables.DEFAULT_LUCKY_COLORS)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        tables.MULANK_MEANINGS[1] = "changed"


def test_destiny_result():
    result = destiny_result(4)
    assert result.number == 4
    assert result.meaning == tables.DESTINY_MEANINGS[4]
    assert result.is_master_number is False

    master = destiny_result(22)
    assert master.is_master_number is True


def test_destiny_result_default():
    result = destiny_result(10)
    assert result.meaning.startswith("This number holds unique spiritual significance")
    assert result.traits == ["Unique", "Spiritual", "Intuitive", "Mystical", "Guided"]
