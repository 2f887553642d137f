"""Модуль расчета чисел судьбы и знака зодиака"""
from .calculator import DestinyCalculator
from .exceptions import InvalidBirthDateError
from .models import (
    AstrologicalDetails,
    BirthData,
    DestinyReading,
    DestinyResult,
    EnhancedDestiny,
    NumerologyProfile,
    PalmAnalysis,
    PalmFeatures,
    ZodiacSign,
)
from .numerology import (
    destiny_number,
    destiny_result,
    is_master_number,
    mulank,
    numerology_profile,
    power_number,
    reduce_digits,
)
from .zodiac import astrological_details, zodiac_sign

__all__ = [
    'DestinyCalculator',
    'InvalidBirthDateError',
    'AstrologicalDetails',
    'BirthData',
    'DestinyReading',
    'DestinyResult',
    'EnhancedDestiny',
    'NumerologyProfile',
    'PalmAnalysis',
    'PalmFeatures',
    'ZodiacSign',
    'astrological_details',
    'destiny_number',
    'destiny_result',
    'is_master_number',
    'mulank',
    'numerology_profile',
    'power_number',
    'reduce_digits',
    'zodiac_sign',
]
