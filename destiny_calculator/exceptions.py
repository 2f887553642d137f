"""Исключения модуля расчета"""


class InvalidBirthDateError(ValueError):
    """Некорректная дата рождения (несуществующая дата, день вне диапазона и т.п.)"""
