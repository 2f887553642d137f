"""Константы провайдеров толкований и анализа ладони"""
from typing import Dict, List, Tuple

# Заголовки HTTP-запросов к внешним сервисам
HTTP_HEADERS: Dict[str, str] = {
    'User-Agent': 'destiny-scanner/1.0',
    'Accept': 'application/json',
}

# Шаблоны трех инсайтов по числу судьбы
INSIGHT_TEMPLATES: List[str] = [
    "Your destiny number {number} shows a particular strength in {strength}",
    "You're particularly attuned to {attunement}",
    "Planetary influence: {planet}",
]

# Настройки анализа ладони
PALM_CONFIG = {
    'basic_confidence': 0.78,
    'advanced_confidence': 0.92,
    # Изображение приводится к этому размеру перед хешированием
    'normalized_size': (256, 256),
    # Ограничение на число пикселей до декодирования
    'max_pixels': 50_000_000,
    'upload_field': 'image',
    'upload_filename': 'palm.jpg',
}

PALM_MOUNTS: Tuple[str, ...] = ("Venus", "Jupiter", "Saturn", "Apollo", "Mercury")

FINGER_RATIO: Tuple[float, ...] = (1.0, 1.1, 0.9, 0.95)
