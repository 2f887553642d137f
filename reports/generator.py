"""Генератор текстовых и визуальных отчетов"""
from typing import Dict, List, Optional
from PIL import Image, ImageDraw, ImageFont
import io
import os
import logging

from destiny_calculator.models import DestinyReading, EnhancedDestiny
from destiny_calculator.numerology import is_master_number
from insights import DestinyInsightProvider, LocalInsightProvider

logger = logging.getLogger(__name__)

SEPARATOR = "━" * 40

FONT_PATHS = [
    "/System/Library/Fonts/Helvetica.ttc",  # macOS
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux
    "C:/Windows/Fonts/arial.ttf",  # Windows
]


def load_font(size: int):
    """Ищет системный TrueType-шрифт, иначе встроенный"""
    for path in FONT_PATHS:
        if os.path.exists(path):
            try:
                return ImageFont.truetype(path, size)
            except OSError:
                continue
    return ImageFont.load_default()


class ReportGenerator:
    """Генератор текстовых и визуальных отчетов"""

    def __init__(self, insight_provider: Optional[DestinyInsightProvider] = None):
        self.insight_provider = insight_provider or LocalInsightProvider()

    def _bullets(self, items: List[str]) -> str:
        return "\n".join(f"• {item}" for item in items)

    def generate_text_report(self, reading: DestinyReading,
                             enhanced: Optional[EnhancedDestiny] = None) -> str:
        """Генерирует текстовый отчет"""
        data = reading.birth_data
        profile = reading.numerology
        astrology = reading.astrology
        sun = astrology.sun_sign

        client = f"👤 NAME: {data.name}\n" if data.name else ""
        birth_time = f"🕐 BIRTH TIME: {data.birth_time}\n" if data.birth_time else ""
        location = f"📍 BIRTH PLACE: {data.birth_location}\n" if data.birth_location else ""
        master = " (master number)" if reading.destiny.is_master_number else ""

        report = f"""
╔════════════════════════════════════════╗
║        DESTINY SCANNER REPORT          ║
╚════════════════════════════════════════╝

{client}📅 BIRTH DATE: {data.birth_date.strftime('%d.%m.%Y')}
{birth_time}{location}
{SEPARATOR}

🔢 KEY NUMBERS:

• Mulank (root number): {profile.mulank.number}
  {profile.mulank.meaning}

• Bhagyank (destiny number): {profile.bhagyank.number}{master}
  {profile.bhagyank.meaning}

• Power number: {profile.power_number.number}
  {profile.power_number.meaning}

{SEPARATOR}

🪐 RULING PLANET: {profile.ruling_planet.name}
{profile.ruling_planet.influence}

🤝 COMPATIBLE NUMBERS: {', '.join(map(str, profile.compatible_numbers))}
⚠️ CHALLENGING NUMBERS: {', '.join(map(str, profile.incompatible_numbers))}

{SEPARATOR}

📖 PERSONALITY:

{profile.personality_overview}

💼 CAREER PATHS:
{self._bullets(profile.career_paths)}

❤️ RELATIONSHIPS:
{self._bullets(profile.relationship_traits)}

💰 FINANCES:
{self._bullets(profile.financial_traits)}

🌿 HEALTH:
{self._bullets(profile.health_traits)}

🧗 LIFE CHALLENGES:
{self._bullets(profile.life_challenges)}

🎓 LIFE LESSONS:
{self._bullets(profile.life_lessons)}

🎨 LUCKY COLORS: {', '.join(profile.lucky_colors)}
💎 LUCKY GEMSTONES: {', '.join(profile.lucky_gemstones)}

{SEPARATOR}

{sun.symbol} ZODIAC: {sun.name}, {sun.title} ({sun.date_range})

• Element: {sun.element} ({sun.element_description})
• Quality: {sun.quality}
• Ruling planet: {sun.ruling_planet}
• Strengths: {', '.join(sun.traits)}
• Weaknesses: {', '.join(sun.weaknesses)}
• Lucky numbers: {', '.join(map(str, sun.lucky_numbers))}

Challenges: {sun.challenges}
Life path focus: {sun.life_path_focus}

{astrology.element_influence.primary_element} influence: {astrology.element_influence.element_description}
{astrology.planetary_influence.dominant_planet} influence: {astrology.planetary_influence.planet_description}
"""

        if astrology.moon_sign or astrology.ascendant_sign:
            report += f"\n{SEPARATOR}\n"
            report += "🌙 APPROXIMATE SIGNS:\n\n"
            if astrology.moon_sign:
                report += f"• {astrology.moon_sign.name}: {astrology.moon_sign.influence}\n"
            if astrology.ascendant_sign:
                report += f"• {astrology.ascendant_sign.name}: {astrology.ascendant_sign.influence}\n"

        if enhanced and enhanced.insights:
            report += f"\n{SEPARATOR}\n"
            report += "✨ INSIGHTS:\n\n"
            report += self._bullets(enhanced.insights) + "\n"
            if enhanced.compatibility:
                report += f"\nHarmonious numbers: {', '.join(map(str, enhanced.compatibility))}\n"

        report += f"\n{SEPARATOR}\n"
        report += "✨ Report generated automatically\n"

        return report

    async def generate_enhanced_report(self, reading: DestinyReading) -> Dict[str, object]:
        """Генерирует отчет с инсайтами провайдера"""
        enhanced = None
        try:
            async with self.insight_provider as provider:
                enhanced = await provider.get_enhanced_destiny(reading.birth_data.birth_date)
        except Exception as e:
            logger.error(f"Ошибка при получении инсайтов: {e}")

        return {
            'text_report': self.generate_text_report(reading, enhanced),
            'visual_card': self.generate_visual_card(reading),
            'insights': enhanced.insights if enhanced else [],
            'enhanced': enhanced,
        }

    def generate_visual_card(self, reading: DestinyReading) -> bytes:
        """Генерирует карточку с тремя ключевыми числами и знаком зодиака"""
        profile = reading.numerology
        cells = [
            ("Mulank", profile.mulank.number),
            ("Bhagyank", profile.bhagyank.number),
            ("Power", profile.power_number.number),
        ]

        cell_size = 200
        width = cell_size * len(cells)
        grid_height = cell_size
        footer_height = 80
        border_width = 3

        border_color = (0, 0, 0)
        master_color = (255, 215, 0)  # Золотой для мастер-чисел

        img = Image.new('RGB', (width, grid_height + footer_height), color='white')
        draw = ImageDraw.Draw(img)

        number_font = load_font(60)
        label_font = load_font(20)

        # Сетка
        for i in range(len(cells) + 1):
            x = min(i * cell_size, width - border_width)
            draw.rectangle([x, 0, x + border_width, grid_height], fill=border_color)
        for y in (0, grid_height - border_width):
            draw.rectangle([0, y, width, y + border_width], fill=border_color)

        for col, (label, number) in enumerate(cells):
            left = col * cell_size

            if is_master_number(number):
                margin = 10
                draw.rectangle(
                    [left + margin, margin, left + cell_size - margin, grid_height - margin],
                    fill=master_color, outline=border_color, width=2
                )

            text = str(number)
            bbox = draw.textbbox((0, 0), text, font=number_font)
            text_width = bbox[2] - bbox[0]
            text_height = bbox[3] - bbox[1]
            draw.text(
                (left + (cell_size - text_width) // 2, (grid_height - text_height) // 2 - 15),
                text,
                fill=(0, 0, 0),
                font=number_font
            )

            bbox = draw.textbbox((0, 0), label, font=label_font)
            draw.text(
                (left + (cell_size - (bbox[2] - bbox[0])) // 2, grid_height - 45),
                label,
                fill=(60, 60, 60),
                font=label_font
            )

        # Подпись со знаком зодиака
        sun = reading.astrology.sun_sign
        zodiac_text = f"{sun.name} - {sun.element} - {sun.date_range}"
        bbox = draw.textbbox((0, 0), zodiac_text, font=label_font)
        draw.text(
            ((width - (bbox[2] - bbox[0])) // 2, grid_height + 25),
            zodiac_text,
            fill=(0, 0, 0),
            font=label_font
        )

        img_bytes = io.BytesIO()
        img.save(img_bytes, format='PNG')
        img_bytes.seek(0)

        return img_bytes.getvalue()
