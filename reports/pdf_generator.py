"""PDF-версия прочтения судьбы"""
from io import BytesIO
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from destiny_calculator.models import DestinyReading
from destiny_calculator.numerology import is_master_number

INK = colors.HexColor('#2E1A47')
ACCENT = colors.HexColor('#5B3A8C')
MASTER_GOLD = colors.HexColor('#F39C12')
ROW_SHADE = colors.HexColor('#F3EEF9')

# имя стиля -> (родитель, параметры)
PARAGRAPH_STYLES = {
    'ReadingTitle': ('Heading1', dict(fontSize=22, textColor=INK, spaceAfter=24, alignment=TA_CENTER)),
    'SectionHeading': ('Heading2', dict(fontSize=14, textColor=ACCENT, spaceBefore=10, spaceAfter=8)),
    'ReadingBody': ('Normal', dict(fontSize=10.5, leading=14, textColor=INK, alignment=TA_JUSTIFY, spaceAfter=5)),
}

# Шапка таблицы: первая строка на цветном фоне
HEADER_ROW = [
    ('BACKGROUND', (0, 0), (-1, 0), ACCENT),
    ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
    ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
    ('FONTSIZE', (0, 0), (-1, 0), 11),
    ('BOTTOMPADDING', (0, 0), (-1, 0), 8),
    ('GRID', (0, 0), (-1, -1), 0.5, INK),
]


class PDFGenerator:
    """Собирает PDF из DestinyReading"""

    def __init__(self):
        self.styles = getSampleStyleSheet()
        for name, (parent, params) in PARAGRAPH_STYLES.items():
            self.styles.add(ParagraphStyle(name=name, parent=self.styles[parent], **params))

    def _para(self, text: str, style: str = 'ReadingBody') -> Paragraph:
        return Paragraph(text, self.styles[style])

    def _list_section(self, story: List, title: str, items: List[str]):
        story.append(self._para(title, 'SectionHeading'))
        story.extend(self._para(f"• {escape(item)}") for item in items)

    def _numbers_table(self, reading: DestinyReading) -> Table:
        profile = reading.numerology
        numbers = [profile.mulank.number, profile.bhagyank.number, profile.power_number.number]
        style = HEADER_ROW + [
            ('ALIGN', (0, 0), (-1, -1), 'CENTER'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('FONTNAME', (0, 1), (-1, 1), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 1), (-1, 1), 20),
            ('TOPPADDING', (0, 1), (-1, 1), 10),
            ('BOTTOMPADDING', (0, 1), (-1, 1), 10),
        ]
        for col, number in enumerate(numbers):
            if is_master_number(number):
                style += [('BACKGROUND', (col, 1), (col, 1), MASTER_GOLD),
                          ('TEXTCOLOR', (col, 1), (col, 1), colors.white)]

        table = Table([['Mulank', 'Bhagyank', 'Power'], [str(n) for n in numbers]],
                      colWidths=[60*mm] * 3)
        table.setStyle(TableStyle(style))
        return table

    def _details_table(self, reading: DestinyReading) -> Table:
        profile = reading.numerology
        rows = [
            ['Parameter', 'Value'],
            ['Compatible numbers', ', '.join(map(str, profile.compatible_numbers))],
            ['Challenging numbers', ', '.join(map(str, profile.incompatible_numbers))],
            ['Lucky colors', ', '.join(profile.lucky_colors)],
            ['Lucky gemstones', ', '.join(profile.lucky_gemstones)],
        ]
        table = Table(rows, colWidths=[70*mm, 110*mm])
        table.setStyle(TableStyle(HEADER_ROW + [
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, ROW_SHADE]),
        ]))
        return table

    def generate_pdf(self, reading: DestinyReading) -> bytes:
        """Генерирует PDF отчет"""
        data = reading.birth_data
        profile = reading.numerology
        astrology = reading.astrology
        sun = astrology.sun_sign

        story = [self._para("DESTINY SCANNER REPORT", 'ReadingTitle')]

        # Данные рождения
        lines = []
        if data.name:
            lines.append(f"<b>Name:</b> {escape(data.name)}")
        lines.append(f"<b>Birth date:</b> {data.birth_date.strftime('%d.%m.%Y')}")
        if data.birth_time:
            lines.append(f"<b>Birth time:</b> {data.birth_time}")
        if data.birth_location:
            lines.append(f"<b>Birth place:</b> {escape(data.birth_location)}")
        story += [self._para("<br/>".join(lines)), Spacer(1, 8*mm)]

        story += [self._para("KEY NUMBERS", 'SectionHeading'), self._numbers_table(reading), Spacer(1, 5*mm)]
        for title, item in (("Mulank", profile.mulank), ("Bhagyank", profile.bhagyank),
                            ("Power", profile.power_number)):
            story.append(self._para(f"<b>{title} {item.number}:</b> {escape(item.meaning)}"))
        story.append(self._para(
            f"<b>Ruling planet:</b> {escape(profile.ruling_planet.name)}. "
            f"{escape(profile.ruling_planet.influence)}"
        ))

        story += [
            self._para("PERSONALITY", 'SectionHeading'),
            self._para(escape(profile.personality_overview)),
            Spacer(1, 4*mm),
            self._details_table(reading),
        ]

        self._list_section(story, "CAREER PATHS", profile.career_paths)
        self._list_section(story, "RELATIONSHIPS", profile.relationship_traits)
        self._list_section(story, "FINANCES", profile.financial_traits)
        self._list_section(story, "HEALTH", profile.health_traits)
        self._list_section(story, "LIFE CHALLENGES", profile.life_challenges)
        self._list_section(story, "LIFE LESSONS", profile.life_lessons)

        # Зодиак
        story.append(self._para(f"ZODIAC: {sun.name.upper()}", 'SectionHeading'))
        story.append(self._para("<br/>".join([
            f"<b>{sun.title}</b> ({sun.date_range})",
            f"<b>Element:</b> {sun.element}, {escape(sun.element_description)}",
            f"<b>Quality:</b> {sun.quality}",
            f"<b>Ruling planet:</b> {sun.ruling_planet}",
            f"<b>Strengths:</b> {escape(', '.join(sun.traits))}",
            f"<b>Weaknesses:</b> {escape(', '.join(sun.weaknesses))}",
            f"<b>Lucky numbers:</b> {', '.join(map(str, sun.lucky_numbers))}",
        ])))
        story.append(self._para(f"<b>Challenges:</b> {escape(sun.challenges)}"))
        story.append(self._para(f"<b>Life path focus:</b> {escape(sun.life_path_focus)}"))

        approximate = [sign for sign in (astrology.moon_sign, astrology.ascendant_sign) if sign]
        if approximate:
            story.append(self._para("APPROXIMATE SIGNS", 'SectionHeading'))
            for sign in approximate:
                story.append(self._para(f"<b>{sign.name}:</b> {escape(sign.influence)}"))

        story += [Spacer(1, 15*mm), Paragraph("<i>Report generated automatically</i>", self.styles['Italic'])]

        buffer = BytesIO()
        SimpleDocTemplate(buffer, pagesize=A4, title="Destiny reading").build(story)
        return buffer.getvalue()


def generate_pdf_report(reading: DestinyReading) -> bytes:
    """PDF одним вызовом"""
    return PDFGenerator().generate_pdf(reading)
