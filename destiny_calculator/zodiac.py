"""
Зодиакальный классификатор и астрологические детали.

Солнечный знак определяется по (месяц, день) через 12 включительных
диапазонов. Знак Луны и асцендент: упрощенные приближения по времени
и месту рождения, без эфемерид.
"""
import calendar
import logging
from datetime import date
from types import MappingProxyType
from typing import Optional, Tuple

from .exceptions import InvalidBirthDateError
from .models import (
    AstrologicalDetails,
    ElementInfluence,
    PlanetaryInfluence,
    SignInfluence,
    ZodiacSign,
)

logger = logging.getLogger(__name__)

# Високосный год, чтобы 29 февраля было допустимо
_REFERENCE_YEAR = 2000

# Порядок проверки: Овен … Водолей, Рыбы последними
ZODIAC_SIGNS: Tuple[ZodiacSign, ...] = (
    ZodiacSign(
        name="Aries", title="The Ram", symbol="♈", date_range="March 21 - April 19",
        start=(3, 21), end=(4, 19),
        element="Fire", element_description="Passionate, dynamic, and temperamental",
        quality="Cardinal", ruling_planet="Mars",
        lucky_colors=["Red", "Orange", "Yellow"],
        lucky_gemstones=["Diamond", "Ruby", "Jasper"],
        lucky_numbers=[1, 9, 27],
        traits=["Courageous", "Determined", "Confident", "Enthusiastic", "Optimistic", "Honest", "Passionate"],
        weaknesses=["Impatient", "Moody", "Short-tempered", "Impulsive", "Aggressive"],
        challenges="Impatience and impulsiveness. Take time to consider consequences before acting.",
        life_path_focus="Self-discovery and pioneering new paths. Your natural leadership should be channeled constructively.",
    ),
    ZodiacSign(
        name="Taurus", title="The Bull", symbol="♉", date_range="April 20 - May 20",
        start=(4, 20), end=(5, 20),
        element="Earth", element_description="Practical, grounded, and reliable",
        quality="Fixed", ruling_planet="Venus",
        lucky_colors=["Green", "Pink", "Blue"],
        lucky_gemstones=["Emerald", "Rose Quartz", "Sapphire"],
        lucky_numbers=[2, 6, 24],
        traits=["Reliable", "Patient", "Practical", "Devoted", "Responsible", "Stable", "Grounded"],
        weaknesses=["Stubborn", "Possessive", "Uncompromising", "Materialistic", "Resistant to change"],
        challenges="Resistance to change and stubbornness. Practice flexibility and openness to new ideas.",
        life_path_focus="Building security and creating lasting value. Your persistence will help you create enduring foundations.",
    ),
    ZodiacSign(
        name="Gemini", title="The Twins", symbol="♊", date_range="May 21 - June 20",
        start=(5, 21), end=(6, 20),
        element="Air", element_description="Intellectual, communicative, and adaptable",
        quality="Mutable", ruling_planet="Mercury",
        lucky_colors=["Yellow", "Light Blue", "Silver"],
        lucky_gemstones=["Agate", "Chrysoprase", "Citrine"],
        lucky_numbers=[3, 5, 14],
        traits=["Gentle", "Affectionate", "Curious", "Adaptable", "Quick-witted", "Versatile", "Communicative"],
        weaknesses=["Nervous", "Inconsistent", "Indecisive", "Superficial", "Scattered"],
        challenges="Inconsistency and nervousness. Focus on following through with projects and grounding your energy.",
        life_path_focus="Communication and versatility. Your ability to connect with others helps bridge different worlds.",
    ),
    ZodiacSign(
        name="Cancer", title="The Crab", symbol="♋", date_range="June 21 - July 22",
        start=(6, 21), end=(7, 22),
        element="Water", element_description="Emotional, intuitive, and deeply feeling",
        quality="Cardinal", ruling_planet="Moon",
        lucky_colors=["White", "Silver", "Light Blue"],
        lucky_gemstones=["Pearl", "Moonstone", "Opal"],
        lucky_numbers=[2, 7, 16],
        traits=["Tenacious", "Highly Imaginative", "Loyal", "Emotional", "Sympathetic", "Nurturing", "Protective"],
        weaknesses=["Moody", "Pessimistic", "Suspicious", "Manipulative", "Insecure"],
        challenges="Moodiness and clinging to the past. Practice emotional release and moving forward.",
        life_path_focus="Emotional security and nurturing others. Your intuition helps you support those around you.",
    ),
    ZodiacSign(
        name="Leo", title="The Lion", symbol="♌", date_range="July 23 - August 22",
        start=(7, 23), end=(8, 22),
        element="Fire", element_description="Passionate, creative, and generous",
        quality="Fixed", ruling_planet="Sun",
        lucky_colors=["Gold", "Orange", "Red"],
        lucky_gemstones=["Ruby", "Amber", "Tiger's Eye"],
        lucky_numbers=[1, 4, 19],
        traits=["Creative", "Passionate", "Generous", "Warm-hearted", "Cheerful", "Humorous", "Loyal"],
        weaknesses=["Arrogant", "Stubborn", "Self-centered", "Inflexible", "Domineering"],
        challenges="Arrogance and inflexibility. Balance confidence with humility and consideration of others.",
        life_path_focus="Self-expression and leadership. Your charisma naturally draws others to your light.",
    ),
    ZodiacSign(
        name="Virgo", title="The Maiden", symbol="♍", date_range="August 23 - September 22",
        start=(8, 23), end=(9, 22),
        element="Earth", element_description="Analytical, practical, and attentive to detail",
        quality="Mutable", ruling_planet="Mercury",
        lucky_colors=["Green", "Brown", "Navy Blue"],
        lucky_gemstones=["Peridot", "Jade", "Amazonite"],
        lucky_numbers=[3, 6, 12],
        traits=["Loyal", "Analytical", "Kind", "Hardworking", "Practical", "Detail-oriented", "Methodical"],
        weaknesses=["Overly Critical", "Perfectionist", "Shy", "Worrisome", "Overly Conservative"],
        challenges="Perfectionism and overcritical thinking. Embrace imperfection and be gentle with yourself.",
        life_path_focus="Service and improvement. Your attention to detail helps you refine and perfect systems.",
    ),
    ZodiacSign(
        name="Libra", title="The Scales", symbol="♎", date_range="September 23 - October 22",
        start=(9, 23), end=(10, 22),
        element="Air", element_description="Diplomatic, fair-minded, and social",
        quality="Cardinal", ruling_planet="Venus",
        lucky_colors=["Pink", "Light Blue", "White"],
        lucky_gemstones=["Sapphire", "Opal", "Rose Quartz"],
        lucky_numbers=[4, 6, 15],
        traits=["Diplomatic", "Fair-minded", "Social", "Cooperative", "Gracious", "Peace-loving", "Harmonious"],
        weaknesses=["Indecisive", "Avoids Confrontations", "Carries Grudges", "Self-pitying", "People-pleasing"],
        challenges="Indecisiveness and avoidance of conflict. Practice making decisions and addressing issues directly.",
        life_path_focus="Harmony and relationships. Your diplomatic nature helps create balance and fairness.",
    ),
    ZodiacSign(
        name="Scorpio", title="The Scorpion", symbol="♏", date_range="October 23 - November 21",
        start=(10, 23), end=(11, 21),
        element="Water", element_description="Passionate, resourceful, and mysterious",
        quality="Fixed", ruling_planet="Pluto, Mars",
        lucky_colors=["Deep Red", "Maroon", "Black"],
        lucky_gemstones=["Topaz", "Obsidian", "Garnet"],
        lucky_numbers=[8, 11, 22],
        traits=["Resourceful", "Passionate", "Intuitive", "Determined", "Magnetic", "Investigative", "Powerful"],
        weaknesses=["Jealous", "Secretive", "Resentful", "Manipulative", "Distrusting"],
        challenges="Jealousy and secretiveness. Practice trust and emotional transparency.",
        life_path_focus="Transformation and depth. Your intensity helps you uncover hidden truths and facilitate change.",
    ),
    ZodiacSign(
        name="Sagittarius", title="The Archer", symbol="♐", date_range="November 22 - December 21",
        start=(11, 22), end=(12, 21),
        element="Fire", element_description="Adventurous, optimistic, and freedom-loving",
        quality="Mutable", ruling_planet="Jupiter",
        lucky_colors=["Blue", "Purple", "Indigo"],
        lucky_gemstones=["Turquoise", "Amethyst", "Sapphire"],
        lucky_numbers=[3, 9, 21],
        traits=["Generous", "Idealistic", "Philosophical", "Optimistic", "Enthusiastic", "Honest", "Adventurous"],
        weaknesses=["Restless", "Impatient", "Careless", "Tactless", "Over-confident"],
        challenges="Restlessness and tactlessness. Practice focus and diplomatic communication.",
        life_path_focus="Exploration and expansion. Your philosophical nature leads you to seek higher meaning.",
    ),
    ZodiacSign(
        name="Capricorn", title="The Goat", symbol="♑", date_range="December 22 - January 19",
        start=(12, 22), end=(1, 19),
        element="Earth", element_description="Disciplined, responsible, and practical",
        quality="Cardinal", ruling_planet="Saturn",
        lucky_colors=["Brown", "Gray", "Dark Green"],
        lucky_gemstones=["Garnet", "Onyx", "Lapis Lazuli"],
        lucky_numbers=[4, 8, 17],
        traits=["Responsible", "Disciplined", "Self-controlled", "Persistent", "Cautious", "Practical", "Ambitious"],
        weaknesses=["Pessimistic", "Stubborn", "Detached", "Workaholic", "Unforgiving"],
        challenges="Pessimism and rigidity. Balance work with play and embrace flexibility.",
        life_path_focus="Achievement and mastery. Your determination helps you climb to great heights.",
    ),
    ZodiacSign(
        name="Aquarius", title="The Water Bearer", symbol="♒", date_range="January 20 - February 18",
        start=(1, 20), end=(2, 18),
        element="Air", element_description="Progressive, original, and independent",
        quality="Fixed", ruling_planet="Uranus, Saturn",
        lucky_colors=["Electric Blue", "Turquoise", "Silver"],
        lucky_gemstones=["Amethyst", "Aquamarine", "Labradorite"],
        lucky_numbers=[4, 7, 11],
        traits=["Progressive", "Original", "Independent", "Humanitarian", "Inventive", "Logical", "Visionary"],
        weaknesses=["Emotionally Detached", "Stubborn", "Aloof", "Unpredictable", "Extremist"],
        challenges="Emotional detachment and stubbornness. Connect with your feelings and remain open to others' views.",
        life_path_focus="Innovation and community. Your visionary thinking helps create positive social change.",
    ),
    ZodiacSign(
        name="Pisces", title="The Fish", symbol="♓", date_range="February 19 - March 20",
        start=(2, 19), end=(3, 20),
        element="Water", element_description="Compassionate, artistic, and deeply intuitive",
        quality="Mutable", ruling_planet="Neptune, Jupiter",
        lucky_colors=["Sea Green", "Indigo", "Purple"],
        lucky_gemstones=["Aquamarine", "Amethyst", "Moonstone"],
        lucky_numbers=[3, 7, 12],
        traits=["Compassionate", "Artistic", "Intuitive", "Gentle", "Wise", "Musical", "Empathetic"],
        weaknesses=["Escapist", "Idealistic", "Oversensitive", "Indecisive", "Easily Influenced"],
        challenges="Escapism and victim mentality. Ground yourself in reality and take responsibility for your path.",
        life_path_focus="Spiritual connection and creative expression. Your sensitivity helps you tap into universal energies.",
    ),
)

ELEMENT_INFLUENCES = MappingProxyType({
    "Fire": ("Dynamic, passionate, and energetic in nature",
             ("Enthusiastic", "Action-oriented", "Impulsive", "Creative", "Inspiring")),
    "Earth": ("Grounded, practical, and stabilizing in nature",
              ("Reliable", "Pragmatic", "Patient", "Materialistic", "Secure")),
    "Air": ("Intellectual, communicative, and social in nature",
            ("Analytical", "Communicative", "Social", "Conceptual", "Objective")),
    "Water": ("Emotional, intuitive, and deeply feeling in nature",
              ("Empathetic", "Intuitive", "Emotional", "Nurturing", "Sensitive")),
})
DEFAULT_ELEMENT_INFLUENCE = ("Balanced", "Harmonious blend of elemental influences",
                             ("Adaptable", "Balanced", "Versatile", "Harmonious", "Moderate"))

PLANETARY_INFLUENCES = MappingProxyType({
    "Sun": ("The life force, vitality, and core identity",
            ("Confident", "Proud", "Creative", "Authoritative", "Generous")),
    "Moon": ("The emotional nature, instincts, and subconscious",
             ("Intuitive", "Nurturing", "Moody", "Protective", "Sensitive")),
    "Mercury": ("The mind, communication, and intellectual abilities",
                ("Intelligent", "Communicative", "Analytical", "Curious", "Adaptable")),
    "Venus": ("Love, beauty, pleasure, and attraction",
              ("Affectionate", "Artistic", "Diplomatic", "Sensual", "Charming")),
    "Mars": ("Energy, passion, drive, and determination",
             ("Assertive", "Courageous", "Energetic", "Competitive", "Bold")),
    "Jupiter": ("Expansion, growth, wisdom, and abundance",
                ("Optimistic", "Generous", "Philosophical", "Enthusiastic", "Lucky")),
    "Saturn": ("Discipline, responsibility, restrictions, and lessons",
               ("Disciplined", "Responsible", "Patient", "Ambitious", "Persistent")),
    "Uranus": ("Innovation, rebellion, originality, and change",
               ("Original", "Independent", "Inventive", "Progressive", "Unconventional")),
    "Neptune": ("Spirituality, dreams, illusions, and transcendence",
                ("Imaginative", "Spiritual", "Compassionate", "Dreamy", "Idealistic")),
    "Pluto": ("Transformation, power, regeneration, and rebirth",
              ("Transformative", "Intense", "Powerful", "Secretive", "Perceptive")),
})
DEFAULT_PLANETARY_INFLUENCE = ("Cosmic Forces", "Multiple celestial influences at work",
                               ("Balanced", "Cosmic", "Multifaceted", "Universal", "Harmonious"))

MOON_SIGNS = (
    ("Aries Moon", "Emotional impulsivity, quick reactions, independent feelings"),
    ("Taurus Moon", "Emotional stability, sensual nature, comfort-seeking"),
    ("Gemini Moon", "Emotional adaptability, intellectual approach to feelings, communicative"),
    ("Cancer Moon", "Deeply emotional, nurturing, protective, moody"),
    ("Leo Moon", "Emotionally expressive, proud, dramatic, generous"),
    ("Virgo Moon", "Emotionally analytical, perfectionist, practical approach to feelings"),
    ("Libra Moon", "Emotionally balanced, partnership-oriented, diplomatic"),
    ("Scorpio Moon", "Intense emotions, deeply passionate, private, resilient"),
    ("Sagittarius Moon", "Emotionally optimistic, freedom-loving, philosophical"),
    ("Capricorn Moon", "Emotionally reserved, disciplined feelings, responsible"),
    ("Aquarius Moon", "Emotionally detached, humanitarian, innovative emotional responses"),
    ("Pisces Moon", "Emotionally sensitive, compassionate, intuitive, dreamy"),
)

ASCENDANT_SIGNS = (
    ("Aries Ascendant", "Direct approach to life, assertive demeanor, pioneering"),
    ("Taurus Ascendant", "Steady approach to life, reliable appearance, practical"),
    ("Gemini Ascendant", "Communicative demeanor, curious approach, youthful energy"),
    ("Cancer Ascendant", "Nurturing presence, protective shell, emotional approach"),
    ("Leo Ascendant", "Charismatic presence, confident demeanor, expressive"),
    ("Virgo Ascendant", "Analytical approach, detail-oriented, service-focused"),
    ("Libra Ascendant", "Diplomatic demeanor, beauty-focused, partnership-oriented"),
    ("Scorpio Ascendant", "Mysterious presence, intense approach, transformative"),
    ("Sagittarius Ascendant", "Optimistic demeanor, philosophical approach, freedom-loving"),
    ("Capricorn Ascendant", "Reserved presence, ambitious approach, responsible"),
    ("Aquarius Ascendant", "Unique demeanor, humanitarian approach, intellectual"),
    ("Pisces Ascendant", "Mystical presence, dreamy approach, compassionate"),
)


def validate_month_day(month: int, day: int) -> None:
    """Проверяет (месяц, день) без привязки к году; 29 февраля допустимо"""
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidBirthDateError(f"Month must be between 1 and 12, got {month!r}")
    days_in_month = calendar.monthrange(_REFERENCE_YEAR, month)[1]
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= days_in_month:
        raise InvalidBirthDateError(
            f"Day must be between 1 and {days_in_month} for month {month}, got {day!r}"
        )


def zodiac_sign(month: int, day: int) -> ZodiacSign:
    """Знак зодиака по месяцу и дню"""
    validate_month_day(month, day)
    for sign in ZODIAC_SIGNS:
        if sign.contains(month, day):
            return sign
    # Диапазоны покрывают весь год, сюда попасть нельзя
    raise AssertionError(f"No zodiac sign covers {month}-{day}")


def element_influence(element: str) -> ElementInfluence:
    if element in ELEMENT_INFLUENCES:
        primary = element
        description, traits = ELEMENT_INFLUENCES[element]
    else:
        primary, description, traits = DEFAULT_ELEMENT_INFLUENCE
    return ElementInfluence(
        primary_element=primary,
        element_description=description,
        element_traits=list(traits),
    )


def planetary_influence(ruling_planet: str) -> PlanetaryInfluence:
    """Влияние планеты; для составных ("Pluto, Mars") берется первая"""
    primary = ruling_planet.split(',')[0].strip()
    if primary in PLANETARY_INFLUENCES:
        description, traits = PLANETARY_INFLUENCES[primary]
    else:
        primary, description, traits = DEFAULT_PLANETARY_INFLUENCE
    return PlanetaryInfluence(
        dominant_planet=primary,
        planet_description=description,
        planetary_traits=list(traits),
    )


def approximate_moon_sign(birth_date: date, hour: int) -> SignInfluence:
    """Упрощенное приближение знака Луны (без эфемерид)"""
    name, influence = MOON_SIGNS[(birth_date.day + birth_date.month + hour) % 12]
    return SignInfluence(name=name, influence=influence)


def approximate_ascendant_sign(birth_date: date, hour: int, location: str) -> SignInfluence:
    """Упрощенное приближение асцендента; место учитывается только длиной строки"""
    index = (birth_date.day + birth_date.month + hour + len(location)) % 12
    name, influence = ASCENDANT_SIGNS[index]
    return SignInfluence(name=name, influence=influence)


def astrological_details(birth_date: date, birth_time: Optional[str] = None,
                         birth_location: Optional[str] = None) -> AstrologicalDetails:
    """Астрологические детали по дате, времени (HH:MM) и месту рождения"""
    sun_sign = zodiac_sign(birth_date.month, birth_date.day)
    birth_hour = int(birth_time.split(":")[0]) if birth_time else None

    moon_sign = None
    ascendant_sign = None
    if birth_hour is not None:
        moon_sign = approximate_moon_sign(birth_date, birth_hour)
        if birth_location:
            ascendant_sign = approximate_ascendant_sign(birth_date, birth_hour, birth_location)

    return AstrologicalDetails(
        sun_sign=sun_sign,
        moon_sign=moon_sign,
        ascendant_sign=ascendant_sign,
        element_influence=element_influence(sun_sign.element),
        planetary_influence=planetary_influence(sun_sign.ruling_planet),
    )
