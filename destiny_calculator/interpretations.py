"""Справочные таблицы толкований чисел

Все таблицы ключуются замкнутым множеством {1..9, 11, 22, 33} и доступны
только для чтения. Для каждой таблицы задано значение по умолчанию.
"""
from types import MappingProxyType
from typing import Mapping

MASTER_NUMBERS = frozenset({11, 22, 33})


def _freeze(table: dict) -> Mapping:
    """Делает таблицу неизменяемой"""
    return MappingProxyType({
        key: tuple(value) if isinstance(value, list) else value
        for key, value in table.items()
    })


# ── Муланк (день рождения) ──────────────────────────────────────────────────

MULANK_MEANINGS = _freeze({
    1: "The Leader - Independent, assertive, and pioneering. You have natural leadership abilities and innovative ideas.",
    2: "The Mediator - Diplomatic, cooperative, and sensitive. You excel in partnerships and creating harmony.",
    3: "The Communicator - Expressive, creative, and social. You have natural charisma and artistic abilities.",
    4: "The Builder - Practical, disciplined, and hardworking. You create solid foundations in all areas of life.",
    5: "The Freedom Seeker - Adaptable, adventurous, and versatile. You embrace change and new experiences.",
    6: "The Nurturer - Responsible, caring, and harmonious. You have a deep sense of duty to others.",
    7: "The Seeker - Analytical, spiritual, and introspective. You search for deeper meaning and truth.",
    8: "The Achiever - Ambitious, authoritative, and goal-oriented. You have natural business acumen.",
    9: "The Humanitarian - Compassionate, selfless, and idealistic. You have a universal perspective on life.",
    11: "The Intuitive - Highly intuitive, spiritual, and inspired. You have unique insights and visionary abilities.",
    22: "The Master Builder - Practical visionary, powerful, and capable of manifesting grand ideas into reality.",
    33: "The Master Teacher - Highly compassionate, nurturing, and spiritual. You have a profound ability to uplift others.",
})

MULANK_TRAITS = _freeze({
    1: ["Original", "Independent", "Creative", "Self-reliant", "Determined"],
    2: ["Cooperative", "Sensitive", "Diplomatic", "Supportive", "Intuitive"],
    3: ["Creative", "Expressive", "Enthusiastic", "Social", "Optimistic"],
    4: ["Practical", "Organized", "Reliable", "Hard-working", "Systematic"],
    5: ["Versatile", "Freedom-loving", "Adventurous", "Adaptable", "Progressive"],
    6: ["Responsible", "Caring", "Balanced", "Supportive", "Loving"],
    7: ["Analytical", "Introspective", "Spiritual", "Perfectionist", "Studious"],
    8: ["Ambitious", "Authoritative", "Goal-oriented", "Practical", "Efficient"],
    9: ["Compassionate", "Idealistic", "Generous", "Universal", "Artistic"],
    11: ["Intuitive", "Inspired", "Idealistic", "Sensitive", "Visionary"],
    22: ["Practical visionary", "Powerful", "Ambitious", "Disciplined", "Influential"],
    33: ["Altruistic", "Spiritual", "Compassionate", "Nurturing", "Inspirational"],
})

# ── Бхагьянк (вся дата) ─────────────────────────────────────────────────────

BHAGYANK_MEANINGS = _freeze({
    1: "The Pioneer - Your destiny is to lead, innovate, and forge new paths. Independence and originality are your strengths.",
    2: "The Diplomat - Your destiny is to create harmony, foster cooperation, and build meaningful partnerships.",
    3: "The Creator - Your destiny is to express yourself creatively, inspire others, and bring joy to the world.",
    4: "The Builder - Your destiny is to create lasting structures, establish order, and provide stability for others.",
    5: "The Freedom Seeker - Your destiny is to experience life fully, embrace change, and inspire freedom in others.",
    6: "The Nurturer - Your destiny is to care for others, create harmony in your community, and foster responsibility.",
    7: "The Mystic - Your destiny is to seek truth, develop wisdom, and understand life's deeper mysteries.",
    8: "The Empowered - Your destiny is to achieve material and spiritual abundance, and to use power wisely.",
    9: "The Humanitarian - Your destiny is to serve humanity, offer compassion, and embody universal love.",
    11: "The Illuminator - Your destiny is to inspire spiritual awareness, share intuitive insights, and illuminate paths for others.",
    22: "The Master Builder - Your destiny is to transform dreams into reality on a large scale, benefiting many people.",
    33: "The Master Teacher - Your destiny is to uplift humanity through compassionate service and spiritual guidance.",
})

BHAGYANK_TRAITS = _freeze({
    1: ["Leadership", "Innovation", "Independence", "Determination", "Pioneering"],
    2: ["Diplomacy", "Cooperation", "Patience", "Sensitivity", "Balance"],
    3: ["Creative expression", "Communication", "Joy", "Inspiration", "Sociability"],
    4: ["Stability", "Organization", "Reliability", "Practicality", "Endurance"],
    5: ["Freedom", "Adaptability", "Versatility", "Adventure", "Experience"],
    6: ["Responsibility", "Love", "Service", "Harmony", "Compassion"],
    7: ["Analysis", "Understanding", "Spirituality", "Wisdom", "Introspection"],
    8: ["Achievement", "Abundance", "Authority", "Management", "Manifestation"],
    9: ["Compassion", "Universality", "Selflessness", "Completion", "Philanthropy"],
    11: ["Inspiration", "Illumination", "Intuition", "Idealism", "Spirituality"],
    22: ["Manifestation", "Practicality", "Vision", "Leadership", "Empowerment"],
    33: ["Compassion", "Healing", "Teaching", "Nurturing", "Enlightenment"],
})

DEFAULT_MEANING = "Unknown meaning"
DEFAULT_TRAITS = ("Unknown traits",)

# ── Число силы ──────────────────────────────────────────────────────────────

POWER_NUMBER_MEANINGS = _freeze({
    1: "Your power lies in leadership and innovation. You have the ability to pioneer new paths and inspire others to follow.",
    2: "Your power lies in diplomacy and intuition. You excel at bringing harmony to situations and sensing subtle energies.",
    3: "Your power lies in creative expression and communication. You can inspire others through your words and artistic talents.",
    4: "Your power lies in building and organizing. You excel at creating structures and systems that stand the test of time.",
    5: "Your power lies in adaptability and experiencing life fully. You bring progressive energy and excitement to any situation.",
    6: "Your power lies in nurturing and responsibility. You excel at caring for others and creating harmonious environments.",
    7: "Your power lies in analysis and spiritual insight. You can see beneath the surface and understand deeper truths.",
    8: "Your power lies in manifestation and achievement. You have the ability to create abundance in the material world.",
    9: "Your power lies in compassion and universal understanding. You can connect with diverse people and serve humanity.",
    11: "Your power lies in spiritual insight and inspiration. You can access higher knowledge and illuminate paths for others.",
    22: "Your power lies in making dreams reality on a large scale. You can manifest great works that benefit many people.",
    33: "Your power lies in spiritual teaching and healing. You can uplift others through compassionate service and wisdom.",
})
DEFAULT_POWER_MEANING = "Your power combines multiple cosmic influences, creating a unique energy signature."

# ── Управляющая планета (по бхагьянку) ──────────────────────────────────────

RULING_PLANETS = _freeze({
    1: ("Sun", "The Sun brings leadership qualities, vitality, and a strong sense of self. It illuminates your path with clarity and purpose."),
    2: ("Moon", "The Moon brings emotional sensitivity, intuition, and nurturing qualities. It connects you to your inner world and subconscious."),
    3: ("Jupiter", "Jupiter brings expansion, optimism, and wisdom. It blesses you with growth opportunities and a philosophical outlook."),
    4: ("Uranus", "Uranus brings innovation, originality, and revolutionary thinking. It helps you break free from limitations and embrace new ideas."),
    5: ("Mercury", "Mercury brings communication skills, versatility, and intelligence. It gives you adaptability and quick thinking."),
    6: ("Venus", "Venus brings harmony, beauty, and love. It enhances your relationships and appreciation for the arts and pleasures of life."),
    7: ("Neptune", "Neptune brings spirituality, imagination, and intuition. It connects you to mystical realms and creative inspiration."),
    8: ("Saturn", "Saturn brings discipline, responsibility, and achievement. It helps you build lasting structures and reach ambitious goals."),
    9: ("Mars", "Mars brings energy, courage, and determination. It empowers you to take action and overcome challenges with force of will."),
    11: ("Sun and Moon", "The combined influence of Sun and Moon brings illuminated intuition, balancing conscious and subconscious, light and shadow."),
    22: ("Uranus and Neptune", "The combined influence of Uranus and Neptune brings practical mysticism, allowing you to manifest spiritual visions in reality."),
    33: ("Jupiter and Venus", "The combined influence of Jupiter and Venus brings expansive love, allowing you to nurture and teach with compassion and wisdom."),
})
DEFAULT_RULING_PLANET = (
    "Cosmic Forces",
    "Multiple celestial influences work together in your chart, creating a unique cosmic signature.",
)

# ── Совместимость (по бхагьянку) ────────────────────────────────────────────

COMPATIBLE_NUMBERS = _freeze({
    1: [3, 5, 9],
    2: [4, 6, 8],
    3: [1, 5, 9],
    4: [2, 7, 8],
    5: [1, 3, 7],
    6: [2, 8, 9],
    7: [4, 5, 9],
    8: [2, 4, 6],
    9: [1, 3, 6, 7],
    11: [2, 4, 11, 22],
    22: [4, 11, 22, 33],
    33: [6, 9, 22, 33],
})
INCOMPATIBLE_NUMBERS = _freeze({
    1: [4, 8],
    2: [1, 7],
    3: [2, 8],
    4: [1, 9],
    5: [6, 8],
    6: [3, 5],
    7: [2, 6],
    8: [1, 3],
    9: [4, 5],
    11: [3, 7],
    22: [1, 9],
    33: [5, 8],
})
DEFAULT_COMPATIBLE = (1, 3, 9)
DEFAULT_INCOMPATIBLE = (4, 8)

# ── Фрагменты обзора личности ───────────────────────────────────────────────

MULANK_OVERVIEW = _freeze({
    1: "independent and innovative",
    2: "diplomatic and intuitive",
    3: "creative and expressive",
    4: "practical and organized",
    5: "adventurous and freedom-loving",
    6: "responsible and nurturing",
    7: "analytical and spiritual",
    8: "ambitious and authoritative",
    9: "compassionate and idealistic",
    11: "intuitive and inspired",
    22: "visionary and masterful",
    33: "compassionate and enlightened",
})
BHAGYANK_OVERVIEW = _freeze({
    1: "leadership and pioneering new paths",
    2: "cooperation and peacemaking",
    3: "self-expression and inspiring joy",
    4: "building solid foundations",
    5: "embracing change and adventure",
    6: "nurturing others and creating harmony",
    7: "seeking knowledge and spiritual truth",
    8: "achieving material success and authority",
    9: "serving humanity with compassion",
    11: "inspiring others with spiritual insights",
    22: "building large-scale, beneficial projects",
    33: "uplifting humanity through teaching and healing",
})
POWER_OVERVIEW = _freeze({
    1: "your leadership abilities",
    2: "your diplomatic skills",
    3: "your creative expression",
    4: "your organizational talents",
    5: "your adaptability",
    6: "your nurturing nature",
    7: "your analytical mind",
    8: "your manifestation power",
    9: "your humanitarian perspective",
    11: "your intuitive insights",
    22: "your masterful building skills",
    33: "your enlightened teaching",
})
DEFAULT_MULANK_OVERVIEW = "multifaceted"
DEFAULT_BHAGYANK_OVERVIEW = "unique cosmic purposes"
DEFAULT_POWER_OVERVIEW = "your unique combination of cosmic energies"

PERSONALITY_TEMPLATE = (
    "Your personality combines being {mulank} with a life path focused on {bhagyank}. "
    "Your greatest potential emerges through {power}, which gives you a distinct advantage "
    "in life's journey. You naturally gravitate toward situations where you can express "
    "your authentic nature and fulfill your cosmic blueprint."
)

# ── Карьера ─────────────────────────────────────────────────────────────────

CAREER_PATHS = _freeze({
    1: ["Entrepreneur", "Executive", "Leader", "Inventor", "Independent Consultant"],
    2: ["Mediator", "Diplomat", "Counselor", "Partner in Business", "Team Coordinator"],
    3: ["Artist", "Writer", "Speaker", "Entertainer", "Creative Director"],
    4: ["Manager", "Accountant", "Engineer", "Builder", "Systems Analyst"],
    5: ["Traveler", "Marketer", "Journalist", "Sales Representative", "Freedom-Based Entrepreneur"],
    6: ["Teacher", "Counselor", "Healthcare Provider", "Community Organizer", "Designer"],
    7: ["Researcher", "Scientist", "Analyst", "Spiritual Teacher", "Investigator"],
    8: ["Financial Advisor", "Executive", "Manager", "Real Estate Developer", "Business Owner"],
    9: ["Humanitarian", "Social Worker", "Artist", "Healer", "International Relations"],
    11: ["Spiritual Guide", "Inspirational Speaker", "Counselor", "Visionary Leader", "Intuitive Healer"],
    22: ["Architect", "City Planner", "Business Magnate", "Organizational Leader", "Foundation Director"],
    33: ["Spiritual Teacher", "Healer", "Philanthropist", "Community Leader", "Educational Innovator"],
})

# ── Отношения ───────────────────────────────────────────────────────────────

RELATIONSHIP_TRAITS = _freeze({
    1: ["Independent in relationships", "Needs a partner who respects your space", "Loyal but requires freedom", "Direct and honest communication", "May struggle with compromise"],
    2: ["Naturally partnership-oriented", "Diplomatic and sensitive to others", "Seeks harmony in relationships", "Intuitive about partner's needs", "Avoids conflict, may hold back feelings"],
    3: ["Charming and expressive in love", "Needs intellectual stimulation", "Communicates feelings openly", "Keeps relationships fun and light", "May be scattered in attention"],
    4: ["Loyal and stable partner", "Traditional approach to relationships", "Builds relationships slowly but solidly", "Reliable and trustworthy", "May be rigid in expectations"],
    5: ["Needs freedom in relationships", "Exciting and adventurous partner", "Resists being controlled", "Adaptable to changes", "May struggle with long-term commitment"],
    6: ["Deeply responsible in relationships", "Nurturing and supportive", "Creates harmony at home", "Committed to working things out", "May be overly self-sacrificing"],
    7: ["Selective in choosing partners", "Needs intellectual connection", "Values depth over surface attraction", "Appreciates spiritual connection", "May be emotionally reserved"],
    8: ["Power and security in relationships", "Protective of partner", "Generous but expects appreciation", "Goal-oriented approach to love", "May be controlling at times"],
    9: ["Universal love perspective", "Compassionate and forgiving", "Idealistic in relationships", "Seeks depth and meaning", "May prioritize others over relationship"],
    11: ["Seeks spiritual connection", "Intuitive about relationship dynamics", "Idealistic expectations", "Needs space for spiritual growth", "May be overly sensitive"],
    22: ["Builds long-lasting relationships", "Practical approach to relationship challenges", "Creates secure foundation", "Visionary about family future", "May be workaholic"],
    33: ["Deeply compassionate partner", "Nurturing without conditions", "Teaching and guiding energy", "Selfless in giving love", "May neglect own needs for partner"],
})
DEFAULT_RELATIONSHIP_TRAITS = (
    "Unique approach to relationships",
    "Balance of independence and togetherness",
    "Values authentic connection",
    "Intuitive about others' needs",
    "Evolving relationship style",
)

# ── Финансы (по бхагьянку) ──────────────────────────────────────────────────

FINANCIAL_TRAITS = _freeze({
    1: ["Natural ability to generate income", "Independent financial style", "Innovative money approaches", "May take financial risks", "Should focus on building sustainable wealth"],
    2: ["Collaborative approach to finances", "Best financial success through partnerships", "Intuitive about timing in investments", "Careful money manager", "Should balance giving and receiving"],
    3: ["Creative approach to money", "Income often from creative talents", "Optimistic financial attitude", "May spend impulsively on pleasures", "Should develop discipline in savings"],
    4: ["Methodical money manager", "Builds wealth gradually and securely", "Conservative investment approach", "Good at budgeting", "Should allow for occasional indulgence"],
    5: ["Fluctuating financial patterns", "Money comes and goes with ease", "Versatile income sources", "Adaptable to financial changes", "Should create flexible stability"],
    6: ["Responsible financial approach", "Often financially supports others", "Balance in giving and receiving", "Good at managing home finances", "Should ensure self-care in finances"],
    7: ["Analytical approach to money", "Often unusual sources of income", "Needs meaning in financial pursuits", "May undercharge for value", "Should trust intuition with investments"],
    8: ["Natural wealth consciousness", "Strong manifestation abilities", "Executive approach to finances", "Good at large-scale money management", "Should balance material and spiritual"],
    9: ["Humanitarian approach to wealth", "Money seen as energy for good", "Often receives unexpected financial support", "Generous with resources", "Should accept abundance as tool for service"],
    11: ["Intuitive financial decisions", "Money may come through inspirational work", "Fluctuating relationship with material world", "Needs financial security for peace of mind", "Should trust inner guidance with money"],
    22: ["Master builder of wealth", "Can create large-scale financial structures", "Practical and visionary with money", "Potential for significant abundance", "Should use wealth for greater good"],
    33: ["Money as tool for service", "Abundance through helping others", "Detachment from pure materialism", "Teaching others about abundance", "Should accept prosperity as divine support"],
})
DEFAULT_FINANCIAL_TRAITS = (
    "Balanced approach to finances",
    "Adaptable money management style",
    "Potential for unexpected financial support",
    "Should trust inner guidance with investments",
    "Focus on sustainable abundance",
)

# ── Здоровье ────────────────────────────────────────────────────────────────

HEALTH_TRAITS = _freeze({
    1: ["Vitality connected to sense of purpose", "Headaches when resisting path", "Benefits from independent exercise", "May push body too hard", "Needs adequate rest"],
    2: ["Sensitive digestive system", "Emotional health affects physical", "Benefits from gentle exercise", "May absorb others' energies", "Needs emotional balance for wellbeing"],
    3: ["Throat and respiratory focus", "Expression important for health", "Benefits from creative movement", "May neglect consistent self-care", "Needs joy for wellbeing"],
    4: ["Strong constitution when balanced", "Skeletal and dental focus", "Benefits from routine exercise", "May work to exhaustion", "Needs regular rest patterns"],
    5: ["Nervous system sensitivity", "Benefits from varied exercise", "May experience digestive issues with restriction", "Needs freedom of movement", "Benefits from nature exposure"],
    6: ["Heart and circulation focus", "Nurturing others affects health", "Benefits from balanced nutrition", "May neglect self-care for others", "Needs beauty for wellbeing"],
    7: ["Highly sensitive physical system", "Mental health affects physical", "Benefits from meditative movement", "May overthink health issues", "Needs mental peace for wellbeing"],
    8: ["Robust physical energy when aligned", "Back and structural focus", "Benefits from strengthening exercise", "May ignore body's signals", "Needs success-rest balance"],
    9: ["All body systems interconnected", "Universal health perspective", "Benefits from compassionate self-care", "May sacrifice health for service", "Needs alignment with higher purpose"],
    11: ["Sensitive nervous system", "Spiritual health affects physical", "Benefits from energy practices", "May be affected by environmental energies", "Needs grounding practices"],
    22: ["Strong physical stamina potential", "Practical approach to health needed", "Benefits from structured exercise", "May overextend physically", "Needs balance between vision and body care"],
    33: ["Compassionate body awareness", "Teaching others affects health", "Benefits from gentle movement", "May neglect self for others' care", "Needs self-nurturing practices"],
})

# ── Испытания и уроки ───────────────────────────────────────────────────────

LIFE_CHALLENGES = _freeze({
    1: ["Balancing independence with connection", "Overcoming egotism", "Learning to listen to others", "Developing patience", "Finding your unique voice"],
    2: ["Making decisions without excessive input", "Standing up for yourself", "Addressing conflict directly", "Managing emotional sensitivity", "Setting healthy boundaries"],
    3: ["Focusing your creative energy", "Following through on projects", "Balancing expression with listening", "Managing scattered energy", "Disciplining your talents"],
    4: ["Embracing necessary changes", "Overcoming rigidity", "Finding joy in the process", "Balancing work and play", "Connecting to intuition"],
    5: ["Creating healthy commitments", "Finding depth in experiences", "Managing restless energy", "Creating sustainable freedom", "Focusing scattered attention"],
    6: ["Avoiding excessive responsibility", "Setting boundaries in relationships", "Balancing giving and receiving", "Releasing perfectionism", "Caring for yourself first"],
    7: ["Translating knowledge to wisdom", "Sharing your insights with others", "Overcoming isolation tendencies", "Grounding spiritual insights", "Trusting your intuition"],
    8: ["Using power ethically", "Balancing material and spiritual", "Delegating effectively", "Managing workaholic tendencies", "Releasing control"],
    9: ["Setting practical boundaries", "Completing life cycles", "Releasing attachment to outcomes", "Accepting human limitations", "Balancing idealism with reality"],
    11: ["Grounding spiritual insights", "Managing high sensitivity", "Balancing idealism with practicality", "Translating inspiration to action", "Maintaining physical wellbeing"],
    22: ["Manifesting your vision practically", "Managing stress of large responsibilities", "Delegating effectively", "Balancing material mastery with spiritual purpose", "Maintaining personal relationships"],
    33: ["Setting appropriate boundaries", "Avoiding martyr syndrome", "Self-care while serving others", "Receiving as well as giving", "Maintaining personal identity"],
})
DEFAULT_LIFE_CHALLENGES = (
    "Finding your authentic path",
    "Balancing different aspects of life",
    "Trusting your inner guidance",
    "Creating sustainable success",
    "Maintaining physical wellbeing",
)

LIFE_LESSONS = _freeze({
    1: ["Independence", "Courage", "Self-reliance", "Innovation", "Leadership without domination"],
    2: ["Cooperation", "Patience", "Diplomacy", "Intuitive listening", "Balance in relationships"],
    3: ["Creative expression", "Joy in life", "Effective communication", "Optimism", "Following through on ideas"],
    4: ["Building solid foundations", "Order and system", "Patience in process", "Practical wisdom", "Reliability"],
    5: ["Constructive freedom", "Adaptability", "Learning through experience", "Progressive change", "Versatility"],
    6: ["Responsible love", "Balanced service", "Creating harmony", "Nurturing without control", "Beauty in life"],
    7: ["Inner wisdom", "Spiritual connection", "Analysis and understanding", "Faith and trust", "Sacred knowledge"],
    8: ["Abundance consciousness", "Ethical power", "Material mastery", "Achievement", "Balance of giving and receiving"],
    9: ["Universal compassion", "Selfless service", "Letting go", "Forgiveness", "Higher perspective"],
    11: ["Spiritual awakening", "Inspired leadership", "Heightened intuition", "Illuminating others", "Idealism with practicality"],
    22: ["Manifesting visions", "Master building", "Practical spirituality", "Large-scale service", "Material and spiritual integration"],
    33: ["Compassionate teaching", "Spiritual nurturing", "Selfless love", "Higher awareness", "Healing through presence"],
})
DEFAULT_LIFE_LESSONS = (
    "Finding your authentic path",
    "Balancing material and spiritual",
    "Service with boundaries",
    "Self-knowledge",
    "Living your highest potential",
)

# ── Счастливые цвета и камни ────────────────────────────────────────────────

LUCKY_COLORS = _freeze({
    1: ["Red", "Orange", "Gold", "Yellow", "Bronze"],
    2: ["Green", "White", "Cream", "Silver", "Peach"],
    3: ["Yellow", "Bright Pink", "Magenta", "Peach", "Lilac"],
    4: ["Green", "Blue", "Brown", "Grey", "Navy"],
    5: ["Light Blue", "Silver", "White", "Gray", "Turquoise"],
    6: ["Pink", "Blue", "Cream", "Peach", "Lavender"],
    7: ["Purple", "Violet", "Silver", "White", "Pastel Blue"],
    8: ["Purple", "Dark Blue", "Green", "Gold", "Metallic tones"],
    9: ["Gold", "Red", "Orange", "Rose", "Purple"],
    11: ["White", "Ivory", "Silver", "Pale Blue", "Lavender"],
    22: ["Blue", "Gold", "Yellow", "Orange", "Brown"],
    33: ["Pink", "Turquoise", "Light Purple", "White", "Aquamarine"],
})
DEFAULT_LUCKY_COLORS = ("Blue", "Purple", "Gold", "Green", "White")

LUCKY_GEMSTONES = _freeze({
    1: ["Ruby", "Garnet", "Red Jasper", "Carnelian", "Sunstone"],
    2: ["Moonstone", "Pearl", "Opal", "Rose Quartz", "Selenite"],
    3: ["Yellow Sapphire", "Citrine", "Amber", "Topaz", "Yellow Jade"],
    4: ["Sapphire", "Lapis Lazuli", "Emerald", "Jade", "Green Tourmaline"],
    5: ["Aquamarine", "Turquoise", "Light Amethyst", "Blue Lace Agate", "Sodalite"],
    6: ["Emerald", "Pink Tourmaline", "Rose Quartz", "Pink Sapphire", "Jade"],
    7: ["Amethyst", "Purple Fluorite", "Charoite", "Clear Quartz", "Lepidolite"],
    8: ["Diamond", "Blue Sapphire", "Lapis Lazuli", "Indigo Tourmaline", "Onyx"],
    9: ["Red Coral", "Ruby", "Garnet", "Rhodonite", "Red Jasper"],
    11: ["Clear Quartz", "Selenite", "Herkimer Diamond", "Labradorite", "Moonstone"],
    22: ["Amber", "Yellow Citrine", "Blue Sapphire", "Golden Topaz", "Azurite"],
    33: ["Pink Tourmaline", "Kunzite", "Rose Quartz", "Pink Opal", "Pink Sapphire"],
})
DEFAULT_LUCKY_GEMSTONES = ("Clear Quartz", "Amethyst", "Rose Quartz", "Citrine", "Jade")

# ── Краткое толкование числа судьбы ─────────────────────────────────────────

DESTINY_MEANINGS = _freeze({
    1: "You are a natural born leader with strong independence and creativity. Your path involves pioneering new ideas and taking initiative.",
    2: "You are diplomatic and cooperative, with a gift for harmony and balance. Your destiny involves partnerships, relationships, and bringing peace.",
    3: "You have natural creative talents and charisma. Your destiny involves self-expression, joy, and inspiring others through your creativity.",
    4: "You are practical, organized, and hardworking. Your destiny involves building stable foundations and finding order in chaos.",
    5: "You seek freedom, adventure, and change. Your destiny involves versatility, adaptability, and embracing new experiences.",
    6: "You are nurturing, responsible, and compassionate. Your destiny involves caregiving, creating harmony, and service to others.",
    7: "You have a deeply analytical and spiritual mind. Your destiny involves seeking knowledge, wisdom, and understanding life's mysteries.",
    8: "You have natural leadership and business acumen. Your destiny involves achievement, authority, and material success.",
    9: "You are compassionate, idealistic, and humanitarian. Your destiny involves serving humanity and completing important life cycles.",
    11: "As a master number, you have heightened intuition and spiritual insight. Your destiny involves illumination and inspiring others.",
    22: "As a master number, you are a master builder. Your destiny involves creating large-scale projects that benefit humanity.",
    33: "As a master number, you are a master teacher. Your destiny involves selfless service, spiritual enlightenment, and uplifting humanity.",
})
DESTINY_TRAITS = _freeze({
    1: ["Independent", "Leader", "Ambitious", "Original", "Pioneer"],
    2: ["Cooperative", "Diplomatic", "Patient", "Sensitive", "Harmonious"],
    3: ["Creative", "Expressive", "Social", "Inspirational", "Optimistic"],
    4: ["Practical", "Organized", "Reliable", "Disciplined", "Methodical"],
    5: ["Adaptable", "Freedom-loving", "Versatile", "Adventurous", "Progressive"],
    6: ["Responsible", "Loving", "Supportive", "Nurturing", "Balanced"],
    7: ["Analytical", "Spiritual", "Wise", "Intuitive", "Introspective"],
    8: ["Ambitious", "Executive", "Authoritative", "Successful", "Confident"],
    9: ["Compassionate", "Humanitarian", "Selfless", "Artistic", "Idealistic"],
    11: ["Intuitive", "Inspirational", "Visionary", "Idealistic", "Sensitive"],
    22: ["Practical", "Visionary", "Ambitious", "Disciplined", "Masterful"],
    33: ["Altruistic", "Nurturing", "Enlightened", "Compassionate", "Inspirational"],
})
DEFAULT_DESTINY_MEANING = "This number holds unique spiritual significance for you. Trust your intuition to guide your path."
DEFAULT_DESTINY_TRAITS = ("Unique", "Spiritual", "Intuitive", "Mystical", "Guided")

# ── Расширенные инсайты ─────────────────────────────────────────────────────

INSIGHT_STRENGTHS = _freeze({
    1: "leadership", 2: "collaboration", 3: "creativity", 4: "stability",
    5: "adaptability", 6: "nurturing", 7: "analysis", 8: "ambition",
    9: "compassion", 11: "intuition", 22: "mastery", 33: "teaching",
})
INSIGHT_ATTUNEMENTS = _freeze({
    1: "self-expression", 2: "partnerships", 3: "communication",
    4: "building foundations", 5: "freedom", 6: "harmony", 7: "introspection",
    8: "material success", 9: "universal compassion", 11: "spiritual insight",
    22: "manifestation", 33: "spiritual teaching",
})
INSIGHT_PLANETS = _freeze({
    1: "Sun", 2: "Moon", 3: "Jupiter", 4: "Uranus", 5: "Mercury", 6: "Venus",
    7: "Neptune", 8: "Saturn", 9: "Mars", 11: "Sun/Moon", 22: "Uranus/Neptune",
    33: "Jupiter/Venus",
})
INSIGHT_COMPATIBILITY = _freeze({
    1: [3, 5, 9], 2: [4, 6, 8], 3: [1, 5, 9], 4: [2, 7, 8], 5: [1, 3, 7],
    6: [2, 8, 9], 7: [4, 5, 9], 8: [2, 4, 6], 9: [1, 3, 6, 7],
    11: [2, 4, 11, 22], 22: [4, 11, 22, 33], 33: [6, 9, 22, 33],
})
DEFAULT_INSIGHT_COMPATIBILITY = (1, 2, 3)


def lookup(table: Mapping, number: int, default):
    """Возвращает значение таблицы или значение по умолчанию"""
    value = table.get(number, default)
    return list(value) if isinstance(value, tuple) else value
