"""Telegram бот: пошаговый расчет судьбы и анализ ладони"""
import logging
import re
from datetime import date
from html import escape
from typing import Optional

from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import (
    Application, CommandHandler, MessageHandler,
    ConversationHandler, CallbackQueryHandler, filters, ContextTypes
)
from telegram.constants import ParseMode, ChatAction

from config.settings import settings
from destiny_calculator import BirthData, DestinyCalculator, InvalidBirthDateError
from destiny_calculator.models import TIME_PATTERN
from insights import get_insight_provider, get_palm_analyzer
from reports import ReportGenerator, generate_pdf_report

# Настройка логирования
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=settings.log_level.upper()
)
logger = logging.getLogger(__name__)

# Состояния разговора
WAITING_NAME, WAITING_DATE, WAITING_TIME, WAITING_LOCATION = range(4)
TOTAL_STEPS = 4

MAX_MESSAGE_LENGTH = 4000
DATE_SEPARATORS = re.compile(r"[./\-]")

# Инициализация
calculator = DestinyCalculator()
report_generator = ReportGenerator(get_insight_provider(settings))


def create_progress_indicator(current: int, total: int) -> str:
    """Создает индикатор прогресса"""
    filled = "█" * current
    empty = "░" * (total - current)
    percentage = int((current / total) * 100)
    return f"<code>{filled}{empty}</code> <b>{percentage}%</b> ({current}/{total})"


def create_section_header(title: str, emoji: str = "✨") -> str:
    """Создает заголовок секции"""
    return f"\n{emoji} <b>{title}</b>\n{'─' * 30}\n"


def create_box(title: str) -> str:
    """Заголовок сообщения в рамке"""
    return (
        "╔═══════════════════════════════════╗\n"
        f"║   {title}\n"
        "╚═══════════════════════════════════╝\n\n"
    )


def input_error(message: str, hint: str) -> str:
    return (
        f"{create_box('⚠️ INPUT ERROR')}"
        f"❌ <b>{message}</b>\n\n"
        f"💡 <i>{hint}</i>"
    )


def parse_birth_date(text: str, min_year: int = 1900, today: Optional[date] = None) -> date:
    """
    Разбирает дату в формате ДД.ММ.ГГГГ (также ДД/ММ/ГГГГ и ДД-ММ-ГГГГ).

    Raises:
        InvalidBirthDateError: формат неверный, даты нет в календаре,
            дата в будущем, год раньше min_year или возраст больше 120 лет
    """
    today = today or date.today()
    parts = DATE_SEPARATORS.split(text.strip().replace(' ', ''))
    if len(parts) != 3:
        raise InvalidBirthDateError("Invalid date format")

    try:
        day, month, year = map(int, parts)
        birth_date = date(year, month, day)
    except ValueError as e:
        raise InvalidBirthDateError("This date does not exist") from e

    if birth_date > today:
        raise InvalidBirthDateError("Birth date cannot be in the future")
    if year < min_year:
        raise InvalidBirthDateError(f"Birth year must be {min_year} or later")
    # Проверка возраста
    if (today - birth_date).days // 365 > 120:
        raise InvalidBirthDateError("Age cannot exceed 120 years")
    return birth_date


def parse_birth_time(text: str) -> str:
    """Разбирает время ЧЧ:ММ, возвращает в виде 'HH:MM'"""
    match = TIME_PATTERN.match(text.strip().replace('.', ':'))
    if not match:
        raise ValueError("Invalid time format")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError("Invalid time")
    return f"{hour:02d}:{minute:02d}"


def split_report(text: str, max_length: int = MAX_MESSAGE_LENGTH):
    """Делит длинный отчет на части для отправки"""
    return [text[i:i + max_length] for i in range(0, len(text), max_length)]


def skip_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([
        [InlineKeyboardButton("⏭️ Skip", callback_data="skip")],
        [InlineKeyboardButton("🔙 Cancel", callback_data="back_to_main")]
    ])


def cancel_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([[InlineKeyboardButton("🔙 Cancel", callback_data="back_to_main")]])


def main_menu_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([
        [InlineKeyboardButton("✨ Calculate destiny", callback_data="calculate")],
        [
            InlineKeyboardButton("✋ Palm scan", callback_data="palm"),
            InlineKeyboardButton("💬 Help", callback_data="help")
        ]
    ])


def get_message(update: Update):
    """Сообщение, на которое нужно отвечать (текст или callback)"""
    if update.callback_query:
        return update.callback_query.message
    return update.message


async def send_typing_action(update: Update):
    """Отправляет индикатор печати"""
    await get_message(update).chat.send_action(ChatAction.TYPING)


WELCOME_TEXT = f"""{create_box('🔮 DESTINY SCANNER 🔮')}Discover your <b>destiny number</b> and <b>zodiac sign</b> from your birth date.
{create_section_header("What you will learn", "✨")}🔢 <b>Mulank</b>, <b>Bhagyank</b> and <b>Power number</b>
🪐 Your ruling planet and compatible numbers
💼 Career, relationships, finances and health
♈ Your zodiac sign and its influences
{create_section_header("What we need", "📋")}• Name (optional)
• Birth date (DD.MM.YYYY)
• Birth time and place (optional)
"""

HELP_TEXT = f"""{create_box('💬 HELP')}{create_section_header("How to use", "📱")}<b>1️⃣</b> Tap <b>"✨ Calculate destiny"</b>
<b>2️⃣</b> Enter your name or skip
<b>3️⃣</b> Enter your <b>birth date</b> as DD.MM.YYYY
<b>4️⃣</b> Enter birth time HH:MM or skip
<b>5️⃣</b> Enter birth place or skip
<b>6️⃣</b> Receive your card, report and PDF

✋ Send a <b>photo of your palm</b> at any time for a palm scan.
Add the caption <code>advanced</code> for a detailed scan.
{create_section_header("Commands", "⌨️")}<code>/start</code> - Main menu
<code>/help</code> - This help
<code>/cancel</code> - Cancel the current operation
"""

PALM_TEXT = f"""{create_box('✋ PALM SCAN')}Send a clear <b>photo of your palm</b>.

💡 <i>Add the caption <code>advanced</code> for a detailed scan</i>
"""


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработчик команды /start"""
    user = update.effective_user
    greeting = f"👋 <b>Welcome, {escape(user.first_name)}!</b>\n\n" if user else ""
    await update.message.reply_text(
        greeting + WELCOME_TEXT,
        reply_markup=main_menu_keyboard(),
        parse_mode=ParseMode.HTML
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработчик команды /help"""
    await update.message.reply_text(HELP_TEXT, reply_markup=main_menu_keyboard(), parse_mode=ParseMode.HTML)


async def button_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработчик нажатий на кнопки"""
    query = update.callback_query
    await query.answer()

    if query.data == "calculate":
        context.user_data.clear()
        await query.edit_message_text(
            f"✨ <b>DESTINY CALCULATION</b>\n\n"
            f"{create_progress_indicator(1, TOTAL_STEPS)}\n\n"
            f"{create_section_header('Step 1: Your name', '👤')}"
            "Please enter your <b>name</b> or tap <b>Skip</b>.",
            reply_markup=skip_keyboard(),
            parse_mode=ParseMode.HTML
        )
        return WAITING_NAME

    if query.data == "help":
        await query.edit_message_text(HELP_TEXT, reply_markup=main_menu_keyboard(), parse_mode=ParseMode.HTML)
    elif query.data == "palm":
        await query.edit_message_text(PALM_TEXT, parse_mode=ParseMode.HTML)
    elif query.data == "back_to_main":
        context.user_data.clear()
        await query.edit_message_text(WELCOME_TEXT, reply_markup=main_menu_keyboard(), parse_mode=ParseMode.HTML)
    return ConversationHandler.END


async def ask_date(update: Update):
    await get_message(update).reply_text(
        f"{create_progress_indicator(2, TOTAL_STEPS)}\n\n"
        f"{create_section_header('Step 2: Birth date', '📅')}"
        "Please enter your <b>birth date</b> as <b>DD.MM.YYYY</b>\n\n"
        "💡 <i>Examples:</i>\n"
        "• <code>07.05.1990</code>\n"
        "• <code>29/02/2000</code>",
        reply_markup=cancel_keyboard(),
        parse_mode=ParseMode.HTML
    )
    return WAITING_DATE


async def receive_name(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Получение имени"""
    name = update.message.text.strip()

    if len(name) > 100:
        await update.message.reply_text(
            input_error("Name is too long", "Use at most 100 characters or tap Skip"),
            reply_markup=skip_keyboard(),
            parse_mode=ParseMode.HTML
        )
        return WAITING_NAME

    context.user_data['name'] = name
    await update.message.reply_text(f"✅ <b>{escape(name)}</b>", parse_mode=ParseMode.HTML)
    return await ask_date(update)


async def skip_name(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.callback_query.answer()
    context.user_data['name'] = None
    return await ask_date(update)


async def receive_date(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Получение даты рождения"""
    try:
        birth_date = parse_birth_date(update.message.text, min_year=settings.min_birth_year)
    except InvalidBirthDateError as e:
        await update.message.reply_text(
            input_error(str(e), "Format: DD.MM.YYYY, for example 07.05.1990"),
            reply_markup=cancel_keyboard(),
            parse_mode=ParseMode.HTML
        )
        return WAITING_DATE

    context.user_data['birth_date'] = birth_date
    await update.message.reply_text(
        f"✅ <b>{birth_date.strftime('%d.%m.%Y')}</b>\n\n"
        f"{create_progress_indicator(3, TOTAL_STEPS)}\n\n"
        f"{create_section_header('Step 3: Birth time', '🕐')}"
        "Enter your <b>birth time</b> as <b>HH:MM</b> (24h) or tap <b>Skip</b>.\n\n"
        "💡 <i>Birth time enables the approximate Moon sign</i>",
        reply_markup=skip_keyboard(),
        parse_mode=ParseMode.HTML
    )
    return WAITING_TIME


async def ask_location(update: Update):
    await get_message(update).reply_text(
        f"{create_progress_indicator(4, TOTAL_STEPS)}\n\n"
        f"{create_section_header('Step 4: Birth place', '📍')}"
        "Enter your <b>birth place</b> (city) or tap <b>Skip</b>.",
        reply_markup=skip_keyboard(),
        parse_mode=ParseMode.HTML
    )
    return WAITING_LOCATION


async def receive_time(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Получение времени рождения"""
    try:
        context.user_data['birth_time'] = parse_birth_time(update.message.text)
    except ValueError:
        await update.message.reply_text(
            input_error("Invalid time", "Format: HH:MM, for example 14:30, or tap Skip"),
            reply_markup=skip_keyboard(),
            parse_mode=ParseMode.HTML
        )
        return WAITING_TIME
    return await ask_location(update)


async def skip_time(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.callback_query.answer()
    context.user_data['birth_time'] = None
    return await ask_location(update)


async def receive_location(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Получение места рождения"""
    context.user_data['birth_location'] = update.message.text.strip()[:100]
    await calculate_destiny(update, context)
    return ConversationHandler.END


async def skip_location(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.callback_query.answer()
    context.user_data['birth_location'] = None
    await calculate_destiny(update, context)
    return ConversationHandler.END


async def calculate_destiny(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Выполнение расчета и отправка результатов"""
    message = get_message(update)
    birth_date = context.user_data.get('birth_date')

    if not birth_date:
        await message.reply_text(
            f"{create_box('⚠️ DATA ERROR')}"
            "❌ <b>Birth date is missing</b>\n\n"
            "Please start again.",
            reply_markup=main_menu_keyboard(),
            parse_mode=ParseMode.HTML
        )
        return

    await send_typing_action(update)
    processing_msg = await message.reply_text(
        f"{create_box('⏳ CALCULATING')}🔮 <b>Reading your numbers...</b>",
        parse_mode=ParseMode.HTML
    )

    try:
        birth_data = BirthData(
            birth_date=birth_date,
            birth_time=context.user_data.get('birth_time'),
            birth_location=context.user_data.get('birth_location'),
            name=context.user_data.get('name')
        )
        reading = calculator.calculate_reading(birth_data)
        enhanced_report = await report_generator.generate_enhanced_report(reading)
        pdf = generate_pdf_report(reading)
    except Exception as e:
        logger.error(f"Ошибка при расчете: {e}", exc_info=True)
        await processing_msg.edit_text(
            f"{create_box('❌ CALCULATION ERROR')}"
            "😔 <b>Something went wrong</b>\n\n"
            "Please try again.",
            reply_markup=main_menu_keyboard(),
            parse_mode=ParseMode.HTML
        )
        return

    await processing_msg.delete()

    profile = reading.numerology
    sun = reading.astrology.sun_sign
    name_line = f"👤 <b>{escape(birth_data.name)}</b>\n" if birth_data.name else ""
    await message.reply_photo(
        photo=enhanced_report['visual_card'],
        caption=f"{create_box('🎯 YOUR DESTINY')}"
                f"{name_line}"
                f"📅 <b>{birth_date.strftime('%d.%m.%Y')}</b>\n\n"
                f"🔢 Mulank <code>{profile.mulank.number}</code> · "
                f"Bhagyank <code>{profile.bhagyank.number}</code> · "
                f"Power <code>{profile.power_number.number}</code>\n"
                f"{sun.symbol} {sun.name}",
        parse_mode=ParseMode.HTML
    )

    # Текстовый отчет частями
    for part in split_report(enhanced_report['text_report']):
        await message.reply_text(f"<pre>{escape(part)}</pre>", parse_mode=ParseMode.HTML)

    await message.reply_document(
        document=pdf,
        filename=f"destiny_{birth_date.isoformat()}.pdf",
        caption="📄 Your full report"
    )

    keyboard = [
        [InlineKeyboardButton("🔄 New calculation", callback_data="calculate")],
        [InlineKeyboardButton("🏠 Main menu", callback_data="back_to_main")]
    ]
    await message.reply_text(
        f"{create_box('✅ DONE!')}🎉 <b>Your reading is ready!</b>",
        reply_markup=InlineKeyboardMarkup(keyboard),
        parse_mode=ParseMode.HTML
    )
    context.user_data.clear()


async def handle_palm_photo(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Анализ фотографии ладони"""
    photo = update.message.photo[-1]
    if photo.file_size and photo.file_size > settings.max_upload_size:
        await update.message.reply_text(
            input_error("Image is too large", "Send a smaller photo"),
            parse_mode=ParseMode.HTML
        )
        return

    await send_typing_action(update)
    advanced = (update.message.caption or "").strip().lower() == "advanced"
    telegram_file = await photo.get_file()
    image_bytes = bytes(await telegram_file.download_as_bytearray())

    async with get_palm_analyzer(settings) as analyzer:
        analysis = await analyzer.analyze(image_bytes, advanced=advanced)

    if not analysis.success:
        await update.message.reply_text(
            f"{create_box('❌ PALM SCAN FAILED')}"
            f"😔 <b>{escape(analysis.error or 'Palm analysis failed')}</b>",
            parse_mode=ParseMode.HTML
        )
        return

    text = (
        f"{create_box('✋ PALM SCAN')}"
        f"🔢 Destiny number: <code>{analysis.destiny_number}</code>\n"
        f"🎯 Confidence: <b>{analysis.confidence:.0%}</b>\n"
    )
    features = analysis.palm_features
    if features:
        text += create_section_header("Palm features", "🖐")
        text += (
            f"• Life line length: {features.life_line_length}\n"
            f"• Life line clarity: {features.life_line_clarity}\n"
            f"• Heart line strength: {features.heart_line_strength}\n"
            f"• Head line depth: {features.head_line_depth}\n"
            f"• Fate line: {'present' if features.fate_line_presence else 'absent'}\n"
            f"• Dominant mount: {features.dominant_mount}\n"
        )
    await update.message.reply_text(text, parse_mode=ParseMode.HTML)


async def cancel(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Отмена операции"""
    context.user_data.clear()
    await update.message.reply_text(
        f"{create_box('❌ CANCELLED')}"
        "You cancelled the current operation.",
        reply_markup=main_menu_keyboard(),
        parse_mode=ParseMode.HTML
    )
    return ConversationHandler.END


def main():
    """Главная функция запуска бота"""
    if not settings.telegram_bot_token:
        raise SystemExit("TELEGRAM_BOT_TOKEN is not set")

    # Создание приложения
    application = Application.builder().token(settings.telegram_bot_token).build()

    text_input = filters.TEXT & ~filters.COMMAND

    # Обработчик разговора для расчета
    conv_handler = ConversationHandler(
        entry_points=[CallbackQueryHandler(button_handler, pattern="^calculate$")],
        states={
            WAITING_NAME: [
                MessageHandler(text_input, receive_name),
                CallbackQueryHandler(skip_name, pattern="^skip$"),
            ],
            WAITING_DATE: [MessageHandler(text_input, receive_date)],
            WAITING_TIME: [
                MessageHandler(text_input, receive_time),
                CallbackQueryHandler(skip_time, pattern="^skip$"),
            ],
            WAITING_LOCATION: [
                MessageHandler(text_input, receive_location),
                CallbackQueryHandler(skip_location, pattern="^skip$"),
            ],
        },
        fallbacks=[
            CommandHandler("cancel", cancel),
            CallbackQueryHandler(button_handler, pattern="^back_to_main$"),
        ],
    )

    # Регистрация обработчиков
    application.add_handler(CommandHandler("start", start))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(conv_handler)
    application.add_handler(CallbackQueryHandler(button_handler))
    application.add_handler(MessageHandler(filters.PHOTO, handle_palm_photo))

    # Запуск бота
    logger.info("Бот запущен...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == '__main__':
    main()
