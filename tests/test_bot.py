from datetime import date

import pytest
from PIL import Image
from telegram.ext import ConversationHandler

from bot import main as bot_main
from bot.main import (
    create_progress_indicator,
    parse_birth_date,
    parse_birth_time,
    split_report,
)
from destiny_calculator import InvalidBirthDateError

TODAY = date(2026, 1, 15)


@pytest.mark.parametrize("text", ["07.05.1990", "7/5/1990", "07-05-1990", " 07. 05. 1990 "])
def test_parse_birth_date_formats(text):
    assert parse_birth_date(text, today=TODAY) == date(1990, 5, 7)


@pytest.mark.parametrize("text, message", [
    ("1990-05", "format"),
    ("abc", "format"),
    ("31.04.1990", "does not exist"),
    ("29.02.2001", "does not exist"),
    ("16.01.2026", "future"),
    ("01.01.1899", "1900"),
])
def test_parse_birth_date_errors(text, message):
    with pytest.raises(InvalidBirthDateError, match=message):
        parse_birth_date(text, today=TODAY)


def test_parse_birth_date_age_limit():
    with pytest.raises(InvalidBirthDateError, match="120"):
        parse_birth_date("01.01.1901", min_year=1800, today=date(2030, 1, 1))


@pytest.mark.parametrize("text, expected", [("14:30", "14:30"), ("7:05", "07:05"), ("7.05", "07:05")])
def test_parse_birth_time(text, expected):
    assert parse_birth_time(text) == expected


@pytest.mark.parametrize("text", ["24:00", "12:75", "noon"])
def test_parse_birth_time_errors(text):
    with pytest.raises(ValueError):
        parse_birth_time(text)


def test_split_report():
    parts = split_report("x" * 9000, max_length=4000)
    assert [len(part) for part in parts] == [4000, 4000, 1000]


def test_progress_indicator():
    assert "50%" in create_progress_indicator(2, 4)


class FakeChat:
    def __init__(self):
        self.actions = []

    async def send_action(self, action):
        self.actions.append(action)


class FakeMessage:
    def __init__(self, text=None, caption=None, photo=None):
        self.text = text
        self.caption = caption
        self.photo = photo or []
        self.chat = FakeChat()
        self.replies = []
        self.photos = []
        self.documents = []
        self.edits = []
        self.deleted = False

    async def reply_text(self, text, **kwargs):
        self.replies.append(text)
        return FakeMessage()

    async def reply_photo(self, photo, caption=None, **kwargs):
        self.photos.append((photo, caption))

    async def reply_document(self, document, filename=None, **kwargs):
        self.documents.append((document, filename))

    async def edit_text(self, text, **kwargs):
        self.edits.append(text)

    async def delete(self):
        self.deleted = True


class FakeCallbackQuery:
    def __init__(self, data="skip"):
        self.data = data
        self.message = FakeMessage()
        self.answered = False

    async def answer(self):
        self.answered = True


class FakeUpdate:
    def __init__(self, message=None, callback_query=None):
        self.message = message
        self.callback_query = callback_query
        self.effective_user = None


class FakeContext:
    def __init__(self, **user_data):
        self.user_data = dict(user_data)


class FakeFile:
    def __init__(self, content):
        self.content = content

    async def download_as_bytearray(self):
        return bytearray(self.content)


class FakePhoto:
    def __init__(self, content, file_size=None):
        self.content = content
        self.file_size = len(content) if file_size is None else file_size

    async def get_file(self):
        return FakeFile(self.content)


def text_update(text):
    return FakeUpdate(message=FakeMessage(text=text))


@pytest.mark.asyncio
@pytest.mark.parametrize("text, message", [("31.04.1990", "does not exist"), ("hello", "Invalid date format")])
async def test_receive_date_stays_on_bad_input(text, message):
    update = text_update(text)
    context = FakeContext()

    state = await bot_main.receive_date(update, context)

    assert state == bot_main.WAITING_DATE
    assert "birth_date" not in context.user_data
    assert "INPUT ERROR" in update.message.replies[0]
    assert message in update.message.replies[0]


@pytest.mark.asyncio
async def test_receive_date_moves_to_time():
    update = text_update("07.05.1990")
    context = FakeContext()

    state = await bot_main.receive_date(update, context)

    assert state == bot_main.WAITING_TIME
    assert context.user_data["birth_date"] == date(1990, 5, 7)


@pytest.mark.asyncio
async def test_receive_name_too_long_stays():
    update = text_update("x" * 101)
    context = FakeContext()

    assert await bot_main.receive_name(update, context) == bot_main.WAITING_NAME
    assert "name" not in context.user_data


@pytest.mark.asyncio
async def test_receive_time_stays_on_bad_input():
    update = text_update("25:00")
    context = FakeContext(birth_date=date(1990, 5, 7))

    state = await bot_main.receive_time(update, context)

    assert state == bot_main.WAITING_TIME
    assert "birth_time" not in context.user_data
    assert "Invalid time" in update.message.replies[0]


@pytest.mark.asyncio
async def test_receive_time_moves_to_location():
    update = text_update("7:05")
    context = FakeContext(birth_date=date(1990, 5, 7))

    assert await bot_main.receive_time(update, context) == bot_main.WAITING_LOCATION
    assert context.user_data["birth_time"] == "07:05"


@pytest.mark.asyncio
async def test_skip_name_moves_to_date():
    query = FakeCallbackQuery()
    context = FakeContext()

    state = await bot_main.skip_name(FakeUpdate(callback_query=query), context)

    assert state == bot_main.WAITING_DATE
    assert query.answered is True
    assert context.user_data["name"] is None
    assert "Step 2" in query.message.replies[0]


@pytest.mark.asyncio
async def test_skip_time_moves_to_location():
    query = FakeCallbackQuery()
    context = FakeContext(birth_date=date(1990, 5, 7))

    state = await bot_main.skip_time(FakeUpdate(callback_query=query), context)

    assert state == bot_main.WAITING_LOCATION
    assert context.user_data["birth_time"] is None
    assert "Step 4" in query.message.replies[0]


@pytest.mark.asyncio
async def test_skip_location_sends_reading():
    query = FakeCallbackQuery()
    context = FakeContext(birth_date=date(1990, 5, 7), name="Asha", birth_time="14:30")

    state = await bot_main.skip_location(FakeUpdate(callback_query=query), context)

    assert state == ConversationHandler.END
    message = query.message
    assert len(message.photos) == 1
    card, caption = message.photos[0]
    assert card.startswith(b"\x89PNG")
    assert "Asha" in caption
    report_parts = [reply for reply in message.replies if reply.startswith("<pre>")]
    assert report_parts
    assert "DESTINY SCANNER REPORT" in report_parts[0]
    document, filename = message.documents[0]
    assert document.startswith(b"%PDF")
    assert filename == "destiny_1990-05-07.pdf"
    assert "DONE" in message.replies[-1]
    assert context.user_data == {}


@pytest.mark.asyncio
async def test_receive_location_sends_reading():
    update = text_update("  Delhi ")
    context = FakeContext(birth_date=date(1990, 5, 7), birth_time="14:30")

    state = await bot_main.receive_location(update, context)

    assert state == ConversationHandler.END
    assert len(update.message.documents) == 1
    report = "".join(reply for reply in update.message.replies if reply.startswith("<pre>"))
    assert "Scorpio Ascendant" in report


@pytest.mark.asyncio
async def test_calculate_destiny_without_birth_date():
    update = text_update("Delhi")

    await bot_main.calculate_destiny(update, FakeContext())

    assert "Birth date is missing" in update.message.replies[0]
    assert update.message.photos == []
    assert update.message.documents == []


@pytest.mark.asyncio
async def test_cancel_clears_state():
    update = text_update("/cancel")
    context = FakeContext(birth_date=date(1990, 5, 7))

    assert await bot_main.cancel(update, context) == ConversationHandler.END
    assert context.user_data == {}
    assert "CANCELLED" in update.message.replies[0]


@pytest.mark.asyncio
async def test_palm_photo_reply(palm_image):
    update = FakeUpdate(message=FakeMessage(caption="advanced", photo=[FakePhoto(palm_image)]))

    await bot_main.handle_palm_photo(update, FakeContext())

    reply = update.message.replies[0]
    assert "PALM SCAN" in reply
    assert "Dominant mount" in reply


@pytest.mark.asyncio
async def test_palm_photo_oversized_image(monkeypatch, palm_image):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    update = FakeUpdate(message=FakeMessage(photo=[FakePhoto(palm_image)]))

    await bot_main.handle_palm_photo(update, FakeContext())

    assert "PALM SCAN FAILED" in update.message.replies[0]
    assert "too large" in update.message.replies[0]
