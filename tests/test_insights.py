import hashlib
from datetime import date

import pytest
from aiohttp import web, test_utils
from PIL import Image

from config.settings import Settings
from destiny_calculator import reduce_digits
from insights import (
    HttpInsightProvider,
    HttpPalmAnalyzer,
    LocalInsightProvider,
    StubPalmAnalyzer,
    get_insight_provider,
    get_palm_analyzer,
)
from insights.config import PALM_CONFIG

VALID_NUMBERS = set(range(1, 10)) | {11, 22, 33}
UNREACHABLE_URL = "http://127.0.0.1:1/unreachable"


def make_app(path, handler):
    app = web.Application()
    app.router.add_post(path, handler)
    return app


@pytest.mark.asyncio
async def test_local_provider_insights():
    enhanced = await LocalInsightProvider().get_enhanced_destiny(date(1990, 5, 7))

    assert enhanced.destiny_number == 4
    assert enhanced.source == "local"
    assert enhanced.insights == [
        "Your destiny number 4 shows a particular strength in stability",
        "You're particularly attuned to building foundations",
        "Planetary influence: Uranus",
    ]
    assert enhanced.compatibility == [2, 7, 8]


@pytest.mark.asyncio
async def test_local_provider_master_number_uses_master_entries():
    enhanced = await LocalInsightProvider().get_enhanced_destiny(date(2009, 2, 9))

    assert enhanced.destiny_number == 22
    assert "mastery" in enhanced.insights[0]
    assert enhanced.insights[2] == "Planetary influence: Uranus/Neptune"
    assert enhanced.compatibility == [4, 11, 22, 33]


@pytest.mark.asyncio
async def test_http_provider_uses_remote_response():
    received = {}

    async def handler(request):
        received.update(await request.json())
        return web.json_response({
            "destiny_number": 7,
            "insights": ["Remote insight"],
            "compatibility": [1, 2],
        })

    async with test_utils.TestServer(make_app("/insights", handler)) as server:
        async with HttpInsightProvider(str(server.make_url("/insights")), timeout=5) as provider:
            enhanced = await provider.get_enhanced_destiny(date(1990, 5, 7))

    assert received == {"birth_date": "1990-05-07"}
    assert enhanced.source == "http"
    assert enhanced.destiny_number == 7
    assert enhanced.insights == ["Remote insight"]


@pytest.mark.asyncio
async def test_http_provider_falls_back_on_bad_status():
    async def handler(request):
        return web.json_response({"error": "boom"}, status=500)

    async with test_utils.TestServer(make_app("/insights", handler)) as server:
        provider = HttpInsightProvider(str(server.make_url("/insights")), timeout=5)
        enhanced = await provider.get_enhanced_destiny(date(1990, 5, 7))

    assert enhanced.source == "local"
    assert enhanced.destiny_number == 4


@pytest.mark.asyncio
async def test_http_provider_falls_back_on_malformed_payload():
    async def handler(request):
        return web.json_response({"unexpected": True})

    async with test_utils.TestServer(make_app("/insights", handler)) as server:
        provider = HttpInsightProvider(str(server.make_url("/insights")), timeout=5)
        enhanced = await provider.get_enhanced_destiny(date(1990, 5, 7))

    assert enhanced.source == "local"


@pytest.mark.asyncio
async def test_http_provider_falls_back_when_unreachable():
    async with HttpInsightProvider(UNREACHABLE_URL, timeout=2) as provider:
        enhanced = await provider.get_enhanced_destiny(date(1990, 5, 7))

    assert enhanced.source == "local"
    assert enhanced.destiny_number == 4


@pytest.mark.asyncio
async def test_stub_palm_analyzer_is_deterministic(palm_image):
    analyzer = StubPalmAnalyzer()
    first = await analyzer.analyze(palm_image)
    second = await analyzer.analyze(palm_image)

    assert first.success is True
    assert first.destiny_number == second.destiny_number
    assert first.destiny_number in VALID_NUMBERS
    assert first.confidence == 0.78
    assert first.palm_features is None


@pytest.mark.asyncio
async def test_stub_palm_analyzer_advanced(palm_image):
    analysis = await StubPalmAnalyzer().analyze(palm_image, advanced=True)

    assert analysis.success is True
    assert analysis.confidence == 0.92
    features = analysis.palm_features
    assert 1 <= features.life_line_length <= 10
    assert 0 <= features.life_line_clarity < 1
    assert features.dominant_mount in ("Venus", "Jupiter", "Saturn", "Apollo", "Mercury")
    assert features.finger_ratio == [1.0, 1.1, 0.9, 0.95]


@pytest.mark.asyncio
async def test_stub_palm_analyzer_ignores_encoding(image_factory):
    # Одинаковые пиксели в разных форматах дают одно число
    analyzer = StubPalmAnalyzer()
    png = await analyzer.analyze(image_factory(fmt="PNG"))
    bmp = await analyzer.analyze(image_factory(fmt="BMP"))
    assert png.destiny_number == bmp.destiny_number


@pytest.mark.asyncio
async def test_stub_palm_analyzer_rejects_garbage():
    analysis = await StubPalmAnalyzer().analyze(b"definitely not an image")

    assert analysis.success is False
    assert analysis.destiny_number == 0
    assert analysis.confidence == 0
    assert analysis.error


def test_stub_number_comes_from_reducer(palm_image):
    analyzer = StubPalmAnalyzer()
    digest = hashlib.sha256(analyzer.normalize_image(palm_image)).digest()
    seed = int.from_bytes(digest[:4], "big")
    assert reduce_digits(seed % 999999 + 1) in VALID_NUMBERS


@pytest.mark.asyncio
async def test_stub_palm_analyzer_rejects_too_many_pixels(monkeypatch, palm_image):
    monkeypatch.setitem(PALM_CONFIG, "max_pixels", 1000)

    analysis = await StubPalmAnalyzer().analyze(palm_image)

    assert analysis.success is False
    assert analysis.destiny_number == 0
    assert analysis.error == "Palm image is too large"


@pytest.mark.asyncio
async def test_stub_palm_analyzer_handles_decompression_bomb(monkeypatch, palm_image):
    # Pillow отказывается открывать изображение больше 2 * MAX_IMAGE_PIXELS
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

    analysis = await StubPalmAnalyzer().analyze(palm_image)

    assert analysis.success is False
    assert analysis.error == "Palm image is too large"


@pytest.mark.asyncio
async def test_stub_palm_analyzer_large_jpeg(image_factory):
    jpeg = image_factory(size=(1600, 1200), fmt="JPEG")
    analyzer = StubPalmAnalyzer()

    first = await analyzer.analyze(jpeg)
    second = await analyzer.analyze(jpeg)

    assert first.success is True
    assert first.destiny_number == second.destiny_number
    assert len(analyzer.normalize_image(jpeg)) <= 256 * 256 * 3


@pytest.mark.asyncio
async def test_http_palm_analyzer_uploads_image(palm_image):
    received = {}

    async def handler(request):
        form = await request.post()
        received["size"] = len(form["image"].file.read())
        received["advanced"] = form["advanced"]
        return web.json_response({"success": True, "destiny_number": 7, "confidence": 0.9})

    async with test_utils.TestServer(make_app("/palm", handler)) as server:
        async with HttpPalmAnalyzer(str(server.make_url("/palm")), timeout=5) as analyzer:
            analysis = await analyzer.analyze(palm_image, advanced=True)

    assert received == {"size": len(palm_image), "advanced": "true"}
    assert analysis.success is True
    assert analysis.destiny_number == 7


@pytest.mark.asyncio
async def test_http_palm_analyzer_reports_bad_status(palm_image):
    async def handler(request):
        return web.Response(status=503)

    async with test_utils.TestServer(make_app("/palm", handler)) as server:
        analysis = await HttpPalmAnalyzer(str(server.make_url("/palm")), timeout=5).analyze(palm_image)

    assert analysis.success is False
    assert "503" in analysis.error


@pytest.mark.asyncio
@pytest.mark.parametrize("number", [0, 10, 99])
async def test_http_palm_analyzer_rejects_unknown_numbers(palm_image, number):
    async def handler(request):
        return web.json_response({"success": True, "destiny_number": number, "confidence": 0.9})

    async with test_utils.TestServer(make_app("/palm", handler)) as server:
        analysis = await HttpPalmAnalyzer(str(server.make_url("/palm")), timeout=5).analyze(palm_image)

    assert analysis.success is False
    assert analysis.destiny_number == 0
    assert analysis.error == "Invalid response from palm analysis service"


@pytest.mark.asyncio
async def test_http_palm_analyzer_accepts_master_number(palm_image):
    async def handler(request):
        return web.json_response({"success": True, "destiny_number": 33, "confidence": 0.9})

    async with test_utils.TestServer(make_app("/palm", handler)) as server:
        analysis = await HttpPalmAnalyzer(str(server.make_url("/palm")), timeout=5).analyze(palm_image)

    assert analysis.success is True
    assert analysis.destiny_number == 33


@pytest.mark.asyncio
async def test_http_palm_analyzer_reports_connection_error(palm_image):
    analysis = await HttpPalmAnalyzer(UNREACHABLE_URL, timeout=2).analyze(palm_image)

    assert analysis.success is False
    assert analysis.error == "API connection failed"


def test_factories_follow_settings():
    local = Settings(_env_file=None)
    assert isinstance(get_insight_provider(local), LocalInsightProvider)
    assert isinstance(get_palm_analyzer(local), StubPalmAnalyzer)

    remote = Settings(
        _env_file=None,
        insight_provider="http",
        insight_api_url="http://insights.local/api",
        palm_provider="http",
        palm_api_url="http://palm.local/api",
    )
    assert isinstance(get_insight_provider(remote), HttpInsightProvider)
    assert isinstance(get_palm_analyzer(remote), HttpPalmAnalyzer)


def test_factories_without_url_use_local_implementations():
    settings = Settings(_env_file=None, insight_provider="http", palm_provider="http")
    assert isinstance(get_insight_provider(settings), LocalInsightProvider)
    assert isinstance(get_palm_analyzer(settings), StubPalmAnalyzer)
