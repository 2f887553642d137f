"""FastAPI приложение"""
from fastapi import FastAPI, Depends, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse
from datetime import date
from typing import Optional
from pydantic import BaseModel
import io
import logging

from config.settings import settings
from destiny_calculator import (
    BirthData,
    DestinyCalculator,
    astrological_details,
    destiny_number,
    destiny_result,
    numerology_profile,
    zodiac_sign,
)
from insights import (
    DestinyInsightProvider,
    PalmAnalysisProvider,
    get_insight_provider,
    get_palm_analyzer,
)
from reports import ReportGenerator, generate_pdf_report

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=settings.log_level.upper()
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Destiny Scanner API",
    description=(
        "Расчет муланка, бхагьянка, числа силы и знака зодиака по дате рождения. "
        "Знак Луны и асцендент - упрощенные приближения, не астрономический расчет."
    ),
    version="1.0.0"
)

# Инициализация
calculator = DestinyCalculator()


@app.on_event("startup")
async def startup_event():
    logger.info(
        f"API запущен: insight_provider={settings.insight_provider}, "
        f"palm_provider={settings.palm_provider}"
    )


# Зависимости
def get_insights() -> DestinyInsightProvider:
    return get_insight_provider(settings)


def get_palm() -> PalmAnalysisProvider:
    return get_palm_analyzer(settings)


# Модели запросов
class BirthDateRequest(BaseModel):
    birth_date: date


class ReadingRequest(BaseModel):
    birth_date: date
    birth_time: Optional[str] = None
    birth_location: Optional[str] = None
    name: Optional[str] = None


def build_reading(request: ReadingRequest):
    """Строит BirthData и выполняет расчет"""
    birth_data = BirthData(
        birth_date=request.birth_date,
        birth_time=request.birth_time,
        birth_location=request.birth_location,
        name=request.name
    )
    return calculator.calculate_reading(birth_data)


def bad_request(e: Exception) -> HTTPException:
    logger.warning(f"Некорректный запрос: {e}")
    return HTTPException(status_code=400, detail=str(e))


# API endpoints
@app.get("/")
async def root():
    """Корневой endpoint"""
    return {
        "message": "Destiny Scanner API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.post("/api/destiny")
async def calculate_destiny(request: BirthDateRequest):
    """Число судьбы по дате рождения"""
    try:
        birth_date = BirthData(birth_date=request.birth_date).birth_date
        number = destiny_number(birth_date.year, birth_date.month, birth_date.day)
        return {
            "success": True,
            "data": destiny_result(number).model_dump()
        }
    except ValueError as e:
        raise bad_request(e)


@app.post("/api/numerology")
async def calculate_numerology(request: BirthDateRequest):
    """Полный нумерологический профиль"""
    try:
        birth_date = BirthData(birth_date=request.birth_date).birth_date
        profile = numerology_profile(birth_date.year, birth_date.month, birth_date.day)
        return {
            "success": True,
            "data": profile.model_dump()
        }
    except ValueError as e:
        raise bad_request(e)


@app.get("/api/zodiac")
async def get_zodiac(month: int = Query(...), day: int = Query(...)):
    """Знак зодиака по месяцу и дню"""
    try:
        sign = zodiac_sign(month, day)
        return {
            "success": True,
            "data": sign.model_dump()
        }
    except ValueError as e:
        raise bad_request(e)


@app.post("/api/astrology")
async def calculate_astrology(request: ReadingRequest):
    """Солнечный знак, влияния и приближенные Луна/асцендент"""
    try:
        birth_data = BirthData(**request.model_dump())
        details = astrological_details(
            birth_data.birth_date, birth_data.birth_time, birth_data.birth_location
        )
        return {
            "success": True,
            "data": details.model_dump()
        }
    except ValueError as e:
        raise bad_request(e)


@app.post("/api/reading")
async def calculate_reading(request: ReadingRequest):
    """Полный расчет"""
    try:
        reading = build_reading(request)
        return {
            "success": True,
            "data": reading.model_dump()
        }
    except ValueError as e:
        raise bad_request(e)


@app.post("/api/reading/report")
async def calculate_reading_report(
    request: ReadingRequest,
    provider: DestinyInsightProvider = Depends(get_insights)
):
    """Полный расчет с текстовым отчетом и инсайтами"""
    try:
        reading = build_reading(request)
    except ValueError as e:
        raise bad_request(e)

    report = await ReportGenerator(provider).generate_enhanced_report(reading)
    enhanced = report['enhanced']
    return {
        "success": True,
        "report": report['text_report'],
        "insights": report['insights'],
        "data": reading.model_dump(),
        "enhanced": enhanced.model_dump() if enhanced else None
    }


@app.post("/api/reading/pdf")
async def calculate_reading_pdf(request: ReadingRequest):
    """PDF отчет"""
    try:
        reading = build_reading(request)
    except ValueError as e:
        raise bad_request(e)

    pdf = generate_pdf_report(reading)
    return StreamingResponse(
        io.BytesIO(pdf),
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=destiny_report.pdf"}
    )


@app.post("/api/reading/visual")
async def calculate_reading_visual(request: ReadingRequest):
    """Карточка с ключевыми числами"""
    try:
        reading = build_reading(request)
    except ValueError as e:
        raise bad_request(e)

    visual = ReportGenerator().generate_visual_card(reading)
    return StreamingResponse(
        io.BytesIO(visual),
        media_type="image/png",
        headers={"Content-Disposition": "attachment; filename=destiny.png"}
    )


@app.post("/api/enhanced")
async def get_enhanced(
    request: BirthDateRequest,
    provider: DestinyInsightProvider = Depends(get_insights)
):
    """Расширенные инсайты от настроенного провайдера"""
    try:
        birth_date = BirthData(birth_date=request.birth_date).birth_date
    except ValueError as e:
        raise bad_request(e)

    async with provider:
        enhanced = await provider.get_enhanced_destiny(birth_date)
    return {
        "success": True,
        "data": enhanced.model_dump()
    }


@app.post("/api/palm")
async def analyze_palm(
    image: UploadFile = File(...),
    advanced: bool = Form(False),
    analyzer: PalmAnalysisProvider = Depends(get_palm)
):
    """Анализ фотографии ладони"""
    content = await image.read()
    if not content:
        raise HTTPException(status_code=400, detail="Empty image upload")
    if len(content) > settings.max_upload_size:
        raise HTTPException(status_code=413, detail="Image is too large")

    async with analyzer:
        analysis = await analyzer.analyze(content, advanced=advanced)
    return {
        "success": analysis.success,
        "data": analysis.model_dump()
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
