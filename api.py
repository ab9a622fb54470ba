"""
Number Words — FastAPI Server
=============================

RESTful API for spelling numbers in words.

Endpoints:
    POST /convert           Cardinal words for a number
    POST /ordinal           Ordinal words for a positive whole number
    GET  /languages         Supported languages and their options
    GET  /health            Health check and version

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)

Values are sent as JSON strings or numbers. Send large or precise values as
strings: JSON numbers pass through a float and lose digits beyond 2**53.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictFloat, StrictInt

from number_words import __version__
from number_words.config import configure_logging, load_settings
from number_words.converter import NumberConverter
from number_words.exceptions import NumberWordsError
from number_words.languages import LANGUAGES

# ─── Load .env ───────────────────────────────────────────────────────
load_dotenv()
configure_logging()


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Words API",
    description=(
        "Spell numbers in words across languages. Arbitrary-precision integers, "
        "exact decimals, gender and plural agreement, and ordinals."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for /convert and /ordinal."""

    value: Union[StrictInt, StrictFloat, str] = Field(
        ...,
        description="The number to spell. Use a string for decimals and very large values.",
        json_schema_extra={"example": "1234567.89"},
    )
    lang: Optional[str] = Field(
        default=None,
        description="Language code (BCP-47 style, e.g. 'en', 'ru-RU'). Defaults to the server setting.",
        json_schema_extra={"example": "en"},
    )
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Language options, e.g. {'gender': 'feminine'}.",
    )


class ConvertResponse(BaseModel):
    value: str
    lang: str
    words: str


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class LanguageOut(BaseModel):
    code: str
    name: str
    options: list[str]
    ordinals: bool
    max_digits: int


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int


# ─── Error Mapping ───────────────────────────────────────────────────


@app.exception_handler(NumberWordsError)
async def number_words_error_handler(request: Request, exc: NumberWordsError) -> JSONResponse:
    """Every domain error becomes a 422 with its machine-readable code."""
    body = ErrorResponse(code=exc.code, message=str(exc), details=_jsonable(exc.details))
    return JSONResponse(status_code=422, content=body.model_dump())


def _jsonable(details: dict) -> dict:
    return {
        key: value if value is None or isinstance(value, (str, int, float, bool, list, dict)) else str(value)
        for key, value in details.items()
    }


def _converter(lang: Optional[str]) -> NumberConverter:
    return NumberConverter(lang or load_settings().default_lang)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell a number as cardinal words",
    tags=["Conversion"],
    responses={422: {"model": ErrorResponse, "description": "Invalid value, option or language"}},
)
def convert_number(request: ConvertRequest) -> ConvertResponse:
    """Return the cardinal words for `value`, e.g. "one hundred one"."""
    converter = _converter(request.lang)
    words = converter.convert(request.value, request.options)
    return ConvertResponse(value=str(request.value), lang=converter.language.code, words=words)


@app.post(
    "/ordinal",
    summary="Spell a positive whole number as ordinal words",
    tags=["Conversion"],
    responses={422: {"model": ErrorResponse, "description": "Not a positive whole number, or no ordinals"}},
)
def ordinal_number(request: ConvertRequest) -> ConvertResponse:
    """Return the ordinal words for `value`, e.g. "twenty-first"."""
    converter = _converter(request.lang)
    words = converter.ordinal(request.value, request.options)
    return ConvertResponse(value=str(request.value), lang=converter.language.code, words=words)


@app.get("/languages", summary="List supported languages", tags=["System"])
def list_languages() -> list[LanguageOut]:
    return [
        LanguageOut(
            code=language.code,
            name=language.name,
            options=language.option_names,
            ordinals=language.supports_ordinals,
            max_digits=language.digit_limit,
        )
        for language in LANGUAGES.values()
    ]


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(status="healthy", version=__version__, languages_loaded=len(LANGUAGES))
