from functools import lru_cache
from pathlib import Path
from typing import Optional
import logging
import os

from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.extract_text import ExtractionError, FetchError, extract_text, fetch_url_text
from pipelines.genai_pipeline import Summarizer
from utils.config import Settings

# ---------- project paths / logging ----------
PROJECT_ROOT = Path(__file__).resolve().parents[1]
STATIC_DIR = PROJECT_ROOT / "app" / "static"

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="[%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

MIN_TEXT_CHARS = 20

app = FastAPI(title="Laymans Terms (T&C → plain English)")

# CORS (optional)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- singletons ----------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_summarizer() -> Summarizer:
    settings = get_settings()
    if not settings.has_credential:
        logger.warning("OPENAI_API_KEY not set; summaries will use the fallback document")
    return Summarizer(settings)


# ---------- error payloads ----------
@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse({"error": "Invalid input"}, status_code=400)


class SummarizeRequest(BaseModel):
    text: str = Field(..., min_length=MIN_TEXT_CHARS)


class SummarizeResponse(BaseModel):
    html: str


class TextResponse(BaseModel):
    text: str


@app.get("/api/health")
def health(settings: Settings = Depends(get_settings)):
    return {"ok": True, "credential": settings.has_credential}


@app.post("/api/summarize", response_model=SummarizeResponse)
def summarize(payload: SummarizeRequest, summarizer: Summarizer = Depends(get_summarizer)):
    result = summarizer.summarize(payload.text)
    logger.info("Summary served from %s path", result.source.value)
    return SummarizeResponse(html=result.html)


@app.get("/api/fetch", response_model=TextResponse)
def fetch(url: Optional[str] = None, settings: Settings = Depends(get_settings)):
    if not url:
        raise HTTPException(status_code=400, detail="Missing url")
    try:
        text = fetch_url_text(url, timeout=settings.fetch_timeout, limit=settings.max_extract_chars)
    except FetchError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return TextResponse(text=text)


@app.post("/api/upload", response_model=TextResponse)
async def upload(file: Optional[UploadFile] = File(None), settings: Settings = Depends(get_settings)):
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file")
    data = await file.read()
    try:
        text = extract_text(data, file.filename, file.content_type, limit=settings.max_extract_chars)
    except ExtractionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return TextResponse(text=text)


@app.get("/")
def index():
    return FileResponse(STATIC_DIR / "index.html")

app.mount(
    "/static",
    StaticFiles(directory=STATIC_DIR),
    name="static",
)
