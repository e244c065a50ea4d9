import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse

from api.dependencies import get_completion_provider, get_provider_factory
from config import settings
from models.requests import AnalyzeTextRequest
from models.responses import AnalysisResult, HealthResponse, ModelCheckReport
from services import diagnostics, gemini_client, pdf_parser, resume_analyzer
from services.errors import AnalysisError, InvalidRequestError
from services.gemini_client import CompletionProvider

logger = logging.getLogger(__name__)

router = APIRouter()


async def _respond(
    resume_text: str | None,
    job_description: str | None,
    provider: CompletionProvider,
) -> AnalysisResult | JSONResponse:
    outcome = await resume_analyzer.analyze(resume_text, job_description, provider=provider)
    if outcome.degraded:
        return JSONResponse(status_code=500, content=outcome.result.model_dump(by_alias=True))
    return outcome.result


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Backend running"


@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    config_diagnostics = getattr(request.app.state, "config_diagnostics", [])
    return HealthResponse(
        gemini_configured=bool(settings.gemini_api_key),
        model=settings.gemini_model,
        timeout_ms=settings.gemini_timeout_ms,
        diagnostics=[d.model_dump() for d in config_diagnostics],
    )


@router.post("/analyze-text", response_model=AnalysisResult)
async def analyze_text(
    body: AnalyzeTextRequest | None = None,
    provider: CompletionProvider = Depends(get_completion_provider),
):
    logger.info("Analyze-text request received")
    body = body or AnalyzeTextRequest()
    return await _respond(body.resume_text, body.job_description, provider)


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(
    resume: UploadFile | None = File(None),
    job_description: str | None = Form(None, alias="jobDescription"),
    provider: CompletionProvider = Depends(get_completion_provider),
):
    logger.info("Analyze request received")
    if resume is None or not job_description:
        raise InvalidRequestError("Resume and Job Description required")

    content = await resume.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise InvalidRequestError(f"File too large. Max size: {settings.max_upload_size_mb}MB")

    resume_text = pdf_parser.extract_text(content)
    if not resume_text.strip():
        raise InvalidRequestError("No text could be extracted from PDF")

    return await _respond(resume_text, job_description, provider)


@router.get("/check-model")
async def check_model(provider: CompletionProvider = Depends(get_completion_provider)):
    logger.info("Checking Gemini model connectivity")
    try:
        info = await diagnostics.check_model(provider, settings.gemini_timeout_ms)
    except AnalysisError as e:
        logger.error("Model check failed: %s", e)
        return JSONResponse(status_code=502, content={"status": "error", "message": str(e)})
    return {"status": "ok", "info": info[:1000]}


@router.get("/check-models", response_model=ModelCheckReport, response_model_exclude_none=True)
async def check_models(
    provider_factory: Callable[[str], CompletionProvider] = Depends(get_provider_factory),
):
    logger.info("Checking %d Gemini models", len(settings.probe_models))
    results = await diagnostics.check_models(
        settings.probe_models, provider_factory, settings.gemini_timeout_ms
    )
    return ModelCheckReport(results=results)


@router.get("/list-models")
async def list_models():
    logger.info("Listing available models")
    if not settings.gemini_api_key:
        return JSONResponse(status_code=400, content={"error": "GEMINI_API_KEY not set"})
    try:
        models = await gemini_client.list_models()
    except Exception as e:
        logger.error("List models failed: %s", e)
        return JSONResponse(status_code=502, content={"status": "error", "message": str(e)})
    return {"models": models}
