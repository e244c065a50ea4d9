import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.router import router
from config import settings, validate_settings
from services.errors import InvalidRequestError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate configuration once at startup and keep the diagnostics for /health."""
    diagnostics = validate_settings(settings)
    for d in diagnostics:
        logger.warning("Config %s: %s", d.setting, d.message)
    app.state.config_diagnostics = diagnostics
    logger.info("Using model %s with %d ms timeout", settings.gemini_model, settings.gemini_timeout_ms)
    yield


app = FastAPI(
    title="Resume ATS Analyzer API",
    description="LLM-scored resume fit against a job description",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidRequestError)
async def invalid_request_handler(request: Request, exc: InvalidRequestError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port)
