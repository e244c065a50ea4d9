import os

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings

DEFAULT_TIMEOUT_MS = 30000


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-flash-latest"
    gemini_timeout_ms: int = DEFAULT_TIMEOUT_MS
    gemini_temperature: float = 0.3
    gemini_max_output_tokens: int = 4096

    # Model names pinged by GET /check-models
    probe_models: list[str] = [
        "gemini-1.5-pro",
        "gemini-1.5-flash",
        "gemini-flash-latest",
        "gemini-1.0-pro",
        "gemini-pro",
        "gemini-pro-vision",
    ]
    max_concurrent_completions: int = 0  # 0 = unbounded

    max_upload_size_mb: int = 5
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("gemini_timeout_ms")
    @classmethod
    def _default_non_positive_timeout(cls, value: int) -> int:
        return value if value > 0 else DEFAULT_TIMEOUT_MS


class ConfigDiagnostic(BaseModel):
    level: str
    setting: str
    message: str


def validate_settings(s: Settings) -> list[ConfigDiagnostic]:
    """Check settings once at startup. Never raises; problems come back as diagnostics."""
    diagnostics = []
    if not s.gemini_api_key:
        diagnostics.append(ConfigDiagnostic(
            level="warning",
            setting="GEMINI_API_KEY",
            message="GEMINI_API_KEY not set. Gemini requests will fail and analyses will be degraded.",
        ))
    if s.max_concurrent_completions < 0:
        diagnostics.append(ConfigDiagnostic(
            level="warning",
            setting="MAX_CONCURRENT_COMPLETIONS",
            message="Negative value ignored; outbound completion calls are unbounded.",
        ))
    if s.max_upload_size_mb <= 0:
        diagnostics.append(ConfigDiagnostic(
            level="warning",
            setting="MAX_UPLOAD_SIZE_MB",
            message="Non-positive upload limit rejects every PDF upload.",
        ))
    return diagnostics


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
