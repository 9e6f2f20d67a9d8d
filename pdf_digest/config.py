from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List
import os

from dotenv import load_dotenv

from pdf_digest.errors import ConfigError

ROOT_DIR = Path(__file__).resolve().parents[1]
ENV_PATH = ROOT_DIR / ".env"

REQUIRED_VARS = ["OPENAI_API_KEY", "RESULTS_FILE", "PDFS_DIR"]

# Defaults for the optional settings
DEFAULT_BATCH_SIZE = 3
DEFAULT_MAX_TEXT_LENGTH = 3000
DEFAULT_MODEL = "gpt-4o"
DEFAULT_EXTRACTION_TEMPERATURE = 0.3
DEFAULT_SYNTHESIS_TEMPERATURE = 0.5
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class DigestConfig:
    api_key: str
    results_file: str
    pdfs_dir: str
    batch_size: int = DEFAULT_BATCH_SIZE
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    model: str = DEFAULT_MODEL
    extraction_temperature: float = DEFAULT_EXTRACTION_TEMPERATURE
    synthesis_temperature: float = DEFAULT_SYNTHESIS_TEMPERATURE
    log_level: str = DEFAULT_LOG_LEVEL


def _positive_int(env: Dict[str, str], key: str, default: int) -> int:
    raw = (env.get(key) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"{key} must be at least 1, got {value}")
    return value


def _float(env: Dict[str, str], key: str, default: float) -> float:
    raw = (env.get(key) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from None


# Build config from a mapping (os.environ by default)
def config_from_env(env: Dict[str, str] | None = None) -> DigestConfig:
    if env is None:
        env = dict(os.environ)

    missing: List[str] = [v for v in REQUIRED_VARS if not (env.get(v) or "").strip()]
    if missing:
        raise ConfigError(f"Missing required environment variable(s): {', '.join(missing)}")

    return DigestConfig(
        api_key=env["OPENAI_API_KEY"].strip(),
        results_file=env["RESULTS_FILE"].strip(),
        pdfs_dir=env["PDFS_DIR"].strip(),
        batch_size=_positive_int(env, "BATCH_SIZE", DEFAULT_BATCH_SIZE),
        max_text_length=_positive_int(env, "MAX_TEXT_LENGTH", DEFAULT_MAX_TEXT_LENGTH),
        model=(env.get("OPENAI_MODEL") or "").strip() or DEFAULT_MODEL,
        extraction_temperature=_float(env, "EXTRACTION_TEMPERATURE", DEFAULT_EXTRACTION_TEMPERATURE),
        synthesis_temperature=_float(env, "SYNTHESIS_TEMPERATURE", DEFAULT_SYNTHESIS_TEMPERATURE),
        log_level=(env.get("LOG_LEVEL") or "").strip() or DEFAULT_LOG_LEVEL,
    )


# Load .env then validate
def load_config(env_path: str | Path | None = None) -> DigestConfig:
    load_dotenv(env_path or ENV_PATH)
    return config_from_env()
