# journal_analyzer/core/config.py
from pathlib import Path
import os
from typing import Dict

from dotenv import load_dotenv

from journal_analyzer.exceptions import ConfigError

# project root (the directory holding pyproject.toml)
BASE_DIR = Path(__file__).resolve().parents[2]
PACKAGE_DIR = BASE_DIR / "journal_analyzer"

ENV_PATH = BASE_DIR / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)

# LOG_LEVEL in .env, INFO by default
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS_ORIGINS="http://localhost:3000,http://127.0.0.1:8000"
# unset -> allow everything (["*"])
_cors_raw = os.getenv("CORS_ORIGINS", "")
if _cors_raw:
    CORS_ORIGINS = [o.strip() for o in _cors_raw.split(",") if o.strip()]
else:
    CORS_ORIGINS = ["*"]

# writable category catalog; seeded from the packaged file when missing
CATEGORY_CATALOG_PATH = Path(
    os.getenv("CATEGORY_CATALOG_PATH", str(BASE_DIR / "data" / "categories.yaml"))
)

VALID_ROLES = ("user", "admin")


def load_api_tokens() -> Dict[str, str]:
    """
    Parse API_TOKENS into a {token: role} mapping.

    Format: API_TOKENS="s3cret:user,adm1n:admin"
    Read on every call so tokens can be rotated without a restart.
    """
    raw = os.getenv("API_TOKENS", "")
    tokens: Dict[str, str] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        token, sep, role = item.rpartition(":")
        token, role = token.strip(), role.strip().lower()
        if not sep or not token or role not in VALID_ROLES:
            raise ConfigError(
                f"Malformed API_TOKENS entry {item!r}; expected '<token>:user' or '<token>:admin'."
            )
        tokens[token] = role
    return tokens
