import os

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
ANTHROPIC_API_BASE = os.getenv("ANTHROPIC_API_BASE", "https://api.anthropic.com/v1")
ANTHROPIC_VERSION = os.getenv("ANTHROPIC_VERSION", "2023-06-01")
STYLE_MODEL = os.getenv("STYLE_MODEL", "claude-3-7-sonnet-20250219")
SEARCH_MODEL = os.getenv("SEARCH_MODEL", "claude-3-7-sonnet-20250219")

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_API_BASE = os.getenv("OPENAI_API_BASE", "https://api.openai.com/v1")
OPENAI_KEYWORD_MODEL = os.getenv("OPENAI_KEYWORD_MODEL", "gpt-4o")
OPENAI_IMAGE_MODEL = os.getenv("OPENAI_IMAGE_MODEL", "gpt-image-1")

VENDOR_TIMEOUT_SECONDS = float(os.getenv("VENDOR_TIMEOUT_SECONDS", "120"))
UPLOAD_ENCODE_WORKERS = int(os.getenv("UPLOAD_ENCODE_WORKERS", "4"))

APP_ENV = os.getenv("APP_ENV", "production").strip().lower()
DEBUG_DUMP_DIR = os.getenv("DEBUG_DUMP_DIR", "debug")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
