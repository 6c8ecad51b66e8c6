# qrmenu/core/config.py
import os

from dotenv import load_dotenv

# .env.production wins when present, else the default .env
if os.path.exists(".env.production"):
    load_dotenv(".env.production")
else:
    load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./qrmenu.db")
SQL_ECHO = _as_bool(os.getenv("SQL_ECHO", "false"))

# External QR image service, reached only through URL templating
QR_CODE_SERVICE_URL = os.getenv("QR_CODE_SERVICE_URL", "https://api.qrserver.com/v1/create-qr-code/")
QR_CODE_SIZE = os.getenv("QR_CODE_SIZE", "200x200")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
