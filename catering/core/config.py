# catering/core/config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return str(value).strip().lower() in ("true", "1", "t", "yes")


def _as_list(value: str) -> list[str]:
    return [part.strip() for part in (value or "").split(",") if part.strip()]


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Catering Orders API")

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL")
    AUTO_CREATE_TABLES: bool = _as_bool(os.getenv("AUTO_CREATE_TABLES", "true"))

    # Identity provider (hosted auth, bearer tokens are verified against it)
    SUPABASE_URL: str = os.getenv("SUPABASE_URL")
    SUPABASE_ANON_KEY: str = os.getenv("SUPABASE_ANON_KEY")
    SUPABASE_SERVICE_ROLE_KEY: str = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
    IDENTITY_TIMEOUT_SECONDS: float = float(os.getenv("IDENTITY_TIMEOUT_SECONDS", "5"))

    # Admin allow-list, comma separated emails
    ADMIN_EMAILS: list[str] = _as_list(os.getenv("ADMIN_EMAILS", ""))

    # Order intake: off keeps the best-effort side records, on makes the chain all-or-nothing
    ORDER_INTAKE_ATOMIC: bool = _as_bool(os.getenv("ORDER_INTAKE_ATOMIC", "false"))

    CORS_ORIGINS: list[str] = _as_list(os.getenv("CORS_ORIGINS", "*"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def identity_api_key(self) -> str | None:
        return self.SUPABASE_SERVICE_ROLE_KEY or self.SUPABASE_ANON_KEY


settings = Settings()
