# dafurn/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Dafurn Exchange API"
    LANDING_TEXT: str = "Dafurn Exchange Backend Running"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3002"))
    log_level: str = os.getenv("LOG_LEVEL", "info").lower()

    # Database connection string (Tortoise URL format)
    # No default on purpose: a missing DATABASE_URL stops startup
    database_url: str | None = os.getenv("DATABASE_URL") or None

    # Create missing tables at startup (there is no migration tooling)
    generate_schemas: bool = os.getenv("GENERATE_SCHEMAS", "true").lower() in ("true", "1", "yes")

settings = Settings()  # Instantiate configuration
