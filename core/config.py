import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Database - SQLite file under DATA_DIR unless overridden
    DATABASE_URL: str = "sqlite:///./data/calendar.db"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False  # Default to False for security
    LOG_LEVEL: str = "INFO"

    # Local data (backups live under DATA_DIR/backups unless overridden)
    DATA_DIR: str = "./data"
    BACKUP_DIR: str = ""
    BACKUP_KEEP: int = 10

    # Holiday provider: "nager" (remote Nager.Date API) or "local" (python-holidays)
    HOLIDAY_PROVIDER: str = "nager"
    HOLIDAY_API_URL: str = "https://date.nager.at/api/v3/PublicHolidays/{year}/{country}"
    HOLIDAY_FETCH_TIMEOUT: float = 10.0
    HOLIDAY_STALE_HOURS: int = 24
    DEFAULT_COUNTRY: str = "US"

    # Custom emoji uploads
    EMOJI_MAX_BYTES: int = 256 * 1024

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    # Frontend
    FRONTEND_URL: str = "http://localhost:3000"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def backup_path(self) -> Path:
        if self.BACKUP_DIR:
            return Path(self.BACKUP_DIR)
        return Path(self.DATA_DIR) / "backups"

    def validate_production_settings(self) -> None:
        """Validate critical settings for production environment.

        Raises ValueError if production settings are invalid.
        """
        errors = []

        if self.is_production:
            if self.DEBUG:
                errors.append("DEBUG must be False in production")

            if self.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
                errors.append("DATABASE_URL must point to a durable database in production")

            if self.BACKUP_KEEP < 1:
                errors.append("BACKUP_KEEP must be at least 1 in production")

        if self.HOLIDAY_PROVIDER not in ("nager", "local"):
            errors.append(f"HOLIDAY_PROVIDER must be 'nager' or 'local', got '{self.HOLIDAY_PROVIDER}'")

        if errors:
            raise ValueError(
                "Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors)
            )

    def validate_development_settings(self) -> None:
        """Set sensible defaults for development if not configured."""
        data_dir = Path(self.DATA_DIR)
        if not data_dir.exists():
            data_dir.mkdir(parents=True, exist_ok=True)
            logger.warning(f"Created data directory for development: {data_dir}")

        if self.HOLIDAY_PROVIDER not in ("nager", "local"):
            logger.warning(
                f"Unknown HOLIDAY_PROVIDER '{self.HOLIDAY_PROVIDER}', falling back to 'nager'"
            )
            self.HOLIDAY_PROVIDER = "nager"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Create settings instance
settings = Settings()

# Validate based on environment
if settings.is_production:
    settings.validate_production_settings()
else:
    settings.validate_development_settings()
