import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        self.app_name = "StudentDesk"
        self.api_version = "1.0.0"
        self.environment = os.getenv("STUDENTDESK_ENVIRONMENT", "development")
        self.database_url = os.getenv("STUDENTDESK_DATABASE_URL", "sqlite:///./studentdesk.db")
        self.log_level = os.getenv("STUDENTDESK_LOG_LEVEL", "INFO").upper()
        self.seed_sample_data = _env_flag("STUDENTDESK_SEED_SAMPLE_DATA", True)
        self.cors_origins = ["*"]


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
