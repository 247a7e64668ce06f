import os


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    def __init__(self):
        self.app_name = "Acme Invoice Dashboard"
        self.api_version = "1.0.0"
        self.environment = os.getenv("ENVIRONMENT", "development")
        self.secret_key = os.getenv("SECRET_KEY", "CHANGE_ME")
        self.SECRET_KEY = self.secret_key
        self.access_token_expire_minutes = 60
        self.ACCESS_TOKEN_EXPIRE_MINUTES = self.access_token_expire_minutes
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./dashboard.db")
        self.session_cookie_name = "session"
        self.login_path = "/login"
        self.dashboard_path = "/dashboard"
        self.invoices_path = "/dashboard/invoices"
        self.items_per_page = 6
        # Reuse the customer id as the invoice id, as the first release did.
        self.legacy_invoice_ids = _env_flag("LEGACY_INVOICE_IDS")


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
