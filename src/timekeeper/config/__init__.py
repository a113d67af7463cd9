import os


def get_settings_module() -> str:
    # Environment from APP_ENV, defaults to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "timekeeper.config.production"

    if env in {"test", "testing"}:
        return "timekeeper.config.testing"

    return "timekeeper.config.development"
