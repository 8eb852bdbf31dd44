import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unknown falls back to development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "hr_portal.config.production"

    if env in {"test", "testing"}:
        return "hr_portal.config.testing"

    return "hr_portal.config.development"
