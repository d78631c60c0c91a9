_ENVIRONMENTS = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: str = "development") -> str:
    # Anything unrecognised falls back to development
    return _ENVIRONMENTS.get((env or "").strip().lower(), "config.development")
