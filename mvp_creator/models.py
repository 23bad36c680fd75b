# mvp_creator/models.py

# Every model the service can call, its display name, the provider that serves it,
# and the exact ID that provider expects. This is the single source of truth.
MODELS = {
    "gemini-2.5-flash": {
        "label": "Gemini 2.5 Flash",
        "api_provider": "google",
        "api_id": "gemini-2.5-flash",
    },
    "glm-4.5-air": {
        "label": "GLM 4.5 Air",
        "api_provider": "together",
        "api_id": "zai-org/GLM-4.5-Air-FP8", # The specific ID for Together.ai
    },
}

DEFAULT_MODEL = "gemini-2.5-flash"

PROVIDERS = {
    "google": {"name": "Google AI", "credential": "GOOGLE_API_KEY"},
    "together": {"name": "Together AI", "credential": "TOGETHER_API_KEY"},
}


def available_models(settings) -> dict:
    """Models whose provider has a credential configured."""
    return {
        key: config
        for key, config in MODELS.items()
        if getattr(settings, PROVIDERS[config["api_provider"]]["credential"], None)
    }
