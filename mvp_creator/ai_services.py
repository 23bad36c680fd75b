# mvp_creator/ai_services.py
import asyncio
from openai import AsyncOpenAI
import google.generativeai as genai
from mvp_creator.config import Settings
from mvp_creator.errors import ServiceError
from mvp_creator.models import MODELS, PROVIDERS

TOGETHER_BASE_URL = "https://api.together.xyz/v1"

# --- Client Setup ---
_settings: Settings | None = None
together_client: AsyncOpenAI | None = None


def configure(settings: Settings) -> None:
    """Binds provider credentials. Must run once before generate_code is awaited."""
    global _settings, together_client
    _settings = settings
    genai.configure(api_key=settings.GOOGLE_API_KEY)
    together_client = (
        AsyncOpenAI(api_key=settings.TOGETHER_API_KEY, base_url=TOGETHER_BASE_URL)
        if settings.TOGETHER_API_KEY
        else None
    )


def _require_settings() -> Settings:
    if _settings is None:
        raise ServiceError("AI services are not configured.")
    return _settings


# --- Private API Call Functions ---
async def _generate_with_google(prompt: str, model_api_id: str) -> str:
    settings = _require_settings()
    try:
        model = genai.GenerativeModel(model_api_id)
        response = await model.generate_content_async(
            prompt,
            generation_config={
                "temperature": settings.TEMPERATURE,
                "max_output_tokens": settings.MAX_OUTPUT_TOKENS,
            },
        )
        return response.text
    except Exception as e:
        print(f"Google AI Error: {e}")
        raise ServiceError(f"Google AI service error: {str(e)}") from e


async def _generate_with_together(prompt: str, model_api_id: str) -> str:
    settings = _require_settings()
    if together_client is None:
        raise ServiceError("Together API key not configured.")
    try:
        response = await together_client.chat.completions.create(
            model=model_api_id,
            messages=[{"role": "user", "content": prompt}],
            temperature=settings.TEMPERATURE,
            max_tokens=settings.MAX_OUTPUT_TOKENS,
            stream=False,
        )
        return response.choices[0].message.content or ""
    except Exception as e:
        print(f"Together AI Error: {e}")
        raise ServiceError(f"Together AI service error: {str(e)}") from e


PROVIDER_MAP = {
    "google": _generate_with_google,
    "together": _generate_with_together,
}


# --- Public Dispatcher ---
async def generate_code(prompt: str, model_key: str) -> str:
    """Sends the prompt as one non-streamed completion request and returns the reply text."""
    settings = _require_settings()
    model_config = MODELS.get(model_key)
    if not model_config:
        raise ServiceError(f"Invalid model key: {model_key}")

    provider_func = PROVIDER_MAP.get(model_config["api_provider"])
    if not provider_func:
        raise ServiceError(f"Unknown provider for model '{model_key}'")

    print(f"INFO: Requesting completion from {PROVIDERS[model_config['api_provider']]['name']} ({model_config['api_id']}).")
    request = provider_func(prompt, model_config["api_id"])
    if settings.REQUEST_TIMEOUT > 0:
        try:
            return await asyncio.wait_for(request, timeout=settings.REQUEST_TIMEOUT)
        except asyncio.TimeoutError as e:
            raise ServiceError(f"Generation request timed out after {settings.REQUEST_TIMEOUT}s") from e
    return await request
