"""Shared test setup: dummy credentials so the app can be imported without a real key."""
import asyncio
import os

import pytest

os.environ.setdefault("GOOGLE_API_KEY", "test-google-key")
os.environ.setdefault("GRADIO_ANALYTICS_ENABLED", "False")

from mvp_creator import ai_services  # noqa: E402
from mvp_creator.config import Settings  # noqa: E402

FENCED_REPLY = "```html\n<!DOCTYPE html><html></html>\n```"


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "test-google-key")
    monkeypatch.delenv("TOGETHER_API_KEY", raising=False)
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
    s = Settings()
    ai_services.configure(s)
    return s


@pytest.fixture
def fake_service(monkeypatch):
    """Replaces the outbound call; set .reply or .error and inspect .calls."""

    class FakeService:
        def __init__(self):
            self.reply = FENCED_REPLY
            self.error = None
            self.calls = []

        async def __call__(self, prompt, model_key):
            self.calls.append((prompt, model_key))
            # Suspend like a real network call would.
            await asyncio.sleep(0)
            if self.error is not None:
                raise self.error
            return self.reply

    service = FakeService()
    monkeypatch.setattr(ai_services, "generate_code", service)
    return service
