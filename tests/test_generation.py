"""Tests for the generation orchestration and the single-cycle session."""

import asyncio

import pytest

from mvp_creator.errors import (
    GenerationError,
    INVALID_IDEA_MESSAGE,
    PARSE_FAILURE_MESSAGE,
    SERVICE_FAILURE_MESSAGE,
    ServiceError,
)
from mvp_creator.generation import (
    CycleStatus,
    GenerationSession,
    ViewMode,
    generate_landing_page,
)
from mvp_creator.models import DEFAULT_MODEL

DOCUMENT = "<!DOCTYPE html><html></html>"


def test_generate_landing_page_end_to_end(fake_service):
    document = asyncio.run(generate_landing_page("A scheduling app for dentists"))

    assert document == DOCUMENT
    assert len(fake_service.calls) == 1
    prompt, model_key = fake_service.calls[0]
    assert 'Product Idea: "A scheduling app for dentists"' in prompt
    assert model_key == DEFAULT_MODEL


def test_parse_failure_keeps_specific_message(fake_service):
    fake_service.reply = "Sorry, I cannot help with that."
    with pytest.raises(GenerationError) as excinfo:
        asyncio.run(generate_landing_page("idea"))
    assert str(excinfo.value) == PARSE_FAILURE_MESSAGE


def test_service_failure_is_normalized(fake_service):
    fake_service.error = ServiceError("Google AI service error: 503 upstream exploded")
    with pytest.raises(GenerationError) as excinfo:
        asyncio.run(generate_landing_page("idea"))
    assert str(excinfo.value) == SERVICE_FAILURE_MESSAGE
    assert isinstance(excinfo.value.__cause__, ServiceError)


def test_unexpected_failure_is_normalized(fake_service):
    fake_service.error = ConnectionResetError("peer reset")
    with pytest.raises(GenerationError) as excinfo:
        asyncio.run(generate_landing_page("idea"))
    assert str(excinfo.value) == SERVICE_FAILURE_MESSAGE


def test_session_success_defaults_to_preview(fake_service):
    session = GenerationSession()
    session.set_view("code")

    started = asyncio.run(session.generate("A scheduling app for dentists"))

    assert started is True
    assert session.status == CycleStatus.SUCCEEDED
    assert session.document == DOCUMENT
    assert session.error is None
    assert session.view == ViewMode.PREVIEW


def test_session_parse_failure_sets_no_document(fake_service):
    fake_service.reply = "Sorry, I cannot help with that."
    session = GenerationSession()

    asyncio.run(session.generate("A scheduling app for dentists"))

    assert session.status == CycleStatus.FAILED
    assert session.error == PARSE_FAILURE_MESSAGE
    assert session.document is None


@pytest.mark.parametrize("idea", ["", "   \n\t", None])
def test_session_rejects_blank_idea_before_any_call(fake_service, idea):
    session = GenerationSession()

    asyncio.run(session.generate(idea))

    assert fake_service.calls == []
    assert session.status == CycleStatus.FAILED
    assert session.error == INVALID_IDEA_MESSAGE


def test_new_cycle_replaces_previous_result(fake_service):
    session = GenerationSession()
    asyncio.run(session.generate("first"))
    assert session.document == DOCUMENT

    fake_service.reply = "no html here"
    asyncio.run(session.generate("second"))

    assert session.status == CycleStatus.FAILED
    assert session.document is None

    fake_service.reply = "<!DOCTYPE html><p>again</p>"
    asyncio.run(session.generate("third"))

    assert session.status == CycleStatus.SUCCEEDED
    assert session.error is None
    assert session.document == "<!DOCTYPE html><p>again</p>"


def test_second_cycle_while_requesting_is_a_no_op():
    calls = []

    async def scenario():
        release = asyncio.Event()

        async def slow_generator(idea):
            calls.append(idea)
            await release.wait()
            return DOCUMENT

        session = GenerationSession()
        first = asyncio.ensure_future(session.generate("first idea", slow_generator))
        await asyncio.sleep(0)
        assert session.status == CycleStatus.REQUESTING

        started = await session.generate("second idea", slow_generator)
        assert started is False
        assert session.status == CycleStatus.REQUESTING

        release.set()
        assert await first is True
        return session

    session = asyncio.run(scenario())
    assert calls == ["first idea"]
    assert session.status == CycleStatus.SUCCEEDED


def test_generator_exceptions_never_escape_the_session():
    async def broken(idea):
        raise RuntimeError("boom")

    session = GenerationSession()
    asyncio.run(session.generate("idea", broken))

    assert session.status == CycleStatus.FAILED
    assert session.error == SERVICE_FAILURE_MESSAGE


def test_snapshot_and_view_toggle():
    session = GenerationSession()
    assert session.snapshot() == {"status": "idle", "document": None, "error": None, "view": "preview"}

    assert session.set_view(ViewMode.CODE) == ViewMode.CODE
    assert session.snapshot()["view"] == "code"

    with pytest.raises(ValueError):
        session.set_view("split")
