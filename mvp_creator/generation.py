# mvp_creator/generation.py
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

from mvp_creator import ai_services
from mvp_creator.errors import (
    GenerationError,
    InvalidIdeaError,
    ResponseParseError,
    SERVICE_FAILURE_MESSAGE,
)
from mvp_creator.models import DEFAULT_MODEL
from mvp_creator.prompts import create_prompt
from mvp_creator.utils import parse_generated_code


class CycleStatus(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ViewMode(str, Enum):
    PREVIEW = "preview"
    CODE = "code"


def validate_idea(product_idea: str | None) -> str:
    if not product_idea or not product_idea.strip():
        raise InvalidIdeaError()
    return product_idea


async def generate_landing_page(product_idea: str, model_key: str = DEFAULT_MODEL) -> str:
    """
    Builds the prompt, makes exactly one completion request, and extracts the document.

    Every failure leaves as a GenerationError. A parse failure keeps its own message;
    transport and service failures collapse into one generic message, with the detail
    logged here and chained on the exception.
    """
    try:
        prompt = create_prompt(product_idea)
        raw_code = await ai_services.generate_code(prompt, model_key)
        return parse_generated_code(raw_code)
    except ResponseParseError as e:
        print(f"ERROR generating landing page: {e}")
        raise GenerationError(str(e)) from e
    except Exception as e:
        print(f"ERROR generating landing page: {e}")
        raise GenerationError(SERVICE_FAILURE_MESSAGE) from e


Generator = Callable[[str], Awaitable[str]]


@dataclass
class GenerationSession:
    """The single current generation cycle and the view the user has open."""

    status: CycleStatus = CycleStatus.IDLE
    document: str | None = None
    error: str | None = None
    view: ViewMode = ViewMode.PREVIEW

    @property
    def is_requesting(self) -> bool:
        return self.status == CycleStatus.REQUESTING

    async def generate(self, product_idea: str | None, generator: Generator = generate_landing_page) -> bool:
        """
        Runs one cycle. Returns False without doing anything when a cycle is already
        in flight; otherwise True, whatever the outcome.
        """
        # Check and flip happen before the first await, so no second cycle can slip in.
        if self.is_requesting:
            print("Warning: Generation already in progress. Ignoring new request.")
            return False

        try:
            idea = validate_idea(product_idea)
        except InvalidIdeaError as e:
            self.document = None
            self.error = str(e)
            self.status = CycleStatus.FAILED
            return True

        self.status = CycleStatus.REQUESTING
        self.document = None
        self.error = None
        try:
            document = await generator(idea)
        except GenerationError as e:
            self.error = str(e)
            self.status = CycleStatus.FAILED
        except Exception as e:
            print(f"ERROR during generation cycle: {e}")
            self.error = SERVICE_FAILURE_MESSAGE
            self.status = CycleStatus.FAILED
        else:
            self.document = document
            self.view = ViewMode.PREVIEW
            self.status = CycleStatus.SUCCEEDED
        return True

    def set_view(self, mode: ViewMode | str) -> ViewMode:
        self.view = ViewMode(mode)
        return self.view

    def snapshot(self) -> dict:
        return {
            "status": self.status.value,
            "document": self.document,
            "error": self.error,
            "view": self.view.value,
        }
