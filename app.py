# app.py
import asyncio
import functools
import html
import tempfile

import gradio as gr

from mvp_creator.config import Settings
from mvp_creator.generation import (
    CycleStatus,
    GenerationSession,
    ViewMode,
    generate_landing_page,
)
from mvp_creator.models import available_models
from mvp_creator.utils import save_document

WELCOME_MESSAGE = "### Welcome to MVP Creator\nYour generated landing page will appear here."
GENERATING_MESSAGE = "### Generating your landing page...\nThis might take a moment."
IDEA_PLACEHOLDER = (
    "e.g., An AI-powered app that generates personalized workout plans "
    "based on user goals and available equipment."
)
GENERATE_LABEL = "✨ Generate Landing Page"
GENERATING_LABEL = "Generating..."

VIEW_CHOICES = [("Preview", ViewMode.PREVIEW.value), ("Code", ViewMode.CODE.value)]


# --- Rendering Helpers ---
def render_preview(document: str | None) -> str:
    """Isolated, script-permitted frame for the generated page."""
    if not document:
        return ""
    return (
        f'<iframe srcdoc="{html.escape(document, quote=True)}" title="Landing Page Preview" '
        'sandbox="allow-scripts allow-same-origin" '
        'style="width: 100%; height: 75vh; border: 0;"></iframe>'
    )


def render_status(session: GenerationSession) -> str:
    if session.status == CycleStatus.REQUESTING:
        return GENERATING_MESSAGE
    if session.status == CycleStatus.FAILED:
        return f"### Generation Failed\n{session.error}"
    if session.status == CycleStatus.SUCCEEDED:
        return ""
    return WELCOME_MESSAGE


def render(session: GenerationSession, download_path: str | None = None) -> tuple:
    """Component updates for (state, status, button, view toggle, preview, code, download)."""
    has_document = session.status == CycleStatus.SUCCEEDED and bool(session.document)
    show_preview = has_document and session.view == ViewMode.PREVIEW
    show_code = has_document and session.view == ViewMode.CODE
    return (
        session,
        gr.update(value=render_status(session)),
        gr.update(
            interactive=not session.is_requesting,
            value=GENERATING_LABEL if session.is_requesting else GENERATE_LABEL,
        ),
        gr.update(visible=has_document, value=session.view.value),
        gr.update(visible=show_preview, value=render_preview(session.document)),
        gr.update(visible=show_code, value=session.document or ""),
        gr.update(visible=show_code, value=download_path) if download_path else gr.update(visible=show_code),
    )


# --- Event Handlers ---
async def on_generate(product_idea: str, model_key: str, session: GenerationSession | None):
    session = session or GenerationSession()
    generator = functools.partial(generate_landing_page, model_key=model_key)

    cycle = asyncio.ensure_future(session.generate(product_idea, generator))
    # Let the cycle run up to its outbound call so the "requesting" state is visible.
    await asyncio.sleep(0)
    if session.is_requesting:
        yield render(session)
    await cycle

    download_path = None
    if session.status == CycleStatus.SUCCEEDED and session.document:
        download_path = str(save_document(session.document, tempfile.mkdtemp(prefix="mvp-creator-")))
    yield render(session, download_path)


def on_view_change(view: str, session: GenerationSession | None):
    session = session or GenerationSession()
    session.set_view(view)
    return render(session)


# --- UI Definition ---
def build_ui(settings: Settings) -> gr.Blocks:
    models = available_models(settings)
    model_choices = [(config["label"], key) for key, config in models.items()]

    with gr.Blocks(title="MVP Creator") as demo:
        session_state = gr.State(None)

        with gr.Row():
            with gr.Column(scale=1, min_width=400):
                gr.Markdown(
                    "# MVP Creator\n"
                    "Turn your idea into a landing page. Describe your product, and watch the magic happen."
                )
                idea_input = gr.Textbox(
                    label="Your Product Idea",
                    placeholder=IDEA_PLACEHOLDER,
                    lines=10,
                )
                model_input = gr.Dropdown(
                    choices=model_choices,
                    value=settings.DEFAULT_MODEL,
                    label="Model",
                    visible=len(model_choices) > 1,
                )
                generate_button = gr.Button(GENERATE_LABEL, variant="primary")

            with gr.Column(scale=2):
                status_output = gr.Markdown(WELCOME_MESSAGE)
                view_toggle = gr.Radio(
                    choices=VIEW_CHOICES,
                    value=ViewMode.PREVIEW.value,
                    show_label=False,
                    visible=False,
                )
                preview_output = gr.HTML(visible=False)
                code_output = gr.Code(language="html", visible=False, interactive=False)
                download_button = gr.DownloadButton("Download Code", visible=False)

        outputs = [
            session_state,
            status_output,
            generate_button,
            view_toggle,
            preview_output,
            code_output,
            download_button,
        ]
        generate_button.click(
            on_generate,
            inputs=[idea_input, model_input, session_state],
            outputs=outputs,
        )
        view_toggle.input(
            on_view_change,
            inputs=[view_toggle, session_state],
            outputs=outputs,
        )

    return demo
