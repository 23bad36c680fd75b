# main.py
import gradio as gr
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from app import build_ui
from mvp_creator import ai_services
from mvp_creator.config import load_settings
from mvp_creator.errors import GenerationError, InvalidIdeaError
from mvp_creator.generation import generate_landing_page, validate_idea
from mvp_creator.models import available_models
from mvp_creator.utils import DOWNLOAD_FILENAME, DOWNLOAD_MEDIA_TYPE, document_title

# Missing credentials stop the service here, before it can accept a single request.
settings = load_settings()
ai_services.configure(settings)


# --- Pydantic Models ---
class GenerateRequest(BaseModel):
    prompt: str
    model: str | None = None

class DownloadRequest(BaseModel):
    html: str


app = FastAPI(
    title="MVP Creator",
    description="Turn a product idea into a single-file landing page",
    version="0.1.0",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok"}

@app.get("/api/models")
async def list_models():
    return {
        "default": settings.DEFAULT_MODEL,
        "models": [{"key": key, "label": config["label"]} for key, config in available_models(settings).items()],
    }

@app.post("/api/generate")
async def generate(body: GenerateRequest):
    try:
        idea = validate_idea(body.prompt)
    except InvalidIdeaError as e:
        raise HTTPException(status_code=400, detail=str(e))

    model_key = body.model or settings.DEFAULT_MODEL
    if model_key not in available_models(settings):
        raise HTTPException(status_code=400, detail="Invalid model selected")

    try:
        html_document = await generate_landing_page(idea, model_key)
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))

    title = document_title(html_document)
    print(f"INFO: Generated landing page '{title}' with {model_key} ({len(html_document)} chars).")
    return JSONResponse(content={"ok": True, "html": html_document, "title": title})

@app.post("/api/download")
async def download(body: DownloadRequest):
    if not body.html.strip():
        raise HTTPException(status_code=400, detail="HTML content is required for a download.")
    return Response(
        content=body.html,
        media_type=DOWNLOAD_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"'},
    )


# The UI is mounted last so the API routes above take precedence over "/".
app = gr.mount_gradio_app(app, build_ui(settings), path="/")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
