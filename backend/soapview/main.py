from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .config import get_settings
from .routers import notes
from .utils.logger import configure_logging

# Get application settings
settings = get_settings()
configure_logging(settings)

app = FastAPI(
    title="SOAP View API",
    description="Turns generated clinical notes into display-ready SOAP sections",
    version="0.1.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

app.include_router(notes.router)


@app.get("/")
async def root():
    return {
        "message": "Welcome to SOAP View API",
        "rest_endpoints": [
            "/api/notes/parse",
            "/api/notes/render",
            "/api/notes/export",
        ],
        "note_api_endpoint": settings.NOTE_API_ENDPOINT
    }


@app.get("/health")
async def health():
    return {"status": "ok"}


logger.info("SOAP View API ready")
