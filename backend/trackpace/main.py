import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from trackpace.api.calculator import router as calculator_router
from trackpace.api.sessions import router as sessions_router
from trackpace.api.settings import router as settings_router
from trackpace.db import Base, engine
from trackpace.models.saved_session import SavedSession  # noqa: F401  (import ensures table is registered)
from trackpace.models.session_split import SessionSplit  # noqa: F401
from trackpace.core.config import settings


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Track Pace")

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (sessions, splits) on startup
Base.metadata.create_all(bind=engine)

app.include_router(calculator_router)
app.include_router(sessions_router)
app.include_router(settings_router)


@app.get("/")
def root():
    return {"message": "Track Pace backend is running"}
