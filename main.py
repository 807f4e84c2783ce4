# main.py
import os

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.logging_config import configure_logging
from middleware.request_logging import RequestLoggingMiddleware
from routers.intel_routes import router as intel_router
from services.intel.feed_cache import FeedCache

configure_logging()

app = FastAPI(title="Live Intel Feed")

origins = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Fallback", "X-Intel-Cache"],
)

# Process-lifetime feed cache; one slot shared by every request.
app.state.intel_cache = FeedCache()

app.include_router(intel_router)
