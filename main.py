import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from idea_generator import __version__
from idea_generator.core.config import app_settings, missing_secrets
from idea_generator.core.logging_config import setup_logging
from idea_generator.routers import ideas as ideas_router

# Configure logging VERY early
setup_logging(app_settings.log_level)
logger = logging.getLogger(__name__)

for secret_name in missing_secrets():
    logger.warning(f"{secret_name} environment variable not set. Upstream calls will be unauthenticated.")

app = FastAPI(
    title="Idea Generator",
    description="Turns a completed Typeform survey response into five business ideas.",
    version=__version__
)

# The browser front-end calls this service directly.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(ideas_router.router, tags=["ideas"])


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint to verify service availability.
    """
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    # Better to run with `uvicorn main:app --reload` from the project root directory
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
