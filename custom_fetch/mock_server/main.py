import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from custom_fetch.core.logging import setup_logging
from custom_fetch.mock_server.routes import auth_router, router

setup_logging()


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown of the mock server.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: The application runs while suspended here.
    """
    logger.info("Mock server startup sequence initiated.")
    yield
    logger.info("Mock server shutdown complete.")


app = FastAPI(
    title="custom_fetch mock server",
    description="Echo routes used by the custom_fetch integration tests. Not for production use.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["General"], status_code=200)
async def health_check():
    """Perform a basic health check.

    Returns:
        A dictionary indicating the application status.
    """
    return {"status": "ok"}


app.include_router(router)
app.include_router(auth_router)


# --- Run with Uvicorn (for local development) --- #

if __name__ == "__main__":
    import uvicorn

    from custom_fetch.settings import Settings

    dev_settings = Settings()
    uvicorn.run(
        "custom_fetch.mock_server.main:app",
        host=dev_settings.get_mock_server_host(),
        port=dev_settings.get_mock_server_port(),
        reload=dev_settings.get_mock_server_reload(),
        log_level=dev_settings.get_log_level().lower(),
    )
