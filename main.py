"""Application entry point for the Fitness Analytics API.

Defines the FastAPI app, middleware and exception handlers, and includes
the nutrition and dashboard routers from the `api` package. The app holds
no state: every request is answered from its own payload.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.dashboard import router as dashboard_router
from api.nutrition import router as nutrition_router
from core.config import CORS_ALLOW_ORIGINS
from core.error_handlers import register_exception_handlers
from core.logger import get_logger

logger = get_logger("main")

app = FastAPI(title="Fitness Analytics API", version="1.0.0")


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise


@app.get("/health")
def health():
    """Return basic health status."""
    return {"status": "healthy"}


app.include_router(nutrition_router)
app.include_router(dashboard_router)


if __name__ == "__main__":
    # Allow starting the app via `python ./main.py`
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
