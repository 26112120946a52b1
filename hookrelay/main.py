import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from hookrelay.api.webhook_routes import router as webhook_router
from hookrelay.core.config import settings
from hookrelay.core.errors import WebhookError
from hookrelay.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

app.include_router(webhook_router, prefix="/api")


@app.exception_handler(WebhookError)
async def webhook_error_handler(request: Request, exc: WebhookError):
    logger.warning(f"Rejected webhook delivery: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
