from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from examples_api.api.exception_handlers import register_exception_handlers
from examples_api.api.middleware import RequestLoggingMiddleware
from examples_api.api.v1.router import api_router
from examples_api.core.config import settings
from examples_api.core.logging import configure_logging

configure_logging(settings.log_level)

app = FastAPI(title="examples-api")

app.add_middleware(RequestLoggingMiddleware)

if settings.frontend_url:
    parsed = urlparse(settings.frontend_url)
    origin = f"{parsed.scheme}://{parsed.netloc}"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
def health():
    return {"status": "ok"}
