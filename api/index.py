from fastapi import FastAPI, Request
import logging

from .errors import register_error_handlers
from .middleware import log_requests
from .routes import keys, security, uploads


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("functions")

app = FastAPI()
register_error_handlers(app)


@app.middleware("http")
async def _log_requests(request: Request, call_next):
    return await log_requests(request, call_next)


@app.get("/")
async def root():
    """Health check; touches neither Supabase nor the environment."""
    return {"message": "functions root alive"}


app.include_router(keys.router)
app.include_router(uploads.router)
app.include_router(security.router)
