"""FastAPI application entrypoint for the HealthBot relay.

Defines the app, mounts the chat router and renders relay failures as
``{"error": ...}`` bodies with their status code.
"""

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from healthbot.api.routes import router
from healthbot.relay.errors import RelayError
from healthbot.utils.logger import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
	load_dotenv()
	setup_logging()
	yield


app = FastAPI(title="HealthBot Relay API", version="0.1.0", lifespan=lifespan)
app.include_router(router)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
	"""Render any relay failure as an error body with its status code."""
	return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/health")
def health_check() -> dict:
	"""Basic liveness probe used by monitors and CI."""
	return {"status": "ok"}
