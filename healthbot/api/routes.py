"""API routes for the HealthBot relay."""

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from .dependencies import get_relay
from healthbot.relay.relay import AnswerRelay
from healthbot.schemas.chat import ErrorResponse, RelayResponse

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
	"/chat",
	response_model=RelayResponse,
	responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(request: Request, relay: AnswerRelay = Depends(get_relay)) -> RelayResponse:
	"""Forward a conversation to the provider and return its answer."""
	# The body is read raw so that a missing or malformed `messages` field
	# maps to our own error body instead of FastAPI's 422.
	raw_body = await request.body()
	return await run_in_threadpool(relay.answer, raw_body)
