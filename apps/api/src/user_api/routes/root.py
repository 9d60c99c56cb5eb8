"""Basic unversioned routes."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from user_api.models.health import PingResponse

router = APIRouter(tags=["root"])


@router.get("/", response_class=PlainTextResponse)
async def home() -> str:
    return "Welcome to Hanacaraka API!\n"


@router.get("/ping", response_model=PingResponse)
async def ping() -> PingResponse:
    return PingResponse()
