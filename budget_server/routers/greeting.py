from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Hello World!"

router = APIRouter(tags=["greeting"])


@router.get("/hello", response_class=PlainTextResponse)
async def say_hello() -> str:
    return GREETING
