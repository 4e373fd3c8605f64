from fastapi import APIRouter

from otp_auth.schemas.responses import MessageOut

router = APIRouter()

# Liveness answers whatever the method; OPTIONS preflights are answered
# by the CORS middleware before reaching here.
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/health", methods=ANY_METHOD, response_model=MessageOut)
async def health() -> MessageOut:
    return MessageOut(message="Backend is running")
