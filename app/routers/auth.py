"""
Authentication Router
Handles token issuance
"""
import logging
import uuid

from fastapi import APIRouter, Depends, Header, Request

from app.context import AppContext, get_context
from app.errors import InvalidArgumentError
from app.spec.models import TokenResponse
from app.utils import get_client_ip

router = APIRouter(prefix="/api/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=TokenResponse)
async def issue_token(
    request: Request,
    x_user_id: str = Header(..., alias="X-User-ID"),
    context: AppContext = Depends(get_context),
):
    """
    Token issuance API

    Issues a JWT access token for the given user id. Send it back on
    later requests as "Authorization: Bearer <token>".

    Headers:
    - X-User-ID: User UUID

    Response:
    - success: Boolean indicating success
    - token: JWT access token
    - expiresAt: Token expiration timestamp (ISO 8601)
    - userId: The user the token was issued to
    """
    try:
        user_id = uuid.UUID(x_user_id)
    except ValueError as e:
        raise InvalidArgumentError("Invalid user ID", e)

    token_data = context.authenticator.create_access_token(user_id)

    logger.info(
        f"Token issued: user_id={user_id}, client_ip={get_client_ip(request)}"
    )

    return TokenResponse(
        success=True,
        token=token_data["token"],
        expiresAt=token_data["expires_at"],
        userId=user_id,
    )
