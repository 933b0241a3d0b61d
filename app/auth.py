"""
Authentication utilities for JWT token management
"""
import jwt
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any, Mapping


class AuthError(Exception):
    """Raised when a bearer credential is missing, malformed or invalid"""


class JWTAuthenticator:
    """Issues and validates HS256 access tokens whose subject is a user id"""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "video-asset-api",
        expires_in: timedelta = timedelta(hours=1),
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.expires_in = expires_in

    def create_access_token(
        self, user_id: uuid.UUID, expires_in: Optional[timedelta] = None
    ) -> Dict[str, Any]:
        """
        Create JWT access token for a user

        Args:
            user_id: User identifier, stored as the "sub" claim
            expires_in: Override for the configured lifetime

        Returns:
            Dict containing:
            - token: JWT token string
            - user_id: The user identifier
            - expires_at: Token expiration timestamp
        """
        issued_at = datetime.now(timezone.utc)
        expires_at = issued_at + (expires_in if expires_in is not None else self.expires_in)

        payload = {
            "iss": self.issuer,
            "sub": str(user_id),
            "iat": issued_at,
            "exp": expires_at,
            "type": "access",
        }

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

        return {
            "token": token,
            "user_id": user_id,
            "expires_at": expires_at.replace(tzinfo=None).isoformat() + "Z",
        }

    def validate(self, token: str) -> uuid.UUID:
        """
        Verify a token and return the user it was issued to

        Args:
            token: JWT token string

        Returns:
            UUID: The authenticated user id

        Raises:
            AuthError: If the token is expired, forged or has no valid subject
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require": ["exp", "sub", "iss"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise AuthError(f"Invalid token: {e}") from e

        try:
            return uuid.UUID(payload["sub"])
        except ValueError as e:
            raise AuthError("Token subject is not a user id") from e


def get_bearer_token(headers: Mapping[str, str]) -> str:
    """
    Extract the token from an "Authorization: Bearer <token>" header

    Args:
        headers: Request headers

    Returns:
        str: The raw token

    Raises:
        AuthError: If the header is missing or not a bearer credential
    """
    authorization = headers.get("Authorization")
    if not authorization:
        raise AuthError("Missing authorization header")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthError("Invalid authorization header format. Use: Bearer <token>")

    return parts[1]
