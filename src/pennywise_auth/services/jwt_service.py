"""JWT token service.

Verifies the access tokens issued by the identity provider. Minting is
supported for local development and tests, where no provider is running.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from pennywise_auth.exceptions import InvalidTokenError
from pennywise_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token verification and creation.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(user_id, "user@example.com")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 1
    DEFAULT_ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        audience: str | None = None,
        algorithm: str = DEFAULT_ALGORITHM,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Signing secret shared with the identity provider.
        audience
            Expected ``aud`` claim. ``None`` disables the audience check.
        algorithm
            Signing algorithm (default HS256)
        access_token_expire_hours
            Hours until minted access tokens expire (default 1)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._audience = audience
        self._algorithm = algorithm
        self._access_expire = timedelta(hours=access_token_expire_hours)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        options = {"require": ["sub", "exp"]}
        if self._audience is None:
            options["verify_aud"] = False  # type: ignore[assignment]

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                options=options,
            )

            user_id = UUID(payload["sub"])
            email = payload.get("email") or ""
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
            role = payload.get("role", "authenticated")

            return TokenPayload(
                user_id=user_id,
                email=email,
                exp=exp,
                role=role,
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
        role: str = "authenticated",
    ) -> str:
        """Create an access token shaped like the identity provider's.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        expires_delta
            Custom expiration time (optional)
        role
            Role claim (default "authenticated")

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload: dict = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "iat": now,
            "exp": expire,
        }
        if self._audience is not None:
            payload["aud"] = self._audience

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
