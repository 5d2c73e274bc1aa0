# talentx/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt
from pydantic import BaseModel

from talentx.core.config import settings

# Session tokens are signed so they look like real bearer tokens, but
# nothing server-side ever checks them against a user database.
ALGORITHM = "HS256"

class TokenData(BaseModel):
    sub: Optional[str] = None
    provider: Optional[str] = None

def create_access_token(subject: str, provider: Optional[str] = None, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    exp = now + (expires_delta if expires_delta else timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {"sub": subject, "iat": now, "exp": exp}
    if provider:
        payload["provider"] = provider
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)

def decode_access_token(token: str) -> TokenData:
    """Raises jose.JWTError for tampered or expired tokens."""
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    return TokenData(sub=payload.get("sub"), provider=payload.get("provider"))
