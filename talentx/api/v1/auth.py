# talentx/api/v1/auth.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from talentx.core.security import create_access_token
from talentx.models.profile import AuthState, User
from talentx.services.session import SessionContext, get_session

router = APIRouter()

MIN_PASSWORD_LENGTH = 6
SOCIAL_PROVIDERS = {"google": "Google", "linkedin": "LinkedIn"}


class LoginIn(BaseModel):
    email: str = ""
    password: str = ""


class SignupIn(LoginIn):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    confirm_password: Optional[str] = None


def _validate_form(email: str, password: str, confirm_password: Optional[str] = None, signup: bool = False) -> None:
    if not email or not password:
        raise HTTPException(status_code=400, detail="Email and password are required.")
    if "@" not in email:
        raise HTTPException(status_code=400, detail="Please enter a valid email address.")
    if signup and password != confirm_password:
        raise HTTPException(status_code=400, detail="Passwords do not match.")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(status_code=400, detail="Password must be at least 6 characters long.")


@router.post("/auth/login", response_model=AuthState)
async def login(payload: LoginIn, session: SessionContext = Depends(get_session)):
    email = payload.email.strip()
    _validate_form(email, payload.password)
    return await session.login(email, create_access_token(email))


@router.post("/auth/signup", response_model=AuthState)
async def signup(payload: SignupIn, session: SessionContext = Depends(get_session)):
    email = payload.email.strip()
    _validate_form(email, payload.password, payload.confirm_password, signup=True)
    return await session.signup(email, create_access_token(email))


@router.post("/auth/social/{provider}", response_model=AuthState)
async def social_login(provider: str, session: SessionContext = Depends(get_session)):
    name = SOCIAL_PROVIDERS.get(provider.lower())
    if name is None:
        raise HTTPException(status_code=400, detail=f"Unsupported provider: {provider}")
    email = f"{name.lower()}user@example.com"
    return await session.login(email, create_access_token(email, provider=name))


@router.post("/auth/logout", response_model=AuthState)
async def logout(session: SessionContext = Depends(get_session)):
    return await session.logout()


@router.get("/auth/session", response_model=AuthState)
async def current_session(session: SessionContext = Depends(get_session)):
    return session.state


# Dependency for routes that need a signed-in user
async def get_current_user(session: SessionContext = Depends(get_session)) -> User:
    if not session.is_authenticated or session.user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return session.user
