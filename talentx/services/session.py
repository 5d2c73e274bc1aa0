# talentx/services/session.py
"""
Session context: authentication flag plus identity, persisted in the local
key-value store under two keys.

One SessionContext is built at start-up, initialised from the store once,
attached to ``app.state.session`` and handed to route handlers through the
``get_session`` dependency. Handlers that ask for it before it exists get a
SessionNotProvidedError instead of an empty session.
"""

import logging
from typing import Optional

from fastapi import Request

from talentx.models.profile import AuthState, User

logger = logging.getLogger(__name__)

TOKEN_KEY = "authToken"
EMAIL_KEY = "authUserEmail"
MOCK_USER_ID = "mockId"


class SessionNotProvidedError(RuntimeError):
    pass


class SessionContext:
    def __init__(self, store):
        self._store = store
        self._state = AuthState()

    @property
    def state(self) -> AuthState:
        return self._state.model_copy(deep=True)

    @property
    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    @property
    def user(self) -> Optional[User]:
        return self._state.user

    @property
    def token(self) -> Optional[str]:
        return self._state.token

    async def initialize(self) -> "SessionContext":
        token = await self._store.get(TOKEN_KEY)
        email = await self._store.get(EMAIL_KEY)
        if token and email:
            self._state = AuthState(
                is_authenticated=True,
                user=User(id=MOCK_USER_ID, email=email),
                token=token,
            )
            logger.info("Restored session for %s", email)
        else:
            self._state = AuthState()
        return self

    async def login(self, email: str, token: str) -> AuthState:
        await self._store.set(TOKEN_KEY, token)
        await self._store.set(EMAIL_KEY, email)
        self._state = AuthState(is_authenticated=True, user=User(id=MOCK_USER_ID, email=email), token=token)
        return self.state

    async def logout(self) -> AuthState:
        await self._store.delete(TOKEN_KEY)
        await self._store.delete(EMAIL_KEY)
        self._state = AuthState()
        return self.state

    async def signup(self, email: str, token: str) -> AuthState:
        # no account creation behind the mock; signing up signs the user in
        return await self.login(email, token)


def get_session(request: Request) -> SessionContext:
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise SessionNotProvidedError("get_session used before a SessionContext was attached to the app")
    return session
