"""Sign-up, sign-in and sign-out endpoints."""

from fastapi import APIRouter, Depends

from fundfolio.api.deps import (
    get_auth_service,
    get_current_token,
    get_current_user,
    get_session_manager,
)
from fundfolio.api.schemas import CredentialsRequest, SessionResponse, UserResponse
from fundfolio.domain.models import User
from fundfolio.services import AuthService, SessionManager

router = APIRouter(prefix="/auth", tags=["auth"])


def _session_response(user: User, token: str) -> SessionResponse:
    return SessionResponse(
        access_token=token,
        user=UserResponse(user_id=user.user_id, email=user.email),
    )


@router.post("/register", response_model=SessionResponse, status_code=201)
def register(
    data: CredentialsRequest,
    auth: AuthService = Depends(get_auth_service),
    sessions: SessionManager = Depends(get_session_manager),
):
    """Create an account and sign in."""
    user = auth.register(data.email, data.password)
    return _session_response(user, sessions.open(user))


@router.post("/login", response_model=SessionResponse)
def login(
    data: CredentialsRequest,
    auth: AuthService = Depends(get_auth_service),
    sessions: SessionManager = Depends(get_session_manager),
):
    """Sign in. Any earlier session of the same user is closed."""
    user = auth.authenticate(data.email, data.password)
    return _session_response(user, sessions.open(user))


@router.post("/logout", status_code=204)
def logout(
    token: str = Depends(get_current_token),
    sessions: SessionManager = Depends(get_session_manager),
):
    sessions.close(token)


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return UserResponse(user_id=user.user_id, email=user.email)
