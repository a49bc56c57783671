"""Account routes: establish and clear the session the guard reads."""
import logging
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from drinklog.database import get_db
from drinklog.dependencies import SESSION_USER_KEY, get_current_user
from drinklog.models.user import User
from drinklog.schemas.user import CurrentUser, LoginRequest, SignupRequest, UserOut
from drinklog.services import auth_service

logger = logging.getLogger(__name__)
router = APIRouter()


def _start_session(request: Request, user: User) -> None:
    request.session.clear()
    request.session[SESSION_USER_KEY] = {"id": user.user_id, "username": user.username}


@router.post("/signup", response_model=UserOut)
def signup(payload: SignupRequest, request: Request, db: Session = Depends(get_db)):
    """Register a new account and log it in."""
    user = auth_service.signup(db, payload.username, payload.password)
    _start_session(request, user)
    return user


@router.post("/login", response_model=UserOut)
def login(payload: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """Check credentials and replace the current session."""
    user = auth_service.login(db, payload.username, payload.password)
    _start_session(request, user)
    return user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(request: Request):
    """Drop the session; harmless when already logged out."""
    user = request.session.get(SESSION_USER_KEY)
    request.session.clear()
    if user:
        logger.info("User %s logged out", user.get("id"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=CurrentUser)
def me(current_user: CurrentUser = Depends(get_current_user)):
    """Return the identity attached to the session."""
    return current_user
