"""Authorization guard for protected routes.

The session cookie is signed by Starlette's ``SessionMiddleware``; login
stores the account under ``SESSION_USER_KEY``. Handlers never read the
session themselves; they receive a ``CurrentUser`` from ``get_current_user``.
"""
from fastapi import Request

from drinklog.errors import Unauthorized
from drinklog.schemas.user import CurrentUser

SESSION_USER_KEY = "currentUser"


def get_current_user(request: Request) -> CurrentUser:
    session_user = request.session.get(SESSION_USER_KEY) or {}
    user_id = str(session_user.get("id") or "").strip()
    if not user_id:
        raise Unauthorized("no authenticated session")
    return CurrentUser(id=user_id, username=str(session_user.get("username") or ""))
