from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Cookie, HTTPException, Response
from pydantic import BaseModel

import config
import store
from errors import IdentifierCollision, NotFound, ValidationError

router = APIRouter(tags=["session"])


# ---------- Request / Response schemas ----------

class CreateSessionRequest(BaseModel):
    username: str


class CreateSessionResponse(BaseModel):
    username: str


class UserResponse(BaseModel):
    uuid: UUID
    username: str
    current_table_id: Optional[str] = None


# ---------- Endpoints ----------

@router.post("/session", response_model=CreateSessionResponse, status_code=201)
async def create_session(body: CreateSessionRequest, response: Response):
    """
    Creates an anonymous user plus a session bound to it.
    The session id goes back only in an HttpOnly, Secure, SameSite=strict cookie.
    """
    try:
        user, session = store.registry.create_user_and_session(
            body.username, config.SESSION_TTL_SECS
        )
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except IdentifierCollision:
        raise HTTPException(status_code=503, detail="Could not create session, try again")

    # No domain= so the cookie stays host-only.
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=str(session.session_id),
        path="/",
        secure=True,
        httponly=True,
        samesite="strict",
    )
    return CreateSessionResponse(username=user.name.value)


@router.get("/session/user", response_model=UserResponse)
async def get_session_user(
    session_id: Optional[str] = Cookie(default=None, alias=config.SESSION_COOKIE_NAME),
):
    """
    Returns the user behind the session_id cookie.
    Missing, malformed, expired and unknown sessions all get the same 404.
    """
    try:
        user = store.registry.get_user_by_session(_parse_session_id(session_id))
    except NotFound:
        raise HTTPException(status_code=404, detail="Session not found")

    return UserResponse(
        uuid=user.uuid,
        username=user.name.value,
        current_table_id=user.current_table_id,
    )


def _parse_session_id(raw: Optional[str]) -> Optional[UUID]:
    if not raw:
        return None
    try:
        return UUID(raw)
    except ValueError:
        return None
