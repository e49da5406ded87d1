from uuid import UUID

from pydantic import BaseModel, ConfigDict


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    session_id: UUID
    user_id: UUID      # back-reference into the registry's user table
    expires_at: float       # epoch seconds, fixed at creation


def is_expired(session: Session, now: float) -> bool:
    """A session is expired strictly after its expiry instant."""
    return now > session.expires_at
