"""
In-memory user/session registry.

Two tables live here: users keyed by user id and sessions keyed by session
id. Every operation takes the same lock for its whole duration, so a
reader never sees a session without its user (or the reverse) while a
create or a sweep is half done. Callers only ever get model copies back;
the dicts never leave this module.

Expiry is checked twice: lazily on every read and eagerly by sweep_expired(),
which the reaper drives on a timer.
"""

import logging
import threading
import time
import uuid
from typing import Callable, Optional
from uuid import UUID

from errors import IdentifierCollision, NotFound
from models.session import Session, is_expired
from models.user import User

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
IdGenerator = Callable[[], UUID]


class Registry:
    def __init__(self, clock: Clock = time.time, new_id: IdGenerator = uuid.uuid4) -> None:
        self._clock = clock
        self._new_id = new_id
        self._lock = threading.Lock()
        self._users: dict[UUID, User] = {}
        self._sessions: dict[UUID, Session] = {}

    def create_user_and_session(self, name: str, ttl: float) -> tuple[User, Session]:
        """
        Validate `name`, then insert a fresh user and a session bound to it.

        Raises errors.ValidationError for a bad name and
        errors.IdentifierCollision if the id generator repeats itself; in
        both cases neither table is touched.
        """
        user = User.create(name, self._new_id)
        session_id = self._new_id()

        with self._lock:
            if (
                session_id == user.uuid
                or user.uuid in self._users
                or session_id in self._sessions
            ):
                raise IdentifierCollision("generated identifier already in use")
            session = Session(
                session_id=session_id,
                user_id=user.uuid,
                expires_at=self._clock() + ttl,
            )
            self._users[user.uuid] = user
            self._sessions[session_id] = session

        logger.debug("Created session for user %s", user.name)
        return user, session

    def get_user_by_session(self, session_id: Optional[UUID]) -> User:
        """
        Resolve a session id to its user.

        Absent, expired and dangling sessions all raise errors.NotFound so
        callers cannot tell them apart.
        """
        if session_id is None:
            raise NotFound("no session")

        with self._lock:
            session = self._sessions.get(session_id)
            if session is None or is_expired(session, self._clock()):
                raise NotFound("no session")
            user = self._users.get(session.user_id)

        if user is None:
            # Sweeps remove both rows under one lock, so this is a bug.
            logger.error(
                "Session %s references missing user %s",
                _short(session.session_id), _short(session.user_id),
            )
            raise NotFound("no session")
        return user

    def sweep_expired(self) -> set[UUID]:
        """Drop every expired session and its user; return the removed user ids."""
        removed: set[UUID] = set()
        with self._lock:
            now = self._clock()
            expired = [s for s in self._sessions.values() if is_expired(s, now)]
            for session in expired:
                del self._sessions[session.session_id]
                self._users.pop(session.user_id, None)
                removed.add(session.user_id)
            remaining = len(self._sessions)

        if removed:
            logger.info("Swept %d expired session(s), %d live", len(removed), remaining)
        return removed

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {"users": len(self._users), "sessions": len(self._sessions)}


def _short(ident: UUID) -> str:
    return ident.hex[:8]
