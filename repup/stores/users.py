"""User store: lookups by id and by OAuth identity, plus upsert on login."""

from __future__ import annotations

import logging

from sqlalchemy import select

from repup.core.errors import RecordNotFoundError
from repup.db.session import Database
from repup.models import User
from repup.stores.guards import require_id, require_text

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self, database: Database):
        self.database = database

    async def get_by_id(self, user_id: int) -> User:
        require_id(user_id)
        async with self.database.transaction() as session:
            user = await session.get(User, user_id)
        if user is None:
            raise RecordNotFoundError(f"user {user_id} not found")
        return user

    async def get_by_oauth(self, provider: str, oauth_id: str) -> User:
        require_text(provider, "oauth_provider")
        require_text(oauth_id, "oauth_id")
        async with self.database.transaction() as session:
            user = await session.scalar(
                select(User).where(User.oauth_provider == provider, User.oauth_id == oauth_id)
            )
        if user is None:
            raise RecordNotFoundError(f"no {provider} user with that id")
        return user

    async def create_or_update(self, user: User) -> User:
        """Insert a new user, or refresh email and name of the one with the same OAuth identity.

        Either way user.id ends up holding the stored row's id.
        """
        require_text(user.oauth_provider, "oauth_provider")
        require_text(user.oauth_id, "oauth_id")
        require_text(user.email, "email")
        async with self.database.transaction() as session:
            existing = await session.scalar(
                select(User).where(User.oauth_provider == user.oauth_provider, User.oauth_id == user.oauth_id)
            )
            if existing is None:
                stored = User(
                    email=user.email,
                    name=user.name or "",
                    oauth_provider=user.oauth_provider,
                    oauth_id=user.oauth_id,
                )
                session.add(stored)
                created = True
            else:
                existing.email = user.email
                existing.name = user.name or ""
                stored = existing
                created = False
            await session.flush()
        user.id = stored.id
        logger.info("%s user %s (%s)", "Created" if created else "Updated", stored.id, stored.oauth_provider)
        return stored
