"""In-memory stand-ins for the remote entity service."""

import itertools
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any

from neologism_cache.dto import NeologismPatch
from neologism_cache.entities import (
    AuthSession,
    Category,
    Neologism,
    NeologismDraft,
    NeologismStatus,
)
from neologism_cache.errors import NotFoundError, UnauthenticatedError

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_neologism(
    neologism_id: str,
    minutes: int = 0,
    name: str | None = None,
    status: str = NeologismStatus.READY.value,
    category_id: str | None = None,
    category: str | None = None,
    definition: str = "",
    root_words: tuple[str, ...] = (),
) -> Neologism:
    return Neologism(
        id=neologism_id,
        name=name or f"word-{neologism_id}",
        root_words=root_words,
        category_id=category_id,
        category=category,
        definition=definition or f"definition of {neologism_id}",
        image_url=None,
        status=status,
        created_at=T0 + timedelta(minutes=minutes),
    )


class FakeEntityService:
    """Satisfies RemoteEntityService; records every call in ``calls``.

    Put an exception in ``failures[method_name]`` to make that method fail.
    """

    PASSWORD = "secret"

    def __init__(self) -> None:
        self.neologisms: list[Neologism] = []
        self.categories: list[Category] = []
        self.calls: list[str] = []
        self.failures: dict[str, Exception] = {}
        self.session: AuthSession | None = None
        self.before_list: Any = None
        self.closed = False
        self._ids = itertools.count(1)
        self._clock = T0 + timedelta(days=1)

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if name in self.failures:
            raise self.failures[name]

    def _require_session(self) -> None:
        if self.session is None:
            raise UnauthenticatedError("User must be authenticated")

    def _category_name(self, category_id: str | None) -> str | None:
        return next((c.name for c in self.categories if c.id == category_id), None)

    def _find(self, neologism_id: str) -> Neologism:
        for n in self.neologisms:
            if n.id == neologism_id:
                return n
        raise NotFoundError(f"Neologism {neologism_id} does not exist")

    async def list_neologisms(self) -> list[Neologism]:
        self._enter("list_neologisms")
        if self.before_list is not None:
            self.before_list()
        return sorted(self.neologisms, key=lambda n: n.created_at, reverse=True)

    async def get_neologism_by_id(self, neologism_id: str) -> Neologism:
        self._enter("get_neologism_by_id")
        return self._find(neologism_id)

    async def create_neologism(self, draft: NeologismDraft) -> Neologism:
        self._enter("create_neologism")
        self._require_session()
        self._clock += timedelta(minutes=1)
        record = Neologism(
            id=f"n{next(self._ids)}",
            name=draft.name,
            root_words=tuple(draft.root_words),
            category_id=draft.category_id,
            category=self._category_name(draft.category_id),
            definition=draft.definition,
            image_url=draft.image_url,
            status=str(draft.status),
            created_at=self._clock,
        )
        self.neologisms.append(record)
        return record

    async def update_neologism(self, neologism_id: str, changes: NeologismPatch) -> Neologism:
        self._enter("update_neologism")
        self._require_session()
        current = self._find(neologism_id)
        fields = changes.to_row()
        if "root_words" in fields:
            fields["root_words"] = tuple(fields["root_words"] or ())
        updated = replace(current, **fields)
        updated = replace(updated, category=self._category_name(updated.category_id))
        self.neologisms = [updated if n.id == neologism_id else n for n in self.neologisms]
        return updated

    async def delete_neologism(self, neologism_id: str) -> None:
        self._enter("delete_neologism")
        self._require_session()
        self._find(neologism_id)
        self.neologisms = [n for n in self.neologisms if n.id != neologism_id]

    async def list_categories(self) -> list[Category]:
        self._enter("list_categories")
        return sorted(self.categories, key=lambda c: c.name)

    async def create_category(self, name: str) -> Category:
        self._enter("create_category")
        category = Category(id=f"c{next(self._ids)}", name=name)
        self.categories.append(category)
        return category

    async def current_user(self) -> dict[str, Any] | None:
        self._enter("current_user")
        if self.session is None:
            return None
        return {"id": self.session.user_id, "email": self.session.email}

    async def current_session(self) -> AuthSession | None:
        return self.session

    async def sign_in(self, email: str, password: str) -> AuthSession:
        self._enter("sign_in")
        if password != self.PASSWORD:
            raise UnauthenticatedError("Invalid login credentials")
        self.session = AuthSession(
            access_token=f"token-{email}",
            user_id=email.split("@")[0],
            email=email,
        )
        return self.session

    async def sign_out(self) -> None:
        self._enter("sign_out")
        self.session = None

    async def close(self) -> None:
        self.closed = True
