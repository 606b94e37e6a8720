"""Store with a single "current" entity slot."""

from __future__ import annotations

from typing import Generic, TypeVar

from pyentitystore.stores.api import ApiConstructor, ApiStore, TApi

TSingle = TypeVar("TSingle")


class SingleStore(ApiStore[TApi], Generic[TApi, TSingle]):
    """Store managing one selected or most recent entity.

    Example::

        class CurrentUserStore(SingleStore[UserApi, User]):
            async def load(self, user_id: int) -> None:
                user = await self.call("get_user", {"id": user_id})
                if user:
                    self.set_current(user)
    """

    def __init__(self, name: str, *, api_constructor: ApiConstructor | None = None) -> None:
        super().__init__(name, api_constructor=api_constructor)
        self._current: TSingle | None = None

    def set_current(self, current: TSingle | None) -> None:
        self._current = current
        self._notify("current")

    @property
    def current(self) -> TSingle | None:
        return self._current
