from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from pyentitystore.config import Configuration


@dataclass
class FakeTodoApi:
    """In-memory stand-in for a generated client."""

    todos: dict[int, dict[str, Any]] = field(default_factory=dict)
    calls: dict[str, int] = field(default_factory=dict)
    configuration: Configuration | None = None
    next_id: int = 100
    fail_with: BaseException | None = None
    create_returns_nothing: bool = False

    def _record_call(self, endpoint: str) -> None:
        self.calls[endpoint] = self.calls.get(endpoint, 0) + 1
        if self.fail_with is not None:
            raise self.fail_with

    def init_api(self, config: Configuration) -> None:
        self.configuration = config

    async def list_todos(self, _args: Any = None) -> list[dict[str, Any]]:
        self._record_call("list_todos")
        return [dict(todo) for todo in self.todos.values()]

    async def get_todo(self, args: dict[str, Any]) -> dict[str, Any] | None:
        self._record_call("get_todo")
        todo = self.todos.get(args["id"])
        return dict(todo) if todo is not None else None

    async def create_todo(self, args: dict[str, Any]) -> dict[str, Any] | None:
        self._record_call("create_todo")
        if self.create_returns_nothing:
            return None
        todo = {"id": self.next_id, **args}
        self.next_id += 1
        self.todos[todo["id"]] = todo
        return dict(todo)

    async def update_todo(self, args: dict[str, Any]) -> dict[str, Any] | None:
        self._record_call("update_todo")
        todo = self.todos.get(args["id"])
        if todo is None:
            return None
        todo.update(args)
        return dict(args)

    async def delete_todo(self, args: dict[str, Any]) -> None:
        self._record_call("delete_todo")
        self.todos.pop(args["id"], None)

    def count_sync(self, _args: Any = None) -> int:
        self._record_call("count_sync")
        return len(self.todos)


@pytest.fixture
def todo_api() -> FakeTodoApi:
    return FakeTodoApi(
        todos={
            1: {"id": 1, "title": "Write docs", "done": False},
            2: {"id": 2, "title": "Ship release", "done": False},
        }
    )
