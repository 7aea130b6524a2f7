"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: shared domain values and step
functions so suites don't each grow their own one-off fixtures.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from maybe import Error, NotFoundError, Outcome, ValidationError


@dataclass(frozen=True)
class User:
    id: int
    name: str = "ada"
    active: bool = True


USERS = {1: User(1, "ada"), 2: User(2, "bob", active=False)}


def find_user(user_id: int) -> Outcome[User, Error]:
    user = USERS.get(user_id)
    if user is None:
        return Outcome.failure(NotFoundError("User", user_id))
    return Outcome.success(user)


async def find_user_async(user_id: int) -> Outcome[User, Error]:
    await asyncio.sleep(0)
    return find_user(user_id)


async def identity_async(value: Any) -> Any:
    await asyncio.sleep(0)
    return value


@dataclass
class CallRecorder:
    """Callable that records its arguments and returns a scripted value."""

    result: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        return self.result

    @property
    def called(self) -> bool:
        return bool(self.calls)


def invalid_email() -> ValidationError:
    return ValidationError({"email": "required"}, code="User.Email")
