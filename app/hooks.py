"""Start/end callbacks run around page handlers."""

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from app.schemas.common import Identity

logger = logging.getLogger(__name__)

StartHook = Callable[[Identity], Awaitable[None] | None]
EndHook = Callable[[Identity, dict[str, Any]], Awaitable[None] | None]


async def _call(hook: Callable[..., Any], *args: Any) -> None:
    outcome = hook(*args)
    if inspect.isawaitable(outcome):
        await outcome


@dataclass
class ScriptHooks:
    """
    Callbacks for one panel area (admin, reseller).

    ``on_start`` callbacks receive the caller identity once the role check
    passed. ``on_end`` callbacks also receive a copy of the data produced
    by the handler. Exceptions raised by a callback propagate to the request.
    """

    on_start: list[StartHook] = field(default_factory=list)
    on_end: list[EndHook] = field(default_factory=list)

    async def run_start(self, identity: Identity) -> None:
        for hook in self.on_start:
            await _call(hook, identity)

    async def run_end(self, identity: Identity, context: dict[str, Any]) -> None:
        for hook in self.on_end:
            await _call(hook, identity, context)
