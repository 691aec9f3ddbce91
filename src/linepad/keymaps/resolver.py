"""Token -> action resolution with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from linepad.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    token: str
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Resolves key tokens against a registry, caching per registry revision."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Optional[tuple[int, Dict[str, ResolutionMatch]]] = None

    def resolve(self, token: str) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"token": token},
        ) as handle:
            match = self._table().get(token)
            if match is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss", token=token)
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", match.binding.id)
            return ResolutionResult(status="match", token=token, match=match)

    def _table(self) -> Dict[str, ResolutionMatch]:
        revision = self._registry.revision()
        if self._cache is not None and self._cache[0] == revision:
            return self._cache[1]

        table = {
            binding.token: ResolutionMatch(
                binding=binding,
                action=self._registry.get_action(binding.action_id),
            )
            for binding in self._registry.iter_bindings()
        }
        self._cache = (revision, table)
        return table


__all__ = [
    "KeymapResolver",
    "ResolutionMatch",
    "ResolutionResult",
]
