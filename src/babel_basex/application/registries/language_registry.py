from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from babel_basex.executors import BaseExecutor, BasexExecutor


@dataclass
class LanguageDescriptor:
    name: str
    aliases: List[str] = field(default_factory=list)
    description: str = ""
    supports_sessions: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)


class LanguageRegistry:
    """
    Minimal in-process registry of code block languages.

    Maps a block's language tag (or one of its aliases) to a factory that
    builds the executor for it.
    """

    def __init__(self) -> None:
        self._languages: Dict[str, LanguageDescriptor] = {}
        self._factories: Dict[str, Callable[..., BaseExecutor]] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, desc: LanguageDescriptor, factory: Optional[Callable[..., BaseExecutor]] = None) -> None:
        self._languages[desc.name] = desc
        for alias in desc.aliases:
            self._aliases[alias] = desc.name
        if factory:
            self._factories[desc.name] = factory

    def resolve(self, name: str) -> Optional[str]:
        if name in self._languages:
            return name
        return self._aliases.get(name)

    def get(self, name: str) -> Optional[LanguageDescriptor]:
        resolved = self.resolve(name)
        return self._languages.get(resolved) if resolved else None

    def create(self, name: str, **kwargs: Any) -> BaseExecutor:
        resolved = self.resolve(name)
        if resolved is None or resolved not in self._factories:
            raise KeyError(f"Language executor not registered: {name}")
        return self._factories[resolved](**kwargs)

    def languages(self) -> List[str]:
        return sorted(self._languages)

    def all(self) -> Dict[str, LanguageDescriptor]:
        return dict(self._languages)


def build_default_registry() -> LanguageRegistry:
    reg = LanguageRegistry()
    reg.register(
        LanguageDescriptor(
            name=BasexExecutor.lang,
            aliases=["basex"],
            description="XQuery evaluated by the BaseX command line",
        ),
        BasexExecutor,
    )
    return reg
