from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional, Tuple
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from modelgen.core.config import settings
from modelgen.core.errors import GeneratorFailure

log = logging.getLogger(__name__)

PoolerFactory = Callable[["GeneratorSession", Optional[str]], Any]


def _inspector_pooler(session: "GeneratorSession", config: Optional[str]) -> Any:
    return inspect(session.engine)


class GeneratorSession:
    """
    Database session handed to generators.

    Clients are fetched by pooler name and cached per (name, config) pair.
    The ``inspector`` pooler is always available and returns a SQLAlchemy
    Inspector bound to the engine.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._poolers: Dict[str, PoolerFactory] = {"inspector": _inspector_pooler}
        self._clients: Dict[Tuple[str, Optional[str]], Any] = {}

    def register_pooler(self, name: str, factory: PoolerFactory) -> "GeneratorSession":
        self._poolers[name] = factory
        # Drop clients built by a replaced pooler
        self._clients = {key: client for key, client in self._clients.items() if key[0] != name}
        return self

    def get_client_using_pooler(self, name: str, config: Optional[str] = None) -> Any:
        key = (name, config)
        if key not in self._clients:
            factory = self._poolers.get(name)
            if factory is None:
                raise GeneratorFailure(f"No pooler registered for '{name}'.")
            self._clients[key] = factory(self, config)
            log.debug("Created client %s (config=%s)", name, config)
        return self._clients[key]

    def close(self) -> None:
        self._clients.clear()
        self.engine.dispose()


def create_session(database_url: Optional[str] = None) -> GeneratorSession:
    url = database_url or settings.database_url
    if not url:
        raise GeneratorFailure("Database URL is not configured.")
    engine = create_engine(url)
    return GeneratorSession(engine)
