from __future__ import annotations

# Standard library
import logging as _logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI
from starlette.requests import HTTPConnection
from strawberry.fastapi import GraphQLRouter

# Local application imports
from graphql_api.context import GraphQLContext, create_context
from graphql_api.schema import create_schema
from infrastructure.auth.jwt_provider import JwtTokenProvider
from infrastructure.auth.password_hasher import BcryptPasswordHasher
from infrastructure.config import get_app_version, get_port
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.persistence.factory import create_repositories

load_dotenv()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

APP_VERSION: Final[str] = get_app_version()

schema = create_schema()

__all__: list[str] = ["app", "lifespan", "schema"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle: owns every process-scoped resource.

    Startup: repositories (plus indexes), event bus, token provider and
    password hasher are created and stored on ``app.state``.
    Shutdown: the event bus is closed (ending open subscriptions) and the
    database client released.
    """
    logger = _logging.getLogger("startup")
    logger.info("lifespan.startup", extra={"version": APP_VERSION})

    # Fails fast on a missing SECRET_KEY before any connection is opened.
    token_provider = JwtTokenProvider()

    repositories = create_repositories()
    await repositories.ensure_indexes()

    event_bus = InMemoryEventBus()

    app.state.repositories = repositories
    app.state.event_bus = event_bus
    app.state.token_provider = token_provider
    app.state.password_hasher = BcryptPasswordHasher()

    logger.info("lifespan.ready", extra={"backend": repositories.backend})
    try:
        yield
    finally:
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        await event_bus.close()
        repositories.close()


app = FastAPI(
    title="Postboard Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


async def get_graphql_context(connection: HTTPConnection) -> GraphQLContext:
    """Build the per-operation context from lifespan-owned resources.

    ``connection`` is the HTTP request or the websocket, so the
    ``Authorization`` header is readable for queries, mutations and
    subscriptions alike.
    """
    state = connection.app.state
    return create_context(
        user_repository=state.repositories.users,
        post_repository=state.repositories.posts,
        event_bus=state.event_bus,
        token_provider=state.token_provider,
        password_hasher=state.password_hasher,
        connection=connection,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_port())
