"""FastAPI application exposing the task list GraphQL API.

Endpoints:
- /graphql: GraphQL queries and mutations (GraphiQL on GET)
- /health: liveness probe
- /version: deployed version
"""

import logging
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from strawberry.fastapi import GraphQLRouter

from tasklists.application.auth.request_context import resolve_caller
from tasklists.application.task_list.access import MembershipPolicy
from tasklists.domain.auth.ports import IPasswordHasher, ITokenService
from tasklists.domain.shared.errors import InvalidTokenError
from tasklists.domain.user.entities import User
from tasklists.graphql.context import GraphQLContext, create_context
from tasklists.graphql.schema import create_schema
from tasklists.infrastructure.config import Settings
from tasklists.infrastructure.persistence.factory import Repositories, create_repositories
from tasklists.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from tasklists.infrastructure.security.jwt_token_service import JwtTokenService

logger = logging.getLogger("startup")


def configure_logging(level: str) -> None:
    """Configure root logging once per process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@dataclass
class Services:
    """Process-wide collaborators shared by every request."""

    settings: Settings
    repositories: Repositories
    password_hasher: IPasswordHasher
    token_service: ITokenService
    policy: MembershipPolicy

    def context(self, user: Optional[User] = None) -> GraphQLContext:
        return create_context(
            users=self.repositories.users,
            task_lists=self.repositories.task_lists,
            password_hasher=self.password_hasher,
            token_service=self.token_service,
            policy=self.policy,
            user=user,
        )


def build_services(
    settings: Settings, repositories: Optional[Repositories] = None
) -> Services:
    """Wire services from settings.

    Args:
        settings: Application settings
        repositories: Pre-built repositories (created from settings when None)
    """
    return Services(
        settings=settings,
        repositories=repositories or create_repositories(settings),
        password_hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
        token_service=JwtTokenService(settings.jwt_secret, ttl=settings.token_ttl),
        policy=MembershipPolicy(enforce=settings.enforce_membership),
    )


async def get_context(request: Request) -> GraphQLContext:
    """Build the per-request GraphQL context.

    An invalid token aborts the request with 401 before any resolver runs.
    A missing token yields an anonymous context.
    """
    services: Services = request.app.state.services
    try:
        user = await resolve_caller(
            request.headers.get("authorization"),
            services.token_service,
            services.repositories.users,
        )
    except InvalidTokenError as e:
        logger.info("auth.invalid_token", extra={"reason": e.message})
        raise HTTPException(
            status_code=401,
            detail={"error": InvalidTokenError.code, "message": e.message},
        ) from e
    return services.context(user=user)


def create_app(
    settings: Optional[Settings] = None, services: Optional[Services] = None
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings (read from the environment when None)
        services: Pre-built services; when given, the lifespan neither opens
            nor closes the database connection

    Example:
        >>> app = create_app(Settings(jwt_secret="s", repository_backend="inmemory"))
    """
    if settings is None:
        settings = services.settings if services is not None else Settings.from_env()
    configure_logging(settings.log_level)

    owns_services = services is None

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "lifespan.startup",
            extra={
                "version": settings.app_version,
                "backend": settings.repository_backend,
                "enforce_membership": settings.enforce_membership,
            },
        )
        if owns_services:
            app.state.services = build_services(settings)
        current: Services = app.state.services
        try:
            await current.repositories.ping()
        except Exception:
            logger.exception("lifespan.database_unreachable")
            if owns_services:
                current.repositories.close()
            raise

        logger.info("lifespan.ready", extra={"status": "serving"})
        yield

        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        if owns_services:
            current.repositories.close()

    app = FastAPI(
        title="Task Lists Backend",
        version=settings.app_version,
        lifespan=lifespan,
    )
    if services is not None:
        app.state.services = services

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/version")
    async def version() -> Dict[str, str]:
        return {"version": settings.app_version}

    graphql_app: GraphQLRouter[Any, Any] = GraphQLRouter(
        create_schema(), context_getter=get_context
    )
    app.include_router(graphql_app, prefix="/graphql")
    return app


def main() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = Settings.from_env()
    uvicorn.run(
        create_app(settings),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "4000")),
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":  # pragma: no cover
    main()
