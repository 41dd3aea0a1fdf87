"""Logfire setup and instrumentation.

Application code logs through logfire directly:

    import logfire

    logfire.info("Wish supported", wish_id=str(wish_id))

    with logfire.span("support_wish", wish_id=str(wish_id)):
        ...

Identities are logged as ``user:<id>`` / ``session:<id>`` strings and wish
text is never logged.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from wishes.config import AuthSettings, Settings

SERVICE_NAME = "wishes-api"


def should_send_to_logfire(settings: Settings) -> bool:
    """An explicit setting wins; otherwise send only when a token exists."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start (app server or migrations).

    Args:
        settings: Application settings
    """
    send = should_send_to_logfire(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def request_attributes_mapper(auth: AuthSettings):
    """Build the span mapper tagging the path and which identity cookies are set.

    Cookie names come from ``auth`` so renamed cookies are still detected.
    """

    def map_attributes(request, attributes):
        cookies = getattr(request, "cookies", None) or {}
        return {
            **attributes,
            "path": request.url.path,
            "has_session_cookie": auth.session_cookie_name in cookies,
            "has_auth_cookie": auth.auth_cookie_name in cookies,
        }

    return map_attributes


def instrument_fastapi(app: FastAPI, auth: AuthSettings) -> None:
    """Trace every HTTP request handled by ``app``."""
    logfire.instrument_fastapi(
        app, request_attributes_mapper=request_attributes_mapper(auth)
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.debug("SQLAlchemy instrumented")
