"""Logfire setup for the API process and the migration script.

Services open their own spans (`comment_service.delete_comment`, ...);
this module only wires the exporter and the framework instrumentation.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from natter.config import Settings

# Path parameters promoted to span attributes so a trace can be found by
# the post, comment or user it touched.
TRACED_PATH_PARAMS = ("post_id", "comment_id", "user_id")


def _should_send(settings: Settings) -> bool:
    # An explicit flag wins; otherwise having a token means "send".
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure the Logfire SDK once per process.

    Reads OBSERVABILITY__LOGFIRE_TOKEN and OBSERVABILITY__SEND_TO_LOGFIRE.
    Without a token everything stays on the console.
    """
    send = _should_send(settings)
    logfire.configure(
        service_name="natter-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured for {environment}",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    mapped = dict(attributes)
    for name in TRACED_PATH_PARAMS:
        value = request.path_params.get(name)
        if value is not None:
            mapped[name] = str(value)
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through `engine`."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
