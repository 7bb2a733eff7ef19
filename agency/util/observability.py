"""Observability configuration using Logfire.

Services log through ``logfire`` directly:

    with logfire.span("invitation_service.record_sent", landlord_id=str(landlord_id)):
        ...
        logfire.info("Invitation sent", email=event.email)

Invitation tokens are credentials. They are only ever logged by prefix, and
the request mapper below replaces them in traced request values.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from agency.config import Settings

# Path parameters worth attaching to every request span
_TRACED_PATH_PARAMS = ("landlord_id", "agent_id")


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is configured."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process.

    Console output is always on. Set OBSERVABILITY__LOGFIRE_TOKEN to ship
    telemetry to Logfire cloud, or OBSERVABILITY__SEND_TO_LOGFIRE to force
    it either way.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="agency-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        invitation_expiry_days=settings.invitations.expiry_days,
    )


def _redact_token(values: dict[str, Any]) -> dict[str, Any]:
    token = values.get("token")
    if isinstance(token, str):
        return {**values, "token": f"{token[:8]}..."}
    return values


def _map_request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag request spans with the landlord or agent and hide raw tokens."""
    result = {**attributes}

    values = result.get("values")
    if isinstance(values, dict):
        result["values"] = _redact_token(values)

    path_params = getattr(request, "path_params", None) or {}
    for name in _TRACED_PATH_PARAMS:
        if name in path_params:
            result[name] = str(path_params[name])

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries on the event log, suspension and user tables.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # SQL comments carry span context
    )
