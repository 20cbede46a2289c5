"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Transfer executed", transfer_id=str(transfer.id))

    # Manual spans for critical operations
    with logfire.span("transfer_service.transfer", source_id=str(source.id)):
        ...
"""

import logfire

from fixity.config import Settings


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether telemetry leaves the process.

    Priority: explicit setting > token presence > default (False)
    """
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    - Development and test: console only unless a token is provided
    - Any environment: cloud sending when a token is present, or when
      OBSERVABILITY__SEND_TO_LOGFIRE is set explicitly

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    config_kwargs = {
        "service_name": "fixity",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )
