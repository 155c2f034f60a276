import logging

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.integrations.pymongo import PyMongoIntegration


def init_sentry(dsn: str, environment: str = "dev") -> bool:
    """Включить Sentry, если задан DSN. Возвращает True, если включили."""
    if not dsn:
        return False
    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        integrations=[
            # ошибки DAL уже логируются, в Sentry шлём только ERROR
            LoggingIntegration(level=None, event_level=logging.ERROR),
            FastApiIntegration(),
            PyMongoIntegration(),
        ],
        traces_sample_rate=0.2,
        send_default_pii=False,
    )
    return True
