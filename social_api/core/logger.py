import logging
import sys
from logging.handlers import QueueHandler, QueueListener
from queue import Queue
from pythonjsonlogger import jsonlogger
from social_api.core.trace import get_trace_id
from social_api.core.config import settings

JSON_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s"
    " %(message)s %(pathname)s %(lineno)d "
    "%(trace_id)s %(service)s %(env)s"
)


class TraceContextFilter(logging.Filter):
    def __init__(self, service: str | None = None) -> None:
        super().__init__()
        self.service = service or settings.app_name

    def filter(self, record: logging.LogRecord) -> bool:
        # поля проставляем ДО того, как запись уйдёт в очередь
        record.trace_id = (getattr(record, "trace_id", None)
                           or get_trace_id() or "-")
        record.service = getattr(record, "service", None) or self.service
        record.env = getattr(record, "env", None) or settings.env
        return True


_listener: QueueListener | None = None


def build_stream_handler(service: str) -> logging.Handler:
    """JSON-хендлер в stdout с обогащением trace_id/service/env."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT))
    handler.addFilter(TraceContextFilter(service))
    return handler


def setup_json_logging(service: str = "social_video_service",
                       level: str | int = "INFO") -> None:
    global _listener
    if _listener is not None:
        # повторный lifespan (тесты) — не плодим листенеры
        shutdown_logging()

    root = logging.getLogger()
    root.setLevel(level)

    q: Queue = Queue(-1)
    queue_handler = QueueHandler(q)
    queue_handler.addFilter(TraceContextFilter(service))

    _listener = QueueListener(q, build_stream_handler(service),
                              respect_handler_level=True)
    _listener.start()

    root.handlers = [queue_handler]

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True

    logging.getLogger(__name__).info(
        "logger_initialized",
        extra={"service": service})


def shutdown_logging() -> None:
    """Аккуратно остановить listener при выключении приложения."""
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
