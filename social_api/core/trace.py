import uuid
from contextvars import ContextVar

_trace_id: ContextVar[str] = ContextVar("trace_id", default="-")


def get_trace_id() -> str:
    return _trace_id.get()


def set_trace_id(value: str | None = None) -> str:
    """Поставить trace_id для текущего контекста (или сгенерировать)."""
    value = value or str(uuid.uuid4())
    _trace_id.set(value)
    return value
