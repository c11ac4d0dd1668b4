from contextvars import ContextVar
from typing import Optional
from uuid import uuid4


_request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def new_request_id() -> str:
    return f"req_{uuid4().hex[:12]}"


def set_request_id(request_id: str) -> None:
    _request_id_var.set(request_id)


def get_request_id() -> Optional[str]:
    return _request_id_var.get()


def clear_request_context() -> None:
    _request_id_var.set(None)
