"""
===============================================================================
CRC CARD — workdesk/context.py (Request-scoped context)
===============================================================================

Responsibilities:
  - Keep request-scoped context in ContextVars (async-safe).
  - Correlate log lines without threading parameters through every layer.
  - Provide minimal helpers: set_request_context(), get_context_dict(),
    clear_context().

Collaborators:
  - workdesk.crosscutting.middleware: sets request_id/method/path per request.
  - workdesk.crosscutting.logger: enriches log records via get_context_dict().
  - workdesk.identity.auth_users: records the authenticated user id.

Constraints:
  - Primitive values only (str) so payloads serialize safely.
  - Empty defaults ("") instead of None.
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Final

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
http_method_var: ContextVar[str] = ContextVar("http_method", default="")
http_path_var: ContextVar[str] = ContextVar("http_path", default="")
user_id_var: ContextVar[str] = ContextVar("user_id", default="")

_CTX_REQUEST_ID: Final[str] = "request_id"
_CTX_METHOD: Final[str] = "method"
_CTX_PATH: Final[str] = "path"
_CTX_USER_ID: Final[str] = "user_id"


def set_request_context(
    *, request_id: str = "", method: str = "", path: str = ""
) -> None:
    """
    Set the minimal request context.

    Empty strings mean "not available".
    """
    request_id_var.set(request_id or "")
    http_method_var.set(method or "")
    http_path_var.set(path or "")


def set_user_context(user_id: int | str | None) -> None:
    """Record the authenticated caller for log correlation."""
    user_id_var.set(str(user_id) if user_id is not None else "")


def get_context_dict() -> dict[str, str]:
    """Return the current context as a dict, omitting empty keys."""
    ctx: dict[str, str] = {}

    if val := request_id_var.get():
        ctx[_CTX_REQUEST_ID] = val
    if val := http_method_var.get():
        ctx[_CTX_METHOD] = val
    if val := http_path_var.get():
        ctx[_CTX_PATH] = val
    if val := user_id_var.get():
        ctx[_CTX_USER_ID] = val

    return ctx


def clear_context() -> None:
    """Reset the context at the end of a request."""
    request_id_var.set("")
    http_method_var.set("")
    http_path_var.set("")
    user_id_var.set("")
