"""
Blog API - Custom Exception Hierarchy
======================================

What:  Application exceptions raised by the service layer.
How:   Each exception carries a user-facing message, an optional diagnostic
       code and a context dict. Global handlers registered in main.py turn
       them into ResultEnvelope responses with the matching status code.

Exception Hierarchy:
    BlogError (base)
    ├── ValidationError       → 400 Bad Request
    ├── NotFoundError         → 404 Not Found
    ├── StoreWriteError       → 500 (commit failed at the data layer)
    └── InternalServerError   → 500 (anything else)

Diagnostic codes:
    Every 500 site has its own code so operators can tell failure sites
    apart from the response body or the logs alone.

    05X04  list categories           05X05  get category
    05XE9  create: store write       05X10  create: other failure
    05XE8  update: store write       05X11  update: other failure
    05XE7  delete: store write       05X12  delete: other failure
    05X99  unhandled exception (catch-all in the access-log middleware)
"""

from typing import Any, Dict, List, Optional

NOT_FOUND_MESSAGE = "Contéudo não encontrado"
INTERNAL_ERROR_MESSAGE = "Falha interna no servidor"


class BlogError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in a response)
        code:     Diagnostic code, prefixed to the message when present
        context:  Debug info (logged but NOT returned to the client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = INTERNAL_ERROR_MESSAGE,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.context = context or {}
        super().__init__(self.detail)

    @property
    def detail(self) -> str:
        """Message as shown in the envelope: "<code> - <message>"."""
        if self.code:
            return f"{self.code} - {self.message}"
        return self.message

    @property
    def errors(self) -> List[str]:
        return [self.detail]


class ValidationError(BlogError):
    """
    Raised when editor input fails validation.

    Carries every failure message so the 400 envelope lists them all,
    in the order the rules were evaluated.
    """

    status_code = 400

    def __init__(
        self,
        messages: List[str],
        context: Optional[Dict[str, Any]] = None,
    ):
        self.messages = list(messages)
        super().__init__(message="; ".join(self.messages), context=context)

    @property
    def errors(self) -> List[str]:
        return list(self.messages)


class NotFoundError(BlogError):
    """Raised when no row matches the requested id."""

    status_code = 404

    def __init__(
        self,
        resource: str = "category",
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=NOT_FOUND_MESSAGE, context=ctx)


class StoreWriteError(BlogError):
    """
    Raised when committing to the store fails (constraint violation,
    lost connection during flush, ...).
    """

    status_code = 500

    def __init__(
        self,
        code: str,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, context=context)


class InternalServerError(BlogError):
    """Raised for any other failure while handling a request."""

    status_code = 500

    def __init__(
        self,
        code: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=INTERNAL_ERROR_MESSAGE, code=code, context=context)
