# futbol_nlq/api/errors.py
"""
Error taxonomy for futbol-nlq.

The query-understanding core never raises for an unparseable query or an
empty conversation context. Errors only come from the collaborators around
it (entity id resolution, request planning, data sources) and are
propagated to the caller unchanged.
"""

from typing import Any, Dict, List, Optional


# ============================================================================
# ERROR CODES
# ============================================================================


class ErrorCode:
    """Standard error codes for futbol-nlq."""

    # Client errors (4xx equivalent)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    MISSING_ENTITY = "MISSING_ENTITY"
    UNSUPPORTED_INTENT = "UNSUPPORTED_INTENT"

    # Data source errors (5xx equivalent)
    DATA_SOURCE_ERROR = "DATA_SOURCE_ERROR"
    UPSTREAM_SCHEMA_CHANGED = "UPSTREAM_SCHEMA_CHANGED"

    INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# EXCEPTION HIERARCHY
# ============================================================================


class FutbolNLQError(Exception):
    """Base exception for all futbol-nlq errors."""

    def __init__(
        self,
        message: str,
        code: str = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for API/CLI error payloads."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class EntityNotFoundError(FutbolNLQError):
    """Raised when a team or league name has no known identifier."""

    def __init__(
        self, entity_type: str, query: str, suggestions: Optional[List[str]] = None
    ):
        super().__init__(
            message=f"{entity_type.capitalize()} '{query}' not found",
            code=ErrorCode.ENTITY_NOT_FOUND,
            details={
                "entity_type": entity_type,
                "query": query,
                "suggestions": suggestions or [],
            },
        )


class MissingEntityError(FutbolNLQError):
    """Raised when an intent cannot be turned into a request without an entity."""

    def __init__(self, intent: str, entity_type: str, hint: Optional[str] = None):
        message = f"La consulta de tipo '{intent}' necesita un {entity_type}"
        if hint:
            message += f". Ejemplo: {hint}"
        super().__init__(
            message=message,
            code=ErrorCode.MISSING_ENTITY,
            details={"intent": intent, "entity_type": entity_type, "hint": hint},
        )


class UnsupportedIntentError(FutbolNLQError):
    """Raised when the active data source cannot serve an intent."""

    def __init__(self, intent: str, source: str = "api-football"):
        super().__init__(
            message=f"Intent no soportado por {source}: {intent}",
            code=ErrorCode.UNSUPPORTED_INTENT,
            details={"intent": intent, "source": source},
        )


class DataSourceError(FutbolNLQError):
    """Raised by data sources when a remote call fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
    ):
        super().__init__(
            message=message,
            code=ErrorCode.DATA_SOURCE_ERROR,
            details={"status_code": status_code, "endpoint": endpoint},
        )


class UpstreamSchemaError(FutbolNLQError):
    """Raised when a data source returns a payload that does not fit its schema."""

    def __init__(self, intent: str, errors: List[Dict[str, Any]]):
        super().__init__(
            message=f"Unexpected payload shape for intent '{intent}'",
            code=ErrorCode.UPSTREAM_SCHEMA_CHANGED,
            details={"intent": intent, "errors": errors},
        )
