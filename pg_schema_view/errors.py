"""Error types for pg-schema-view."""

from typing import Optional, Dict, Any


class SchemaViewError(Exception):
    """Base exception for pg-schema-view errors."""

    def __init__(self, message: str, code: str = "SCHEMA_VIEW_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for machine-readable reporting."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(SchemaViewError):
    """Invalid or incomplete configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class UnsupportedOutputError(ConfigurationError):
    """Requested output format is not one of the known renderers."""

    def __init__(self, output_format: str, supported: Optional[list] = None):
        supported = supported or []
        message = f"Unsupported output format: {output_format}"
        if supported:
            message += f". Must be one of: {', '.join(supported)}"
        super().__init__(
            message,
            details={"output_format": output_format, "supported": supported},
        )
        self.code = "UNSUPPORTED_OUTPUT"
        self.output_format = output_format


class DatabaseConnectionError(SchemaViewError):
    """Error connecting to the database."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONNECTION_ERROR", details=details)


class IntrospectionError(SchemaViewError):
    """Error while running catalog queries."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INTROSPECTION_ERROR", details=details)
