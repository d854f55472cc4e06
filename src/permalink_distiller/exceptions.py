"""Custom exceptions for blog resource classification."""


class DistillerError(Exception):
    """Base exception for all permalink distiller errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(DistillerError):
    """Raised when a template or an article cannot produce a valid path.

    Covers malformed source/permalink templates as well as articles lacking
    a field their permalink needs (custom metadata, date, language).
    """

    def __init__(
        self,
        message: str,
        template: str | None = None,
        field: str | None = None,
        *args,
        **kwargs,
    ):
        self.template = template
        self.field = field
        super().__init__(message, *args, **kwargs)


class ConsistencyError(DistillerError):
    """Raised when a companion resource has no owning article."""

    def __init__(self, message: str, resource_path: str, owner_path: str, *args, **kwargs):
        self.resource_path = resource_path
        self.owner_path = owner_path
        super().__init__(message, *args, **kwargs)
