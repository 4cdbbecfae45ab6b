"""Domain exceptions."""


class GatekeeperError(Exception):
    """Base exception for Gatekeeper."""

    pass


class PermissionDenied(GatekeeperError):
    """User does not have permission for the requested action."""

    pass


class NotFound(GatekeeperError):
    """Requested resource was not found."""

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class ValidationError(GatekeeperError):
    """Validation failed for input data."""

    pass


class InvalidOverrideInput(ValidationError):
    """Override mutation rejected before reaching storage (bad user id or code)."""

    pass


class PersistenceFailure(GatekeeperError):
    """Override or catalog storage is unreachable or returned an error."""

    pass
