from __future__ import annotations


class FunnelError(Exception):
    """Base error for funnel operations surfaced to the operator."""


class GenerationError(FunnelError):
    """The generation service failed or returned an unusable payload."""


class PersistenceError(FunnelError):
    def __init__(self, step: str, cause: Exception | None = None) -> None:
        message = f"Failed to save {step}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.step = step
        self.cause = cause


class WizardError(FunnelError):
    """A wizard step was advanced before its precondition held."""


class NotFoundError(FunnelError):
    pass
