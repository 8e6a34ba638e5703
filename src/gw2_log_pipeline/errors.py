from __future__ import annotations


class PipelineError(RuntimeError):
    """Base class for failures that abort a pipeline run."""


class MissingPathError(PipelineError):
    """Raised when a required file or directory does not exist."""

    def __init__(self, path) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class StepFailedError(PipelineError):
    """Raised when an external step cannot start or exits non-zero."""

    def __init__(self, step: str, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.step = step
        self.returncode = returncode
