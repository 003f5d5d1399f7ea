"""Typed errors raised by the resume pipeline."""


class ResumePipelineError(Exception):
    """Base class for pipeline errors."""


class ResumeInputError(ResumePipelineError, ValueError):
    """Input text is missing or too short to analyze. Raised before any stage runs."""

    def __init__(self, message: str, length: int = 0) -> None:
        super().__init__(message)
        self.length = length


class ClassifierError(ResumePipelineError):
    """The AI classifier could not produce a usable response."""

    def __init__(self, task: str, message: str) -> None:
        super().__init__(f"{task}: {message}")
        self.task = task
