from __future__ import annotations


class SummarizationError(Exception):
    """Base class for failures surfaced by the summarizer."""


class EmptySegmentation(SummarizationError, ValueError):
    """The input has no extractable content, so there is nothing to summarize."""

    def __init__(self, message: str = "Nothing to summarize: text is empty after cleaning"):
        super().__init__(message)


class UnrecognizedVariant(SummarizationError, ValueError):
    """Raised by the dispatcher in strict mode for an unknown variant id."""

    def __init__(self, variant: object):
        self.variant = variant
        super().__init__(f"Unknown summarization variant: {variant!r}")
