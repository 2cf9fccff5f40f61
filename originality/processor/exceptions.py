class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class ArticleNotFoundError(ProcessorError):
    """Raised when an article cannot be found in the database."""


class NothingToAnalyzeError(ProcessorError):
    """Raised when an article offers too little content to analyze."""


class AnalysisInProgressError(ProcessorError):
    """Raised when a check is already running for the same article."""
