from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from originality.processor.exceptions import AnalysisInProgressError


class ArticleLockRegistry:
    """At most one originality check per article within this process.

    A second request for an article that is already being analyzed is
    rejected rather than queued, so no duplicate reports are produced.
    """

    def __init__(self) -> None:
        self._active: set[str] = set()

    def is_locked(self, article_id: str) -> bool:
        return article_id in self._active

    @asynccontextmanager
    async def hold(self, article_id: str) -> AsyncGenerator[None, None]:
        """Hold the article's lock for the duration of the block.

        Raises:
            AnalysisInProgressError: if the article is already locked.
        """
        # No await between check and add, so this is atomic on the event loop.
        if article_id in self._active:
            raise AnalysisInProgressError(
                f"An originality check is already running for article {article_id}"
            )
        self._active.add(article_id)
        try:
            yield
        finally:
            self._active.discard(article_id)
