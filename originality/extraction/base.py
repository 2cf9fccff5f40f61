from abc import ABC, abstractmethod


class BaseFormatExtractor(ABC):
    """Contract for one entry of the format registry."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Return the raw text contained in ``data``.

        May raise on malformed input; the caller decides how to degrade.
        """
