"""Base classes for page sources."""
from abc import ABC, abstractmethod


class PageFetcher(ABC):
    """Interface for anything that can return the body of a web page."""

    @abstractmethod
    def fetch(self, url: str) -> str:
        """Fetch url and return the response body as text.

        Raises:
            TransportError: If the page could not be fetched.
        """
        ...

    def close(self) -> None:
        """Clean up resources."""
        pass
