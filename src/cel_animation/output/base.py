"""Base class for output format providers."""

from abc import ABC, abstractmethod

from ..constants import DEFAULT_SELECTOR
from ..declarations import StyleOutput


class OutputProvider(ABC):
    """Abstract base class for output format providers."""

    def __init__(self, path: str = "", selector: str = DEFAULT_SELECTOR):
        """
        Initialize the provider with an output file path.

        Args:
            path: Path to the output file
            selector: CSS selector of the container whose children are the cels
        """
        self.path = path
        self.selector = selector

    @abstractmethod
    def encode(self, style: StyleOutput) -> bytes:
        """
        Encode a generated animation into the output format.

        Args:
            style: Generated cel animation

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """
        Write encoded data to a file.

        Args:
            data: Encoded data to write
        """
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)
