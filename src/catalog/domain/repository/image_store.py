"""Abstract store for uploaded product images."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO


class ImageStore(ABC):

    @abstractmethod
    def save(self, original_name: str, stream: BinaryIO) -> str:
        """Write *stream* verbatim and return the stored file name."""

    @abstractmethod
    def path_for(self, name: str) -> Path:
        """Return the path of a stored image.

        Raises EntityNotFoundError if no such image exists.
        """

    @abstractmethod
    def delete(self, name: str) -> bool:
        """Remove a stored image. Returns False if it was not there."""
