"""Flat-directory implementation of ImageStore."""

from __future__ import annotations

import shutil
import time
import uuid
from pathlib import Path
from typing import BinaryIO

from werkzeug.utils import secure_filename

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.image_store import ImageStore


class FilesystemImageStore(ImageStore):

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def save(self, original_name: str, stream: BinaryIO) -> str:
        self._root.mkdir(parents=True, exist_ok=True)
        name = self.unique_name(original_name)
        with open(self._root / name, "wb") as fh:
            shutil.copyfileobj(stream, fh)
        return name

    def path_for(self, name: str) -> Path:
        path = self._resolve(name)
        if path is None or not path.is_file():
            raise EntityNotFoundError("Image not found")
        return path

    def delete(self, name: str) -> bool:
        path = self._resolve(name)
        if path is None or not path.exists():
            return False
        path.unlink()
        return True

    @staticmethod
    def unique_name(original_name: str) -> str:
        """``<epoch millis>-<random hex>-<sanitised original name>``."""
        safe = secure_filename(original_name) or "image"
        return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}-{safe}"

    def _resolve(self, name: str) -> Path | None:
        # Only plain names directly inside the root are addressable.
        if not name or Path(name).name != name or name in (".", ".."):
            return None
        return self._root / name
