"""Best-effort removal of images no product points at any more."""

from __future__ import annotations

import logging

from catalog.domain.repository.image_store import ImageStore

logger = logging.getLogger(__name__)


def discard_image(image_store: ImageStore, name: str) -> bool:
    """Delete *name*, logging rather than raising when the file system refuses."""
    try:
        return image_store.delete(name)
    except OSError as exc:
        logger.warning("Could not delete image %s: %s", name, exc)
        return False
