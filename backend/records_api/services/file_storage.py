"""Local disk storage for uploaded document images."""

from __future__ import annotations

import logging
import re
import uuid

import anyio

from records_api.core.config import Settings
from records_api.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def unique_filename(original: str | None) -> str:
    """Return ``<uuid hex>-<original name>`` with path separators and odd characters removed."""
    base = (original or "").replace("\\", "/").rsplit("/", 1)[-1]
    base = _UNSAFE_CHARS.sub("_", base).strip("._")
    prefix = uuid.uuid4().hex
    return f"{prefix}-{base}" if base else prefix


class LocalFileStorage:
    def __init__(self, upload_dir: str) -> None:
        self.upload_dir = anyio.Path(upload_dir)

    @classmethod
    def from_settings(cls, settings: Settings) -> LocalFileStorage:
        return cls(settings.UPLOAD_DIR)

    async def save(self, original_name: str | None, content: bytes) -> str:
        filename = unique_filename(original_name)
        try:
            await self.upload_dir.mkdir(parents=True, exist_ok=True)
            await (self.upload_dir / filename).write_bytes(content)
        except OSError as err:
            logger.error("Failed to store upload %s: %s", filename, err)
            raise PersistenceError(str(err)) from err

        logger.info("Stored upload %s (%d bytes)", filename, len(content))
        return filename

    async def delete(self, filename: str) -> None:
        try:
            await (self.upload_dir / filename).unlink(missing_ok=True)
        except OSError as err:
            logger.error("Failed to remove upload %s: %s", filename, err)
            raise PersistenceError(str(err)) from err
