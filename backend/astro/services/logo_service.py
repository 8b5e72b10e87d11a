"""
Astro — Logo Storage Service
=============================

What:  Validates and stores uploaded service logos, and resolves stored logo
       paths for serving.
How:   Extension check, size check, then MIME sniffing of the actual bytes,
       then an async write to a date-organized directory under a UUID name.
Who:   Called by POST /api/logo (upload), GET /api/logos/{path} (serve) and
       the service catalog (removing replaced logos after commit).

Security Model:
    1. Extension check:  fast rejection of obviously wrong files
    2. Size check:       bounded by settings.max_logo_size
    3. MIME check:       libmagic reads the header bytes; a renamed .exe fails
    4. UUID filename:    no user input ever reaches the file system path
    5. Path resolution:  served paths must resolve inside the storage root

Directory Structure:
    storage/
    └── logos/
        └── 2024/
            └── 01/
                └── 15/
                    └── a1b2c3d4-....png
"""

import logging
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple

import aiofiles
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from astro.config import settings
from astro.exceptions import FileStorageError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/svg+xml": ".svg",
    "image/webp": ".webp",
}

ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".svg", ".webp"}

EXTENSION_MIME = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
}

LOGO_URL_PREFIX = "/api/logos"

# Session.info key for files to delete when the session commits
PENDING_REMOVALS = "astro.pending_logo_removals"


class LogoService:
    """Manages logo upload, validation, storage and lookup."""

    def __init__(self, storage_root: Optional[str] = None, max_size: Optional[int] = None):
        """
        Args:
            storage_root: Override settings.storage_root (used in tests).
            max_size:     Override settings.max_logo_size (used in tests).
        """
        self.storage_root = (Path(storage_root or settings.storage_root) / "logos").resolve()
        self.max_size = max_size or settings.max_logo_size
        self.storage_root.mkdir(parents=True, exist_ok=True)
        logger.info("LogoService initialized with storage_root=%s", self.storage_root)

    def validate_extension(self, filename: str) -> str:
        """Returns the normalized extension (lowercase with dot)."""
        ext = Path(filename).suffix.lower()
        if ext not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                message=(
                    f"File type '{ext}' is not supported. "
                    f"Allowed types: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
                ),
                field="logo",
                context={"extension": ext, "allowed": sorted(ALLOWED_EXTENSIONS)},
            )
        return ext

    def validate_size(self, content_length: Optional[int], actual_size: int) -> None:
        """
        Checks the declared Content-Length first, then the byte count actually
        received (clients can misreport the header). Empty files are rejected.
        """
        max_kb = self.max_size / 1024

        if actual_size == 0:
            raise ValidationError(message="The uploaded logo is empty.", field="logo")

        if content_length and content_length > self.max_size:
            raise ValidationError(
                message=f"Logo exceeds maximum size of {max_kb:.0f}KB.",
                field="logo",
                context={"max_size_kb": max_kb, "reported_size": content_length},
            )

        if actual_size > self.max_size:
            raise ValidationError(
                message=f"Logo size ({actual_size / 1024:.1f}KB) exceeds maximum of {max_kb:.0f}KB.",
                field="logo",
                context={"max_size_kb": max_kb, "actual_size": actual_size},
            )

    def validate_mime_type(self, file_content: bytes, filename: str) -> str:
        """
        Detect the real MIME type from the content bytes.

        Returns:
            Detected MIME type string (e.g. "image/png").
        """
        try:
            import magic
            mime_type = magic.from_buffer(file_content, mime=True)
        except ImportError:
            # libmagic missing on the host: fall back to the extension
            logger.warning(
                "python-magic not available — falling back to extension-based type detection. "
                "Install libmagic for production security."
            )
            mime_type = EXTENSION_MIME.get(Path(filename).suffix.lower(), "application/octet-stream")
        except Exception as e:
            logger.error("MIME type detection failed: %s", str(e))
            raise FileStorageError(
                message="Could not verify file type. Please try again.",
                context={"error": str(e)},
            )

        # libmagic reports bare SVG documents as XML or plain text
        if Path(filename).suffix.lower() == ".svg" and mime_type in {"text/xml", "application/xml", "text/plain"}:
            if b"<svg" in file_content[:1024]:
                mime_type = "image/svg+xml"

        if mime_type not in ALLOWED_MIME_TYPES:
            raise ValidationError(
                message=(
                    f"File content type '{mime_type}' is not supported. "
                    "The logo must be a PNG, JPEG, SVG or WebP image."
                ),
                field="logo",
                context={"detected_mime": mime_type, "allowed": list(ALLOWED_MIME_TYPES)},
            )

        return mime_type

    def _generate_storage_path(self, extension: str) -> Tuple[Path, str]:
        """Creates a YYYY/MM/DD/<uuid><ext> path; returns (absolute, relative)."""
        date_dir = datetime.now(timezone.utc).strftime("%Y/%m/%d")
        relative_path = f"{date_dir}/{uuid.uuid4()}{extension}"
        return self.storage_root / relative_path, relative_path

    async def store_file(self, content: bytes, extension: str) -> Tuple[str, str]:
        absolute_path, relative_path = self._generate_storage_path(extension)

        try:
            absolute_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(absolute_path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store logo at %s: %s", absolute_path, str(e))
            raise FileStorageError(
                message="Failed to save uploaded logo. Please try again.",
                context={"path": str(absolute_path), "os_error": str(e)},
            )

        logger.info("Logo stored: %s (%d bytes)", relative_path, len(content))
        return str(absolute_path), relative_path

    async def validate_and_store(
        self,
        filename: str,
        content: bytes,
        content_length: Optional[int] = None,
    ) -> Tuple[str, str]:
        """
        Complete validation and storage pipeline, cheapest check first.

        Returns:
            Tuple of (absolute_path, relative_path).
        """
        ext = self.validate_extension(filename)
        self.validate_size(content_length, len(content))
        self.validate_mime_type(content, filename)
        return await self.store_file(content, ext)

    def resolve(self, relative_path: str) -> Path:
        """
        Map a stored relative path back to a file on disk.

        Raises:
            ValidationError: the path escapes the storage root (../ tricks)
            NotFoundError:   nothing stored there
        """
        full_path = (self.storage_root / relative_path).resolve()
        if not full_path.is_relative_to(self.storage_root):
            raise ValidationError(message="Invalid logo path", field="path")
        if not full_path.is_file():
            raise NotFoundError(resource="logo", resource_id=relative_path)
        return full_path

    def remove_file(self, file_path: str) -> None:
        """Best-effort removal of a stored logo; failures are only logged."""
        try:
            path = Path(file_path)
            if path.exists():
                os.remove(path)
                logger.info("Cleaned up logo: %s", path.name)
        except OSError as e:
            logger.warning("Failed to clean up logo %s: %s", file_path, str(e))

    def stored_path(self, logo_url: Optional[str]) -> Optional[Path]:
        """
        The file behind a logo URL stored on a service, or None.

        Placeholders and external URLs have no stored file, and paths that
        would resolve outside the storage root are refused.
        """
        prefix = f"{LOGO_URL_PREFIX}/"
        if not logo_url or not logo_url.startswith(prefix):
            return None
        full_path = (self.storage_root / logo_url[len(prefix):]).resolve()
        if not full_path.is_relative_to(self.storage_root):
            logger.warning("Refusing to remove logo outside storage root: %s", logo_url)
            return None
        return full_path

    def discard_after_commit(self, db: AsyncSession, logo_url: Optional[str]) -> None:
        """
        Remove an uploaded logo once `db` commits.

        A rollback forgets the pending removals, so the file stays for the
        row that still points at it.
        """
        path = self.stored_path(logo_url)
        if path is None:
            return
        session = db.sync_session
        if PENDING_REMOVALS not in session.info:
            session.info[PENDING_REMOVALS] = []
            event.listen(session, "after_commit", self._remove_pending)
            event.listen(session, "after_rollback", self._forget_pending)
        session.info[PENDING_REMOVALS].append(str(path))

    def _remove_pending(self, session: Session) -> None:
        pending, session.info[PENDING_REMOVALS] = session.info[PENDING_REMOVALS], []
        for file_path in pending:
            self.remove_file(file_path)

    @staticmethod
    def _forget_pending(session: Session) -> None:
        session.info[PENDING_REMOVALS] = []

    @staticmethod
    def public_url(relative_path: str) -> str:
        return f"{LOGO_URL_PREFIX}/{relative_path}"

    @staticmethod
    def media_type_for(path: Path) -> str:
        return EXTENSION_MIME.get(path.suffix.lower(), "application/octet-stream")


logo_service = LogoService()
