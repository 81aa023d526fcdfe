import asyncio

from letter_enhancer.domain.models import UploadedFile
from letter_enhancer.extraction.exceptions import FileReadError


class FileLoader:
    """Reads the bytes of an uploaded file without blocking the event loop."""

    async def load(self, file: UploadedFile) -> bytes:
        """Return the file content, reading from disk when not held in memory.

        Raises:
            FileReadError: if the file has no content source or cannot be read.
        """
        if file.content is not None:
            return file.content
        if file.path is None:
            raise FileReadError(f"File '{file.name}' has neither content nor a path")
        try:
            return await asyncio.to_thread(file.path.read_bytes)
        except OSError as exc:
            raise FileReadError(f"Failed to read {file.path}: {exc}") from exc
