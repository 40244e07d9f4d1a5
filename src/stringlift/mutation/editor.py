"""
CodeEditor: whole-file reads and atomic writes.

Files are always read completely and replaced in one step (temp file in
the same directory, then rename), so no partially written file is ever
visible. Line endings are kept byte-for-byte.
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Union

from stringlift.logging_config import logger
from .config import SOURCE_ENCODING

PathLike = Union[str, Path]


class CodeEditor:
    """
    Read and write source files.

    I/O errors are not swallowed: they propagate to the caller and abort
    the run.
    """

    def __init__(self, encoding: str = SOURCE_ENCODING):
        self.encoding = encoding

    def read_source(self, file_path: PathLike) -> str:
        # newline="" keeps CRLF files CRLF on the way back out
        with open(file_path, "r", encoding=self.encoding, newline="") as f:
            return f.read()

    def write_source(self, file_path: PathLike, content: str) -> None:
        """
        Write ``content`` to ``file_path`` atomically, creating missing
        parent directories.
        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._atomic_write(path, content)

    def _atomic_write(self, path: Path, content: str) -> None:
        # Temp file in the target directory keeps the rename on one filesystem
        fd, temp_path = tempfile.mkstemp(
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp"
        )

        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
            if path.exists():
                # mkstemp creates 0600 files; keep the original mode
                os.chmod(temp_path, stat.S_IMODE(path.stat().st_mode))
            os.replace(temp_path, str(path))
        except BaseException:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

        logger.debug(f"Atomic write completed: {path}")
