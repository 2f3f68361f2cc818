from __future__ import annotations

import asyncio
import contextlib
import shutil
from pathlib import Path
from uuid import uuid4

import aiofiles
import aiofiles.os

# surrogateescape keeps undecodable bytes intact on the way back out.
ERRORS = "surrogateescape"


class DocumentStore:
    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    async def read_text(self, path: Path) -> str:
        async with aiofiles.open(path, "r", encoding=self._encoding, errors=ERRORS, newline="") as f:
            return await f.read()

    async def write_text(self, path: Path, text: str) -> None:
        """Replace ``path`` with ``text`` via a temporary sibling file."""
        # write through symlinks; the link itself stays in place
        path = await asyncio.to_thread(Path(path).resolve)
        tmp_path = path.with_name(f".{path.name}.tmp_{uuid4().hex}")
        try:
            async with aiofiles.open(tmp_path, "w", encoding=self._encoding, errors=ERRORS, newline="") as f:
                await f.write(text)
            await asyncio.to_thread(shutil.copymode, path, tmp_path)
            await aiofiles.os.replace(tmp_path, path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                await aiofiles.os.remove(tmp_path)
            raise
