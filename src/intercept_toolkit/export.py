"""Hand string content to the host as a downloadable file."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Protocol, Union

from intercept_toolkit.config import load_settings

logger = logging.getLogger(__name__)


class DownloadHost(Protocol):
    """Whatever offers a finished file to the user (browser, download folder...)."""

    def offer(self, path: Path, filename: str, mime_type: str) -> None:
        ...


class DirectoryHost:
    """Saves offered files into a download directory."""

    def __init__(self, target_dir: Union[str, Path]):
        self.target_dir = Path(target_dir)

    def offer(self, path: Path, filename: str, mime_type: str) -> None:
        self.target_dir.mkdir(parents=True, exist_ok=True)
        # Only the base name is honoured; a filename cannot escape the directory.
        destination = self.target_dir / Path(filename).name
        shutil.copyfile(path, destination)
        logger.info("Saved %s (%s) to %s", filename, mime_type, destination)


def download_file(
    content: Union[str, bytes],
    filename: str,
    mime_type: str,
    host: Optional[DownloadHost] = None,
) -> None:
    """Offer ``content`` as a file named ``filename``.

    The content is staged in a temporary file that is always removed after the
    host has been called. Host failures are logged, not raised.
    """
    if host is None:
        host = DirectoryHost(load_settings().download_dir)

    data = content.encode("utf-8") if isinstance(content, str) else content
    fd, tmp_name = tempfile.mkstemp(prefix="intercept-", suffix=Path(filename).suffix)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        host.offer(tmp_path, filename, mime_type)
    except OSError as exc:
        logger.warning("Download of %s not completed: %s", filename, exc)
    finally:
        tmp_path.unlink(missing_ok=True)
