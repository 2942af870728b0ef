import logging
import stat
from pathlib import Path
from typing import Union

from mprobe.constants import PICTURE_EXTENSION

log = logging.getLogger(__name__)


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Make sure ``path`` exists as a directory.

    A non-directory entry found at ``path`` is removed and replaced by a
    directory. Missing parents are created. Calling this repeatedly on the
    same path is a no-op after the first call.

    Parameters:
        path (Union[str, Path]): The directory to materialize.

    Returns:
        Path: The directory path.

    Raises:
        OSError: Any filesystem error other than the path being absent.
    """
    path = Path(path)
    try:
        mode = path.stat().st_mode
    except FileNotFoundError:
        if path.is_symlink():
            # dangling link
            path.unlink()
        path.mkdir(parents=True, exist_ok=True)
        return path

    if not stat.S_ISDIR(mode):
        log.warning(f"Replacing non-directory entry at '{path}' with a directory")
        path.unlink()
        path.mkdir(parents=True)
    return path


def series_directory(root: Path, series: str) -> Path:
    """Return the directory holding all chapters of ``series``."""
    return Path(root) / series


def chapter_directory(series_dir: Path, chapter: int) -> Path:
    """Return the directory holding the pages of ``chapter``."""
    return Path(series_dir) / str(chapter)


def page_path(chapter_dir: Path, page: int) -> Path:
    """Return the destination file of ``page``; the extension is fixed."""
    return Path(chapter_dir) / f"{page}.{PICTURE_EXTENSION}"
