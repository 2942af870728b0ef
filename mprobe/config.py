import os
from pathlib import Path

from dotenv import load_dotenv

from mprobe.domain.models import DownloadSettings
from mprobe.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_DOWNLOAD_ROOT = "mangas"
DEFAULT_MAX_DELAY = 1.0
DEFAULT_CHUNK_SIZE = 64 * 1024


def _read_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {raw!r}")
    return value


def load_settings(cwd: Path | None = None) -> DownloadSettings:
    """
    Resolve download settings from the environment.

    The download root is resolved against ``cwd`` (the process working
    directory by default) when given as a relative path.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    root = Path(os.getenv("MPROBE_DOWNLOAD_ROOT", DEFAULT_DOWNLOAD_ROOT))
    chunk_size = _read_number("MPROBE_CHUNK_SIZE", DEFAULT_CHUNK_SIZE, int)
    if chunk_size == 0:
        raise ConfigurationError("MPROBE_CHUNK_SIZE must be positive")
    return DownloadSettings(
        download_root=root if root.is_absolute() else base / root,
        max_delay=_read_number("MPROBE_MAX_DELAY", DEFAULT_MAX_DELAY, float),
        chunk_size=chunk_size,
    )
