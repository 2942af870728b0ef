from typing import Optional

from requests import Session

from mprobe.constants import USER_AGENT
from mprobe.domain.models import DownloadSettings, RunResult
from mprobe.manga_loader.downloader import download_series


class SeriesLoader:
    """
    Owns the HTTP session and settings of a run and downloads whole series.
    """
    def __init__(self, settings: DownloadSettings, session: Optional[Session] = None):
        self.settings = settings
        self.session = session if session is not None else Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def download(self, series: str) -> RunResult:
        """Download every chapter of ``series`` and return the run result."""
        return download_series(self.session, series, self.settings)
