from abc import ABC, abstractmethod
from urllib.parse import quote

LIST_ROOT = "/"


def job_path(job_id: str) -> str:
    return f"/jobs/{quote(str(job_id), safe='')}"


def edit_job_path(job_id: str) -> str:
    return f"/edit-job/{quote(str(job_id), safe='')}"


class Navigator(ABC):
    """Capability views use to move between pages."""

    @abstractmethod
    def navigate(self, path: str) -> None:
        ...


class HistoryNavigator(Navigator):
    """Records every navigation in order, starting from a given page."""

    def __init__(self, start: str = LIST_ROOT):
        self.start = start
        self.history: list[str] = []

    def navigate(self, path: str) -> None:
        self.history.append(path)

    @property
    def current(self) -> str:
        return self.history[-1] if self.history else self.start
