import logging

from errors import ApiError, RequestCancelled
from models import Job
from navigation import LIST_ROOT, edit_job_path
from views.base import DELETING, LOADED, LOADING, BaseView

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load job."
DELETE_FAILED_MESSAGE = "Failed to delete job."


class DetailView(BaseView):
    """Single job page: show, delete, or jump to the edit form."""

    name = "detail"

    def __init__(self, job_id: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.job_id = job_id
        self.job: Job | None = None

    def mount(self) -> None:
        self._attach()
        self._enter(LOADING)
        try:
            job = self.client.get_job(self.job_id, cancel_token=self.token)
        except RequestCancelled:
            return
        except ApiError as e:
            self._fail(LOAD_FAILED_MESSAGE, e)
            return
        self.job = job
        self.state = LOADED

    @property
    def edit_path(self) -> str:
        return edit_job_path(self.job_id)

    def edit(self) -> None:
        self._navigate(self.edit_path)

    def delete(self) -> bool:
        """Delete the shown job. Only one delete may be in flight."""
        if self.state != LOADED:
            return False
        self._enter(DELETING)
        try:
            self.client.delete_job(self.job_id, cancel_token=self.token)
        except RequestCancelled:
            return True
        except ApiError as e:
            # job stays on screen
            self._fail(DELETE_FAILED_MESSAGE, e, state=LOADED)
            return True
        logger.info(f"[{self.name}] Deleted job {self.job_id}")
        self._navigate(LIST_ROOT)
        return True
