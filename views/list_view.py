import logging

from errors import ApiError, RequestCancelled
from filters import JobFilters
from models import Job
from views.base import LOADED, LOADING, BaseView

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No jobs found"
LOAD_FAILED_MESSAGE = "Failed to load jobs."


class ListView(BaseView):
    """Job listing page with type and location filters."""

    name = "list"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.jobs: list[Job] = []
        self.filters = JobFilters()

    def mount(self) -> None:
        self._attach()
        self._load(self.client.list_jobs)

    # --- controls ---

    @property
    def controls_disabled(self) -> bool:
        return self.state == LOADING

    @property
    def can_filter_by_type(self) -> bool:
        return not self.controls_disabled and self.filters.type_query() is not None

    @property
    def can_filter_by_location(self) -> bool:
        return not self.controls_disabled and self.filters.location_query() is not None

    def submit_type_filter(self) -> bool:
        """Refetch by the selected type. Returns False when nothing was requested."""
        if not self.can_filter_by_type:
            return False
        job_type = self.filters.type_query()
        logger.info(f"[{self.name}] Filtering by type '{job_type}'")
        self._load(self.client.list_jobs_by_type, job_type)
        return True

    def submit_location_filter(self) -> bool:
        """Refetch by the trimmed location. Returns False when nothing was requested."""
        if not self.can_filter_by_location:
            return False
        location = self.filters.location_query()
        logger.info(f"[{self.name}] Filtering by location '{location}'")
        self._load(self.client.list_jobs_by_location, location)
        return True

    def reset(self) -> bool:
        if self.controls_disabled:
            return False
        self.filters.clear()
        self._load(self.client.list_jobs)
        return True

    # --- display ---

    @property
    def empty_message(self) -> str | None:
        """Shown whenever there is nothing to list, whether empty or failed."""
        return EMPTY_MESSAGE if not self.jobs else None

    def _load(self, fetch, *args) -> None:
        self._enter(LOADING)
        try:
            jobs = fetch(*args, cancel_token=self.token)
        except RequestCancelled:
            logger.debug(f"[{self.name}] Discarding result of cancelled fetch")
            return
        except ApiError as e:
            self.jobs = []
            self._fail(LOAD_FAILED_MESSAGE, e)
            return
        self.jobs = jobs
        self.state = LOADED
        logger.info(f"[{self.name}] Loaded {len(jobs)} jobs")
