import logging
from abc import ABC, abstractmethod

from api_client import JobsClient
from cancellation import CancelToken
from errors import ApiError
from navigation import HistoryNavigator, Navigator
from reporting import ErrorReporter, LoggingErrorReporter

logger = logging.getLogger(__name__)

IDLE = "idle"
LOADING = "loading"
LOADED = "loaded"
FAILED = "failed"
SUBMITTING = "submitting"
DELETING = "deleting"

BUSY_STATES = (LOADING, SUBMITTING, DELETING)


class BaseView(ABC):
    """Shared fetch lifecycle for every page controller.

    Each mount gets its own CancelToken. unmount() cancels it, after which
    any request still in flight resolves to RequestCancelled and its result
    is dropped without touching view state. Mounting the same instance
    again starts over with a fresh token.
    """

    name: str = "view"

    def __init__(self, client: JobsClient | None = None,
                 reporter: ErrorReporter | None = None,
                 navigator: Navigator | None = None):
        self.client = client or JobsClient()
        self.reporter = reporter or LoggingErrorReporter()
        self.navigator = navigator or HistoryNavigator()
        self.state = IDLE
        self.error = ""
        self.mounted = False
        self._token = CancelToken()

    @abstractmethod
    def mount(self) -> None:
        """Called each time the page is shown."""
        ...

    def _attach(self) -> None:
        if self._token.cancelled:
            self._token = CancelToken()
        self.mounted = True

    def unmount(self) -> None:
        self.mounted = False
        self._token.cancel()
        logger.debug(f"[{self.name}] Unmounted")

    @property
    def is_busy(self) -> bool:
        return self.state in BUSY_STATES

    @property
    def token(self) -> CancelToken:
        return self._token

    def _enter(self, state: str) -> None:
        logger.debug(f"[{self.name}] {self.state} -> {state}")
        self.state = state
        self.error = ""

    def _fail(self, message: str, error: ApiError, state: str = FAILED) -> None:
        logger.debug(f"[{self.name}] {self.state} -> {state}")
        self.state = state
        self.error = message
        self.reporter.report(f"[{self.name}] {message}", error)

    def _navigate(self, path: str) -> None:
        if not self.mounted:
            logger.debug(f"[{self.name}] Dropping navigation to {path} from unmounted view")
            return
        self.navigator.navigate(path)
