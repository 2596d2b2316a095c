"""Base widget state machine.

Every widget moves through IDLE -> LOADING -> SUCCESS | ERROR and can
start over from any state. Each request gets a sequence number; a
completion that is not for the latest request is dropped, so a slow
response can never overwrite a newer one.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from infohub.utils.exceptions import InfoHubError
from infohub.utils.request_state import RequestState

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


def error_message(error: Exception) -> str:
    """User-facing message for an exception raised by a provider."""
    if isinstance(error, InfoHubError):
        return error.message
    return str(error) or GENERIC_ERROR_MESSAGE


class Widget(ABC, Generic[T]):
    """Owns one widget's request state.

    Subclasses implement load() and set:
        auto_load: request data on first mount
        keep_result_on_error: keep showing the last result after a failure

    Attributes:
        mounted: Whether mount() has run
    """

    auto_load: bool = False
    keep_result_on_error: bool = False

    def __init__(self):
        self._lock = threading.Lock()
        self._request_id = 0
        self._state: RequestState[T] = RequestState.idle()
        self._last_result: Optional[T] = None
        self.mounted = False

    @property
    def state(self) -> RequestState[T]:
        return self._state

    @property
    def last_result(self) -> Optional[T]:
        """Most recent successful result still on display."""
        return self._last_result

    @property
    def latest_request_id(self) -> int:
        return self._request_id

    def mount(self) -> bool:
        """Run first-display behavior once.

        Returns:
            True if this call mounted the widget
        """
        if self.mounted:
            return False
        self.mounted = True
        if self.auto_load:
            self.load()
        return True

    @abstractmethod
    def load(self) -> RequestState[T]:
        """Issue the widget's current request."""

    def retry(self) -> RequestState[T]:
        """Re-issue the widget's current request."""
        return self.load()

    def begin(self) -> int:
        """Enter LOADING for a new request and return its id.

        Clears any previous error. The last result stays available
        until the new request settles.
        """
        with self._lock:
            self._request_id += 1
            self._state = RequestState.loading(self._request_id)
            return self._request_id

    def resolve(self, request_id: int, data: T) -> bool:
        """Complete a request successfully. Returns False if it was stale."""
        with self._lock:
            if not self._is_current(request_id):
                return False
            self._state = RequestState.success(data, request_id)
            self._last_result = data
            return True

    def reject(self, request_id: int, message: str) -> bool:
        """Complete a request with an error. Returns False if it was stale."""
        with self._lock:
            if not self._is_current(request_id):
                return False
            self._state = RequestState.failure(message, request_id)
            if not self.keep_result_on_error:
                self._last_result = None
            return True

    def reset(self, error: str = None) -> None:
        """Settle immediately without a provider call.

        Clears the result and moves to IDLE, or to ERROR when a message
        is given. Any in-flight request becomes stale.
        """
        with self._lock:
            self._request_id += 1
            if error:
                self._state = RequestState.failure(error, self._request_id)
            else:
                self._state = RequestState.idle(self._request_id)
            self._last_result = None

    def run(self, fetch: Callable[[], T]) -> RequestState[T]:
        """Issue a request through fetch and settle the state with its outcome."""
        request_id = self.begin()
        try:
            data = fetch()
        except Exception as e:
            logger.warning(f"{type(self).__name__} request {request_id} failed: {e}")
            self.reject(request_id, error_message(e))
        else:
            self.resolve(request_id, data)
        return self._state

    def _is_current(self, request_id: int) -> bool:
        if request_id != self._request_id:
            logger.debug(
                f"{type(self).__name__}: dropping stale response "
                f"{request_id} (latest {self._request_id})"
            )
            return False
        return True
