"""Request state shared by every InfoHub widget.

A RequestState is one of four phases:
- IDLE: nothing requested yet (or input cleared)
- LOADING: a request is in flight
- SUCCESS: data holds the provider result
- ERROR: error holds the message to show the user

States are immutable; widgets replace them on every transition.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Phase(str, Enum):
    """Lifecycle phase of a widget request."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class RequestState(Generic[T]):
    """Immutable snapshot of a widget's request.

    Use the constructors (idle/loading/success/failure) rather than the
    raw initializer; they keep data and error mutually exclusive.

    Attributes:
        phase: Current phase
        data: Provider result (SUCCESS only)
        error: User-facing error message (ERROR only)
        request_id: Sequence number of the request this state belongs to
    """
    phase: Phase = Phase.IDLE
    data: Optional[T] = None
    error: Optional[str] = None
    request_id: int = 0

    def __post_init__(self):
        if self.data is not None and self.phase != Phase.SUCCESS:
            raise ValueError(f"data is only allowed in the success phase, not {self.phase.value}")
        if self.error is not None and self.phase != Phase.ERROR:
            raise ValueError(f"error is only allowed in the error phase, not {self.phase.value}")
        if self.phase == Phase.ERROR and not self.error:
            raise ValueError("error phase requires a message")

    @classmethod
    def idle(cls, request_id: int = 0) -> "RequestState[T]":
        return cls(Phase.IDLE, request_id=request_id)

    @classmethod
    def loading(cls, request_id: int) -> "RequestState[T]":
        return cls(Phase.LOADING, request_id=request_id)

    @classmethod
    def success(cls, data: T, request_id: int) -> "RequestState[T]":
        return cls(Phase.SUCCESS, data=data, request_id=request_id)

    @classmethod
    def failure(cls, error: str, request_id: int) -> "RequestState[T]":
        return cls(Phase.ERROR, error=error, request_id=request_id)

    @property
    def is_idle(self) -> bool:
        return self.phase == Phase.IDLE

    @property
    def is_loading(self) -> bool:
        return self.phase == Phase.LOADING

    @property
    def is_success(self) -> bool:
        return self.phase == Phase.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.phase == Phase.ERROR
