"""
Submission Guard — At most one in-flight payment per form instance.
The gateway itself does not de-duplicate; this dependency does it for the API.
"""
import threading
from typing import Optional, Set

from fastapi import Header, HTTPException, Request


class SubmissionGuard:
    """Tracks form ids whose payment is still being processed."""

    def __init__(self):
        self._in_flight: Set[str] = set()
        self._lock = threading.Lock()

    def acquire(self, form_id: str) -> bool:
        with self._lock:
            if form_id in self._in_flight:
                return False
            self._in_flight.add(form_id)
            return True

    def release(self, form_id: str) -> None:
        with self._lock:
            self._in_flight.discard(form_id)

    def is_in_flight(self, form_id: str) -> bool:
        with self._lock:
            return form_id in self._in_flight


def single_submission(
    request: Request,
    form_id: Optional[str] = Header(None, alias="form-id"),
):
    """
    Dependency holding the form's slot for the lifetime of the request.
    Example: Depends(single_submission)
    """
    if not form_id:
        yield None
        return

    guard: SubmissionGuard = request.app.state.submission_guard
    if not guard.acquire(form_id):
        raise HTTPException(
            status_code=409,
            detail="A payment for this form is already being processed. Please wait for it to finish.",
        )
    try:
        yield form_id
    finally:
        guard.release(form_id)
