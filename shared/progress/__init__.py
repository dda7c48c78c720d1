"""
Progress Notification

One-way progress sink used by the pipeline entry points. A sink is any
callable taking a human-readable message (print works).
"""

from typing import Callable


ProgressSink = Callable[[str], None]


def notify(progress: ProgressSink | None, message: str) -> None:
    """
    Send a message to the progress sink, if one was given.

    Delivery is best-effort: an exception raised by the sink is dropped
    here so it can never fail the step that reported it.
    """
    if progress is None:
        return
    try:
        progress(message)
    except Exception:
        pass


__all__ = [
    "ProgressSink",
    "notify",
]
