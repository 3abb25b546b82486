from typing import Callable, List

from filerepo.logger import get_logger

logger = get_logger(__name__)

Handler = Callable[[str], None]


class ReadResultEvent:
    """
    Synchronous notification carrying the text of a record.

    Handlers run in subscription order. A handler that raises is logged
    and skipped so the operation that fired the event still succeeds.
    """

    def __init__(self):
        self._handlers: List[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        if not callable(handler):
            raise TypeError(f"handler must be callable, got {handler!r}")
        self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        # removes the earliest matching subscription
        if handler in self._handlers:
            self._handlers.remove(handler)

    def fire(self, contents: str) -> None:
        for handler in list(self._handlers):
            try:
                handler(contents)
            except Exception:
                logger.exception("Read result handler %r failed", handler)

    def __iadd__(self, handler: Handler) -> "ReadResultEvent":
        self.subscribe(handler)
        return self

    def __isub__(self, handler: Handler) -> "ReadResultEvent":
        self.unsubscribe(handler)
        return self

    def __len__(self) -> int:
        return len(self._handlers)
