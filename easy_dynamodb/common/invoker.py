"""Dual-mode dispatch: every operation either feeds a callback or returns a future."""

import logging
import threading
from concurrent.futures import Future
from typing import Any, Optional

from easy_dynamodb.types import Callback, Completion, Operation

logger = logging.getLogger(__name__)


class Deferred:
    """Single-assignment result backed by a :class:`concurrent.futures.Future`.

    Only the first call to :meth:`resolve` or :meth:`reject` settles the
    future; anything after that is dropped.
    """

    def __init__(self) -> None:
        self.future: Future = Future()
        self.__lock = threading.Lock()
        self.__settled = False

    def resolve(self, data: Any) -> None:
        if self.__claim():
            self.future.set_result(data)

    def reject(self, error: BaseException) -> None:
        if self.__claim():
            self.future.set_exception(error)

    def completion(self, error: Optional[BaseException], data: Any = None) -> None:
        if error is not None:
            self.reject(error)
        else:
            self.resolve(data)

    def __claim(self) -> bool:
        with self.__lock:
            if self.__settled:
                logger.debug("ignoring repeated completion of an already settled result")
                return False
            self.__settled = True
            return True


def once(callback: Callback) -> Completion:
    lock = threading.Lock()
    called = False

    def completion(error: Optional[BaseException], data: Any = None) -> None:
        nonlocal called
        with lock:
            if called:
                logger.debug("ignoring repeated completion for callback %r", callback)
                return
            called = True
        callback(error, data)

    return completion


def promisify(operation: Operation) -> "Future[Any]":
    deferred = Deferred()
    operation(deferred.completion)
    return deferred.future


def invoke(operation: Operation, callback: Optional[Callback] = None) -> Optional["Future[Any]"]:
    """Run ``operation`` in whichever mode the caller asked for.

    Args:
        operation: procedure taking a single ``(error, data)`` completion handler.
        callback: when callable, receives the outcome directly and nothing is
            returned. Any other value is ignored.

    Returns:
        ``None`` in callback mode, otherwise a future settled exactly once.
    """
    if callable(callback):
        operation(once(callback))
        return None
    return promisify(operation)


def fail(error: BaseException, callback: Optional[Callback] = None) -> Optional["Future[Any]"]:
    if callable(callback):
        callback(error, None)
        return None
    deferred = Deferred()
    deferred.reject(error)
    return deferred.future
