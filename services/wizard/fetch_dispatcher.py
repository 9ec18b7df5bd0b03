# -*- coding: utf-8 -*-
"""
Fetch dispatchers - run blocking lookups off the UI thread.

The resolver and the state machine never call the network directly; they
hand a zero-argument callable to a dispatcher together with success and
error callbacks. Callbacks always run on the thread that owns the
dispatcher (the Qt event loop for QtFetchDispatcher).
"""

from abc import ABCMeta, abstractmethod
from itertools import count
from typing import Any, Callable, Dict, Set

from PyQt5.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from utils.logger import get_logger

logger = get_logger(__name__)

SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[Exception], None]


class FetchRequest:
    """One dispatched call and its callbacks."""

    _ids = count(1)

    def __init__(self, label: str, fn: Callable[[], Any],
                 on_success: SuccessCallback, on_error: ErrorCallback):
        self.id = next(self._ids)
        self.label = label
        self.fn = fn
        self.on_success = on_success
        self.on_error = on_error
        self.abandoned = False

    def __repr__(self):
        return f"FetchRequest(#{self.id} {self.label})"


class FetchDispatcher(metaclass=ABCMeta):
    """Interface used by the field resolver and the wizard state machine."""

    @abstractmethod
    def dispatch(self, label: str, fn: Callable[[], Any],
                 on_success: SuccessCallback, on_error: ErrorCallback) -> FetchRequest:
        """Run ``fn`` and deliver its result (or exception) to a callback."""

    @abstractmethod
    def cancel_all(self):
        """Abandon every pending request; their callbacks will never run."""


class ImmediateDispatcher(FetchDispatcher):
    """Runs the call inline. Used where no event loop is available."""

    def dispatch(self, label, fn, on_success, on_error):
        request = FetchRequest(label, fn, on_success, on_error)
        try:
            result = fn()
        except Exception as e:
            logger.debug(f"{request} failed: {e}")
            on_error(e)
            return request
        on_success(result)
        return request

    def cancel_all(self):
        pass


# Abandoned workers still running. Held here so a closed wizard (and its
# dispatcher) can be deleted without destroying a running QThread.
_abandoned: Set["FetchWorker"] = set()


class FetchWorker(QThread):
    """Background worker for one request."""

    succeeded = pyqtSignal(object, object)  # request, result
    failed = pyqtSignal(object, object)  # request, exception

    def __init__(self, request: FetchRequest, parent=None):
        super().__init__(parent)
        self.request = request

    def run(self):
        """Run the request in background."""
        try:
            result = self.request.fn()
        except Exception as e:
            self.failed.emit(self.request, e)
            return
        self.succeeded.emit(self.request, result)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQObjectMeta(type(QObject), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class QtFetchDispatcher(QObject, FetchDispatcher, metaclass=ABCQObjectMeta):
    """
    Dispatcher backed by one QThread per request.

    Results are delivered through queued signals, so callbacks run on the
    dispatcher's (UI) thread.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._workers: Dict[int, FetchWorker] = {}

    def dispatch(self, label, fn, on_success, on_error):
        request = FetchRequest(label, fn, on_success, on_error)
        worker = FetchWorker(request)
        worker.succeeded.connect(self._on_succeeded)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(lambda rid=request.id: self._release(rid))
        self._workers[request.id] = worker
        logger.debug(f"Dispatching {request}")
        worker.start()
        return request

    def cancel_all(self):
        """Abandon in-flight requests without waiting for their threads."""
        workers = list(self._workers.values())
        self._workers.clear()
        for worker in workers:
            worker.request.abandoned = True
            _abandoned.add(worker)
            worker.finished.connect(lambda w=worker: _reap(w))
            if worker.isFinished():
                _reap(worker)
        if workers:
            logger.debug(f"Abandoned {len(workers)} in-flight request(s)")

    def pending_count(self) -> int:
        return sum(1 for w in self._workers.values() if not w.request.abandoned)

    def wait_all(self, msecs: int = 5000):
        """Block until running workers finish (used on shutdown and in tests)."""
        for worker in list(self._workers.values()):
            worker.wait(msecs)
        wait_for_abandoned(msecs)

    @pyqtSlot(object, object)
    def _on_succeeded(self, request: FetchRequest, result):
        if request.abandoned:
            logger.debug(f"Dropping result of abandoned {request}")
            return
        request.on_success(result)

    @pyqtSlot(object, object)
    def _on_failed(self, request: FetchRequest, error):
        if request.abandoned:
            logger.debug(f"Dropping error of abandoned {request}: {error}")
            return
        request.on_error(error)

    def _release(self, request_id: int):
        worker = self._workers.pop(request_id, None)
        if worker is not None:
            worker.deleteLater()


def _reap(worker: FetchWorker):
    if worker in _abandoned:
        _abandoned.discard(worker)
        worker.deleteLater()


def abandoned_count() -> int:
    """Number of abandoned workers not yet released."""
    return len(_abandoned)


def wait_for_abandoned(msecs: int = 3000):
    """
    Block until abandoned workers finish.

    Called on application shutdown; a QThread must not outlive the process
    while running.
    """
    for worker in list(_abandoned):
        if worker.isRunning():
            worker.wait(msecs)
