"""Dedicated search thread that answers protocol messages one at a time."""
from __future__ import annotations

import asyncio
import logging
import queue
import threading
from concurrent.futures import Future
from typing import Optional

from .client import LocationSearch, MessageType, make_message

logger = logging.getLogger(__name__)

_STOP = object()


class SearchWorker:
    """Own a LocationSearch on a background thread and serve requests in order.

    Every posted message gets a Future that is resolved exactly once with the
    response message. Requests never overlap: the thread finishes one before
    it takes the next. Discarding late answers to superseded queries is left
    to the caller (see ``is_current``).
    """

    def __init__(self, engine: Optional[LocationSearch] = None, *, name: str = "geofuzzy-search") -> None:
        self._engine = engine or LocationSearch()
        self._name = name
        self._queue: "queue.Queue" = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._latest_query: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def engine(self) -> LocationSearch:
        return self._engine

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "SearchWorker":
        if self.is_running:
            return self
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()
        return self

    def stop(self, timeout: Optional[float] = None) -> None:
        if not self._thread:
            return
        self._queue.put((_STOP, None))
        self._thread.join(timeout=timeout)
        self._thread = None

    def __enter__(self) -> "SearchWorker":
        return self.start()

    def __exit__(self, *exc) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------
    def post(self, message: dict) -> Future:
        if not self.is_running:
            raise RuntimeError("SearchWorker is not running; call start() first")
        future: Future = Future()
        self._queue.put((message, future))
        return future

    def init(self, data) -> Future:
        return self.post(make_message(MessageType.INIT, {'data': data}))

    def search(self, query: str, max_results: Optional[int] = None) -> Future:
        with self._lock:
            self._latest_query = query
        payload = {'query': query}
        if max_results is not None:
            payload['maxResults'] = max_results
        return self.post(make_message(MessageType.SEARCH, payload))

    def get_filters(self) -> Future:
        return self.post(make_message(MessageType.GET_FILTERS))

    async def asearch(self, query: str, max_results: Optional[int] = None) -> dict:
        return await asyncio.wrap_future(self.search(query, max_results))

    def is_current(self, response: dict) -> bool:
        """True if a RESULTS response answers the most recently submitted query."""
        if response.get('type') != MessageType.RESULTS.value:
            return False
        with self._lock:
            return response.get('payload', {}).get('query') == self._latest_query

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _run(self) -> None:
        while True:
            message, future = self._queue.get()
            if message is _STOP:
                break
            if not future.set_running_or_notify_cancel():
                continue
            try:
                response = self._engine.handle_message(message)
            except Exception as e:
                logger.exception("Search worker failed to handle %r", message)
                response = make_message(MessageType.ERROR, str(e))
            future.set_result(response)
