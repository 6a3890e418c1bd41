"""Background work whose results are delivered on the urwid loop thread."""

import logging
import os
import queue
import threading


logger = logging.getLogger(__name__)


class ThreadDispatcher:
    """Runs each job in a daemon thread.

    Results are queued and handed to their callbacks from the main loop
    through a watched pipe, so callbacks never race with the UI.
    """

    def __init__(self, loop):
        self._results = queue.Queue()
        self._pipe_fd = loop.watch_pipe(self._on_pipe)

    def submit(self, fn, callback) -> None:
        def target():
            try:
                result = fn()
            except Exception:
                logger.exception("Background job failed")
                result = None
            self._results.put((callback, result))
            os.write(self._pipe_fd, b"\n")

        threading.Thread(target=target, daemon=True).start()

    def _on_pipe(self, data: bytes) -> bool:
        while True:
            try:
                callback, result = self._results.get_nowait()
            except queue.Empty:
                break
            callback(result)
        return True
