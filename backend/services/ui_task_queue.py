"""
UI Task Queue - Run UI-affecting tasks one at a time, off the request path
"""

from __future__ import annotations

import asyncio
import threading
from typing import Callable, Optional


class UITaskQueue:
    """Single-consumer queue of (task, expired) pairs"""

    _instance = None

    def __init__(self):
        self._queue: Optional[asyncio.Queue] = None
        self._worker: Optional[asyncio.Task] = None
        self.skipped_count = 0

    @classmethod
    def get_instance(cls) -> "UITaskQueue":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = UITaskQueue()
        return cls._instance

    @property
    def is_running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    async def start(self):
        """Start the consumer on the running event loop"""
        if self.is_running:
            return
        self._queue = asyncio.Queue()
        self._worker = asyncio.create_task(self._run())
        print("[UITaskQueue] Started")

    async def stop(self):
        """Stop the consumer. Tasks still queued are dropped."""
        if self._worker is None:
            return
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None
        self._queue = None
        print("[UITaskQueue] Stopped")

    def invoke_later(self, task: Callable[[], None], expired: threading.Event):
        """Queue a task; it is skipped if `expired` is set by the time it runs"""
        if self._queue is None:
            raise RuntimeError("UI task queue is not running")
        self._queue.put_nowait((task, expired))

    async def join(self):
        """Wait until every queued task has been run or skipped"""
        if self._queue is not None:
            await self._queue.join()

    async def _run(self):
        while True:
            task, expired = await self._queue.get()
            try:
                if expired.is_set():
                    self.skipped_count += 1
                    print("[UITaskQueue] Skipped task, its context was disposed")
                else:
                    task()
            except Exception as e:
                print(f"[UITaskQueue] Task failed: {e}")
            finally:
                self._queue.task_done()
