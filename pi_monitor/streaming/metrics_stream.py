import asyncio
import uuid
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, Optional

from starlette.concurrency import run_in_threadpool

from pi_monitor.constants import STREAM_INTERVAL
from pi_monitor.core.logging import get_logger
from pi_monitor.schemas.metrics import MetricsSnapshot

log = get_logger(__name__)


def format_event(snapshot: MetricsSnapshot) -> str:
    """Renders one snapshot as a Server-Sent Events frame."""
    return f"data: {snapshot.to_json()}\n\n"


class MetricsStreamManager:
    """
    Runs one producer task per stream subscriber. The producer collects a
    snapshot immediately and then once per interval until the subscriber
    is dropped.
    """

    def __init__(
        self,
        collect: Callable[[], MetricsSnapshot],
        interval: float = STREAM_INTERVAL,
    ):
        self.collect = collect
        self.interval = interval
        self.subscribers: Dict[str, Dict[str, Any]] = {}

    def subscribe(self, subscriber_id: str) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=1)
        self.subscribers[subscriber_id] = {
            "queue": queue,
            "task": asyncio.create_task(self._produce(queue)),
        }
        log.info(f"Stream subscriber {subscriber_id} connected")
        return queue

    def unsubscribe(self, subscriber_id: str) -> None:
        # synchronous so it can run from a generator that is being cancelled
        subscriber = self.subscribers.pop(subscriber_id, None)
        if subscriber is None:
            return
        subscriber["task"].cancel()
        log.info(f"Stream subscriber {subscriber_id} disconnected")

    async def close_all(self) -> None:
        tasks = [subscriber["task"] for subscriber in self.subscribers.values()]
        self.subscribers.clear()
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if tasks:
            log.info(f"Closed {len(tasks)} stream subscriber(s)")

    async def _produce(self, queue: asyncio.Queue) -> None:
        while True:
            try:
                snapshot = await run_in_threadpool(self.collect)
                if queue.full():
                    # subscriber fell behind, keep only the newest snapshot
                    queue.get_nowait()
                queue.put_nowait(snapshot)
            except Exception as e:
                log.error(f"Metrics collection for stream failed: {e}")
            await asyncio.sleep(self.interval)

    async def events(
        self,
        is_disconnected: Callable[[], Awaitable[bool]],
        subscriber_id: Optional[str] = None,
    ) -> AsyncIterator[str]:
        """
        Yields SSE frames until is_disconnected() reports True, the
        generator is closed, or close_all() drops the subscriber. The
        producer task is cancelled on every one of those paths.
        """
        subscriber_id = subscriber_id or uuid.uuid4().hex
        queue = self.subscribe(subscriber_id)
        try:
            while subscriber_id in self.subscribers:
                if await is_disconnected():
                    break
                try:
                    snapshot = await asyncio.wait_for(queue.get(), timeout=self.interval)
                except asyncio.TimeoutError:
                    continue
                yield format_event(snapshot)
        finally:
            self.unsubscribe(subscriber_id)
