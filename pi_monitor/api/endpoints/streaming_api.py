from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from pi_monitor.api.deps import get_stream_manager
from pi_monitor.streaming.metrics_stream import MetricsStreamManager

router = APIRouter()

STREAM_HEADERS = {
    "Cache-Control": "no-store",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


@router.get("/stream")
async def stream_metrics(
    request: Request, manager: MetricsStreamManager = Depends(get_stream_manager)
):
    """
    Server-Sent Events stream of metrics snapshots.

    Sends one snapshot immediately, then one per interval until the client
    disconnects. Each frame is 'data: <same JSON as /metrics>'.
    """

    return StreamingResponse(
        manager.events(request.is_disconnected),
        media_type="text/event-stream",
        headers=STREAM_HEADERS,
    )
