# third party imports
import fastapi

# app imports
from pi_monitor.__version__ import __version__
from pi_monitor.core.config import endpoints, settings

router = fastapi.APIRouter()


@router.get(settings.API_STR, include_in_schema=False)
async def api():
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "endpoints": endpoints,
    }
