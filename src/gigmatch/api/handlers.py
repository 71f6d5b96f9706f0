"""
Handlers HTTP para el matching.

Expone:
- GET /health
- GET /jobs/{job_id}/matches?limit=N
"""

import asyncio
from typing import Optional

import structlog
from aiohttp import web

from gigmatch.config import get_settings
from gigmatch.database import StoreUnavailableError
from gigmatch.matching.service import MatchingService

logger = structlog.get_logger()

SERVICE_KEY = web.AppKey("matching_service", MatchingService)


def _parse_limit(value: Optional[str], default: int, maximum: int) -> Optional[int]:
    """Devuelve el limit pedido (acotado a maximum) o None si es inválido."""
    if value is None or value.strip() == "":
        return default
    try:
        limit = int(value.strip())
    except ValueError:
        return None
    if limit < 1:
        return None
    return min(limit, maximum)


async def health(_: web.Request) -> web.Response:
    return web.Response(text="ok")


async def job_matches(request: web.Request) -> web.Response:
    """Top matches de freelancers para un job."""
    settings = get_settings()
    service = request.app[SERVICE_KEY]
    job_id = request.match_info["job_id"]

    limit = _parse_limit(
        request.query.get("limit"),
        default=settings.default_match_limit,
        maximum=settings.max_match_limit,
    )
    if limit is None:
        logger.warning(
            "Limit inválido",
            job_id=job_id,
            limit=request.query.get("limit"),
        )
        return web.Response(text="invalid_limit", status=400)

    try:
        matches = await asyncio.wait_for(
            asyncio.to_thread(service.get_top_matches, job_id, limit),
            timeout=settings.match_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.error(
            "Timeout calculando matches",
            job_id=job_id,
            timeout=settings.match_timeout_seconds,
        )
        return web.Response(text="match_timeout", status=504)
    except StoreUnavailableError as e:
        logger.error("Error consultando el store", job_id=job_id, error=str(e))
        return web.Response(text="store_unavailable", status=503)

    return web.json_response([m.to_dict() for m in matches])


def create_app(service: Optional[MatchingService] = None) -> web.Application:
    """
    Construye la aplicación aiohttp.

    Args:
        service: MatchingService a usar (None = uno contra Supabase)
    """
    app = web.Application()
    app[SERVICE_KEY] = service or MatchingService()

    app.router.add_get("/health", health)
    app.router.add_get("/jobs/{job_id}/matches", job_matches)
    return app
