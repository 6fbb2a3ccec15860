"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from ava_health.api.serializers import ingredient_response

if TYPE_CHECKING:
    from ava_health.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/catalog", dependencies=[Depends(require_admin)])
async def list_catalog(request: Request, query: str | None = None) -> dict[str, object]:
    """Return the catalog snapshot, or a name/alias search when query is set."""
    container: AppContainer = request.app.state.container
    records = (
        container.catalog.search(query) if query else container.catalog.snapshot()
    )
    return {
        "ingredients": [
            ingredient_response(record).model_dump(
                mode="json", exclude={"is_risky", "risk_reasons"}
            )
            for record in records
        ]
    }


@router.post("/catalog/refresh", dependencies=[Depends(require_admin)])
async def refresh_catalog(request: Request) -> dict[str, object]:
    """Drop the cached catalog snapshot and reload it."""
    container: AppContainer = request.app.state.container
    container.catalog.invalidate()
    return {"status": "ok", "ingredients": len(container.catalog.snapshot())}
