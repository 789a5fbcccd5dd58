"""FastAPI application exposing registered metadata read-only."""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from pydantic import BaseModel

try:  # pragma: no cover - optional dependency
    from fastapi import Depends, FastAPI, HTTPException

    _FASTAPI_AVAILABLE = True
except ModuleNotFoundError:  # pragma: no cover - service mode optional
    FastAPI = None  # type: ignore[assignment,misc]
    Depends = None  # type: ignore[assignment]
    HTTPException = None  # type: ignore[assignment,misc]
    _FASTAPI_AVAILABLE = False

from ..explorer import Explorer
from ..registry import MetadataRegistry, get_default_registry


class HealthResponse(BaseModel):
    status: str


class ElementListResponse(BaseModel):
    elements: List[str]


class ElementResponse(BaseModel):
    id: str
    kind: str
    fragments: Dict[str, Any]


class SchemaListResponse(BaseModel):
    schemas: Dict[str, Dict[str, Any]]


def create_app(
    registry_factory: Callable[[], MetadataRegistry] = get_default_registry,
) -> "FastAPI":
    """Create the FastAPI application serving the explorer export."""

    if not _FASTAPI_AVAILABLE:  # pragma: no cover - validated via unit tests
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install apimeta[service]`."
        )

    app = FastAPI(title="apimeta", version="0.1.0")

    async def get_explorer() -> Explorer:
        return Explorer(registry_factory())

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/elements", response_model=ElementListResponse)
    async def list_elements(explorer: Explorer = Depends(get_explorer)) -> ElementListResponse:
        return ElementListResponse(elements=explorer.element_ids())

    @app.get("/elements/{element_id:path}", response_model=ElementResponse)
    async def get_element(
        element_id: str, explorer: Explorer = Depends(get_explorer)
    ) -> ElementResponse:
        ref = explorer.find(element_id)
        if ref is None:
            raise HTTPException(status_code=404, detail=f"Unknown element {element_id}")
        return ElementResponse(**explorer.export_element(ref))

    @app.get("/schemas", response_model=SchemaListResponse)
    async def list_schemas(explorer: Explorer = Depends(get_explorer)) -> SchemaListResponse:
        return SchemaListResponse(schemas=explorer.export_schemas())

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    if not _FASTAPI_AVAILABLE:
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install apimeta[service]`."
        )

    try:
        import uvicorn
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install uvicorn`."
        ) from exc

    uvicorn.run(create_app(), host=host, port=port)
