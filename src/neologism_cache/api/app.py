from typing import Any

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from neologism_cache.api.dependencies import HandlerDep, lifespan
from neologism_cache.config import settings
from neologism_cache.dto import (
    CategoryItem,
    CreateCategoryRequest,
    CreateNeologismRequest,
    HealthCheckResponse,
    LoginRequest,
    MutationResponse,
    NeologismItem,
    StatusUpdateRequest,
    UpdateNeologismRequest,
)
from neologism_cache.handlers import NeologismHandler


def create_app(neologism_handler: NeologismHandler | None = None) -> FastAPI:
    """Build the API.

    Args:
        neologism_handler: Prepared handler to serve. If None, the lifespan wires a
            Supabase-backed cache from settings.
    """
    app = FastAPI(
        title="Neologism Cache API",
        description="Cached, searchable view of a crowdsourced dictionary of invented words",
        version="0.1.0",
        lifespan=lifespan,
    )
    if neologism_handler is not None:
        app.state.neologism_handler = neologism_handler

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Neologism Cache API",
            "version": "0.1.0",
            "endpoints": {
                "neologisms": "/neologisms",
                "categories": "/categories",
                "auth": "/auth",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        return handler.health_check()

    @app.get("/neologisms", response_model=list[NeologismItem])
    async def list_neologisms(
        handler: HandlerDep,
        q: str | None = None,
        category_id: str | None = None,
        status: str | None = Query(None, description="Workflow state, or 'all'"),
    ) -> list[NeologismItem]:
        return handler.list_neologisms(q=q, category_id=category_id, status_filter=status)

    @app.get("/neologisms/latest", response_model=NeologismItem)
    async def latest_neologism(handler: HandlerDep) -> NeologismItem:
        return handler.get_latest()

    @app.get("/neologisms/random", response_model=NeologismItem)
    async def random_neologism(handler: HandlerDep) -> NeologismItem:
        return handler.get_random()

    @app.get("/neologisms/{neologism_id}", response_model=NeologismItem)
    async def get_neologism(neologism_id: str, handler: HandlerDep) -> NeologismItem:
        return handler.get_neologism(neologism_id)

    @app.post("/neologisms", response_model=MutationResponse)
    async def create_neologism(request: CreateNeologismRequest, handler: HandlerDep) -> MutationResponse:
        return await handler.create_neologism(request)

    @app.put("/neologisms/{neologism_id}", response_model=MutationResponse)
    async def update_neologism(
        neologism_id: str,
        request: UpdateNeologismRequest,
        handler: HandlerDep,
    ) -> MutationResponse:
        return await handler.update_neologism(neologism_id, request)

    @app.patch("/neologisms/{neologism_id}/status", response_model=MutationResponse)
    async def update_status(
        neologism_id: str,
        request: StatusUpdateRequest,
        handler: HandlerDep,
    ) -> MutationResponse:
        return await handler.update_status(neologism_id, request)

    @app.delete("/neologisms/{neologism_id}", response_model=MutationResponse)
    async def delete_neologism(neologism_id: str, handler: HandlerDep) -> MutationResponse:
        return await handler.delete_neologism(neologism_id)

    @app.get("/categories", response_model=list[CategoryItem])
    async def list_categories(handler: HandlerDep) -> list[CategoryItem]:
        return handler.list_categories()

    @app.post("/categories", response_model=MutationResponse)
    async def create_category(request: CreateCategoryRequest, handler: HandlerDep) -> MutationResponse:
        return await handler.create_category(request)

    @app.post("/refresh", response_model=MutationResponse)
    async def refresh(handler: HandlerDep) -> MutationResponse:
        return await handler.refresh()

    @app.post("/auth/login", response_model=MutationResponse)
    async def login(request: LoginRequest, handler: HandlerDep) -> MutationResponse:
        return await handler.login(request)

    @app.post("/auth/logout", response_model=MutationResponse)
    async def logout(handler: HandlerDep) -> MutationResponse:
        return await handler.logout()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "neologism_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
