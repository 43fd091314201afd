from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from poker_stats.api.routes import router as api_router
from poker_stats.config import settings
from poker_stats.logging_config import configure_logging


def create_app() -> FastAPI:
    configure_logging(settings.log_level, settings.log_dir)
    app = FastAPI(title="Poker Hand Statistics", version="0.1.0")

    # Allow local dev frontends to call the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {"status": "ok"}

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("poker_stats.main:app", host="0.0.0.0", port=8000, reload=True)
