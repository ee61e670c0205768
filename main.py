from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from creditportal.api.v1 import chat, chat_websocket, consultations, contact, credit
from creditportal.core.config import settings
from creditportal.core.logging import configure_logging
from creditportal.middleware.logging import LoggingMiddleware


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Credit Repair Member Portal",
        version="0.1.0",
    )

    # CORS middleware - must be added before other middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(LoggingMiddleware)

    prefix = settings.API_PREFIX
    app.include_router(chat.router, prefix=prefix)
    app.include_router(consultations.router, prefix=prefix)
    app.include_router(contact.router, prefix=prefix)
    app.include_router(credit.router, prefix=prefix)
    # Realtime channel lives at a fixed path outside the API prefix
    app.include_router(chat_websocket.router)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict:
        return {"status": "ok", "environment": settings.ENVIRONMENT}

    return app


app = create_app()


if __name__ == "__main__":
    import os
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=settings.DEBUG,
    )
