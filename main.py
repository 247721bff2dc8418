import asyncio

import uvicorn
from fastapi import FastAPI
from starlette.responses import RedirectResponse

from promo_parser.config import settings
from promo_parser.core.migrations import run_migrations
from promo_parser.routes.promotions import router as promotions_router
from promo_parser.utils.logger import logger

app = FastAPI(title="Promotions Parser Service", swagger_ui_parameters={"operationsSorter": "method"})
app.include_router(router=promotions_router)


@app.on_event("startup")
async def apply_migrations() -> None:
    """
    Bring the schema up to date before serving traffic when enabled.
    """

    if not settings.database.migrate_on_startup:
        return

    logger.info("Applying database migrations during startup")
    await asyncio.to_thread(run_migrations)


@app.get("/health", operation_id="healthcheck")
async def healthcheck() -> dict[str, str]:
    """
    Health endpoint for monitoring integrations.
    """

    return {"status": "ok"}


@app.head("/health", include_in_schema=False)
async def healthcheck_head() -> dict[str, str]:
    """
    Lightweight health probe response for HEAD requests.
    """

    return {"status": "ok"}


@app.get("/")
async def redirect_to_docs() -> RedirectResponse:
    """
    Redirect user to docs.
    """
    return RedirectResponse("/docs")


if __name__ == "__main__":
    uvicorn.run(app="main:app", host="0.0.0.0", port=8000)
