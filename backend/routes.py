"""
Routes for the portfolio site.

Every request is one mount of the repository showcase: it fetches the
pinned repositories once, renders, then unmounts.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse

from models.data_models import ShowcaseState
from portfolio.renderer import PageRenderer
from portfolio.showcase import RepositoryShowcase, showcase_from_config

logger = logging.getLogger(__name__)

router = APIRouter()


async def _load_showcase(request: Request) -> RepositoryShowcase:
    showcase = showcase_from_config(request.app.state.config)
    token = showcase.mount()
    try:
        await showcase.initialize(token)
    finally:
        # Runs even if initialize raises or is cancelled
        showcase.unmount()
    return showcase


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """
    Render the portfolio page.

    A failed fetch still renders the page, with an empty work section.
    """
    showcase = await _load_showcase(request)
    html = PageRenderer(request.app.state.config).render(showcase)
    return HTMLResponse(content=html)


@router.get(
    "/api/repositories",
    response_model=ShowcaseState,
    response_model_by_alias=False,
    tags=["repositories"],
)
async def list_repositories(request: Request):
    """
    Return the pinned repositories as JSON.

    Returns:
    - status: "loaded" or "failed"
    - repositories: Repository summaries in the order GitHub returned them
    - error: Failure reason (only when status is "failed")

    Responds with 502 when the upstream fetch failed.
    """
    showcase = await _load_showcase(request)
    state = showcase.state

    if state.status == "failed":
        logger.warning(f"Serving failed showcase state: {state.error}")
        return JSONResponse(status_code=502, content=state.model_dump(mode="json"))

    return state


@router.get("/health")
def health():
    """Liveness check."""
    return {"status": "ok"}
