"""
Router for the home page, the members page, and logout.
"""
import logging

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from portal.core.errors import InternalError
from portal.dependencies.auth import AuthServiceDep, CurrentSession
from portal.services.auth_service import HOME_PATH
from portal.views import pages

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse, summary="Home page")
async def home(session: CurrentSession, auth_service: AuthServiceDep):
    return pages.home_page(auth_service.home(session))


@router.get("/members", summary="Members-only page")
async def members(session: CurrentSession, auth_service: AuthServiceDep):
    """Greets the user with a random image; anonymous visitors are sent home."""
    view = await auth_service.members(session)
    if view is None:
        return RedirectResponse(HOME_PATH, status_code=status.HTTP_302_FOUND)
    return HTMLResponse(pages.members_page(view))


@router.get("/logout", summary="End the session")
async def logout(session: CurrentSession, auth_service: AuthServiceDep):
    try:
        redirect_to = await auth_service.logout(session)
    except InternalError:
        logger.exception("Logout failed")
        return PlainTextResponse(
            "Error logging out",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return RedirectResponse(redirect_to, status_code=status.HTTP_302_FOUND)
