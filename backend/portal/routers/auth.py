"""
Authentication router for signup and login forms.
"""
from typing import Annotated

from fastapi import APIRouter, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse

from portal.dependencies.auth import AuthServiceDep, CurrentSession
from portal.schemas.auth import AuthResult
from portal.views import pages

router = APIRouter(tags=["Authentication"])


def _respond(result: AuthResult, failure_links) -> HTMLResponse | RedirectResponse:
    if result.ok:
        return RedirectResponse(result.redirect_to, status_code=status.HTTP_302_FOUND)
    return HTMLResponse(pages.failure_page(result, failure_links))


@router.get("/signup", response_class=HTMLResponse, summary="Registration form")
async def signup_form():
    return pages.SIGNUP_PAGE


@router.post("/signup", summary="Register a new user")
async def signup(
    session: CurrentSession,
    auth_service: AuthServiceDep,
    name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """
    Register a new user account and start a session.

    - **name**: Display name (non-empty)
    - **email**: Valid email address (must be unique)
    - **password**: Password (minimum 6 characters)

    Redirects to `/members` on success; validation and duplicate-email
    failures are shown inline.
    """
    result = await auth_service.register(name, email, password, session)
    return _respond(result, pages.SIGNUP_FAILURE_LINKS)


@router.get("/login", response_class=HTMLResponse, summary="Login form")
async def login_form():
    return pages.LOGIN_PAGE


@router.post("/login", summary="Log in with email and password")
async def login(
    session: CurrentSession,
    auth_service: AuthServiceDep,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """
    Authenticate with email and password and start a session.

    Redirects to `/members` on success; unknown emails and wrong
    passwords are shown inline.
    """
    result = await auth_service.login(email, password, session)
    return _respond(result, pages.LOGIN_FAILURE_LINKS)
