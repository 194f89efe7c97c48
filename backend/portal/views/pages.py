"""
HTML pages for the portal.

Pages are small fixed strings; anything user-supplied is escaped.
"""
from html import escape
from urllib.parse import quote

from portal.core.errors import AuthErrorKind
from portal.schemas.auth import AuthResult, HomeView, MembersView

NOT_FOUND_PAGE = """
<h1>404 - Page Not Found</h1>
<p>Sorry, the page you are looking for does not exist.</p>
<a href="/">Back to Home</a>
"""

SIGNUP_PAGE = """
<h1>Sign Up</h1>
<form action="/signup" method="POST">
    Name: <input name="name" required />
    Email: <input name="email" type="email" required />
    Password: <input name="password" type="password" required />
    <button type="submit">Register</button>
</form>
"""

LOGIN_PAGE = """
<h1>Login</h1>
<form method="POST" action="/login">
    Email: <input name="email" type="email" required /><br>
    Password: <input name="password" type="password" required /><br>
    <button type="submit">Log In</button>
</form>
<p><a href="/signup">Don't have an account? Sign up</a></p>
"""

# (href, link text) shown under a failed form submission
SIGNUP_FAILURE_LINKS = {
    AuthErrorKind.VALIDATION_ERROR: ("/signup", "Back"),
    AuthErrorKind.CONFLICT: ("/login", "Login"),
}
LOGIN_FAILURE_LINKS = {
    AuthErrorKind.VALIDATION_ERROR: ("/login", "Back to login"),
    AuthErrorKind.NOT_FOUND: ("/login", "Try again"),
    AuthErrorKind.AUTHENTICATION_ERROR: ("/login", "Try again"),
}


def home_page(view: HomeView) -> str:
    if view.username is None:
        return """
<h1>Welcome!</h1>
<p><a href="/signup">Sign Up</a> | <a href="/login">Login</a></p>
"""
    return f"""
<h1>Hello, {escape(view.username)}!</h1>
<p><a href="/members">Go to Members Page</a> | <a href="/logout">Logout</a></p>
"""


def members_page(view: MembersView) -> str:
    return f"""
<h1>Welcome, {escape(view.username)}!</h1>
<p><a href="/logout">Logout</a></p>
<img src="/images/{quote(view.image)}" style="max-width: 300px; height: auto;" alt="Random image">
"""


def failure_page(result: AuthResult, links: dict[AuthErrorKind, tuple[str, str]]) -> str:
    """Inline error text for a failed register or login."""
    href, text = links[result.error]
    return f'<p>{escape(result.message or "")}</p><a href="{href}">{text}</a>'
