"""
Page access rules applied before a request reaches the page routes.

Authenticated visitors are sent away from the login/register pages, and
anonymous visitors are sent to the login page from protected prefixes. The
auth-page rule is evaluated first.
"""

from typing import Optional

AUTH_PAGE_PREFIX = "/auth"
DASHBOARD_PATH = "/dashboard"
LOGIN_PATH = "/auth/login"
PROTECTED_PREFIXES = ("/dashboard", "/trips/new", "/trips/edit")

# Only these page trees go through the guard
GUARDED_TREES = ("/dashboard", "/auth", "/trips")


def is_guarded(path: str) -> bool:
    return any(path == tree or path.startswith(tree + "/") for tree in GUARDED_TREES)


def redirect_target(path: str, is_authenticated: bool) -> Optional[str]:
    """
    Returns the path to redirect to, or None to let the request through.
    """
    if not is_guarded(path):
        return None

    if path.startswith(AUTH_PAGE_PREFIX) and is_authenticated:
        return DASHBOARD_PATH

    if not is_authenticated and any(
        path.startswith(prefix) for prefix in PROTECTED_PREFIXES
    ):
        return LOGIN_PATH

    return None
