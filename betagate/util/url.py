"""URL construction helpers for invite links and redirects."""

from urllib.parse import parse_qsl, quote, urlencode, urljoin, urlsplit, urlunsplit


def resolve_url(base_url: str, target: str) -> str:
    """Resolve a possibly relative target against the base URL.

    Args:
        base_url: Absolute base URL
        target: Absolute or relative URL

    Returns:
        Absolute URL
    """
    return urljoin(base_url.rstrip("/") + "/", target.strip())


def with_query(url: str, params: dict[str, str]) -> str:
    """Set query parameters on a URL, replacing existing values.

    Args:
        url: Absolute URL
        params: Parameters to set

    Returns:
        URL with the parameters applied
    """
    parts = urlsplit(url)
    query = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in params
    ]
    query.extend(params.items())
    return urlunsplit(
        (
            parts.scheme,
            parts.netloc,
            parts.path or "/",
            urlencode(query),
            parts.fragment,
        )
    )


def build_invite_url(base_url: str, code: str, redirect_to: str) -> str:
    """Build the link emailed to an invitee.

    Args:
        base_url: API base URL
        code: Invite code
        redirect_to: Page the confirmation should land on

    Returns:
        URL of the browser confirmation endpoint
    """
    query = urlencode({"callbackURL": redirect_to})
    return f"{base_url.rstrip('/')}/beta/sign-up/{quote(code, safe='')}?{query}"


def redirect_callback(base_url: str, callback_url: str, params: dict[str, str]) -> str:
    """Resolve the callback URL and attach parameters."""
    return with_query(resolve_url(base_url, callback_url), params)


def redirect_error(
    base_url: str,
    callback_url: str | None,
    error: str,
    error_path: str = "/error",
) -> str:
    """Build an error redirect.

    The error lands on the callback URL when one was given, otherwise on
    the service's error page.

    Args:
        base_url: API base URL
        callback_url: Callback URL from the request, if any
        error: Error code for the ``error`` query parameter
        error_path: Path of the default error page

    Returns:
        Absolute redirect URL
    """
    target = callback_url if callback_url else error_path
    return with_query(resolve_url(base_url, target), {"error": error})
