"""URI helpers shared by the registry and the facades."""

from urllib.parse import urlsplit


def request_path(uri: object) -> str:
    """Return the path component of *uri*, ``/`` when empty.

    Accepts strings and URL objects (anything with a useful ``str()``),
    absolute or relative.
    """
    return urlsplit(str(uri)).path or "/"
