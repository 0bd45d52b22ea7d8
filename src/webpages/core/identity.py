from __future__ import annotations

import getpass

from webpages.errors import IdentityError

def current_user() -> str:
    """Login name of the invoking user, used as the page author."""
    try:
        name = getpass.getuser()
    except (KeyError, OSError, ImportError) as e:
        raise IdentityError(f"Cannot determine the invoking user: {e}") from e
    if not name:
        raise IdentityError("Cannot determine the invoking user")
    return name
