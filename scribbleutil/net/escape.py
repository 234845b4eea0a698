"""Percent-encoding of URI parameters."""

from __future__ import annotations

from urllib.parse import quote


def url_escape(src: str) -> str:
    """Percent-encode *src* for use as a URI parameter.

    Only the unreserved characters (ASCII letters, digits and ``-._~``)
    are left alone.  Everything else is encoded as UTF-8 bytes in the
    ``%XX`` form, including ``/`` and spaces.
    """
    return quote(src, safe="")