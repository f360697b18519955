"""Utility functions for authorgraph.

Import convention: use module-level imports for clarity.

    from authorgraph.utils import isodatetime, uid
    expires = isodatetime.now_unix() + 3600
    author_id = uid.generate_uuid()
"""

from . import isodatetime, uid

__all__ = ["isodatetime", "uid"]
