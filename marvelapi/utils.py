# in marvelapi/utils.py
import hashlib
import logging

log = logging.getLogger("marvelapi")


def marvel_hash(ts: str, private_key: str, public_key: str) -> str:
    m = hashlib.md5()
    m.update((ts + private_key + public_key).encode("utf-8"))
    return m.hexdigest()


def key_preview(key: str | None, chars: int = 4) -> str | None:
    """First few characters of a key, for logs and sanity checks."""
    if not key:
        return None
    return key[:chars] + "..."
