from __future__ import annotations

import os
import secrets
import shutil
import time
from typing import BinaryIO, Optional

DEFAULT_EXTENSION = ".bin"


def generate_filename(original_filename: str) -> str:
    # <epoch-ms>-<random><ext>; extension kept verbatim, case included.
    ext = os.path.splitext(os.path.basename(original_filename or ""))[1] or DEFAULT_EXTENSION
    return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}{ext}"


def save_upload(stream: BinaryIO, original_filename: str, upload_dir: str) -> str:
    os.makedirs(upload_dir, exist_ok=True)
    filename = generate_filename(original_filename)
    with open(os.path.join(upload_dir, filename), "wb") as out:
        shutil.copyfileobj(stream, out)
    return filename


def resolve_upload(filename: str, upload_dir: str) -> Optional[str]:
    """Absolute path of a stored upload, or None for unknown or unsafe names."""
    if not filename or os.path.basename(filename) != filename or filename in (".", ".."):
        return None
    path = os.path.join(upload_dir, filename)
    if not os.path.isfile(path):
        return None
    return path
