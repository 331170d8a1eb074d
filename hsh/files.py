"""File copying."""

import os
import shutil

_CHUNK_SIZE = 1024


def copy_file(src, dest):
    """Copy the contents of ``src`` into ``dest``.

    ``dest`` is created with mode 0755 when missing and truncated when it
    exists. Errors opening, reading or writing raise ``OSError``.
    """
    with open(src, "rb") as source:
        fd = os.open(dest, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o755)
        with os.fdopen(fd, "wb") as target:
            shutil.copyfileobj(source, target, _CHUNK_SIZE)