from __future__ import annotations

import os
import tempfile
from pathlib import Path


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def atomic_write_text(dest_path: Path, text: str) -> None:
    ensure_dir(dest_path.parent)
    fd, temp_name = tempfile.mkstemp(prefix=f'.{dest_path.name}.', suffix='.tmp', dir=dest_path.parent)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as handle:
            handle.write(text)
        temp_path.replace(dest_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
