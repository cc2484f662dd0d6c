import os
import uuid
from pathlib import Path

from bratconv.core.config import settings
from bratconv.core.errors import ERR_OUTPUT_EXISTS, ResourceError


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def write_output(path: Path, content: str, overwrite: bool = False) -> Path:
    """
    Write the generated Acharya stream to path.

    Refuses to touch an existing file unless overwrite is set.
    Uses atomic write: write to temp -> rename to final file.
    The check and the rename are not atomic together, concurrent writers
    are not supported.
    """
    out_path = Path(path)
    if out_path.exists() and not overwrite:
        raise ResourceError(ERR_OUTPUT_EXISTS)

    tmp_path = out_path.with_name(out_path.name + f".tmp_{uuid.uuid4().hex}")

    try:
        ensure_dir(out_path.parent)
        fd = os.open(tmp_path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, settings.OUTPUT_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        tmp_path.replace(out_path)
    except OSError as e:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
        raise ResourceError(f"could not write {out_path}: {e}") from e

    return out_path
