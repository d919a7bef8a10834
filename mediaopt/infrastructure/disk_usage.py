import os
import stat
from pathlib import Path
from mediaopt.domain.errors import FolderSizeError

def folder_size(path: Path) -> int:
    """Total size in bytes of all regular files below `path` (symlinks not followed)."""
    if not path.is_dir():
        raise FolderSizeError(f"{path} is not a directory")

    def _raise(error: OSError):
        raise error

    total = 0
    try:
        for dirpath, _, filenames in os.walk(path, onerror=_raise):
            for name in filenames:
                st = os.lstat(os.path.join(dirpath, name))
                if stat.S_ISREG(st.st_mode):
                    total += st.st_size
    except OSError as e:
        raise FolderSizeError(f"Cannot measure {path}: {e}") from e
    return total
