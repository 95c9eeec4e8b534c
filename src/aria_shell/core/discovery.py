# src/aria_shell/core/discovery.py
import logging
import os
from pathlib import Path
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)


def _normalise_extensions(extensions: Iterable[str]) -> set:
    return {e.lower() if e.startswith(".") else f".{e.lower()}" for e in extensions}


def discover_source_units(
        path: Union[str, Path],
        extensions: Iterable[str],
        exclude_dirs: Iterable[str] = ()
) -> List[Path]:
    """
    Collects the markup files to lint below `path`, sorted by path.

    A file path is returned as-is when its extension matches. Directories named
    in `exclude_dirs` and hidden (dot) directories are not descended into, and
    symlinked directories are not followed.
    """
    root = Path(path)
    wanted = _normalise_extensions(extensions)

    if root.is_file():
        return [root] if root.suffix.lower() in wanted else []
    if not root.is_dir():
        return []

    excluded = set(exclude_dirs)
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Prune in place so os.walk skips these subtrees.
        dirnames[:] = [d for d in dirnames if d not in excluded and not d.startswith(".")]
        for filename in filenames:
            if Path(filename).suffix.lower() in wanted:
                found.append(Path(dirpath) / filename)

    found.sort()
    logger.debug("Discovered %d source unit(s) under '%s'", len(found), root)
    return found
