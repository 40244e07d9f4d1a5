import os
from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

from stringlift.logging_config import logger
from .config import DEFAULT_EXTENSIONS, DEFAULT_IGNORE_PATTERNS


def _load_patterns(directory: Path, respect_gitignore: bool, extra: Optional[List[str]]) -> List[str]:
    all_patterns: List[str] = list(extra or [])
    if not respect_gitignore:
        return all_patterns

    all_patterns.extend(DEFAULT_IGNORE_PATTERNS)
    gitignore_path = directory / ".gitignore"
    if gitignore_path.is_file():
        try:
            gitignore_patterns = gitignore_path.read_text(encoding="utf-8").splitlines()
            all_patterns.extend(gitignore_patterns)
            logger.debug(f"Loaded {len(gitignore_patterns)} patterns from '{gitignore_path}'")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read .gitignore file at '{gitignore_path}'. Error: {e}")
    return all_patterns


def discover_files(
    path: Path,
    extensions: Optional[List[str]] = None,
    respect_gitignore: bool = True,
    ignore_patterns: Optional[List[str]] = None,
    exclude: Iterable[Path] = (),
) -> List[Path]:
    """
    Resolve an input path into the source files to process.

    A file is returned as-is when its extension is allowed. A directory is
    walked recursively in sorted order, pruning ignored directories, so the
    result is deterministic across platforms.

    Args:
        path: A file or a directory.
        extensions: Extensions to include (defaults to ['.py']).
        respect_gitignore: Apply the default ignore patterns and the root .gitignore.
        ignore_patterns: Additional gitignore-style patterns.
        exclude: Paths never returned (e.g. the generated constants module).

    Returns:
        The list of files to process; empty if nothing matched.
    """
    allowed_extensions = set(extensions or DEFAULT_EXTENSIONS)
    excluded = {Path(p).resolve() for p in exclude}

    if path.is_file():
        if path.suffix in allowed_extensions and path.resolve() not in excluded:
            return [path]
        logger.debug(f"Ignoring '{path}': extension or exclusion filter")
        return []

    if not path.is_dir():
        logger.warning(f"Input path '{path}' does not exist")
        return []

    all_patterns = _load_patterns(path, respect_gitignore, ignore_patterns)
    spec = pathspec.PathSpec.from_lines("gitwildmatch", all_patterns)
    logger.debug(f"Initialized discovery with {len(all_patterns)} ignore patterns")

    found_files: List[Path] = []
    for root, dirs, files in os.walk(path):
        root_path = Path(root)

        # Prune ignored directories in-place so os.walk never descends into them
        kept = []
        for d in sorted(dirs):
            relative_dir = (root_path / d).relative_to(path).as_posix()
            if spec.match_file(relative_dir + "/"):
                logger.debug(f"Ignoring directory '{relative_dir}' due to ignore rules")
            else:
                kept.append(d)
        dirs[:] = kept

        for file_name in sorted(files):
            file_path = root_path / file_name
            relative_path = file_path.relative_to(path).as_posix()

            if file_path.suffix not in allowed_extensions:
                continue
            if spec.match_file(relative_path):
                logger.debug(f"Ignoring '{relative_path}' due to ignore rules")
                continue
            if file_path.resolve() in excluded:
                logger.debug(f"Ignoring '{relative_path}': generated constants module")
                continue

            found_files.append(file_path)

    logger.info(f"Discovered {len(found_files)} source files under '{path}'")
    return found_files
