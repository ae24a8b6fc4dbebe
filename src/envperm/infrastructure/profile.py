"""Shell profile discovery and append-only writes.

INVARIANT: The profile is an append-only log. Existing content is never
read or modified; files are only ever opened in append mode.

Candidates are tried in order without creating anything. Only when none
of them can be opened is the fallback created.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

# Login-shell startup files, in the order bash itself consults them.
PROFILE_CANDIDATES: tuple[str, ...] = (".bash_profile", ".bash_login", ".profile")
PROFILE_FALLBACK = ".bash_profile"


class HomeDirectoryError(RuntimeError):
    """Raised when no home directory can be determined."""


# ---------------------------------------------------------------------------
# Home directory
# ---------------------------------------------------------------------------


def home_dir(override: Path | str | None = None) -> Path:
    """Return the home directory to write profiles into.

    Uses *override* when given, then ``$HOME``, then the password database.
    An empty override (which pydantic turns into ``Path(".")``) counts as unset.
    """
    if override is not None and str(override) not in ("", "."):
        return Path(override).expanduser()

    env_home = os.environ.get("HOME")
    if env_home:
        return Path(env_home)

    try:
        import pwd

        pw_dir = pwd.getpwuid(os.getuid()).pw_dir
    except (ImportError, KeyError) as exc:
        msg = "No home directory"
        raise HomeDirectoryError(msg) from exc
    if not pw_dir:
        msg = "No home directory"
        raise HomeDirectoryError(msg)
    return Path(pw_dir)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def find_profile(
    home: Path,
    candidates: Sequence[str] = PROFILE_CANDIDATES,
) -> Path | None:
    """Return the candidate :func:`open_profile` would pick.

    None means the fallback would be created. Nothing is opened or created;
    a candidate must be an existing, writable file.
    """
    for name in candidates:
        path = home / name
        if path.is_file() and os.access(path, os.W_OK):
            return path
    return None


def open_profile(
    home: Path,
    candidates: Sequence[str] = PROFILE_CANDIDATES,
    fallback: str = PROFILE_FALLBACK,
) -> tuple[Path, TextIO]:
    """Open the user's profile for appending.

    Tries each of *candidates* in order, opening an existing file only.
    If none can be opened, creates *fallback*. Returns ``(path, handle)``;
    the caller owns the handle.

    Raises:
        OSError: If the fallback cannot be created either.
    """
    for name in candidates:
        path = home / name
        try:
            handle = _open_existing_for_append(path)
        except OSError as exc:
            logger.debug("Profile candidate unavailable: %s (%s)", path, exc.strerror)
            continue
        logger.debug("Using profile %s", path)
        return path, handle

    path = home / fallback
    logger.debug("No profile found, creating %s", path)
    return path, path.open("a", encoding="utf-8")


def _open_existing_for_append(path: Path) -> TextIO:
    """Open *path* in append mode, failing if it does not already exist."""
    fd = os.open(path, os.O_WRONLY | os.O_APPEND)
    return os.fdopen(fd, "a", encoding="utf-8")


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


def append_line(handle: TextIO, line: str) -> None:
    """Append *line* after a blank separator line, then flush."""
    handle.write(f"\n{line}\n")
    handle.flush()
