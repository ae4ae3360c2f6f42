# topmark:header:start
#
#   project      : OrgCommentary
#   file         : locking.py
#   file_relpath : src/orgcommentary/locking.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detect Emacs-style file locks.

An editing session that has unsaved changes to ``dir/name`` holds the lock
file ``dir/.#name``. It is normally a dangling symlink whose target reads
``user@host.pid:boot`` (a regular file with the same content on systems
without symlinks).

A lock only blocks a write when another live session holds it: locks owned
by this process, and locks left behind on this host by a process that no
longer runs, are ignored.
"""

from __future__ import annotations

import os
import re
import socket
from dataclasses import dataclass
from pathlib import Path

from orgcommentary.config.logging import get_logger
from orgcommentary.constants import LOCK_FILE_PREFIX

logger = get_logger(__name__)

_OWNER_RE: re.Pattern[str] = re.compile(
    r"^(?P<user>[^@]*)@(?P<host>[^.:]+(?:\.[^.:]+)*?)\.(?P<pid>\d+)(?::(?P<boot>\d+))?$"
)


@dataclass(frozen=True)
class LockOwner:
    """Parsed content of a lock file."""

    user: str
    host: str
    pid: int

    def __str__(self) -> str:
        return f"{self.user}@{self.host} (pid {self.pid})"


def lock_file_for(path: Path) -> Path:
    """Return the lock file path guarding ``path``."""
    return path.parent / f"{LOCK_FILE_PREFIX}{path.name}"


def parse_lock_owner(raw: str) -> LockOwner | None:
    """Parse ``user@host.pid[:boot]``; None when the content is not recognized."""
    m: re.Match[str] | None = _OWNER_RE.match(raw.strip())
    if not m:
        return None
    return LockOwner(user=m.group("user"), host=m.group("host"), pid=int(m.group("pid")))


def read_lock_owner(path: Path) -> LockOwner | None:
    """Return the owner of the lock on ``path``, or None when it is not locked."""
    lock: Path = lock_file_for(path)
    try:
        raw: str = os.readlink(lock) if lock.is_symlink() else lock.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        logger.debug("Cannot read lock file %s: %s", lock, exc)
        return None
    owner: LockOwner | None = parse_lock_owner(raw)
    if owner is None:
        logger.debug("Unrecognized lock file content in %s: %r", lock, raw)
    return owner


def _process_alive(pid: int) -> bool:
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        return True
    except OSError:
        return False
    return True


def locked_by_other(path: Path) -> LockOwner | None:
    """Return the owner when another live session holds the lock on ``path``.

    Args:
        path (Path): The file that is about to be written.

    Returns:
        LockOwner | None: The foreign owner, or None when writing is allowed.
    """
    owner: LockOwner | None = read_lock_owner(path)
    if owner is None:
        return None
    if owner.host == socket.gethostname():
        if owner.pid == os.getpid():
            return None
        if not _process_alive(owner.pid):
            logger.info("Ignoring stale lock on %s held by %s", path, owner)
            return None
    return owner
