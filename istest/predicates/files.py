"""
File predicates.

Mirrors the file tests of ``test(1)`` with descriptive names, plus size,
age, and glob checks.

Failure policy:
    Any metadata failure (missing path, permission denied, a race with a
    concurrent delete) is False. A missing target and a missing property
    are indistinguishable.

Type checks dereference symlinks, except ``symlink`` which uses lstat.
Access checks use the OS access() primitive against the effective
credentials, never permission-bit inspection.
"""

from __future__ import annotations

import glob
import logging
import os
import stat
import time
from typing import Callable, Optional

from ..domain import Family, Operand, OperandKind
from ..normalize import expand_tilde
from ..registry import predicate

logger = logging.getLogger(__name__)


PATH = Operand("path", OperandKind.PATH, "Path to check")
PATH1 = Operand("path1", OperandKind.PATH, "First path")
PATH2 = Operand("path2", OperandKind.PATH, "Second path")
PATTERN = Operand("pattern", OperandKind.PATTERN, "Shell-style glob pattern")
BYTES = Operand("bytes", OperandKind.UINT64, "Size in bytes")
SECONDS = Operand("seconds", OperandKind.UINT64, "Age in seconds")


# =============================================================================
# METADATA HELPERS
# =============================================================================

def stat_path(path: str, follow_symlinks: bool = True) -> Optional[os.stat_result]:
    """
    Tilde-expand and stat a path.

    Returns None on any failure; the reason is only logged.
    """
    expanded = expand_tilde(path)
    try:
        return os.stat(expanded, follow_symlinks=follow_symlinks)
    except (OSError, ValueError) as exc:
        logger.debug("stat failed for %r: %s", expanded, exc)
        return None


def check_metadata(path: str, check: Callable[[os.stat_result], bool]) -> bool:
    """Apply ``check`` to the path's metadata; False if it cannot be read."""
    meta = stat_path(path)
    if meta is None:
        return False
    return check(meta)


def check_effective_access(path: str, mode: int) -> bool:
    """
    Ask the OS whether the effective user may access ``path`` with ``mode``.

    Honors group membership, ACLs and root bypass. Uses faccessat with
    AT_EACCESS where the platform supports it.
    """
    expanded = expand_tilde(path)
    effective = os.access in os.supports_effective_ids
    try:
        return os.access(expanded, mode, effective_ids=effective)
    except (OSError, ValueError) as exc:
        logger.debug("access check failed for %r: %s", expanded, exc)
        return False


def file_age_seconds(meta: os.stat_result, now: Optional[float] = None) -> Optional[int]:
    """
    Whole seconds elapsed since the last modification.

    Returns None when the modification time lies in the future.
    """
    if now is None:
        now = time.time()
    age = now - meta.st_mtime
    if age < 0:
        return None
    return int(age)


def glob_syntax_error(pattern: str) -> Optional[str]:
    """
    Check a glob pattern for the syntax errors that make it unusable.

    Returns a description of the first error, or None if the pattern is
    well formed:
    - ``[`` must open a class closed by a later ``]``; the first class
      character (after an optional ``!``) may itself be ``]``
    - ``**`` must be a whole path component
    """
    separators = tuple(sep for sep in (os.sep, os.altsep) if sep)
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "[":
            start = i + 2 if pattern[i + 1:i + 2] == "!" else i + 1
            close = pattern.find("]", start + 1)
            if start >= len(pattern) or close < 0:
                return f"unclosed character class at position {i}"
            i = close + 1
            continue
        if char == "*" and pattern[i + 1:i + 2] == "*":
            end = i + 2
            if pattern[end:end + 1] == "*":
                return f"too many wildcards at position {i}"
            before_ok = i == 0 or pattern[i - 1] in separators
            after_ok = end == len(pattern) or pattern[end] in separators
            if not (before_ok and after_ok):
                return f"'**' must form a whole path component at position {i}"
            i = end
            continue
        i += 1
    return None


def iter_glob(pattern: str):
    """
    Yield glob matches for a tilde-expanded pattern.

    ``**`` recurses and wildcards match leading dots, so ``dir/*`` sees
    ``dir/.hidden``. A pattern with a syntax error yields nothing, even
    if a file with that literal name exists.
    """
    expanded = expand_tilde(pattern)
    error = glob_syntax_error(expanded)
    if error is not None:
        logger.debug("unusable glob %r: %s", expanded, error)
        return
    try:
        yield from glob.iglob(expanded, recursive=True, include_hidden=True)
    except (OSError, ValueError) as exc:
        logger.debug("glob failed for %r: %s", expanded, exc)


# =============================================================================
# EXISTENCE AND TYPE
# =============================================================================

@predicate(Family.FILE, "exists", PATH, help="Checks if a file exists (-e).")
def exists(path: str) -> bool:
    return stat_path(path) is not None


@predicate(Family.FILE, "directory", PATH,
           help="Checks if a path is a directory (-d).", aliases=("dir",))
def is_directory(path: str) -> bool:
    return check_metadata(path, lambda m: stat.S_ISDIR(m.st_mode))


@predicate(Family.FILE, "regular", PATH,
           help="Checks if a path is a regular file (-f).", aliases=("file",))
def is_regular(path: str) -> bool:
    return check_metadata(path, lambda m: stat.S_ISREG(m.st_mode))


@predicate(Family.FILE, "symlink", PATH,
           help="Checks if a path is a symbolic link (-h, -L). Does not dereference.",
           aliases=("link",))
def is_symlink(path: str) -> bool:
    meta = stat_path(path, follow_symlinks=False)
    return meta is not None and stat.S_ISLNK(meta.st_mode)


@predicate(Family.FILE, "block-device", PATH,
           help="Checks if a file is a block special file (-b).")
def is_block_device(path: str) -> bool:
    return check_metadata(path, lambda m: stat.S_ISBLK(m.st_mode))


@predicate(Family.FILE, "character-device", PATH,
           help="Checks if a file is a character special file (-c).")
def is_character_device(path: str) -> bool:
    return check_metadata(path, lambda m: stat.S_ISCHR(m.st_mode))


@predicate(Family.FILE, "named-pipe", PATH,
           help="Checks if a file is a named pipe (FIFO) (-p).", aliases=("fifo",))
def is_named_pipe(path: str) -> bool:
    return check_metadata(path, lambda m: stat.S_ISFIFO(m.st_mode))


@predicate(Family.FILE, "socket", PATH, help="Checks if a file is a socket (-S).")
def is_socket(path: str) -> bool:
    return check_metadata(path, lambda m: stat.S_ISSOCK(m.st_mode))


@predicate(Family.FILE, "non-empty", PATH,
           help="Checks if a file exists and has a size greater than zero (-s).")
def is_non_empty(path: str) -> bool:
    return check_metadata(path, lambda m: m.st_size > 0)


# =============================================================================
# ACCESS, MODE BITS, OWNERSHIP
# =============================================================================

@predicate(Family.FILE, "readable", PATH,
           help="Checks if a file is readable by the current (effective) user (-r).")
def is_readable(path: str) -> bool:
    return check_effective_access(path, os.R_OK)


@predicate(Family.FILE, "writable", PATH,
           help="Checks if a file is writable by the current (effective) user (-w).")
def is_writable(path: str) -> bool:
    return check_effective_access(path, os.W_OK)


@predicate(Family.FILE, "executable", PATH,
           help="Checks if a file is executable by the current (effective) user (-x).")
def is_executable(path: str) -> bool:
    return check_effective_access(path, os.X_OK)


@predicate(Family.FILE, "has-suid", PATH,
           help="Checks if the file has the set-user-ID bit set (-u).")
def has_suid(path: str) -> bool:
    return check_metadata(path, lambda m: bool(m.st_mode & stat.S_ISUID))


@predicate(Family.FILE, "has-sgid", PATH,
           help="Checks if the file has the set-group-ID bit set (-g).")
def has_sgid(path: str) -> bool:
    return check_metadata(path, lambda m: bool(m.st_mode & stat.S_ISGID))


@predicate(Family.FILE, "has-sticky", PATH,
           help="Checks if the file has the sticky bit set (-k).")
def has_sticky(path: str) -> bool:
    return check_metadata(path, lambda m: bool(m.st_mode & stat.S_ISVTX))


@predicate(Family.FILE, "owned-by-effective-user", PATH,
           help="Checks if a file is owned by the effective user ID (-O).")
def owned_by_effective_user(path: str) -> bool:
    return check_metadata(path, lambda m: m.st_uid == os.geteuid())


@predicate(Family.FILE, "owned-by-effective-group", PATH,
           help="Checks if a file is owned by the effective group ID (-G).")
def owned_by_effective_group(path: str) -> bool:
    return check_metadata(path, lambda m: m.st_gid == os.getegid())


# =============================================================================
# CROSS-FILE
# =============================================================================

def compare_metadata(
    path1: str,
    path2: str,
    check: Callable[[os.stat_result, os.stat_result], bool],
) -> bool:
    """Both paths must resolve metadata, otherwise False."""
    meta1 = stat_path(path1)
    meta2 = stat_path(path2)
    if meta1 is None or meta2 is None:
        return False
    return check(meta1, meta2)


@predicate(Family.FILE, "has-same-inode", PATH1, PATH2,
           help="Checks if two files are on the same device and have the same inode number (-ef).")
def has_same_inode(path1: str, path2: str) -> bool:
    return compare_metadata(
        path1, path2,
        lambda a, b: a.st_dev == b.st_dev and a.st_ino == b.st_ino,
    )


@predicate(Family.FILE, "newer-than", PATH1, PATH2,
           help="Checks if the first file is newer than the second (-nt).")
def is_newer_than(path1: str, path2: str) -> bool:
    return compare_metadata(path1, path2, lambda a, b: a.st_mtime_ns > b.st_mtime_ns)


@predicate(Family.FILE, "older-than", PATH1, PATH2,
           help="Checks if the first file is older than the second (-ot).")
def is_older_than(path1: str, path2: str) -> bool:
    return compare_metadata(path1, path2, lambda a, b: a.st_mtime_ns < b.st_mtime_ns)


# =============================================================================
# GLOB
# =============================================================================

@predicate(Family.FILE, "exists-glob", PATTERN,
           help="Checks if any file matches the given glob pattern.")
def exists_glob(pattern: str) -> bool:
    return any(os.path.exists(match) for match in iter_glob(pattern))


@predicate(Family.FILE, "non-empty-glob", PATTERN,
           help="Checks if any file matching the glob pattern has size > 0.")
def non_empty_glob(pattern: str) -> bool:
    for match in iter_glob(pattern):
        meta = stat_path(match)
        if meta is not None and meta.st_size > 0:
            return True
    return False


# =============================================================================
# SIZE
# =============================================================================

@predicate(Family.FILE, "size-gt", PATH, BYTES, help="File size compare (>).")
def size_gt(path: str, size: int) -> bool:
    return check_metadata(path, lambda m: m.st_size > size)


@predicate(Family.FILE, "size-ge", PATH, BYTES, help="File size compare (>=).")
def size_ge(path: str, size: int) -> bool:
    return check_metadata(path, lambda m: m.st_size >= size)


@predicate(Family.FILE, "size-lt", PATH, BYTES, help="File size compare (<).")
def size_lt(path: str, size: int) -> bool:
    return check_metadata(path, lambda m: m.st_size < size)


@predicate(Family.FILE, "size-le", PATH, BYTES, help="File size compare (<=).")
def size_le(path: str, size: int) -> bool:
    return check_metadata(path, lambda m: m.st_size <= size)


@predicate(Family.FILE, "size-eq", PATH, BYTES, help="File size compare (=).")
def size_eq(path: str, size: int) -> bool:
    return check_metadata(path, lambda m: m.st_size == size)


# =============================================================================
# MODIFICATION AGE
# =============================================================================

@predicate(Family.FILE, "mtime-older-than", PATH, SECONDS,
           help="Checks if the file was last modified more than N seconds ago.")
def mtime_older_than(path: str, seconds: int) -> bool:
    meta = stat_path(path)
    if meta is None:
        return False
    age = file_age_seconds(meta)
    return age is not None and age > seconds


@predicate(Family.FILE, "mtime-newer-than", PATH, SECONDS,
           help="Checks if the file was last modified less than N seconds ago.")
def mtime_newer_than(path: str, seconds: int) -> bool:
    meta = stat_path(path)
    if meta is None:
        return False
    age = file_age_seconds(meta)
    return age is not None and age < seconds
