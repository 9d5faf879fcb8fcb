from dataclasses import dataclass
import enum
import logging
from os import fsdecode, fspath, scandir, stat, DirEntry, PathLike
from stat import S_ISDIR
from typing import Iterator, Optional, Union


logger = logging.getLogger(__name__)


class TraversalError(Exception):
    """
    A path could not be traversed. ``cause`` holds the underlying OSError,
    if there was one.
    """
    def __init__(self, path:str, cause:Optional[OSError]=None):
        super().__init__(path, cause)
        self.path = path
        self.cause = cause

    def __str__(self):
        if self.cause is None:
            return f"unable to traverse {self.path!r}"
        return f"unable to traverse {self.path!r}: {self.cause.strerror or self.cause}"


class PathNotFound(TraversalError): pass
class PermissionDenied(TraversalError): pass
class NotADirectory(TraversalError): pass


def traversal_error(path:str, exc:OSError) -> TraversalError:
    if isinstance(exc, FileNotFoundError):
        cls = PathNotFound
    elif isinstance(exc, PermissionError):
        cls = PermissionDenied
    elif isinstance(exc, NotADirectoryError):
        cls = NotADirectory
    else:
        cls = TraversalError
    return cls(path, exc)


class EntryKind(enum.Enum):
    FILE = enum.auto()
    DIRECTORY = enum.auto()
    SYMLINK = enum.auto()
    OTHER = enum.auto()


@dataclass(slots=True)
class Entry:
    path: str
    name: str
    kind: EntryKind
    depth: int
    size: int = 0

    @property
    def hidden(self) -> bool:
        return self.name.startswith(".")


@dataclass(slots=True)
class SkippedPath:
    path: str
    depth: int
    error: TraversalError


def extension(name:str) -> str:
    # everything from the last dot: ".bashrc" has ".bashrc", "archive.TAR" has ".tar"
    dot = name.rfind(".")
    if dot == -1:
        return ""
    return name[dot:].lower()


def _entry_kind(direntry:DirEntry) -> EntryKind:
    if direntry.is_symlink():
        return EntryKind.SYMLINK
    if direntry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if direntry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


def _skipped(path:str, depth:int, exc:OSError, strict:bool) -> SkippedPath:
    error = traversal_error(path, exc)
    if strict:
        raise error from exc

    logger.warning("skipping %s: %s", path, exc.strerror or exc)
    return SkippedPath(path, depth, error)


def _walk_direntries(
    direntries:Iterator[DirEntry],
    depth:int,
    visited:set[tuple[int,int]],
    strict:bool,
) -> Iterator[Union[Entry,SkippedPath]]:
    for direntry in direntries:
        try:
            kind = _entry_kind(direntry)
            if kind in (EntryKind.FILE, EntryKind.DIRECTORY):
                s = direntry.stat(follow_symlinks=False)
        except OSError as e:
            # most likely removed from under us since the listing
            yield _skipped(direntry.path, depth, e, strict)
            continue

        if kind is EntryKind.DIRECTORY:
            dir_key = s.st_dev, s.st_ino
            if dir_key in visited:
                # only reachable through bind mounts and the like, we
                # never follow symlinks
                logger.debug("not revisiting %s", direntry.path)
                continue
            visited.add(dir_key)

            yield Entry(direntry.path, direntry.name, kind, depth)
            yield from _walk_dir(direntry.path, depth, visited, strict)
        elif kind is EntryKind.FILE:
            yield Entry(direntry.path, direntry.name, kind, depth, s.st_size)
        else:
            yield Entry(direntry.path, direntry.name, kind, depth)


def _walk_dir(
    path:str,
    depth:int,
    visited:set[tuple[int,int]],
    strict:bool,
) -> Iterator[Union[Entry,SkippedPath]]:
    try:
        direntries = scandir(path)
    except OSError as e:
        yield _skipped(path, depth, e, strict)
        return

    # the handle is released before we return to the parent directory
    with direntries:
        yield from _walk_direntries(direntries, depth+1, visited, strict)


def walk(
    root:Union[str,bytes,PathLike],
    strict:bool=False,
) -> Iterator[Union[Entry,SkippedPath]]:
    """
    Depth-first walk of everything below ``root``, yielding an ``Entry`` per
    visited directory entry. The root itself is depth 0 and is not yielded.

    Symlinks are reported but never followed, except for ``root`` itself
    which is resolved if it is one.

    Failure to read ``root`` always raises a ``TraversalError``. Failures
    further down yield a ``SkippedPath`` and the walk carries on, unless
    ``strict`` is set, in which case they raise too.
    """
    # entry names are always str, even for a bytes root
    root = fsdecode(fspath(root))
    try:
        s = stat(root)
    except OSError as e:
        raise traversal_error(root, e) from e

    if not S_ISDIR(s.st_mode):
        raise NotADirectory(root)

    try:
        direntries = scandir(root)
    except OSError as e:
        raise traversal_error(root, e) from e

    visited = {(s.st_dev, s.st_ino)}
    with direntries:
        yield from _walk_direntries(direntries, 1, visited, strict)
