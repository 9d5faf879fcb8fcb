from collections import Counter
import logging
from os import PathLike
from typing import Union

from humanfriendly import format_size

from dir_info.fs import (
    EntryKind,
    Entry,
    NotADirectory,
    PathNotFound,
    PermissionDenied,
    SkippedPath,
    TraversalError,
    extension,
    walk,
)
from dir_info.quantity import BlockSize, parse_block_size

logger = logging.getLogger(__name__)

__all__ = [
    "BlockSize",
    "DirInfo",
    "NotADirectory",
    "PathNotFound",
    "PermissionDenied",
    "SkippedPath",
    "TraversalError",
]


def _normalize_ext(ext:str) -> str:
    ext = ext.lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


class DirInfo:
    """
    Accumulates statistics about the files below one or more directory
    trees, e.g.

        DirInfo().pull("/etc").get_files_size_by_file_ext(".conf")

    Each call to ``pull`` adds to the counts already held, so pulling the
    same tree twice doubles everything. Paths below the root that can't be
    read are recorded in ``skipped`` rather than aborting the pull, unless
    ``strict`` is set.
    """
    def __init__(self, strict:bool=False):
        self.strict = strict

        self.total_size = 0
        self.file_count = 0
        self.size_by_extension = Counter()

        self.directory_count = 0
        self.symlink_count = 0
        self.hidden_files_size = 0
        self.hidden_file_count = 0
        self.hidden_directory_count = 0
        self.deepest_depth = 0

        self.files_size_by_depth = Counter()
        self.file_count_by_depth = Counter()
        self.directory_count_by_depth = Counter()
        self.symlink_count_by_depth = Counter()
        # size -> number of files of exactly that size
        self._file_sizes = Counter()

        self.skipped:list[SkippedPath] = []

    def __repr__(self):
        return (
            f"<{type(self).__name__} {self.file_count} files, "
            f"{format_size(self.total_size, binary=True)}, "
            f"{self.directory_count} directories, {len(self.skipped)} skipped>"
        )

    def pull(self, root:Union[str,bytes,PathLike]) -> "DirInfo":
        skipped_before = len(self.skipped)
        size_before = self.total_size
        count_before = self.file_count

        for record in walk(root, strict=self.strict):
            if isinstance(record, SkippedPath):
                self.skipped.append(record)
            else:
                self._add(record)

        logger.debug(
            "pulled %(root)s: %(count)s files, total size %(size)s, %(skipped)s paths skipped",
            {
                "root": root,
                "count": self.file_count - count_before,
                "size": format_size(self.total_size - size_before, binary=True),
                "skipped": len(self.skipped) - skipped_before,
            },
        )
        return self

    def _add(self, entry:Entry) -> None:
        self.deepest_depth = max(self.deepest_depth, entry.depth)

        if entry.kind is EntryKind.FILE:
            self.total_size += entry.size
            self.file_count += 1
            self.size_by_extension[extension(entry.name)] += entry.size
            self.files_size_by_depth[entry.depth] += entry.size
            self.file_count_by_depth[entry.depth] += 1
            self._file_sizes[entry.size] += 1
            if entry.hidden:
                self.hidden_files_size += entry.size
                self.hidden_file_count += 1
        elif entry.kind is EntryKind.DIRECTORY:
            self.directory_count += 1
            self.directory_count_by_depth[entry.depth] += 1
            if entry.hidden:
                self.hidden_directory_count += 1
        elif entry.kind is EntryKind.SYMLINK:
            self.symlink_count += 1
            self.symlink_count_by_depth[entry.depth] += 1

    def get_files_size(self) -> int:
        return self.total_size

    def get_files_count(self) -> int:
        return self.file_count

    def get_files_size_by_file_ext(self, ext:str) -> int:
        """
        Total size of files with extension ``ext``, compared
        case-insensitively. The leading dot is optional, and ``""`` selects
        files with no extension at all.
        """
        return self.size_by_extension.get(_normalize_ext(ext), 0)

    def get_files_size_by_extension(self) -> dict[str,int]:
        return dict(self.size_by_extension)

    def get_hidden_files_size(self) -> int:
        return self.hidden_files_size

    def get_num_hidden_files(self) -> int:
        return self.hidden_file_count

    def get_num_directories(self) -> int:
        return self.directory_count

    def get_num_hidden_directories(self) -> int:
        return self.hidden_directory_count

    def get_num_symlinks(self) -> int:
        return self.symlink_count

    def get_deepest_depth(self) -> int:
        return self.deepest_depth

    def get_files_size_by_depth(self) -> dict[int,int]:
        return dict(sorted(self.files_size_by_depth.items()))

    def get_num_files_by_depth(self) -> dict[int,int]:
        return dict(sorted(self.file_count_by_depth.items()))

    def get_num_directories_by_depth(self) -> dict[int,int]:
        return dict(sorted(self.directory_count_by_depth.items()))

    def get_num_symlinks_by_depth(self) -> dict[int,int]:
        return dict(sorted(self.symlink_count_by_depth.items()))

    def get_file_size_distribution(
        self,
        block_size:Union[int,str,BlockSize]=BlockSize.KB100,
    ) -> dict[int,int]:
        """
        Number of files falling in each ``block_size``-wide size bucket,
        keyed by the bucket's lower bound in bytes. Empty buckets are
        omitted.
        """
        block_size = parse_block_size(block_size)
        distribution = Counter()
        for size, count in self._file_sizes.items():
            distribution[(size // block_size) * block_size] += count
        return dict(sorted(distribution.items()))
