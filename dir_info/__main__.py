def _print_summary(dir_info, exts, block_size, by_depth):
    from humanfriendly import format_size

    print(f"total size: {format_size(dir_info.get_files_size(), binary=True)}")
    print(
        f"files: {dir_info.get_files_count()} "
        f"(hidden: {dir_info.get_num_hidden_files()}, "
        f"{format_size(dir_info.get_hidden_files_size(), binary=True)})"
    )
    print(
        f"directories: {dir_info.get_num_directories()} "
        f"(hidden: {dir_info.get_num_hidden_directories()})"
    )
    print(f"symlinks: {dir_info.get_num_symlinks()}")
    print(f"deepest depth: {dir_info.get_deepest_depth()}")

    for ext in exts:
        print(f"{ext}: {format_size(dir_info.get_files_size_by_file_ext(ext), binary=True)}")

    if by_depth:
        files_by_depth = dir_info.get_num_files_by_depth()
        for depth, size in dir_info.get_files_size_by_depth().items():
            print(
                f"depth {depth}: {files_by_depth[depth]} files, "
                f"{format_size(size, binary=True)}"
            )

    if block_size is not None:
        for lower, count in dir_info.get_file_size_distribution(block_size).items():
            print(f">= {format_size(lower, binary=True)}: {count} files")

    if dir_info.skipped:
        print(f"skipped: {len(dir_info.skipped)} paths")


def main():
    import argparse
    from importlib.metadata import version as metadata_version, PackageNotFoundError
    import logging
    import sys

    from dir_info import DirInfo, TraversalError
    from dir_info.quantity import parse_block_size

    try:
        version = metadata_version("dir_info")
    except PackageNotFoundError:
        version = "unknown"

    parser = argparse.ArgumentParser(
        description="summarize the sizes and counts of files below one or "
        "more directories",
    )
    parser.add_argument(
        "--ext", "-e",
        dest="exts",
        action="append",
        default=[],
        metavar="EXT",
        help="Also report the total size of files with extension EXT, "
        "matched case-insensitively. Repeatable.",
    )
    parser.add_argument(
        "--distribution", "-d",
        dest="block_size",
        type=parse_block_size,
        metavar="BLOCK",
        help="Report how many files fall in each BLOCK-sized size bucket, "
        "BLOCK being a size with optional multiplier prefix, e.g. '100KB' "
        "or '1MiB'.",
    )
    parser.add_argument(
        "--by-depth",
        default=False,
        action=argparse.BooleanOptionalAction,
        help="Report file counts and sizes per directory depth.",
    )
    parser.add_argument(
        "--strict",
        default=False,
        action=argparse.BooleanOptionalAction,
        help="Fail on the first unreadable path instead of skipping it.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=version,
    )

    loglvl_grp = parser.add_mutually_exclusive_group()
    loglvl_grp.add_argument("--verbose", "-v", dest="loglevel", action="store_const", const=logging.DEBUG)
    loglvl_grp.add_argument("--quiet", "-q", dest="loglevel", action="store_const", const=logging.WARNING)

    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Directories to walk. Statistics for all of them are combined.",
    )

    parsed = parser.parse_args()

    logging.basicConfig(
        level=parsed.loglevel if parsed.loglevel is not None else logging.INFO,
        format="%(asctime)s:%(levelname)s:%(name)s: %(message)s",
    )
    logger = logging.getLogger("dir_info")

    dir_info = DirInfo(strict=parsed.strict)
    for path in parsed.paths:
        try:
            dir_info.pull(path)
        except TraversalError as e:
            logger.error("%s", e)
            sys.exit(1)

    _print_summary(dir_info, parsed.exts, parsed.block_size, parsed.by_depth)


if __name__ == "__main__":
    main()
