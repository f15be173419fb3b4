import argparse
import logging
import os
import pathlib
import sys

from pathexpand.directoryGlobber import default_globber
from pathexpand.globPattern import has_wildcard, split_directory_and_pattern
from pathexpand.logger import configure_logging

logger = logging.getLogger(__name__)


def expand_glob_pattern(pattern, globber=None):
    """
    Expand a single path pattern into a sorted list of files.
    pattern: the path, which may use '*', '?' or '[...]' in its final component
    globber: the directory globber to use, defaults to the one native to this platform

    A pattern without wildcards is returned as is without checking that the file exists.  Otherwise every
    returned path is a regular file that existed when the directory was scanned.  A directory that cannot
    be opened produces an empty list.
    """
    pattern = os.fspath(pattern)

    # No wildcards, just return the single file
    if not has_wildcard(pattern):
        return [pattern]

    if globber is None:
        globber = default_globber

    directory, filename_pattern = split_directory_and_pattern(pattern, globber.separators)
    files = globber.glob(directory, filename_pattern)

    # Sort files for consistent ordering
    files.sort()
    logger.debug("Pattern '%s' matched %d file(s) in '%s'", pattern, len(files), directory)
    return files


def expand_glob_patterns(patterns, globber=None):
    """
    Expand each of the supplied patterns and return a single flat list.  The patterns are expanded in the
    order they are given and each block is sorted.
    """
    if isinstance(patterns, (str, os.PathLike)):
        patterns = [patterns]

    files = []
    for pattern in patterns:
        files.extend(expand_glob_pattern(pattern, globber))
    return files


def expand_path(path_pattern, globber=None):
    """
    Expand the user directory and the pattern, returning pathlib paths for the data readers
    """
    pattern = os.path.expanduser(os.fspath(path_pattern))
    return [pathlib.Path(file) for file in expand_glob_pattern(pattern, globber)]


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Lists the files matching one or more path patterns.  A wild card (*, ? or [...]) can be '
                    'used in the file name to select more than one file.  Paths are printed one per line.')
    parser.add_argument('patterns', nargs='+', type=str,
                        help='The path pattern(s) to expand.  Quote them so the shell does not expand them first.')
    parser.add_argument('--output', dest='output_file', type=pathlib.Path,
                        help='Optional path to write the list of files to instead of standard out')
    parser.add_argument('--strict', dest='strict', action='store_true', default=False,
                        help='If true, fails when a wild card pattern does not match any file')
    parser.add_argument('--verbose', dest='verbose', action='store_true', default=False,
                        help='If true, logs the scanned directories')
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    files = []
    unmatched = []
    for pattern in args.patterns:
        matches = expand_glob_pattern(pattern)
        if not matches:
            unmatched.append(pattern)
        files.extend(matches)

    if args.strict and unmatched:
        for pattern in unmatched:
            print(f"No files match '{pattern}'", file=sys.stderr)
        return 1

    if args.output_file is not None:
        args.output_file.parent.mkdir(parents=True, exist_ok=True)
        with args.output_file.open('w', encoding='utf-8') as output:
            for file in files:
                output.write(f"{file}\n")
    else:
        for file in files:
            print(file)

    return 0


# parse based upon the supplied inputs
if __name__ == "__main__":
    sys.exit(main())
