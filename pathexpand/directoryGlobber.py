import fnmatch
import logging
import os
import stat
from enum import Enum

logger = logging.getLogger(__name__)


# class syntax
class GlobberType(Enum):
    POSIX = 1
    WINDOWS = 2


def to_native_path(path):
    """
    Convert forward slashes to the windows separator
    """
    return path.replace('/', '\\')


def to_posix_path(path):
    """
    Convert windows separators back to forward slashes so callers see the same paths on every platform
    """
    return path.replace('\\', '/')


def to_fnmatch_pattern(pattern):
    """
    Rewrite bracket expressions opened with '[^' to the '[!' form fnmatch understands, so a leading '^'
    negates the class the way the C library fnmatch does.  Brackets that are never closed are left alone.
    """
    translated = []
    i, n = 0, len(pattern)
    while i < n:
        character = pattern[i]
        i += 1
        if character != '[':
            translated.append(character)
            continue

        # find the closing bracket, a ']' right after the opening (or the negation) is part of the class
        j = i
        if j < n and pattern[j] in '!^':
            j += 1
        if j < n and pattern[j] == ']':
            j += 1
        while j < n and pattern[j] != ']':
            j += 1

        if j >= n:
            translated.append(character)
            continue

        expression = pattern[i:j]
        if expression.startswith('^'):
            expression = '!' + expression[1:]
        translated.append('[' + expression + ']')
        i = j + 1

    return ''.join(translated)


def join_entry(directory, name, separator):
    # entries in the current directory are reported by name only
    if directory == '.':
        return name
    return directory + separator + name


def open_directory(directory, root):
    """
    Open the directory for scanning.  Returns None if the directory does not exist or cannot be read,
    which is an empty match and not an error.
    """
    # a pattern such as '/*.log' leaves an empty directory, which is the root
    try:
        return os.scandir(directory or root)
    except OSError as error:
        logger.debug("Unable to open directory '%s': %s", directory or root, error)
        return None


class PosixGlobber:
    """
    Expands the file name pattern with readdir/fnmatch/stat semantics.  Matching is case-sensitive, leading
    dots are not treated specially, and only entries whose stat (following symbolic links) reports a regular
    file are kept.  Directories, fifos, sockets, devices and broken links are dropped.
    """

    separators = '/'

    def glob(self, directory, filename_pattern):
        files = []

        entries = open_directory(directory, '/')
        if entries is None:
            return files

        filename_pattern = to_fnmatch_pattern(filename_pattern)

        # scandir never reports the '.' and '..' entries
        with entries:
            for entry in entries:
                # check if it matches the pattern
                if not fnmatch.fnmatchcase(entry.name, filename_pattern):
                    continue

                # check if it's a regular file
                if self.is_regular_file(entry):
                    files.append(join_entry(directory, entry.name, '/'))

        return files

    @staticmethod
    def is_regular_file(entry):
        try:
            return stat.S_ISREG(entry.stat().st_mode)
        except OSError as error:
            logger.debug("Skipping '%s': %s", entry.path, error)
            return False


class WindowsGlobber:
    """
    Expands the file name pattern the way the native windows directory search does.  Both '/' and '\\'
    separate directories, matching ignores case, and an entry is dropped only when its directory attribute
    is set.  Other special entries are kept, matching the native tools.  The attributes are only reported by
    windows, so scanning a real directory with this globber only works there.
    """

    separators = '/\\'

    def glob(self, directory, filename_pattern):
        files = []

        # Convert to Windows path separators
        native_directory = to_native_path(directory)
        entries = open_directory(native_directory, '\\')
        if entries is None:
            return files

        filename_pattern = filename_pattern.lower()
        with entries:
            for entry in entries:
                if not fnmatch.fnmatchcase(entry.name.lower(), filename_pattern):
                    continue

                # skip directories
                if self.has_directory_attribute(entry):
                    continue

                files.append(to_posix_path(join_entry(native_directory, entry.name, '\\')))

        return files

    @staticmethod
    def has_directory_attribute(entry):
        # the attributes come from the directory listing itself, so the link itself is checked
        attributes = entry.stat(follow_symlinks=False).st_file_attributes
        return bool(attributes & stat.FILE_ATTRIBUTE_DIRECTORY)


def create_globber(globber_type=None):
    """
    Create the globber for the supplied type, defaulting to the one native to this platform
    """
    if globber_type is None:
        globber_type = GlobberType.WINDOWS if os.name == 'nt' else GlobberType.POSIX

    if globber_type == GlobberType.WINDOWS:
        return WindowsGlobber()
    return PosixGlobber()


# the globber for this platform, there is exactly one per interpreter
default_globber = create_globber()
