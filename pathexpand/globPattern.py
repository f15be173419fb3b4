# characters that switch a path from a literal file to a directory scan
WILDCARD_CHARACTERS = ('*', '?', '[')


def has_wildcard(pattern):
    """
    Check if the pattern needs to be expanded.  There is no escaping, so a literal '[' in a file name
    also counts as a wildcard.
    """
    return any(character in pattern for character in WILDCARD_CHARACTERS)


def split_directory_and_pattern(pattern, separators='/'):
    """
    Split a pattern at its last separator into the directory to scan and the file name pattern.
    If there is no separator the current directory '.' is scanned.
    """
    last_separator = max(pattern.rfind(separator) for separator in separators)
    if last_separator < 0:
        return '.', pattern

    return pattern[:last_separator], pattern[last_separator + 1:]
