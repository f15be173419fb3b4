from pathexpand.directoryGlobber import GlobberType, PosixGlobber, WindowsGlobber, create_globber
from pathexpand.expandPath import expand_glob_pattern, expand_glob_patterns, expand_path
from pathexpand.globPattern import has_wildcard, split_directory_and_pattern
