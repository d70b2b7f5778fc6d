import os
import shutil


class InvalidPatternError(ValueError):
    """Raised for patterns the glob engine would silently misread."""


def split_patterns(group: str) -> list[str]:
    return [token for token in str(group or "").split() if token]


def validate_pattern(pattern: str) -> str:
    if os.path.isabs(pattern):
        raise InvalidPatternError("absolute patterns are not allowed")

    for segment in pattern.split("/"):
        if segment == "..":
            raise InvalidPatternError("parent directory references are not allowed")
        _check_brackets(segment)
    return pattern


def _check_brackets(segment: str) -> None:
    i, n = 0, len(segment)
    while i < n:
        if segment[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and segment[j] == "!":
            j += 1
        if j < n and segment[j] == "]":
            j += 1
        while j < n and segment[j] != "]":
            j += 1
        if j >= n:
            raise InvalidPatternError(f"unterminated character class at position {i}")
        i = j + 1


def remove_path(path: str) -> bool:
    """Delete a file, symlink or directory tree. Returns False if it is already gone."""
    if os.path.islink(path) or os.path.isfile(path):
        try:
            os.unlink(path)
        except FileNotFoundError:
            return False
        return True
    if os.path.isdir(path):
        shutil.rmtree(path)
        return True
    if os.path.lexists(path):
        os.unlink(path)
        return True
    return False
