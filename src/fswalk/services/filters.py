"""Turns ``ignore``/``match`` option values into entry predicates.

Each predicate is built once per walk so pattern compilation happens once,
not per entry.
"""

from collections.abc import Callable

from fswalk.models.entry import WalkEntry
from fswalk.models.options import PatternOption
from fswalk.services.ignore import Ignore

Predicate = Callable[[WalkEntry], bool]


def _never(entry: WalkEntry) -> bool:
    return False


def _always(entry: WalkEntry) -> bool:
    return True


def _pattern_predicate(patterns: str | list[str], workspace: str) -> Predicate:
    matcher = Ignore([patterns] if isinstance(patterns, str) else patterns, workspace)

    def predicate(entry: WalkEntry) -> bool:
        return matcher.is_match(entry.entrypath, is_dir=entry.is_directory)

    return predicate


def _build_predicate(option: PatternOption, workspace: str, default: Predicate) -> Predicate:
    # An empty string counts as unset; an empty list is a pattern set that matches nothing.
    if option is None or option == "":
        return default
    if callable(option):
        return option
    return _pattern_predicate(option, workspace)


def build_ignore_predicate(option: PatternOption, workspace: str) -> Predicate:
    """Predicate for entries to exclude; excludes nothing when unset."""
    return _build_predicate(option, workspace, _never)


def build_match_predicate(option: PatternOption, workspace: str) -> Predicate:
    """Predicate for entries to accept; accepts everything when unset."""
    return _build_predicate(option, workspace, _always)
