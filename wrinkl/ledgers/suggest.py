"""Similar-name suggestions for failed ledger lookups."""

from collections.abc import Iterable

MAX_SUGGESTION_DISTANCE = 3


def levenshtein_distance(source: str, target: str) -> int:
    """Compute the edit distance between two strings.

    Counts the minimum number of single-character insertions, deletions and
    substitutions turning one string into the other. Characters are
    compared exactly.

    Args:
        source: First string
        target: Second string

    Returns:
        The edit distance
    """
    rows = len(source) + 1
    cols = len(target) + 1
    table = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if source[i - 1] == target[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j - 1],  # substitution
                    table[i][j - 1],  # insertion
                    table[i - 1][j],  # deletion
                )

    return table[rows - 1][cols - 1]


def suggest_similar(target: str, candidates: Iterable[str]) -> list[str]:
    """Find known identifiers the user may have meant.

    A candidate matches when either string contains the other, or when
    their edit distance is at most MAX_SUGGESTION_DISTANCE. Matches keep
    the order in which candidates were given; they are not ranked.

    Args:
        target: Identifier that failed to resolve
        candidates: Known identifiers, in enumeration order

    Returns:
        Matching candidates without duplicates, possibly empty
    """
    seen: set[str] = set()
    matches: list[str] = []

    for candidate in candidates:
        if candidate in seen:
            continue
        seen.add(candidate)

        contained = target in candidate or candidate in target
        if contained or levenshtein_distance(candidate, target) <= MAX_SUGGESTION_DISTANCE:
            matches.append(candidate)

    return matches


__all__ = [
    "MAX_SUGGESTION_DISTANCE",
    "levenshtein_distance",
    "suggest_similar",
]
