MAX_TYPO_DISTANCE = 1


def normalize_word(word: str) -> str:
    return word.strip().lower()


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between two strings.

    Insertion, deletion and substitution each cost 1. Uses a single rolling
    row so memory stays O(len(b)).
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    row = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        diagonal = row[0]
        row[0] = i
        for j, cb in enumerate(b, start=1):
            above = row[j]
            if ca == cb:
                row[j] = diagonal
            else:
                row[j] = min(diagonal, above, row[j - 1]) + 1
            diagonal = above
    return row[len(b)]


def words_match(a: str, b: str) -> bool:
    """True when the words are equal after normalization or one typo apart.

    Note that an empty word matches any single character under this rule.
    """
    w1 = normalize_word(a)
    w2 = normalize_word(b)
    if w1 == w2:
        return True
    return edit_distance(w1, w2) <= MAX_TYPO_DISTANCE
