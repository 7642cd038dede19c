"""Dynamic programming on strings: edit distance and wildcard matching."""


def edit_distance(word1, word2):
    """Return the Levenshtein distance between two strings."""
    if not word1 or not word2:
        return max(len(word1), len(word2))
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, 1):
        current = [i]
        for j, b in enumerate(word2, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j], previous[j - 1], current[j - 1]) + 1)
        previous = current
    return previous[-1]


def wildcard_match(text, pattern):
    """Return True if ``pattern`` matches all of ``text``.

    ``?`` matches any single character and ``*`` any sequence, empty included.
    """
    previous = [True]
    for p in pattern:
        previous.append(previous[-1] and p == "*")
    for c in text:
        current = [False]
        for j, p in enumerate(pattern, 1):
            if c == p or p == "?":
                current.append(previous[j - 1])
            elif p == "*":
                current.append(previous[j] or current[j - 1])
            else:
                current.append(False)
        previous = current
    return previous[-1]