"""Approximate string matching for per-keystroke quick search."""


def fuzzy_score(candidate: str, query: str) -> float:
    """
    Score how well a query matches a candidate string.

    Case-insensitive. A contiguous substring match scores 1.0 (this includes
    the empty query). Otherwise the candidate is scanned once, left to right,
    consuming query characters greedily without backtracking. If the whole
    query is consumed the score is matched / len(candidate), so longer
    candidates rank lower for the same subsequence; otherwise 0.0.

    Args:
        candidate: Text being searched (name, title, skill label)
        query: User query

    Returns:
        Confidence in [0, 1]
    """
    candidate_lower = candidate.lower()
    query_lower = query.lower()

    if query_lower in candidate_lower:
        return 1.0

    matched = 0
    for char in candidate_lower:
        if matched == len(query_lower):
            break
        if char == query_lower[matched]:
            matched += 1

    if matched < len(query_lower):
        return 0.0
    return matched / len(candidate_lower)
