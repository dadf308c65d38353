from typing import List

# Used when the owner has not configured a word pool
FALLBACK_WORDS = (
    "سيارة",
    "بحر",
    "كتاب",
    "قهوة",
    "نملة",
    "قلم",
    "تفاحة",
    "شمس",
    "قمر",
    "نحلة",
)


def normalize_word_pool(words, limit=50) -> List[str]:
    """Strip entries, drop non-strings and blanks, cap at ``limit``.

    Duplicates are kept; deduplication is left to the client.
    """
    cleaned = []
    for w in words:
        if not isinstance(w, str):
            continue
        w = w.strip()
        if w:
            cleaned.append(w)
    return cleaned[:limit]
