"""Near-duplicate detection for catalog item names using fuzzy matching."""

from typing import Optional, Tuple

from django.conf import settings
from fuzzywuzzy import fuzz

from ..models import RecyclableItem


EXACT_MATCH_THRESHOLD = 100


def normalize_text(text: str) -> str:
    """Normalize text the same way item names are stored."""
    return RecyclableItem._normalize_string(text)


def find_similar_item(
    *,
    name: str,
    exclude_id: Optional[int] = None,
    threshold: Optional[int] = None
) -> Optional[Tuple[RecyclableItem, int]]:
    """
    Find the catalog item whose name is closest to ``name``.

    Inactive items are included: a deactivated item still owns its name.

    Args:
        name: Candidate item name
        exclude_id: Item to ignore (the one being renamed)
        threshold: Minimum similarity score (0-100), defaults to
            ``ITEM_NAME_SIMILARITY_THRESHOLD``

    Returns:
        (item, similarity) of the best match at or above the threshold,
        or None
    """
    if threshold is None:
        threshold = settings.ITEM_NAME_SIMILARITY_THRESHOLD

    name_norm = normalize_text(name)
    queryset = RecyclableItem.objects.all()
    if exclude_id is not None:
        queryset = queryset.exclude(id=exclude_id)

    exact = queryset.filter(name_normalized=name_norm).first()
    if exact:
        return exact, EXACT_MATCH_THRESHOLD

    best = None
    for item in queryset:
        similarity = fuzz.ratio(name_norm, item.name_normalized)
        if similarity >= threshold and (best is None or similarity > best[1]):
            best = (item, similarity)

    return best
