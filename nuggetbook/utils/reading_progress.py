# nuggetbook/utils/reading_progress.py
import math
from typing import Optional


def reading_progress(current_page: Optional[int], total_pages: Optional[int]) -> int:
    """Percentage of a book read, as a whole number in [0, 100].

    A missing or non-positive total counts as 0% and a missing current page
    as page 0. Halves round up and pages beyond the total clamp to 100.

    Args:
        current_page: Page the reader is on
        total_pages: Page count of the book

    Returns:
        Progress percentage
    """
    if not total_pages or total_pages <= 0:
        return 0
    current = current_page or 0
    percent = math.floor(current / total_pages * 100 + 0.5)
    return max(0, min(100, percent))
