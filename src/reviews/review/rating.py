"""Rating aggregation over approved reviews."""

from decimal import ROUND_HALF_UP, Decimal

RATING_VALUES = (1, 2, 3, 4, 5)


def aggregate_ratings(ratings) -> dict:
    """Summarise a collection of 1-5 ratings.

    Returns ``totalReviews``, ``averageRating`` rounded half up to two decimals (0
    when there are no ratings) and ``ratingDistribution`` with a count for
    every star value, including those nobody gave.
    """
    distribution = {value: 0 for value in RATING_VALUES}
    total = 0
    for rating in ratings:
        if rating not in distribution:
            raise ValueError(f"Rating {rating!r} is outside 1-5")
        distribution[rating] += 1
        total += 1

    if total == 0:
        average = 0
    else:
        stars = sum(value * count for value, count in distribution.items())
        average = float((Decimal(stars) / Decimal(total)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

    return {
        "totalReviews": total,
        "averageRating": average,
        "ratingDistribution": distribution,
    }
