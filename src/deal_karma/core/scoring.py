"""Submission completeness scoring.

Every pending deal or coupon gets a karma preview in the moderation queue.
The preview counts how many optional fields the submitter filled in,
relative to a fixed per-category checklist, and buckets the ratio into one
of four tiers. Scoring is pure: it never fetches, persists or raises.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Optional, Union

from .models import (
    ContributorStanding,
    CouponType,
    DealType,
    FieldCheck,
    KarmaScore,
    KarmaTier,
    PendingQueueReport,
    StockStatus,
    SubmissionCategory,
)

logger = logging.getLogger(__name__)

DEAL_CHECKLIST: tuple[FieldCheck, ...] = (
    FieldCheck(name="original_price", label="Original price"),
    FieldCheck(name="discount_percentage", label="Discount percentage"),
    FieldCheck(name="merchant", label="Merchant"),
    FieldCheck(name="category_id", label="Category"),
    FieldCheck(name="deal_type", label="Deal type", sentinel=DealType.DEAL.value),
    FieldCheck(name="coupon_code", label="Coupon code"),
    FieldCheck(name="coupon_type", label="Coupon type", sentinel=CouponType.NONE.value),
    FieldCheck(name="starts_at", label="Start date"),
    FieldCheck(name="expires_at", label="Expiry date"),
    FieldCheck(name="stock_status", label="Stock status", sentinel=StockStatus.UNKNOWN.value),
    FieldCheck(name="stock_quantity", label="Stock quantity"),
    FieldCheck(name="tags", label="Tags", empty_counts=True),
    FieldCheck(name="image_url", label="Image"),
    FieldCheck(name="description", label="Description"),
    FieldCheck(name="terms_conditions", label="Terms & conditions"),
)

COUPON_CHECKLIST: tuple[FieldCheck, ...] = (
    FieldCheck(name="minimum_order_amount", label="Minimum order amount"),
    FieldCheck(name="maximum_discount_amount", label="Maximum discount amount"),
    FieldCheck(name="usage_limit", label="Usage limit"),
    FieldCheck(name="usage_limit_per_user", label="Usage limit per user"),
    FieldCheck(name="starts_at", label="Start date"),
    FieldCheck(name="expires_at", label="Expiry date"),
    FieldCheck(name="source_url", label="Source URL"),
    FieldCheck(name="category_id", label="Category"),
    FieldCheck(name="description", label="Description"),
    FieldCheck(name="terms_conditions", label="Terms & conditions"),
)

BASIC = KarmaTier(points=3, label="Basic", max_ratio=None, badge_style="text-gray-600 bg-gray-50")
GOOD = KarmaTier(points=5, label="Good", max_ratio=0.3, badge_style="text-blue-600 bg-blue-100")
GREAT = KarmaTier(points=8, label="Great", max_ratio=0.7, badge_style="text-green-600 bg-green-100")
EXCELLENT = KarmaTier(points=10, label="Excellent", max_ratio=1.0, badge_style="text-purple-600 bg-purple-100")

# Evaluated in order, first match wins. BASIC is only reached with nothing filled in.
RATIO_TIERS: tuple[KarmaTier, ...] = (GOOD, GREAT, EXCELLENT)
TIERS_BY_POINTS: dict[int, KarmaTier] = {t.points: t for t in (BASIC, *RATIO_TIERS)}

# (min karma, text color, badge), first match wins
STANDING_BANDS: tuple[tuple[int, str, Optional[str]], ...] = (
    (2000, "text-red-600", "Legend"),
    (1500, "text-orange-600", "Expert"),
    (1000, "text-yellow-600", "Expert"),
    (500, "text-green-600", None),
    (0, "text-blue-600", None),
)

_MISSING = object()


def checklist_for(category: Union[SubmissionCategory, str, None]) -> tuple[FieldCheck, ...]:
    """Return the ordered optional-field checklist for a category."""
    if SubmissionCategory.parse(category) is SubmissionCategory.DEAL:
        return DEAL_CHECKLIST
    return COUPON_CHECKLIST


def _read_field(record: Any, name: str) -> Any:
    if record is None:
        return _MISSING
    try:
        if isinstance(record, Mapping):
            return record.get(name, _MISSING)
        return getattr(record, name, _MISSING)
    except Exception as exc:
        logger.debug("Could not read %s from %s: %s", name, type(record).__name__, exc)
        return _MISSING


def is_field_present(value: Any, sentinel: Optional[str] = None, empty_counts: bool = False) -> bool:
    """Truthiness test for one checklist attribute.

    Empty strings, zero, NaN and empty collections are absent. For fields with
    a default value (deal type, coupon type, stock status) the default is
    absent too, whether given as the enum member or its plain string. With
    empty_counts, any list or tuple is present, including an empty one; array
    columns come back from the data store as [] when nothing was entered.
    """
    if value is _MISSING or value is None:
        return False
    if empty_counts and isinstance(value, (list, tuple)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    try:
        if sentinel is not None:
            raw = value.value if isinstance(value, Enum) else value
            if raw == sentinel:
                return False
        return bool(value)
    except Exception:
        return False


def tier_for_count(present_count: int, total_fields: int) -> KarmaTier:
    """Bucket a filled-in count into a tier.

    The 0.3 and 0.7 boundaries are inclusive, so a ratio sitting exactly on a
    boundary lands in the lower tier.
    """
    if total_fields <= 0:
        raise ValueError(f"total_fields must be positive, got {total_fields}")
    if present_count <= 0:
        return BASIC

    ratio = present_count / total_fields
    for tier in RATIO_TIERS:
        if ratio <= tier.max_ratio:
            return tier
    return EXCELLENT


def tier_for_points(points: int) -> KarmaTier:
    """Look up the tier for a point value produced by the scorer."""
    try:
        return TIERS_BY_POINTS[points]
    except KeyError:
        raise ValueError(f"No karma tier awards {points} points") from None


def score_submission(record: Any, category: Union[SubmissionCategory, str, None]) -> KarmaScore:
    """Compute the karma preview for a pending submission.

    Args:
        record: A data-store row (mapping), a DealSubmission/CouponSubmission,
            or any object exposing the checklist fields as attributes.
        category: Deal or coupon. Admin tab names ('deals', 'coupons') work too.
    """
    resolved = SubmissionCategory.parse(category)
    checklist = checklist_for(resolved)

    present_fields = []
    missing_fields = []
    for check in checklist:
        if is_field_present(_read_field(record, check.name), check.sentinel, check.empty_counts):
            present_fields.append(check.name)
        else:
            missing_fields.append(check.name)

    total = len(checklist)
    tier = tier_for_count(len(present_fields), total)
    logger.debug(
        "Scored %s submission: %d/%d fields -> %s (%d points)",
        resolved.value, len(present_fields), total, tier.label, tier.points,
    )

    return KarmaScore(
        category=resolved,
        points=tier.points,
        tier_label=tier.label,
        present_count=len(present_fields),
        total_fields=total,
        ratio=len(present_fields) / total,
        present_fields=present_fields,
        missing_fields=missing_fields,
        badge_style=tier.badge_style,
    )


def score_pending_queue(
    items: Iterable[Any],
    category: Union[SubmissionCategory, str, None],
) -> PendingQueueReport:
    """Score every pending submission in one moderation tab."""
    resolved = SubmissionCategory.parse(category)
    scores = [score_submission(item, resolved) for item in items]

    tier_counts = {tier.label: 0 for tier in (BASIC, *RATIO_TIERS)}
    for s in scores:
        tier_counts[s.tier_label] += 1

    average = sum(s.points for s in scores) / len(scores) if scores else 0.0

    return PendingQueueReport(
        category=resolved,
        scores=scores,
        total_items=len(scores),
        tier_counts=tier_counts,
        average_points=round(average, 2),
    )


def contributor_standing(karma: Optional[int], top_karma: Optional[int] = None) -> ContributorStanding:
    """Place a contributor's accumulated karma on the leaderboard scale.

    Progress is relative to the top contributor, capped at 100%.
    """
    karma = max(0, int(karma or 0))

    color, badge = STANDING_BANDS[-1][1], None
    for min_karma, band_color, band_badge in STANDING_BANDS:
        if karma >= min_karma:
            color, badge = band_color, band_badge
            break

    progress = 0.0
    if top_karma and top_karma > 0:
        progress = min(100.0, karma / top_karma * 100)

    return ContributorStanding(
        karma=karma,
        color=color,
        badge=badge,
        progress_pct=round(progress, 1),
    )
