"""Pydantic data models — the shared business objects.

The scoring functions and the MCP tool surface both use these models as the
common interface. Submission models are deliberately loose: every checklist
field is optional and unknown columns from the data store are kept.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class SubmissionCategory(str, Enum):
    """Kind of community submission."""

    DEAL = "deal"
    COUPON = "coupon"

    @classmethod
    def parse(cls, value: Union["SubmissionCategory", str, None]) -> "SubmissionCategory":
        """Resolve a category from an enum member or an admin tab name.

        Accepts 'deal'/'deals' and 'coupon'/'coupons'. Anything else is scored
        against the coupon checklist, which is what the moderation page does
        for every tab that is not the deals tab.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().lower()
        if normalized in ("deal", "deals"):
            return cls.DEAL
        if normalized not in ("coupon", "coupons"):
            logger.warning("Unknown submission category %r, using the coupon checklist", value)
        return cls.COUPON


class DealType(str, Enum):
    """Deal type. DEAL is the form default and does not count as filled in."""

    DEAL = "deal"
    SALE = "sale"
    CLEARANCE = "clearance"
    FLASH_SALE = "flash_sale"
    BUNDLE = "bundle"
    BOGO = "bogo"
    COUPON = "coupon"


class CouponType(str, Enum):
    """Coupon attached to a deal. NONE is the form default."""

    NONE = "none"
    CODE = "code"
    AUTOMATIC = "automatic"
    PRINTABLE = "printable"


class StockStatus(str, Enum):
    """Stock availability. UNKNOWN is the form default."""

    UNKNOWN = "unknown"
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    LIMITED = "limited"


class DealSubmission(BaseModel):
    """A pending deal as returned by the data store."""

    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    url: Optional[str] = None
    price: Optional[float] = None
    original_price: Optional[float] = None
    discount_percentage: Optional[float] = None
    merchant: Optional[str] = None
    category_id: Optional[Union[int, str]] = None
    deal_type: Optional[str] = None
    coupon_code: Optional[str] = None
    coupon_type: Optional[str] = None
    starts_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    stock_status: Optional[str] = None
    stock_quantity: Optional[int] = None
    tags: Optional[list[str]] = None
    image_url: Optional[str] = None
    description: Optional[str] = None
    terms_conditions: Optional[str] = None

    @property
    def category(self) -> SubmissionCategory:
        return SubmissionCategory.DEAL


class CouponSubmission(BaseModel):
    """A pending coupon as returned by the data store."""

    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    coupon_code: Optional[str] = None
    minimum_order_amount: Optional[float] = None
    maximum_discount_amount: Optional[float] = None
    usage_limit: Optional[int] = None
    usage_limit_per_user: Optional[int] = None
    starts_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    source_url: Optional[str] = None
    category_id: Optional[Union[int, str]] = None
    description: Optional[str] = None
    terms_conditions: Optional[str] = None

    @property
    def category(self) -> SubmissionCategory:
        return SubmissionCategory.COUPON


class FieldCheck(BaseModel):
    """One optional attribute on a category checklist."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    sentinel: Optional[str] = Field(None, description="Default value that does not count as filled in")
    empty_counts: bool = Field(False, description="An empty list still counts as filled in (array columns)")


class KarmaTier(BaseModel):
    """A quality bucket for a pending submission."""

    model_config = ConfigDict(frozen=True)

    points: int
    label: str
    max_ratio: Optional[float] = Field(None, description="Inclusive upper bound of the completeness ratio; None for the empty tier")
    badge_style: str = Field(description="Utility classes the moderation UI uses for the badge")


class KarmaScore(BaseModel):
    """Karma preview for one pending submission."""

    category: SubmissionCategory
    points: int = Field(description="One of 3, 5, 8 or 10")
    tier_label: str = Field(description="Basic, Good, Great or Excellent")
    present_count: int = Field(ge=0)
    total_fields: int = Field(gt=0)
    ratio: float = Field(ge=0.0, le=1.0, description="present_count / total_fields")
    present_fields: list[str] = Field(default_factory=list)
    missing_fields: list[str] = Field(default_factory=list)
    badge_style: str


class PendingQueueReport(BaseModel):
    """Karma previews for a moderation queue of one category."""

    category: SubmissionCategory
    scores: list[KarmaScore]
    total_items: int
    tier_counts: dict[str, int] = Field(description="Tier label -> number of submissions")
    average_points: float


class ContributorStanding(BaseModel):
    """Where a contributor's accumulated karma places them on the leaderboard."""

    karma: int = Field(ge=0)
    color: str
    badge: Optional[str] = Field(None, description="Legend or Expert")
    progress_pct: float = Field(ge=0.0, le=100.0, description="Karma relative to the top contributor")
