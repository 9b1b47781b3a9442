"""Deal Karma — completeness scoring for community deal and coupon submissions.

Scores pending deals and coupons for the admin moderation queue and exposes
the scoring as read-only MCP tools.
"""

__version__ = "0.1.0"

from .core.models import CouponSubmission, DealSubmission, KarmaScore, SubmissionCategory
from .core.scoring import score_pending_queue, score_submission

__all__ = [
    "CouponSubmission",
    "DealSubmission",
    "KarmaScore",
    "SubmissionCategory",
    "score_pending_queue",
    "score_submission",
]
