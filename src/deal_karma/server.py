"""Deal Karma MCP Server.

FastMCP server exposing the moderation-queue karma preview as read-only tools.
Run: deal-karma-mcp
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .core.models import KarmaScore, KarmaTier, SubmissionCategory
from .core.scoring import (
    BASIC,
    COUPON_CHECKLIST,
    DEAL_CHECKLIST,
    RATIO_TIERS,
    contributor_standing,
    score_pending_queue,
    score_submission,
)

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging for the server process."""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("Deal Karma server ready")
    yield


mcp = FastMCP(
    "Deal Karma",
    instructions="Karma previews for pending community deals and coupons. Scores how complete a submission is and places it in a Basic, Good, Great or Excellent tier.",
    lifespan=lifespan,
)


# ─── Tool 1: Score one submission ────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def karma_score_submission(submission: dict[str, Any], category: str = "deal") -> dict:
    """Karma preview for a single pending deal or coupon.

    Args:
        submission: The submission row, keyed by column name (e.g. 'merchant', 'expires_at').
        category: 'deal' or 'coupon'. Admin tab names 'deals'/'coupons' also work. Default 'deal'.
    """
    score = score_submission(submission, category)
    return {
        "title": "Karma Preview",
        "score": score.model_dump(mode="json"),
        "summary": _score_summary(score),
    }


def _score_summary(score: KarmaScore) -> str:
    summary = (
        f"{score.points} points ({score.tier_label} submission): "
        f"{score.present_count} of {score.total_fields} optional {score.category.value} fields filled in."
    )
    if score.missing_fields and score.points < 10:
        summary += " Missing: " + ", ".join(score.missing_fields[:5])
        if len(score.missing_fields) > 5:
            summary += f" and {len(score.missing_fields) - 5} more"
        summary += "."
    return summary


# ─── Tool 2: Score a pending queue ───────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def karma_score_pending(submissions: list[dict[str, Any]], category: str = "deal") -> dict:
    """Karma previews for every pending submission in one moderation tab.

    Args:
        submissions: Pending submission rows of a single category.
        category: 'deal' or 'coupon'. Default 'deal'.
    """
    report = score_pending_queue(submissions, category)
    logger.info("Scored %d pending %s submissions", report.total_items, report.category.value)

    if not report.total_items:
        summary = f"No pending {report.category.value} submissions."
    else:
        breakdown = ", ".join(f"{count} {label}" for label, count in report.tier_counts.items() if count)
        summary = f"{report.total_items} pending {report.category.value} submission(s), average {report.average_points:.2f} points ({breakdown})."

    return {
        "title": "Pending Queue",
        "report": report.model_dump(mode="json"),
        "summary": summary,
    }


# ─── Tool 3: Tier table ──────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def karma_tiers() -> dict:
    """The karma tiers and the optional-field checklist for each category. No arguments needed."""
    tiers = [BASIC, *RATIO_TIERS]
    return {
        "title": "Karma Tiers",
        "tiers": [t.model_dump() for t in tiers],
        "checklists": {
            SubmissionCategory.DEAL.value: [c.model_dump() for c in DEAL_CHECKLIST],
            SubmissionCategory.COUPON.value: [c.model_dump() for c in COUPON_CHECKLIST],
        },
        "summary": " | ".join(_tier_rule(t) for t in tiers),
    }


def _tier_rule(tier: KarmaTier) -> str:
    if tier.max_ratio is None:
        return f"{tier.label}: {tier.points} pts (no optional fields)"
    return f"{tier.label}: {tier.points} pts (up to {tier.max_ratio:.0%} filled)"


# ─── Tool 4: Contributor standing ────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def karma_contributor_standing(karma: int, top_karma: Optional[int] = None) -> dict:
    """Leaderboard standing for a contributor's accumulated karma.

    Args:
        karma: The contributor's total karma.
        top_karma: Karma of the current leader, used for the progress bar. Optional.
    """
    standing = contributor_standing(karma, top_karma)
    summary = f"{standing.karma:,} karma"
    if standing.badge:
        summary += f" ({standing.badge})"
    if top_karma and top_karma > 0:
        summary += f", {standing.progress_pct:.1f}% of the leader"
    return {
        "title": "Contributor Standing",
        "standing": standing.model_dump(),
        "summary": summary + ".",
    }


def main():
    """Entry point for the CLI command."""
    mcp.run(transport=os.environ.get("MCP_TRANSPORT", "stdio"))


if __name__ == "__main__":
    main()
