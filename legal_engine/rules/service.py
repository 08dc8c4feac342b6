"""
Legal rule evaluator.

Selects the governing rule, deep-dive modules and clause set for a deal.
Evaluation is a pure function of the input facts and the legal pack.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from legal_engine.legal_pack import HardBlock, NetPolicy, RulePack, load_pack
from .constants import (
    ATTORNEY_REVIEW_STATE,
    CLAUSE_CATEGORIES,
    NET_POLICY_CLAUSES,
    OVERLAY_CLAUSES,
    STANDARD_CLAUSES,
)
from .overlay import resolve_overlay
from .schemas import EvaluationInput, EvaluationResult

logger = logging.getLogger(__name__)


def evaluate_rules(input: EvaluationInput, pack: RulePack | None = None) -> EvaluationResult:
    """
    Evaluate the legal rules for a deal.

    Steps run in a fixed order: validation, overlay, net policy, hard blocks,
    deep-dive modules, rule ID, clause selection. A hard block returns
    before any clause selection is made.

    Args:
        input: Deal, investor and jurisdiction facts
        pack: Legal pack; defaults to the loaded pack

    Returns:
        EvaluationResult; success is False for validation errors or a hard block
    """
    if pack is None:
        pack = load_pack()

    state = (input.governing_state or "").strip().upper()
    zip_code = (input.property_zip or "").strip()

    validation_errors = []
    if not state:
        validation_errors.append("Missing required field: governing_state")
    if not zip_code:
        validation_errors.append("Missing required field: property_zip")
    if validation_errors:
        return EvaluationResult(
            success=False,
            error="; ".join(validation_errors),
            validation_errors=validation_errors,
        )

    city_overlay = resolve_overlay(zip_code, pack)
    net_policy = pack.net_policy_for(state)

    blocked = check_hard_blocks(state, input, pack)
    if blocked:
        block_id, block = blocked
        logger.info(
            "Hard block %s fired: state=%s investor_status=%s deal_count_last_365=%d",
            block_id,
            state,
            input.investor_status.value,
            input.deal_count_last_365,
        )
        return EvaluationResult(
            success=False,
            error=block.message,
            hard_block_id=block_id,
            city_overlay=city_overlay,
            net_policy=net_policy,
        )

    deep_dive_module_ids = select_deep_dive_modules(state, pack)

    rule_id = f"{state}_{input.transaction_type}"
    if city_overlay:
        rule_id = f"{rule_id}_{city_overlay}"

    return EvaluationResult(
        success=True,
        selected_rule_id=rule_id,
        selected_clause_ids=select_clauses(net_policy, city_overlay),
        deep_dive_module_ids=deep_dive_module_ids,
        city_overlay=city_overlay,
        net_policy=net_policy,
    )


def check_hard_blocks(
    state: str,
    input: EvaluationInput,
    pack: RulePack,
) -> tuple[str, HardBlock] | None:
    """Return the first hard block that applies, if any.

    A block applies when state and investor status match and the deal count
    is strictly greater than the configured threshold.
    """
    for block_id, block in pack.hard_blocks.items():
        if (
            block.state == state
            and block.investor_status == input.investor_status
            and input.deal_count_last_365 > block.deal_count_threshold
        ):
            return block_id, block
    return None


def select_deep_dive_modules(state: str, pack: RulePack) -> list[str]:
    """Module IDs triggered by the governing state, in pack order."""
    return [
        module_id
        for module_id, module in pack.modules.items()
        if module.trigger.type == "state" and module.trigger.value == state
    ]


def select_clauses(net_policy: NetPolicy, city_overlay: str | None) -> dict[str, list[str]]:
    """Clause IDs per category for a net policy and overlay."""
    selected: dict[str, list[str]] = {category: [] for category in CLAUSE_CATEGORIES}

    for category, clause_ids in STANDARD_CLAUSES.items():
        selected[category] = list(clause_ids)

    selected["B"] = [NET_POLICY_CLAUSES[net_policy]]

    if city_overlay:
        selected["J"] = list(OVERLAY_CLAUSES.get(city_overlay, []))

    return selected


def attorney_review_deadline(
    state: str | None,
    delivered_on: date,
    pack: RulePack | None = None,
) -> date | None:
    """
    Last day of the New Jersey attorney review period.

    Business days exclude Saturdays and Sundays only; legal holidays are not
    skipped, since the pack carries no holiday calendar. With day_zero_is_delivery,
    counting starts the day after delivery.

    Args:
        state: Governing state
        delivered_on: Date the signed agreement was delivered
        pack: Legal pack; defaults to the loaded pack

    Returns:
        Deadline date, or None outside New Jersey or when review is disabled
    """
    if pack is None:
        pack = load_pack()

    config = pack.nj_attorney_review
    if (state or "").upper() != ATTORNEY_REVIEW_STATE or not config.enabled:
        return None

    remaining = config.business_days
    current = delivered_on
    if not config.day_zero_is_delivery and _is_business_day(current):
        remaining -= 1

    while remaining > 0:
        current += timedelta(days=1)
        if _is_business_day(current):
            remaining -= 1

    return current


def _is_business_day(day: date) -> bool:
    return day.weekday() < 5
