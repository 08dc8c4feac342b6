"""
Legal package renderer.

Runs the engine end to end: rule evaluation, Exhibit A, then the Master
Agreement and State Addendum. This is the outer error boundary; nothing
below it is allowed to escape as a raw exception.
"""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import date

from legal_engine.documents import (
    AddendumInput,
    MasterInput,
    assemble_addendum,
    assemble_master,
    format_compensation_summary,
)
from legal_engine.exhibit import build_exhibit_a, describe_compensation
from legal_engine.legal_pack import RulePack, load_pack
from legal_engine.rules import EvaluationInput, attorney_review_deadline, evaluate_rules
from .schemas import ErrorKind, RenderInput, RenderResult

logger = logging.getLogger(__name__)

DOCUMENT_SEPARATOR = "\n\n---\n\n"


def render_package(input: RenderInput, pack: RulePack | None = None) -> RenderResult:
    """
    Render the full contract package for a deal.

    Args:
        input: Deal, party and Exhibit A facts
        pack: Legal pack; defaults to the loaded pack

    Returns:
        RenderResult with the documents and intermediate artifacts, or
        success=False with the first error encountered
    """
    try:
        return _render(input, pack)
    except Exception as e:
        logger.exception("Legal package rendering failed")
        return RenderResult(
            success=False,
            error=str(e) or e.__class__.__name__,
            error_kind=ErrorKind.INTERNAL,
        )


def _render(input: RenderInput, pack: RulePack | None) -> RenderResult:
    if pack is None:
        pack = load_pack()

    evaluation = evaluate_rules(
        EvaluationInput(
            governing_state=input.deal.state,
            property_zip=input.deal.zip,
            transaction_type=input.transaction_type.value,
            property_type=input.deal.property_type,
            investor_status=input.investor.status,
            deal_count_last_365=input.investor.deal_count_last_365,
        ),
        pack,
    )
    if not evaluation.success:
        return RenderResult(
            success=False,
            error=evaluation.error,
            error_kind=ErrorKind.HARD_BLOCK if evaluation.hard_block_id else ErrorKind.VALIDATION,
            validation_errors=evaluation.validation_errors,
            pack_version=pack.version,
        )

    exhibit_input = input.exhibit_a
    if exhibit_input.transaction_type is None:
        exhibit_input = exhibit_input.model_copy(update={"transaction_type": input.transaction_type})
    elif exhibit_input.transaction_type != input.transaction_type:
        return RenderResult(
            success=False,
            error=(
                f"Exhibit A transaction_type {exhibit_input.transaction_type.value} does not match "
                f"the deal transaction_type {input.transaction_type.value}"
            ),
            error_kind=ErrorKind.EXHIBIT,
            pack_version=pack.version,
        )

    exhibit = build_exhibit_a(exhibit_input, evaluation, reject_banned_net=input.reject_banned_net)
    if exhibit.error:
        return RenderResult(
            success=False,
            error=exhibit.error,
            error_kind=ErrorKind.EXHIBIT,
            pack_version=pack.version,
        )
    terms = exhibit.terms

    state = evaluation.governing_state
    effective_date = input.agreement_date or date.today()

    master_md = assemble_master(
        MasterInput(
            agreement_date=format_agreement_date(effective_date),
            investor_name=input.investor.name,
            investor_email=input.investor.email,
            agent_name=input.agent.name,
            agent_email=input.agent.email,
            agent_license=input.agent.license_number,
            property_address=input.deal.property_address,
            property_city=input.deal.city,
            property_state=state,
            property_zip=input.deal.zip,
            transaction_type=input.transaction_type.value,
            agreement_length_days=terms.get("agreement_length_days"),
            termination_notice_days=terms.get("termination_notice_days"),
            governing_state=state,
        ),
        pack,
    )

    addendum_md = assemble_addendum(
        AddendumInput(
            evaluation=evaluation,
            property_address=input.deal.property_address,
            property_city=input.deal.city,
            property_state=state,
            property_zip=input.deal.zip,
            exhibit_a_json=json.dumps(terms, indent=2),
            compensation_summary=format_compensation_summary(describe_compensation(terms)),
        ),
        pack,
    )

    input_hash = compute_render_input_hash(
        input.model_copy(update={"agreement_date": effective_date}),
        pack.version,
    )
    logger.info(
        "Rendered legal package rule=%s modules=%s converted=%s hash=%s",
        evaluation.selected_rule_id,
        ",".join(evaluation.deep_dive_module_ids) or "-",
        exhibit.converted,
        input_hash[:12],
    )

    return RenderResult(
        success=True,
        full_md=f"{master_md}{DOCUMENT_SEPARATOR}{addendum_md}",
        master_md=master_md,
        addendum_md=addendum_md,
        evaluation=evaluation,
        exhibit_a_terms=terms,
        pack_version=pack.version,
        render_input_hash=input_hash,
        attorney_review_deadline=attorney_review_deadline(state, effective_date, pack),
    )


def compute_render_input_hash(input: RenderInput, pack_version: str) -> str:
    """SHA-256 over the canonical JSON form of the input and pack version.

    The renderer hashes the input with agreement_date resolved, so renders
    that default to today hash differently on different days.
    """
    payload = {
        "pack_version": pack_version,
        "input": input.model_dump(mode="json"),
    }
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def format_agreement_date(value: date) -> str:
    """Long US date, e.g. 'March 5, 2026'."""
    return f"{value:%B} {value.day}, {value.year}"
