"""
Exhibit A builder.

Normalizes the commercial terms against the evaluated net policy. In states
where net listings are banned, NET_SPREAD terms are rewritten as a flat fee.
"""

from __future__ import annotations

import logging
from typing import Any

from legal_engine.legal_pack import NetPolicy, RulePack, load_pack
from legal_engine.rules import EvaluationResult
from .schemas import (
    CompensationModel,
    CompensationSummary,
    ExhibitAInput,
    ExhibitAResult,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("compensation_model", "transaction_type")

AMOUNT_FIELDS = (
    (
        CompensationModel.FLAT_FEE,
        "flat_fee_amount",
        "Flat fee amount is required when using FLAT_FEE model",
    ),
    (
        CompensationModel.COMMISSION_PCT,
        "commission_percentage",
        "Commission percentage is required when using COMMISSION_PCT model",
    ),
)

COMPENSATION_LABELS = {
    CompensationModel.FLAT_FEE.value: "Flat Fee",
    CompensationModel.COMMISSION_PCT.value: "Commission Percentage",
    CompensationModel.NET_SPREAD.value: "Net Listing",
}

_JSON_TYPES: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "number": (int, float),
    "integer": (int,),
    "boolean": (bool,),
}


def build_exhibit_a(
    input: ExhibitAInput,
    evaluation: EvaluationResult,
    reject_banned_net: bool = False,
) -> ExhibitAResult:
    """
    Build Exhibit A terms for an evaluated deal.

    Args:
        input: Requested commercial terms
        evaluation: Successful rule evaluation for the deal
        reject_banned_net: Return an error instead of converting NET_SPREAD
            terms in a banned state

    Returns:
        ExhibitAResult with normalized terms, the conversion flag, and an
        error when required fields or the compensation amount are missing
    """
    terms = input.model_dump(mode="json", exclude_none=True)
    converted = False

    if (
        evaluation.net_policy == NetPolicy.BANNED
        and input.compensation_model == CompensationModel.NET_SPREAD
    ):
        if reject_banned_net:
            return ExhibitAResult(
                terms=terms,
                converted=False,
                error=(
                    f"NET/SPREAD compensation is prohibited in {evaluation.governing_state}. "
                    "Choose Flat Fee or Percentage."
                ),
            )

        terms["compensation_model"] = CompensationModel.FLAT_FEE.value
        terms["flat_fee_amount"] = input.net_target or input.flat_fee_amount or 0
        terms.pop("net_target", None)
        converted = True
        logger.warning(
            "Converted NET_SPREAD terms to FLAT_FEE for rule %s (net listings banned)",
            evaluation.selected_rule_id,
        )

    terms["converted_from_net"] = converted

    missing = [field for field in REQUIRED_FIELDS if not terms.get(field)]
    if missing:
        return ExhibitAResult(
            terms=terms,
            converted=converted,
            error=f"Missing required fields: {', '.join(missing)}",
        )

    # A zero amount counts as missing
    for model, amount_field, message in AMOUNT_FIELDS:
        if terms["compensation_model"] == model.value and not terms.get(amount_field):
            return ExhibitAResult(terms=terms, converted=converted, error=message)

    return ExhibitAResult(terms=terms, converted=converted)


def validate_terms(terms: dict[str, Any], pack: RulePack | None = None) -> list[str]:
    """
    Check terms against the pack's terms schema.

    Covers required fields, primitive types, enums and numeric bounds. Not
    called by build_exhibit_a.

    Returns:
        List of error messages; empty when the terms conform
    """
    if pack is None:
        pack = load_pack()
    schema = pack.terms_schema
    errors = []

    for field in schema.get("required", []):
        if terms.get(field) is None:
            errors.append(f"{field}: required")

    for field, spec in schema.get("properties", {}).items():
        value = terms.get(field)
        if value is None:
            continue

        expected = _JSON_TYPES.get(spec.get("type"))
        # bool is an int subclass; keep it out of numeric fields
        if expected and (
            not isinstance(value, expected)
            or (isinstance(value, bool) and spec.get("type") != "boolean")
        ):
            errors.append(f"{field}: expected {spec['type']}")
            continue

        if "enum" in spec and value not in spec["enum"]:
            errors.append(f"{field}: must be one of {', '.join(spec['enum'])}")
        if "minimum" in spec and value < spec["minimum"]:
            errors.append(f"{field}: must be >= {spec['minimum']}")
        if "maximum" in spec and value > spec["maximum"]:
            errors.append(f"{field}: must be <= {spec['maximum']}")

    return errors


def describe_compensation(terms: dict[str, Any]) -> CompensationSummary:
    """Seller- and buyer-side compensation in display form."""
    model = terms.get("compensation_model")
    seller_type = COMPENSATION_LABELS.get(model, "Not specified")

    if model == CompensationModel.FLAT_FEE.value:
        seller_value = _format_money(terms.get("flat_fee_amount"))
    elif model == CompensationModel.COMMISSION_PCT.value:
        seller_value = _format_percent(terms.get("commission_percentage"))
    elif model == CompensationModel.NET_SPREAD.value:
        seller_value = f"Net: {_format_money(terms.get('net_target'))}"
    else:
        seller_value = "Not specified"

    buyer_type_code = terms.get("buyer_commission_type")
    buyer_amount = terms.get("buyer_commission_amount")
    if buyer_type_code == CompensationModel.FLAT_FEE.value:
        buyer_value = _format_money(buyer_amount)
    elif buyer_type_code == CompensationModel.COMMISSION_PCT.value:
        buyer_value = _format_percent(buyer_amount)
    else:
        buyer_value = "Not specified"

    return CompensationSummary(
        seller_comp_type=seller_type,
        seller_comp_value=seller_value,
        buyer_comp_type=COMPENSATION_LABELS.get(buyer_type_code, "Not specified"),
        buyer_comp_value=buyer_value,
        converted_from_net=bool(terms.get("converted_from_net")),
    )


def _format_money(amount: float | None) -> str:
    if amount is None:
        return "Not specified"
    if float(amount).is_integer():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def _format_percent(value: float | None) -> str:
    if value is None:
        return "Not specified"
    return f"{value:g}%"
