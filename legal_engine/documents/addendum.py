"""
State Addendum assembler.

Fills the addendum chassis with property details, the selected clause text
grouped into the contract's four clause sections, the deep-dive module
injections, and the Exhibit A terms.
"""

from __future__ import annotations

from pydantic import BaseModel

from legal_engine.exhibit import CompensationSummary
from legal_engine.legal_pack import Injection, RulePack, load_pack
from legal_engine.rules import EvaluationResult
from .templating import render_template

# Chassis marker -> clause categories rendered together in that section
CLAUSE_BLOCKS: dict[str, tuple[str, ...]] = {
    "INSERT_CLAUSE_CATEGORY_A": ("A",),
    "INSERT_CLAUSE_CATEGORY_B_H": ("B", "H"),
    "INSERT_CLAUSE_CATEGORY_C_G": ("C", "G"),
    "INSERT_CLAUSE_CATEGORY_D_E_J": ("D", "E", "J"),
}

DEEP_DIVE_MARKER = "INSERT_DEEP_DIVE_MODULES"

# Injection targets in rendering order
DEEP_DIVE_SECTIONS: tuple[tuple[str, str], ...] = (
    ("section_5", "Section 5: State-Specific Requirements"),
    ("section_6", "Section 6: Additional Provisions"),
    ("section_7", "Section 7: Attorney Review Period"),
)


class AddendumInput(BaseModel):
    """Inputs for the State Addendum."""

    evaluation: EvaluationResult
    property_address: str | None = None
    property_city: str | None = None
    property_state: str | None = None
    property_zip: str | None = None
    exhibit_a_json: str = ""
    compensation_summary: str = ""


def assemble_addendum(input: AddendumInput, pack: RulePack | None = None) -> str:
    """Render the State Addendum markdown.

    All placeholders and insertion markers are resolved in a single pass, so
    clause or module text containing {{...}} is never re-substituted.
    """
    if pack is None:
        pack = load_pack()

    evaluation = input.evaluation
    values: dict[str, str | None] = {
        "governing_state": input.property_state,
        "property_address": input.property_address,
        "property_city": input.property_city,
        "property_state": input.property_state,
        "property_zip": input.property_zip,
        "exhibit_a_json": input.exhibit_a_json,
        "compensation_summary": input.compensation_summary,
    }

    for marker, categories in CLAUSE_BLOCKS.items():
        clause_ids = [
            clause_id
            for category in categories
            for clause_id in evaluation.selected_clause_ids.get(category, [])
        ]
        values[marker] = build_clause_section(clause_ids, pack)

    values[DEEP_DIVE_MARKER] = build_deep_dive_section(evaluation.deep_dive_module_ids, pack)

    return render_template(pack.templates.addendum_chassis, values)


def build_clause_section(clause_ids: list[str], pack: RulePack) -> str:
    """Clause text for the given IDs; IDs missing from the bank are skipped."""
    parts = []
    for clause_id in clause_ids:
        clause = pack.clauses.get(clause_id)
        if clause:
            parts.append(f"**{clause.title}:** {clause.text}")
    return "\n\n".join(parts)


def build_deep_dive_section(module_ids: list[str], pack: RulePack) -> str:
    """STATE-SPECIFIC PROVISIONS block for the triggered modules.

    Injections are grouped by target section. Sections render in fixed
    order; several modules targeting one section keep module order.
    """
    if not module_ids:
        return ""

    by_target: dict[str, list[str]] = {}
    for module_id in module_ids:
        module = pack.modules.get(module_id)
        if module is None:
            continue
        for injection in module.injections:
            by_target.setdefault(injection.target, []).append(_render_injection(injection))

    lines = ["", "---", "", "## STATE-SPECIFIC PROVISIONS"]
    for target, heading in DEEP_DIVE_SECTIONS:
        if target in by_target:
            lines.extend(["", f"### {heading}", "", "\n\n".join(by_target[target])])
    return "\n".join(lines)


def format_compensation_summary(summary: CompensationSummary) -> str:
    """Markdown lines describing seller and buyer compensation."""
    lines = [
        f"- **Seller-side compensation:** {summary.seller_comp_type} ({summary.seller_comp_value})",
        f"- **Buyer-side compensation:** {summary.buyer_comp_type} ({summary.buyer_comp_value})",
    ]
    if summary.converted_from_net:
        lines.append(
            "- Net listing compensation is not permitted in this state and has been "
            "converted to a flat fee."
        )
    return "\n".join(lines)


def _render_injection(injection: Injection) -> str:
    if injection.title:
        return f"**{injection.title}**\n\n{injection.content}"
    return injection.content
