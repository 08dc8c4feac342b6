"""End-to-end tests for legal package rendering."""

import json
from datetime import date

import pytest

from legal_engine.exhibit import CompensationModel, ExhibitAInput, TransactionType
from legal_engine.legal_pack import InvestorStatus, RulePack
from legal_engine.render import (
    DOCUMENT_SEPARATOR,
    ErrorKind,
    RenderInput,
    compute_render_input_hash,
    format_agreement_date,
    render_package,
)


def _with_deal(render_input: RenderInput, **deal) -> RenderInput:
    return render_input.model_copy(update={"deal": render_input.deal.model_copy(update=deal)})


# =============================================================================
# Successful Renders
# =============================================================================


class TestRenderSuccess:
    def test_texas_flat_fee(self, tx_render_input: RenderInput, legal_pack: RulePack):
        result = render_package(tx_render_input, legal_pack)

        assert result.success is True
        assert result.error is None
        assert result.error_kind is None
        assert result.evaluation.selected_rule_id == "TX_ASSIGNMENT"
        assert result.evaluation.selected_clause_ids["B"] == ["B_NET_RESTR"]
        assert result.pack_version == "1.0.1"

        assert result.master_md.startswith("# MASTER AGENT-INVESTOR AGREEMENT")
        assert "**Effective Date:** October 15, 2026" in result.master_md
        assert result.addendum_md.startswith("# STATE ADDENDUM - TX")
        assert result.full_md == f"{result.master_md}{DOCUMENT_SEPARATOR}{result.addendum_md}"

        assert result.exhibit_a_terms["compensation_model"] == "FLAT_FEE"
        assert result.exhibit_a_terms["flat_fee_amount"] == 5000
        assert result.exhibit_a_terms["converted_from_net"] is False
        assert "Flat Fee ($5,000)" in result.addendum_md
        assert json.dumps(result.exhibit_a_terms, indent=2) in result.addendum_md

        assert result.attorney_review_deadline is None
        assert len(result.render_input_hash) == 64

    def test_illinois_net_is_converted(self, tx_render_input: RenderInput, legal_pack: RulePack):
        render_input = _with_deal(tx_render_input, state="IL", zip="60601", city="Chicago")
        render_input = render_input.model_copy(
            update={
                "exhibit_a": ExhibitAInput(
                    compensation_model=CompensationModel.NET_SPREAD,
                    net_target=10000,
                    agreement_length_days=90,
                )
            }
        )

        result = render_package(render_input, legal_pack)

        assert result.success is True
        assert result.exhibit_a_terms["compensation_model"] == "FLAT_FEE"
        assert result.exhibit_a_terms["flat_fee_amount"] == 10000
        assert result.exhibit_a_terms["converted_from_net"] is True
        assert result.exhibit_a_terms["transaction_type"] == "ASSIGNMENT"
        assert "converted to a flat fee." in result.addendum_md
        assert "## STATE-SPECIFIC PROVISIONS" in result.addendum_md

    def test_new_jersey_deadline(self, tx_render_input: RenderInput, legal_pack: RulePack):
        render_input = _with_deal(tx_render_input, state="NJ", zip="07030", city="Hoboken")
        result = render_package(render_input, legal_pack)

        assert result.success is True
        assert result.attorney_review_deadline == date(2026, 10, 20)
        assert "### Section 7: Attorney Review Period" in result.addendum_md

    def test_philadelphia_render(self, tx_render_input: RenderInput, legal_pack: RulePack):
        render_input = _with_deal(tx_render_input, state="PA", zip="19103", city="Philadelphia")
        result = render_package(render_input, legal_pack)

        assert result.evaluation.selected_rule_id == "PA_ASSIGNMENT_PHILA"
        assert "**Philadelphia License Requirement:**" in result.addendum_md

    def test_defaults_to_loaded_pack(self, tx_render_input: RenderInput):
        assert render_package(tx_render_input).success is True


# =============================================================================
# Failures
# =============================================================================


class TestRenderFailures:
    def test_hard_block_renders_nothing(self, tx_render_input: RenderInput, legal_pack: RulePack):
        render_input = _with_deal(tx_render_input, state="IL", zip="60601")
        investor = render_input.investor.model_copy(
            update={"status": InvestorStatus.UNLICENSED, "deal_count_last_365": 3}
        )
        result = render_package(render_input.model_copy(update={"investor": investor}), legal_pack)

        assert result.success is False
        assert result.error_kind == ErrorKind.HARD_BLOCK
        assert result.error.startswith("Illinois law prohibits")
        assert result.full_md is None
        assert result.master_md is None
        assert result.addendum_md is None

    def test_synthetic_block(self, tx_render_input: RenderInput, blocking_pack: RulePack):
        investor = tx_render_input.investor.model_copy(update={"deal_count_last_365": 6})
        result = render_package(tx_render_input.model_copy(update={"investor": investor}), blocking_pack)

        assert result.error_kind == ErrorKind.HARD_BLOCK
        assert result.error == "Synthetic Texas volume block."

    def test_missing_zip(self, tx_render_input: RenderInput, legal_pack: RulePack):
        result = render_package(_with_deal(tx_render_input, zip=None), legal_pack)

        assert result.success is False
        assert result.error_kind == ErrorKind.VALIDATION
        assert result.validation_errors == ["Missing required field: property_zip"]
        assert result.full_md is None

    def test_missing_compensation_model(self, tx_render_input: RenderInput, legal_pack: RulePack):
        render_input = tx_render_input.model_copy(update={"exhibit_a": ExhibitAInput()})
        result = render_package(render_input, legal_pack)

        assert result.success is False
        assert result.error_kind == ErrorKind.EXHIBIT
        assert result.error == "Missing required fields: compensation_model"

    def test_strict_net_rejection(self, tx_render_input: RenderInput, legal_pack: RulePack):
        render_input = _with_deal(tx_render_input, state="IL", zip="60601")
        render_input = render_input.model_copy(
            update={
                "exhibit_a": ExhibitAInput(compensation_model=CompensationModel.NET_SPREAD, net_target=1),
                "reject_banned_net": True,
            }
        )
        result = render_package(render_input, legal_pack)

        assert result.error_kind == ErrorKind.EXHIBIT
        assert "prohibited in IL" in result.error

    def test_mismatched_transaction_type(self, tx_render_input: RenderInput, legal_pack: RulePack):
        exhibit_a = tx_render_input.exhibit_a.model_copy(
            update={"transaction_type": TransactionType.DOUBLE_CLOSE}
        )
        result = render_package(tx_render_input.model_copy(update={"exhibit_a": exhibit_a}), legal_pack)

        assert result.success is False
        assert result.error_kind == ErrorKind.EXHIBIT
        assert "DOUBLE_CLOSE does not match" in result.error
        assert result.full_md is None

    def test_flat_fee_without_amount(self, tx_render_input: RenderInput, legal_pack: RulePack):
        exhibit_a = tx_render_input.exhibit_a.model_copy(update={"flat_fee_amount": None})
        result = render_package(tx_render_input.model_copy(update={"exhibit_a": exhibit_a}), legal_pack)

        assert result.error_kind == ErrorKind.EXHIBIT
        assert result.error == "Flat fee amount is required when using FLAT_FEE model"

    def test_internal_error_is_contained(
        self,
        tx_render_input: RenderInput,
        legal_pack: RulePack,
        monkeypatch: pytest.MonkeyPatch,
    ):
        def broken_master(*args, **kwargs):
            raise RuntimeError("chassis exploded")

        monkeypatch.setattr("legal_engine.render.service.assemble_master", broken_master)
        result = render_package(tx_render_input, legal_pack)

        assert result.success is False
        assert result.error_kind == ErrorKind.INTERNAL
        assert result.error == "chassis exploded"
        assert result.full_md is None


# =============================================================================
# Helpers
# =============================================================================


class TestRenderHelpers:
    def test_hash_is_stable(self, tx_render_input: RenderInput):
        first = compute_render_input_hash(tx_render_input, "1.0.1")
        second = compute_render_input_hash(tx_render_input.model_copy(deep=True), "1.0.1")
        assert first == second

    def test_hash_changes_with_input_and_version(self, tx_render_input: RenderInput):
        base = compute_render_input_hash(tx_render_input, "1.0.1")
        assert compute_render_input_hash(tx_render_input, "1.0.2") != base
        assert compute_render_input_hash(_with_deal(tx_render_input, zip="78702"), "1.0.1") != base

    def test_default_date_is_hashed(
        self,
        tx_render_input: RenderInput,
        legal_pack: RulePack,
        monkeypatch: pytest.MonkeyPatch,
    ):
        undated = tx_render_input.model_copy(update={"agreement_date": None})

        def render_on(day: date):
            class FixedDate(date):
                @classmethod
                def today(cls):
                    return cls(day.year, day.month, day.day)

            monkeypatch.setattr("legal_engine.render.service.date", FixedDate)
            return render_package(undated, legal_pack)

        thursday = render_on(date(2026, 10, 15))
        friday = render_on(date(2026, 10, 16))

        assert thursday.render_input_hash == render_package(tx_render_input, legal_pack).render_input_hash
        assert thursday.render_input_hash != friday.render_input_hash
        assert "October 16, 2026" in friday.master_md

    def test_identical_renders_match(self, tx_render_input: RenderInput, legal_pack: RulePack):
        first = render_package(tx_render_input, legal_pack)
        second = render_package(tx_render_input, legal_pack)
        assert first.full_md == second.full_md
        assert first.render_input_hash == second.render_input_hash

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2026, 10, 15), "October 15, 2026"),
            (date(2026, 3, 5), "March 5, 2026"),
        ],
    )
    def test_format_agreement_date(self, value, expected):
        assert format_agreement_date(value) == expected
