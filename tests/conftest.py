"""Pytest fixtures for test suite."""

import shutil
from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from legal_engine.exhibit import CompensationModel, ExhibitAInput, TransactionType
from legal_engine.legal_pack import (
    HardBlock,
    InvestorStatus,
    RulePack,
    clear_pack_cache,
    load_pack,
)
from legal_engine.render import AgentFacts, DealFacts, InvestorFacts, RenderInput


# =============================================================================
# Pack Fixtures
# =============================================================================


@pytest.fixture
def pack_dir() -> Path:
    """Path to the bundled legal pack."""
    return Path(__file__).parent.parent / "legal_engine" / "legal_pack" / "data" / "v1_0_1"


@pytest.fixture
def legal_pack(pack_dir: Path) -> RulePack:
    """The bundled legal pack."""
    return load_pack(pack_dir)


@pytest.fixture
def pack_copy(tmp_path: Path, pack_dir: Path) -> Path:
    """Writable copy of the bundled pack for corruption tests."""
    target = tmp_path / "pack"
    shutil.copytree(pack_dir, target)
    return target


@pytest.fixture
def blocking_pack(legal_pack: RulePack) -> RulePack:
    """Pack with an extra synthetic hard block on licensed Texas investors."""
    hard_blocks = dict(legal_pack.hard_blocks)
    hard_blocks["TX_SYNTHETIC_BLOCK"] = HardBlock(
        state="TX",
        investor_status=InvestorStatus.LICENSED,
        deal_count_threshold=5,
        message="Synthetic Texas volume block.",
    )
    return legal_pack.model_copy(update={"hard_blocks": hard_blocks})


@pytest.fixture(autouse=True)
def _reset_pack_cache():
    """Each test starts with an empty pack cache."""
    clear_pack_cache()
    yield
    clear_pack_cache()


# =============================================================================
# Render Fixtures
# =============================================================================


@pytest.fixture
def tx_render_input() -> RenderInput:
    """TX assignment, licensed investor, no prior deals, $5,000 flat fee."""
    return RenderInput(
        deal=DealFacts(
            property_address="1200 Congress Ave",
            city="Austin",
            state="TX",
            zip="78701",
            property_type="Single Family",
        ),
        investor=InvestorFacts(
            name="Ivy Investor",
            email="ivy@example.com",
            status=InvestorStatus.LICENSED,
            deal_count_last_365=0,
        ),
        agent=AgentFacts(
            name="Alan Agent",
            email="alan@example.com",
            license_number="TX-778899",
        ),
        transaction_type=TransactionType.ASSIGNMENT,
        exhibit_a=ExhibitAInput(
            compensation_model=CompensationModel.FLAT_FEE,
            flat_fee_amount=5000,
            transaction_type=TransactionType.ASSIGNMENT,
            agreement_length_days=180,
            termination_notice_days=30,
        ),
        agreement_date=date(2026, 10, 15),
    )


@pytest.fixture
def client() -> TestClient:
    """Test client for the FastAPI app."""
    from legal_engine.main import app

    return TestClient(app)
