"""Master Agreement assembler."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from legal_engine.legal_pack import RulePack, load_pack
from .templating import find_placeholders, render_template

logger = logging.getLogger(__name__)


class MasterInput(BaseModel):
    """Party and term fields substituted into the master chassis."""

    agreement_date: str
    investor_name: str
    investor_email: str | None = None
    agent_name: str | None = None
    agent_email: str | None = None
    agent_license: str | None = None
    property_address: str | None = None
    property_city: str | None = None
    property_state: str | None = None
    property_zip: str | None = None
    transaction_type: str | None = None
    agreement_length_days: int | None = None
    termination_notice_days: int | None = None
    governing_state: str | None = None
    investor_signed_date: str | None = None
    agent_signed_date: str | None = None


def assemble_master(input: MasterInput, pack: RulePack | None = None) -> str:
    """Render the Master Agreement markdown.

    Plain field substitution with no conditional logic; unset fields render
    as empty strings.
    """
    if pack is None:
        pack = load_pack()

    values = input.model_dump()
    chassis = pack.templates.master_template

    unknown = [name for name in find_placeholders(chassis) if name not in values]
    if unknown:
        logger.warning("Master chassis has unfilled placeholders: %s", ", ".join(unknown))

    return render_template(chassis, values)
