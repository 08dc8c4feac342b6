"""Legal pack loader.

A pack is a directory of versioned data files. Loading is all-or-nothing:
any missing or malformed file raises LegalPackError so evaluation never
runs against a partial pack.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from legal_engine.core.config import get_settings
from .schemas import RulePack

logger = logging.getLogger(__name__)

PACK_FILES: dict[str, str] = {
    "config": "legal_engine_config.yaml",
    "clauses": "legal_clauses.yaml",
    "modules": "deep_dive_modules.yaml",
    "templates": "templates.yaml",
    "terms_schema": "terms_schema.json",
}


class LegalPackError(Exception):
    """Raised when a legal pack is missing, malformed, or inconsistent."""


def load_pack(pack_dir: str | Path | None = None) -> RulePack:
    """Load the legal pack from a directory.

    Args:
        pack_dir: Pack directory. Defaults to the configured pack directory.

    Returns:
        The parsed RulePack. Repeated calls for the same directory return the
        cached instance.

    Raises:
        LegalPackError: If any file is missing, unparsable, or invalid.
    """
    path = Path(pack_dir) if pack_dir else get_settings().pack_dir
    return _load_cached(str(path.resolve()))


def clear_pack_cache() -> None:
    """Drop cached packs so the next load re-reads the files."""
    _load_cached.cache_clear()


@lru_cache(maxsize=8)
def _load_cached(pack_dir: str) -> RulePack:
    path = Path(pack_dir)
    if not path.is_dir():
        raise LegalPackError(f"Legal pack directory not found: {path}")

    tables = {name: _read_table(path / filename) for name, filename in PACK_FILES.items()}
    pack = parse_pack(**tables)

    logger.info(
        "Loaded legal pack v%s from %s (%d clauses, %d modules, %d hard blocks)",
        pack.version,
        path,
        len(pack.clauses),
        len(pack.modules),
        len(pack.hard_blocks),
    )
    return pack


def _read_table(path: Path) -> dict[str, Any]:
    """Read a single pack file into a mapping."""
    if not path.exists():
        raise LegalPackError(f"Legal pack file not found: {path.name}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix == ".json":
                content = json.load(f)
            else:
                content = yaml.safe_load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise LegalPackError(f"Malformed legal pack file {path.name}: {e}") from e

    if not isinstance(content, dict):
        raise LegalPackError(f"Legal pack file {path.name} must contain a mapping")
    return content


def parse_pack(
    config: dict[str, Any],
    clauses: dict[str, Any],
    modules: dict[str, Any],
    templates: dict[str, Any],
    terms_schema: dict[str, Any],
) -> RulePack:
    """Build a RulePack from raw file contents and check cross-table integrity."""
    try:
        pack = RulePack(
            version=config.get("version"),
            governing_law=config.get("governing_law", "PROPERTY_STATE"),
            net_policy_by_state=config.get("net_policy_by_state"),
            hard_blocks=config.get("hard_blocks"),
            city_overlay_mapping=config.get("city_overlay_mapping"),
            transaction_types=config.get("transaction_types") or [],
            nj_attorney_review=config.get("nj_attorney_review") or {},
            clauses=clauses.get("clauses"),
            modules=modules.get("modules"),
            templates=templates,
            terms_schema=terms_schema,
        )
    except ValidationError as e:
        raise LegalPackError(f"Invalid legal pack: {e}") from e

    _check_integrity(pack)
    return pack


def _check_integrity(pack: RulePack) -> None:
    """Checks that span more than one table."""
    for key, clause in pack.clauses.items():
        if clause.id != key:
            raise LegalPackError(f"Clause key {key!r} does not match its id {clause.id!r}")

    triggered_states: dict[str, str] = {}
    for key, module in pack.modules.items():
        if module.id != key:
            raise LegalPackError(f"Module key {key!r} does not match its id {module.id!r}")
        if module.trigger.type != "state":
            continue
        state = module.trigger.value
        if state in triggered_states:
            raise LegalPackError(
                f"Modules {triggered_states[state]!r} and {key!r} both trigger on state {state}"
            )
        triggered_states[state] = key
