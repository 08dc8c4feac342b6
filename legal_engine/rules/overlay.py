"""
Local overlay resolver.

Maps a property ZIP code to a named local-jurisdiction overlay (e.g. a
city) using the pack's city_overlay_mapping.
"""

from __future__ import annotations

from legal_engine.legal_pack import RulePack, load_pack

ZIP_PREFIX_LENGTH = 3


def resolve_overlay(zip_code: str | None, pack: RulePack | None = None) -> str | None:
    """
    Resolve the local overlay for a ZIP code.

    An exact key match wins. Otherwise the first mapping key sharing the
    ZIP's 3-digit prefix is used. Keys are scanned in mapping order and no
    priority among prefix ties is implied.

    Args:
        zip_code: Property ZIP code
        pack: Legal pack; defaults to the loaded pack

    Returns:
        Overlay name, or None when the ZIP is empty or unmapped
    """
    if not zip_code:
        return None
    zip_code = zip_code.strip()
    if not zip_code:
        return None

    if pack is None:
        pack = load_pack()
    mapping = pack.city_overlay_mapping

    if zip_code in mapping:
        return mapping[zip_code]

    if len(zip_code) < ZIP_PREFIX_LENGTH:
        return None

    prefix = zip_code[:ZIP_PREFIX_LENGTH]
    for key, overlay in mapping.items():
        if key[:ZIP_PREFIX_LENGTH] == prefix:
            return overlay

    return None
