"""Clause selection tables.

These encode legal policy, not incidental structure: each category maps to
a fixed clause list, except B (net policy) and J (local overlay).
Category letters are an open set; D, F and I are reserved.
"""

from legal_engine.legal_pack import NetPolicy

PHILADELPHIA_OVERLAY = "PHILA"

ATTORNEY_REVIEW_STATE = "NJ"

# Category order used when building selections
CLAUSE_CATEGORIES: tuple[str, ...] = ("A", "B", "C", "E", "G", "H", "J")

STANDARD_CLAUSES: dict[str, list[str]] = {
    "A": ["A_AGENCY_STD", "A_TRANS_BROKER"],
    "C": ["C_EQ_INT_STD"],
    "E": ["E_LIST_REQ", "E_BROKER_ACK"],
    "G": ["G_NO_SELLER"],
    "H": ["H_PAY_BROKER"],
}

NET_POLICY_CLAUSES: dict[NetPolicy, str] = {
    NetPolicy.BANNED: "B_NET_BANNED",
    NetPolicy.RESTRICTED: "B_NET_RESTR",
    NetPolicy.ALLOWED: "B_NET_STD",
}

OVERLAY_CLAUSES: dict[str, list[str]] = {
    PHILADELPHIA_OVERLAY: ["J_PHL_LIC"],
}
