"""Deal Flow Legal Engine - contract package generation for investor-agent deals.

Evaluates jurisdiction rules for a deal and assembles the Master Agreement,
State Addendum and Exhibit A from a versioned legal pack.
"""

from .legal_pack import LegalPackError, RulePack, load_pack
from .rules import EvaluationInput, EvaluationResult, evaluate_rules, resolve_overlay
from .exhibit import ExhibitAInput, ExhibitAResult, build_exhibit_a
from .documents import AddendumInput, MasterInput, assemble_addendum, assemble_master
from .render import RenderInput, RenderResult, render_package

__version__ = "1.0.0"

__all__ = [
    # Pack
    "LegalPackError",
    "RulePack",
    "load_pack",
    # Rules
    "EvaluationInput",
    "EvaluationResult",
    "evaluate_rules",
    "resolve_overlay",
    # Exhibit A
    "ExhibitAInput",
    "ExhibitAResult",
    "build_exhibit_a",
    # Documents
    "MasterInput",
    "AddendumInput",
    "assemble_master",
    "assemble_addendum",
    # Render
    "RenderInput",
    "RenderResult",
    "render_package",
]
