"""Identifier normalization utilities."""
import re

PATHWAY_PREFIX = re.compile(r"^(pathway:|path:|map:)")
COMPOUND_PREFIX = re.compile(r"^(cpd:|compound:)")
ENZYME_PREFIX = re.compile(r"^(ec:|enzyme:)")


def normalize_pathway_id(pathway_id: str) -> str:
    """Strip a ``pathway:``, ``path:`` or ``map:`` database prefix."""
    return PATHWAY_PREFIX.sub("", pathway_id.strip())


def normalize_compound_id(compound_id: str) -> str:
    """Strip a ``cpd:`` or ``compound:`` database prefix."""
    return COMPOUND_PREFIX.sub("", compound_id.strip())


def normalize_enzyme_id(enzyme_id: str) -> str:
    """Strip an ``ec:`` or ``enzyme:`` database prefix."""
    return ENZYME_PREFIX.sub("", enzyme_id.strip())
