"""
Analysis Module

Provides tools for analyzing sequences and the protein-level consequences of
point mutations.

Public API:
    - unit_counts: Per-unit counts as a pandas Series
    - gc_content: GC percentage of DNA/RNA
    - shannon_entropy: Unit-distribution entropy in bits
    - composition_table: Composition summary for several sequences
    - classify_substitution: Effect of one base substitution on the protein
    - mutation_scan: Effects of every single-base substitution
    - summarize_effects: Summary metrics from a mutation scan
"""

from .composition import (
    unit_counts,
    gc_content,
    shannon_entropy,
    composition_table
)
from .mutation_effects import (
    express,
    classify_substitution,
    mutation_scan,
    summarize_effects,
    EffectType,
    SubstitutionEffect
)

__all__ = [
    # Composition
    'unit_counts',
    'gc_content',
    'shannon_entropy',
    'composition_table',
    # Mutation effects
    'express',
    'classify_substitution',
    'mutation_scan',
    'summarize_effects',
    'EffectType',
    'SubstitutionEffect'
]
