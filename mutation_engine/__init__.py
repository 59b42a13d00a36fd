"""
Mutation Engine Module

Provides tools for introducing point substitutions into DNA, RNA and protein
sequences, with transition/transversion bias for nucleotides.

Public API:
    - random_point_mutations: Apply random substitutions to a sequence
    - apply_mutation: Apply a recorded substitution
    - Mutation: Dataclass representing a single substitution
    - SubstitutionBias: Dataclass for substitution parameters
"""

from .mutation_types import Mutation, SubstitutionBias
from .sequence_mutator import random_point_mutations, apply_mutation

__all__ = ['random_point_mutations', 'apply_mutation', 'Mutation', 'SubstitutionBias']
