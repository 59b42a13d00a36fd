"""
Sequence Mutator Module

Random and explicit point substitutions on DNA, RNA and protein sequences.
All changes go through Sequence.mutate, so every substitution is bounds- and
alphabet-checked.

Public API:
    random_point_mutations(sequence, n_mut, transition_bias, seed) -> List[Mutation]
    apply_mutation(sequence, mutation) -> None
"""

import logging
import random
from typing import List, Optional

import numpy as np

from sequences.alphabets import AMINO_ACIDS, SequenceKind
from sequences.errors import OutOfRangeError
from sequences.sequence import Sequence, require_kind

from .mutation_types import Mutation, SubstitutionBias


logger = logging.getLogger(__name__)

TRANSITION_BIAS = 2.0

# Standard nucleotides per kind
NUCLEOTIDES = {
    SequenceKind.DNA: ['A', 'T', 'G', 'C'],
    SequenceKind.RNA: ['A', 'U', 'G', 'C'],
}

# Transition mutations (purine<->purine, pyrimidine<->pyrimidine) are more common
TRANSITIONS = {
    SequenceKind.DNA: {'A': 'G', 'G': 'A', 'T': 'C', 'C': 'T'},
    SequenceKind.RNA: {'A': 'G', 'G': 'A', 'U': 'C', 'C': 'U'},
}

# Transversion mutations (purine<->pyrimidine)
TRANSVERSIONS = {
    SequenceKind.DNA: {
        'A': ['T', 'C'],
        'G': ['T', 'C'],
        'T': ['A', 'G'],
        'C': ['A', 'G']
    },
    SequenceKind.RNA: {
        'A': ['U', 'C'],
        'G': ['U', 'C'],
        'U': ['A', 'G'],
        'C': ['A', 'G']
    },
}


def random_point_mutations(
    sequence: Sequence,
    n_mut: int = 1,
    transition_bias: float = TRANSITION_BIAS,
    per_unit_rate: Optional[float] = None,
    seed: Optional[int] = None
) -> List[Mutation]:
    """
    Introduce random point substitutions into a sequence, in place.

    Each selected position receives a unit different from the one it held.

    Args:
        sequence: DNA, RNA or protein sequence to mutate
        n_mut: Number of substitutions (default: 1); capped at sequence length
        transition_bias: Ratio of transitions to transversions (default: 2.0);
                         ignored for protein
        per_unit_rate: Optional per-unit substitution probability
                       (overrides n_mut if set)
        seed: Random seed for reproducibility

    Returns:
        List of Mutation objects, ordered by position

    Raises:
        ValueError: If the sequence is empty, n_mut is negative or the bias is invalid

    Example:
        >>> dna = Sequence.dna("x", "ATGCATGC")
        >>> mutations = random_point_mutations(dna, n_mut=2, seed=42)
    """
    if seed is not None:
        random.seed(seed)
        np.random.seed(seed)

    if len(sequence) == 0:
        raise ValueError("Sequence cannot be empty")
    if n_mut < 0:
        raise ValueError(f"Number of mutations must be >= 0, got {n_mut}")

    bias = SubstitutionBias(transition_bias=transition_bias)

    if per_unit_rate is not None:
        if not 0 <= per_unit_rate <= 1:
            raise ValueError(f"Per-unit rate must be in [0, 1], got {per_unit_rate}")
        n_mut = int(np.random.binomial(len(sequence), per_unit_rate))

    n_mut = min(n_mut, len(sequence))

    positions = sorted(random.sample(range(len(sequence)), n_mut))

    mutations = []
    for position in positions:
        original = sequence.units[position]
        if sequence.kind is SequenceKind.PROTEIN:
            replacement = _choose_residue(original)
        else:
            replacement = _choose_nucleotide(sequence.kind, original, bias)

        mutation = Mutation(
            position=position,
            original=original,
            replacement=replacement,
            sequence_kind=sequence.kind
        )
        sequence.mutate(position, replacement)
        mutations.append(mutation)

    logger.debug("Applied %d random substitutions to %s", len(mutations), sequence.identifier)
    return mutations


def apply_mutation(sequence: Sequence, mutation: Mutation) -> None:
    """
    Apply a recorded substitution to a sequence.

    Raises:
        WrongKindError: If the mutation was recorded for another sequence kind
        OutOfRangeError: If the position is outside the sequence
        ValueError: If the unit at the position is not mutation.original
    """
    require_kind(sequence, mutation.sequence_kind, 'apply_mutation')
    if mutation.position >= len(sequence):
        raise OutOfRangeError(mutation.position, len(sequence))

    current = sequence.units[mutation.position]
    if current != mutation.original:
        raise ValueError(
            f"Cannot apply {mutation}: found {current!r} at position {mutation.position + 1}"
        )
    sequence.mutate(mutation.position, mutation.replacement)


def _choose_nucleotide(kind: SequenceKind, original: str, bias: SubstitutionBias) -> str:
    """
    Pick a replacement base.

    Biological rationale: Transitions (purine<->purine, pyrimidine<->pyrimidine)
    are more common than transversions due to chemical similarity.
    """
    nucleotides = NUCLEOTIDES[kind]

    if random.random() < bias.transition_probability:
        # Transition
        new_base = TRANSITIONS[kind].get(original, random.choice(nucleotides))
    else:
        # Transversion
        new_base = random.choice(TRANSVERSIONS[kind].get(original, nucleotides))

    # Ensure we actually change the base
    while new_base == original:
        new_base = random.choice([n for n in nucleotides if n != original])

    return new_base


def _choose_residue(original: str) -> str:
    """Pick a different standard residue name."""
    return random.choice(sorted(AMINO_ACIDS - {original}))
