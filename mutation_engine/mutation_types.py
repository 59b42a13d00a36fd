"""
Mutation Types Module

Defines the record of a single point substitution and the parameters that
bias random substitutions. Used by the mutation engine to describe what it
changed in a sequence.

Biological context:
- Transitions: purine<->purine (A<->G) or pyrimidine<->pyrimidine (C<->T/U)
- Transversions: purine<->pyrimidine; chemically less likely, so rarer
"""

from dataclasses import dataclass

from sequences.alphabets import SequenceKind


PURINES = {'A', 'G'}
PYRIMIDINES = {'C', 'T', 'U'}


@dataclass
class Mutation:
    """
    Represents a single substitution event.

    Attributes:
        position: 0-indexed unit position (character for DNA/RNA, residue for protein)
        original: Unit present before the substitution
        replacement: Unit written by the substitution
        sequence_kind: Kind of sequence the mutation applies to

    Example:
        >>> str(Mutation(2, 'G', 'T', SequenceKind.DNA))
        'G3T'
        >>> str(Mutation(0, 'Metionina', 'Alanina', SequenceKind.PROTEIN))
        'Metionina1>Alanina'
    """
    position: int
    original: str
    replacement: str
    sequence_kind: SequenceKind = SequenceKind.DNA

    def __post_init__(self):
        """Validate mutation fields."""
        if self.position < 0:
            raise ValueError(f"Mutation position must be >= 0, got {self.position}")
        if self.original == self.replacement:
            raise ValueError(f"Replacement must differ from original, got {self.original!r}")

    def __str__(self) -> str:
        """Human-readable mutation notation (1-based position)."""
        if self.sequence_kind is SequenceKind.PROTEIN:
            return f"{self.original}{self.position+1}>{self.replacement}"
        return f"{self.original}{self.position+1}{self.replacement}"

    @property
    def is_transition(self) -> bool:
        """
        Check if a nucleotide substitution is a transition.

        Always False for protein substitutions.
        """
        if self.sequence_kind is SequenceKind.PROTEIN:
            return False
        return (
            {self.original, self.replacement} <= PURINES or
            {self.original, self.replacement} <= PYRIMIDINES
        )


@dataclass
class SubstitutionBias:
    """
    Container for random substitution parameters.

    Attributes:
        transition_bias: Ratio of transitions to transversions (default: 2.0)
                         Biological rationale: transitions are ~2x more common in nature

    Note: A bias of 0 produces transversions only.
    """
    transition_bias: float = 2.0

    def __post_init__(self):
        """Validate bias."""
        if self.transition_bias < 0:
            raise ValueError(f"Transition bias must be non-negative, got {self.transition_bias}")

    @property
    def transition_probability(self) -> float:
        """Probability that a nucleotide substitution is a transition."""
        return self.transition_bias / (self.transition_bias + 1)
