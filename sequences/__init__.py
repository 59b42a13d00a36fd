"""
Sequences Module

Typed DNA, RNA and protein sequence records with per-kind alphabets,
motif search and validated in-place mutation.

Public API:
    - Sequence: The sequence record (construct with Sequence.dna/rna/protein)
    - SequenceKind: Enum of sequence kinds
    - SequenceError and subclasses: OutOfRangeError, InvalidUnitError,
      ConstructionError, WrongKindError
"""

__version__ = '1.0.0'

from .alphabets import (
    SequenceKind,
    AMINO_ACID_NAMES,
    AMINO_ACIDS,
    DNA_BASES,
    RNA_BASES,
    PROTEIN_SEPARATOR,
    valid_alphabet,
)
from .errors import (
    SequenceError,
    OutOfRangeError,
    InvalidUnitError,
    ConstructionError,
    WrongKindError,
)
from .sequence import Sequence

__all__ = [
    'Sequence',
    'SequenceKind',
    'AMINO_ACID_NAMES',
    'AMINO_ACIDS',
    'DNA_BASES',
    'RNA_BASES',
    'PROTEIN_SEPARATOR',
    'valid_alphabet',
    # Errors
    'SequenceError',
    'OutOfRangeError',
    'InvalidUnitError',
    'ConstructionError',
    'WrongKindError',
]
