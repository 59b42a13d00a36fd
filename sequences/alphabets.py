"""
Alphabets Module

Defines the sequence kinds and the set of legal units for each kind.

Biological context:
- DNA is written with the four deoxyribonucleotides A, T, C, G
- RNA replaces thymine (T) with uracil (U)
- Proteins are chains of amino acids; here each residue is addressed by its
  full (Polish) name rather than a one-letter code, so a protein is a list
  of name tokens joined by PROTEIN_SEPARATOR for display
"""

from enum import Enum
from typing import Dict, FrozenSet


FASTA_HEADER_PREFIX = ">"
PROTEIN_SEPARATOR = "-"


class SequenceKind(Enum):
    """
    Enumeration of sequence kinds.

    DNA: Character-indexed deoxyribonucleotide sequence
    RNA: Character-indexed ribonucleotide sequence
    PROTEIN: Token-indexed amino acid sequence
    """
    DNA = "DNA"
    RNA = "RNA"
    PROTEIN = "protein"

    @property
    def is_nucleic(self) -> bool:
        return self is not SequenceKind.PROTEIN


DNA_BASES = frozenset('ATCG')
RNA_BASES = frozenset('AUCG')

# One-letter code -> residue name
AMINO_ACID_NAMES = {
    'F': 'Fenyloalanina',
    'L': 'Leucyna',
    'I': 'Izoleucyna',
    'M': 'Metionina',
    'V': 'Walina',
    'S': 'Seryna',
    'P': 'Prolina',
    'T': 'Treonina',
    'A': 'Alanina',
    'Y': 'Tyrozyna',
    'H': 'Histydyna',
    'Q': 'Glutamina',
    'N': 'Asparagina',
    'K': 'Lizyna',
    'D': 'Kwas asparaginowy',
    'E': 'Kwas glutaminowy',
    'C': 'Cysteina',
    'W': 'Tryptofan',
    'R': 'Arginina',
    'G': 'Glicyna',
}

AMINO_ACIDS = frozenset(AMINO_ACID_NAMES.values())

VALID_ALPHABETS: Dict[SequenceKind, FrozenSet[str]] = {
    SequenceKind.DNA: DNA_BASES,
    SequenceKind.RNA: RNA_BASES,
    SequenceKind.PROTEIN: AMINO_ACIDS,
}


def valid_alphabet(kind: SequenceKind) -> FrozenSet[str]:
    """Return the set of legal units for a sequence kind."""
    return VALID_ALPHABETS[kind]


def is_valid_unit(kind: SequenceKind, unit) -> bool:
    """
    Check whether a single unit may be written into a sequence of this kind.

    Nucleotide kinds accept exactly one alphabet character. Protein accepts any
    non-empty token that does not contain the display separator; residue names
    are not checked against AMINO_ACIDS so that modified or non-standard
    residues can be recorded.
    """
    if not isinstance(unit, str):
        return False
    if kind is SequenceKind.PROTEIN:
        return bool(unit) and PROTEIN_SEPARATOR not in unit
    return unit in VALID_ALPHABETS[kind]


def check_position(position: int, length: int) -> bool:
    """Check if a position is a valid (non-negative, integer) index."""
    if isinstance(position, bool) or not isinstance(position, int):
        return False
    return 0 <= position < length
