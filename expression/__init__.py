"""
Expression Module

The DNA -> RNA -> protein pipeline. Every transform returns a new,
independent sequence and leaves its input unchanged.

Public API:
    - complement: Complementary DNA strand
    - transcribe: DNA -> RNA
    - translate_to_protein: RNA -> protein
    - codon_to_amino_acid: Genetic code lookup
"""

from .codon_table import (
    CODON_TABLE,
    START_CODON,
    STOP_CODONS,
    STOP,
    UNKNOWN,
    codon_to_amino_acid,
    synonymous_codons,
)
from .transcription import complement, transcribe
from .translation import (
    translate_to_protein,
    split_codons,
    reading_frame,
    translate_codons,
)

__all__ = [
    'complement',
    'transcribe',
    'translate_to_protein',
    'split_codons',
    'reading_frame',
    'translate_codons',
    # Genetic code
    'CODON_TABLE',
    'START_CODON',
    'STOP_CODONS',
    'STOP',
    'UNKNOWN',
    'codon_to_amino_acid',
    'synonymous_codons',
]
