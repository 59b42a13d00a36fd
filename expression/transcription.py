"""
Transcription Module

DNA-level transforms: base complement and transcription to RNA.

In this simplified model a transcript is the T->U substituted strand read in
the opposite direction, which stands in for the 5'->3' flip between the
template strand and its RNA product.

Public API:
    complement(dna) -> str
    transcribe(dna) -> Sequence
"""

import logging

from sequences.alphabets import SequenceKind
from sequences.sequence import Sequence, require_kind


logger = logging.getLogger(__name__)

# Watson-Crick pairs; unknown characters pass through unchanged
COMPLEMENT_MAP = str.maketrans('ATCG', 'TAGC')

TRANSCRIPTION_MAP = str.maketrans('T', 'U')


def complement(dna: Sequence) -> str:
    """
    Return the complementary strand of a DNA sequence.

    A<->T and C<->G; any other character is copied as is. Applying the
    complement twice restores the original bases.

    Example:
        >>> complement(Sequence.dna("x", "ATGC"))
        'TACG'
    """
    require_kind(dna, SequenceKind.DNA, 'complement')
    return dna.units.translate(COMPLEMENT_MAP)


def transcribe(dna: Sequence) -> Sequence:
    """
    Transcribe DNA into a new RNA sequence with the same identifier.

    Steps:
        1. Substitute every T with U
        2. Reverse the order of the bases

    Example:
        >>> transcribe(Sequence.dna("x", "ATGC")).data
        'CGUA'
    """
    require_kind(dna, SequenceKind.DNA, 'transcribe')
    rna_data = dna.units.translate(TRANSCRIPTION_MAP)[::-1]
    logger.debug("Transcribed %s: %d bases", dna.identifier, len(rna_data))
    return Sequence.rna(dna.identifier, rna_data)
