"""
Translation Module

RNA -> protein translation using the standard genetic code.

Algorithm:
    1. Split the RNA into consecutive codons (a trailing partial codon is dropped)
    2. Skip codons up to the first start codon AUG; no AUG means no protein
    3. Map each codon to a residue name (UNKNOWN for codons outside the table)
    4. Stop before the first stop codon

Public API:
    translate_to_protein(rna) -> Sequence
    split_codons(data) -> List[str]
    reading_frame(codons) -> List[str]
    translate_codons(codons) -> List[str]
"""

import logging
from typing import List

from sequences.alphabets import SequenceKind
from sequences.sequence import Sequence, require_kind

from .codon_table import START_CODON, STOP, codon_to_amino_acid


logger = logging.getLogger(__name__)


def split_codons(data: str) -> List[str]:
    """Split RNA data into non-overlapping codons, left to right."""
    return [data[i:i+3] for i in range(0, len(data) - 2, 3)]


def reading_frame(codons: List[str]) -> List[str]:
    """
    Return the codons from the first start codon (inclusive) onward.

    Returns an empty list if the start codon never occurs.
    """
    for i, codon in enumerate(codons):
        if codon == START_CODON:
            return codons[i:]
    return []


def translate_codons(codons: List[str]) -> List[str]:
    """Map codons to residue names, stopping before the first stop codon."""
    residues = []
    for codon in codons:
        name = codon_to_amino_acid(codon)
        if name == STOP:
            break
        residues.append(name)
    return residues


def translate_to_protein(rna: Sequence) -> Sequence:
    """
    Translate an RNA sequence into a new protein with the same identifier.

    The source RNA is not modified. Codons outside the genetic code are kept
    as UNKNOWN residues rather than failing.

    Example:
        >>> translate_to_protein(Sequence.rna("x", "UUUAUGUUU")).data
        'Metionina-Fenyloalanina'
    """
    require_kind(rna, SequenceKind.RNA, 'translate_to_protein')
    codons = split_codons(rna.units)
    frame = reading_frame(codons)
    residues = translate_codons(frame)

    logger.debug(
        "Translated %s: %d codons, frame at codon %d, %d residues",
        rna.identifier, len(codons), len(codons) - len(frame), len(residues)
    )
    return Sequence(rna.identifier, SequenceKind.PROTEIN, residues)
