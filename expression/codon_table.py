"""
Codon Table Module

The standard genetic code written over RNA codons, with residues given by
name (see sequences.alphabets.AMINO_ACID_NAMES).

Biological Background:
    64 codons encode 20 amino acids plus 3 stop signals. The code is
    degenerate: most amino acids are encoded by 2, 4 or 6 synonymous codons,
    usually differing only in the third (wobble) position.
    Translation starts at AUG (methionine) and ends at UAA, UAG or UGA.
"""

from typing import Dict, List

from sequences.alphabets import AMINO_ACID_NAMES


START_CODON = 'AUG'
STOP_CODONS = {'UAA', 'UAG', 'UGA'}

# Sentinels for stop codons and codons outside the table
STOP = 'Stop'
UNKNOWN = 'Unknown'

# Standard genetic code (RNA codons to one-letter amino acids, '*' = stop)
GENETIC_CODE = {
    'UUU': 'F', 'UUC': 'F', 'UUA': 'L', 'UUG': 'L',
    'UCU': 'S', 'UCC': 'S', 'UCA': 'S', 'UCG': 'S',
    'UAU': 'Y', 'UAC': 'Y', 'UAA': '*', 'UAG': '*',
    'UGU': 'C', 'UGC': 'C', 'UGA': '*', 'UGG': 'W',
    'CUU': 'L', 'CUC': 'L', 'CUA': 'L', 'CUG': 'L',
    'CCU': 'P', 'CCC': 'P', 'CCA': 'P', 'CCG': 'P',
    'CAU': 'H', 'CAC': 'H', 'CAA': 'Q', 'CAG': 'Q',
    'CGU': 'R', 'CGC': 'R', 'CGA': 'R', 'CGG': 'R',
    'AUU': 'I', 'AUC': 'I', 'AUA': 'I', 'AUG': 'M',
    'ACU': 'T', 'ACC': 'T', 'ACA': 'T', 'ACG': 'T',
    'AAU': 'N', 'AAC': 'N', 'AAA': 'K', 'AAG': 'K',
    'AGU': 'S', 'AGC': 'S', 'AGA': 'R', 'AGG': 'R',
    'GUU': 'V', 'GUC': 'V', 'GUA': 'V', 'GUG': 'V',
    'GCU': 'A', 'GCC': 'A', 'GCA': 'A', 'GCG': 'A',
    'GAU': 'D', 'GAC': 'D', 'GAA': 'E', 'GAG': 'E',
    'GGU': 'G', 'GGC': 'G', 'GGA': 'G', 'GGG': 'G',
}

# Codon -> residue name (or STOP)
CODON_TABLE: Dict[str, str] = {
    codon: STOP if aa == '*' else AMINO_ACID_NAMES[aa]
    for codon, aa in GENETIC_CODE.items()
}

# Group codons by residue name for synonymous codon lookup
NAME_TO_CODONS: Dict[str, List[str]] = {}
for codon, name in CODON_TABLE.items():
    if name not in NAME_TO_CODONS:
        NAME_TO_CODONS[name] = []
    NAME_TO_CODONS[name].append(codon)


def codon_to_amino_acid(codon: str) -> str:
    """
    Look up a codon in the genetic code.

    Returns:
        Residue name, STOP for stop codons, or UNKNOWN for anything that is
        not one of the 64 RNA codons (e.g. containing T or lowercase bases)
    """
    return CODON_TABLE.get(codon, UNKNOWN)


def synonymous_codons(codon: str) -> List[str]:
    """Return the other codons encoding the same residue as ``codon``."""
    name = CODON_TABLE.get(codon)
    if name is None:
        return []
    return [c for c in NAME_TO_CODONS[name] if c != codon]
