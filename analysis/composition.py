"""
Composition Module

Unit composition statistics for DNA, RNA and protein sequences.

Public API:
    unit_counts(sequence) -> pd.Series
    gc_content(sequence) -> float
    shannon_entropy(sequence) -> float
    composition_table(sequences) -> pd.DataFrame
"""

from typing import Iterable

import numpy as np
import pandas as pd
from scipy.stats import entropy

from sequences.alphabets import AMINO_ACID_NAMES, SequenceKind
from sequences.errors import WrongKindError
from sequences.sequence import Sequence


# Display order of units per kind
ALPHABET_ORDER = {
    SequenceKind.DNA: ['A', 'C', 'G', 'T'],
    SequenceKind.RNA: ['A', 'C', 'G', 'U'],
    SequenceKind.PROTEIN: [AMINO_ACID_NAMES[aa] for aa in 'ACDEFGHIKLMNPQRSTVWY'],
}


def unit_counts(sequence: Sequence) -> pd.Series:
    """
    Count each unit of a sequence.

    The index lists the alphabet in a fixed order (zero counts included),
    followed by any units outside the alphabet in order of first appearance.
    """
    units = pd.Series(list(sequence.units), dtype=object)
    order = ALPHABET_ORDER[sequence.kind]
    extra = [unit for unit in units.unique() if unit not in order]

    counts = units.value_counts().reindex(order + extra, fill_value=0).astype('int64')
    counts.name = sequence.identifier
    return counts


def gc_content(sequence: Sequence) -> float:
    """
    Calculate GC content of a nucleotide sequence as a percentage.

    Returns 0.0 for an empty sequence.

    Raises:
        WrongKindError: For protein sequences
    """
    if not sequence.kind.is_nucleic:
        raise WrongKindError('gc_content', SequenceKind.DNA, sequence.kind)
    if len(sequence) == 0:
        return 0.0

    gc_count = sequence.units.count('G') + sequence.units.count('C')
    return (gc_count / len(sequence)) * 100


def shannon_entropy(sequence: Sequence) -> float:
    """
    Shannon entropy of the unit distribution, in bits per unit.

    0.0 for empty or homopolymer sequences; 2.0 for a DNA sequence with
    equal counts of all four bases.
    """
    counts = unit_counts(sequence).to_numpy()
    if counts.sum() == 0:
        return 0.0
    return float(entropy(counts, base=2))


def composition_table(sequences: Iterable[Sequence]) -> pd.DataFrame:
    """
    Summarize several sequences, one row each.

    Columns: identifier, kind, length, gc_content (NaN for protein), entropy
    """
    rows = []
    for sequence in sequences:
        rows.append({
            'identifier': sequence.identifier,
            'kind': sequence.kind.value,
            'length': len(sequence),
            'gc_content': gc_content(sequence) if sequence.kind.is_nucleic else np.nan,
            'entropy': shannon_entropy(sequence)
        })

    return pd.DataFrame(
        rows, columns=['identifier', 'kind', 'length', 'gc_content', 'entropy']
    )
