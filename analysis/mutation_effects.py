"""
Mutation Effects Module

Predicts how single-base DNA substitutions change the expressed protein by
running the transcription/translation pipeline before and after the change.

Biological Background:
    Point substitutions in a coding sequence can be:
    - Synonymous: A codon changes to another codon for the same residue
    - Missense: A residue is replaced by a different residue
    - Nonsense: A premature stop codon truncates the protein
    - Readthrough: A stop codon is lost and translation continues
    - Start loss / start gain: The start codon disappears or appears,
      removing or creating the reading frame

Public API:
    express(dna) -> Sequence
    classify_substitution(dna, position, value) -> SubstitutionEffect
    mutation_scan(dna) -> pd.DataFrame
    summarize_effects(results) -> dict
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

import pandas as pd

from sequences.alphabets import SequenceKind
from sequences.sequence import Sequence, require_kind
from mutation_engine import Mutation


SCAN_BASES = ['A', 'C', 'G', 'T']


class EffectType(Enum):
    """
    Effect of a substitution on the expressed protein.

    SYNONYMOUS: Protein unchanged
    MISSENSE: Same length, at least one residue changed
    NONSENSE: Protein shortened
    READTHROUGH: Protein lengthened
    START_LOSS: Protein no longer expressed
    START_GAIN: Protein expressed where none was before
    NONCODING: No protein before or after
    """
    SYNONYMOUS = "synonymous"
    MISSENSE = "missense"
    NONSENSE = "nonsense"
    READTHROUGH = "readthrough"
    START_LOSS = "start_loss"
    START_GAIN = "start_gain"
    NONCODING = "noncoding"


# Effects that leave the expressed protein intact
NEUTRAL_EFFECTS = {EffectType.SYNONYMOUS, EffectType.NONCODING}


@dataclass
class SubstitutionEffect:
    """
    Result of classifying one substitution.

    Attributes:
        mutation: The substitution that was evaluated
        effect_type: Classified effect on the protein
        original_protein: Residues expressed from the source DNA
        mutant_protein: Residues expressed from the mutated DNA
        residue_changes: Residue-level differences over the shared length
    """
    mutation: Mutation
    effect_type: EffectType
    original_protein: Tuple[str, ...]
    mutant_protein: Tuple[str, ...]
    residue_changes: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def is_neutral(self) -> bool:
        return self.effect_type in NEUTRAL_EFFECTS


def express(dna: Sequence) -> Sequence:
    """Transcribe and translate a DNA sequence."""
    return dna.transcribe().translate_to_protein()


def classify_substitution(dna: Sequence, position: int, value: str) -> SubstitutionEffect:
    """
    Classify the protein-level effect of substituting one base.

    The source sequence is not modified; the substitution is applied to a copy.

    Args:
        dna: Source DNA sequence
        position: 0-indexed base position
        value: Replacement base (must differ from the current base)

    Raises:
        WrongKindError: If dna is not a DNA sequence
        OutOfRangeError: If position is outside the sequence
        InvalidUnitError: If value is not a DNA base
        ValueError: If value equals the current base
    """
    require_kind(dna, SequenceKind.DNA, 'classify_substitution')

    mutant = dna.copy()
    mutant.mutate(position, value)
    mutation = Mutation(position, dna.units[position], value, SequenceKind.DNA)

    original_protein = express(dna).units
    mutant_protein = express(mutant).units

    return SubstitutionEffect(
        mutation=mutation,
        effect_type=_classify_protein_change(original_protein, mutant_protein),
        original_protein=original_protein,
        mutant_protein=mutant_protein,
        residue_changes=_find_residue_changes(original_protein, mutant_protein)
    )


def _classify_protein_change(
    original: Tuple[str, ...],
    mutant: Tuple[str, ...]
) -> EffectType:
    if not original and not mutant:
        return EffectType.NONCODING
    if not mutant:
        return EffectType.START_LOSS
    if not original:
        return EffectType.START_GAIN
    if original == mutant:
        return EffectType.SYNONYMOUS
    if len(mutant) < len(original):
        return EffectType.NONSENSE
    if len(mutant) > len(original):
        return EffectType.READTHROUGH
    return EffectType.MISSENSE


def _find_residue_changes(
    original: Tuple[str, ...],
    mutant: Tuple[str, ...]
) -> List[Dict[str, Any]]:
    """
    Compare two proteins residue by residue.

    Returns:
        List of dicts with 'position', 'original_residue', 'mutant_residue'
    """
    changes = []

    for i in range(min(len(original), len(mutant))):
        if original[i] != mutant[i]:
            changes.append({
                'position': i,
                'original_residue': original[i],
                'mutant_residue': mutant[i]
            })

    return changes


def mutation_scan(dna: Sequence) -> pd.DataFrame:
    """
    Classify every possible single-base substitution of a DNA sequence.

    Returns:
        DataFrame with one row per substitution and columns:
        position, original, replacement, mutation, effect_type,
        protein_length, residue_changes
    """
    require_kind(dna, SequenceKind.DNA, 'mutation_scan')

    results = []
    for position, original in enumerate(dna.units):
        for base in SCAN_BASES:
            if base == original:
                continue
            effect = classify_substitution(dna, position, base)
            results.append({
                'position': position,
                'original': original,
                'replacement': base,
                'mutation': str(effect.mutation),
                'effect_type': effect.effect_type.value,
                'protein_length': len(effect.mutant_protein),
                'residue_changes': len(effect.residue_changes)
            })

    return pd.DataFrame(results, columns=[
        'position', 'original', 'replacement', 'mutation',
        'effect_type', 'protein_length', 'residue_changes'
    ])


def summarize_effects(
    results: pd.DataFrame,
    label_column: str = 'effect_type'
) -> Dict[str, Any]:
    """
    Compute summary metrics from a mutation scan.

    Args:
        results: DataFrame as returned by mutation_scan
        label_column: Name of column containing effect labels

    Returns:
        Dict containing:
            - 'total_substitutions': Number of substitutions analyzed
            - 'effect_distribution': Dict of effect counts
            - 'effect_percentages': Dict of effect percentages
            - 'pct_neutral': Percentage of substitutions leaving the protein intact
            - 'tolerance_score': Fraction of neutral substitutions (0-1)
            - 'position_sensitivity': Dict of position -> fraction of
              non-neutral substitutions

    Notes:
        Higher tolerance score = sequence more robust to point mutations
    """
    if results.empty:
        return _empty_summary()

    total = len(results)
    effect_counts = results[label_column].value_counts().to_dict()
    effect_pcts = {
        effect: (count / total) * 100
        for effect, count in effect_counts.items()
    }

    neutral_labels = {effect.value for effect in NEUTRAL_EFFECTS}
    neutral = results[label_column].isin(neutral_labels)
    neutral_count = int(neutral.sum())

    position_sensitivity = {}
    if 'position' in results.columns:
        sensitivity = (~neutral).groupby(results['position']).mean()
        position_sensitivity = {int(pos): float(rate) for pos, rate in sensitivity.items()}

    return {
        'total_substitutions': total,
        'effect_distribution': effect_counts,
        'effect_percentages': effect_pcts,
        'pct_neutral': (neutral_count / total) * 100,
        'tolerance_score': neutral_count / total,
        'position_sensitivity': position_sensitivity
    }


def _empty_summary() -> Dict[str, Any]:
    """Return empty summary for edge cases."""
    return {
        'total_substitutions': 0,
        'effect_distribution': {},
        'effect_percentages': {},
        'pct_neutral': 0.0,
        'tolerance_score': 0.0,
        'position_sensitivity': {}
    }
