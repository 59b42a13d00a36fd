"""
Tests for composition statistics and mutation effect analysis.
"""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pandas as pd

from sequences import Sequence, WrongKindError, OutOfRangeError, InvalidUnitError
from analysis import (
    unit_counts,
    gc_content,
    shannon_entropy,
    composition_table,
    classify_substitution,
    mutation_scan,
    summarize_effects,
    EffectType,
)


class TestComposition(unittest.TestCase):

    def test_unit_counts(self):
        counts = unit_counts(Sequence.dna("s", "AACGTX"))

        self.assertIsInstance(counts, pd.Series)
        self.assertEqual(list(counts.index), ['A', 'C', 'G', 'T', 'X'])
        self.assertEqual(list(counts), [2, 1, 1, 1, 1])
        self.assertEqual(counts.name, "s")

    def test_empty_unit_counts(self):
        counts = unit_counts(Sequence.rna("s", ""))
        self.assertEqual(list(counts.index), ['A', 'C', 'G', 'U'])
        self.assertEqual(list(counts), [0, 0, 0, 0])

    def test_protein_unit_counts(self):
        counts = unit_counts(Sequence.protein("p", "Alanina-Alanina-Glicyna"))
        self.assertEqual(counts['Alanina'], 2)
        self.assertEqual(counts['Glicyna'], 1)
        self.assertEqual(counts.sum(), 3)

    def test_gc_content(self):
        self.assertEqual(gc_content(Sequence.dna("s", "GGCCAATT")), 50.0)
        self.assertEqual(gc_content(Sequence.rna("s", "GCGC")), 100.0)
        self.assertEqual(gc_content(Sequence.dna("s", "")), 0.0)
        with self.assertRaises(WrongKindError):
            gc_content(Sequence.protein("p", "Alanina"))

    def test_shannon_entropy(self):
        self.assertAlmostEqual(shannon_entropy(Sequence.dna("s", "ACGT")), 2.0)
        self.assertEqual(shannon_entropy(Sequence.dna("s", "AAAA")), 0.0)
        self.assertEqual(shannon_entropy(Sequence.rna("s", "")), 0.0)

    def test_composition_table(self):
        table = composition_table([
            Sequence.dna("d", "GGCCAATT"),
            Sequence.protein("p", "Metionina-Alanina"),
        ])

        self.assertEqual(
            list(table.columns),
            ['identifier', 'kind', 'length', 'gc_content', 'entropy']
        )
        self.assertEqual(list(table['length']), [8, 2])
        self.assertEqual(table.loc[0, 'gc_content'], 50.0)
        self.assertTrue(np.isnan(table.loc[1, 'gc_content']))


class TestClassifySubstitution(unittest.TestCase):
    """
    DNA "AATTCGGTA" transcribes to AUG GCU UAA (Metionina-Alanina).
    DNA position p maps to RNA position 8 - p.
    """

    def setUp(self):
        self.dna = Sequence.dna("gene", "AATTCGGTA")

    def test_synonymous(self):
        # GCU -> GCC
        effect = classify_substitution(self.dna, 3, 'C')
        self.assertEqual(effect.effect_type, EffectType.SYNONYMOUS)
        self.assertTrue(effect.is_neutral)
        self.assertEqual(effect.residue_changes, [])

    def test_missense(self):
        # GCU -> ACU
        effect = classify_substitution(self.dna, 5, 'A')
        self.assertEqual(effect.effect_type, EffectType.MISSENSE)
        self.assertEqual(effect.mutant_protein, ('Metionina', 'Treonina'))
        self.assertEqual(effect.residue_changes, [{
            'position': 1,
            'original_residue': 'Alanina',
            'mutant_residue': 'Treonina'
        }])

    def test_start_loss(self):
        # AUG -> ACG
        effect = classify_substitution(self.dna, 7, 'C')
        self.assertEqual(effect.effect_type, EffectType.START_LOSS)
        self.assertEqual(effect.mutant_protein, ())

    def test_readthrough(self):
        # UAA -> CAA
        effect = classify_substitution(self.dna, 2, 'C')
        self.assertEqual(effect.effect_type, EffectType.READTHROUGH)
        self.assertEqual(effect.mutant_protein, ('Metionina', 'Alanina', 'Glutamina'))

    def test_nonsense(self):
        # AUG UGG UAA; UGG -> UGA
        dna = Sequence.dna("gene", "AATGGTGTA")
        effect = classify_substitution(dna, 3, 'A')
        self.assertEqual(effect.effect_type, EffectType.NONSENSE)
        self.assertEqual(effect.mutant_protein, ('Metionina',))

    def test_start_gain_and_noncoding(self):
        # ACG GCU -> AUG GCU
        gained = classify_substitution(Sequence.dna("s", "TCGGCA"), 4, 'T')
        noncoding = classify_substitution(Sequence.dna("s", "CCCCCC"), 0, 'A')

        self.assertEqual(gained.effect_type, EffectType.START_GAIN)
        self.assertEqual(noncoding.effect_type, EffectType.NONCODING)

    def test_source_unchanged(self):
        classify_substitution(self.dna, 5, 'A')
        self.assertEqual(self.dna.data, "AATTCGGTA")

    def test_errors(self):
        with self.assertRaises(OutOfRangeError):
            classify_substitution(self.dna, 9, 'A')
        with self.assertRaises(InvalidUnitError):
            classify_substitution(self.dna, 0, 'U')
        with self.assertRaises(ValueError):
            classify_substitution(self.dna, 0, 'A')
        with self.assertRaises(WrongKindError):
            classify_substitution(Sequence.rna("s", "AUG"), 0, 'C')


class TestMutationScan(unittest.TestCase):

    def test_scan_covers_all_substitutions(self):
        results = mutation_scan(Sequence.dna("gene", "AATTCGGTA"))

        self.assertEqual(len(results), 9 * 3)
        self.assertIn('effect_type', results.columns)
        self.assertFalse((results['original'] == results['replacement']).any())
        valid_labels = {effect.value for effect in EffectType}
        self.assertTrue(set(results['effect_type']) <= valid_labels)

    def test_summarize_effects(self):
        results = pd.DataFrame({
            'position': [0, 0, 1, 1],
            'effect_type': ['synonymous', 'synonymous', 'missense', 'noncoding']
        })

        summary = summarize_effects(results)

        self.assertEqual(summary['total_substitutions'], 4)
        self.assertEqual(summary['effect_distribution']['synonymous'], 2)
        self.assertAlmostEqual(summary['pct_neutral'], 75.0)
        self.assertAlmostEqual(summary['tolerance_score'], 0.75)
        self.assertEqual(summary['position_sensitivity'], {0: 0.0, 1: 0.5})

    def test_summarize_empty(self):
        summary = summarize_effects(pd.DataFrame(columns=['effect_type']))
        self.assertEqual(summary['total_substitutions'], 0)
        self.assertEqual(summary['tolerance_score'], 0.0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
