"""
Sequence Module

The Sequence record shared by DNA, RNA and protein. A sequence is a tagged
record: the ``kind`` field selects how the payload is indexed, rendered,
searched and mutated.

- DNA / RNA: payload is a string, one unit per character
- Protein: payload is a tuple of amino acid name tokens

Construction does not check the payload against the alphabet (pass
``strict=True`` to the constructors for that); mutation always does.

Public API:
    Sequence.dna(identifier, data) -> Sequence
    Sequence.rna(identifier, data) -> Sequence
    Sequence.protein(identifier, data) -> Sequence
"""

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from .alphabets import (
    FASTA_HEADER_PREFIX,
    PROTEIN_SEPARATOR,
    SequenceKind,
    check_position,
    is_valid_unit,
    valid_alphabet,
)
from .errors import (
    ConstructionError,
    InvalidUnitError,
    OutOfRangeError,
    WrongKindError,
)


logger = logging.getLogger(__name__)

Units = Union[str, Tuple[str, ...]]


@dataclass
class Sequence:
    """
    A DNA, RNA or protein sequence.

    Attributes:
        identifier: Non-empty name of the sequence; fixed after construction
        kind: Which variant this sequence is
        units: Payload addressed by mutate/find_motif (str for DNA/RNA,
               tuple of residue names for protein)

    Example:
        >>> dna = Sequence.dna("seq1", "ATGC")
        >>> dna.complement()
        'TACG'
        >>> dna.transcribe().data
        'CGUA'
    """
    identifier: str
    kind: SequenceKind
    units: Units

    def __post_init__(self):
        """Validate identifier and normalize the payload."""
        if not isinstance(self.identifier, str) or not self.identifier:
            raise ConstructionError(
                f"Sequence identifier must be a non-empty string, got {self.identifier!r}"
            )
        if not isinstance(self.kind, SequenceKind):
            raise ConstructionError(f"Unknown sequence kind {self.kind!r}")

        if self.kind is SequenceKind.PROTEIN:
            if isinstance(self.units, str):
                raise ConstructionError(
                    "Protein units must be a sequence of tokens; use Sequence.protein() for joined text"
                )
            self.units = tuple(self.units)
            if not all(isinstance(token, str) for token in self.units):
                raise ConstructionError("Protein tokens must be strings")
            if any(PROTEIN_SEPARATOR in token for token in self.units):
                raise ConstructionError(
                    f"Protein tokens must not contain {PROTEIN_SEPARATOR!r}"
                )
        elif not isinstance(self.units, str):
            raise ConstructionError(
                f"{self.kind.value} data must be a string, got {type(self.units).__name__}"
            )

    def __setattr__(self, name, value):
        if name == 'identifier' and 'identifier' in self.__dict__:
            raise AttributeError("Sequence identifier cannot be changed")
        super().__setattr__(name, value)

    @classmethod
    def dna(cls, identifier: str, data: str, strict: bool = False) -> 'Sequence':
        """Create a DNA sequence from a string of bases."""
        return cls._build(identifier, SequenceKind.DNA, data, strict)

    @classmethod
    def rna(cls, identifier: str, data: str, strict: bool = False) -> 'Sequence':
        """Create an RNA sequence from a string of bases."""
        return cls._build(identifier, SequenceKind.RNA, data, strict)

    @classmethod
    def protein(cls, identifier: str, data: str, strict: bool = False) -> 'Sequence':
        """
        Create a protein from residue names joined with PROTEIN_SEPARATOR.

        An empty string gives a protein with no residues.
        """
        if not isinstance(data, str):
            raise ConstructionError(
                f"Protein data must be a string, got {type(data).__name__}"
            )
        tokens = tuple(data.split(PROTEIN_SEPARATOR)) if data else ()
        return cls._build(identifier, SequenceKind.PROTEIN, tokens, strict)

    @classmethod
    def _build(cls, identifier, kind, units, strict):
        sequence = cls(identifier, kind, units)
        if strict and not sequence.is_valid():
            raise ConstructionError(
                f"Sequence {identifier!r} contains units outside the {kind.value} alphabet"
            )
        return sequence

    @property
    def data(self) -> str:
        """Payload rendered as text (residue names joined for protein)."""
        if self.kind is SequenceKind.PROTEIN:
            return PROTEIN_SEPARATOR.join(self.units)
        return self.units

    @property
    def length(self) -> int:
        """Number of units: characters for DNA/RNA, residues for protein."""
        return len(self.units)

    def __len__(self) -> int:
        return len(self.units)

    @property
    def valid_alphabet(self):
        return valid_alphabet(self.kind)

    def is_valid(self) -> bool:
        """Check that every unit belongs to the alphabet of this kind."""
        alphabet = valid_alphabet(self.kind)
        return all(unit in alphabet for unit in self.units)

    def to_fasta(self) -> str:
        """Render as a FASTA record: header line, then the data line."""
        return f"{FASTA_HEADER_PREFIX}{self.identifier}\n{self.data}"

    def find_motif(self, motif: str) -> int:
        """
        Find the first occurrence of a motif.

        For DNA/RNA the motif is a substring; for protein it is a single
        residue name compared as a whole token.

        Returns:
            Lowest matching index, or -1 if the motif does not occur
        """
        if self.kind is SequenceKind.PROTEIN:
            return next(
                (i for i, token in enumerate(self.units) if token == motif), -1
            )
        return self.units.find(motif)

    def mutate(self, position: int, value: str) -> None:
        """
        Replace the unit at ``position`` with ``value``.

        Raises:
            OutOfRangeError: If position is negative or past the end
            InvalidUnitError: If value is not a legal unit for this kind
        """
        if not check_position(position, len(self.units)):
            raise OutOfRangeError(position, len(self.units))
        if not is_valid_unit(self.kind, value):
            raise InvalidUnitError(value, self.kind)

        original = self.units[position]
        if self.kind is SequenceKind.PROTEIN:
            self.units = self.units[:position] + (value,) + self.units[position + 1:]
        else:
            self.units = self.units[:position] + value + self.units[position + 1:]

        logger.debug("%s %s: %s%d%s", self.kind.value, self.identifier,
                     original, position, value)

    def copy(self) -> 'Sequence':
        """Return an independent sequence with the same identifier and data."""
        return Sequence(self.identifier, self.kind, self.units)

    # Expression pipeline shortcuts

    def complement(self) -> str:
        from expression.transcription import complement
        return complement(self)

    def transcribe(self) -> 'Sequence':
        from expression.transcription import transcribe
        return transcribe(self)

    def translate_to_protein(self) -> 'Sequence':
        from expression.translation import translate_to_protein
        return translate_to_protein(self)


def require_kind(sequence: Sequence, kind: SequenceKind, operation: str) -> None:
    """Raise WrongKindError unless ``sequence`` is of the given kind."""
    if sequence.kind is not kind:
        raise WrongKindError(operation, kind, sequence.kind)
