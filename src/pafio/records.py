"""
Data structures storing PAF lines.

Field names follow the column descriptions of the minimap2 manual
(https://lh3.github.io/minimap2/minimap2.html#10). All structures are
immutable; a :class:`PAFLine` is created fresh for every parsed line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

from .constants import (
    CIGAR_DELETION,
    CIGAR_INSERTION,
    CIGAR_MATCH,
    CIGAR_MISMATCH,
    DIFFERENCE_DELETION,
    DIFFERENCE_INSERTION,
    DIFFERENCE_MATCH,
    DIFFERENCE_MISMATCH,
    STRAND_FORWARD,
    STRAND_REVERSE,
)


class AlignmentType(Enum):
    """Type of a minimap2 alignment, as reported by the tp:A: column."""

    PRIMARY = 'P'
    SECONDARY = 'S'
    PRIMARY_INVERSION = 'I'
    SECONDARY_INVERSION = 'i'

    def __str__(self) -> str:
        return self.value


class CigarOperation(Enum):
    """Operations allowed in a cg:Z: CIGAR string."""

    MATCH = CIGAR_MATCH
    INSERTION = CIGAR_INSERTION
    DELETION = CIGAR_DELETION
    MISMATCH = CIGAR_MISMATCH


@dataclass(frozen=True)
class CigarColumn:
    """One run of a CIGAR string: ``length`` times ``operation``."""

    length: int
    operation: CigarOperation

    def __str__(self) -> str:
        return f'{self.length}{self.operation.value}'


@dataclass(frozen=True)
class Cigar:
    """
    A CIGAR string, kept as its sequence of runs.

    Examples
    --------
    >>> str(Cigar((CigarColumn(10, CigarOperation.MATCH),
    ...            CigarColumn(2, CigarOperation.DELETION))))
    '10M2D'
    """

    columns: Tuple[CigarColumn, ...] = ()

    def __str__(self) -> str:
        return ''.join(str(column) for column in self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[CigarColumn]:
        return iter(self.columns)


@dataclass(frozen=True)
class DifferenceMatch:
    """Identical run of ``length`` bases (``:length``)."""

    length: int

    def __str__(self) -> str:
        return f'{DIFFERENCE_MATCH}{self.length}'


@dataclass(frozen=True)
class DifferenceInsertion:
    """Bases present in the query but not in the reference (``+acgt``)."""

    superfluous_query_characters: str

    def __str__(self) -> str:
        return f'{DIFFERENCE_INSERTION}{self.superfluous_query_characters}'


@dataclass(frozen=True)
class DifferenceDeletion:
    """Bases present in the reference but missing from the query (``-acgt``)."""

    missing_query_characters: str

    def __str__(self) -> str:
        return f'{DIFFERENCE_DELETION}{self.missing_query_characters}'


@dataclass(frozen=True)
class DifferenceMismatch:
    """Single substitution, reference base then query base (``*ag``)."""

    reference: str
    query: str

    def __str__(self) -> str:
        return f'{DIFFERENCE_MISMATCH}{self.reference}{self.query}'


DifferenceColumn = Union[
    DifferenceMatch, DifferenceInsertion, DifferenceDeletion, DifferenceMismatch
]


@dataclass(frozen=True)
class AlignmentDifference:
    """A cs:Z: difference string, kept as its sequence of entries."""

    columns: Tuple[DifferenceColumn, ...] = ()

    def __str__(self) -> str:
        return ''.join(str(column) for column in self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[DifferenceColumn]:
        return iter(self.columns)


@dataclass(frozen=True)
class PAFLine:
    """
    A single line of a minimap2 PAF file.

    The first twelve attributes are the required columns, in file order.
    Every optional attribute is ``None`` when its column was absent.
    Columns with unknown headers that were collected while parsing are kept
    verbatim (header and value) in ``unknown_fields``.

    Notes
    -----
    ``strand`` is ``True`` for the forward strand (``+``) and ``False`` for
    the reverse strand (``-``).
    """

    # required fields
    query_sequence_name: str
    query_sequence_length: int
    query_start_coordinate: int
    query_end_coordinate: int
    strand: bool
    target_sequence_name: str
    target_sequence_length: int
    target_start_coordinate_on_original_strand: int
    target_end_coordinate_on_original_strand: int
    number_of_matching_bases: int
    number_of_bases_and_gaps: int
    mapping_quality: int

    # optional fields
    alignment_type: Optional[AlignmentType] = None
    number_of_minimisers: Optional[int] = None
    chaining_score: Optional[int] = None
    best_secondary_chaining_score: Optional[int] = None
    total_number_of_mismatches_and_gaps: Optional[int] = None
    unknown_md: Optional[str] = None
    dp_alignment_score: Optional[int] = None
    supplementary_alignments: Optional[str] = None
    best_segment_dp_score: Optional[int] = None
    number_of_ambiguous_bases: Optional[int] = None
    transcript_strand: Optional[str] = None
    cigar_string: Optional[Cigar] = None
    difference_string: Optional[AlignmentDifference] = None
    approximate_per_base_sequence_divergence: Optional[float] = None
    gap_compressed_per_base_sequence_divergence: Optional[float] = None
    length_of_query_regions_with_repetitive_seeds: Optional[int] = None

    unknown_fields: Tuple[str, ...] = ()

    @property
    def strand_symbol(self) -> str:
        """Strand as written in the file, ``'+'`` or ``'-'``."""
        return STRAND_FORWARD if self.strand else STRAND_REVERSE

    def __str__(self) -> str:
        from .writer import format_paf_line

        return format_paf_line(self)
