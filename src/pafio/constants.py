"""
Constants for PAF line parsing and serialization.

Contains the optional column headers written by minimap2, the letters and
markers of the two nested grammars, and the order in which optional columns
are written back out.
"""

# Names of the required columns, in file order (used in error reports)
REQUIRED_COLUMN_NAMES = (
    'query_sequence_name',
    'query_sequence_length',
    'query_start_coordinate',
    'query_end_coordinate',
    'strand',
    'target_sequence_name',
    'target_sequence_length',
    'target_start_coordinate_on_original_strand',
    'target_end_coordinate_on_original_strand',
    'number_of_matching_bases',
    'number_of_bases_and_gaps',
    'mapping_quality',
)

# Optional column headers have the shape 'XX:T:'
HEADER_LENGTH = 5

# Optional column headers known to minimap2
TAG_ALIGNMENT_TYPE = 'tp:A:'
TAG_NUMBER_OF_MINIMISERS = 'cm:i:'
TAG_CHAINING_SCORE = 's1:i:'
TAG_BEST_SECONDARY_CHAINING_SCORE = 's2:i:'
TAG_MISMATCHES_AND_GAPS = 'NM:i:'
TAG_MD = 'MD:Z:'
TAG_DP_ALIGNMENT_SCORE = 'AS:i:'
TAG_SUPPLEMENTARY_ALIGNMENTS = 'SA:Z:'
TAG_BEST_SEGMENT_DP_SCORE = 'ms:i:'
TAG_AMBIGUOUS_BASES = 'nn:i:'
TAG_TRANSCRIPT_STRAND = 'ts:A:'
TAG_CIGAR = 'cg:Z:'
TAG_DIFFERENCE = 'cs:Z:'
TAG_APPROXIMATE_DIVERGENCE = 'dv:f:'
TAG_GAP_COMPRESSED_DIVERGENCE = 'de:f:'
TAG_REPETITIVE_SEED_LENGTH = 'rl:i:'

# CIGAR operation letters
CIGAR_MATCH = 'M'
CIGAR_INSERTION = 'I'
CIGAR_DELETION = 'D'
CIGAR_MISMATCH = 'X'
CIGAR_OPERATIONS = CIGAR_MATCH + CIGAR_INSERTION + CIGAR_DELETION + CIGAR_MISMATCH

# Difference string markers
DIFFERENCE_MATCH = ':'
DIFFERENCE_DELETION = '-'
DIFFERENCE_INSERTION = '+'
DIFFERENCE_MISMATCH = '*'
DIFFERENCE_MARKERS = (
    DIFFERENCE_MATCH + DIFFERENCE_DELETION + DIFFERENCE_INSERTION + DIFFERENCE_MISMATCH
)

STRAND_FORWARD = '+'
STRAND_REVERSE = '-'

MAX_MAPPING_QUALITY = 255

# Order of optional columns on output.
# First the columns minimap2 always writes in this order, then the columns
# without a fixed position, ordered as in the minimap2 man page.
# cg and cs come last among the second group.
KNOWN_ORDER_TAGS = (
    TAG_MISMATCHES_AND_GAPS,
    TAG_BEST_SEGMENT_DP_SCORE,
    TAG_DP_ALIGNMENT_SCORE,
    TAG_AMBIGUOUS_BASES,
    TAG_ALIGNMENT_TYPE,
    TAG_NUMBER_OF_MINIMISERS,
    TAG_CHAINING_SCORE,
    TAG_BEST_SECONDARY_CHAINING_SCORE,
    TAG_GAP_COMPRESSED_DIVERGENCE,
    TAG_REPETITIVE_SEED_LENGTH,
)

FREE_ORDER_TAGS = (
    TAG_MD,
    TAG_SUPPLEMENTARY_ALIGNMENTS,
    TAG_TRANSCRIPT_STRAND,
    TAG_APPROXIMATE_DIVERGENCE,
    TAG_CIGAR,
    TAG_DIFFERENCE,
)

OUTPUT_TAG_ORDER = KNOWN_ORDER_TAGS + FREE_ORDER_TAGS
