"""
File-level PAF reader.

Wraps the line parser with file handling (plain or gzip-compressed input),
progress logging, tabular export and serialization, and provides the
``pafio`` command-line interface.
"""

import argparse
import gzip
import logging
import sys
from os import PathLike
from pathlib import Path
from typing import List, Literal, Optional, TextIO, Union

import pandas as pd

from .errors import PAFParseError
from .parser import iter_input_read
from .records import PAFLine
from .table import records_to_dataframe
from .tags import UnknownColumnPolicy
from .writer import write_paf

logger = logging.getLogger(__name__)

# Log progress every N lines
PROGRESS_INTERVAL = 100000


def _log_unknown_column(header: str, value: str) -> None:
    logger.warning(f"Found unknown field: {header}{value}")


def open_paf(paf_path: Union[PathLike, str]) -> TextIO:
    """
    Open a PAF file for reading as text.

    Files ending in ``.gz`` are decompressed on the fly; ``'-'`` reads
    standard input.
    """
    if str(paf_path) == '-':
        return sys.stdin
    paf_path = Path(paf_path)
    if paf_path.suffix == '.gz':
        return gzip.open(paf_path, 'rt', encoding='utf-8', newline='')
    return open(paf_path, 'r', encoding='utf-8', newline='')


class PAFReader:
    """
    Reader for minimap2 PAF files.

    Parameters
    ----------
    paf_path : PathLike or str
        Path to a ``.paf`` or ``.paf.gz`` file, or ``'-'`` for stdin.
    unknown_columns : {'collect', 'reject'}, default 'collect'
        Handling of optional columns with unknown headers. Collected columns
        are logged at WARNING level and kept in ``PAFLine.unknown_fields``.

    Attributes
    ----------
    records : list of PAFLine
        Parsed records after calling `read()`.

    Examples
    --------
    >>> reader = PAFReader('/path/to/alignments.paf.gz')
    >>> reader.read()
    >>> reader.to_dataframe().shape
    (1200, 30)
    >>> reader.serialize('/path/to/results', format='csv')
    """

    def __init__(
        self,
        paf_path: Union[PathLike, str],
        unknown_columns: UnknownColumnPolicy = 'collect',
    ):
        if unknown_columns not in ('collect', 'reject'):
            raise ValueError(f"Unknown unknown_columns policy: {unknown_columns}")

        self._paf_path = paf_path
        self._unknown_columns = unknown_columns
        self.records: List[PAFLine] = []

        if str(paf_path) != '-' and not Path(paf_path).exists():
            raise FileNotFoundError(f"PAF file does not exist: {paf_path}")

    def read(self) -> None:
        """
        Read and parse every line of the file.

        Raises
        ------
        PAFParseError
            On the first malformed line, or ``IO_ERROR`` if reading fails.
        """
        logger.info(f"Reading {self._paf_path}")
        records = []

        handle = open_paf(self._paf_path)
        try:
            for record in iter_input_read(
                handle,
                unknown_columns=self._unknown_columns,
                on_unknown_column=_log_unknown_column,
            ):
                records.append(record)
                if len(records) % PROGRESS_INTERVAL == 0:
                    logger.info(f"{len(records):,} lines parsed...")
        finally:
            if handle is not sys.stdin:
                handle.close()

        self.records = records
        logger.info(f"Complete - {len(self.records):,} records")

    def to_dataframe(self) -> pd.DataFrame:
        """Parsed records as a DataFrame, see :func:`records_to_dataframe`."""
        return records_to_dataframe(self.records)

    def serialize(
        self,
        results_path: Union[PathLike, str],
        format: Literal['paf', 'csv'] = 'paf',
    ) -> Path:
        """
        Save parsed records to disk.

        Parameters
        ----------
        results_path : PathLike or str
            Directory to save results in. Created if missing.
        format : {'paf', 'csv'}, default 'paf'
            ``'paf'`` rewrites the records with optional columns in canonical
            order, ``'csv'`` writes the table of :meth:`to_dataframe`.

        Returns
        -------
        Path
            The written file.
        """
        results_path = Path(results_path)
        results_path.mkdir(parents=True, exist_ok=True)

        if format == 'paf':
            out_fn = results_path / 'alignments.paf'
            with open(out_fn, 'w', encoding='utf-8', newline='') as f:
                write_paf(self.records, f)
        elif format == 'csv':
            out_fn = results_path / 'alignments.csv'
            self.to_dataframe().to_csv(out_fn, index=False)
        else:
            raise ValueError(f"Unknown output format: {format}")

        logger.info(f"Results saved to {out_fn}")
        return out_fn

    def print_summary(self) -> None:
        """Print a summary of the parsed data."""
        print(f"PAF Path: {self._paf_path}")
        print(f"Records: {len(self.records)}")
        if self.records:
            queries = {r.query_sequence_name for r in self.records}
            targets = {r.target_sequence_name for r in self.records}
            n_unknown = sum(len(r.unknown_fields) for r in self.records)
            print(f"Queries: {len(queries)}")
            print(f"Targets: {len(targets)}")
            print(f"Unknown optional columns: {n_unknown}")


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for PAFReader."""
    parser = argparse.ArgumentParser(
        prog='pafio',
        description='Parse minimap2 PAF files and rewrite them as PAF or CSV',
    )

    parser.add_argument(
        'paf_path',
        nargs='?',
        default='-',
        help="Path to PAF file (.paf or .paf.gz), or '-' for stdin",
    )
    parser.add_argument(
        '-o', '--output',
        default=None,
        help='Path to output file (default: stdout)',
    )
    parser.add_argument(
        '--format',
        choices=['paf', 'csv'],
        default='paf',
        help='Output format',
    )
    parser.add_argument(
        '--unknown_columns',
        choices=['collect', 'reject'],
        default='collect',
        help='Keep or reject optional columns with unknown headers',
    )
    parser.add_argument(
        '-d', '--debug',
        action='store_true',
        help='Enable debug logging',
    )

    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        reader = PAFReader(args.paf_path, unknown_columns=args.unknown_columns)
        reader.read()
    except (FileNotFoundError, PAFParseError) as e:
        logger.error(f"Error processing {args.paf_path}: {e}")
        return 2

    if args.output is None:
        out = sys.stdout
    else:
        out = open(args.output, 'w', encoding='utf-8', newline='')

    try:
        if args.format == 'paf':
            write_paf(reader.records, out)
        else:
            reader.to_dataframe().to_csv(out, index=False)
    finally:
        if out is not sys.stdout:
            out.close()

    logger.info(f"Wrote {len(reader.records):,} records")
    return 0


if __name__ == '__main__':
    sys.exit(main())
