"""
I/O utilities for the group partitioning GA.

Handles CSV parsing of input records and CSV export of assignments and
fitness history.
"""

import csv
import sys
from pathlib import Path
from typing import IO, List, Optional, Sequence, Tuple, Union

from .data_models import Chromosome, Record, RECORD_COLUMNS


class InputParseError(Exception):
    """Raised when the input records cannot be parsed."""
    pass


def parse_records(stream: IO[str], source: str = "<stream>") -> List[Record]:
    """
    Parse records from a CSV text stream.

    CSV format:
        name,gender,discipline,seniority,client,team
        Alice,F,Engineering,Senior,Acme,Blue
        "Bob, Jr.",M,Design,Junior,Globex,Red
        ...

    Columns may come in any order; extra columns are ignored.

    Args:
        stream: Text stream positioned at the header row
        source: Name of the stream, used in error messages

    Returns:
        List of records in input order

    Raises:
        InputParseError: If the header, any row or the whole input is invalid
    """
    try:
        reader = csv.DictReader(stream, restkey="__extra__")

        if reader.fieldnames is None:
            raise InputParseError(f"No header row in {source}")

        fieldnames = [name.strip() for name in reader.fieldnames]
        missing = [column for column in RECORD_COLUMNS if column not in fieldnames]
        if missing:
            raise InputParseError(
                f"Invalid CSV format in {source}. Missing columns: {', '.join(missing)}. "
                f"Expected columns: {','.join(RECORD_COLUMNS)}"
            )
        reader.fieldnames = fieldnames

        records = []
        for row in reader:
            line = reader.line_num

            if "__extra__" in row:
                raise InputParseError(f"Too many fields on line {line} of {source}")

            if any(row[column] is None for column in RECORD_COLUMNS):
                raise InputParseError(f"Too few fields on line {line} of {source}")

            if not row["name"].strip():
                raise InputParseError(f"Empty name on line {line} of {source}")

            records.append(Record(**{column: row[column] for column in RECORD_COLUMNS}))

    except csv.Error as e:
        raise InputParseError(f"Malformed CSV in {source}: {e}")
    except UnicodeDecodeError as e:
        raise InputParseError(f"Invalid text encoding in {source}: {e}")

    if not records:
        raise InputParseError(f"No records found in {source}")

    return records


def load_records(source: Union[str, Path, None] = None) -> List[Record]:
    """
    Load records from a CSV file, or from stdin when source is None or "-".

    Raises:
        InputParseError: If the file is missing or its content is invalid
    """
    if source is None or str(source) == "-":
        return parse_records(sys.stdin, "<stdin>")

    csv_path = Path(source)
    if not csv_path.exists():
        raise InputParseError(f"CSV file not found: {csv_path}")

    try:
        with open(csv_path, 'r', newline='') as f:
            return parse_records(f, str(csv_path))
    except OSError as e:
        raise InputParseError(f"Could not read {csv_path}: {e}")


def save_assignment_to_csv(
    chromosome: Chromosome,
    records: Sequence[Record],
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save a group assignment to CSV.

    CSV format:
        name,group
        Alice,0
        ...

    Args:
        chromosome: Group id per record
        records: Records, aligned with the chromosome
        output_path: Path for output CSV
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved CSV file

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if len(chromosome) != len(records):
        raise ValueError(
            f"Chromosome length {len(chromosome)} does not match record count {len(records)}"
        )

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['name', 'group'])
        for group_id, record in sorted(zip(chromosome, records), key=lambda pair: pair[0]):
            writer.writerow([record.name, group_id])

    return output_path


def save_history_to_csv(
    history: Sequence[Tuple[int, float]],
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save the best score of each generation to CSV.

    Args:
        history: (generation index, best score) pairs
        output_path: Path for output CSV
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved CSV file
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['generation', 'best_score'])
        for index, score in history:
            writer.writerow([index, score])

    return output_path


def load_assignment_csv(csv_path: Union[str, Path]) -> List[Tuple[str, int]]:
    """
    Read back an assignment written by save_assignment_to_csv.

    Returns:
        List of (name, group id) pairs in file order
    """
    csv_path = Path(csv_path)

    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    with open(csv_path, 'r', newline='') as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames or not all(col in reader.fieldnames for col in ['name', 'group']):
            raise ValueError(f"Invalid CSV format in {csv_path}. Expected columns: name,group")
        return [(row['name'], int(row['group'])) for row in reader]


def validate_records(records: Sequence[Record]) -> Optional[str]:
    """
    Check loaded records for duplicate names.

    Returns:
        Warning message, or None if names are unique
    """
    seen = set()
    duplicates = []
    for record in records:
        if record.name in seen:
            duplicates.append(record.name)
        seen.add(record.name)

    if duplicates:
        return f"Duplicate names: {', '.join(sorted(set(duplicates)))}"
    return None
