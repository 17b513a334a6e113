# utils/token_reader.py
# This file is part of Seqex - Sequence Expression Matching
#
# CSV token file reader for command-line matching

import csv
from pathlib import Path
from typing import Any, Iterator, Optional
from utils.logger import get_logger


class TokenFormatError(Exception):
    """Exception raised when token files contain invalid format or data."""

    pass


_TRUE_VALUES = {"true", "1", "yes"}
_FALSE_VALUES = {"false", "0", "no"}


def read_tokens(filepath: str) -> Iterator[Any]:
    """Read tokens from a CSV token file.

    Each row holds one token. The optional ``type`` column fixes how the
    value is converted; without it, values are read as integers, then floats,
    then plain strings.

    Expected CSV format:
        token,type
        3,int
        2.5,float
        hello,str
        true,bool

    Args:
        filepath: Path to the CSV token file

    Yields:
        Parsed tokens in file order

    Raises:
        TokenFormatError: If file format is invalid or a token cannot be parsed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise TokenFormatError(f"Token file not found: {filepath}")

    logger.debug(f"Reading token file: {filepath}")

    try:
        with open(path, "r", newline="", encoding="utf-8") as file:
            reader = csv.DictReader(file)

            if "token" not in (reader.fieldnames or []):
                raise TokenFormatError("Missing required header: token")

            for row_num, row in enumerate(reader, start=2):
                try:
                    token = parse_token(row["token"], row.get("type"))
                except (TypeError, ValueError) as e:
                    raise TokenFormatError(f"Error parsing row {row_num}: {e}") from e
                logger.debug(f"Parsed token {token!r} from row {row_num}")
                yield token

    except TokenFormatError:
        raise
    except OSError as e:
        raise TokenFormatError(f"Cannot open token file: {filepath}") from e
    except csv.Error as e:
        raise TokenFormatError(f"Error reading token file: {e}") from e


def validate_token_file(filepath: str) -> int:
    """Validate token file format by parsing every token.

    Args:
        filepath: Path to the token file to validate

    Returns:
        Number of tokens in the file

    Raises:
        TokenFormatError: If validation fails
    """
    logger = get_logger()
    logger.debug(f"Validating token file: {filepath}")

    count = sum(1 for _ in read_tokens(filepath))
    logger.debug(f"Token validation successful: {count} tokens")
    return count


def parse_token(raw: Optional[str], type_name: Optional[str] = None) -> Any:
    """Convert one CSV cell into a token.

    Args:
        raw: Cell text
        type_name: Optional type column (int, float, str, bool)

    Returns:
        Converted token

    Raises:
        ValueError: If the value does not fit the requested type
    """
    if raw is None:
        raise ValueError("Missing token value")

    type_name = (type_name or "").strip().lower()

    if type_name == "str":
        return raw
    if type_name == "int":
        return int(raw.strip())
    if type_name == "float":
        return float(raw.strip())
    if type_name == "bool":
        return _parse_bool(raw)
    if type_name:
        raise ValueError(f"Unknown token type: {type_name}")

    text = raw.strip()
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            continue
    return raw


def _parse_bool(raw: str) -> bool:
    text = raw.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean token: {raw}")
