# owstat/scraper/correlate.py
"""
Positional correlation of independently queried columns.

The career page exposes related values (a label and its value, a hero's
name, portrait and score) as separate node lists that only line up by
index. ``correlate`` is where that assumption is checked: columns of
unequal length raise CorrelationMismatch instead of being truncated.
"""

from typing import Dict, List, Sequence, Tuple

from owstat.errors import CorrelationMismatch


def correlate(*columns: Sequence[str], context: str = "") -> List[Tuple[str, ...]]:
    """
    Zip equally long columns into rows.

    Args:
        *columns: Positionally parallel sequences
        context: Description of the queried section, included in errors

    Returns:
        One tuple per position; row[i][j] == columns[j][i]

    Raises:
        CorrelationMismatch: If the columns differ in length
    """
    if not columns:
        return []
    lengths = [len(column) for column in columns]
    if len(set(lengths)) > 1:
        raise CorrelationMismatch(lengths, context)
    return list(zip(*columns))


def correlate_mapping(keys: Sequence[str], values: Sequence[str], context: str = "") -> Dict[str, str]:
    """Zip a key column and a value column into an ordered dict."""
    return {key: value for key, value in correlate(keys, values, context=context)}
