"""DataFrame conversion utilities."""

from typing import Iterable

import pandas as pd

META_FIELDS = ("_id", "_index", "_score")


def hits_to_dataframe(
    hits: Iterable[dict],
    include_meta: bool = True,
) -> pd.DataFrame:
    """
    Convert iterable of search hits to pandas DataFrame.
    
    Each row is the hit's _source document. Hits without a _source
    (e.g. when _source is disabled) still produce a row.
    
    Args:
        hits: Iterable of hit dictionaries (e.g., from ScrollCursor.iter_hits)
        include_meta: If True, add _id, _index and _score columns
        
    Returns:
        pandas DataFrame with one row per hit
        
    Example:
        hits = [{"_id": "1", "_index": "logs", "_source": {"msg": "hello"}}]
        df = hits_to_dataframe(hits)
        print(df.columns)  # ['msg', '_id', '_index', '_score']
    """
    rows = []
    for hit in hits:
        row = dict(hit.get("_source") or {})
        if include_meta:
            for key in META_FIELDS:
                row[key] = hit.get(key)
        rows.append(row)
    
    return pd.DataFrame(rows)
