"""Tests for scrollgoat._utils.dataframe module."""

import pandas as pd

from scrollgoat._utils.dataframe import hits_to_dataframe


class TestHitsToDataframe:
    """Tests for hits_to_dataframe function."""
    
    def test_converts_sources_to_rows(self):
        """Each hit's _source becomes a row."""
        hits = [
            {"_id": "1", "_index": "logs", "_score": 1.0, "_source": {"a": 1, "b": "x"}},
            {"_id": "2", "_index": "logs", "_score": 0.5, "_source": {"a": 2, "b": "y"}},
        ]
        
        df = hits_to_dataframe(hits)
        
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 2
        assert list(df.columns) == ["a", "b", "_id", "_index", "_score"]
        assert df["_id"].tolist() == ["1", "2"]
    
    def test_skips_meta_when_disabled(self):
        """include_meta=False keeps only source fields."""
        hits = [{"_id": "1", "_source": {"a": 1}}]
        
        df = hits_to_dataframe(hits, include_meta=False)
        
        assert list(df.columns) == ["a"]
    
    def test_handles_missing_source(self):
        """Hits without _source still produce a row."""
        hits = [{"_id": "1", "_index": "logs"}, {"_id": "2", "_source": None}]
        
        df = hits_to_dataframe(hits)
        
        assert len(df) == 2
        assert df["_id"].tolist() == ["1", "2"]
    
    def test_handles_empty_hits(self):
        """Returns empty DataFrame for empty input."""
        df = hits_to_dataframe([])
        
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 0
    
    def test_handles_generator_input(self):
        """Works with generator input."""
        def gen():
            yield {"_source": {"x": 1}}
            yield {"_source": {"x": 2}}
        
        df = hits_to_dataframe(gen(), include_meta=False)
        
        assert df["x"].tolist() == [1, 2]
