import pytest
from campus_coffee.db.base import Base

def test_models_metadata_registered():
    tables = Base.metadata.tables.keys()
    assert "pos" in tables

def test_pos_name_is_unique():
    name_column = Base.metadata.tables["pos"].c.name
    assert name_column.unique
    assert not name_column.nullable
