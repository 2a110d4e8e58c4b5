# tests/test_pool.py
import pytest

from blockpath.errors import OutOfCapacity
from blockpath.pool import Block, BlockPool, block_names

def test_empty_pool_names_and_home():
    pool = BlockPool.empty()
    assert pool.capacity == 26
    assert pool.home_index == 25
    assert pool.blocks[0].name == "block-1"
    assert pool.blocks[24].name == "block-25"
    assert pool.home.name == "block-home"
    assert pool.visible_indices() == []

def test_block_names_order():
    assert block_names(2) == ["block-1", "block-2", "block-home"]

def test_get_out_of_range_raises():
    pool = BlockPool.empty()
    with pytest.raises(OutOfCapacity):
        pool.get(26)
    # negative indices must not wrap onto the home block
    with pytest.raises(IndexError):
        pool.get(-1)

def test_hide_all_resets_visibility():
    pool = BlockPool.from_objects([Block("a", hidden=False), Block("home", hidden=False)])
    assert pool.visible_count() == 2
    pool.hide_all()
    assert pool.visible_count() == 0

def test_from_objects_keeps_identity():
    objs = [Block("a"), Block("b"), Block("home")]
    pool = BlockPool.from_objects(objs)
    pool.get(1).hidden = False
    assert objs[1].hidden is False
    assert pool.as_rows()[1] == (1, "b", False, 0.0, 0.0)
