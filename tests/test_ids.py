import pytest

from taestore.common.ids import (
    ID,
    TRANSIENT_TABLE_START_ID,
    ParseNameError,
    new_transient_id,
    parse_blk_name_to_id,
    parse_segment_name_to_id,
    parse_tblk_name,
)


def test_transient_id():
    tid = new_transient_id()
    assert tid.table_id == TRANSIENT_TABLE_START_ID
    assert tid.is_transient()
    new_tid, tag = parse_tblk_name(f"{TRANSIENT_TABLE_START_ID}_0_0_0")
    assert tag == "0"
    assert tid.is_same_block(new_tid)
    assert tid.part_id == new_tid.part_id
    assert tid.next_part().part_id == 0
    assert tid.part_id == 1


def test_segment_ids():
    sid0 = ID(table_id=0, segment_id=0)
    sid1 = ID(table_id=0, segment_id=1)
    sid00 = ID(table_id=0, segment_id=0)
    assert not sid0.is_transient()
    assert str(sid0) == "RelationName<0:0-0-0-0-0>"
    assert not sid0.is_same_segment(sid1)
    assert sid0.is_same_segment(sid00)
    sid00.next_segment()
    assert sid00.next_segment().segment_id == 1
    assert sid00.segment_id == 2


def test_block_id_sequence():
    bid0 = ID()
    bid1 = ID(block_id=1)
    assert not bid0.is_same_block(bid1)
    assert bid0.table_string() == "RelationName<0>"
    assert bid0.segment_string() == "RelationName<0:0-0>"
    assert bid0.block_string() == "RelationName<0:0-0-0>"
    assert bid0.as_segment_id().segment_id == 0
    assert bid0.as_block_id().block_id == 0
    assert bid0.next_block().block_id == 0
    bid0.next()
    assert bid0.next().table_id == 1
    bid0.next_iter()
    assert bid0.next_iter().iter == 1
    assert bid0.iter == 0
    assert bid0.to_part_file_name() == "0_2_0_1_0"
    assert bid0.to_part_file_path() == "2/0/1/0/0.0"
    assert bid0.to_block_file_name() == "2_0_1"
    assert bid0.to_block_file_path() == "2/0/1/"
    assert bid0.to_segment_file_name() == "2_0"
    assert bid0.to_segment_file_path() == "2/0/"
    assert bid0.to_tblock_file_name("x") == "2_0_1_x"


def test_as_ids_drop_lower_fields():
    full = ID(table_id=3, segment_id=4, block_id=5, part_id=6, idx=7, iter=8)
    assert full.as_block_id() == ID(table_id=3, segment_id=4, block_id=5)
    assert full.as_segment_id() == ID(table_id=3, segment_id=4)


@pytest.mark.parametrize("name", ["0_0_0", "a_0_0_0", "0_a_0_0", "0_0_a_0"])
def test_parse_tblk_name_errors(name):
    with pytest.raises(ParseNameError):
        parse_tblk_name(name)


def test_parse_tblk_name_tag_is_free_text():
    parsed, tag = parse_tblk_name("1_2_3_a")
    assert parsed == ID(table_id=1, segment_id=2, block_id=3)
    assert tag == "a"


@pytest.mark.parametrize("name", ["0_0", "a_0_0", "0_a_0", "0_0_a"])
def test_parse_blk_name_errors(name):
    with pytest.raises(ParseNameError):
        parse_blk_name_to_id(name)


def test_parse_blk_name():
    assert parse_blk_name_to_id("0_0_0") == ID()
    assert parse_blk_name_to_id("7_8_9") == ID(table_id=7, segment_id=8, block_id=9)


@pytest.mark.parametrize("name", ["0", "a_0", "0_a"])
def test_parse_segment_name_errors(name):
    with pytest.raises(ParseNameError):
        parse_segment_name_to_id(name)


def test_parse_segment_name():
    assert parse_segment_name_to_id("0_0") == ID()
    assert parse_segment_name_to_id("4_5") == ID(table_id=4, segment_id=5)


def test_parse_rejects_out_of_range():
    with pytest.raises(ParseNameError):
        parse_segment_name_to_id("18446744073709551616_0")