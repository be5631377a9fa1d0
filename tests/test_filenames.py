import pytest

from taestore.common.filenames import (
    FileT,
    filename_from_tmpfile,
    is_block_file,
    is_segment_file,
    is_tblock_file,
    is_temp_file,
    make_bit_sliced_index_file_name,
    make_block_bit_sliced_index_file_name,
    make_block_file_name,
    make_data_dir,
    make_filename,
    make_lock_file_name,
    make_meta_dir,
    make_segment_file_name,
    make_spill_dir,
    make_tblock_file_name,
    make_temp_dir,
    parse_bit_sliced_index_file_name,
    parse_bit_sliced_index_file_name_to_info,
    parse_block_bit_sliced_index_file_name,
    parse_block_bit_sliced_index_file_name_to_info,
    parse_block_file_name,
    parse_segment_file_name,
    parse_tblock_file_name,
)

WORK_DIR = "/work"


def test_directories():
    assert make_spill_dir(WORK_DIR) == "/work/spill"
    assert make_meta_dir(WORK_DIR) == "/work/meta"
    assert make_data_dir(WORK_DIR) == "/work/data"
    assert make_temp_dir(WORK_DIR) == "/work/temp"


def test_file_names():
    assert make_lock_file_name(WORK_DIR, "work") == "/work/work.lock"
    blk1 = make_block_file_name(WORK_DIR, "blk-1", 0, False)
    assert blk1 == "/work/data/blk-1.blk"
    blk2 = make_block_file_name(WORK_DIR, "blk-2", 0, True)
    assert blk2 == "/work/data/blk-2.blk.tmp"
    assert is_temp_file(blk2)
    assert filename_from_tmpfile(blk2) == "/work/data/blk-2.blk"
    with pytest.raises(ValueError):
        filename_from_tmpfile(blk1)
    assert make_segment_file_name(WORK_DIR, "seg-1", 0, False) == "/work/data/seg-1.seg"
    assert make_tblock_file_name(WORK_DIR, "tblk-1", False) == "/work/data/tblk-1.tblk"


def test_parse_suffixes():
    seg1 = make_segment_file_name(WORK_DIR, "seg-1", 0, False)
    res = parse_segment_file_name(seg1)
    assert res == "/work/data/seg-1"
    assert parse_segment_file_name(res) is None

    blk1 = make_block_file_name(WORK_DIR, "blk-1", 0, False)
    res = parse_block_file_name(blk1)
    assert res == "/work/data/blk-1"
    assert parse_block_file_name(res) is None

    tblk1 = make_tblock_file_name(WORK_DIR, "tblk-1", False)
    res = parse_tblock_file_name(tblk1)
    assert res == "/work/data/tblk-1"
    assert parse_tblock_file_name(res) is None


def test_transient_node_never_tmp():
    assert make_filename(WORK_DIR, FileT.TRANSIENT_NODE, "node", False) == "/work/spill/node.nod"
    assert make_filename(WORK_DIR, FileT.TRANSIENT_NODE, "node", True) == "/work/spill/node.nod"


def test_unsupported_kind():
    with pytest.raises(ValueError):
        make_filename("", 10, "", False)


def test_kind_checks():
    assert is_tblock_file("a.tblk")
    assert not is_block_file("a.tblk")
    assert is_block_file("a.blk")
    assert is_segment_file("a.seg")
    assert not is_temp_file("a.seg")


def test_bit_sliced_index_names():
    name = make_bit_sliced_index_file_name(1, 2, 3, 4)
    assert name == "1_2_3_4.bsi"
    assert parse_bit_sliced_index_file_name(name) == "1_2_3_4"
    assert parse_bit_sliced_index_file_name("1_2_3_4") is None
    assert parse_bit_sliced_index_file_name_to_info(name) == (1, 2, 3, 4)


def test_block_bit_sliced_index_names():
    name = make_block_bit_sliced_index_file_name(1, 2, 3, 4, 5)
    assert name == "1_2_3_4_5.bbsi"
    assert parse_block_bit_sliced_index_file_name(name) == "1_2_3_4_5"
    assert parse_block_bit_sliced_index_file_name("1_2_3_4_5.bsi") is None
    assert parse_block_bit_sliced_index_file_name_to_info(name) == (1, 2, 3, 4, 5)


def test_bit_sliced_index_info_invalid():
    assert parse_bit_sliced_index_file_name_to_info("1_x_3_4.bsi") is None
    assert parse_bit_sliced_index_file_name_to_info("1_2.bsi") is None
    assert parse_block_bit_sliced_index_file_name_to_info("1_2_3_4_y.bbsi") is None