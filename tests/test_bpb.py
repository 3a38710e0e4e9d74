import struct

import pytest

from cubeshell.bpb import (
    BPB_BYTES_PER_SECTOR,
    BPB_FAT_COUNT,
    BPB_HEADS,
    BPB_HIDDEN_SECTORS,
    BPB_MEDIA_TYPE,
    BPB_OEM,
    BPB_ROOT_ENTRIES,
    BPB_SECTORS_PER_CLUSTER,
    BPB_TOTAL_SECTORS_32,
    BiosParameterBlock,
)


def _boot_sector():
    sector = bytearray(512)
    sector[0:3] = b"\xeb\x58\x90"
    sector[BPB_OEM:BPB_OEM + 8] = b"MKFS.FAT"
    struct.pack_into("<H", sector, BPB_BYTES_PER_SECTOR, 512)
    sector[BPB_SECTORS_PER_CLUSTER] = 8
    sector[BPB_FAT_COUNT] = 2
    struct.pack_into("<H", sector, BPB_ROOT_ENTRIES, 0)
    sector[BPB_MEDIA_TYPE] = 0xF8
    struct.pack_into("<H", sector, BPB_HEADS, 16)
    struct.pack_into("<I", sector, BPB_HIDDEN_SECTORS, 2048)
    struct.pack_into("<I", sector, BPB_TOTAL_SECTORS_32, 1048576)
    struct.pack_into("<I", sector, 0x24, 1024)
    struct.pack_into("<I", sector, 0x2C, 2)
    sector[510:512] = b"\x55\xaa"
    return bytes(sector)


def test_fields_read_from_documented_offsets():
    bpb = BiosParameterBlock.from_bytes(_boot_sector())
    assert bpb.jump == b"\xeb\x58\x90"
    assert bpb.oem_name == b"MKFS.FAT"
    assert bpb.bytes_per_sector == 512
    assert bpb.sectors_per_cluster == 8
    assert bpb.fat_count == 2
    assert bpb.media_type == 0xF8
    assert bpb.num_heads == 16
    assert bpb.hidden_sectors == 2048
    assert bpb.total_sectors_32 == 1048576
    assert bpb.fat_size_32 == 1024
    assert bpb.root_cluster == 2


def test_derived_sizes_fall_back_to_fat32_fields():
    bpb = BiosParameterBlock.from_bytes(_boot_sector())
    assert bpb.total_sectors == bpb.total_sectors_32
    assert bpb.fat_size == bpb.fat_size_32


def test_derived_sizes_prefer_16_bit_fields():
    bpb = BiosParameterBlock(total_sectors_16=2880, total_sectors_32=9, fat_size_16=9, fat_size_32=5)
    assert bpb.total_sectors == 2880
    assert bpb.fat_size == 9


def test_block_is_64_bytes():
    assert BiosParameterBlock.SIZE == 64
    assert len(BiosParameterBlock().to_bytes()) == BiosParameterBlock.SIZE


def test_round_trip():
    original = BiosParameterBlock(
        bytes_per_sector=4096,
        sectors_per_cluster=1,
        reserved_sectors=32,
        fat_count=2,
        root_entry_count=224,
        total_sectors_16=2880,
        media_type=0xF0,
        fat_size_16=9,
        sectors_per_track=18,
        num_heads=2,
        hidden_sectors=7,
        total_sectors_32=0,
        fat_size_32=0,
        ext_flags=1,
        fs_version=0,
        root_cluster=2,
        fs_info=1,
        backup_boot_sector=6,
        reserved=b"r" * 12,
        jump=b"abc",
        oem_name=b"EXAMPLE1",
    )
    assert BiosParameterBlock.from_bytes(original.to_bytes()) == original


def test_encoding_places_fields_at_offsets():
    raw = BiosParameterBlock(bytes_per_sector=512, fat_count=2, hidden_sectors=63).to_bytes()
    assert struct.unpack_from("<H", raw, BPB_BYTES_PER_SECTOR)[0] == 512
    assert raw[BPB_FAT_COUNT] == 2
    assert struct.unpack_from("<I", raw, BPB_HIDDEN_SECTORS)[0] == 63


def test_short_data_rejected():
    with pytest.raises(ValueError):
        BiosParameterBlock.from_bytes(bytes(63))


def test_out_of_range_field_rejected():
    with pytest.raises(ValueError):
        BiosParameterBlock(sectors_per_cluster=256).to_bytes()


def test_wrong_oem_length_rejected():
    with pytest.raises(ValueError):
        BiosParameterBlock(oem_name=b"short").to_bytes()