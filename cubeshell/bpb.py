"""The BIOS parameter block of a FAT boot sector."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

BPB_JUMP = 0x00
BPB_OEM = 0x03
BPB_BYTES_PER_SECTOR = 0x0B
BPB_SECTORS_PER_CLUSTER = 0x0D
BPB_RESERVED_SECTORS = 0x0E
BPB_FAT_COUNT = 0x10
BPB_ROOT_ENTRIES = 0x11
BPB_TOTAL_SECTORS_16 = 0x13
BPB_MEDIA_TYPE = 0x15
BPB_FAT_SIZE_16 = 0x16
BPB_SECTORS_PER_TRACK = 0x18
BPB_HEADS = 0x1A
BPB_HIDDEN_SECTORS = 0x1C
BPB_TOTAL_SECTORS_32 = 0x20

_FORMAT = struct.Struct("<3s8sHBHBHHBHHHIIIHHIHH12s")


@dataclass
class BiosParameterBlock:
    """Geometry and layout fields of a FAT12/16/32 volume, FAT32 extension included."""

    bytes_per_sector: int = 0
    sectors_per_cluster: int = 0
    reserved_sectors: int = 0
    fat_count: int = 0
    root_entry_count: int = 0
    total_sectors_16: int = 0
    media_type: int = 0
    fat_size_16: int = 0
    sectors_per_track: int = 0
    num_heads: int = 0
    hidden_sectors: int = 0
    total_sectors_32: int = 0
    fat_size_32: int = 0
    ext_flags: int = 0
    fs_version: int = 0
    root_cluster: int = 0
    fs_info: int = 0
    backup_boot_sector: int = 0
    reserved: bytes = field(default=bytes(12))
    jump: bytes = field(default=bytes(3))
    oem_name: bytes = field(default=bytes(8))

    SIZE = _FORMAT.size

    @property
    def total_sectors(self) -> int:
        """Sector count, taken from the 32-bit field when the 16-bit one is zero."""
        return self.total_sectors_16 or self.total_sectors_32

    @property
    def fat_size(self) -> int:
        """Sectors per FAT, taken from the FAT32 field when the 16-bit one is zero."""
        return self.fat_size_16 or self.fat_size_32

    @classmethod
    def from_bytes(cls, data: bytes) -> BiosParameterBlock:
        """Decode the block from the start of a boot sector."""
        if len(data) < _FORMAT.size:
            raise ValueError(
                f"parameter block needs {_FORMAT.size} bytes, got {len(data)}"
            )
        (
            jump,
            oem_name,
            bytes_per_sector,
            sectors_per_cluster,
            reserved_sectors,
            fat_count,
            root_entry_count,
            total_sectors_16,
            media_type,
            fat_size_16,
            sectors_per_track,
            num_heads,
            hidden_sectors,
            total_sectors_32,
            fat_size_32,
            ext_flags,
            fs_version,
            root_cluster,
            fs_info,
            backup_boot_sector,
            reserved,
        ) = _FORMAT.unpack_from(data)
        return cls(
            bytes_per_sector=bytes_per_sector,
            sectors_per_cluster=sectors_per_cluster,
            reserved_sectors=reserved_sectors,
            fat_count=fat_count,
            root_entry_count=root_entry_count,
            total_sectors_16=total_sectors_16,
            media_type=media_type,
            fat_size_16=fat_size_16,
            sectors_per_track=sectors_per_track,
            num_heads=num_heads,
            hidden_sectors=hidden_sectors,
            total_sectors_32=total_sectors_32,
            fat_size_32=fat_size_32,
            ext_flags=ext_flags,
            fs_version=fs_version,
            root_cluster=root_cluster,
            fs_info=fs_info,
            backup_boot_sector=backup_boot_sector,
            reserved=reserved,
            jump=jump,
            oem_name=oem_name,
        )

    def to_bytes(self) -> bytes:
        """Encode the block as it appears at the start of a boot sector."""
        if len(self.jump) != 3 or len(self.oem_name) != 8 or len(self.reserved) != 12:
            raise ValueError("jump, oem_name and reserved must be 3, 8 and 12 bytes")
        try:
            return _FORMAT.pack(
                self.jump,
                self.oem_name,
                self.bytes_per_sector,
                self.sectors_per_cluster,
                self.reserved_sectors,
                self.fat_count,
                self.root_entry_count,
                self.total_sectors_16,
                self.media_type,
                self.fat_size_16,
                self.sectors_per_track,
                self.num_heads,
                self.hidden_sectors,
                self.total_sectors_32,
                self.fat_size_32,
                self.ext_flags,
                self.fs_version,
                self.root_cluster,
                self.fs_info,
                self.backup_boot_sector,
                self.reserved,
            )
        except struct.error as exc:
            raise ValueError(str(exc)) from exc