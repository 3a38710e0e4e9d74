import pytest

from cubeshell.fstab import (
    ERROR_DEVICE_NOT_FOUND,
    ERROR_LINE_TOO_LONG,
    ERROR_MOUNT_BASE,
    FstabEntry,
    FstabError,
    mount_all,
    mount_line,
    parse_fstab_line,
)

DEVICES = {"ata0": "disk-a", "ata1": "disk-b"}


def _resolver(device_id):
    return DEVICES.get(device_id)


class _Recorder:
    def __init__(self, results=None):
        self.calls = []
        self.results = results or {}

    def __call__(self, device, mountpoint, fs_type, permissions):
        self.calls.append((device, mountpoint, fs_type, permissions))
        return self.results.get(device, 0)


def test_parse_full_line():
    entry = parse_fstab_line("ata0 /mnt/data FAT32 15")
    assert entry == FstabEntry("ata0", "/mnt/data", "FAT32", 15)


def test_parse_collapses_repeated_spaces():
    entry = parse_fstab_line("  ata0   /   FAT32    7  ")
    assert entry == FstabEntry("ata0", "/", "FAT32", 7)


def test_parse_without_permissions_defaults_to_zero():
    assert parse_fstab_line("ata1 /boot FAT32").permissions == 0


def test_parse_permissions_stop_at_non_digit():
    assert parse_fstab_line("ata1 /boot FAT32 12rw").permissions == 12


def test_parse_incomplete_line_gives_none():
    assert parse_fstab_line("ata0 /mnt") is None
    assert parse_fstab_line("") is None


def test_parse_too_long_line():
    with pytest.raises(FstabError) as info:
        parse_fstab_line("a" * 512)
    assert info.value.code == ERROR_LINE_TOO_LONG == 103


def test_mount_line_calls_mount_with_resolved_device():
    recorder = _Recorder()
    entry = mount_line("ata1 /mnt FAT32 3", _resolver, recorder)
    assert entry == FstabEntry("ata1", "/mnt", "FAT32", 3)
    assert recorder.calls == [("disk-b", "/mnt", "FAT32", 3)]


def test_mount_line_unknown_device():
    recorder = _Recorder()
    with pytest.raises(FstabError) as info:
        mount_line("sdz /mnt FAT32", _resolver, recorder)
    assert info.value.code == ERROR_DEVICE_NOT_FOUND == 101
    assert recorder.calls == []


def test_mount_line_failure_code_is_offset():
    recorder = _Recorder({"disk-a": 4})
    with pytest.raises(FstabError) as info:
        mount_line("ata0 / FAT32", _resolver, recorder)
    assert info.value.code == ERROR_MOUNT_BASE + 4


def test_mount_line_without_entry_mounts_nothing():
    recorder = _Recorder()
    assert mount_line("   ", _resolver, recorder) is None
    assert recorder.calls == []


def test_mount_all_mounts_every_line_in_order():
    recorder = _Recorder()
    text = "ata0 / FAT32 15\n\nata1 /boot FAT32\n"
    mounted = mount_all(text, _resolver, recorder)
    assert [entry.mountpoint for entry in mounted] == ["/", "/boot"]
    assert [call[0] for call in recorder.calls] == ["disk-a", "disk-b"]


def test_mount_all_continues_and_raises_last_failure():
    recorder = _Recorder({"disk-b": 2})
    text = "missing /x FAT32\nata0 / FAT32\nata1 /boot FAT32"
    with pytest.raises(FstabError) as info:
        mount_all(text, _resolver, recorder)
    assert info.value.code == ERROR_MOUNT_BASE + 2
    assert info.value.mounted == [FstabEntry("ata0", "/", "FAT32", 0)]
    assert len(recorder.calls) == 2


def test_mount_all_empty_text():
    recorder = _Recorder()
    assert mount_all("", _resolver, recorder) == []
    assert recorder.calls == []