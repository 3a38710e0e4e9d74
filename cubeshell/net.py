"""Network byte order helpers, IPv4 addresses and ARP packets."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

NET_PACKET_SIZE_MAX = 40860

ETHERTYPE_ARP = 0x0806
ETHERTYPE_IPV4 = 0x0800
HTYPE_ETHERNET = 1
MAC_LENGTH = 6
IPV4_LENGTH = 4


class ArpOpcode(IntEnum):
    """ARP operation codes."""

    REQUEST = 1
    REPLY = 2


def ntohs(value: int) -> int:
    """Swap the two bytes of a 16-bit value."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"not a 16-bit value: {value}")
    return ((value << 8) | (value >> 8)) & 0xFFFF


def htons(value: int) -> int:
    """Swap the two bytes of a 16-bit value (same as :func:`ntohs`)."""
    return ntohs(value)


@dataclass(frozen=True)
class IPAddress:
    """An IPv4 address made of four octets."""

    a: int
    b: int
    c: int
    d: int

    def __post_init__(self) -> None:
        for octet in self.octets:
            if not 0 <= octet <= 0xFF:
                raise ValueError(f"octet out of range: {octet}")

    @property
    def octets(self) -> tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets)

    def __bytes__(self) -> bytes:
        return bytes(self.octets)

    @classmethod
    def parse(cls, text: str) -> IPAddress:
        """Parse dotted-quad notation."""
        parts = text.split(".")
        if len(parts) != IPV4_LENGTH:
            raise ValueError(f"not an IPv4 address: {text!r}")
        octets = []
        for part in parts:
            if not part or not all("0" <= ch <= "9" for ch in part):
                raise ValueError(f"not an IPv4 address: {text!r}")
            octets.append(int(part))
        return cls(*octets)


_ARP_FORMAT = struct.Struct("!6s6sHHHBBH6s4s6s4s")


@dataclass
class ArpPacket:
    """An Ethernet frame carrying an ARP message."""

    dst_mac: bytes
    src_mac: bytes
    opcode: int
    sender_mac: bytes
    sender_ip: IPAddress
    target_mac: bytes
    target_ip: IPAddress
    ether_type: int = ETHERTYPE_ARP
    htype: int = HTYPE_ETHERNET
    ptype: int = ETHERTYPE_IPV4
    hlen: int = MAC_LENGTH
    plen: int = IPV4_LENGTH

    SIZE = _ARP_FORMAT.size

    def __post_init__(self) -> None:
        for name in ("dst_mac", "src_mac", "sender_mac", "target_mac"):
            mac = bytes(getattr(self, name))
            if len(mac) != MAC_LENGTH:
                raise ValueError(f"{name} must be {MAC_LENGTH} bytes")
            setattr(self, name, mac)

    def to_bytes(self) -> bytes:
        """Encode the packet in network byte order."""
        try:
            return _ARP_FORMAT.pack(
                self.dst_mac,
                self.src_mac,
                self.ether_type,
                self.htype,
                self.ptype,
                self.hlen,
                self.plen,
                self.opcode,
                self.sender_mac,
                bytes(self.sender_ip),
                self.target_mac,
                bytes(self.target_ip),
            )
        except struct.error as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> ArpPacket:
        """Decode a packet; extra trailing bytes are ignored."""
        if len(data) < _ARP_FORMAT.size:
            raise ValueError(
                f"ARP packet needs {_ARP_FORMAT.size} bytes, got {len(data)}"
            )
        (
            dst_mac,
            src_mac,
            ether_type,
            htype,
            ptype,
            hlen,
            plen,
            opcode,
            sender_mac,
            sender_ip,
            target_mac,
            target_ip,
        ) = _ARP_FORMAT.unpack_from(data)
        return cls(
            dst_mac=dst_mac,
            src_mac=src_mac,
            opcode=opcode,
            sender_mac=sender_mac,
            sender_ip=IPAddress(*sender_ip),
            target_mac=target_mac,
            target_ip=IPAddress(*target_ip),
            ether_type=ether_type,
            htype=htype,
            ptype=ptype,
            hlen=hlen,
            plen=plen,
        )