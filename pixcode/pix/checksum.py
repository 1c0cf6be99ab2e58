"""CRC-16/CCITT-FALSE used as the BR Code integrity trailer.

Polynomial 0x1021, initial value 0xFFFF, no input/output reflection and no
final XOR. Check value for b"123456789" is 0x29B1.
"""

from __future__ import annotations

POLYNOMIAL = 0x1021
INITIAL_VALUE = 0xFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ POLYNOMIAL
            else:
                crc <<= 1
            crc &= 0xFFFF
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def crc16_ccitt(data: bytes | str) -> int:
    """Compute the CRC over ``data``; strings are encoded as ASCII."""
    if isinstance(data, str):
        data = data.encode("ascii")

    crc = INITIAL_VALUE
    for byte in data:
        crc = ((crc << 8) & 0xFFFF) ^ _TABLE[(crc >> 8) ^ byte]
    return crc


def checksum(data: bytes | str) -> str:
    """Return the CRC as 4 uppercase hex digits."""
    return f"{crc16_ccitt(data):04X}"
