"""Table-driven CRC-32 (IEEE 802.3, reflected) string hashing."""

from __future__ import annotations

_POLYNOMIAL = 0xEDB88320
_MASK = 0xFFFFFFFF


def _build_table() -> tuple[int, ...]:
    def entry(index: int) -> int:
        value = index
        for _ in range(8):
            value = (value >> 1) ^ _POLYNOMIAL if value & 1 else value >> 1
        return value

    return tuple(entry(index) for index in range(256))


CRC32_TABLE: tuple[int, ...] = _build_table()


def crc32(data: str | bytes | bytearray, prev_crc: int = _MASK) -> int:
    """Return the CRC-32 of ``data``.

    ``prev_crc`` is the running register value to start from; to continue a
    previous hash ``h``, pass ``h ^ 0xFFFFFFFF``. Text is hashed as UTF-8.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    crc = prev_crc & _MASK
    for byte in data:
        crc = (crc >> 8) ^ CRC32_TABLE[(crc ^ byte) & 0xFF]
    return crc ^ _MASK