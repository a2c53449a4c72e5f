"""APRS position packets, AX.25 UI framing, CRC-CCITT and Bell 202 AFSK modulation."""

__version__ = "0.1.0"
__all__ = ["afsk", "ax25", "crc", "fifo", "tracker"]