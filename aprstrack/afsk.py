"""Bell 202 AFSK modulator producing 8-bit samples for HDLC/AX.25 transmission."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from .fifo import Fifo

HDLC_FLAG = 0x7E
HDLC_RESET = 0x7F
AX25_ESC = 0x1B

SIN_LEN = 512
SAMPLE_RATE = 9600
DAC_SAMPLE_RATE = 9600
BITRATE = 1200
SAMPLES_PER_BIT = SAMPLE_RATE // BITRATE
BIT_STUFF_LEN = 5
MARK_FREQ = 1200
SPACE_FREQ = 2200
TX_BUFLEN = 64
DEFAULT_PREAMBLE_MS = 350
DEFAULT_TAIL_MS = 50
DAC_IDLE = 128

_SIN_TABLE = (
    128, 129, 131, 132, 134, 135, 137, 138, 140, 142, 143, 145, 146, 148, 149, 151,
    152, 154, 155, 157, 158, 160, 162, 163, 165, 166, 167, 169, 170, 172, 173, 175,
    176, 178, 179, 181, 182, 183, 185, 186, 188, 189, 190, 192, 193, 194, 196, 197,
    198, 200, 201, 202, 203, 205, 206, 207, 208, 210, 211, 212, 213, 214, 215, 217,
    218, 219, 220, 221, 222, 223, 224, 225, 226, 227, 228, 229, 230, 231, 232, 233,
    234, 234, 235, 236, 237, 238, 238, 239, 240, 241, 241, 242, 243, 243, 244, 245,
    245, 246, 246, 247, 248, 248, 249, 249, 250, 250, 250, 251, 251, 252, 252, 252,
    253, 253, 253, 253, 254, 254, 254, 254, 254, 255, 255, 255, 255, 255, 255, 255,
)


def div_round(dividend: int, divisor: int) -> int:
    """Integer division rounded to nearest, halves rounding up."""
    return (dividend + divisor // 2) // divisor


MARK_INC = div_round(SIN_LEN * MARK_FREQ, DAC_SAMPLE_RATE) & 0xFFFF
SPACE_INC = div_round(SIN_LEN * SPACE_FREQ, DAC_SAMPLE_RATE) & 0xFFFF


def sin_sample(i: int) -> int:
    """Unsigned 8-bit sine value at phase ``i`` of a ``SIN_LEN``-step cycle."""
    quarter = SIN_LEN // 4
    half = SIN_LEN // 2
    index = i % half
    if index >= quarter:
        index = half - index - 1
    sine = _SIN_TABLE[index]
    return 255 - sine if i >= half else sine


def _switch_tone(inc: int) -> int:
    return SPACE_INC if inc == MARK_INC else MARK_INC


class AfskModulator:
    """Turns queued bytes into an AFSK sample stream with preamble, tail and bit stuffing."""

    def __init__(self, preamble_ms: int = DEFAULT_PREAMBLE_MS, tail_ms: int = DEFAULT_TAIL_MS) -> None:
        if preamble_ms < 0 or tail_ms < 0:
            raise ValueError("preamble and tail durations must not be negative")
        self.preamble_ms = preamble_ms
        self.tail_ms = tail_ms
        self.preamble_length = 0
        self.tail_length = 0
        self._sample_index = 0
        self._current_byte = 0
        self._tx_bit = 0
        self._bit_stuff = False
        self._bitstuff_count = 0
        self._phase_acc = 0
        self._phase_inc = MARK_INC
        self._fifo = Fifo(TX_BUFLEN)
        self._backlog: deque[int] = deque()
        self.sending = False

    def _start(self) -> None:
        if not self.sending:
            self._phase_inc = MARK_INC
            self._phase_acc = 0
            self._bitstuff_count = 0
            self.sending = True
            self.preamble_length = div_round(self.preamble_ms * BITRATE, 8000) & 0xFFFF
        self.tail_length = div_round(self.tail_ms * BITRATE, 8000) & 0xFFFF

    def _stop(self) -> int:
        self.sending = False
        return 0

    def putchar(self, c: int) -> None:
        """Queue one byte, generating samples while the queue is full."""
        if not 0 <= c <= 0xFF:
            raise ValueError(f"byte out of range: {c}")
        self._start()
        while self._fifo.is_full():
            sample = self.next_sample()
            if self.sending:
                self._backlog.append(sample)
        self._fifo.push(c)

    def transmit(self, data: Iterable[int]) -> None:
        """Discard queued bytes, then queue every byte of ``data``."""
        self._fifo.flush()
        for byte in data:
            self.putchar(byte)

    def next_sample(self) -> int:
        """Advance the modulator by one sample period and return the sample.

        Returns 0 on the period in which the transmission ends.
        """
        if self._sample_index == 0:
            if self._tx_bit == 0:
                if self._fifo.is_empty() and self.tail_length == 0:
                    return self._stop()
                if not self._bit_stuff:
                    self._bitstuff_count = 0
                self._bit_stuff = True
                if self.preamble_length == 0:
                    if self._fifo.is_empty():
                        self.tail_length -= 1
                        self._current_byte = HDLC_FLAG
                    else:
                        self._current_byte = self._fifo.pop()
                else:
                    self.preamble_length -= 1
                    self._current_byte = HDLC_FLAG
                if self._current_byte == AX25_ESC:
                    if self._fifo.is_empty():
                        return self._stop()
                    self._current_byte = self._fifo.pop()
                elif self._current_byte in (HDLC_FLAG, HDLC_RESET):
                    self._bit_stuff = False
                self._tx_bit = 0x01

            if self._bit_stuff and self._bitstuff_count >= BIT_STUFF_LEN:
                self._bitstuff_count = 0
                self._phase_inc = _switch_tone(self._phase_inc)
            else:
                if self._current_byte & self._tx_bit:
                    self._bitstuff_count += 1
                else:
                    self._bitstuff_count = 0
                    self._phase_inc = _switch_tone(self._phase_inc)
                self._tx_bit = (self._tx_bit << 1) & 0xFF

            self._sample_index = SAMPLES_PER_BIT

        self._phase_acc = (self._phase_acc + self._phase_inc) % SIN_LEN
        self._sample_index -= 1
        return sin_sample(self._phase_acc)

    def samples(self) -> Iterator[int]:
        """Yield samples until the transmission ends."""
        while self._backlog:
            yield self._backlog.popleft()
        while self.sending:
            sample = self.next_sample()
            if self.sending:
                yield sample

    def dac_output(self) -> int:
        """Value written to the 4-bit DAC port for one sample tick."""
        if self._backlog:
            return (self._backlog.popleft() & 0xF0) | 0x08
        if self.sending:
            return (self.next_sample() & 0xF0) | 0x08
        return DAC_IDLE