# aprstrack

Build APRS position reports, wrap them in AX.25 UI frames and turn them
into a stream of 1200 baud Bell 202 AFSK samples (unsigned 8-bit,
9600 samples per second), ready to be written to a DAC or a sound file.

The package has no runtime dependencies.

## Installation

```
pip install aprstrack
```

## Modules

### `aprstrack.crc`

The reflected CRC-CCITT (polynomial 0x8408) used for the AX.25 frame
check sequence.

- `update_crc_ccit(c, prev_crc)` folds one byte into a running CRC.
- `crc_ccit(data, init=0xFFFF)` runs the CRC over every byte of `data`.
- `CRC_CCIT_INIT_VAL` is the starting value, `0xFFFF`.

### `aprstrack.fifo`

`Fifo(size)` is a ring buffer of bytes over `size` slots. One slot is
always kept free, so it holds at most `size - 1` bytes (`capacity`).

- `push(c)` appends a byte; it raises `IndexError` when the buffer is
  full and `ValueError` for a value outside 0–255.
- `pop()` removes and returns the oldest byte; it raises `IndexError`
  when the buffer is empty.
- `is_empty()`, `is_full()`, `flush()` (discard everything) and `len()`.

### `aprstrack.afsk`

`AfskModulator(preamble_ms=350, tail_ms=50)` is the HDLC bit stuffer and
AFSK modulator. Mark is 1200 Hz, space 2200 Hz; a zero bit switches tone,
a one bit keeps it, and after five ones in a row a stuffed bit is sent.
Before the data it sends HDLC flags (`0x7E`) for the preamble and after
it flags for the tail; the lengths are given in milliseconds and turned
into a number of flag bytes when a transmission starts. Negative
durations raise `ValueError`.

- `putchar(c)` queues one byte and starts a transmission if none is
  running. The queue holds 63 bytes; while it is full, samples are
  generated and kept so that nothing is lost.
- `transmit(data)` discards whatever is queued, then queues every byte.
- `next_sample()` advances by one sample period and returns the sample;
  it returns 0 on the period in which the transmission ends, after which
  `sending` is `False`.
- `samples()` yields every remaining sample of the transmission.
- `dac_output()` returns the value for a 4-bit DAC port for one tick:
  the top four bits of the sample with bit 3 set, or 128 when idle.

A byte `0x1B` (escape) in the queue makes the following byte go out as
plain data, without resetting the bit-stuffing count; `0x7E` and `0x7F`
sent unescaped turn bit stuffing off for that byte.

Also exported: `sin_sample(i)`, `div_round(dividend, divisor)` and the
constants `HDLC_FLAG`, `HDLC_RESET`, `AX25_ESC`, `MARK_INC`, `SPACE_INC`,
`SAMPLES_PER_BIT` and friends.

### `aprstrack.ax25`

- `Callsign(call, ssid=0)` is a frozen dataclass.
- `AX25Encoder(sink)` writes frames byte by byte into `sink`, any callable
  taking one byte (for example `AfskModulator.putchar` or
  `bytearray.append`).
  - `send_raw(data)` sends a flag, `data`, the FCS and a flag.
  - `send_via(path, data)` sends a UI frame: each callsign of `path`
    (destination, source, repeaters) upper-cased, padded to six
    characters and shifted left one bit, then its SSID byte, with the
    last address marked; then control `0x03`, PID `0xF0`, the payload and
    the FCS.
  - `send(dst, src, data)` is `send_via((dst, src), data)`.

  Every byte between the flags that equals `0x7E`, `0x7F` or `0x1B` is
  preceded by a `0x1B` escape byte, which the modulator consumes. The
  FCS is the complemented CRC, low byte first; `crc_out` holds the
  running CRC of the last frame.

### `aprstrack.tracker`

`Tracker(modem=None)` keeps the station settings and sends frames through
`modem` (a new `AfskModulator` when none is given; anything with a
`putchar` method will do).

- `set_callsign(call, ssid)`, `set_destination(call, ssid)`,
  `set_path1(call, ssid)`, `set_path2(call, ssid)` — callsigns are cut to
  six characters. Defaults: `NOCALL-0`, `HYMTR-0`, `WIDE1-1`, `WIDE2-2`.
- `use_alternate_symbol_table(use)` switches between `/` and `\`;
  `symbol` is a single character, default `>`.
- `latitude` (8 characters) and `longitude` (9 characters) are cut to
  length and NUL-padded in the packet.
- `preamble` and `tail` read and set the modem's durations in ms.
- `power`, `height`, `gain`, `directivity` (0–9), `speed` (0–999),
  `course` and `direction` (0–359). Values outside the range are
  ignored and the old value kept.
- `location_payload(data=b"", packet_type=" ")` returns the APRS
  information field: `=`, latitude, symbol table, longitude, symbol, an
  optional 7-byte extension, then `data`. `packet_type` is `" "` for no
  extension or one of `"p"`, `"c"`, `"d"`; any other raises `ValueError`.
  All three of `"p"`, `"c"` and `"d"` end up carrying the
  direction/speed extension, because each later extension overwrites the
  earlier one in the same slot. The direction and speed fields hold the
  first two digits of the zero-padded three-digit value followed by a NUL
  byte, and three NUL bytes when never set.
- `send_packet(data)` sends `data` in a UI frame along destination,
  source, path 1 and path 2.
- `send_location(data=b"", packet_type=" ")` sends
  `location_payload(data, packet_type)`.

## Example

```python
from aprstrack.afsk import AfskModulator
from aprstrack.tracker import Tracker

modem = AfskModulator(preamble_ms=350, tail_ms=50)
tracker = Tracker(modem)
tracker.set_callsign("N0CALL", 9)
tracker.set_destination("APRS", 0)
tracker.latitude = "5130.00N"
tracker.longitude = "00007.00W"
tracker.symbol = ">"

tracker.send_location(b"Hello", " ")

audio = bytes(modem.samples())   # unsigned 8-bit PCM at 9600 Hz
```

## What it does not do

There is no receiver: the package does not demodulate audio or decode
AX.25 frames. It writes no audio device or sound file itself and has no
command-line program; the caller takes the samples and sends them on.

## Running the tests

```
pip install -e .[test]
pytest
```