# vnckit

Small, dependency-free building blocks for writing VNC (RFB) clients in Python.

## Installation

```
pip install vnckit
```

## Modules

### `vnckit.d3des` — DES as used by VNC authentication

VNC password authentication encrypts the server's 16-byte challenge with DES,
using the password (padded to 8 bytes) as the key, with each key byte read
least-significant bit first.

- `deskey(key, mode)` builds the 32-word key schedule for an 8-byte key.
  `mode` is `Mode.ENCRYPT` or `Mode.DECRYPT`.
- `des(block, schedule)` encrypts or decrypts one 8-byte block with such a
  schedule.
- `DesCipher(key, mode=Mode.ENCRYPT)` keeps a schedule; its `crypt(data)`
  processes any data whose length is a positive multiple of 8, block by block.

Keys, blocks and data of the wrong length raise `ValueError`.

```python
from vnckit.d3des import DesCipher, Mode

cipher = DesCipher(b"password", Mode.ENCRYPT)
response = cipher.crypt(challenge)  # 16 bytes in, 16 bytes out
```

### `vnckit.dh` — Diffie-Hellman key agreement

`DiffieHellman(gen, mod)` holds the generator and modulus sent by the server.
`gen_secret()` picks a random non-zero 24-bit private value and returns the
public value `gen ** priv % mod`; `gen_key(inter)` returns the shared key
`inter ** priv % mod`, and raises `RuntimeError` if `gen_secret()` has not
been called yet. The last values are kept as `priv`, `pub` and `key`.

`mpi_to_bytes(value, size)` encodes a non-negative integer big-endian,
right-aligned and zero-padded in `size` bytes (raising `ValueError` if it does
not fit); `bytes_to_mpi(value)` decodes big-endian unsigned bytes.

```python
from vnckit.dh import DiffieHellman, mpi_to_bytes, bytes_to_mpi

dh = DiffieHellman(gen, mod)
public = mpi_to_bytes(dh.gen_secret(), 8)
shared = dh.gen_key(bytes_to_mpi(server_public))
```

### `vnckit.audio` — audio formats and the playback interface

- `AudioFormatType` lists the raw sample encodings: `RAW_U8`, `RAW_S8`,
  `RAW_U16`, `RAW_S16`, `RAW_U32`, `RAW_S32`.
- `AudioFormat(format=0, nchannels=0, frequency=0)` is a dataclass describing
  a stream. `format` and `nchannels` must fit in 8 unsigned bits and
  `frequency` in 32, otherwise `ValueError` is raised. `copy()` returns an
  independent copy.
- `Audio` is an abstract base class for playback backends, with the abstract
  methods `playback_start(format)`, `playback_stop()` and
  `playback_data(sample)`, each returning a `bool`.

### `vnckit.coroutine` — cooperative coroutines

`Coroutine(entry=None, stack_size=0)` runs `entry(arg)` on a thread of its own
once it is first switched to; only one coroutine runs at a time. The thread
that first uses the module acts as the leader coroutine. `stack_size` is
recorded on the object (a value of 0 becomes 16 MiB) but does not change the
thread's stack.

- `yieldto(arg)` switches into the coroutine, handing it `arg`. It returns
  what the coroutine passes to `coroutine_yield`, or the return value of
  `entry` once that finishes; an exception raised by `entry` is raised from
  `yieldto`.
- `coroutine_yield(arg)` hands `arg` back to whoever switched in and returns
  the value passed on the next `yieldto`.
- `coroutine_self()` returns the coroutine running now.
- `release()` frees a coroutine, unwinding it if it is suspended mid-way. A
  coroutine is also a context manager that releases itself on exit.

Misuse — re-entering a running coroutine, switching to the leader or to an
exited coroutine, yielding with no caller, releasing a running coroutine —
raises `CoroutineError`.

```python
from vnckit.coroutine import Coroutine, coroutine_yield

def counter(start):
    n = start
    while True:
        n = coroutine_yield(n) + 1

with Coroutine(counter) as co:
    print(co.yieldto(1))  # 1
    print(co.yieldto(5))  # 6
```

## What the package does not do

vnckit holds only the pieces above. It does not open connections or speak
the RFB protocol, has no framebuffer or display widget, ships no concrete
`Audio` backend that plays sound, and installs no command-line viewer.