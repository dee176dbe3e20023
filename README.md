# minitalk

A pair of small programs that pass text from one process to another using
only two POSIX signals. The message is encoded as UTF-8. Each byte is sent
as eight bits, most significant bit first. `SIGUSR1` carries a `1` and
`SIGUSR2` carries a `0`. The server rebuilds each group of eight bits into
a byte and writes it to standard output.

## Installation

```
pip install .
```

The programs need a POSIX system because they use `SIGUSR1` and `SIGUSR2`.

## Usage

Start the server in one terminal. It prints its process id and then waits
for signals until it is interrupted:

```
minitalk-server
Server PID: 12345
```

Send it a message from another terminal:

```
minitalk-client 12345 "hello there"
```

The server writes `hello there`.

Client behaviour:

- The client reads the PID the same way as C `atoi`. It skips leading
  whitespace, accepts an optional sign, and stops at the first non-digit.
- The message ends at its first NUL character, if it has one.
- After each signal the client waits 80 microseconds, so that the server
  can finish with one bit before the next arrives.
- With the wrong number of arguments, the client prints `Error` and
  `Wrong number of arguments` and exits with status 0.
- If a signal cannot be delivered, for example because no process has that
  PID, it prints the error to standard error and exits with status 1.

Both programs can also be run as `python -m minitalk.server` and
`python -m minitalk.client PID MESSAGE`.

## Library use

You can use the encoding without sending any signals:

```python
from minitalk.protocol import BitDecoder, encode_bits

bits = encode_bits("hi")        # "0110100001101001"
decoder = BitDecoder()
data = bytes(b for b in (decoder.feed(bit) for bit in bits) if b is not None)
assert data == b"hi"
```

Protocol functions in `minitalk.protocol`:

- `iter_signals(bits)` turns a bit string into the matching signal numbers.
- `BitDecoder.feed_signal(signum)` takes a signal number in place of a bit.

Client, in `minitalk.client`:

- `send_message(pid, message, delay=..., kill=None)` sends a message and
  returns the number of signals sent.
- The `kill` argument lets you pass your own callable to use instead of
  `os.kill`.

Server, in `minitalk.server`:

- `Server(output=None)` holds the receiving side.
- `handle_signal` decodes one signal.
- `install` installs the handlers for both signals.
- `serve_forever` prints the PID banner and then waits for signals.
- Decoded bytes are written to `output`, or to standard output if none is
  given.

Other helpers:

- `minitalk.strings`: string functions with C-library behaviour, such as
  `atoi`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strlcpy`,
  `strlcat`, `strchr` and `strrchr`.
- `minitalk.chars`: character classification and case mapping, plus
  `memchr`, `strlen`, `strdup` and `striteri`.
- `minitalk.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd`, which write to a text stream or a file descriptor.
- `minitalk.linked`: a singly linked list, `LinkedList`, built from `Node`
  objects.
- `minitalk.printf`: `format_printf` and `printf`, which support the `c`,
  `s`, `p`, `d`, `i`, `u`, `x`, `X` and `%` conversions.

## Limitations

- The server does not acknowledge what it receives.
- If a signal is lost because signals arrive faster than the server handles
  them, the byte boundaries shift and the rest of the output is garbled.
- The server cannot tell one sender from another. Messages sent by several
  clients at once are mixed together.

## Running the tests

```
pip install .[test]
pytest
```