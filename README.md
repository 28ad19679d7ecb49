# sigtalk

sigtalk sends short text messages from one process to another on the same
machine. It uses only two POSIX signals. A message is encoded as UTF-8 and
ends with a zero byte. Each byte is sent as eight signals, most significant
bit first. `SIGUSR1` stands for a 1 bit and `SIGUSR2` for a 0 bit. The server
acknowledges every bit with `SIGUSR2`, and the client waits for that
acknowledgement before it sends the next bit. The bit that completes the
terminating zero byte is acknowledged with `SIGUSR1` instead.

The server waits for signals with `signal.sigwaitinfo`, so it runs on Linux.
The client needs only `signal.sigwait` and `signal.pthread_sigmask`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Usage

Start the server in one terminal. It prints its process id:

```
$ sigtalk-server
Server PID: 12345
```

Send a message to it from another terminal:

```
$ sigtalk-client 12345 "hello there"
```

The server writes each byte to standard output as soon as it arrives. At the
end of the message it writes a newline. Stop the server with Ctrl-C.

With `-c` or `--confirm` as the first argument, the client prints
`Message received!` when the server acknowledges the end of the message:

```
$ sigtalk-client --confirm 12345 "hello there"
Message received!
```

The process id is read like C's `atoi`: leading whitespace and an optional
sign are accepted, and reading stops at the first non-digit. If the client
gets fewer or more than two arguments after the optional flag, it prints
`Too few arguments` or `Too many arguments` and exits with status 0. A pid
that is not positive, a message that contains a zero byte, or a failure to
signal the server is reported on standard error as `error: ...` with exit
status 1.

## Library use

The wire encoding can be used without sending any signals:

```python
from sigtalk.protocol import Decoder, message_bits

decoder = Decoder()
received = bytearray()
for bit in message_bits("hi"):
    byte = decoder.feed(bit)
    if byte:
        received.append(byte)
# received == b"hi"; the final zero byte marks the end
```

`message_bits(text)` yields the bits of `text` (a string or bytes) followed by
the zero terminator, and raises `ValueError` if the text contains a zero byte.
`Decoder.feed(bit)` returns a finished byte after every eighth bit and `None`
otherwise; `Decoder.reset()` drops a partly received byte. The signal roles
are available as `BIT_ONE`, `BIT_ZERO`, `ACK_BIT` and `ACK_MESSAGE`.

To send a message from Python code, call
`sigtalk.client.send_message(pid, text, confirm=False)`.

`sigtalk.server.Server(out)` takes a binary output stream (standard output by
default). `Server.handle(signum, sender_pid)` decodes one bit signal, writes
any finished byte to the stream, acknowledges the sender and returns the
acknowledgement signal it sent. `Server.serve_forever()` waits for signals and
handles them until interrupted.

The package also has small helpers that the programs build on:

* `sigtalk.chars`: ASCII classification and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`)
* `sigtalk.numbers`: `atoi` and `itoa` for 32-bit signed integers
* `sigtalk.memory`: byte-buffer operations (`memset`, `zero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`)
* `sigtalk.textops`: C-style string operations (`strlen`, `strchr`,
  `strrchr`, `strdup`, `strjoin`, `strlcpy`, `strlcat`, `strncmp`, `strnstr`,
  `strtrim`, `substr`, `split`, `strmapi`, `striteri`)
* `sigtalk.linkedlist`: a singly linked list, `LinkedList`, built of `Node`s
* `sigtalk.output`: writing to file descriptors (`put_char`, `put_str`,
  `put_endl`, `put_nbr`)
* `sigtalk.fmt`: a minimal printf (`format_message`, `printf`) with the
  conversions `c`, `s`, `p`, `d`, `i`, `u`, `x`, `X` and `%`, raising
  `FormatError` for an unknown conversion or a missing argument

## Limitations

The server keeps a single decoder for all senders, so messages from two
clients sent at the same time are mixed together. Messages are not stored,
encrypted or checked for errors, and there is no way to reply to a client
other than the per-bit acknowledgements.