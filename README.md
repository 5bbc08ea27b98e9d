# minitalk

minitalk passes a text message from one process to another using only two
signals. Each byte goes out as eight signals, most significant bit first:
`SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit. The client waits for
the server to acknowledge every bit with `SIGUSR1` before it sends the next
one. A final all-zero byte ends the message. The server then writes what it
received to its standard output, decoded as UTF-8 (undecodable bytes are
replaced), and waits for the next message.

The programs need a POSIX system whose Python offers `signal.sigwaitinfo`,
`signal.sigwait` and `signal.pthread_sigmask`, such as Linux.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id:

```
minitalk-server
Server PID : 4242
```

In another terminal, send a message to that process id:

```
minitalk-client 4242 "Hello, world"
```

The server writes `Hello, world` and keeps waiting for further messages. No
newline is added after a message.

The client takes exactly two arguments. It exits with status 1 and prints one
of these messages when something goes wrong, and with status 0 otherwise:

- `Expected : ./client [server-PID] [message]`: wrong number of arguments
- `Bad PID`: the process id is not made only of digits, or is not a positive
  number within the 32-bit range
- `Bad signal in client`: a signal could not be delivered to the server

If the server cannot send an acknowledgement back to a client, it prints
`Bad signal in server` and exits with status 1.

## Library use

The bit protocol in `minitalk.protocol` works without any signals:

```python
from minitalk.protocol import Decoder, encode_message

decoder = Decoder()
messages = decoder.feed_all(encode_message("hi"))
print(messages)  # [b'hi']
```

- `encode_message(text)` yields the bits of `text` (a `str` is UTF-8 encoded)
  followed by the eight bits of the terminating zero byte.
- `byte_to_bits(value)` and `bits_to_byte(bits)` convert between a byte and
  its eight bits, most significant first.
- `Decoder.feed(bit)` takes one bit and returns the finished message as
  `bytes` when a terminating byte completes it, otherwise `None`.
  `Decoder.feed_all(bits)` returns the list of every message completed.

`minitalk.server.Server(output)` wraps a `Decoder`. Its `handle(signum,
sender_pid)` turns `SIGUSR1` or `SIGUSR2` into a bit, writes a finished message
to `output`, acknowledges the sender with `SIGUSR1` and returns the message
(or `None`). `serve_forever()` prints the process id and handles signals until
the process is stopped.

`minitalk.client.parse_args(argv)` checks a PID and a message and returns them;
`minitalk.client.send_message(pid, message)` sends a whole message and returns
the number of signals sent. Both raise `minitalk.errors.MinitalkError`, whose
`code` is an `ErrorCode` and whose `message` is the text listed above.

The package also holds small helpers:

- `minitalk.printf`: `format_string(fmt, *args)` and `fprint(fmt, *args)`, a
  minimal formatter that knows `%c %s %p %x %X %d %i %u %%`
- `minitalk.textutil`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`
- `minitalk.compare`: `strncmp`, `memcmp`, `strchr`, `strrchr`
- `minitalk.radix`: `to_base(number, digits)`

## Running the tests

```
pip install ".[test]"
pytest
```