# connectorcore

Building blocks for applications that find each other and exchange messages
on the local machine.

## What it provides

- `connectorcore.uuid_utils`: `Uuid`, a frozen, ordered identifier of four
  unsigned 32-bit elements (a bad element count or value raises `ValueError`),
  and `compare_uuid(first, second)`, which returns -1, 0 or 1.
- `connectorcore.message`: `Message` (`context`, `payload`, `header`),
  `MessageHeader` (`description`, `message_id`, `message_length`, and the
  `is_message` property) and the `HeaderFlag` bits. `build_message(context,
  message_type, payload)` makes a message whose header carries the type, the
  payload length in UTF-8 bytes and the `R1 | IDENTIFIER` flags.
  `Message.clear()` drops the payload and resets the fields.
- `connectorcore.uint_queue`: `UintQueue(size)`, a bounded, thread-safe FIFO
  of unsigned 32-bit integers. Its `capacity` is at least `size`. `push`
  raises `QueueFullError` when no slot is free, `pop` raises
  `QueueEmptyError` when it is empty, and `len()` gives the number held.
- `connectorcore.pathutils`: `path_join(parts)` joins one or more parts with
  the platform separator; an empty list raises `ValueError`.
- `connectorcore.fileutils`: `list_directory(path, filter_op, data)` lists
  names accepted by a filter (by default `default_filter`, which drops
  hidden names); `is_directory`, `is_file` and `is_unix_socket` test a path;
  `make_directory` (created with permissions open to everyone),
  `remove_directory` and `remove_file` raise `OSError` on failure.
- `connectorcore.connection_directory`: the well-known directories where
  open endpoints announce themselves. Under a base directory (by default
  `/tmp` on POSIX and `%APPDATA%` on Windows for TCP) they are
  `substanceconnectoropentcp` and `substanceconnectoropenunix`.
  `default_tcp_directory`, `default_unix_directory`, `tcp_port_path`,
  `ensure_default_tcp_directory` and `ensure_default_unix_directory` locate
  and create them; `commit_open_tcp_port` writes an empty file named after
  a port and `remove_open_tcp_port` deletes it (raising `FileNotFoundError`
  if it is not there).
- `connectorcore.open_connection`: `TcpContext` holds a port and a socket
  and works as a context manager. `open_tcp(context, base)` binds and
  listens on `127.0.0.1` (port 0 lets the system choose; the context is
  updated) and records the port in the TCP directory under `base`.
  `connect_tcp(context)` connects to a port on the loopback address. Any
  failure raises `OpenFailError`, a subclass of `OSError`.

## Example

```python
from connectorcore.message import build_message
from connectorcore.uint_queue import UintQueue, QueueEmptyError
from connectorcore.uuid_utils import Uuid

message = build_message(0, Uuid((1, 2, 3, 4)), "hello")
assert message.header.message_length == 5
assert message.header.is_message

queue = UintQueue(4)
queue.push(7)
assert queue.pop() == 7
try:
    queue.pop()
except QueueEmptyError:
    pass
```

Opening a listening endpoint and connecting to it:

```python
import tempfile

from connectorcore.open_connection import TcpContext, connect_tcp, open_tcp

base = tempfile.mkdtemp()
with open_tcp(TcpContext(port=0), base=base) as server:
    with connect_tcp(TcpContext(port=server.port)) as client:
        print("connected to", client.port)
```

## What it does not do

The package gives the pieces, not a running connector. It has no threads
that read from or write to sockets, no inbound or outbound message queues,
and no encoding of a `Message` into bytes on the wire. Endpoints recorded in
the connection directories are not discovered or connected to
automatically, and Unix domain sockets are only located and tested for,
never opened.

## Running the tests

```
pip install -e ".[test]"
pytest
```