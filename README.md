# asiokit

This package provides two building blocks for applications:

- **UUIDs** (`asiokit.uuids`, `asiokit.uuid_tools`) parse, format, inspect and
  generate RFC 4122 identifiers. They cover random (version 4) identifiers and
  name-based (version 5, SHA-1) identifiers.
- **Logging** (`asiokit.logconfig`, `asiokit.logger`) gives one process-wide
  logger. You configure it from a `LoggerConfig` or from a YAML file. It writes
  to the console, to a file, or to both.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## UUIDs

### The value type

`asiokit.uuids.Uuid` is an immutable 16-byte value. The default `Uuid()` is the
nil UUID. Uuid values can be compared, ordered and hashed.

```python
from asiokit.uuids import Uuid, UuidVersion, UuidVariant, NAMESPACE_DNS

u = Uuid.from_string("{6ba7b810-9dad-11d1-80b4-00c04fd430c8}")
print(u)                  # 6ba7b810-9dad-11d1-80b4-00c04fd430c8
print(u.version())        # UuidVersion.TIME_BASED
print(u.variant())        # UuidVariant.RFC
print(u == NAMESPACE_DNS) # True
print(u.as_bytes())       # the 16 raw bytes

print(Uuid.from_string("not-a-uuid"))      # None
print(Uuid.is_valid_uuid("not-a-uuid"))    # False
```

Parsing follows these rules:

- It needs exactly 32 hex digits, in upper or lower case.
- Hyphens may appear anywhere in the text and are ignored.
- A single pair of surrounding braces is allowed.
- If the text does not parse, `from_string` returns `None` and does not raise an exception.

`str()` always gives the lower-case 8-4-4-4-12 form.

If the version nibble does not match a known version, `version()` returns `UuidVersion.NONE`.

The RFC 4122 namespaces are available as `NAMESPACE_DNS`, `NAMESPACE_URL`,
`NAMESPACE_OID` and `NAMESPACE_X500`.

### Generators and helpers

```python
from asiokit import uuid_tools

uuid_tools.new_uuid()              # random v4 as text, e.g. "3f2a...-4...-..."
uuid_tools.new_uuid_compact()      # 32 hex digits, no hyphens
uuid_tools.generate_secure_random()  # v4 from the system's secure random source
uuid_tools.generate_random()         # v4 from a per-thread Mersenne Twister
uuid_tools.generate_system()         # v4 from the standard library generator

# Deterministic: the same namespace and name always give the same v5 UUID
d = uuid_tools.generate_from_domain("example.com")
assert d == uuid_tools.generate_from_domain("example.com")
uuid_tools.generate_from_url("https://example.com/path")
uuid_tools.generate_name_based(uuid_tools.from_string(uuid_tools.NS_OID), "1.2.3")

uuid_tools.compare(uuid_tools.nil(), d)   # -1, 0 or 1
uuid_tools.get_version(d)                 # 5
uuid_tools.is_uuid("6ba7b810-9dad-11d1-80b4-00c04fd430c8")  # True
```

Two lower-level builders are also available:

- `random_uuid(rng)` builds a v4 UUID from any object that has a `getrandbits` method, such as a seeded `random.Random`. This makes its output reproducible.
- `name_based_uuid(namespace, name)` takes a `str`, which it encodes as UTF-8, or `bytes`.

`generate_time_based()` does not produce version 1 UUIDs. It returns the same
result as `generate_system()`.

## Logging

```python
from asiokit.logconfig import LoggerConfig, LogLevel
from asiokit.logger import create_logger, log_info, log_debug

logger = create_logger()          # the same instance every time
logger.init(LoggerConfig(log_file="app.log", log_level=LogLevel.DEBUG))

log_info("this is a {} log message", "info")
log_debug("value = {}", 42)
logger.log(LogLevel.WARN, "disk at {}%", 91)

logger.shutdown()
```

Messages use `str.format` placeholders. The message is formatted only when
arguments are given. A message below the configured level is dropped.

The levels, from least to most severe, are:

`TRACE`, `DEBUG`, `INFO`, `WARN`, `ERR`, `FATAL`

There are module-level functions for each level: `log_trace`, `log_debug`, `log_info`, `log_warn`, `log_error` and `log_fatal`. They all write through the logger that `create_logger()` returns.

### The `Logger` object

- `init(config)` sets up the outputs and writes a start-up line that includes the configuration. If the logger is already initialised, calling it again does nothing.
- `shutdown()` writes `Logger Shutdown` and closes every output. It is safe to call more than once. A `Logger` also works as a context manager and shuts down when the block exits.
- `set_log_level(level)` changes the level, and `log_level()` returns it.
- `config()` returns a copy of the current `LoggerConfig`.
- `is_initialized()` tells whether the logger is initialised.

What each setting does:

- `enable_console` writes to standard output.
- `enable_color` adds ANSI colours to the level name on the console.
- `enable_file` writes to `log_file`, creating parent directories as needed. The file rotates daily at midnight and keeps `max_files` old files.
- `enable_async` passes records through a bounded queue (8192 entries) to a background listener. When the queue is full, logging waits instead of dropping records.
- `max_file_size` is kept in the configuration and shown in the start-up line, but the logger does not use it for rotation.

Each line has this layout:

```
[L]2025-01-01 12:00:00.123|info|<thread>|<process>|<file>|<line>|<function>|message
```

On the console there is no `|` between the level and the thread id.

### Configuration helpers

`asiokit.logconfig` has helpers for level names:

- `str_to_log_level("error")` gives `LogLevel.ERR`. An unknown name gives `INFO`.
- `log_level_to_str(LogLevel.ERR)` gives `"ERROR"`.
- `format_logger_config(config)` renders a configuration as one line.

### YAML configuration

```yaml
log:
  log_file: log/log.txt
  log_level: info        # trace, debug, info, warn, error, fatal
  max_file_size: 1048576
  max_files: 3
  enable_console: true
  enable_file: true
  enable_color: true
  enable_async: false
```

```python
from asiokit.logger import load_log_config, create_logger

config = load_log_config("config/log.yaml")   # resolved against the current directory
create_logger().init(config)
```

Any key that is missing takes the default shown above. Errors are reported as follows:

- A missing file raises `FileNotFoundError`.
- A file with no `log` section raises `ValueError`.
- A `log` section that is not a mapping raises `ValueError`.

## What this package does not do

The package contains no networking code: no servers, no clients and no event
loop. It has no command-line programs either. It is a library of UUID and
logging utilities only.