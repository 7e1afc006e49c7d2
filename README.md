# pvekit

Small, dependency-free helpers for working with data from the Proxmox VE API.

## Installation

```
pip install pvekit
```

## Modules

### `pvekit.util`

- `parse_pm_conf(kv_string, implicit_first_key)` parses a configuration string
  such as `virtio,size=32G,iothread=1` into a dict. When `implicit_first_key` is
  non-empty and the first element has no `=`, that element is stored under the
  implicit key. `parse_conf` does the same with custom separators, and
  `parse_sub_conf` splits a single `key=value` element. Values that look like
  integers become `int`, boolean words (`true`, `F`, `1`, `0`, ...) become `bool`,
  everything else stays a string.
- `disk_size_gb(size)` converts a size string such as `"32G"`, `"512M"` or `"1T"`
  to gigabytes as a float; numbers are returned unchanged, other types give `0.0`,
  and a string without digits raises `ValueError`.
- `add_to_list`, `csv_to_list` and `list_to_csv` handle comma-separated lists.
- `itob(i)` is `True` only for `1`.
- `item_in_key_of_array(array, key, value)` checks whether any dict in `array`
  holds `value` under `key`; a value shaped like `user@realm!tokenid` also
  matches an entry whose `tokens` list contains that token id.

### `pvekit.validate`

Validation functions that raise `ValidationError` (a `ValueError` subclass) with a
message naming the offending key, for example
`validate_int_in_range(1, 65536, port, "port")`:
`validate_int_in_range`, `validate_int_greater_or_equals`, `validate_int_greater`,
`validate_string_in_array`, `validate_string_not_empty`, `validate_strings_equal`,
`validate_file_path` (requires an absolute path), `validate_array_not_empty` and
`validate_array_even`.

`error_key_empty`, `error_key_not_set`, `error_item_exists` and
`error_item_not_exists` build (but do not raise) a `ValidationError` with the
standard message.

### `pvekit.sizeunit`

The `SizeUnit` enum (`KB`, `MB`, `GB`, valued 2^10, 2^20 and 2^30) with
`convert_to(size, old_unit, new_unit)`, which returns `(new_size, new_unit)` and
truncates toward zero, `format_to_short_string` (`"10G"`) and
`format_to_long_string` (`"10 gigabyte"`).

### `pvekit.snapshot`

- `ConfigSnapshot(name, description, vm_state)` with `to_api_values()`, which
  returns the `snapname` / `description` / `vmstate` parameters for creating a
  snapshot.
- `format_snapshots_list(task_response)` turns the raw snapshot entries returned
  by the API into a flat list of `Snapshot` objects.
- `format_snapshots_tree(task_response)` arranges them as a parent/child tree and
  returns the root snapshots, with parent names cleared.
- `Snapshot.to_dict()` gives a JSON-ready dict (`name`, `time`, `description`,
  `ram`, `children`, `parent`), leaving out empty fields other than the name.

## Example

```python
from pvekit.util import parse_pm_conf
from pvekit.sizeunit import SizeUnit, convert_to, format_to_short_string
from pvekit.snapshot import format_snapshots_tree

parse_pm_conf("virtio,size=32G,iothread=1", "model")
# {'model': 'virtio', 'size': '32G', 'iothread': 1}

size, unit = convert_to(2, SizeUnit.GB, SizeUnit.MB)
format_to_short_string(size, unit)
# '2048M'

tree = format_snapshots_tree([
    {"name": "base", "snaptime": 1666361849.0, "parent": ""},
    {"name": "current", "description": "You are here!", "parent": "base"},
])
[s.to_dict() for s in tree]
# [{'name': 'base', 'time': 1666361849,
#   'children': [{'name': 'current', 'description': 'You are here!'}]}]
```

## What it does not do

pvekit does not talk to a Proxmox server. It has no API client, no login or
session handling and no command-line tool: `ConfigSnapshot.to_api_values()`
only builds the request parameters, and the snapshot formatters work on data you
have already fetched yourself.

## Running the tests

```
pip install -e .[test]
pytest
```