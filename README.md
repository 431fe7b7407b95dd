# slkit

Small, composable pieces for building a status line and for picking
things from lists:

- **Status components**: functions that each return one short string
  (battery level, CPU usage, free disk space, the date, and so on), or
  `None` when the value cannot be read.
- **A status line generator** (`slkit.status`) that joins components into
  one line and refreshes it on an interval.
- **`stest`** (`slkit.stest`): prints the paths from a list that pass a
  set of file tests.
- **A menu matcher** (`slkit.menu`): the matching, editing and selection
  logic of an incremental menu, with no display attached.

## Installing

```
pip install slkit
```

Python 3.10 or later is required. `psutil` is installed with it and is
used for interface addresses and link state. Many readings come from the
Linux `/proc` and `/sys` file systems and are meant for Linux.

## The status line

```
slkit-status -s      # print the status line to stdout on every update
slkit-status -1      # print one status line and exit
slkit-status -v      # write the version to stderr and exit
```

Flags may be combined (`-s1`). Without `-s` or `-1` the line is set as
the root window name by running `xsetroot -name`; this needs `DISPLAY`
to be set and `xsetroot` on the `PATH`, and the name is cleared on exit.

The command shows the local date and time (`%F %T`), refreshed once a
second. SIGINT and SIGTERM end the loop after the current update;
SIGUSR1 forces an immediate update.

To build your own line, describe each part with a `Component(func, fmt,
arg)` and pass the list to `render_status` for one line or to `run` to
keep refreshing it:

```python
from slkit.status import Component, render_status, run
from slkit.disk import disk_free
from slkit.system import datetime, load_avg

parts = [
    Component(disk_free, "Disk: %sG | ", "/"),
    Component(load_avg, "%s | "),
    Component(datetime, "%s", "%a %d-%m %R"),
]
print(render_status(parts))
run(parts, interval=2000, out=print)
```

`render_status(components, unknown="n/a", maxlen=2048)` shows `unknown`
for a component that returns `None` and cuts the line at `maxlen - 1`
characters. `run(components, interval, once, out)` calls `out` with each
line; by default it prints to stdout.

## Components

Every component takes one argument, as a status line entry gives it: a
path, an interface name, a format string, or an unused value.

| Module          | Components                                                        |
|-----------------|-------------------------------------------------------------------|
| `slkit.power`   | `battery_perc`, `battery_state`, `battery_remaining`              |
| `slkit.files`   | `cat`, `num_files`                                                |
| `slkit.cpu`     | `cpu_freq`, `cpu_perc`                                            |
| `slkit.system`  | `datetime`, `entropy`, `hostname`, `kernel_release`, `load_avg`, `uptime`, `gid`, `uid`, `username`, `run_command` |
| `slkit.disk`    | `disk_free`, `disk_perc`, `disk_total`, `disk_used`               |
| `slkit.memory`  | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `slkit.network` | `ipv4`, `ipv6`, `up`, `netspeed_rx`, `netspeed_tx`                |
| `slkit.wifi`    | `wifi_essid`, `wifi_perc`                                         |
| `slkit.sensors` | `temp`, `vol_perc`                                                |

Notes:

- Battery components read `/sys/class/power_supply/<bat>/`; `battery_state`
  returns `+`, `-`, `o` or `?`, and `battery_remaining` returns `"Hh Mm"`
  while discharging and `""` otherwise. A `root` argument points them at
  another directory.
- `cpu_freq`, `entropy` and the memory components take an optional `path`
  to read instead of the usual `/sys` or `/proc` file; `read_meminfo`
  parses a meminfo file into a dict.
- `cpu_perc` and `netspeed_rx`/`netspeed_tx` compare with their previous
  call, so the first call returns `None`. `CpuMeter` and
  `NetSpeed(direction, interval, root)` give independent meters of the
  same kind.
- `run_command` runs a shell command and returns the first line it prints.
- `wifi_essid` and `wifi_perc` query nl80211 over a generic netlink
  socket (Linux only); `rssi_to_perc` and `find_attr` are available on
  their own.
- `vol_perc` reads the master volume of an OSS mixer device such as
  `/dev/mixer`; `temp` reads a sensor file in millidegrees.
- `entropy` returns `∞` on systems other than Linux.

Sizes are written with `slkit.fmt.fmt_human`, which scales a number by
1000 or 1024 and adds the matching prefix; any other base raises
`ValueError`:

```python
>>> from slkit.fmt import fmt_human
>>> fmt_human(1536, 1024)
'1.5 Ki'
```

`slkit.fmt` also has `read_int`, `read_line` and `warn`.

`slkit.keyboard` holds the text handling for keyboard indicators:
`format_indicators(fmt, led_mask)` renders caps lock (`c`) and num lock
(`n`) letters from a LED mask, and `get_layout(symbols, group)` picks
the layout name of a group out of an XKB symbols string, skipping
tokens rejected by `valid_layout_or_variant`.

## stest

```
slkit-stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]
```

Tests each named file, or each line read from standard input when no
files are given, and prints those that pass every test:

- `-a` include hidden files, `-b` block special, `-c` character special,
  `-d` directory, `-e` exists, `-f` regular file, `-g` set-group-id,
  `-h` symbolic link, `-p` named pipe, `-r` readable, `-s` not empty,
  `-u` set-user-id, `-w` writable, `-x` executable
- `-n file` newer than *file*, `-o file` older than *file*
- `-l` test the entries of each named directory instead of the directory
- `-q` print nothing, stop at the first match
- `-v` invert the sense of the tests

The exit status is 0 when something matched, 1 when nothing did, and 2
on a usage error. From Python, `parse_args` builds an `Options` and
`test_path(path, name, options)` applies it to one path.

## Menu matching

`slkit.menu` holds the menu logic. `read_items` turns a stream of lines
into `Item`s, `parse_args` reads menu options into a `MenuOptions`, and
`Menu` keeps the input text, cursor, selection and visible page.

`Menu.match` orders items with exact matches first, then prefix matches,
then other substring matches; every space-separated word of the input
has to appear in an item for it to match. With `insensitive=True`
matching ignores case, using `cistrstr`.

Editing and navigation are methods: `insert`, `backspace`, `delete`,
`kill_right`, `kill_left`, `kill_word`, `move_word_edge`, `cursor_left`,
`cursor_right`, `select_next`, `select_prev`, `home`, `end`, `complete`
and `output`. `page` lists the items currently shown and `selected` the
selected item.

## What it does not do

- There is no menu command and no menu window: `slkit.menu` only keeps
  the state of a menu, and drawing it and reading keys is left to you.
- There is no window manager.
- Keyboard indicator and layout state are not read from a display;
  `slkit.keyboard` only formats values you supply.
- Battery, CPU, memory and swap readings cover Linux only.