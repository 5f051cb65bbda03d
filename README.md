# kubeglance

Building blocks for a terminal dashboard over a Kubernetes cluster: key
handling, an event queue that mixes input with periodic ticks, dark and light
themes, table titles and a name filter, parsing of tool version output,
overview text and the command-line settings of such a dashboard.

It has no runtime dependencies outside the standard library.

## Modules

| Module | Purpose |
| --- | --- |
| `kubeglance.keys` | `Key`, `KeyCode`, `KeyModifiers`, `KeyEvent`: map raw key presses to named keys |
| `kubeglance.events` | `Events`, `Event`, `EventKind`, `EventConfig`: merge input from a reader with tick events |
| `kubeglance.theme` | `Color`, `Style`, `Modifier`, `Styles`, `theme_styles`, `style_for`, `style_highlight`, `Rect`, `centered_rect` |
| `kubeglance.ui_text` | Table titles (`title_with_ns`, `get_resource_title`, `get_cluster_wide_resource_title`, `get_describe_active`), hint strings, `glob_match` and `filter_by_name` |
| `kubeglance.cli_info` | `CliInfo`, `build_cli`, `get_info_by_regex`, `parse_kubectl_versions`, `format_prefixed_version` |
| `kubeglance.overview` | `BANNER`, `get_nm_ratio`, `nw_loading_indicator`, `logo_text`, `format_help_row` |
| `kubeglance.config` | `Settings`, `build_parser`, `parse_args` |

## Examples

Keys:

```python
from kubeglance.keys import Key, KeyCode, KeyEvent, KeyModifiers

str(Key.from_f(10))   # "<F10>"
str(Key.alt("c"))     # "<Alt+c>"
str(Key.char(" "))    # "<Space>"
str(Key.LEFT)         # "<Left Arrow Key>"

event = KeyEvent(KeyCode.CHAR, KeyModifiers.CONTROL, char="c")
Key.from_event(event) == Key.ctrl("c")   # True
```

`Key.from_f` accepts 0 to 12 and raises `ValueError` otherwise.

Events: `Events` runs a reader on a background thread. The reader is called as
`reader(timeout)`, waits up to `timeout` seconds and returns a `KeyEvent`, an
input or mouse `Event`, or `None`. A `TICK` event is queued every tick
(`tick_rate` is in milliseconds). If the reader raises, `next()` raises the
same exception.

```python
from kubeglance.events import EventKind, Events

def reader(timeout):
    ...  # wait for terminal input, return a KeyEvent or None

with Events(reader, tick_rate=250) as events:
    event = events.next(timeout=1.0)   # TimeoutError if nothing arrives
    if event.kind is EventKind.INPUT:
        ...
```

Themes and layout:

```python
from kubeglance.theme import COLOR_CYAN, Rect, Style, Styles, centered_rect, style_for

style_for(Styles.PRIMARY, light=False) == Style(fg=COLOR_CYAN)   # True
centered_rect(50, 15, Rect(0, 0, 100, 40))   # Rect(x=25, y=13, width=50, height=15)
```

Titles and filtering:

```python
from kubeglance.ui_text import filter_by_name, get_resource_title, title_with_ns

title_with_ns("Title", "hello", 3)                 # "Title (ns: hello) [3]"
get_resource_title("Title", "-> hello", 5)         # " Title (ns: all) [5] -> hello"
filter_by_name("*long*truncated*", "Test long name that should be truncated")  # True
filter_by_name("truncated", "Test 1")              # False
```

`filter_by_name` ignores case and accepts a name that matches the filter as a
glob or contains it as a substring; an empty filter accepts everything.

Tool versions:

```python
from kubeglance.cli_info import build_cli, format_prefixed_version, get_info_by_regex

get_info_by_regex("no running Istio pods\n1.8.2", r"([0-9.]+)")  # "1.8.2"
format_prefixed_version("'24.0.2'\n")   # "v24.0.2"
build_cli("helm", None)                 # CliInfo(name="helm", status=False, version="Not found")
```

`parse_kubectl_versions` takes the JSON printed by `kubectl version -o json`
and returns the client and server `gitVersion`; a missing field comes back as
the text `"null"`, and output that is not JSON gives `(None, None)`.

Overview text:

```python
from kubeglance.overview import format_help_row, get_nm_ratio

get_nm_ratio([80.0, 60.0], lambda percent: percent)   # 0.7
format_help_row(["<q>", "Quit", "General"])           # columns of 50, 40 and 20 characters
```

## Settings

`kubeglance.config.parse_args(argv)` reads three options and returns a
`Settings`:

- `-t`, `--tick-rate`: milliseconds per tick, default 250; must be above 0 and below 1000.
- `-p`, `--poll-rate`: milliseconds between rounds of network calls, default 5000; must be a multiple of the tick rate.
- `-e`, `--enhanced-graphics`: `true` or `false`, default `true`.

Inconsistent rates raise `ValueError`; malformed arguments make the parser
exit. `Settings.ticks_per_poll` gives the number of ticks between polls.

```python
from kubeglance.config import parse_args

settings = parse_args(["--tick-rate", "100", "--poll-rate", "1000"])
settings.ticks_per_poll   # 10
```

## What it does not do

kubeglance is a set of pieces, not a dashboard. It installs no command, does
not connect to a cluster or read a kubeconfig, does not turn Kubernetes API
objects into table rows, does not compute resource ages or convert CPU and
memory units, does not run external tools (the version helpers only parse
output you pass in) and does not draw anything on the terminal.