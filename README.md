# antfarm

antfarm moves a colony of ants from the start room of a farm to its end room
in as few turns as it can. It finds paths from start to end that share no
rooms. It uses breadth-first search and takes the shortest path first. It then
sends the ants down those paths and prints every move, turn by turn.

## Installation

```
pip install .
```

## Usage

The program reads the farm description from standard input:

```
antfarm < farm.txt
```

A farm file looks like this:

```
3
##start
start 0 0
a 1 0
##end
end 2 0
start-a
a-end
```

- The first line that is not a comment gives the number of ants. It must be a positive integer that fits in 32 bits.
- A room is written as `name x y`. Put `##start` or `##end` on the line before a room to mark it as the start or the end. A room name may not begin with `L` or `#`. Two rooms may not share a name or a pair of coordinates.
- A link is written as `name1-name2`. Once the first link appears, no more rooms may follow.
- Any other line that begins with `#` is a comment.
- Reading stops at the first empty line.

By default the program echoes the lines it read and then a blank line. After
that it prints one line per turn. Each line lists moves such as `L1-a`, which
means ant 1 enters room `a`.

### Options

| Option  | Effect                                                          |
|---------|-----------------------------------------------------------------|
| `-r`    | print only the number of turns                                  |
| `-p`    | also print the paths found and, at the end, the number of turns |
| `-n`    | print neither the farm nor the moves                            |
| `-l`    | run the external command `leaks lem-in` before exiting, if it exists |
| `-help` | print the usage text and exit                                   |

Arguments the program does not know are ignored.

### Errors

The program prints a red message and exits with status 1 in these cases:

- a bad ant count (`Wrong number of ants`)
- a malformed room line (`Wrong room`)
- a malformed, unknown or duplicate link (`Wrong link`)
- a repeated room name or pair of coordinates (`Room is not unique`)
- a missing, repeated or misplaced `##start` or `##end` (`Commands are wrong`)
- no route from start to end (`There are no connection between start and finish`)

## Library use

```python
from antfarm.lines import read_lines
from antfarm.reading import read_farm
from antfarm.paths import collect_paths
from antfarm.ants import run_ants
from antfarm.printing import format_turn

with open("farm.txt") as handle:
    farm = read_farm(read_lines(handle))
paths = collect_paths(farm)
turns = run_ants(farm.ant_num, paths)
for turn in turns:
    print(format_turn(turn), end="")
print(len(turns))
```

`read_farm` takes an iterable of lines with the newlines already removed. It
raises `antfarm.farm.FarmError` if the description is invalid.

`run_ants` returns one list of `Move` objects per turn.

The package also has two smaller tools:

- `antfarm.formatting.format_string` and `antfarm.formatting.printf`, a `printf`-style formatter. It supports the conversions `d i u o x X f c s p %`, the flags `+ - # 0` and space, width, precision, `*`, and the length modifiers `h hh l ll L`.
- `antfarm.lines.LineReader`, which reads a stream line by line.

## Running the tests

```
pip install .[test]
pytest
```