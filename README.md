# mangen

`mangen` prints a manifest of a directory. Each line gives a file's path,
relative to the directory, and the file's Adler-32 checksum as upper-case
hexadecimal with no leading zeros. For example, a file `notes.txt` that holds
the nine bytes `Wikipedia` gives this line:

```
notes.txt : 11E60398
```

Files in subdirectories are shown with the subdirectory path in front, such
as `src/main.c : ...`.

The directory is walked breadth first. Directories are not listed as lines of
their own, only the files inside them. Symbolic links are not followed into
directories: a link to a directory is treated as a file, and since it cannot
be read as one, it is reported and left out. Any directory that cannot be
opened, or file that cannot be read, is reported on standard error and left
out.

## Installation

```
pip install .
```

## Usage

```
mangen [DIR_PATH] [OPTIONS]
```

If `DIR_PATH` is left out, the current directory is used. `DIR_PATH` is taken
only from the first argument; it may even start with `-`, as long as it is not
one of the options below.

Options:

- `-h` shows usage instructions and exits.
- `-v` shows the program name and version and exits.
- `-e NAME` leaves out every file or directory whose name matches `NAME`,
  together with everything inside such a directory. In `NAME`, `.` matches
  any single character and `*` matches any run of characters. Every other
  character matches only itself. The pattern must match the whole name.
  `-e` may be given more than once. `NAME` must not be `-h`, `-v` or `-e`.

An unknown argument after the first, or `-e` without a usable `NAME`, prints
an error such as `mangen: Invalid command line argument X` or
`mangen: Incorrect use of flag -e` on standard error and exits with status 1.

Examples:

```
mangen
mangen project -e "*.o" -e build
```

An exclusion applies to names found while walking the directory. It never
applies to the starting directory itself, so `mangen some_dir -e some_dir`
still lists the files in `some_dir`.

## Use from Python

```python
from mangen.manifest import walk_manifest, write_manifest

for rel_path, checksum in walk_manifest("project", ["*.o"]):
    print(rel_path, f"{checksum:X}")

write_manifest("project", ["build"])  # writes to standard output
```

- `mangen.manifest.walk_manifest(path, excluded)` yields
  `(relative_path, checksum)` pairs; `path=None` means the current directory.
- `mangen.manifest.write_manifest(path, excluded, out=None)` writes the
  `name : HEX` lines to `out`, or to standard output.
- `mangen.manifest.pattern_to_regex(word)` shows the anchored regular
  expression an exclusion word becomes.
- `mangen.flags.adler32(data)` computes the checksum of a bytes object.
- `mangen.cli.main(argv=None)` runs the command and returns its exit status.
- `mangen.linkedlist.LinkedList` is a doubly linked list with a sentinel end
  node, offering `append`, `appendleft`, `insert_before`, `pop`, `popleft`,
  `remove_node`, `resize`, `clear`, `first`, `last`, `swap` and `find`.

## Running the tests

```
pip install ".[test]"
pytest
```