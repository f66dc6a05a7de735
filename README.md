# smashmap

`smashmap` is a hash map with a fixed number of buckets. Entries that collide
share a bucket's list, and the newest entry in a bucket comes first. The map can
check its own consistency and write a readable dump of its buckets. The package
also includes a word-frequency counter built on the map, which you can run from
the command line.

## Installation

```
pip install .
```

To install with the test dependency (pytest):

```
pip install .[test]
```

## Using the map

```python
import sys

from smashmap.smash_map import SmashMap
from smashmap.freq import string_hash, key_to_str, val_to_str

m = SmashMap(10007, string_hash, key_to_str, val_to_str, "words")
m.insert("hello", 1)
m.insert("hello", 2)        # a key that is already present has its value replaced
print(m.get("hello", 0))    # 2
print("hello" in m, len(m)) # True 1
m.verify()                  # raises SmashMapError if the map is inconsistent
m.print_to(sys.stdout)      # one "key: value" line per entry
```

- `SmashMap(size, hash_func=hash, key_to_str=str, val_to_str=str, name="smash_map")`
  creates the map. `size` must be a positive integer and `hash_func` must be
  callable. Otherwise `SmashMapError` is raised.
- `insert(key, val)`, `get(key, default=None)`, `key in m`, `len(m)` and
  iteration over the keys all work as you would expect.
- `items()` yields `(key, value)` pairs. It goes bucket by bucket, and within a
  bucket it gives the newest entry first. `buckets()` returns a snapshot of every
  bucket as a list of pairs.
- `verify()` checks the hash function and the bucket count, and looks for
  duplicate keys.
- `print_to(file)` writes `key_to_str(key): val_to_str(val)` lines in the same
  order as `items()`. Each rendered element is cut to 255 characters.

## Errors

`smashmap.errors.SmashMapError` carries a `code`, which is a member of
`SmashMapErrorCode`. `smashmap.errors.strerror(code)` returns the code's
symbolic name, for example `SMASH_MAP_ERROR_FOUND_DUPLICATE`. For codes it does
not know, it returns `UNKNOWN_SMASH_MAP_ERROR`. Bad command-line options raise
`smashmap.errors.FlagsError`.

## Dumping a map

`smashmap.dump.dump(smash_map, stream=None, html_file=None)` writes a
description of the map: its name, size, hash function, and the keys and values
of every bucket.

- The output goes to `stream`, which is standard error by default.
- If `html_file` is given, the output goes there as well. An HTML preamble is
  written first if that file is still empty.
- Passing `None` as the map prints a short `[NULL]` line instead.

`smashmap.dump.red_text(text)` wraps text in the console escape codes for red.

## Counting words

- `smashmap.freq.count_words(text, max_word_size=64)` counts runs of ASCII
  letters in a `str` or in `bytes`, and returns a `SmashMap` of word to count.
  A word that is still open at the very end of the text is not counted. A word
  longer than `max_word_size` raises `SmashMapError`.
- `smashmap.freq.print_freq_dict(input_path, output_path)` does the same for a
  file and writes lines of the form `'word': 'count'`. It raises `SmashMapError`
  if the input cannot be read or is empty, or if the output cannot be written.
- `smashmap.freq.string_hash(text)` is the polynomial string hash that the
  counter uses.

## Command line

```
smashmap [-l LOG_FOLDER] -i N IN_1 OUT_1 ... IN_N OUT_N
```

- `-i N` gives the number of input/output file pairs, from 1 to 10. The word
  frequencies of each input file are written to the output file paired with it.
- `-l` sets the log folder prefix. The default is `./log/`. The log is written
  to that prefix followed by `logout.log`, so the folder must already exist and
  the prefix should end with a separator.

The command exits with 0 on success and 1 on bad options or a log file that
cannot be opened. If counting fails, it exits with the error code of the
failure.

```
smashmap -i 2 onegin.txt onegin_out.txt hobbit.txt hobbit_out.txt
```

## Limitations

- The map never removes keys.
- The number of buckets is fixed when the map is created; the map never resizes.
- The word counter only recognises ASCII letters.