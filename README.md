# drills

A collection of small, self-contained exercises packaged as a regular Python
library. It holds a TGA image reader and writer, a set of classic katas, and
a handful of modules that show common idioms: iterators, closures, abstract
interfaces and error handling. It has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `drills.tgaimage` | `TGAImage`, `TGAColor`, `Format`, `TGAFormatError`: read and write uncompressed and run-length encoded TGA files, get and set pixels, flip, scale, clear and copy |
| `drills.allergies` | `Allergen`, `Allergies`: decode an allergy score |
| `drills.anagram` | `anagrams_for`, `char_counts`: case-insensitive anagram matching |
| `drills.armstrong` | `is_armstrong_number` |
| `drills.gigasecond` | `after`, `GIGASECOND`: the moment one billion seconds after a `datetime` |
| `drills.luhn` | `is_valid`, `digits`: the Luhn checksum |
| `drills.minesweeper` | `annotate`, `count_adjacent_mines`, `MINE` |
| `drills.strings` | `reverse` (keeps combining marks with their base characters), `capitalize_first` |
| `drills.space_age` | `Duration`, `Planet`, `EARTH_YEAR_IN_SECONDS`: age on other planets |
| `drills.sublist` | `sublist`, `contains_run`, `Comparison` |
| `drills.basics` | `add`, `multiply`, `greet`, `hello`, `something` |
| `drills.textutils` | `TextParser`, `StrSplit`, `str_before`, `word_counts` |
| `drills.minigrep` | `search`, `read_file_contents`, and the `minigrep` command |
| `drills.messenger` | `Messenger`, `LimitTracker`: warnings at 75%, 90% and 100% of a quota |
| `drills.closures` | `apply_twice`, `make_adder`, `long_words_upper`, `ItemBag`, `Countdown` |
| `drills.config` | `Config`, `load_config`, `ConfigError`: a two-line name and age file |
| `drills.traits` | `Describable`, `Countable`, `Animal`, `Plant`, `Rock`, `Cat`, `Dog`, `describe_and_count`, `pick_countable` |
| `drills.shapes` | `Shape`, `Circle`, `Rectangle`, `areas` |
| `drills.cells` | `Cell`, `MyBox` |
| `drills.lineage` | `Node`, `grand_parent`, `log_grand_parent`, and the errors `GrandParentError`, `ParentNotFound`, `GrandParentNotFound`, `LogError` |

## Examples

```python
from drills.luhn import is_valid
from drills.minesweeper import annotate
from drills.sublist import sublist, Comparison
from drills.space_age import Duration, Planet
from drills.tgaimage import TGAImage, TGAColor

is_valid("055 444 285")                    # True
annotate(["* * ", "    "])                # ['*2*1', '1211']
sublist([1, 2], [0, 1, 2, 3]) is Comparison.SUBLIST
Planet.EARTH.years_during(Duration.from_seconds(1_000_000_000))  # about 31.69

image = TGAImage(100, 100, 3)
image.set(10, 20, TGAColor.from_rgba(255, 0, 0, 255))
image.flip_vertically()
image.write("out.tga", True)

loaded = TGAImage.read("out.tga")
loaded.get(10, 79)                          # the red pixel, flipped
```

## Command line

Search a file for lines containing a query, ignoring case:

```
minigrep are poem.txt
```

The command prints the query, the file name and the list of matching lines.
It exits with status 1 if the file cannot be read.

## Limits

- `drills.tgaimage` stores and edits pixels only; it has no drawing
  primitives such as lines or triangles and does not render anything.
- Only true-colour and grayscale TGA files with 1, 3 or 4 bytes per pixel
  are read; colour-mapped files raise `TGAFormatError`.