# rankcore

Building blocks for ranking the results of a full-text search. The package
covers typo-tolerant word matching, query rewriting for synonyms, and a set of
ranking criteria that can be combined. It has no runtime dependencies.

## Installation

```
pip install rankcore
```

## What is inside

- `rankcore.levenshtein.prefix_damerau_levenshtein(source, target)` returns
  `(distance, length)`. `distance` is the smallest Damerau-Levenshtein distance
  between `source` and a prefix of `target`, and `length` is the byte length of
  that prefix. It accepts `bytes` or `str`. If `source` is longer than `target`,
  it raises `ValueError`.
- `rankcore.dfa` provides `build_dfa(query)` and `build_prefix_dfa(query)`.
  Both return a `LevenshteinDfa`, which has `distance(word)` and
  `is_match(word)`. `max_typos(query)` gives the number of typos allowed:
  0 for queries of up to 4 bytes, 1 for up to 8 bytes, 2 beyond that.
- `rankcore.query_enhancer`:
  - `QueryEnhancerBuilder(query)` records which synonym words stand for which
    ranges of the query words, through `declare(range, real, replacement)`.
  - `build()` returns a `QueryEnhancer`.
  - `QueryEnhancer.replacement(real)` maps the index of a synonym word to a
    range of positions among the query words.
  - `rewrite_range_with(query, range, words)` tells whether a replacement
    lengthens the query.
- `rankcore.distinct_map` has `DistinctMap(limit)` and
  `BufferedDistinctMap(internal)`. Together they cap how many results may share
  one distinct key.
- `rankcore.number.Number.parse(text)` reads a value as an unsigned 64-bit
  integer first, then as a signed one, then as a float. Numbers of different
  kinds compare with one another. If the text fits none of the kinds,
  `ParseNumberError` is raised.
- The ranking criteria each subclass `rankcore.criterion.Criterion`. They
  compare two `RankedDocument`s through `evaluate(lhs, rhs)`, which returns a
  negative number when `lhs` ranks first.

  | Module | Criteria |
  | --- | --- |
  | `rankcore.typos` | `SumOfTypos` |
  | `rankcore.criterion` | `NumberOfWords`, `DocumentId`, `SortByAttr` |
  | `rankcore.proximity` | `WordsProximity` |
  | `rankcore.position` | `SumOfWordsAttribute`, `SumOfWordsPosition` |
  | `rankcore.exactness` | `Exact` |

- `rankcore.criteria`:
  - `CriteriaBuilder` collects criteria in order.
  - `Criteria.default()` gives the standard order: `SumOfTypos`,
    `NumberOfWords`, `WordsProximity`, `SumOfWordsAttribute`,
    `SumOfWordsPosition`, `Exact`, `DocumentId`.

## Example

```python
from rankcore.levenshtein import prefix_damerau_levenshtein
from rankcore.query_enhancer import QueryEnhancerBuilder
from rankcore.distinct_map import DistinctMap, BufferedDistinctMap

distance, length = prefix_damerau_levenshtein(b"Levenste", b"Levenshtein")
assert (distance, length) == (1, 9)

builder = QueryEnhancerBuilder(["NYC", "subway"])
builder.declare(range(0, 1), 2, ["new", "york", "city"])
enhancer = builder.build()
assert enhancer.replacement(0) == range(0, 3)
assert enhancer.replacement(1) == range(3, 4)

distinct = DistinctMap(2)
buffered = BufferedDistinctMap(distinct)
assert buffered.register("a") and buffered.register("a")
assert not buffered.register("a")
buffered.transfer_to_internal()
assert len(distinct) == 2
```

## Errors

Errors are raised as exceptions derived from the following classes:

- `rankcore.errors.MeiliError`
- `rankcore.number.ParseNumberError` (a `ValueError`)
- `rankcore.criterion.SortByAttrError`

## What it does not do

This package does not store documents, build an index, hold a database or
run searches. It does not provide a command-line tool either. The caller
supplies the matched documents as `RankedDocument` values. For `SortByAttr`,
the caller also supplies the ranked values as a mapping and the schema.

## Running the tests

```
pip install -e ".[test]"
pytest
```