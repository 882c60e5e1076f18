# seqfuzz

This package provides edit distances and fuzzy string matching. They work on
any sequence: `str`, `bytes`, or lists of integers or other hashable items.

## Installation

```
pip install seqfuzz
```

No third-party libraries are needed at run time. To run the tests, install the
`test` extra, which adds pytest.

## Distance metrics

| Module                 | Functions                                                         |
|------------------------|-------------------------------------------------------------------|
| `seqfuzz.levenshtein`  | `levenshtein_distance`, `levenshtein_similarity`, `levenshtein_normalized_distance`, `levenshtein_normalized_similarity`, `levenshtein_maximum`, `levenshtein_editops` |
| `seqfuzz.indel`        | `indel_distance`, `indel_similarity`, `indel_normalized_distance`, `indel_normalized_similarity`, `indel_editops`, `lcs_seq_similarity` |
| `seqfuzz.osa`          | `osa_distance`, `osa_similarity`, `osa_normalized_distance`, `osa_normalized_similarity` |
| `seqfuzz.hamming`      | `hamming_distance`, `hamming_similarity`, `hamming_normalized_distance`, `hamming_normalized_similarity`, `hamming_editops` |
| `seqfuzz.jaro_winkler` | `jaro_similarity`, `jaro_winkler_similarity`, `jaro_winkler_distance`, `jaro_winkler_normalized_similarity`, `jaro_winkler_normalized_distance` |

### Score cutoffs

All of these functions take an optional `score_cutoff`, except the `*_editops`
functions and `levenshtein_maximum`. It works as follows:

- **Integer distances:** a distance above the cutoff is returned as
  `score_cutoff + 1`.
- **Normalized distances, and the Jaro-Winkler distance:** a result above the
  cutoff is returned as `1.0`.
- **Similarities:** a result below the cutoff is returned as `0`.

### Other parameters

- **`weights`:** the Levenshtein functions take a `LevenshteinWeights`
  (`insert_cost`, `delete_cost`, `replace_cost`) or a plain 3-tuple. The
  default is `(1, 1, 1)`.
- **`score_hint`:** the Levenshtein functions accept it, but it does not
  change the result.
- **`pad`:** the Hamming functions take this flag. It defaults to `True`. With
  `pad=False`, sequences of different lengths raise `ValueError`.
- **`prefix_weight`:** the Jaro-Winkler functions take this parameter. It
  defaults to `0.1`. The prefix bonus is applied only when the Jaro
  similarity is above 0.7.

```python
from seqfuzz.levenshtein import levenshtein_distance, LevenshteinWeights
from seqfuzz.osa import osa_distance

levenshtein_distance("lewenstein", "levenshtein")                 # 2
levenshtein_distance("lewenstein", "levenshtein",
                     weights=LevenshteinWeights(1, 1, 2))         # 3
osa_distance("CA", "AC")                                          # 1
```

### Comparing one sequence against many

To compare one sequence against many others, build a cached scorer once and
reuse it. These scorers have `distance`, `similarity`, `normalized_distance`
and `normalized_similarity` methods:

- `CachedLevenshtein`
- `CachedIndel`
- `CachedOSA`
- `CachedJaroWinkler`

```python
from seqfuzz.jaro_winkler import CachedJaroWinkler

scorer = CachedJaroWinkler("martha")
[scorer.similarity(name) for name in ("marhta", "martin", "mark")]
```

## Edit operations

Three functions return the steps that turn one sequence into another:

- **`levenshtein_editops`:** replacements, insertions and deletions.
- **`indel_editops`:** insertions and deletions only.
- **`hamming_editops`:** replacements, plus deletions or insertions at the
  end.

Each returns an `Editops` list of `EditOp` entries (`type`, `src_pos`,
`dest_pos`), with `src_len` and `dest_len` set. Matching elements are not
listed.

To replay the steps, call `seqfuzz.editops.editops_apply`. The result is a
`str` when both inputs are `str`, `bytes` when both are bytes-like, and a list
otherwise.

`Opcodes` and `Opcode` are block-wise operations. You can build them by hand
and replay them with `opcodes_apply`.

```python
from seqfuzz.levenshtein import levenshtein_editops
from seqfuzz.editops import editops_apply

ops = levenshtein_editops("kitten", "sitting")
editops_apply(ops, "kitten", "sitting")   # "sitting"
```

## Ratios

Ratio scores run from 0 to 100.

### `seqfuzz.fuzz_ratio`

| Function | Cached scorer |
|---|---|
| `ratio` | `CachedRatio` |
| `partial_ratio` | `CachedPartialRatio` |
| `qratio` (returns 0 when either input is empty) | `CachedQRatio` |

`partial_ratio_alignment` returns a `ScoreAlignment` with the score and the
matching slices of both inputs.

### `seqfuzz.fuzz_token`

| Function | Cached scorer |
|---|---|
| `token_sort_ratio` | `CachedTokenSortRatio` |
| `token_set_ratio` | `CachedTokenSetRatio` |
| `token_ratio` | `CachedTokenRatio` |
| `wratio` | `CachedWRatio` |
| `partial_token_sort_ratio` | none |
| `partial_token_set_ratio` | none |
| `partial_token_ratio` | none |

Tokens are split on whitespace and sorted before comparison.

```python
from seqfuzz.fuzz_ratio import partial_ratio
from seqfuzz.fuzz_token import token_sort_ratio, wratio

partial_ratio("this is a test", "this is a test!")        # 100.0
token_sort_ratio("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear")  # 100.0
wratio("new york mets", "new york mets vs atlanta braves")
```

## Helpers

`seqfuzz.common` holds the building blocks the metrics share:

- `remove_common_prefix`
- `remove_common_suffix`
- `remove_common_affix`, which returns a `StringAffix`
- `sorted_split`
- `join_tokens`
- `set_decomposition`, which returns a `DecomposedSet`
- `norm_sim_to_norm_dist`
- `pattern_match_vector`

## Self-check

The `seqfuzz.fuzzcheck` module cross-checks the metrics against simple
reference implementations.

Each input is a blob of raw bytes:

- the first 4 bytes are a little-endian length, `len1`;
- the next `len1` bytes are the first sequence;
- the remaining bytes are the second sequence.

To check one or more files, run:

```
seqfuzz-check sample1.bin sample2.bin
```

With no file arguments, `seqfuzz-check` reads a single blob from standard
input.

A blob that is too short, or whose length field is too large, is skipped. On
the first mismatch, the command prints the details to standard error and exits
with status 1. Otherwise it exits with status 0.

You can run the same checks from Python:

- **`check_all(data)`:** runs every check on one blob. It raises
  `CheckFailure` on a mismatch and returns `False` for a malformed blob.
- **Individual checks:** each of the following takes two sequences.
  - `check_indel_distance`
  - `check_indel_editops`
  - `check_lcs_similarity`
  - `check_levenshtein_distance`
  - `check_levenshtein_editops`
  - `check_osa_distance`
  - `check_jaro_similarity`
  - `check_partial_ratio`

## What it does not do

The package scores one pair of sequences at a time. It has none of the
following:

- a function that picks the best matches from a list of choices;
- string preprocessing such as lower-casing or removing punctuation;
- a full (unrestricted) Damerau-Levenshtein distance; only the restricted OSA
  variant is provided;
- a function that computes `Opcodes` from two sequences.