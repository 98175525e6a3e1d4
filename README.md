# asrdecode

Building blocks for turning the frame-by-frame output of a CTC speech model
into text:

- **Greedy decoding**: pick the best token per frame (`GreedyDecoder`) and
  collapse repeats and blanks (`collapse_greedy`).
- **Beam bookkeeping**: `Beam`, `CtcBeam` and `prefix_compare` in
  `asrdecode.beam`. `BeamPtrMap` and `BeamsMapWrapper` in
  `asrdecode.beams_map` hold beam prefixes and merge the ones that share a
  sequence.
- **Lexicons**: `GraphemeLexiconBuilder` turns a word list into a
  `word<TAB>s p e l l i n g` lexicon file. `LexiconFst` builds a letter trie
  and an acceptor (`Fst`) from that file, with input and output
  `SymbolTable`s.
- **Utilities**: WAV reading, log-space arithmetic, vocabulary pruning, a
  thread-safe `RingBuffer`, and `AudioPlayerSim`, which feeds audio to a
  callback in chunks at a real-time pace.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Greedy decoding

A tokens file holds one single-character token per line.

```python
import numpy as np
from asrdecode.greedy_decoder import GreedyDecoder, collapse_greedy

decoder = GreedyDecoder()
decoder.init_vocab("data/dictionary/tokens.txt")
vocab = decoder.vocabulary()                  # None if no tokens are loaded

emissions = np.random.rand(100, len(vocab))   # [time, tokens]
chars = decoder.decode_chars(emissions)       # best token per frame
text = collapse_greedy(emissions, vocab)      # CTC-collapsed, starts with "|"
```

`init_vocab` raises `ValueError` when a line holds more than one character.
`best_sequence` and `decode_chars` raise `ValueError` when the token axis of
the emissions does not match the vocabulary.

## Beams

```python
from asrdecode.beam import CtcBeam, prefix_compare
from asrdecode.beams_map import BeamsMapWrapper

beam = CtcBeam("hel")
beam.extend_sequence("l")
beam.text()                  # "hell"
beam.current_probs()         # (p_blank, p_non_blank) of the current step

beams = BeamsMapWrapper(10)
beams.update_beams_map(beam) # stores a copy; same sequences add their scores
beams.scale_beams_score(0, 1)
```

## Building a lexicon and its FST

```python
from asrdecode.lexicon import GraphemeLexiconBuilder
from asrdecode.lexicon_fst import LexiconFst

builder = GraphemeLexiconBuilder("words.txt")
builder.generate_lexicon("lexicon.txt")       # "hello\th e l l o" per word

lexicon = LexiconFst("lexicon.txt")
lexicon.construct_fst_from_lex_file()
lexicon.is_sequence_valid_fst("hello")        # True for words in the lexicon
lexicon.is_sequence_valid_trie("hel")         # False unless "hel" is a word
lexicon.write_fst("/path/to/existing/dir/lexicon_fst.fst", True)
```

`write_fst` also writes `isymbols.sym` and `osymbols.sym` next to the FST.
An absolute path needs its directory to exist. A relative path with a
directory is taken relative to `$PROJECT_ROOT`, and a bare file name goes to
`$PROJECT_ROOT/data/lexicon`. `LexiconFst.load_fst` and
`asrdecode.symbols.load_symbol_tables` read the files back.

### From the command line

The command reads `data/lexicon/lexicon.txt` from the project directory. It
builds the acceptor, sorts its arcs and writes `data/lexicon/lexicon_fst.fst`
with its symbol tables. The project directory is `$PROJECT_ROOT`, or the
directory given with `--project-root`:

```
asrdecode-setup
asrdecode-setup --project-root /path/to/project
```

## Utilities

```python
from asrdecode.utils import get_pruned_log_probs, log_sum_exp, read_wav
from asrdecode.ring_buffer import RingBuffer

samples = read_wav("speech.wav")              # data chunk as float32 samples
log_sum_exp(-1.0, -2.0)
get_pruned_log_probs(log_probs, 0.95, 5, 1)   # [(index, log_prob), ...]

buffer = RingBuffer(1000)
buffer.insert(1)
buffer.pop()                                  # raises IndexError when empty
```

## What this package does not do

- It does not run an acoustic model. You supply the emissions as arrays.
- It does not capture live audio. `AudioPlayerSim` only replays samples you
  already have.
- It has no language-model (n-gram) scoring.
- It has no complete beam-search decoder. It provides the beam types and
  beam maps, but nothing that runs the search over a whole utterance.

## Running the tests

```
pytest
```