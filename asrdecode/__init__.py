"""CTC decoding tools: greedy decoding, beams, grapheme lexicons and lexicon FSTs."""

__version__ = "0.1.0"