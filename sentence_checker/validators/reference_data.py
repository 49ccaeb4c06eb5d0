"""Reference data — the fixed constants the sentence rules are built on."""

# ──────────────────────────────────────────────────────────────────────
# NUMERALS
# ──────────────────────────────────────────────────────────────────────

# Numbers strictly below this value must be written out in words
MIN_NUM_NOT_SPELLED = 13

# Exact tokens that count as an unspelled numeral: "0" .. "12"
SPELLED_OUT_NUMERALS: frozenset[str] = frozenset(
    str(num) for num in range(MIN_NUM_NOT_SPELLED)
)

# ──────────────────────────────────────────────────────────────────────
# PUNCTUATION
# ──────────────────────────────────────────────────────────────────────

PERIOD = "."
QUOTATION = '"'

# Sentences are tokenized on single spaces only; punctuation stays attached
WORD_SEPARATOR = " "

# First character of a sentence must fall in this (ASCII) range
CAPITAL_FIRST = "A"
CAPITAL_LAST = "Z"
