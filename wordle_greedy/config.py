"""
Run defaults
============

File names follow the layout of the original word-list dumps; every value
here can be overridden from the command line.
"""

# ============================================================================
# WORDS
# ============================================================================

WORD_LENGTH = 5

# ============================================================================
# SOLVER
# ============================================================================

MAX_GUESSES = 20       # per-session cap, None disables it
PROGRESS_EVERY = 100   # sessions between progress log lines

# ============================================================================
# FILES
# ============================================================================

GUESSES_FILE = "wordle-allowed-guesses.txt"
ANSWERS_FILE = "wordle-answers-alphabetical.txt"
STATS_FILE = "wordle-stats.txt"
OUTPUT_FILE = "data.txt"

# ============================================================================
# SERIALIZATION
# ============================================================================

FIELD_SEPARATOR = ","     # word,weight in the corpus file
WORD_SEPARATOR = ","      # between guesses of one session
SESSION_SEPARATOR = "\n"  # between sessions
UNSOLVED_MARKER = "!"
