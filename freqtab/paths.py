# freqtab/paths.py

import os

# --- Base data directory (override with FREQTAB_DATA_DIR) ---
DATA_DIR = os.getenv("FREQTAB_DATA_DIR", "000bigfiles")

# --- Source corpus files ---
PROSE_PATH = os.path.join(DATA_DIR, "00allProse.txt")
CASUAL_PATH = os.path.join(DATA_DIR, "01allCasual.txt")
C_PATH = os.path.join(DATA_DIR, "02allC.txt")
JAVA_PATH = os.path.join(DATA_DIR, "02allJava.txt")
PERL_PATH = os.path.join(DATA_DIR, "02allPerl.txt")
RUBY_PATH = os.path.join(DATA_DIR, "02allRuby.txt")
FORMAL_PATH = os.path.join(DATA_DIR, "03allFormal.txt")
NEWS_PATH = os.path.join(DATA_DIR, "04allNews.txt")

# --- Small files for smoke runs ---
TEST_PATH = os.path.join(DATA_DIR, "test.txt")
NET_PATH = os.path.join(DATA_DIR, "1 net 1.txt")

# --- Scanning ---
MAX_WORD_LEN = 1000      # bytes the matcher may look at from each scan position
CASE_SENSITIVE = True    # loader only; the scanner always folds case

# --- Frequency map ---
DEFAULT_CAPACITY = 10

# --- Output ---
CTRL_TO_ESCAPE = True
MAX_TOKENS_TO_PRINT = 0  # 0 = print everything
