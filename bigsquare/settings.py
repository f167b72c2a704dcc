# bigsquare/settings.py
# Environment-driven defaults, read once at import.
import os

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1

# Size of memo table; 32-bit key and 32-bit value per entry
MEMOSIZE = int(os.getenv("BIGSQUARE_MEMOSIZE", str(0x010000)))

# Miller-Rabin error scan
MR_LOW_BOUND  = int(os.getenv("MR_LOW_BOUND", "105000"))
MR_HIGH_BOUND = int(os.getenv("MR_HIGH_BOUND", "115000"))
MR_TOP_K      = int(os.getenv("MR_TOP_K", "10"))

# Letter table demo
RSA_EXPONENT = int(os.getenv("RSA_EXPONENT", "11"))
RSA_MODULUS  = int(os.getenv("RSA_MODULUS", "3763"))

# error_rate is O(n) Miller-Rabin runs; keep web requests bounded
WEB_MAX_N = int(os.getenv("BIGSQUARE_WEB_MAX_N", "20000"))
