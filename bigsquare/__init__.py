from .errors import BigSquareError, ExponentTooWide, InvalidWitness, OperandTooWide
from .memo import ModExpCache, cache_key
from .sqmult import mod_pow, sq_mod_power
from .miller_rabin import DETERMINISTIC_WITNESSES, is_probable_prime, witness_verdicts
from .error_analysis import ErrorBucket, ScanResult, error_rate, odd_candidates, scan_errors
__all__ = ["BigSquareError", "ExponentTooWide", "InvalidWitness", "OperandTooWide",
           "ModExpCache", "cache_key", "mod_pow", "sq_mod_power",
           "DETERMINISTIC_WITNESSES", "is_probable_prime", "witness_verdicts",
           "ErrorBucket", "ScanResult", "error_rate", "odd_candidates", "scan_errors"]
