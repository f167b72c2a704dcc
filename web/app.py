import time
from flask import Flask, request, jsonify
from werkzeug.exceptions import BadRequest

from bigsquare import (BigSquareError, DETERMINISTIC_WITNESSES, ModExpCache,
                       error_rate, is_probable_prime, mod_pow)
from bigsquare.settings import WEB_MAX_N

app = Flask(__name__)

def _int_arg(name: str) -> int:
    s = request.args.get(name, "").strip()
    if not s:
        raise BadRequest(f"missing {name}")
    try:
        return int(s)
    except ValueError:
        raise BadRequest(f"{name} must be integer")

def _witness_arg() -> tuple:
    s = request.args.get("witnesses", "").strip()
    if not s:
        return DETERMINISTIC_WITNESSES
    try:
        return tuple(int(t) for t in s.split(",") if t.strip())
    except ValueError:
        raise BadRequest("witnesses must be a comma-separated list of integers")

@app.errorhandler(BigSquareError)
def _bad_operand(e):
    return jsonify({"ok": False, "error": str(e)}), 400

@app.get("/api/health")
def health():
    return jsonify({"ok": True, "time": int(time.time())})

# /api/modpow?a=65&b=11&n=3763
@app.get("/api/modpow")
def api_modpow():
    a, b, n = _int_arg("a"), _int_arg("b"), _int_arg("n")
    t0 = time.perf_counter()
    # per-request memo table; the threaded server must not share one
    res = mod_pow(a, b, n, ModExpCache())
    dt_ms = int((time.perf_counter() - t0) * 1000)
    return jsonify({"ok": True, "a": a, "b": b, "n": n, "result": res, "duration_ms": dt_ms})

# /api/isprime?n=561&witnesses=2,3
@app.get("/api/isprime")
def api_isprime():
    n = _int_arg("n")
    w = _witness_arg()
    return jsonify({"ok": True, "n": n, "witnesses": list(w),
                    "probable_prime": is_probable_prime(n, w, ModExpCache())})

@app.get("/api/error_rate")
def api_error_rate():
    n = _int_arg("n")
    if n < 2 or n > WEB_MAX_N:
        raise BadRequest(f"n must be in [2, {WEB_MAX_N}]")
    t0 = time.perf_counter()
    e = error_rate(n, ModExpCache())
    dt_ms = int((time.perf_counter() - t0) * 1000)
    return jsonify({"ok": True, "n": n, "error": float(e),
                    "error_fraction": str(e), "duration_ms": dt_ms})

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8080)
