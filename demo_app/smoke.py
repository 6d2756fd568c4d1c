# demo_app/smoke.py — one-shot post-deploy check of / and /work
import os, sys, time, requests
from demo_app.app import get_flavor, WORK_DELAY_MS

# --- Probe config ---
TARGET_URL = os.getenv("TARGET_URL", "http://localhost:8080")
TIMEOUT_S  = float(os.getenv("TIMEOUT_S", "2.5"))

def probe(sess, url, timeout=TIMEOUT_S):
    t0 = time.perf_counter()
    try:
        r = sess.get(url, timeout=timeout)
        status, body = r.status_code, r.text
    except requests.RequestException as e:
        status, body = None, str(e)
    dt_ms = (time.perf_counter() - t0) * 1000.0
    return status, body, dt_ms

def _result(path, status, body, ms, expected, min_ms=0.0):
    if status is None:
        reason = f"request failed: {body}"
    elif status != 200:
        reason = f"status {status}"
    elif body != expected:
        reason = f"unexpected body {body!r}"
    elif ms < min_ms:
        reason = f"too fast ({ms:.1f}ms < {min_ms:.0f}ms)"
    else:
        reason = "ok"
    return {"path": path, "status": status, "ok": reason == "ok",
            "elapsed_ms": round(ms, 1), "reason": reason}

def check(base_url=TARGET_URL, flavor=None, timeout=TIMEOUT_S, sess=None):
    strings = get_flavor(flavor)
    sess = sess or requests.Session()
    base = base_url.rstrip("/")
    out = []
    status, body, ms = probe(sess, base + "/", timeout)
    out.append(_result("/", status, body, ms, strings["root_body"]))
    status, body, ms = probe(sess, base + "/work", timeout)
    out.append(_result("/work", status, body, ms, strings["work_body"], min_ms=WORK_DELAY_MS))
    return out

def main():
    results = check(TARGET_URL, timeout=TIMEOUT_S)
    for r in results:
        print(f"[smoke] {TARGET_URL}{r['path']} status={r['status']} "
              f"elapsed_ms={r['elapsed_ms']} {r['reason']}", flush=True)
    return 0 if all(r["ok"] for r in results) else 1

if __name__ == "__main__":
    sys.exit(main())
