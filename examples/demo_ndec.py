"""
ndec — Live Demo: Keystream, Digests, Rounds, Full Cipher
=========================================================
Run:  python examples/demo_ndec.py

Walks a message through each NDEC stage and prints the intermediate
bytes, then does a full seal/decrypt round trip with timing.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ndec.direction                 import Direction
from ndec.gamma                     import gamma, gamma_hash, GAMMA_ITERS
from ndec.password                  import password_hash
from ndec.rounds.round1_diffusion   import round1
from ndec.rounds.round2_rotation    import round2
from ndec.rounds.round3_feedback    import round3
from ndec.cipher                    import NDECCipher

LINE = "═" * 70
MSG  = b"White knight is sliding down the poker, he balances very badly!\r\n"
P1   = b"password"
P2   = b"abcdef"
IV   = 0x1C

def header(step, name):
    print(f"\n{LINE}")
    print(f"  {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  ndec — NDEC Legacy Cipher Demo")
print(LINE)
print(f"  Message: {MSG.decode().strip()}")
print(f"  p1={P1.decode()!r}  p2={P2.decode()!r}  iv=0x{IV:02x}\n")

# ── KEYSTREAM ────────────────────────────────────────────────────────────────
header("Step 1", "KEYSTREAM — gamma(password1)")
g = gamma(P1)
ok("Buffer size",      f"{len(g)} bytes")
ok("Generated prefix", g[:GAMMA_ITERS].hex()[:48] + "...")
ok("Untouched tail",   g[GAMMA_ITERS:].hex()[:48] + "...")

# ── DIGESTS ──────────────────────────────────────────────────────────────────
header("Step 2", "DIGESTS — gamma_hash / password_hash")
gh = gamma_hash(g)
ph = password_hash(P2)
ok("gamma_hash",    f"0x{gh:02x}")
ok("password_hash", f"0x{ph:02x}")

# ── ROUNDS ───────────────────────────────────────────────────────────────────
header("Step 3", "ROUNDS — diffusion → rotation → feedback")
data = bytearray(MSG)
round1(data, g, Direction.ENCRYPT)
ok("After round 1", data.hex()[:48] + "...")
round2(data, g, IV, ph, Direction.ENCRYPT)
ok("After round 2", data.hex()[:48] + "...")
round3(data, P2, gh, Direction.ENCRYPT)
ok("After round 3", data.hex()[:48] + "...")

# ── FULL CIPHER ──────────────────────────────────────────────────────────────
header("Step 4", "NDECCipher — seal / decrypt")
t0      = time.perf_counter()
nd      = NDECCipher(P1, P2)
bundle  = nd.seal(MSG, IV)
pt      = nd.decrypt(bundle)
elapsed = time.perf_counter() - t0
ok("Bundle",     f"{len(bundle)} bytes (iv=1 + data={len(MSG)})")
ok("Matches",    str(bundle[1:] == bytes(data)))
ok("Round-trip", f"{elapsed*1000:.2f} ms")
ok("Decrypted",  pt.decode().strip())

# ── Throughput ───────────────────────────────────────────────────────────────
header("Step 5", "THROUGHPUT — 64 KB random payload")
big     = os.urandom(64 * 1024)
t0      = time.perf_counter()
sealed  = nd.seal(big)
back    = nd.decrypt(sealed)
elapsed = time.perf_counter() - t0
ok("Random IV",  f"0x{sealed[0]:02x}")
ok("Round-trip", f"{elapsed*1000:.0f} ms")
ok("Intact",     str(back == big))

print(f"\n{LINE}")
print("  NDEC: legacy-format compatibility only. No integrity, no KDF.")
print(LINE + "\n")
