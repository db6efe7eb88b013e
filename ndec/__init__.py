"""
ndec — NDEC legacy byte cipher
==============================
Bit-exact reimplementation of the reverse-engineered NDEC transform:
two passwords, a one-byte IV, and three invertible rounds.

Components:
    gamma          — 255-byte keystream derived from password 1
    gamma_hash     — single-byte digest of the gamma buffer
    password_hash  — single-byte digest of password 2
    Round 1        — global XOR/sum diffusion
    Round 2        — keystream-chained rotation cipher (IV chained)
    Round 3        — password-chained feedback cipher
    NDECCipher     — the context tying it all together

Bundle format: iv(1) || ciphertext

Not a modern cipher: no authentication, no integrity, no KDF hardening.
Use it to read and write existing NDEC data, nothing else.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .direction                  import Direction
from .gamma                      import gamma, gamma_hash, GAMMA_SIZE, GAMMA_ITERS
from .password                   import password_hash
from .rounds.round1_diffusion    import round1
from .rounds.round2_rotation     import round2
from .rounds.round3_feedback     import round3
from .cipher                     import NDECCipher

__all__ = [
    "Direction",
    "gamma",
    "gamma_hash",
    "password_hash",
    "round1",
    "round2",
    "round3",
    "NDECCipher",
    "GAMMA_SIZE",
    "GAMMA_ITERS",
]
