"""
textcrypt — Live Demo: All Three Tiers
======================================
Run:  python examples/demo_all_tiers.py [--input-mode plaintext] [--output-mode hex] [-v]

Shows every tier encrypting and decrypting the same message under the
chosen input / output modes, with timing for each round trip.
"""

import sys, os, time, argparse, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from textcrypt import (
    AESCipher, CaesarCipher, CipherError, VigenereCipher,
    mode_to_string, parse_mode,
)
from textcrypt import codec

LINE = "═" * 70
MSG  = "Attack at dawn! Meet at gate #3, 06:00."


def header(tier, name):
    print(f"\n{LINE}")
    print(f"  Tier {tier} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def fail(label, err):
    print(f"  ✗  {label}: {err}")


def reframe(text, from_mode, to_mode):
    return codec.encode(codec.decode(text, from_mode), to_mode)


def run_tier(tier, name, cipher, message):
    header(tier, name)
    print(f"  {cipher}".replace("\n", "\n  "))
    t0 = time.perf_counter()
    try:
        ct = cipher.encrypt(message)
        if isinstance(cipher, AESCipher):
            # AES ciphertext is always Base64
            pt = cipher.decrypt(ct)
        else:
            cfg = cipher.config
            pt = cipher.decrypt(reframe(ct, cfg.output_mode, cfg.input_mode))
    except CipherError as err:
        fail("Round-trip", err)
        return False
    elapsed = time.perf_counter() - t0
    ok("Encrypted",  ct[:60] + ("..." if len(ct) > 60 else ""))
    ok("Decrypted",  pt[:60] + ("..." if len(pt) > 60 else ""))
    ok("Round-trip", f"{elapsed*1000:.2f} ms")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="textcrypt three-tier demo")
    parser.add_argument("--input-mode",  default="plaintext", help="plaintext | base64 | hex")
    parser.add_argument("--output-mode", default="plaintext", help="plaintext | base64 | hex")
    parser.add_argument("--message",     default=MSG)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=" %(levelname)s %(name)s: %(message)s")

    in_mode, out_mode = parse_mode(args.input_mode), parse_mode(args.output_mode)

    print(f"\n{LINE}")
    print("  textcrypt — Three-Tier Demo")
    print(LINE)
    print(f"  Modes:   {mode_to_string(in_mode)} -> {mode_to_string(out_mode)}")

    try:
        ciphers = [
            (1, "CLASSICAL — Caesar (ROT13)",      CaesarCipher(13, in_mode, out_mode)),
            (2, "LEGACY — Vigenère",               VigenereCipher("LEMON", in_mode, out_mode)),
            (3, "SYMMETRIC — AES-128-CBC",         AESCipher(AESCipher.generate_key(128),
                                                             AESCipher.generate_iv(),
                                                             in_mode, out_mode)),
        ]
        message = codec.encode(args.message, in_mode)
    except CipherError as err:
        fail("Setup", err)
        return 2
    print(f"  Message: {args.message}")

    results = [run_tier(tier, name, cipher, message) for tier, name, cipher in ciphers]

    print(f"\n{LINE}")
    print(f"  {sum(results)} of {len(results)} tiers round-tripped")
    print(f"{LINE}\n")
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
