#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                          SHELLCRYPT LIVE DEMO                                 ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script walks through shellcrypt's primitives:
- Message digests (MD5, SHA-1, SHA-256, SHA-384, SHA-512)
- HMAC over any digest
- Base64 with full UTF-8 support
- Hash comparison
- Hashing a file and reading OS entropy

Pass --no-pause to run straight through.
"""

import os
import sys
import tempfile

import shellcrypt
from shellcrypt import Algorithm
from shellcrypt.core_crypto.algorithms import DESCRIPTORS, hex_digest


PAUSE = "--no-pause" not in sys.argv


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    if not PAUSE:
        return
    print(f"\n  [PAUSE] {message}")
    input()


def main():
    print("\n")
    print("╔" + "═" * 68 + "╗")
    print("║" + "SHELLCRYPT - CRYPTOGRAPHIC PRIMITIVES FROM SCRATCH".center(68) + "║")
    print("╚" + "═" * 68 + "╝")

    pause("Press ENTER to begin the demonstration...")

    print_header("PART 1: MESSAGE DIGESTS")
    message = "The quick brown fox jumps over the lazy dog"
    print(f"\n  Message: {message!r}")
    for algo in Algorithm:
        print(f"  {DESCRIPTORS[algo].name:<8} {hex_digest(algo, message)}")

    print_step(1, "One changed character, completely different digest")
    print(f"  SHA-256('...dog') {shellcrypt.sha256(message)}")
    print(f"  SHA-256('...cog') {shellcrypt.sha256(message[:-3] + 'cog')}")

    pause()

    print_header("PART 2: HMAC")
    key = "super secret key"
    print(f"\n  Key:     {key!r}")
    print(f"  Message: {message!r}")
    for algo in ("md5", "sha1", "sha256"):
        print(f"  HMAC-{algo.upper():<6} {shellcrypt.hmac(algo, message, key)}")

    print_step(2, "Keys longer than the block size are hashed first")
    long_key = "k" * 200
    print(f"  HMAC-SHA256 (200-byte key) {shellcrypt.hmac('sha256', message, long_key)}")

    pause()

    print_header("PART 3: BASE64")
    for text in ["Hello", "héllo wörld", "emoji 😀"]:
        encoded = shellcrypt.base64(text, 0)
        decoded = shellcrypt.base64(encoded, 1)
        print(f"\n  {text!r:<18} -> {encoded:<24} -> {decoded!r}")

    pause()

    print_header("PART 4: HASH COMPARISON")
    stored = shellcrypt.sha256("correct horse battery staple")
    print(f"\n  Stored hash: {stored.lower()}")
    for guess in ["password123", "correct horse battery staple"]:
        result = shellcrypt.compare("sha256", guess, stored.lower())
        print(f"  {guess!r:<32} {'✓ MATCH' if result else '✗ no match'}")

    pause()

    print_header("PART 5: FILES AND ENTROPY")
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "demo.txt")
        with open(path, "wb") as f:
            f.write(message.encode("utf-8") * 200)

        data = shellcrypt.byte_dump(path)
        print(f"\n  Read {len(data)} bytes from {os.path.basename(path)}")
        print(f"  SHA-256 of file: {shellcrypt.hash_file('sha256', path)}")

    print_step(3, "Random bytes from the OS entropy device")
    for _ in range(3):
        print(f"  {shellcrypt.random_bytes(16).hex()}")

    print("\n" + "═" * 70)
    print("  Demo complete.")
    print("═" * 70 + "\n")


if __name__ == "__main__":
    main()
