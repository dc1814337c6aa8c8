"""
shellcrypt - Main Entry Point
Runs the known-answer self-test for every primitive.
"""

import sys

from . import base64, compare, hmac, md5, random_bytes, sha1, sha256, sha384, sha512


# (label, computed, expected)
def _known_answers():
    return [
        ("MD5('')", md5(""), "D41D8CD98F00B204E9800998ECF8427E"),
        ("MD5('abc')", md5("abc"), "900150983CD24FB0D6963F7D28E17F72"),
        ("SHA-1('')", sha1(""), "DA39A3EE5E6B4B0D3255BFEF95601890AFD80709"),
        ("SHA-1('abc')", sha1("abc"), "A9993E364706816ABA3E25717850C26C9CD0D89D"),
        ("SHA-256('')", sha256(""),
         "E3B0C44298FC1C149AFBF4C8996FB92427AE41E4649B934CA495991B7852B855"),
        ("SHA-256('abc')", sha256("abc"),
         "BA7816BF8F01CFEA414140DE5DAE2223B00361A396177A9CB410FF61F20015AD"),
        ("SHA-384('abc')", sha384("abc"),
         "CB00753F45A35E8BB5A03D699AC65007272C32AB0EDED1631A8B605A43FF5BED"
         "8086072BA1E7CC2358BAECA134C825A7"),
        ("SHA-512('abc')", sha512("abc"),
         "DDAF35A193617ABACC417349AE20413112E6FA4E89A97EA20A9EEEE64B55D39A"
         "2192992A274FC1A836BA3C23A3FEEBBD454D4423643CE80E2A9AC94FA54CA49F"),
        ("HMAC-SHA256(RFC 4231 #2)",
         hmac("sha256", "what do ya want for nothing?", "Jefe"),
         "5BDCC146BF60754E6A042426089575C75A003F089D2739839DEC58B964EC3843"),
        ("Base64 encode", base64("Hello", 0), "SGVsbG8="),
        ("Base64 decode", base64("SGVsbG8=", 1), "Hello"),
        ("Compare", compare("md5", "", "d41d8cd98f00b204e9800998ecf8427e"), True),
        ("Random bytes", len(random_bytes(32)), 32),
    ]


def main():
    """Main entry point for shellcrypt."""
    print("=" * 50)
    print("shellcrypt self-test")
    print("=" * 50)

    all_passed = True
    for label, got, expected in _known_answers():
        passed = got == expected
        all_passed = all_passed and passed
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {status}  {label}")
        if not passed:
            print(f"      Expected: {expected}")
            print(f"      Got:      {got}")

    print("=" * 50)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
