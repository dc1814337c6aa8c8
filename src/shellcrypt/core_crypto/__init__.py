# Core Cryptography Module
"""
Core cryptographic implementations including:
- MD5, SHA-1, SHA-256, SHA-384 and SHA-512 hashing
- HMAC over any of the above
- Base64 encoding and decoding
- Hash comparison
"""
