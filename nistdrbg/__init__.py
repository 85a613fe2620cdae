"""Hash_DRBG, HMAC_DRBG and AES CTR_DRBG from NIST SP 800-90A Rev. 1."""

__version__ = "0.1.0"