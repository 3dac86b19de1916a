from .gate import AuthGate, hash_password, verify_password

__all__ = ["AuthGate", "hash_password", "verify_password"]
