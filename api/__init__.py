# api/__init__.py
"""
API 模塊：認證與簽名
"""

from .auth import build_auth_args, create_signature

__all__ = [
    "build_auth_args",
    "create_signature",
]
