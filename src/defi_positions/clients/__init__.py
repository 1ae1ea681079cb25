from .fullnode import FullnodeClient

__all__ = ["FullnodeClient"]
