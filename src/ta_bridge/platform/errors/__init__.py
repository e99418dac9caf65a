from .ta_bridge_error import ErrorCode, TaBridgeError

__all__ = ["ErrorCode", "TaBridgeError"]
