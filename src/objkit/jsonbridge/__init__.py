from objkit.jsonbridge.codec import BridgeConfig, decode, encode
from objkit.jsonbridge.errors import (
    BridgeError,
    ConstructionError,
    EncodeError,
    ParseError,
)

__all__ = [
    "encode",
    "decode",
    "BridgeConfig",
    "BridgeError",
    "ParseError",
    "ConstructionError",
    "EncodeError",
]
