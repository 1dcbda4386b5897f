from __future__ import annotations

from dataclasses import dataclass, field

from objkit.jsonbridge.codec import BridgeConfig


@dataclass(frozen=True)
class ObjkitConfig:
    log_level: str = "WARNING"
    bridge: BridgeConfig = field(default_factory=BridgeConfig)
