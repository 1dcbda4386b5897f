from __future__ import annotations

import dataclasses

import pytest

from objkit.config import ObjkitConfig
from objkit.jsonbridge import BridgeConfig


class TestObjkitConfig:
    def test_default_values(self) -> None:
        cfg = ObjkitConfig()
        assert cfg.log_level == "WARNING"
        assert cfg.bridge == BridgeConfig()

    def test_bridge_defaults(self) -> None:
        bridge = BridgeConfig()
        assert bridge.sort_keys is False
        assert bridge.indent is None
        assert bridge.ensure_ascii is False

    def test_custom_values(self) -> None:
        cfg = ObjkitConfig(log_level="DEBUG", bridge=BridgeConfig(sort_keys=True, indent=4))
        assert cfg.log_level == "DEBUG"
        assert cfg.bridge.sort_keys is True
        assert cfg.bridge.indent == 4

    def test_frozen(self) -> None:
        cfg = ObjkitConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.log_level = "INFO"  # type: ignore[misc]
