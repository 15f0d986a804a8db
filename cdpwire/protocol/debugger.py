"""The Debugger domain: script sources."""

from __future__ import annotations

from dataclasses import dataclass

from cdpwire.protocol.method import Method


@dataclass
class GetScriptSource(Method):
    NAME = "Debugger.getScriptSource"

    script_id: str = ""

    def parse_result(self, result: dict) -> str:
        return result["scriptSource"]


@dataclass
class Enable(Method):
    NAME = "Debugger.enable"


@dataclass
class Disable(Method):
    NAME = "Debugger.disable"