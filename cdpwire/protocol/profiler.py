"""The Profiler domain: precise JavaScript coverage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from cdpwire.protocol.method import JsUInt, Method, ScriptId


@dataclass
class CoverageRange:
    """Coverage data for a source range."""

    start_offset: JsUInt
    end_offset: JsUInt
    count: JsUInt

    @classmethod
    def from_dict(cls, data: dict) -> "CoverageRange":
        return cls(
            start_offset=data["startOffset"],
            end_offset=data["endOffset"],
            count=data["count"],
        )


@dataclass
class FunctionCoverage:
    """Coverage data for a JavaScript function."""

    function_name: str
    ranges: List[CoverageRange]

    @classmethod
    def from_dict(cls, data: dict) -> "FunctionCoverage":
        return cls(
            function_name=data["functionName"],
            ranges=[CoverageRange.from_dict(item) for item in data["ranges"]],
        )


@dataclass
class ScriptCoverage:
    """Coverage information for a single script."""

    script_id: ScriptId
    url: str
    functions: List[FunctionCoverage]

    @classmethod
    def from_dict(cls, data: dict) -> "ScriptCoverage":
        return cls(
            script_id=data["scriptId"],
            url=data["url"],
            functions=[FunctionCoverage.from_dict(item) for item in data["functions"]],
        )


@dataclass
class Enable(Method):
    NAME = "Profiler.enable"


@dataclass
class Disable(Method):
    NAME = "Profiler.disable"


@dataclass
class StartPreciseCoverage(Method):
    NAME = "Profiler.startPreciseCoverage"

    call_count: Optional[bool] = None
    detailed: Optional[bool] = None


@dataclass
class StopPreciseCoverage(Method):
    NAME = "Profiler.stopPreciseCoverage"


@dataclass
class TakePreciseCoverage(Method):
    NAME = "Profiler.takePreciseCoverage"

    def parse_result(self, result: dict) -> List[ScriptCoverage]:
        return [ScriptCoverage.from_dict(item) for item in result["result"]]