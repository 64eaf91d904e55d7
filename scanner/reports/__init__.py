"""Analysis result assembly."""

from scanner.reports.assembler import AnalysisResult, assemble_result

__all__ = [
    "AnalysisResult",
    "assemble_result",
]
