"""Shared data types for normalization results."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class NormalizationTrace:
    """Output of every pipeline stage for one input string."""

    original: str
    folded: str
    consolidated: str
    normalized: str

    def changed_stages(self) -> List[str]:
        """Return the names of the stages that altered the text."""

        stages = []
        if self.folded != self.original:
            stages.append("fold")
        if self.consolidated != self.folded:
            stages.append("consolidate")
        if self.normalized != self.consolidated:
            stages.append("strip")
        return stages
