"""Table of labeled equations shared by the two passes."""

from __future__ import annotations

from attrs import define


@define(slots=True, frozen=True)
class LabelInfo:
    """Where a labeled equation lives and how it is numbered.

    Attributes:
        num: Rendered equation number such as ``1.2.3``.
        path: Path of the chapter defining the label.
    """

    num: str
    path: str

    def as_dict(self) -> dict[str, str]:
        return {"num": self.num, "path": self.path}


LabelTable = dict[str, LabelInfo]
