"""Labeled resume sections produced by the segmenter."""

from typing import Dict, Iterator, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

SectionKind = Literal[
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
    "achievements",
    "certifications",
]


class SectionSet(BaseModel):
    """
    At most one text block per section kind, plus the order the blocks were detected in.
    Built once per document by the segmenter and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    summary: Optional[str] = Field(default=None, description="Summary / profile / objective block")
    experience: Optional[str] = Field(default=None, description="Work experience block")
    education: Optional[str] = Field(default=None, description="Education block")
    skills: Optional[str] = Field(default=None, description="Skills block")
    projects: Optional[str] = Field(default=None, description="Projects / portfolio block")
    achievements: Optional[str] = Field(default=None, description="Achievements / awards block")
    certifications: Optional[str] = Field(default=None, description="Certifications / licenses block")
    order: Tuple[SectionKind, ...] = Field(default=(), description="Kinds in detection order")

    @classmethod
    def from_blocks(cls, blocks: List[Tuple[SectionKind, str]]) -> "SectionSet":
        """
        Build from (kind, content) pairs in document order.
        A repeated kind keeps its last block, which moves to the end of the order.
        """
        contents: Dict[str, str] = {}
        order: List[SectionKind] = []
        for kind, content in blocks:
            if kind in contents:
                order.remove(kind)
            contents[kind] = content
            order.append(kind)
        return cls(order=tuple(order), **contents)

    def ordered_contents(self) -> Iterator[Tuple[SectionKind, str]]:
        for kind in self.order:
            yield kind, getattr(self, kind)

    def is_empty(self) -> bool:
        return not self.order

    def __len__(self) -> int:
        return len(self.order)
