"""RM2 model files: subsets of skinned meshes with per-bone animation frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterator, Sequence, Union

from .model import AssignedBones, Model, RM2Error, _read_int, _read_uint, _read_values

__all__ = ["MAGIC", "Matrix", "PoseBone", "Subset", "SubsetCollection"]

MAGIC = b"RM2"

Matrix = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]

IDENTITY: Matrix = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

_SEPARATOR = "-" * 52 + "\n"
_DUMPED_FRAME = 29


def _rows(values: Sequence[float]) -> Matrix:
    it = iter(values)
    return tuple(zip(it, it, it, it))  # type: ignore[return-value]


@dataclass
class PoseBone:
    """The pose matrix of one bone in one animation frame, stored row by row."""

    mat: Matrix = IDENTITY


@dataclass
class Subset:
    """A single mesh of a model file with its bone weights and animation."""

    mesh: Model = field(default_factory=Model)
    vertsbones: list[AssignedBones] = field(default_factory=list)
    anim: list[list[PoseBone]] = field(default_factory=list)
    frame_count: int = 0
    bone_count: int = 0

    def load(self, stream: BinaryIO) -> None:
        """Read one subset from a binary stream; raise RM2Error if the data is short."""
        self.mesh = Model()
        self.vertsbones = []
        self.anim = []

        self.mesh.load(stream)
        self.mesh.create_unindexed_mesh()

        self.bone_count = _read_uint(stream, "bone count")
        if self.bone_count:
            for _ in range(self.mesh.vertex_count):
                bones = AssignedBones()
                bones.load(stream)
                self.vertsbones.append(bones)

        frames = _read_int(stream, "frame count")
        if frames < 0:
            raise RM2Error(f"negative frame count {frames}")
        self.frame_count = frames

        for _ in range(self.bone_count):
            self.anim.append(
                [
                    PoseBone(_rows(_read_values(stream, "f", 16, "pose matrix")))
                    for _ in range(frames)
                ]
            )


@dataclass
class SubsetCollection:
    """All the subsets stored in one RM2 file."""

    subsets: list[Subset] = field(default_factory=list)

    def load(self, filename: Union[str, Path]) -> None:
        """Read an RM2 file and append its subsets; raise RM2Error if it is not valid."""
        with open(filename, "rb") as stream:
            magic = stream.read(len(MAGIC))
            if magic != MAGIC:
                raise RM2Error(f"{filename}: not an RM2 file")
            count = _read_uint(stream, "subset count")
            loaded = []
            for _ in range(count):
                subset = Subset()
                subset.load(stream)
                loaded.append(subset)
        self.subsets.extend(loaded)

    def dump(self, path: Union[str, Path]) -> None:
        """Write a text report of pose matrices (frame 29 only) and vertex weights."""
        with open(path, "w", encoding="utf-8") as out:
            for number, subset in enumerate(self.subsets):
                out.write(f"subset {number} [\n")
                out.write(_SEPARATOR)
                for bone_number, frames in enumerate(subset.anim):
                    out.write(f"bone: {bone_number} {{ \n")
                    if len(frames) > _DUMPED_FRAME:
                        out.write(f"{_DUMPED_FRAME}.\n")
                        for row in frames[_DUMPED_FRAME].mat:
                            out.write("".join(f"{value:2.3f} " for value in row) + "\n")
                        out.write("\n")
                    out.write("}\n")
                out.write(_SEPARATOR)
                for vertex_number, assigned in enumerate(subset.vertsbones):
                    out.write(f"vertex({vertex_number}){{ ")
                    total = 0.0
                    for bone in assigned:
                        out.write(f"bone:{bone.bone_id} w:{bone.weight:2.3f}   ")
                        total += bone.weight
                    out.write(f" =({total:2.3f}) }}\n")
                out.write("]\n")

    def framecount(self, subset: int) -> int:
        """Return the frame count of a subset, or 0 if there is no such subset."""
        if 0 <= subset < len(self.subsets):
            return self.subsets[subset].frame_count
        return 0

    def facecount(self, subset: int) -> int:
        """Return the vertex count of a subset's mesh, or 0 if there is no such subset."""
        if 0 <= subset < len(self.subsets):
            return self.subsets[subset].mesh.vertex_count
        return 0

    def __len__(self) -> int:
        return len(self.subsets)

    def __iter__(self) -> Iterator[Subset]:
        return iter(self.subsets)