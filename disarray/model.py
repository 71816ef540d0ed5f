"""Mesh data of the RM2 model format: geometry, indices, UVs and bone weights."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, Sequence

__all__ = ["RM2Error", "AssignedBone", "AssignedBones", "Model"]

Triple = tuple[float, float, float]
Pair = tuple[float, float]


class RM2Error(ValueError):
    """Raised when RM2 data is truncated or malformed."""


def _read_values(stream: BinaryIO, code: str, count: int, what: str) -> tuple:
    layout = f"<{count}{code}"
    size = struct.calcsize(layout)
    raw = stream.read(size)
    if len(raw) != size:
        raise RM2Error(f"truncated RM2 data while reading {what}")
    return struct.unpack(layout, raw)


def _read_int(stream: BinaryIO, what: str) -> int:
    return _read_values(stream, "i", 1, what)[0]


def _read_uint(stream: BinaryIO, what: str) -> int:
    return _read_values(stream, "I", 1, what)[0]


def _group(values: Sequence[float], size: int) -> list[tuple]:
    it = iter(values)
    return list(zip(*[it] * size))


@dataclass
class AssignedBone:
    """One bone influencing a vertex, with its weight."""

    bone_id: int = 0
    weight: float = 0.0


@dataclass
class AssignedBones:
    """The bones that influence a single vertex."""

    bones: list[AssignedBone] = field(default_factory=list)

    def load(self, stream: BinaryIO) -> None:
        """Read an influence count, bone indices and weights; raise RM2Error if short."""
        count = _read_int(stream, "bone influence count")
        if count < 0:
            raise RM2Error(f"negative bone influence count {count}")
        if not count:
            return
        ids = _read_values(stream, "I", count, "bone indices")
        weights = _read_values(stream, "f", count, "bone weights")
        self.bones.extend(AssignedBone(b, w) for b, w in zip(ids, weights))

    def __iter__(self):
        return iter(self.bones)

    def __len__(self) -> int:
        return len(self.bones)


@dataclass
class Model:
    """Vertices, normals, triangle indices and optional per-corner UVs of a mesh."""

    verts: list[Triple] = field(default_factory=list)
    normals: list[Triple] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    uvs: list[Pair] = field(default_factory=list)
    vertex_count: int = 0
    face_count: int = 0
    is_uvs: bool = False
    data: list[tuple[float, ...]] = field(default_factory=list)

    def load(self, stream: BinaryIO) -> None:
        """Read mesh data from a binary stream; raise RM2Error if it is truncated."""
        self.verts, self.normals, self.indices, self.uvs, self.data = [], [], [], [], []
        self.is_uvs = False
        self.face_count = 0

        self.vertex_count = _read_uint(stream, "vertex count")
        if self.vertex_count:
            n = self.vertex_count * 3
            self.verts = _group(_read_values(stream, "f", n, "vertices"), 3)
            self.normals = _group(_read_values(stream, "f", n, "normals"), 3)

        self.face_count = _read_uint(stream, "face count")
        if not self.face_count:
            return
        self.indices = list(_read_values(stream, "I", self.face_count * 3, "indices"))

        flag = stream.read(4)
        has_uvs = struct.unpack("<i", flag)[0] if len(flag) == 4 else 0
        self.is_uvs = has_uvs == 1
        if self.is_uvs:
            self.uvs = _group(_read_values(stream, "f", self.face_count * 6, "uvs"), 2)

    def create_unindexed_mesh(self) -> list[tuple[float, ...]]:
        """Expand the indexed mesh into one (x, y, z, nx, ny, nz) entry per triangle corner."""
        self.data = [self.verts[i] + self.normals[i] for i in self._corner_indices()]
        return self.data

    def _corner_indices(self) -> Iterable[int]:
        for index in self.indices[: self.face_count * 3]:
            if not 0 <= index < len(self.verts):
                raise RM2Error(f"vertex index {index} out of range")
            yield index