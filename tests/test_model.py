import io
import struct

import pytest

from disarray.model import AssignedBone, AssignedBones, Model, RM2Error


def _mesh_bytes(verts, normals, indices, uvs=None, uv_flag=None):
    out = struct.pack("<I", len(verts))
    for v in verts:
        out += struct.pack("<3f", *v)
    for n in normals:
        out += struct.pack("<3f", *n)
    out += struct.pack("<I", len(indices) // 3)
    if indices:
        out += struct.pack(f"<{len(indices)}I", *indices)
        if uv_flag is not None:
            out += struct.pack("<i", uv_flag)
            if uvs:
                for uv in uvs:
                    out += struct.pack("<2f", *uv)
    return out


VERTS = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 1.0, 0.0)]
NORMALS = [(0.0, 0.0, 1.0)] * 4
INDICES = [0, 1, 2, 2, 1, 3]
UVS = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0)]


def _load(raw):
    model = Model()
    model.load(io.BytesIO(raw))
    return model


def test_load_round_trip_with_uvs():
    model = _load(_mesh_bytes(VERTS, NORMALS, INDICES, UVS, uv_flag=1))
    assert model.vertex_count == len(VERTS)
    assert model.face_count == len(INDICES) // 3
    assert model.verts == VERTS
    assert model.normals == NORMALS
    assert model.indices == INDICES
    assert model.is_uvs is True
    assert model.uvs == UVS


def test_missing_uv_flag_means_no_uvs():
    model = _load(_mesh_bytes(VERTS, NORMALS, INDICES))
    assert model.is_uvs is False
    assert model.uvs == []
    assert model.indices == INDICES


@pytest.mark.parametrize("flag", [0, 2, -1])
def test_uv_flag_other_than_one_disables_uvs(flag):
    model = _load(_mesh_bytes(VERTS, NORMALS, INDICES, uv_flag=flag))
    assert model.is_uvs is False
    assert model.uvs == []


def test_empty_mesh_loads():
    model = _load(struct.pack("<II", 0, 0))
    assert model.vertex_count == 0
    assert model.face_count == 0
    assert model.verts == [] and model.indices == []


def test_load_leaves_following_bytes_unread():
    stream = io.BytesIO(_mesh_bytes(VERTS, NORMALS, INDICES, UVS, uv_flag=1) + b"TAIL")
    Model().load(stream)
    assert stream.read() == b"TAIL"


@pytest.mark.parametrize("cut", [2, 10, 60, 100, 110])
def test_truncated_mesh_raises(cut):
    raw = _mesh_bytes(VERTS, NORMALS, INDICES, UVS, uv_flag=1)
    with pytest.raises(RM2Error):
        _load(raw[:cut])


def test_truncated_uvs_raise():
    raw = _mesh_bytes(VERTS, NORMALS, INDICES, UVS, uv_flag=1)
    with pytest.raises(RM2Error):
        _load(raw[:-4])


def test_unindexed_mesh_follows_indices():
    model = _load(_mesh_bytes(VERTS, NORMALS, INDICES))
    data = model.create_unindexed_mesh()
    assert data is model.data
    assert len(data) == len(INDICES)
    for corner, index in zip(data, INDICES):
        assert corner == VERTS[index] + NORMALS[index]


def test_unindexed_mesh_of_empty_model_is_empty():
    model = _load(struct.pack("<II", 0, 0))
    assert model.create_unindexed_mesh() == []


def test_unindexed_mesh_rejects_bad_index():
    model = _load(_mesh_bytes(VERTS, NORMALS, [0, 1, 9]))
    with pytest.raises(RM2Error):
        model.create_unindexed_mesh()


def test_assigned_bones_round_trip():
    raw = struct.pack("<i", 2) + struct.pack("<2I", 3, 5) + struct.pack("<2f", 0.25, 0.75)
    bones = AssignedBones()
    bones.load(io.BytesIO(raw))
    assert bones.bones == [AssignedBone(3, 0.25), AssignedBone(5, 0.75)]
    assert len(bones) == 2


def test_assigned_bones_zero_count():
    bones = AssignedBones()
    bones.load(io.BytesIO(struct.pack("<i", 0)))
    assert bones.bones == []


def test_assigned_bones_missing_count_raises():
    with pytest.raises(RM2Error):
        AssignedBones().load(io.BytesIO(b""))


def test_assigned_bones_missing_weights_raises():
    raw = struct.pack("<i", 2) + struct.pack("<2I", 3, 5)
    with pytest.raises(RM2Error):
        AssignedBones().load(io.BytesIO(raw))


def test_assigned_bones_negative_count_raises():
    with pytest.raises(RM2Error):
        AssignedBones().load(io.BytesIO(struct.pack("<i", -1)))