from dataclasses import dataclass

import pytest

from animray.matrix import Matrix
from animray.movable import Movable, Transformable


def _translation(x, y, z):
    return Matrix([1, 0, 0, x, 0, 1, 0, y, 0, 0, 1, z, 0, 0, 0, 1])


def _translate_pair(x, y, z):
    return (_translation(x, y, z), _translation(-x, -y, -z))


@dataclass(frozen=True)
class _Ray:
    origin: tuple
    direction: tuple

    def __mul__(self, matrix):
        start = matrix @ (*self.origin, 1)
        end_point = tuple(o + d for o, d in zip(self.origin, self.direction))
        end = matrix @ (*end_point, 1)
        return _Ray(
            tuple(start[:3]), tuple(e - s for e, s in zip(end[:3], start[:3]))
        )


class _Recorder:
    def __init__(self, hit):
        self.hit = hit
        self.seen = []

    def intersects(self, ray, epsilon):
        self.seen.append((ray, epsilon))
        return self.hit

    def occludes(self, ray, epsilon):
        self.seen.append((ray, epsilon))
        return self.hit is not None

    def __call__(self, x, y):
        return _Ray((x, y, 0), (0, 0, 1))


class _Translate:
    def __init__(self, x, y, z):
        self._pair = _translate_pair(x, y, z)

    def forward(self):
        return self._pair[0]

    def backward(self):
        return self._pair[1]


def test_transformable_starts_as_identity():
    t = Transformable()
    assert t.forward == Matrix()
    assert t.backward == Matrix()


def test_transformable_swaps_pair():
    fwd, back = _translate_pair(1, 2, 3)
    t = Transformable().apply((fwd, back))
    assert t.forward == back
    assert t.backward == fwd


def test_transformable_accepts_object_with_methods():
    t = Transformable().apply(_Translate(1, 2, 3))
    fwd, back = _translate_pair(1, 2, 3)
    assert t.forward == back
    assert t.backward == fwd


def test_transformable_rejects_non_transform():
    with pytest.raises(TypeError):
        Transformable().apply("not a transform")


def test_transformable_rejects_wrong_sized_tuple():
    with pytest.raises(TypeError):
        Transformable().apply((Matrix(),))


def test_untransformed_movable_passes_rays_through():
    hit = _Ray((0, 0, 0), (0, 0, 1))
    instance = _Recorder(hit)
    ray = _Ray((1, 2, 3), (0, 0, 1))
    assert Movable(instance).intersects(ray, 0) == hit
    assert instance.seen == [(ray, 0)]


def test_translation_moves_ray_into_local_space_and_hit_back():
    hit = _Ray((0, 0, 0), (0, 0, -1))
    instance = _Recorder(hit)
    movable = Movable(instance).transform(_translate_pair(0, 0, 5))
    result = movable.intersects(_Ray((0, 0, 0), (0, 0, 1)), 0.5)
    assert instance.seen == [(_Ray((0, 0, -5), (0, 0, 1)), 0.5)]
    assert result == _Ray((0, 0, 5), (0, 0, -1))


def test_translations_compose():
    instance = _Recorder(None)
    movable = Movable(instance)
    movable.transform(_translate_pair(1, 0, 0)).transform(_Translate(2, 0, 0))
    movable.intersects(_Ray((0, 0, 0), (0, 0, 1)), 0)
    assert instance.seen[0][0] == _Ray((-1 - 2, 0, 0), (0, 0, 1))


def test_miss_returns_none():
    movable = Movable(_Recorder(None)).transform(_translate_pair(3, 3, 3))
    assert movable.intersects(_Ray((0, 0, 0), (0, 0, 1)), 0) is None


def test_occludes_uses_local_ray():
    instance = _Recorder(_Ray((0, 0, 0), (0, 0, 1)))
    movable = Movable(instance).transform(_translate_pair(0, 4, 0))
    assert movable.occludes(_Ray((0, 0, 0), (1, 0, 0)), 0.1) is True
    assert instance.seen == [(_Ray((0, -4, 0), (1, 0, 0)), 0.1)]


def test_occludes_false_on_miss():
    assert Movable(_Recorder(None)).occludes(_Ray((0, 0, 0), (1, 0, 0)), 0) is False


def test_camera_ray_is_moved_into_world_space():
    camera = Movable(_Recorder(None)).transform(_translate_pair(0, 0, -9))
    assert camera(2, 3) == _Ray((2, 3, -9), (0, 0, 1))


def test_transform_returns_same_movable():
    movable = Movable(_Recorder(None))
    assert movable.transform(_translate_pair(1, 1, 1)) is movable