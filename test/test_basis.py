import numpy as np
import unittest

from flythrough import build_camera_basis, PreconditionError


def random_unit_vector(rng):
    v = rng.standard_normal(3)
    return v / np.linalg.norm(v)


class TestCameraBasis(unittest.TestCase):

    def test_canonical(self):
        across, forward, upward = build_camera_basis(
            np.array([0.0, 0.0, -1.0]), np.array([0.0, 1.0, 0.0]))
        np.testing.assert_allclose(across, [1, 0, 0], atol=1e-12)
        np.testing.assert_allclose(forward, [0, 0, -1], atol=1e-12)
        np.testing.assert_allclose(upward, [0, 1, 0], atol=1e-12)

    def test_orthonormal(self):
        rng = np.random.default_rng(0)
        for _ in range(200):
            look, up = random_unit_vector(rng), random_unit_vector(rng)
            if abs(np.dot(look, up)) > 0.99:
                continue
            across, forward, upward = build_camera_basis(look, up)
            for axis in (across, forward, upward):
                self.assertAlmostEqual(np.linalg.norm(axis), 1.0, places=12)
            self.assertAlmostEqual(np.dot(across, forward), 0.0, places=12)
            self.assertAlmostEqual(np.dot(across, upward), 0.0, places=12)
            self.assertAlmostEqual(np.dot(forward, upward), 0.0, places=12)

    def test_upward_is_decoupled_from_up(self):
        look = np.array([0.0, np.sin(np.pi / 6), -np.cos(np.pi / 6)])
        _, _, upward = build_camera_basis(look, np.array([0.0, 1.0, 0.0]))
        self.assertAlmostEqual(np.dot(upward, look), 0.0, places=12)
        self.assertLess(upward[1], 1.0)

    def test_non_unit_up(self):
        a = build_camera_basis(np.array([1.0, 0.0, 0.0]), np.array([0.0, 5.0, 0.0]))
        b = build_camera_basis(np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0]))
        for x, y in zip(a, b):
            np.testing.assert_allclose(x, y, atol=1e-12)

    def test_parallel_is_rejected(self):
        with self.assertRaises(PreconditionError) as ctx:
            build_camera_basis(np.array([0.0, 1.0, 0.0]), np.array([0.0, 1.0, 0.0]))
        self.assertEqual(ctx.exception.field, "across")

    def test_zero_is_rejected(self):
        with self.assertRaises(PreconditionError):
            build_camera_basis(np.zeros(3), np.array([0.0, 1.0, 0.0]))

if __name__ == '__main__':
    unittest.main()
