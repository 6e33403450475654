import contextlib
import io
import os
import tempfile
import numpy as np
import unittest
from unittest import mock

from flythrough import (
    CameraState,
    FlythroughConfig,
    InputFrame,
    LEFT_HANDED_BIT,
    load_flythrough_config,
    make_camera_from_yaml,
    step_camera,
    view_matrix_to_4x4,
)

CONFIG_YAML = """\
camera:
  eye: [0.0, 1.0, 5.0]
  target: [0.0, 1.0, 0.0]
  up: [0.0, 2.0, 0.0]
  eye_speed: 4.0
  degrees_per_cursor_move: 0.25
  max_pitch_rotation_degrees: 75.0
  left_handed: true
"""


class TestFlythroughConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = FlythroughConfig()
        self.assertEqual(cfg.max_pitch_rotation_degrees, 80.0)
        self.assertFalse(cfg.left_handed)
        self.assertEqual(cfg.flags, 0)

    def test_flags(self):
        self.assertEqual(FlythroughConfig(left_handed=True).flags, LEFT_HANDED_BIT)

    def test_from_dict(self):
        cfg = FlythroughConfig.from_dict({'eye_speed': '2.5', 'left_handed': 1})
        self.assertEqual(cfg.eye_speed, 2.5)
        self.assertTrue(cfg.left_handed)
        self.assertEqual(cfg.degrees_per_cursor_move, 0.1)
        self.assertEqual(FlythroughConfig.from_dict(cfg.to_dict()), cfg)


class TestCameraState(unittest.TestCase):

    def test_defaults(self):
        state = CameraState()
        np.testing.assert_array_equal(state.eye, [0, 0, 0])
        np.testing.assert_array_equal(state.look, [0, 0, -1])
        np.testing.assert_array_equal(state.up, [0, 1, 0])
        self.assertEqual(state.look.dtype, np.float32)

    def test_copies_inputs(self):
        eye = np.array([1.0, 2.0, 3.0])
        state = CameraState(eye=eye)
        eye[0] = 100.0
        self.assertEqual(state.eye[0], 1.0)

    def test_bad_shape(self):
        with self.assertRaises(ValueError):
            CameraState(eye=[1.0, 2.0])

    def test_dict(self):
        state = CameraState.from_dict({'eye': [1, 2, 3]})
        self.assertEqual(state.to_dict()['eye'], [1.0, 2.0, 3.0])
        self.assertEqual(state.to_dict()['look'], [0.0, 0.0, -1.0])


class TestCameraFromYaml(unittest.TestCase):

    def test_target(self):
        state, cfg = make_camera_from_yaml({'eye': [0, 0, 5], 'target': [0, 0, 0]})
        np.testing.assert_allclose(state.look, [0, 0, -1], atol=1e-7)
        self.assertEqual(cfg, FlythroughConfig())

    def test_look_and_up_normalized(self):
        state, _ = make_camera_from_yaml({'look': [3, 0, 4], 'up': [0, 0.5, 0]})
        np.testing.assert_allclose(state.look, [0.6, 0, 0.8], atol=1e-7)
        np.testing.assert_array_equal(state.up, [0, 1, 0])

    def test_load(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "camera.yaml")
            with open(path, "w") as f:
                f.write(CONFIG_YAML)
            with contextlib.redirect_stdout(io.StringIO()) as out:
                state, cfg = load_flythrough_config(path)
        self.assertIn("[Config] Loaded camera", out.getvalue())
        np.testing.assert_allclose(state.eye, [0, 1, 5])
        np.testing.assert_allclose(state.look, [0, 0, -1], atol=1e-7)
        np.testing.assert_allclose(state.up, [0, 1, 0])
        self.assertEqual(cfg.eye_speed, 4.0)
        self.assertEqual(cfg.degrees_per_cursor_move, 0.25)
        self.assertEqual(cfg.max_pitch_rotation_degrees, 75.0)
        self.assertEqual(cfg.flags, LEFT_HANDED_BIT)

    def test_shipped_config(self):
        path = os.path.join(os.path.dirname(__file__), os.pardir, "configs", "flythrough.yaml")
        with contextlib.redirect_stdout(io.StringIO()):
            state, cfg = load_flythrough_config(path)
        np.testing.assert_allclose(state.eye, [0, 1, 5])
        self.assertEqual(cfg, FlythroughConfig())

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_flythrough_config("/nonexistent/camera.yaml")

    def test_missing_section(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "camera.yaml")
            with open(path, "w") as f:
                f.write("render:\n  width: 640\n")
            with self.assertRaises(ValueError):
                load_flythrough_config(path)


class TestStepCamera(unittest.TestCase):

    def test_step(self):
        state = CameraState(eye=[0, 0, 0])
        cfg = FlythroughConfig(eye_speed=3.0)
        view = np.empty(16, dtype=np.float32)
        out = step_camera(state, InputFrame(delta_time_seconds=1.0, forward_held=True), cfg, view)
        self.assertIs(out, view)
        np.testing.assert_allclose(state.eye, [0, 0, -3], atol=1e-6)
        m = view_matrix_to_4x4(view)
        np.testing.assert_allclose(m[:3, 3], [0, 0, -3], atol=1e-6)

    def test_step_uses_handedness(self):
        state = CameraState()
        view = np.empty(16, dtype=np.float32)
        step_camera(state, InputFrame(), FlythroughConfig(left_handed=True), view)
        np.testing.assert_allclose(view_matrix_to_4x4(view)[2, :3], [0, 0, -1], atol=1e-7)

    def test_step_debug_output(self):
        state = CameraState()
        with mock.patch.dict(os.environ, {"FLYTHROUGH_DEBUG": "1"}):
            with contextlib.redirect_stdout(io.StringIO()) as out:
                step_camera(state, InputFrame(), FlythroughConfig())
        self.assertIn("[Camera.look] value=[0.0, 0.0, -1.0]", out.getvalue())

    def test_step_without_view(self):
        state = CameraState()
        frame = InputFrame(delta_cursor_x=900)
        self.assertIsNone(step_camera(state, frame, FlythroughConfig(degrees_per_cursor_move=0.1)))
        np.testing.assert_allclose(state.look, [1, 0, 0], atol=1e-6)

if __name__ == '__main__':
    unittest.main()
