"""Configuration parsing tests."""

from __future__ import annotations

import math

import numpy as np
import pytest
from omegaconf import OmegaConf

from clipspace import (
    Handedness,
    NdcDepth,
    ProjectionConfig,
    build_frustum_matrix,
    build_ortho_2d_matrix,
    build_perspective_fov_matrix,
    build_perspective_matrix,
    load_projection_config,
    make_projection_from_config,
)
from clipspace.core import resolve_handedness, resolve_ndc


def test_perspective_config_in_degrees() -> None:
    cfg = {
        "type": "perspective",
        "fovy": 60.0,
        "degrees": True,
        "aspect": 16 / 9,
        "near": 0.1,
        "far": 100.0,
        "handedness": "rh",
        "ndc": "zo",
    }
    M = make_projection_from_config(cfg)
    expected = build_perspective_matrix(
        math.radians(60.0), 16 / 9, 0.1, 100.0,
        handedness=Handedness.RIGHT, ndc=NdcDepth.ZERO_TO_ONE,
    )
    np.testing.assert_allclose(M, expected, rtol=1e-12)


def test_dictconfig_and_defaults() -> None:
    cfg = OmegaConf.create({
        "type": "frustum",
        "left": -1, "right": 2, "bottom": -1, "top": 1, "near": 1, "far": 9,
        "dtype": "float32",
    })
    defaults = ProjectionConfig(handedness="rh", ndc=False)
    M = make_projection_from_config(cfg, defaults=defaults)

    assert M.dtype == np.float32
    expected = build_frustum_matrix(-1, 2, -1, 1, 1, 9, handedness="rh", ndc="zo", dtype=np.float32)
    np.testing.assert_array_equal(M, expected)


def test_ortho_2d_and_fov_types() -> None:
    M = make_projection_from_config(
        {"type": "ortho_2d", "left": 0, "right": 640, "bottom": 480, "top": 0}
    )
    np.testing.assert_array_equal(M, build_ortho_2d_matrix(0, 640, 480, 0))

    M = make_projection_from_config(
        {"type": "perspective_fov", "fov": 1.2, "width": 800, "height": 600, "near": 0.5, "far": 50}
    )
    np.testing.assert_array_equal(M, build_perspective_fov_matrix(1.2, 800, 600, 0.5, 50))


def test_load_yaml(tmp_path) -> None:
    path = tmp_path / "camera.yaml"
    path.write_text(
        "type: ortho\n"
        "left: -1\nright: 1\nbottom: -1\ntop: 1\nnear: -1\nfar: 1\n"
        "handedness: lh\nndc: symmetric\n"
    )
    M = make_projection_from_config(load_projection_config(str(path)))
    np.testing.assert_allclose(M, np.eye(4), atol=1e-12)


def test_yaml_boolean_ndc_is_rejected(tmp_path) -> None:
    path = tmp_path / "camera.yaml"
    path.write_text(
        "type: ortho\n"
        "left: -1\nright: 1\nbottom: -1\ntop: 1\nnear: 1\nfar: 3\n"
        "ndc: no\n"
    )
    cfg = load_projection_config(str(path))
    assert cfg.ndc is False

    with pytest.raises(ValueError, match="boolean"):
        make_projection_from_config(cfg)

    # The spelled-out name keeps the symmetric depth row
    cfg.ndc = "symmetric"
    M = make_projection_from_config(cfg)
    np.testing.assert_allclose(M[2], [0.0, 0.0, 1.0, -2.0])


def test_ortho_2d_config_conventions() -> None:
    box = {"type": "ortho_2d", "left": 0, "right": 640, "bottom": 480, "top": 0}

    M = make_projection_from_config({**box, "ndc": "zo"})
    np.testing.assert_array_equal(M, build_ortho_2d_matrix(0, 640, 480, 0))

    with pytest.raises(ValueError, match="does not accept"):
        make_projection_from_config({**box, "handedness": "lh"})


def test_bad_config_raises() -> None:
    with pytest.raises(ValueError, match="Unknown projection type"):
        make_projection_from_config({"type": "fisheye"})
    with pytest.raises(ValueError, match="missing parameters"):
        make_projection_from_config({"type": "perspective", "fovy": 1.0, "aspect": 1.0})
    with pytest.raises(ValueError, match="handedness"):
        make_projection_from_config(
            {"type": "perspective", "fovy": 1.0, "aspect": 1.0, "near": 1, "far": 2, "handedness": "up"}
        )


def test_convention_aliases() -> None:
    assert resolve_handedness("RH") is Handedness.RIGHT
    assert resolve_handedness("left") is Handedness.LEFT
    assert resolve_ndc(True) is NdcDepth.NEGATIVE_ONE_TO_ONE
    assert resolve_ndc(False) is NdcDepth.ZERO_TO_ONE
    assert resolve_ndc("gl") is NdcDepth.NEGATIVE_ONE_TO_ONE
    assert resolve_ndc(NdcDepth.ZERO_TO_ONE) is NdcDepth.ZERO_TO_ONE
    assert resolve_ndc("symmetric") is NdcDepth.NEGATIVE_ONE_TO_ONE
    with pytest.raises(ValueError, match="NDC depth"):
        resolve_ndc("no")

    config = ProjectionConfig()
    assert config.handedness is Handedness.LEFT
    assert config.ndc is NdcDepth.NEGATIVE_ONE_TO_ONE
    assert config.dtype is np.float64
