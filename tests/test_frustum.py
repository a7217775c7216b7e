"""Frustum builder tests."""

from __future__ import annotations

import numpy as np
import pytest

from clipspace import Handedness, NdcDepth, build_frustum_matrix

# Off-axis near-plane window
LEFT, RIGHT, BOTTOM, TOP, NEAR, FAR = -0.5, 1.5, -0.25, 0.75, 1.0, 50.0


def _to_ndc(M: np.ndarray, point) -> np.ndarray:
    clip = M @ np.append(np.asarray(point, dtype=np.float64), 1.0)
    return clip[:3] / clip[3]


@pytest.mark.parametrize("handedness", [Handedness.LEFT, Handedness.RIGHT])
@pytest.mark.parametrize(
    "ndc, z_range",
    [(NdcDepth.NEGATIVE_ONE_TO_ONE, (-1.0, 1.0)), (NdcDepth.ZERO_TO_ONE, (0.0, 1.0))],
)
def test_frustum_corners_land_on_clip_cube(handedness, ndc, z_range) -> None:
    M = build_frustum_matrix(LEFT, RIGHT, BOTTOM, TOP, NEAR, FAR, handedness=handedness, ndc=ndc)
    s = handedness.z_sign

    for depth, z_expected in zip((NEAR, FAR), z_range):
        k = depth / NEAR
        for x, x_ndc in ((LEFT, -1.0), (RIGHT, 1.0)):
            for y, y_ndc in ((BOTTOM, -1.0), (TOP, 1.0)):
                ndc_point = _to_ndc(M, (x * k, y * k, s * depth))
                np.testing.assert_allclose(
                    ndc_point, [x_ndc, y_ndc, z_expected], rtol=0.0, atol=1e-9
                )


@pytest.mark.parametrize("handedness", [Handedness.LEFT, Handedness.RIGHT])
def test_w_equals_signed_eye_depth(handedness) -> None:
    M = build_frustum_matrix(LEFT, RIGHT, BOTTOM, TOP, NEAR, FAR, handedness=handedness)
    clip = M @ np.array([0.3, -0.2, 7.0, 1.0])
    assert clip[3] == pytest.approx(handedness.z_sign * 7.0)
    np.testing.assert_array_equal(M[3], [0.0, 0.0, handedness.z_sign, 0.0])


def test_rh_symmetric_matches_classic_gl_frustum() -> None:
    M = build_frustum_matrix(-1.0, 1.0, -1.0, 1.0, 1.0, 3.0, handedness="rh", ndc="symmetric")
    expected = np.array([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, -2.0, -3.0],
        [0.0, 0.0, -1.0, 0.0],
    ])
    np.testing.assert_allclose(M, expected, rtol=0.0, atol=1e-12)


def test_off_axis_terms_flip_with_handedness() -> None:
    lh = build_frustum_matrix(LEFT, RIGHT, BOTTOM, TOP, NEAR, FAR, handedness="lh")
    rh = build_frustum_matrix(LEFT, RIGHT, BOTTOM, TOP, NEAR, FAR, handedness="rh")
    assert lh[0, 2] == pytest.approx(-0.5)
    assert rh[0, 2] == pytest.approx(0.5)
    assert lh[1, 2] == pytest.approx(-rh[1, 2])
    assert lh[2, 3] == rh[2, 3]


def test_equal_near_far_is_not_an_error() -> None:
    M = build_frustum_matrix(-1.0, 1.0, -1.0, 1.0, 2.0, 2.0)
    assert not np.isfinite(M[2, 2])
    assert not np.isfinite(M[2, 3])
