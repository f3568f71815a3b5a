from animray.rgb import RGB, convert_to
from animray.yuv import YUV


def test_gray_has_no_chroma():
    assert YUV.gray(0.5) == YUV(0.5, 0, 0)
    assert YUV.gray(0.5).array == (0.5, 0, 0)


def test_gray_converts_to_gray():
    assert YUV.gray(0.5).to_rgb() == RGB.gray(0.5)


def test_v_coefficients():
    assert YUV(0, 0, 1).to_rgb() == RGB(1.28033, -0.38059, 0.0)


def test_u_coefficients():
    assert YUV(0, 1, 0).to_rgb() == RGB(0.0, -0.21482, 2.12798)


def test_convert_to_matches_method():
    colour = YUV(0.4, 0.1, -0.2)
    assert convert_to(RGB, colour) == colour.to_rgb()


def test_chroma_signs():
    rgb = YUV(0.5, 0.2, 0).to_rgb()
    assert rgb.red == 0.5
    assert rgb.green < 0.5 < rgb.blue


def test_equality():
    assert YUV(0.1, 0.2, 0.3) == YUV(0.1, 0.2, 0.3)
    assert not (YUV(0.1, 0.2, 0.3) == YUV(0.1, 0.2, 0.4))