"""
Unit tests for colors and the standard material.
"""

import numpy as np
import pytest

from materials import Color, StandardMaterial, metal_material


class TestColor:
    def test_from_hex_int(self):
        color = Color(0xff8800)

        assert color.rgb == pytest.approx((1.0, 136 / 255, 0.0))
        assert color.hex == 0xff8800

    def test_from_name_and_string(self):
        assert Color("red") == Color(0xff0000)
        assert Color("#00ff00") == Color(0x00ff00)

    def test_from_tuple(self):
        assert Color((0.0, 0.0, 1.0)) == Color(0x0000ff)

    def test_copy(self):
        original = Color(0x123456)
        copy = Color(original)

        assert copy == original
        assert copy is not original

    def test_invalid_string(self):
        with pytest.raises(ValueError):
            Color("not-a-color")

    def test_out_of_range_int(self):
        with pytest.raises(ValueError):
            Color(0x1000000)


class TestStandardMaterial:
    @pytest.fixture
    def props(self):
        return {
            'color': 0x3366ff,
            'emissive': 0x000000,
            'emissive_intensity': 1.0,
            'metalness': 0.2,
            'roughness': 0.5,
        }

    def test_from_props(self, props):
        material = StandardMaterial.from_props(props)

        assert material.color == Color(0x3366ff)
        assert material.emissive == Color(0x000000)
        assert material.metalness == 0.2
        assert material.roughness == 0.5

    def test_from_props_missing_key(self, props):
        del props['roughness']

        with pytest.raises(KeyError):
            StandardMaterial.from_props(props)

    def test_metal_material(self):
        material = metal_material()

        assert material.color == Color(0xffffff)
        assert material.metalness == 1.0
        assert material.roughness == 0.0

    def test_shade_brighter_when_lit(self, props):
        material = StandardMaterial.from_props(props)

        dark, bright = material.shade([0.0, 1.0])

        assert np.all(bright >= dark)
        assert bright.sum() > dark.sum()

    def test_shade_emissive_glows_in_the_dark(self, props):
        props['emissive'] = 0xff0000
        material = StandardMaterial.from_props(props)

        (r, g, b), = material.shade([0.0])

        assert r == pytest.approx(1.0)

    def test_shade_is_clipped(self):
        material = StandardMaterial(color=0xffffff, emissive=0xffffff, emissive_intensity=5.0)

        rgb = material.shade(np.linspace(0.0, 1.0, 5))

        assert rgb.shape == (5, 3)
        assert rgb.max() <= 1.0

    def test_rgba(self, props):
        material = StandardMaterial.from_props(props)

        assert material.rgba() == pytest.approx([0.2, 0.4, 1.0, 1.0])
