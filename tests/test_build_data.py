"""Tests for the per-module descriptor table."""

import pytest

from angle_build import build_data
from angle_build.build_data import DESCRIPTORS, descriptor, validate
from angle_build.errors import ConfigurationError


def test_table_has_every_module():
    assert set(DESCRIPTORS) == {"common", "preprocessor", "translator", "egl", "glesv2"}


def test_descriptors_are_immutable():
    desc = build_data.TRANSLATOR
    with pytest.raises(AttributeError):
        desc.sources = ()
    assert isinstance(desc.sources, tuple)
    assert isinstance(desc.defines, tuple)


def test_defines_are_name_value_pairs():
    for desc in DESCRIPTORS.values():
        for define in desc.defines:
            assert len(define) == 2
            (name, value) = define
            assert name
            assert value is None or isinstance(value, str)


def test_translator_enables_all_outputs():
    names = [name for (name, _) in build_data.TRANSLATOR.defines]
    assert "ANGLE_ENABLE_ESSL" in names
    assert "ANGLE_ENABLE_GLSL" in names
    assert "ANGLE_ENABLE_HLSL" in names


def test_loader_modules_list_system_libraries():
    assert "user32" in build_data.EGL.os_libs
    assert "d3d9" in build_data.GLESV2.os_libs
    assert build_data.TRANSLATOR.os_libs == ()


def test_validate_rejects_unprefixed_path():
    bad = descriptor(includes=["../../checkout/include"], sources=["src/oops.cpp"])
    with pytest.raises(ConfigurationError):
        validate(bad)


def test_validate_accepts_table():
    for desc in DESCRIPTORS.values():
        assert validate(desc) is desc
