"""Tests for the bindgen and glad configuration."""

import io
import shlex

from ninja_syntax import Writer

from angle_build.bindings import (
    ALLOWLIST_FN, EGL_REGISTRY, GLES_REGISTRY, TRANSLATOR_BINDINGS, api_spec,
    bindgen_flags, clang_args, glad_flags, write_bindgen, write_gl_bindings,
)
from angle_build.build_data import DESCRIPTORS
from angle_build.compile import GLSLANG, GLUE, build_unit
from angle_build.target import Target


def unit_for(toolchain):
    return build_unit(GLSLANG, DESCRIPTORS, Target("x86_64-unknown-linux-gnu"),
                      toolchain)


def test_function_allowlist_is_exact():
    assert len(ALLOWLIST_FN) == 16
    assert len(set(ALLOWLIST_FN)) == 16
    assert all(name.startswith("GLSLang") for name in ALLOWLIST_FN)
    for name in ("GLSLangInitialize", "GLSLangFinalize", "GLSLangCompile",
                 "GLSLangGetObjectCode", "GLSLangIterUniformNameMapping",
                 "GLSLangGetNumUnpackedVaryingVectors"):
        assert name in ALLOWLIST_FN


def test_bindgen_flags():
    flags = bindgen_flags()
    pairs = list(zip(flags[::2], flags[1::2]))
    assert ("--opaque-type", "std.*") in pairs
    assert ("--allowlist-type", "Sh.*") in pairs
    assert ("--allowlist-var", "SH.*") in pairs
    assert ("--rustified-enum", "Sh.*") in pairs
    functions = [v for (k, v) in pairs if k == "--allowlist-function"]
    assert tuple(functions) == ALLOWLIST_FN


def test_clang_args_replay_compile_configuration(gnu_toolchain):
    unit = unit_for(gnu_toolchain)
    args = clang_args(unit)
    assert args[:3] == ["-x", "c++", "-std=c++17"]
    includes = [args[i + 1] for (i, a) in enumerate(args) if a == "-I"]
    assert includes == unit.includes
    assert "-DANGLE_ENABLE_HLSL" in args
    assert "-D_HAS_EXCEPTIONS=0" in args


def test_write_bindgen(gnu_toolchain):
    out = io.StringIO()
    output = write_bindgen(Writer(out, width=100000), "bindgen",
                           unit_for(gnu_toolchain), "/build/out")
    text = out.getvalue()
    assert output == "/build/out/" + TRANSLATOR_BINDINGS
    assert "rule bindgen" in text
    assert "build %s: bindgen %s" % (output, GLUE) in text
    assert "--depfile $out.d" in text
    assert "depfile = $out.d" in text
    assert "deps = gcc" in text
    line = [l for l in text.splitlines() if l.strip().startswith("bindgen_flags")][0]
    words = shlex.split(line.split("=", 1)[1])
    assert words.count("--allowlist-function") == 16


def test_registries():
    assert api_spec(EGL_REGISTRY) == "egl=1.5"
    assert api_spec(GLES_REGISTRY) == "gles2=2.0"
    assert api_spec(EGL_REGISTRY._replace(api="gl", profile="core")) == "gl:core=1.5"
    assert "EGL_ANGLE_device_d3d" in EGL_REGISTRY.extensions
    assert GLES_REGISTRY.extensions == ("GL_OES_EGL_image",
                                        "GL_EXT_texture_format_BGRA8888")
    flags = glad_flags(GLES_REGISTRY)
    assert "--reproducible" in flags
    assert flags[flags.index("--extensions") + 1] == \
        "GL_OES_EGL_image,GL_EXT_texture_format_BGRA8888"


def test_write_gl_bindings():
    out = io.StringIO()
    outputs = write_gl_bindings(Writer(out, width=100000), "/build/out",
                                glad=["glad"])
    text = out.getvalue()
    assert outputs == ["/build/out/egl_bindings", "/build/out/gles_bindings"]
    assert "rule glad" in text
    assert "--api egl=1.5" in text
    assert "--api gles2=2.0" in text
