"""Fixtures and fakes shared by the test suite."""

import io
import os.path
import subprocess

import pytest

from angle_build.config import BuildEnv
from angle_build.directives import Directives
from angle_build.toolchain import Toolchain

GNU_FLAGS = {"-msse2"}
MSVC_FLAGS = {"/wd4100", "/wd4127", "/wd9002", "-arch:SSE2", "/MP"}


class FakeRun:
    """Stands in for subprocess.run and records every command."""

    def __init__(self, supported=(), failing=()):
        self.supported = set(supported)
        self.failing = set(failing)
        self.calls = []

    def __call__(self, cmd, **kwargs):
        cmd = list(cmd)
        if any(str(part).endswith("flag_check.cpp") for part in cmd):
            ok = any(part in self.supported for part in cmd)
            return subprocess.CompletedProcess(cmd, 0 if ok else 1, stdout="")
        self.calls.append(cmd)
        failed = os.path.basename(cmd[0]) in self.failing
        return subprocess.CompletedProcess(cmd, 1 if failed else 0, stdout="")

    def commands(self, program):
        return [c for c in self.calls if os.path.basename(c[0]) == program]


@pytest.fixture
def gnu_run():
    return FakeRun(GNU_FLAGS)


@pytest.fixture
def msvc_run():
    return FakeRun(MSVC_FLAGS)


@pytest.fixture
def gnu_toolchain(gnu_run):
    return Toolchain("c++", "ar", False, run=gnu_run)


@pytest.fixture
def msvc_toolchain(msvc_run):
    return Toolchain("cl.exe", "lib.exe", True, run=msvc_run)


@pytest.fixture
def make_env(tmp_path):
    def make(target="x86_64-unknown-linux-gnu", **extra):
        environ = {
            "TARGET": target,
            "OUT_DIR": str(tmp_path / "out"),
            "CARGO_MANIFEST_DIR": str(tmp_path),
        }
        environ.update(extra)
        return BuildEnv.from_environ(environ)

    return make


@pytest.fixture
def upstream_tree(tmp_path):
    root = tmp_path / "gfx"
    (root / "angle" / "checkout" / "src" / "common").mkdir(parents=True)
    (root / "angle" / "checkout" / "src" / "common" / "debug.cpp").write_text("")
    (root / "angle" / "checkout" / "include").mkdir()
    (root / "angle" / "checkout" / "include" / "GLSLANG").mkdir()
    (root / "angle" / "checkout" / "include" / "GLSLANG" / "ShaderLang.h").write_text("")
    return root


@pytest.fixture
def directives():
    return Directives(io.StringIO())
