"""Tests for target triple inspection and platform source selection."""

import pytest

from angle_build.target import PLATFORM_SOURCES, Target, select_platform_sources

LINUX = [
    "gfx/angle/checkout/src/common/system_utils_linux.cpp",
    "gfx/angle/checkout/src/common/system_utils_posix.cpp",
]


@pytest.mark.parametrize("triple,expected", [
    ("x86_64-unknown-linux-gnu", LINUX),
    ("aarch64-unknown-linux-musl", LINUX),
    ("aarch64-apple-darwin", [
        "gfx/angle/checkout/src/common/system_utils_mac.cpp",
        "gfx/angle/checkout/src/common/system_utils_apple.cpp",
        "gfx/angle/checkout/src/common/system_utils_posix.cpp",
    ]),
    ("x86_64-pc-windows-msvc", [
        "gfx/angle/checkout/src/common/system_utils_win.cpp",
        "gfx/angle/checkout/src/common/system_utils_win32.cpp",
    ]),
])
def test_selects_exactly_one_os(triple, expected):
    assert select_platform_sources(triple) == expected


@pytest.mark.parametrize("triple", [
    "wasm32-unknown-unknown",
    "x86_64-unknown-freebsd",
    "",
])
def test_unmatched_triple_adds_nothing(triple):
    assert select_platform_sources(triple) == []


def test_first_match_wins():
    table = (("linux", ("first.cpp",)), ("gnu", ("second.cpp",)))
    assert select_platform_sources("x86_64-unknown-linux-gnu", table) == ["first.cpp"]


def test_table_order_is_darwin_linux_windows():
    assert [tag for (tag, _) in PLATFORM_SOURCES] == ["darwin", "linux", "windows"]


@pytest.mark.parametrize("triple,os,sse2,arch", [
    ("x86_64-unknown-linux-gnu", "linux", True, "x64"),
    ("i686-pc-windows-msvc", "windows", True, "x86"),
    ("aarch64-apple-darwin", "darwin", False, "arm64"),
    ("riscv64gc-unknown-none-elf", None, False, None),
])
def test_target_properties(triple, os, sse2, arch):
    target = Target(triple)
    assert target.os == os
    assert target.has_sse2 is sse2
    assert target.msvc_arch == arch
    assert target.is_windows is (os == "windows")


def test_msvc_detection():
    assert Target("x86_64-pc-windows-msvc").is_msvc
    assert not Target("x86_64-pc-windows-gnu").is_msvc


@pytest.mark.parametrize("triple,runtime", [
    ("x86_64-unknown-linux-gnu", "stdc++"),
    ("x86_64-pc-windows-gnu", "stdc++"),
    ("aarch64-apple-darwin", "c++"),
    ("x86_64-unknown-freebsd", "c++"),
    ("aarch64-linux-android", "c++_shared"),
    ("x86_64-pc-windows-msvc", None),
])
def test_cxx_runtime(triple, runtime):
    assert Target(triple).cxx_runtime == runtime
