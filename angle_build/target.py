from loguru import logger

OS_FAMILIES = ('darwin', 'linux', 'windows')

# Targets whose system compiler links against libc++ rather than libstdc++.
LIBCXX_TAGS = ('apple', 'darwin', 'freebsd', 'openbsd')

# Mirrors the `if CONFIG['OS_ARCH'] == ...` blocks of the upstream moz.build
# files. First matching tag wins.
PLATFORM_SOURCES = (
    ('darwin', (
        'gfx/angle/checkout/src/common/system_utils_mac.cpp',
        'gfx/angle/checkout/src/common/system_utils_apple.cpp',
        'gfx/angle/checkout/src/common/system_utils_posix.cpp',
    )),
    ('linux', (
        'gfx/angle/checkout/src/common/system_utils_linux.cpp',
        'gfx/angle/checkout/src/common/system_utils_posix.cpp',
    )),
    ('windows', (
        'gfx/angle/checkout/src/common/system_utils_win.cpp',
        'gfx/angle/checkout/src/common/system_utils_win32.cpp',
    )),
)


def first_match(triple, table):
    for (tag, value) in table:
        if tag in triple:
            return (tag, value)
    return (None, None)


def select_platform_sources(triple, table=PLATFORM_SOURCES):
    (tag, sources) = first_match(triple, table)
    if tag is None:
        logger.debug('no platform sources for {}', triple)
        return []
    logger.debug('platform sources for {}: {}', tag, ', '.join(sources))
    return list(sources)


class Target(object):
    def __init__(self, triple):
        self.triple = triple
        self.os = first_match(triple, [(os, os) for os in OS_FAMILIES])[0]

    def __repr__(self):
        return 'Target(%r)' % self.triple

    @property
    def is_windows(self):
        return self.os == 'windows'

    @property
    def is_msvc(self):
        return 'msvc' in self.triple

    @property
    def has_sse2(self):
        return 'x86_64' in self.triple or 'i686' in self.triple

    @property
    def msvc_arch(self):
        if 'x86_64' in self.triple:
            return 'x64'
        if 'i686' in self.triple or 'i586' in self.triple:
            return 'x86'
        if 'aarch64' in self.triple:
            return 'arm64'
        return None

    @property
    def cxx_runtime(self):
        """The C++ standard library a Rust link against our archives needs."""
        if self.is_msvc:
            return None
        if 'android' in self.triple:
            return 'c++_shared'
        for tag in LIBCXX_TAGS:
            if tag in self.triple:
                return 'c++'
        return 'stdc++'
