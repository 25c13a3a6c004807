from collections import namedtuple

from loguru import logger
from ninja_syntax import escape

from angle_build.build_data import resolved_includes, resolved_sources
from angle_build.paths import outof
from angle_build.target import select_platform_sources
from angle_build.toolchain import quote

GLUE = 'src/shaders/glslang-c.cpp'
STD = 'c++17'

MSVC_WARNINGS = ('/wd4100', '/wd4127', '/wd9002')
SSE2_FLAGS = ('-msse2', '-arch:SSE2')

ArchivePlan = namedtuple('ArchivePlan', [
    'name', 'modules', 'defines_from', 'platform_sources', 'glue', 'zlib',
])

# The glue file goes into glslang only. The loader archives reach the
# translator through glslang, which every link that uses them also consumes.
GLSLANG = ArchivePlan('glslang', ('common', 'preprocessor', 'translator'),
                      'translator', True, True, False)
LIBEGL = ArchivePlan('EGL', ('egl',), 'egl', False, False, False)
LIBGLESV2 = ArchivePlan('GLESv2', ('common', 'glesv2'), 'glesv2',
                        True, False, True)


class CompileUnit(object):
    """Everything one compile-and-archive step needs; consumed once."""

    def __init__(self, name, toolchain):
        self.name = name
        self.toolchain = toolchain
        self.includes = []
        self.sources = []
        self.defines = []
        self.flags = []
        self.os_libs = []

    def include(self, path):
        if path not in self.includes:
            self.includes.append(path)

    def file(self, path):
        self.sources.append(path)

    def define(self, name, value=None):
        self.defines.append((name, value))

    def flag(self, flag):
        self.flags.append(flag)

    def flag_if_supported(self, flag):
        if not self.toolchain.is_flag_supported(flag):
            return False
        self.flags.append(flag)
        return True

    def link_os_lib(self, name):
        if name not in self.os_libs:
            self.os_libs.append(name)

    def include_args(self):
        return [self.toolchain.include_flag(p) for p in self.includes]

    def define_args(self):
        return [self.toolchain.define_flag(k, v) for (k, v) in self.defines]

    def cxxflags(self):
        return self.flags + self.include_args() + self.define_args()


def build_unit(plan, descriptors, target, toolchain, zlib_include=None,
               opt_level='0', debug=False):
    unit = CompileUnit(plan.name, toolchain)
    for module in plan.modules:
        desc = descriptors[module]
        for path in resolved_includes(desc):
            unit.include(path)
        for path in resolved_sources(desc):
            unit.file(path)
        for lib in desc.os_libs:
            unit.link_os_lib(lib)
    if plan.zlib and zlib_include:
        unit.include(zlib_include)
    if plan.platform_sources:
        for path in select_platform_sources(target.triple):
            unit.file(path)

    unit.flag(toolchain.std_flag(STD))
    unit.flag(toolchain.no_warnings_flag())
    for flag in toolchain.opt_flags(opt_level, debug):
        unit.flag(flag)
    for flag in MSVC_WARNINGS:
        unit.flag_if_supported(flag)
    if target.has_sse2:
        for flag in SSE2_FLAGS:
            unit.flag_if_supported(flag)
    unit.flag_if_supported('/MP')

    for (name, value) in descriptors[plan.defines_from].defines:
        unit.define(name, value)

    if plan.glue:
        unit.file(GLUE)
    logger.info('{}: {} sources, {} includes, {} defines', unit.name,
                len(unit.sources), len(unit.includes), len(unit.defines))
    return unit


def write_compile_rules(n, toolchain):
    cxx = quote([toolchain.cxx])
    ar = quote([toolchain.ar])
    if toolchain.msvc:
        n.rule('cxx', '%s /showIncludes $cxxflags /c $in /Fo$out' % cxx,
               deps='msvc', description='CXX $out')
        n.rule('ar', '%s /nologo /OUT:$out $in' % ar, description='AR $out')
    else:
        n.rule('cxx', '%s -MMD -MF $out.d $cxxflags -c $in -o $out' % cxx,
               deps='gcc', depfile='$out.d', description='CXX $out')
        # ar only adds members, so stale objects would survive a rebuild.
        n.rule('ar', 'rm -f $out && %s crs $out $in' % ar,
               description='AR $out')
    n.newline()


def archive_path(unit, out_dir):
    return '%s/%s' % (out_dir, unit.toolchain.lib_name(unit.name))


def write_unit(n, unit, out_dir):
    var = '%s_cxxflags' % unit.name
    n.variable(var, escape(quote(unit.cxxflags())))
    objs = outof(unit.sources, ext=unit.toolchain.obj_ext(),
                 outdir='%s/obj/%s' % (out_dir, unit.name))
    for (i, o) in zip(unit.sources, objs):
        n.build(o, 'cxx', i, variables={'cxxflags': '$' + var})
    archive = archive_path(unit, out_dir)
    n.build(archive, 'ar', objs)
    n.newline()
    return archive


def link_directives(directives, unit, out_dir, whole_archive=False,
                    cxx_runtime=None):
    directives.rustc_link_search(out_dir)
    kind = 'static:+whole-archive' if whole_archive else 'static'
    directives.rustc_link_lib(unit.name, kind)
    if cxx_runtime:
        directives.rustc_link_lib(cxx_runtime)
    for lib in unit.os_libs:
        directives.rustc_link_lib(lib)
