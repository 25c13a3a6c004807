import os
import os.path
import shutil
import subprocess

from loguru import logger
from ninja_syntax import Writer

from angle_build.bindings import write_bindgen, write_gl_bindings
from angle_build.build_data import DESCRIPTORS, validate
from angle_build.compile import (
    GLSLANG, GLUE, LIBEGL, LIBGLESV2, build_unit, link_directives,
    write_compile_rules, write_unit,
)
from angle_build.dll import find_linker, find_registry_linker, link_dlls
from angle_build.errors import ToolError
from angle_build.rerun import UPSTREAM_TREE, emit_rerun
from angle_build.toolchain import Toolchain


def archive_plans(env):
    plans = [GLSLANG]
    if env.loader:
        plans += [LIBEGL, LIBGLESV2]
    return plans


def plan(env, descriptors=DESCRIPTORS, toolchain=None):
    env.validate()
    for desc in descriptors.values():
        validate(desc)
    target = env.target_info
    if toolchain is None:
        toolchain = Toolchain.detect(env, target)
    return [build_unit(p, descriptors, target, toolchain,
                       zlib_include=env.zlib_include,
                       opt_level=env.opt_level, debug=env.debug)
            for p in archive_plans(env)]


def build_dir(env):
    return env.out_dir.replace('\\', '/').rstrip('/')


def generate(env, output, units, glad=None):
    out_dir = build_dir(env)
    n = Writer(output)
    n.comment('angle-build for %s' % env.target)
    n.variable('builddir', out_dir)
    n.newline()
    write_compile_rules(n, units[0].toolchain)
    archives = [write_unit(n, unit, out_dir) for unit in units]
    # Bindings replay the glslang unit's includes and defines.
    bindings = [write_bindgen(n, env.bindgen, units[0], out_dir)]
    if env.loader:
        bindings += write_gl_bindings(n, out_dir, glad=glad)
    n.default(archives + bindings)
    return (archives, bindings)


def run_ninja(env, ninja_file, run=subprocess.run):
    cmd = [env.ninja, '-f', ninja_file]
    if env.jobs:
        cmd += ['-j', str(env.jobs)]
    logger.info('running {}', ' '.join(cmd))
    try:
        result = run(cmd)
    except OSError as e:
        raise ToolError('cannot run %s: %s' % (env.ninja, e), cmd)
    if result.returncode != 0:
        raise ToolError('%s failed with exit status %d' %
                        (env.ninja, result.returncode), cmd, result.returncode)


def build(env, directives, descriptors=DESCRIPTORS, toolchain=None,
          run=subprocess.run, which=shutil.which, registry=find_registry_linker,
          tree=UPSTREAM_TREE):
    units = plan(env, descriptors, toolchain)
    if env.egl and not env.loader:
        directives.warning('the egl feature is only built for Windows targets, '
                           'ignoring it for %s' % env.target)

    out_dir = build_dir(env)
    if not os.path.isdir(out_dir):
        os.makedirs(out_dir)
    ninja_file = '%s/build.ninja' % out_dir
    with open(ninja_file, 'w') as f:
        (archives, bindings) = generate(env, f, units)
    run_ninja(env, ninja_file, run=run)
    for path in bindings:
        logger.info('generated {}', path)

    link_directives(directives, units[0], out_dir, cxx_runtime=env.cxx_runtime)
    if env.build_dlls:
        linker = find_linker(env, env.target_info, which=which,
                             registry=registry)
        # libGLESv2 calls into the translator, so glslang is linked in too.
        inputs = archives[1:] + archives[:1]
        for path in link_dlls(linker, units[1:], inputs, out_dir, run=run):
            logger.info('linked {}', path)
    else:
        for unit in units[1:]:
            link_directives(directives, unit, out_dir, whole_archive=True)

    count = emit_rerun(directives, root=tree, glue=GLUE)
    logger.debug('tracking {} upstream paths', count)
    return archives
