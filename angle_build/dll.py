import os.path
import shutil
import subprocess

from loguru import logger

from angle_build.errors import LinkerNotFound, ToolError

VSWHERE = r'%ProgramFiles(x86)%\Microsoft Visual Studio\Installer\vswhere.exe'
LINKER_NAMES = ('link.exe', 'lld-link.exe')

DLLS = (
    ('libEGL', 'gfx/angle/checkout/src/libEGL/libEGL_autogen.def'),
    ('libGLESv2', 'gfx/angle/checkout/src/libGLESv2/libGLESv2_autogen.def'),
)


def find_registry_linker(target, run=subprocess.run):
    """Ask the Visual Studio installer for the link.exe matching target."""
    arch = target.msvc_arch
    vswhere = os.path.expandvars(VSWHERE)
    if arch is None or not os.path.exists(vswhere):
        return None
    cmd = [vswhere, '-latest', '-products', '*',
           '-requires', 'Microsoft.VisualStudio.Component.VC.Tools.x86.x64',
           '-find', 'VC\\Tools\\MSVC\\**\\bin\\Hostx64\\%s\\link.exe' % arch]
    try:
        result = run(cmd, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL,
                     universal_newlines=True)
    except OSError as e:
        logger.debug('vswhere failed: {}', e)
        return None
    if result.returncode != 0:
        return None
    lines = result.stdout.strip().splitlines()
    return lines[0] if lines else None


def find_linker(env, target, which=shutil.which, registry=find_registry_linker):
    for (var, value) in (('ANGLE_LINKER', env.linker),
                         ('RUSTC_LINKER', env.rustc_linker)):
        if value:
            logger.info('using linker {} from {}', value, var)
            return value
    linker = registry(target)
    if linker:
        logger.info('using linker {} from the Visual Studio installation', linker)
        return linker
    for name in LINKER_NAMES:
        path = which(name)
        if path:
            logger.info('using linker {} from PATH', path)
            return path
    raise LinkerNotFound('no linker found for %s: set ANGLE_LINKER or put '
                         '%s on PATH' % (target.triple, ' or '.join(LINKER_NAMES)))


def link_dll(linker, name, def_file, os_libs, archives, out_dir,
             run=subprocess.run):
    output = '%s/%s.dll' % (out_dir, name)
    cmd = [linker, '/DLL', '/NOLOGO', '/DEF:%s' % def_file, '/OUT:%s' % output]
    cmd += ['%s.lib' % lib for lib in os_libs]
    cmd += list(archives)
    logger.info('linking {}', output)
    logger.debug('{}', ' '.join(cmd))
    # No timeout: a hung linker hangs the build.
    result = run(cmd)
    if result.returncode != 0:
        raise ToolError('linking %s failed with exit status %d' %
                        (output, result.returncode), cmd, result.returncode)
    return output


def link_dlls(linker, units, archives, out_dir, run=subprocess.run):
    os_libs = []
    for unit in units:
        for lib in unit.os_libs:
            if lib not in os_libs:
                os_libs.append(lib)
    return [link_dll(linker, name, def_file, os_libs, archives, out_dir, run=run)
            for (name, def_file) in DLLS]
