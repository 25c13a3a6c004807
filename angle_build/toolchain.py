import os
import os.path
import shlex
import subprocess
import tempfile

from loguru import logger

FLAG_CHECK_SOURCE = 'int main(void) { return 0; }\n'


def quote(args, windows=None):
    if windows is None:
        windows = os.name == 'nt'
    if windows:
        return subprocess.list2cmdline(args)
    return ' '.join(shlex.quote(a) for a in args)


def is_msvc_driver(cxx):
    name = cxx.replace('\\', '/').rsplit('/', 1)[-1].lower()
    if name.endswith('.exe'):
        name = name[:-4]
    return name in ('cl', 'clang-cl')


class Toolchain(object):
    """A C++ compiler and archiver pair, and the flag syntax they accept."""

    def __init__(self, cxx, ar, msvc, run=subprocess.run):
        self.cxx = cxx
        self.ar = ar
        self.msvc = msvc
        self.run = run
        self.probed = {}

    @classmethod
    def detect(cls, env, target, run=subprocess.run):
        cxx = env.cxx
        if not cxx:
            cxx = 'cl.exe' if target.is_msvc else 'c++'
        msvc = is_msvc_driver(cxx)
        ar = env.ar
        if not ar:
            ar = 'lib.exe' if msvc else 'ar'
        logger.debug('compiler {} ({}), archiver {}', cxx,
                     'msvc' if msvc else 'gnu', ar)
        return cls(cxx, ar, msvc, run=run)

    def include_flag(self, path):
        return ('/I%s' if self.msvc else '-I%s') % path

    def define_flag(self, name, value=None):
        d = '/D' if self.msvc else '-D'
        if value is None:
            return '%s%s' % (d, name)
        return '%s%s=%s' % (d, name, value)

    def std_flag(self, std):
        return ('/std:%s' if self.msvc else '-std=%s') % std

    def no_warnings_flag(self):
        return '/W0' if self.msvc else '-w'

    def opt_flags(self, opt_level, debug):
        flags = []
        if self.msvc:
            flags.append('/nologo')
            flags.append('/EHsc')
            if opt_level not in ('0', None):
                flags.append('/O2')
            if debug:
                flags.append('/Z7')
        else:
            flags.append('-fPIC')
            flags.append('-O%s' % (opt_level or '0'))
            if debug:
                flags.append('-g')
        return flags

    def lib_name(self, name):
        return ('%s.lib' if self.msvc else 'lib%s.a') % name

    def obj_ext(self):
        return '.obj' if self.msvc else '.o'

    def is_flag_supported(self, flag):
        if flag in self.probed:
            return self.probed[flag]
        with tempfile.TemporaryDirectory() as tmp:
            src = os.path.join(tmp, 'flag_check.cpp')
            obj = os.path.join(tmp, 'flag_check' + self.obj_ext())
            with open(src, 'w') as f:
                f.write(FLAG_CHECK_SOURCE)
            if self.msvc:
                cmd = [self.cxx, '/nologo', '/WX', flag, '/c', src, '/Fo' + obj]
            else:
                cmd = [self.cxx, '-Werror', flag, '-c', src, '-o', obj]
            try:
                result = self.run(cmd, cwd=tmp, stdout=subprocess.PIPE,
                                  stderr=subprocess.STDOUT)
                supported = result.returncode == 0
            except OSError as e:
                logger.debug('could not run {}: {}', self.cxx, e)
                supported = False
        logger.debug('flag {} {}', flag, 'supported' if supported else 'dropped')
        self.probed[flag] = supported
        return supported
