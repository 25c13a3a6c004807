import os
from collections import namedtuple

from angle_build.errors import ConfigurationError
from angle_build.target import Target

FIELDS = [
    'target', 'host', 'out_dir', 'manifest_dir', 'egl', 'build_dlls',
    'linker', 'rustc_linker', 'zlib_include', 'cxx', 'ar', 'ninja',
    'bindgen', 'opt_level', 'debug', 'jobs', 'cxx_stdlib',
]


def flag(environ, name):
    return environ.get(name, '') not in ('', '0', 'false')


class BuildEnv(namedtuple('BuildEnv', FIELDS)):
    __slots__ = ()

    @classmethod
    def from_environ(cls, environ=None, **overrides):
        if environ is None:
            environ = os.environ
        values = {
            'target': environ.get('TARGET'),
            'host': environ.get('HOST'),
            'out_dir': environ.get('OUT_DIR'),
            'manifest_dir': environ.get('CARGO_MANIFEST_DIR', os.getcwd()),
            'egl': flag(environ, 'CARGO_FEATURE_EGL'),
            'build_dlls': flag(environ, 'CARGO_FEATURE_BUILD_DLLS'),
            'linker': environ.get('ANGLE_LINKER'),
            'rustc_linker': environ.get('RUSTC_LINKER'),
            'zlib_include': environ.get('DEP_Z_INCLUDE'),
            'cxx': environ.get('CXX'),
            'ar': environ.get('AR'),
            'ninja': environ.get('NINJA', 'ninja'),
            'bindgen': environ.get('BINDGEN', 'bindgen'),
            'opt_level': environ.get('OPT_LEVEL', '0'),
            'debug': flag(environ, 'DEBUG'),
            'jobs': environ.get('NUM_JOBS'),
            'cxx_stdlib': environ.get('CXXSTDLIB'),
        }
        values.update((k, v) for (k, v) in overrides.items() if v is not None)
        if not values['host']:
            values['host'] = values['target']
        for name in ('target', 'out_dir'):
            if not values[name]:
                raise ConfigurationError('%s is not set' % name.upper())
        return cls(**values)

    @property
    def target_info(self):
        return Target(self.target)

    @property
    def cxx_runtime(self):
        # An empty CXXSTDLIB means link no C++ runtime at all.
        if self.cxx_stdlib is not None:
            return self.cxx_stdlib or None
        return self.target_info.cxx_runtime

    @property
    def loader(self):
        # The EGL/GLES loader subsystem only builds against Direct3D. The
        # DLLs are linked from its archives, so requesting them implies it.
        return (self.egl or self.build_dlls) and self.target_info.is_windows

    def validate(self):
        if self.build_dlls and not self.target_info.is_windows:
            raise ConfigurationError(
                'build_dlls is only supported on Windows targets, not %s' %
                self.target)
        return self
