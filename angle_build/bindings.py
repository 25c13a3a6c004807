import sys
from collections import namedtuple

from ninja_syntax import escape

from angle_build.compile import GLUE, STD
from angle_build.toolchain import quote

TRANSLATOR_BINDINGS = 'glslang_glue_bindings.rs'
RUST_TARGET = '1.59'

OPAQUE_TYPE = 'std.*'
ALLOWLIST_TYPE = 'Sh.*'
ALLOWLIST_VAR = 'SH.*'
RUSTIFIED_ENUM = 'Sh.*'

ALLOWLIST_FN = (
    'GLSLangInitialize',
    'GLSLangFinalize',
    'GLSLangInitBuiltInResources',
    'GLSLangGetBuiltInResourcesString',
    'GLSLangConstructCompiler',
    'GLSLangDestructCompiler',
    'GLSLangCompile',
    'GLSLangClearResults',
    'GLSLangGetShaderVersion',
    'GLSLangGetShaderOutputType',
    'GLSLangGetObjectCode',
    'GLSLangGetInfoLog',
    'GLSLangIterUniformNameMapping',
    'GLSLangGetNumUnpackedVaryingVectors',
    'GLSLangCheckVariablesWithinPackingLimits',
    'GLSLangGetInterfaceBlockRegister',
)

GlRegistry = namedtuple('GlRegistry', [
    'output', 'api', 'version', 'profile', 'extensions',
])

EGL_REGISTRY = GlRegistry('egl_bindings', 'egl', '1.5', None, (
    'EGL_ANGLE_device_d3d',
    'EGL_EXT_platform_base',
    'EGL_EXT_platform_device',
    'EGL_KHR_create_context',
    'EGL_EXT_device_query',
    'EGL_ANGLE_d3d_share_handle_client_buffer',
    'EGL_ANGLE_surface_d3d_texture_2d_share_handle',
    'EGL_ANGLE_query_surface_pointer',
))

GLES_REGISTRY = GlRegistry('gles_bindings', 'gles2', '2.0', None, (
    'GL_OES_EGL_image',
    'GL_EXT_texture_format_BGRA8888',
))


def api_spec(registry):
    if registry.profile:
        return '%s:%s=%s' % (registry.api, registry.profile, registry.version)
    return '%s=%s' % (registry.api, registry.version)


def clang_args(unit):
    # libclang has to parse the glue file the way the compiler saw it.
    args = ['-x', 'c++', '-std=%s' % STD]
    for path in unit.includes:
        args += ['-I', path]
    for (name, value) in unit.defines:
        args.append('-D%s' % name if value is None else '-D%s=%s' % (name, value))
    return args


def bindgen_flags():
    args = [
        '--rust-target', RUST_TARGET,
        '--opaque-type', OPAQUE_TYPE,
        '--allowlist-type', ALLOWLIST_TYPE,
        '--allowlist-var', ALLOWLIST_VAR,
        '--rustified-enum', RUSTIFIED_ENUM,
    ]
    for func in ALLOWLIST_FN:
        args += ['--allowlist-function', func]
    return args


def glad_flags(registry):
    return ['--quiet', '--reproducible', '--api', api_spec(registry),
            '--extensions', ','.join(registry.extensions)]


def write_bindgen(n, bindgen, unit, out_dir):
    # The depfile lists every header libclang read, so a header edit
    # regenerates the bindings.
    n.rule('bindgen',
           '%s $in -o $out --depfile $out.d $bindgen_flags -- $clang_flags' %
           quote([bindgen]), depfile='$out.d', deps='gcc',
           description='BINDGEN $out')
    output = '%s/%s' % (out_dir, TRANSLATOR_BINDINGS)
    n.build(output, 'bindgen', GLUE, variables={
        'bindgen_flags': escape(quote(bindgen_flags())),
        'clang_flags': escape(quote(clang_args(unit))),
    })
    n.newline()
    return output


def write_gl_bindings(n, out_dir, registries=(EGL_REGISTRY, GLES_REGISTRY),
                      glad=None):
    if glad is None:
        glad = [sys.executable, '-m', 'glad']
    n.rule('glad', '%s $glad_flags --out-path $out rust' % quote(glad),
           description='GLAD $out')
    outputs = []
    for registry in registries:
        output = '%s/%s' % (out_dir, registry.output)
        n.build(output, 'glad', variables={
            'glad_flags': escape(quote(glad_flags(registry))),
        })
        outputs.append(output)
    n.newline()
    return outputs
