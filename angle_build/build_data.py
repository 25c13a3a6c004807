from collections import namedtuple

from angle_build.paths import UPSTREAM_PREFIX, fixup_path, indir

Descriptor = namedtuple('Descriptor', ['includes', 'sources', 'defines', 'os_libs'])


def descriptor(includes=(), sources=(), defines=(), os_libs=()):
    return Descriptor(tuple(includes), tuple(sources),
                      tuple(tuple(d) for d in defines), tuple(os_libs))


def validate(desc):
    for path in desc.includes + desc.sources:
        fixup_path(path)
    return desc


def resolved_includes(desc):
    return [fixup_path(p) for p in desc.includes]


def resolved_sources(desc):
    return [fixup_path(p) for p in desc.sources]


checkout = UPSTREAM_PREFIX + 'checkout'

common_includes = indir(checkout, [
    'include',
    'src',
    'src/common/third_party/base',
    'out/gen/angle',
])

common_defines = [
    ('NOMINMAX', None),
    ('WIN32_LEAN_AND_MEAN', None),
    ('_CRT_SECURE_NO_DEPRECATE', None),
    ('_SCL_SECURE_NO_WARNINGS', None),
    ('_HAS_EXCEPTIONS', '0'),
    ('DYNAMIC_ANNOTATIONS_ENABLED', '0'),
]


ANGLE_COMMON = descriptor(
    includes=common_includes,
    sources=indir(checkout + '/src/common', [
        'Float16ToFloat32.cpp',
        'MemoryBuffer.cpp',
        'PackedEGLEnums_autogen.cpp',
        'PackedEnums.cpp',
        'PackedGLEnums_autogen.cpp',
        'PoolAlloc.cpp',
        'aligned_memory.cpp',
        'android_util.cpp',
        'angleutils.cpp',
        'debug.cpp',
        'event_tracer.cpp',
        'mathutil.cpp',
        'matrix_utils.cpp',
        'string_utils.cpp',
        'system_utils.cpp',
        'tls.cpp',
        'uniform_type_info_autogen.cpp',
        'utilities.cpp',
        'third_party/base/anglebase/sha1.cc',
        'third_party/xxhash/xxhash.c',
    ]),
    defines=common_defines,
)


PREPROCESSOR = descriptor(
    includes=common_includes,
    sources=indir(checkout + '/src/compiler/preprocessor', [
        'DiagnosticsBase.cpp',
        'DirectiveHandlerBase.cpp',
        'DirectiveParser.cpp',
        'Input.cpp',
        'Lexer.cpp',
        'Macro.cpp',
        'MacroExpander.cpp',
        'Preprocessor.cpp',
        'Token.cpp',
        'preprocessor_lex_autogen.cpp',
        'preprocessor_tab_autogen.cpp',
    ]),
    defines=common_defines,
)


TRANSLATOR = descriptor(
    includes=common_includes,
    sources=indir(checkout + '/src/compiler/translator', [
        'ASTMetadataHLSL.cpp',
        'AtomicCounterFunctionHLSL.cpp',
        'BaseTypes.cpp',
        'BuiltInFunctionEmulator.cpp',
        'BuiltInFunctionEmulatorGLSL.cpp',
        'BuiltInFunctionEmulatorHLSL.cpp',
        'CallDAG.cpp',
        'CodeGen.cpp',
        'CollectVariables.cpp',
        'Compiler.cpp',
        'ConstantUnion.cpp',
        'Declarator.cpp',
        'Diagnostics.cpp',
        'DirectiveHandler.cpp',
        'ExtensionBehavior.cpp',
        'ExtensionGLSL.cpp',
        'FlagStd140Structs.cpp',
        'FunctionLookup.cpp',
        'HashNames.cpp',
        'ImageFunctionHLSL.cpp',
        'ImmutableStringBuilder.cpp',
        'InfoSink.cpp',
        'Initialize.cpp',
        'InitializeDll.cpp',
        'IntermNode.cpp',
        'IsASTDepthBelowLimit.cpp',
        'Name.cpp',
        'Operator.cpp',
        'OutputESSL.cpp',
        'OutputGLSL.cpp',
        'OutputGLSLBase.cpp',
        'OutputHLSL.cpp',
        'OutputTree.cpp',
        'ParseContext.cpp',
        'QualifierTypes.cpp',
        'ResourcesHLSL.cpp',
        'ShaderLang.cpp',
        'ShaderStorageBlockFunctionHLSL.cpp',
        'ShaderStorageBlockOutputHLSL.cpp',
        'ShaderVars.cpp',
        'StructureHLSL.cpp',
        'Symbol.cpp',
        'SymbolTable.cpp',
        'SymbolTable_autogen.cpp',
        'SymbolUniqueId.cpp',
        'TextureFunctionHLSL.cpp',
        'TranslatorESSL.cpp',
        'TranslatorGLSL.cpp',
        'TranslatorHLSL.cpp',
        'Types.cpp',
        'UtilsHLSL.cpp',
        'ValidateAST.cpp',
        'ValidateGlobalInitializer.cpp',
        'ValidateLimitations.cpp',
        'ValidateMaxParameters.cpp',
        'ValidateOutputs.cpp',
        'ValidateSwitch.cpp',
        'ValidateVaryingLocations.cpp',
        'VariablePacker.cpp',
        'VersionGLSL.cpp',
        'blocklayout.cpp',
        'blocklayoutHLSL.cpp',
        'emulated_builtin_functions_hlsl_autogen.cpp',
        'glslang_lex_autogen.cpp',
        'glslang_tab_autogen.cpp',
        'util.cpp',
        'tree_ops/ClampPointSize.cpp',
        'tree_ops/DeferGlobalInitializers.cpp',
        'tree_ops/EmulateGLFragColorBroadcast.cpp',
        'tree_ops/EmulateMultiDrawShaderBuiltins.cpp',
        'tree_ops/FoldExpressions.cpp',
        'tree_ops/InitializeVariables.cpp',
        'tree_ops/PruneEmptyCases.cpp',
        'tree_ops/PruneNoOps.cpp',
        'tree_ops/RecordConstantPrecision.cpp',
        'tree_ops/RemoveArrayLengthMethod.cpp',
        'tree_ops/RemoveDynamicIndexing.cpp',
        'tree_ops/RemoveInvariantDeclaration.cpp',
        'tree_ops/RemoveUnreferencedVariables.cpp',
        'tree_ops/RewriteDoWhile.cpp',
        'tree_ops/ScalarizeVecAndMatConstructorArgs.cpp',
        'tree_ops/SeparateDeclarations.cpp',
        'tree_ops/SimplifyLoopConditions.cpp',
        'tree_ops/SplitSequenceOperator.cpp',
        'tree_ops/UnfoldShortCircuitAST.cpp',
        'tree_util/FindFunction.cpp',
        'tree_util/FindMain.cpp',
        'tree_util/FindSymbolNode.cpp',
        'tree_util/IntermNodePatternMatcher.cpp',
        'tree_util/IntermNode_util.cpp',
        'tree_util/IntermTraverse.cpp',
        'tree_util/ReplaceVariable.cpp',
        'tree_util/RunAtTheEndOfShader.cpp',
    ]),
    defines=common_defines + [
        ('ANGLE_ENABLE_ESSL', None),
        ('ANGLE_ENABLE_GLSL', None),
        ('ANGLE_ENABLE_HLSL', None),
    ],
)


EGL = descriptor(
    includes=common_includes,
    sources=indir(checkout + '/src/libEGL', [
        'egl_loader_autogen.cpp',
        'libEGL_autogen.cpp',
    ]),
    defines=common_defines + [
        ('ANGLE_USE_EGL_LOADER', None),
        ('LIBEGL_IMPLEMENTATION', None),
        ('EGLAPI', ''),
        ('ANGLE_GLESV2_LIBRARY_NAME', '"libGLESv2"'),
    ],
    os_libs=['user32'],
)


GLESV2 = descriptor(
    includes=common_includes + indir(checkout, [
        'src/libANGLE',
        'third_party/zlib/google',
    ]),
    sources=indir(checkout + '/src/libGLESv2', [
        'egl_ext_stubs.cpp',
        'egl_stubs.cpp',
        'entry_points_egl_autogen.cpp',
        'entry_points_egl_ext_autogen.cpp',
        'entry_points_gles_2_0_autogen.cpp',
        'entry_points_gles_3_0_autogen.cpp',
        'entry_points_gles_ext_autogen.cpp',
        'global_state.cpp',
        'libGLESv2_autogen.cpp',
        'proc_table_egl_autogen.cpp',
    ]) + indir(checkout + '/src/libANGLE', [
        'AttributeMap.cpp',
        'BlobCache.cpp',
        'Buffer.cpp',
        'Caps.cpp',
        'Compiler.cpp',
        'Config.cpp',
        'Context.cpp',
        'Debug.cpp',
        'Device.cpp',
        'Display.cpp',
        'EGLSync.cpp',
        'Error.cpp',
        'Fence.cpp',
        'Framebuffer.cpp',
        'FramebufferAttachment.cpp',
        'GLES1State.cpp',
        'HandleAllocator.cpp',
        'Image.cpp',
        'ImageIndex.cpp',
        'IndexRangeCache.cpp',
        'LoggingAnnotator.cpp',
        'MemoryProgramCache.cpp',
        'Observer.cpp',
        'Platform.cpp',
        'Program.cpp',
        'ProgramLinkedResources.cpp',
        'ProgramPipeline.cpp',
        'Query.cpp',
        'Renderbuffer.cpp',
        'ResourceManager.cpp',
        'Sampler.cpp',
        'Shader.cpp',
        'State.cpp',
        'Stream.cpp',
        'Surface.cpp',
        'Texture.cpp',
        'Thread.cpp',
        'TransformFeedback.cpp',
        'Uniform.cpp',
        'VaryingPacking.cpp',
        'VertexArray.cpp',
        'VertexAttribute.cpp',
        'angletypes.cpp',
        'formatutils.cpp',
        'queryconversions.cpp',
        'queryutils.cpp',
        'validationEGL.cpp',
        'validationES.cpp',
        'validationES2.cpp',
        'validationES3.cpp',
        'validationESEXT.cpp',
        'renderer/ContextImpl.cpp',
        'renderer/DisplayImpl.cpp',
        'renderer/Format_table_autogen.cpp',
        'renderer/ShaderImpl.cpp',
        'renderer/SurfaceImpl.cpp',
        'renderer/TextureImpl.cpp',
        'renderer/driver_utils.cpp',
        'renderer/renderer_utils.cpp',
        'renderer/d3d/BufferD3D.cpp',
        'renderer/d3d/CompilerD3D.cpp',
        'renderer/d3d/DisplayD3D.cpp',
        'renderer/d3d/DynamicHLSL.cpp',
        'renderer/d3d/EGLImageD3D.cpp',
        'renderer/d3d/FramebufferD3D.cpp',
        'renderer/d3d/HLSLCompiler.cpp',
        'renderer/d3d/ImageD3D.cpp',
        'renderer/d3d/IndexBuffer.cpp',
        'renderer/d3d/IndexDataManager.cpp',
        'renderer/d3d/ProgramD3D.cpp',
        'renderer/d3d/RenderbufferD3D.cpp',
        'renderer/d3d/RendererD3D.cpp',
        'renderer/d3d/ShaderD3D.cpp',
        'renderer/d3d/SurfaceD3D.cpp',
        'renderer/d3d/TextureD3D.cpp',
        'renderer/d3d/VertexBuffer.cpp',
        'renderer/d3d/VertexDataManager.cpp',
        'renderer/d3d/d3d11/Context11.cpp',
        'renderer/d3d/d3d11/Renderer11.cpp',
        'renderer/d3d/d3d11/renderer11_utils.cpp',
        'renderer/d3d/d3d9/Context9.cpp',
        'renderer/d3d/d3d9/Renderer9.cpp',
        'renderer/d3d/d3d9/renderer9_utils.cpp',
    ]),
    defines=common_defines + [
        ('LIBANGLE_IMPLEMENTATION', None),
        ('LIBGLESV2_IMPLEMENTATION', None),
        ('ANGLE_ENABLE_D3D9', None),
        ('ANGLE_ENABLE_D3D11', None),
        ('ANGLE_CAPTURE_ENABLED', '0'),
        ('GL_API', ''),
        ('GL_APICALL', ''),
        ('EGLAPI', ''),
        ('ANGLE_EGL_LIBRARY_NAME', '"libEGL"'),
    ],
    os_libs=['d3d9', 'dxgi', 'dxguid', 'user32', 'gdi32'],
)


DESCRIPTORS = {
    'common': ANGLE_COMMON,
    'preprocessor': PREPROCESSOR,
    'translator': TRANSLATOR,
    'egl': EGL,
    'glesv2': GLESV2,
}
