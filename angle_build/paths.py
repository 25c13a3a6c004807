from angle_build.errors import ConfigurationError

# Descriptor paths are written relative to gfx/angle/targets/<module> in the
# upstream checkout; the build runs from the crate root.
UPSTREAM_PREFIX = '../../'
LOCAL_ROOT = 'gfx/angle/'


def fixup_path(path):
    if not path.startswith(UPSTREAM_PREFIX):
        raise ConfigurationError('descriptor path %r does not start with %r' %
                                 (path, UPSTREAM_PREFIX))
    return '%s%s' % (LOCAL_ROOT, path[len(UPSTREAM_PREFIX):])


def indir(name, paths):
    return ['%s/%s' % (name, path) for path in paths]


def setext(ext, paths):
    return ['%s%s' % (path.rsplit('.', 1)[0], ext) for path in paths]


def outof(paths, ext='.o', outdir='out'):
    res = []
    for path in paths:
        if not path.startswith(outdir + '/'):
            path = '%s/%s' % (outdir, path)
        res.append(path)
    if ext:
        res = setext(ext, res)
    return res
