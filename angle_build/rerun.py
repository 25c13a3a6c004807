import os

from angle_build.errors import ToolError

UPSTREAM_TREE = 'gfx'


def fail(err):
    raise ToolError('cannot walk %s: %s' % (err.filename, err.strerror))


def walk_tree(root):
    if not os.path.isdir(root):
        raise ToolError('upstream tree %s does not exist' % root)
    yield root
    for (base, dirs, files) in os.walk(root, onerror=fail):
        dirs.sort()
        for name in sorted(dirs + files):
            yield os.path.join(base, name)


def emit_rerun(directives, root=UPSTREAM_TREE, glue=None):
    count = 0
    if glue:
        directives.rerun_if_changed(glue)
    for path in walk_tree(root):
        directives.rerun_if_changed(path)
        count += 1
    return count
