import sys


class Directives(object):
    """Build-script output consumed by cargo, one directive per line."""

    def __init__(self, output=None, prefix='cargo:'):
        self.output = output if output is not None else sys.stdout
        self.prefix = prefix

    def emit(self, key, value):
        self.output.write('%s%s=%s\n' % (self.prefix, key, value))

    def rustc_link_lib(self, name, kind=None):
        self.emit('rustc-link-lib', '%s=%s' % (kind, name) if kind else name)

    def rustc_link_search(self, path, kind='native'):
        self.emit('rustc-link-search', '%s=%s' % (kind, path))

    def rerun_if_changed(self, path):
        self.emit('rerun-if-changed', path)

    def warning(self, msg):
        self.emit('warning', msg)
