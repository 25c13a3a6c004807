class BuildError(Exception):
    pass


class ConfigurationError(BuildError):
    pass


class ToolError(BuildError):
    def __init__(self, msg, cmd=None, returncode=None):
        BuildError.__init__(self, msg)
        self.cmd = cmd
        self.returncode = returncode


class LinkerNotFound(ToolError):
    pass
