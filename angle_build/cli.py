"""Command line entry points.

Build directives go to stdout for the calling build script; logging goes to
stderr.
"""

import os
import sys
from typing import Optional

import typer
from loguru import logger

from angle_build import pipeline
from angle_build.config import BuildEnv
from angle_build.directives import Directives
from angle_build.errors import BuildError

app = typer.Typer(
    name="angle-build",
    help="Compile ANGLE's shader translator and generate its Rust bindings.",
    add_completion=False,
)

TARGET_OPT = typer.Option(None, "--target", help="Target triple (default: $TARGET)")
OUT_DIR_OPT = typer.Option(None, "--out-dir", help="Build output directory (default: $OUT_DIR)")
EGL_OPT = typer.Option(None, "--egl/--no-egl", help="Build the EGL/GLES loader libraries")
DLLS_OPT = typer.Option(None, "--dlls/--no-dlls", help="Link libEGL.dll and libGLESv2.dll")
VERBOSE_OPT = typer.Option(False, "--verbose", "-v", help="Log debug output")


def setup_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO",
               format="<level>{level: <8}</level> {message}")


def load_env(target: Optional[str], out_dir: Optional[str], egl: Optional[bool],
             dlls: Optional[bool]) -> BuildEnv:
    return BuildEnv.from_environ(target=target, out_dir=out_dir, egl=egl,
                                 build_dlls=dlls)


@app.command("build")
def build(
    target: Optional[str] = TARGET_OPT,
    out_dir: Optional[str] = OUT_DIR_OPT,
    egl: Optional[bool] = EGL_OPT,
    dlls: Optional[bool] = DLLS_OPT,
    verbose: bool = VERBOSE_OPT,
) -> None:
    """Compile the archives, generate bindings and emit cargo directives."""
    setup_logging(verbose)
    try:
        env = load_env(target, out_dir, egl, dlls)
        os.chdir(env.manifest_dir)
        pipeline.build(env, Directives(sys.stdout))
    except BuildError as e:
        logger.error(str(e))
        raise typer.Exit(1)


@app.command("ninja")
def ninja(
    target: Optional[str] = TARGET_OPT,
    out_dir: Optional[str] = OUT_DIR_OPT,
    egl: Optional[bool] = EGL_OPT,
    dlls: Optional[bool] = DLLS_OPT,
    verbose: bool = VERBOSE_OPT,
) -> None:
    """Print the generated build.ninja without running it."""
    setup_logging(verbose)
    try:
        env = load_env(target, out_dir, egl, dlls)
        units = pipeline.plan(env)
        pipeline.generate(env, sys.stdout, units)
    except BuildError as e:
        logger.error(str(e))
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
