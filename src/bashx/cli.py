"""
bashx CLI (Typer)

GitHub 등 원격 저장소의 bash 스크립트를 캐시에 받아 두고 실행합니다.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from . import __version__
from .config.settings import Settings, get_settings, resolve_cache_root
from .exceptions import BashxException, ConfigurationException
from .execution import ExecutionGate, ProcessManager, ScriptExecutor, ScriptRunner
from .models.enums import RunStatus
from .scripts import CacheManager, GitRepository, ScriptIndexer, ScriptResolver
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

app = typer.Typer(
    name="bashx",
    help="Run bash scripts from GitHub with ease",
    no_args_is_help=True,
    add_completion=False,
)


@dataclass
class AppContext:
    """명령 실행 동안 공유되는 설정과 캐시 루트"""

    settings: Settings
    cache_root: Path

    def indexer(self) -> ScriptIndexer:
        return ScriptIndexer(self.cache_root, self.settings.script_suffix)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bashx {__version__}")
        raise typer.Exit()


def _fail(message: str) -> None:
    typer.echo(f"오류: {message}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Run bash scripts from GitHub with ease"""
    try:
        settings = get_settings()
    except ConfigurationException as e:
        _fail(e.message)

    setup_logging(settings)
    # 캐시 루트는 프로세스당 한 번만 계산
    ctx.obj = AppContext(settings=settings, cache_root=resolve_cache_root(settings))
    logger.debug(f"캐시 루트: {ctx.obj.cache_root}")


@app.command()
def get(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Repository URL to clone into the cache"),
):
    """Clone a script repository into the cache"""
    app_ctx: AppContext = ctx.obj

    if not url.strip():
        _fail("URL은 비어 있을 수 없습니다.")

    destination = CacheManager(app_ctx.cache_root).destination_for(url)
    typer.echo(f"저장소 복제 중: {url} -> {destination}")

    repository = GitRepository(depth=app_ctx.settings.clone_depth)
    try:
        asyncio.run(repository.clone(url, destination))
    except BashxException as e:
        _fail(e.message)

    typer.echo("저장소 복제가 완료되었습니다.")


@app.command("list")
def list_scripts(ctx: typer.Context):
    """List every cached script"""
    app_ctx: AppContext = ctx.obj

    script_count = 0
    for entry in app_ctx.indexer().iter_scripts():
        script_count += 1
        typer.echo(f"Script {script_count}: {entry.path}")

    if script_count == 0:
        typer.echo("캐시에 bash 스크립트가 없습니다.")
    else:
        typer.echo(f"총 {script_count}개의 스크립트를 찾았습니다.")


@app.command()
def clean(ctx: typer.Context):
    """Remove the whole script cache"""
    app_ctx: AppContext = ctx.obj
    typer.echo("캐시 정리 중...")

    try:
        removed = CacheManager(app_ctx.cache_root).clean()
    except BashxException as e:
        _fail(e.message)

    if removed:
        typer.echo(f"캐시 디렉토리를 삭제했습니다: {app_ctx.cache_root}")
    else:
        typer.echo("정리할 캐시 디렉토리가 없습니다.")


@app.command()
def run(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Script name without the extension"),
):
    """Run a script from the cache"""
    app_ctx: AppContext = ctx.obj

    executor = ScriptExecutor(
        resolver=ScriptResolver(app_ctx.indexer()),
        gate=ExecutionGate(),
        runner=ScriptRunner(ProcessManager(), app_ctx.settings.interpreter),
    )

    try:
        status = executor.run_script(name)
    except BashxException as e:
        _fail(e.message)

    if status is RunStatus.CANCELLED:
        typer.echo("스크립트 실행이 취소되었습니다.")
    else:
        typer.echo("스크립트가 성공적으로 실행되었습니다.")


if __name__ == "__main__":
    app()
