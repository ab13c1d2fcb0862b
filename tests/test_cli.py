"""
CLI 통합 테스트 모듈

get / list / clean / run 명령의 종료 코드와 출력을 검증합니다.
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import git
import pytest
from typer.testing import CliRunner

from bashx import __version__
from bashx.cli import app
from bashx.config.settings import get_settings
from bashx.models.entries import ProcessResult


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def cache_root(tmp_path, monkeypatch):
    """환경 변수로 지정한 테스트 캐시 루트"""
    root = tmp_path / "cache"
    monkeypatch.setenv("BASHX_CACHE_DIR", str(root))
    get_settings.cache_clear()
    yield root
    get_settings.cache_clear()


@pytest.fixture
def fake_process_manager():
    """CLI가 생성하는 프로세스 매니저 대체"""
    manager = MagicMock()
    manager.run = AsyncMock(return_value=ProcessResult(0, "", ""))

    with patch("bashx.cli.ProcessManager", return_value=manager):
        yield manager


def _write_script(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("echo hello\n")
    return path


class TestVersion:
    """버전 옵션 테스트"""

    def test_version(self, cli_runner, cache_root):
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestGetCommand:
    """get 명령 테스트"""

    def test_get_success(self, cli_runner, cache_root):
        """저장소 복제 성공"""
        with patch("bashx.scripts.repository.git.Repo.clone_from") as mock_clone:
            result = cli_runner.invoke(app, ["get", "https://github.com/example/scripts.git"])

        assert result.exit_code == 0
        mock_clone.assert_called_once()
        assert mock_clone.call_args.args[1] == str(cache_root / "scripts")

    def test_get_empty_url(self, cli_runner, cache_root):
        """빈 URL은 복제 없이 실패"""
        with patch("bashx.scripts.repository.git.Repo.clone_from") as mock_clone:
            result = cli_runner.invoke(app, ["get", ""])

        assert result.exit_code == 1
        mock_clone.assert_not_called()
        assert not cache_root.exists()

    def test_get_clone_failure(self, cli_runner, cache_root):
        """복제 실패 시 git 오류 메시지와 함께 실패"""
        error = git.exc.GitCommandError("clone", 128, stderr="fatal: repository not found")

        with patch("bashx.scripts.repository.git.Repo.clone_from", side_effect=error):
            result = cli_runner.invoke(app, ["get", "https://github.com/example/missing.git"])

        assert result.exit_code == 1
        assert "repository not found" in result.output

    def test_get_cache_parent_is_file(self, cli_runner, tmp_path, monkeypatch):
        """캐시 상위 경로가 일반 파일이면 오류 메시지와 종료 코드 1"""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory\n")
        monkeypatch.setenv("BASHX_CACHE_DIR", str(blocker / "cache"))
        get_settings.cache_clear()

        try:
            with patch("bashx.scripts.repository.git.Repo.clone_from") as mock_clone:
                result = cli_runner.invoke(app, ["get", "https://github.com/example/scripts.git"])
        finally:
            get_settings.cache_clear()

        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
        assert "오류:" in result.output
        assert "Not a directory" in result.output
        mock_clone.assert_not_called()


class TestListCommand:
    """list 명령 테스트"""

    def test_list_empty_cache(self, cli_runner, cache_root):
        """캐시가 없으면 스크립트 0개, 종료 코드 0"""
        result = cli_runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "Script 1" not in result.output
        assert "없습니다" in result.output

    def test_list_scripts(self, cli_runner, cache_root):
        """모든 스크립트 경로와 개수 출력"""
        _write_script(cache_root / "repo" / "deploy.sh")
        _write_script(cache_root / "repo" / "nested" / "backup.sh")
        _write_script(cache_root / "repo" / "notes.txt")

        result = cli_runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "deploy.sh" in result.output
        assert "backup.sh" in result.output
        assert "notes.txt" not in result.output
        assert "Script 2" in result.output
        assert "2개" in result.output


class TestCleanCommand:
    """clean 명령 테스트"""

    def test_clean_then_list(self, cli_runner, cache_root):
        """삭제 후 list 결과 0개"""
        _write_script(cache_root / "repo" / "deploy.sh")

        result = cli_runner.invoke(app, ["clean"])
        assert result.exit_code == 0
        assert not cache_root.exists()

        result = cli_runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "Script 1" not in result.output

    def test_clean_twice(self, cli_runner, cache_root):
        """두 번 연속 삭제도 성공"""
        _write_script(cache_root / "repo" / "deploy.sh")

        assert cli_runner.invoke(app, ["clean"]).exit_code == 0
        assert cli_runner.invoke(app, ["clean"]).exit_code == 0

    def test_clean_failure(self, cli_runner, cache_root):
        """삭제 오류 시 종료 코드 1과 오류 메시지"""
        _write_script(cache_root / "repo" / "deploy.sh")

        with patch("bashx.scripts.cache_manager.shutil.rmtree",
                   side_effect=PermissionError(13, "Permission denied")):
            result = cli_runner.invoke(app, ["clean"])

        assert result.exit_code == 1
        assert "Permission denied" in result.output

    def test_clean_symlinked_cache(self, cli_runner, tmp_path, monkeypatch):
        """심볼릭 링크 캐시 루트도 정리 후 list 결과 0개"""
        target = tmp_path / "disk" / "cache"
        _write_script(target / "repo" / "deploy.sh")
        link = tmp_path / "link-cache"
        link.symlink_to(target, target_is_directory=True)
        monkeypatch.setenv("BASHX_CACHE_DIR", str(link))
        get_settings.cache_clear()

        try:
            listed = cli_runner.invoke(app, ["list"])
            cleaned = cli_runner.invoke(app, ["clean"])
            relisted = cli_runner.invoke(app, ["list"])
        finally:
            get_settings.cache_clear()

        assert listed.exit_code == 0
        assert "Script 1" in listed.output
        assert cleaned.exit_code == 0
        assert not link.is_symlink()
        assert relisted.exit_code == 0
        assert "Script 1" not in relisted.output


class TestRunCommand:
    """run 명령 테스트"""

    def test_run_confirmed(self, cli_runner, cache_root, fake_process_manager):
        """동의 후 스크립트 디렉토리에서 실행"""
        script = _write_script(cache_root / "repo" / "tools" / "deploy.sh")

        result = cli_runner.invoke(app, ["run", "deploy"], input="y\n")

        assert result.exit_code == 0
        fake_process_manager.run.assert_awaited_once()
        call = fake_process_manager.run.call_args
        assert call.args[0] == "bash"
        assert call.args[1] == [str(script.absolute())]
        assert call.kwargs["working_dir"] == script.absolute().parent

    def test_run_declined(self, cli_runner, cache_root, fake_process_manager):
        """거부 시 종료 코드 0, 권한 설정과 실행 없음"""
        script = _write_script(cache_root / "repo" / "deploy.sh")
        script.chmod(0o644)

        result = cli_runner.invoke(app, ["run", "deploy"], input="n\n")

        assert result.exit_code == 0
        assert "취소" in result.output
        fake_process_manager.run.assert_not_awaited()
        assert script.stat().st_mode & 0o777 == 0o644

    def test_run_default_is_refusal(self, cli_runner, cache_root, fake_process_manager):
        """빈 응답은 기본값(거부)으로 처리"""
        _write_script(cache_root / "repo" / "deploy.sh")

        result = cli_runner.invoke(app, ["run", "deploy"], input="\n")

        assert result.exit_code == 0
        fake_process_manager.run.assert_not_awaited()

    def test_run_without_input_refuses(self, cli_runner, cache_root, fake_process_manager):
        """입력을 받을 수 없으면 거부"""
        _write_script(cache_root / "repo" / "deploy.sh")

        result = cli_runner.invoke(app, ["run", "deploy"])

        assert result.exit_code == 0
        fake_process_manager.run.assert_not_awaited()

    def test_run_missing_script(self, cli_runner, cache_root, fake_process_manager):
        """없는 스크립트는 확인 질의 없이 종료 코드 1"""
        _write_script(cache_root / "repo" / "deploy.sh")

        with patch("bashx.execution.gate.ExecutionGate.confirm") as mock_confirm:
            result = cli_runner.invoke(app, ["run", "missing-name"])

        assert result.exit_code == 1
        assert "missing-name" in result.output
        mock_confirm.assert_not_called()
        fake_process_manager.run.assert_not_awaited()

    def test_run_script_failure(self, cli_runner, cache_root, fake_process_manager):
        """스크립트 종료 코드 7은 실패로 보고"""
        _write_script(cache_root / "repo" / "deploy.sh")
        fake_process_manager.run.return_value = ProcessResult(7, "", "")

        result = cli_runner.invoke(app, ["run", "deploy"], input="y\n")

        assert result.exit_code == 1
        assert "7" in result.output

    def test_run_duplicate_names(self, cli_runner, cache_root, fake_process_manager):
        """같은 이름의 스크립트는 하나만 실행"""
        foo = _write_script(cache_root / "foo" / "deploy.sh").absolute()
        bar = _write_script(cache_root / "bar" / "deploy.sh").absolute()

        result = cli_runner.invoke(app, ["run", "deploy"], input="y\n")

        assert result.exit_code == 0
        fake_process_manager.run.assert_awaited_once()
        assert Path(fake_process_manager.run.call_args.args[1][0]) in (foo, bar)

    def test_invalid_configuration(self, cli_runner, cache_root, monkeypatch):
        """잘못된 설정은 종료 코드 1"""
        monkeypatch.setenv("BASHX_SCRIPT_SUFFIX", "sh")
        get_settings.cache_clear()

        result = cli_runner.invoke(app, ["list"])

        assert result.exit_code == 1
        assert "BASHX_SCRIPT_SUFFIX" in result.output

    def test_malformed_env_value(self, cli_runner, cache_root, monkeypatch):
        """형식이 잘못된 환경 변수 값은 추적 정보 없이 종료 코드 1"""
        monkeypatch.setenv("BASHX_CLONE_DEPTH", "abc")
        get_settings.cache_clear()

        result = cli_runner.invoke(app, ["list"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "오류:" in result.output
        assert "BASHX_CLONE_DEPTH" in result.output
