import pytest

from shared.config import GlobalConfig, PassShieldConfig
from passshield.analyzers.password import PasswordAnalyzer


@pytest.fixture()
def analyzer():
    return PasswordAnalyzer()


@pytest.fixture()
def quiet_config():
    # Keep engine log records off stderr while tests run.
    return PassShieldConfig(global_settings=GlobalConfig(log_level="WARNING"))


@pytest.fixture()
def config_file(tmp_path):
    path = tmp_path / "passshield.toml"
    path.write_text(
        '[global]\n'
        'log_level = "WARNING"\n'
        f'output_dir = "{(tmp_path / "out").as_posix()}"\n'
        '\n'
        '[generator]\n'
        'length = 20\n',
        encoding="utf-8",
    )
    return path
