from pathlib import Path
import pytest

@pytest.fixture(scope="session")
def project_root() -> Path:
    return Path(__file__).resolve().parents[1]

@pytest.fixture(scope="session")
def cfg_path(project_root: Path) -> Path:
    # the sample config shipped with the repo
    return project_root / "config" / "config.toml"

@pytest.fixture(scope="session")
def cfg(cfg_path: Path):
    from data_sanitizer.config_model.model import load_config
    return load_config(str(cfg_path))

@pytest.fixture
def user_data() -> dict:
    return {
        "role": "admin",
        "name": "  jOHN smith ",
        "email": " John.Smith@Example.COM ",
        "address": {"street": " 1 Main St ", "zip": " 12345-6789 "},
        "items": [{"sku": " ab-1 "}, {"sku": " cd-2 "}],
    }
