import pytest


@pytest.fixture
def sample_fs(tmp_path):
    """root/x (500 bytes) and root/Y/z (2048 bytes)."""
    (tmp_path / "x").write_bytes(b"\0" * 500)
    (tmp_path / "Y").mkdir()
    (tmp_path / "Y" / "z").write_bytes(b"\0" * 2048)
    return tmp_path
