from pathlib import Path

import pytest

from sgu.core.signals import global_signals
from sgu.services import VdfParsingService
from sgu.utils.logger_utils import reconfigure_logger


@pytest.fixture(autouse=True, scope="session")
def _log_to_tmp(tmp_path_factory):
    reconfigure_logger(tmp_path_factory.mktemp("logs"), "CRITICAL")


@pytest.fixture
def vdf():
    return VdfParsingService()


@pytest.fixture
def skipped():
    """Collects everything reported on the scan_skipped signal."""
    reports = []

    def collect(path, reason):
        reports.append((path, reason))

    global_signals.scan_skipped.connect(collect)
    yield reports
    global_signals.scan_skipped.disconnect(collect)


def write_manifest(library: Path, app_id, name="", installdir="", size="0", file_id=None):
    """Writes an appmanifest_<id>.acf the way Steam lays it out."""
    library.mkdir(parents=True, exist_ok=True)
    file_id = app_id if file_id is None else file_id
    text = (
        '"AppState"\n'
        "{\n"
        f'\t"appid"\t\t"{app_id}"\n'
        '\t"Universe"\t\t"1"\n'
        f'\t"name"\t\t"{name}"\n'
        '\t"StateFlags"\t\t"4"\n'
        f'\t"installdir"\t\t"{installdir}"\n'
        f'\t"SizeOnDisk"\t\t"{size}"\n'
        '\t"InstalledDepots"\n'
        "\t{\n"
        '\t\t"441"\n'
        "\t\t{\n"
        '\t\t\t"manifest"\t\t"7707612755105236827"\n'
        "\t\t}\n"
        "\t}\n"
        "}\n"
    )
    path = library / f"appmanifest_{file_id}.acf"
    path.write_text(text, encoding="utf-8")
    return path


def write_library_folders(primary: Path, extra_roots):
    primary.mkdir(parents=True, exist_ok=True)
    lines = ['"LibraryFolders"', "{", '\t"TimeNextStatsReport"\t\t"1600000000"', '\t"ContentStatsID"\t\t"-123"']
    for i, root in enumerate(extra_roots, start=1):
        lines.append(f'\t"{i}"\t\t"{root}"')
    lines.append("}")
    (primary / "libraryfolders.vdf").write_text("\n".join(lines) + "\n", encoding="utf-8")
