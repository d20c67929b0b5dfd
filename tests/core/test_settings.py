from xmltally.core.config.settings import Settings
from xmltally.core.common.enums import OutcomeStatus
from xmltally.core.errors import XmlParseError, XmlTallyError


def test_default_extensions(monkeypatch):
    monkeypatch.delenv("XMLTALLY_EXTENSIONS", raising=False)
    assert Settings().DEFAULT_EXTENSIONS == "*.xml,*.out"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("XMLTALLY_EXTENSIONS", "*.xml")
    monkeypatch.setenv("XMLTALLY_LOG_LEVEL", "debug")

    s = Settings()

    assert s.DEFAULT_EXTENSIONS == "*.xml"
    assert s.LOG_LEVEL == "DEBUG"


def test_no_color_disables_colour(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert Settings().USE_COLOR is True

    monkeypatch.setenv("NO_COLOR", "1")
    assert Settings().USE_COLOR is False


def test_outcome_status_values():
    assert OutcomeStatus.PARSED == "parsed"
    assert OutcomeStatus.FAILED == "failed"


def test_parse_error_message_names_the_file(tmp_path):
    err = XmlParseError("mismatched tag: line 1, column 2", path=tmp_path / "x.xml")

    assert isinstance(err, XmlTallyError)
    assert err.reason == "mismatched tag: line 1, column 2"
    assert str(err).startswith(str(tmp_path / "x.xml"))
