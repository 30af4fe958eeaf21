"""Tests for configuration adapters."""

from pathlib import Path

import pytest

from transit_agencies.adapters.agencies import BUILTIN_AGENCIES
from transit_agencies.adapters.config import AgencyConfigurationLoader, AppConfig
from transit_agencies.application.services import normalize_line, normalize_position, style_for_line
from transit_agencies.domain.exceptions import (
    ConfigurationError,
    DuplicateAgencyError,
    MalformedTableError,
    UnknownAgencyError,
)
from transit_agencies.domain.models import (
    AgencyId,
    Capability,
    Line,
    Position,
    RawLine,
    Shape,
    TransportMode,
)
from transit_agencies.domain.models.style import WHITE, parse_color

AGENCY_FILE = """
[[agencies]]
id = "septa"
region = "septa"
timezone = "America/New_York"
language = "en"
capabilities = ["SUGGEST_LOCATIONS", "DEPARTURES"]
default_modes = ["BUS", "TRAM", "SUBURBAN_TRAIN"]
mode_codes = ["none", "SUBURBAN_TRAIN", "BUS"]
position_prefixes = ["Track "]
bound_suffix_positions = true

[[agencies.line_rules]]
name = "airport"
when = { mode_hint = 1, name = "Airport Line" }
absent = ["train_num"]
mode = "SUBURBAN_TRAIN"
label = "AIR"

[[agencies.line_rules]]
when = { train_name = "Regional Rail" }
present = ["train_num"]
mode = "REGIONAL_TRAIN"
label = "RR{train_num}"

[agencies.styles]
SAIR = { background = "#91456c", shape = "rect" }
"""


@pytest.fixture
def agency_file(tmp_path: Path) -> Path:
    """Agency file with one complete agency."""
    path = tmp_path / "agencies.toml"
    path.write_text(AGENCY_FILE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings from the environment out of the tests."""
    for name in ("AGENCIES_FILE", "INCLUDE_BUILTIN_AGENCIES", "ENABLED_AGENCIES", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.agencies_file is None
    assert config.include_builtin_agencies is True
    assert config.get_enabled_agencies() == []
    assert config.log_level == "INFO"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("ENABLED_AGENCIES", "tfi, mvg,,")
    monkeypatch.setenv("INCLUDE_BUILTIN_AGENCIES", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.get_enabled_agencies() == ["TFI", "MVG"]
    assert config.include_builtin_agencies is False
    assert config.log_level == "DEBUG"


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an invalid log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig()


def test_loader_defaults_to_builtin_catalog() -> None:
    """Given no agency file, when loading, then the built-in catalog is returned."""
    agencies = AgencyConfigurationLoader.load(AppConfig())

    assert [a.agency_id for a in agencies] == [a.agency_id for a in BUILTIN_AGENCIES]


def test_loader_reads_agency_file(agency_file: Path) -> None:
    """Given an agency file, when loading without the catalog, then the file agency is built."""
    agencies = AgencyConfigurationLoader.load(
        AppConfig(agencies_file=str(agency_file), include_builtin_agencies=False)
    )

    assert len(agencies) == 1
    septa = agencies[0]
    assert septa.agency_id is AgencyId.SEPTA
    assert septa.language == "en"
    assert septa.capabilities == frozenset({Capability.SUGGEST_LOCATIONS, Capability.DEPARTURES})
    assert septa.default_modes == frozenset(
        {TransportMode.BUS, TransportMode.TRAM, TransportMode.SUBURBAN_TRAIN}
    )
    assert septa.mode_table.mode_of(0) is None
    assert septa.mode_table.mode_of(2) is TransportMode.BUS


def test_file_line_rules(agency_file: Path) -> None:
    """Given rules from the agency file, when normalizing, then they apply in file order."""
    [septa] = AgencyConfigurationLoader.load(
        AppConfig(agencies_file=str(agency_file), include_builtin_agencies=False)
    )

    assert normalize_line(septa, RawLine(mode_hint=1, name="Airport Line")) == Line(
        id=None, network=None, mode=TransportMode.SUBURBAN_TRAIN, label="AIR"
    )
    assert normalize_line(septa, RawLine(mode_hint=1, name="Airport Line", train_num="4")).label == (
        "Airport Line"
    )
    assert normalize_line(septa, RawLine(train_name="Regional Rail", train_num="9")).label == "RR9"


def test_file_position_and_style_rules(agency_file: Path) -> None:
    """Given position and style settings from the file, when normalizing, then they are used."""
    [septa] = AgencyConfigurationLoader.load(
        AppConfig(agencies_file=str(agency_file), include_builtin_agencies=False)
    )

    assert normalize_position(septa, "s-bound") == Position(name="s-bound", direction="S")
    assert normalize_position(septa, "Track 2") == Position(name="2")

    style = style_for_line(septa, Line(id=None, network=None, mode=TransportMode.SUBURBAN_TRAIN, label="AIR"))
    assert style.background_color == parse_color("#91456c")
    assert style.foreground_color == WHITE
    assert style.shape is Shape.RECT


def test_file_agency_replaces_builtin(tmp_path: Path) -> None:
    """Given a file agency with a built-in id, when loading, then the file row wins."""
    path = tmp_path / "agencies.toml"
    path.write_text(
        '[[agencies]]\nid = "TFI"\nregion = "tfi"\ntimezone = "Europe/Dublin"\nmode_codes = { 5 = "BUS" }\n',
        encoding="utf-8",
    )

    agencies = AgencyConfigurationLoader.load(AppConfig(agencies_file=str(path)))
    tfi = next(a for a in agencies if a.agency_id is AgencyId.TFI)

    assert len(agencies) == len(BUILTIN_AGENCIES)
    assert tfi.region == "tfi"
    assert tfi.line_rules == ()
    assert tfi.mode_table.mode_of(5) is TransportMode.BUS
    assert tfi.mode_table.mode_of(4) is None


def test_duplicate_ids_in_file(tmp_path: Path) -> None:
    """Given the same agency twice in the file, when loading, then it is rejected."""
    path = tmp_path / "agencies.toml"
    row = '[[agencies]]\nid = "VVS"\nregion = "vvs"\ntimezone = "Europe/Berlin"\n'
    path.write_text(row + row, encoding="utf-8")

    with pytest.raises(DuplicateAgencyError):
        AgencyConfigurationLoader.load(AppConfig(agencies_file=str(path)))


def test_unknown_agency_in_file(tmp_path: Path) -> None:
    """Given an agency id outside the identifier set, when loading, then it is rejected."""
    path = tmp_path / "agencies.toml"
    path.write_text('[[agencies]]\nid = "ATLANTIS"\nregion = "a"\ntimezone = "UTC"\n', encoding="utf-8")

    with pytest.raises(UnknownAgencyError, match="ATLANTIS"):
        AgencyConfigurationLoader.load(AppConfig(agencies_file=str(path)))


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ('[[agencies]]\nid = "VVS"\nregion = "vvs"\n', "timezone"),
        ('[[agencies]]\nid = "VVS"\nregion = "vvs"\ntimezone = "UTC"\nmode_codes = ["WARP"]\n', "WARP"),
        (
            '[[agencies]]\nid = "VVS"\nregion = "vvs"\ntimezone = "UTC"\ncapabilities = ["TELEPORT"]\n',
            "TELEPORT",
        ),
        (
            '[[agencies]]\nid = "VVS"\nregion = "vvs"\ntimezone = "UTC"\n'
            '[[agencies.line_rules]]\nwhen = { platform = "1" }\n',
            "platform",
        ),
        ('[[agencies]]\nid = "VVS"\nregion = "vvs"\ntimezone = "UTC"\ncolour = "red"\n', "colour"),
        ("[[agencies]\n", "Invalid TOML"),
    ],
)
def test_invalid_agency_file(tmp_path: Path, content: str, message: str) -> None:
    """Given a malformed agency file, when loading, then a configuration error names the problem."""
    path = tmp_path / "agencies.toml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError, match=message):
        AgencyConfigurationLoader.load(AppConfig(agencies_file=str(path)))


def test_unknown_template_field_in_file(tmp_path: Path) -> None:
    """Given a label template with an unknown placeholder, when loading, then the table is malformed."""
    path = tmp_path / "agencies.toml"
    path.write_text(
        '[[agencies]]\nid = "VVS"\nregion = "vvs"\ntimezone = "UTC"\n'
        '[[agencies.line_rules]]\nwhen = { name = "X" }\nlabel = "{operator}"\n',
        encoding="utf-8",
    )

    with pytest.raises(MalformedTableError, match="operator"):
        AgencyConfigurationLoader.load(AppConfig(agencies_file=str(path)))


def test_missing_agency_file() -> None:
    """Given a non-existent agency file, when loading, then a configuration error is raised."""
    with pytest.raises(ConfigurationError, match="Agency file not found"):
        AgencyConfigurationLoader.load(AppConfig(agencies_file="nonexistent.toml"))


def test_enabled_agencies_filter() -> None:
    """Given enabled agencies, when loading, then only those are returned in the given order."""
    agencies = AgencyConfigurationLoader.load(AppConfig(enabled_agencies="MVG,TFI,MVG"))

    assert [a.agency_id for a in agencies] == [AgencyId.MVG, AgencyId.TFI]


@pytest.mark.parametrize("enabled", ["ATLANTIS", "SEPTA"])
def test_enabled_agency_must_be_configured(enabled: str) -> None:
    """Given an enabled agency that is unknown or not configured, when loading, then it fails."""
    with pytest.raises(UnknownAgencyError, match=enabled):
        AgencyConfigurationLoader.load(AppConfig(enabled_agencies=enabled))


@pytest.mark.parametrize(
    ("label", "message"),
    [
        ("{train_num:d}", "conversions or format specs"),
        ("{name!r}", "conversions or format specs"),
        ("{name!z}", "abel template"),
        ("{name[0]}", "name\\[0\\]"),
    ],
)
def test_label_template_must_render_plain_fields(tmp_path: Path, label: str, message: str) -> None:
    """Given a label template with a format spec or conversion, when loading, then it is rejected."""
    path = tmp_path / "agencies.toml"
    path.write_text(
        '[[agencies]]\nid = "VVS"\nregion = "vvs"\ntimezone = "UTC"\n'
        f"[[agencies.line_rules]]\nwhen = {{ name = \"X\" }}\nlabel = '{label}'\n",
        encoding="utf-8",
    )

    with pytest.raises(MalformedTableError, match=message):
        AgencyConfigurationLoader.load(AppConfig(agencies_file=str(path)))


@pytest.mark.parametrize(
    ("condition", "message"),
    [
        ('mode_hint = "0"', "mode_hint must be int"),
        ("name = 3", "name must be str"),
    ],
)
def test_condition_values_must_match_field_types(tmp_path: Path, condition: str, message: str) -> None:
    """Given a condition of the wrong type, when loading, then the file is rejected instead of never matching."""
    path = tmp_path / "agencies.toml"
    path.write_text(
        '[[agencies]]\nid = "VVS"\nregion = "vvs"\ntimezone = "UTC"\n'
        f'[[agencies.line_rules]]\nwhen = {{ {condition} }}\nlabel = "hit"\n',
        encoding="utf-8",
    )

    with pytest.raises(ConfigurationError, match=message):
        AgencyConfigurationLoader.load(AppConfig(agencies_file=str(path)))


def test_integer_mode_hint_condition_matches(tmp_path: Path) -> None:
    """Given an integer mode hint condition, when normalizing a matching line, then the rule fires."""
    path = tmp_path / "agencies.toml"
    path.write_text(
        '[[agencies]]\nid = "VVS"\nregion = "vvs"\ntimezone = "UTC"\n'
        '[[agencies.line_rules]]\nwhen = { mode_hint = 0, name = "X" }\nlabel = "hit"\n',
        encoding="utf-8",
    )

    [vvs] = AgencyConfigurationLoader.load(
        AppConfig(agencies_file=str(path), include_builtin_agencies=False)
    )

    assert normalize_line(vvs, RawLine(mode_hint=0, name="X")).label == "hit"


def test_unreadable_agency_file(tmp_path: Path) -> None:
    """Given an agency file path that is a directory, when loading, then a configuration error is raised."""
    with pytest.raises(ConfigurationError, match="Cannot read agency file"):
        AgencyConfigurationLoader.load(AppConfig(agencies_file=str(tmp_path)))
