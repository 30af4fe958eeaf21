"""Built-in agencies served by HAFAS backends.

HAFAS reports a line's product as a bit index into a per-deployment product
table, so each agency carries its own mode code table.
"""

from transit_agencies.adapters.agencies.rules import (
    matches,
    regex_line,
    starts_with,
    strip_field_prefix,
    template_line,
    when,
)
from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.agency_id import AgencyId
from transit_agencies.domain.models.capability import Capability
from transit_agencies.domain.models.mode_code_table import ModeCodeTable
from transit_agencies.domain.models.rules import LineRule
from transit_agencies.domain.models.style import BLACK, GRAY, RED, WHITE, Style, StyleTable, parse_color
from transit_agencies.domain.models.transport_mode import TransportMode

I = TransportMode.HIGH_SPEED_TRAIN  # noqa: E741
R = TransportMode.REGIONAL_TRAIN
S = TransportMode.SUBURBAN_TRAIN
U = TransportMode.SUBWAY
T = TransportMode.TRAM
B = TransportMode.BUS
F = TransportMode.FERRY
C = TransportMode.CABLECAR
P = TransportMode.ON_DEMAND

HAFAS_CAPABILITIES = frozenset(
    {
        Capability.SUGGEST_LOCATIONS,
        Capability.NEARBY_LOCATIONS,
        Capability.DEPARTURES,
        Capability.TRIPS,
        Capability.TRIPS_VIA,
    }
)

# Austrian deployments share one product layout.
AUSTRIA_MODE_TABLE = ModeCodeTable.from_sequence(
    [I, S, U, None, T, R, B, B, T, F, P, B, R, None, None, None]
)

EIREANN = AgencyConfig(
    agency_id=AgencyId.EIREANN,
    region="eireann",
    timezone="Europe/Dublin",
    language="en",
    default_modes={B},
    capabilities=HAFAS_CAPABILITIES,
    mode_table=ModeCodeTable.from_sequence([None, None, None, B]),
    line_rules=(
        LineRule(
            "hash-suffixed-bus",
            when(name=matches(r"([^#]+)#")),
            regex_line("name", r"([^#]+)#", B),
        ),
    ),
)

RT = AgencyConfig(
    agency_id=AgencyId.RT,
    region="railteam",
    timezone="Europe/Berlin",
    language="en",
    capabilities=frozenset(
        {Capability.AUTOCOMPLETE_ONE_LINE, Capability.SUGGEST_LOCATIONS, Capability.DEPARTURES, Capability.TRIPS}
    ),
    mode_table=ModeCodeTable.from_sequence([I, I, I, R, S, B, F, U, T, P]),
)

VAO = AgencyConfig(
    agency_id=AgencyId.VAO,
    region="vao",
    timezone="Europe/Vienna",
    capabilities=HAFAS_CAPABILITIES,
    mode_table=AUSTRIA_MODE_TABLE,
    styles=StyleTable(
        {
            # Salzburg S-Bahn
            "Salzburg AG|SS1": Style(parse_color("#b61d33"), WHITE),
            "Salzburg AG|SS11": Style(parse_color("#b61d33"), WHITE),
            "OEBB|SS2": Style(parse_color("#0069b4"), WHITE),
            "OEBB|SS3": Style(parse_color("#0aa537"), WHITE),
            "BLB|SS4": Style(parse_color("#a862a4"), WHITE),
            # Salzburg bus
            "Salzburg AG|B1": Style(parse_color("#e3000f"), WHITE),
            "Salzburg AG|B2": Style(parse_color("#0069b4"), WHITE),
            "Salzburg AG|B3": Style(parse_color("#956b27"), WHITE),
            "Salzburg AG|B4": Style(parse_color("#ffcc00"), WHITE),
            "Salzburg AG|B5": Style(parse_color("#04bbee"), WHITE),
            "Salzburg AG|B6": Style(parse_color("#85bc22"), WHITE),
            "Salzburg AG|B7": Style(parse_color("#009a9b"), WHITE),
            "Salzburg AG|B8": Style(parse_color("#f39100"), WHITE),
            "Salzburg AG|B10": Style(parse_color("#f8baa2"), BLACK),
            "Salzburg AG|B12": Style(parse_color("#b9dfde"), WHITE),
            "Salzburg AG|B14": Style(parse_color("#cfe09a"), WHITE),
        }
    ),
)

OOEVV = AgencyConfig(
    agency_id=AgencyId.OOEVV,
    region="ooevv",
    timezone="Europe/Vienna",
    capabilities=HAFAS_CAPABILITIES,
    mode_table=AUSTRIA_MODE_TABLE,
)

BART = AgencyConfig(
    agency_id=AgencyId.BART,
    region="bart",
    timezone="America/Los_Angeles",
    language="en",
    capabilities=HAFAS_CAPABILITIES,
    mode_table=ModeCodeTable.from_sequence([None, None, C, R, None, B, F, S, T]),
)

CMTA = AgencyConfig(
    agency_id=AgencyId.CMTA,
    region="cmta",
    timezone="America/Chicago",
    language="en",
    capabilities=HAFAS_CAPABILITIES,
    mode_table=ModeCodeTable.from_mapping({3: R, 5: B, 12: B}),
)

_AVV_BROWN = parse_color("#CF9C46")
_AVV_PINK = parse_color("#ED028C")
_AVV_ROSE = parse_color("#F499C2")
_AVV_BLUE_GRAY = parse_color("#6F92AE")
_AVV_BLUE = parse_color("#00AEEF")

AVV_AACHEN = AgencyConfig(
    agency_id=AgencyId.AVV_AACHEN,
    region="avv",
    timezone="Europe/Berlin",
    capabilities=HAFAS_CAPABILITIES,
    mode_table=ModeCodeTable.from_sequence([R, I, I, B, S, U, T, B, B, P, F]),
    line_rules=(
        # on-demand lines are sent as e.g. "ALT74ALT"
        LineRule(
            "alt-on-demand",
            when(mode_hint=9, name=starts_with("ALT")),
            strip_field_prefix("name", "ALT"),
        ),
        # Belgian and Dutch IC trains are listed as regional trains
        LineRule(
            "cross-border-intercity",
            when(mode_hint=0, name=starts_with("IC")),
            template_line(I, "{name}"),
        ),
    ),
    styles=StyleTable(
        {
            "BSEV": Style(_AVV_PINK, WHITE, background_color2=GRAY),
            "B3": Style(_AVV_BROWN, WHITE),
            "B3A": Style(_AVV_BROWN, WHITE),
            "B3B": Style(_AVV_BROWN, WHITE),
            "B13": Style(_AVV_BROWN, WHITE),
            "B13A": Style(_AVV_BROWN, WHITE),
            "B13B": Style(_AVV_BROWN, WHITE),
            "B4": Style(RED, WHITE),
            "B16": Style(RED, WHITE),
            "B1": Style(_AVV_PINK, WHITE),
            "B11": Style(_AVV_PINK, WHITE),
            "B21": Style(_AVV_PINK, WHITE),
            "B41": Style(_AVV_PINK, WHITE),
            "B51": Style(_AVV_PINK, WHITE),
            "B33": Style(_AVV_ROSE, WHITE),
            "B34": Style(_AVV_ROSE, WHITE),
            "B54": Style(_AVV_ROSE, WHITE),
            "B73": Style(_AVV_ROSE, WHITE),
            "B5": Style(_AVV_BLUE_GRAY, WHITE),
            "B45": Style(_AVV_BLUE_GRAY, WHITE),
            "B15": Style(_AVV_BLUE, WHITE),
            "B25": Style(_AVV_BLUE, WHITE),
        }
    ),
)

VMT = AgencyConfig(
    agency_id=AgencyId.VMT,
    region="vmt",
    timezone="Europe/Berlin",
    capabilities=HAFAS_CAPABILITIES,
    mode_table=ModeCodeTable.from_sequence([I, I, I, R, S, T, F, B, B, None]),
)

HAFAS_AGENCIES = (EIREANN, RT, VAO, OOEVV, BART, CMTA, AVV_AACHEN, VMT)
