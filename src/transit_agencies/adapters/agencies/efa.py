"""Built-in agencies served by EFA backends.

EFA encodes the mode of a line as a numeric ``motType``; the shared table
below maps it to canonical modes. Agency rules capture quirks of individual
deployments and are kept literal: the sentinel strings are what the
backends actually send.
"""

from transit_agencies.adapters.agencies.rules import (
    ABSENT,
    PRESENT,
    all_of,
    any_of,
    bound_suffix,
    ends_with,
    fixed_line,
    matches,
    one_of,
    regex_line,
    same_value,
    starts_with,
    strip_field_prefix,
    strip_prefix,
    template_line,
    when,
)
from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.agency_id import AgencyId
from transit_agencies.domain.models.capability import Capability
from transit_agencies.domain.models.mode_code_table import ModeCodeTable
from transit_agencies.domain.models.rules import LineRule
from transit_agencies.domain.models.style import BLACK, WHITE, Shape, Style, StyleTable, parse_color, rgb
from transit_agencies.domain.models.transport_mode import TransportMode

HIGH_SPEED = TransportMode.HIGH_SPEED_TRAIN
REGIONAL = TransportMode.REGIONAL_TRAIN
SUBURBAN = TransportMode.SUBURBAN_TRAIN

EFA_MODE_TABLE = ModeCodeTable.from_mapping(
    {
        0: None,  # train, refined by agency rules
        1: SUBURBAN,
        2: TransportMode.SUBWAY,
        3: TransportMode.TRAM,  # Stadtbahn
        4: TransportMode.TRAM,
        5: TransportMode.BUS,  # city bus
        6: TransportMode.BUS,  # regional bus
        7: TransportMode.BUS,  # express bus
        8: TransportMode.CABLECAR,
        9: TransportMode.FERRY,
        10: TransportMode.BUS,  # on-call bus
        11: None,  # other
        12: None,  # school train
        13: REGIONAL,
        14: HIGH_SPEED,
        15: HIGH_SPEED,
        16: HIGH_SPEED,
        17: TransportMode.BUS,  # rail replacement
    }
)

EFA_CAPABILITIES = frozenset(
    {
        Capability.SUGGEST_LOCATIONS,
        Capability.NEARBY_LOCATIONS,
        Capability.DEPARTURES,
        Capability.TRIPS,
        Capability.TRIPS_VIA,
    }
)

TLEM_CAPABILITIES = frozenset(
    {Capability.SUGGEST_LOCATIONS, Capability.DEPARTURES, Capability.TRIPS}
)

# Ireland

TFI = AgencyConfig(
    agency_id=AgencyId.TFI,
    region="nta",
    timezone="Europe/Dublin",
    language="en",
    capabilities=EFA_CAPABILITIES,
    mode_table=EFA_MODE_TABLE,
    line_rules=(
        LineRule(
            "dart",
            when(mode_hint=one_of(0, None), name="DART"),
            fixed_line(SUBURBAN, "DART"),
        ),
        LineRule(
            "rail",
            when(mode_hint=0, train_name="Rail"),
            template_line(REGIONAL, "Rail{train_num}"),
        ),
        LineRule(
            "train",
            when(mode_hint=0, name="Train", symbol="Train"),
            fixed_line(None, "Train"),
        ),
    ),
)

# Great Britain

MERSEY = AgencyConfig(
    agency_id=AgencyId.MERSEY,
    region="nwm",
    timezone="Europe/London",
    language="en",
    capabilities=EFA_CAPABILITIES,
    mode_table=EFA_MODE_TABLE,
    line_rules=(
        LineRule(
            "ordinary-passenger",
            all_of(
                when(mode_hint=13),
                any_of(when(train_type="OO"), when(train_name="Ordinary passenger (o.pas.)")),
            ),
            template_line(REGIONAL, "OO{train_num}"),
        ),
    ),
    position_rules=(bound_suffix(),),
)

TLEM = AgencyConfig(
    agency_id=AgencyId.TLEM,
    region="em",
    timezone="Europe/London",
    language="en",
    capabilities=TLEM_CAPABILITIES,
    mode_table=EFA_MODE_TABLE,
    line_rules=(
        LineRule(
            "underground",
            when(mode_hint=0, train_name="Underground", train_type=ABSENT, name=PRESENT),
            template_line(TransportMode.SUBWAY, "U{name}"),
        ),
        LineRule(
            "dlr",
            all_of(
                when(mode_hint=1, train_type=ABSENT),
                any_of(when(train_num="DLR"), when(train_name="Light Railway")),
            ),
            fixed_line(SUBURBAN, "DLR"),
        ),
        LineRule(
            "elizabeth-line",
            when(mode_hint=1, train_type="OO", train_name="Elizabeth line"),
            fixed_line(SUBURBAN, "Elizabeth Line"),
        ),
    ),
    position_rules=(bound_suffix(),),
    styles=StyleTable(
        {
            # London Underground
            "UBakerloo": Style(parse_color("#9D5324"), WHITE),
            "UCentral": Style(parse_color("#D52B1E"), WHITE),
            "UCircle": Style(parse_color("#FECB00"), BLACK),
            "UDistrict": Style(parse_color("#007934"), WHITE),
            "UEast London": Style(parse_color("#FFA100"), WHITE),
            "UHammersmith & City": Style(parse_color("#C5858F"), BLACK),
            "UJubilee": Style(parse_color("#818A8F"), WHITE),
            "UMetropolitan": Style(parse_color("#850057"), WHITE),
            "UNorthern": Style(BLACK, WHITE),
            "UPiccadilly": Style(parse_color("#0018A8"), WHITE),
            "UVictoria": Style(parse_color("#00A1DE"), WHITE),
            "UWaterloo & City": Style(parse_color("#76D2B6"), BLACK),
            # Rail
            "SDLR": Style(parse_color("#00B2A9"), WHITE),
            "SLO": Style(parse_color("#f46f1a"), WHITE),
            "SElizabeth Line": Style(parse_color("#6950a1"), WHITE),
            # Croydon Tramlink
            "TTramlink 1": Style(rgb(193, 215, 46), WHITE),
            "TTramlink 2": Style(rgb(193, 215, 46), WHITE),
            "TTramlink 3": Style(rgb(124, 194, 66), BLACK),
        }
    ),
)

# Germany

NVBW = AgencyConfig(
    agency_id=AgencyId.NVBW,
    region="nvbw",
    timezone="Europe/Berlin",
    capabilities=EFA_CAPABILITIES,
    mode_table=EFA_MODE_TABLE,
    line_rules=(
        LineRule(
            "ice",
            when(mode_hint=0, train_name=one_of("ICE", "InterCityExpress"), train_num=ABSENT),
            fixed_line(HIGH_SPEED, "ICE"),
        ),
        LineRule(
            "intercity",
            when(mode_hint=0, train_name="InterCity", train_num=ABSENT),
            fixed_line(HIGH_SPEED, "IC"),
        ),
        LineRule(
            "intercity-numbered",
            when(mode_hint=0, train_num=one_of("IC3", "IC4", "IC5", "IC8"), train_type=ABSENT),
            template_line(HIGH_SPEED, "{train_num}"),
        ),
        LineRule(
            "external-eu",
            when(mode_hint=0, train_name="Fernreisezug externer EU", train_num=ABSENT),
            fixed_line(HIGH_SPEED, None),
        ),
        LineRule(
            "supercity",
            when(mode_hint=0, train_name="SuperCity", train_num=ABSENT),
            fixed_line(HIGH_SPEED, "SC"),
        ),
        LineRule(
            "interregio",
            when(mode_hint=0, long_name="InterRegio", symbol=ABSENT),
            fixed_line(REGIONAL, "IR"),
        ),
        LineRule(
            "regiobahn",
            when(mode_hint=0, train_name="REGIOBAHN", train_num=ABSENT),
            fixed_line(REGIONAL, None),
        ),
        LineRule(
            "meridian",
            when(mode_hint=0, train_name="Meridian", symbol=PRESENT),
            template_line(REGIONAL, "{symbol}"),
        ),
        LineRule(
            "citybahn",
            when(mode_hint=0, train_name="CityBahn", train_num=ABSENT),
            fixed_line(REGIONAL, "CB"),
        ),
        LineRule(
            "trilex",
            when(mode_hint=0, train_name="Trilex", train_num=ABSENT),
            fixed_line(REGIONAL, "TLX"),
        ),
        LineRule(
            "lake-ferry",
            when(mode_hint=0, train_name="Bay. Seenschifffahrt", symbol=PRESENT),
            template_line(TransportMode.FERRY, "{symbol}"),
        ),
        LineRule(
            "third-party-train",
            when(mode_hint=0, train_name="Nahverkehrszug von Dritten", train_num=ABSENT),
            fixed_line(None, "Zug"),
        ),
        LineRule(
            "db",
            when(mode_hint=0, train_name="DB", train_num=ABSENT),
            fixed_line(None, "DB"),
        ),
        LineRule(
            "karlsruhe-s-bahn",
            all_of(
                when(mode_hint=1, symbol=matches(r"(S\d+) \((?:AVG|VBK)\)")),
                same_value("symbol", "name"),
            ),
            regex_line("symbol", r"(S\d+) \((?:AVG|VBK)\)", SUBURBAN),
        ),
    ),
    styles=StyleTable(
        {
            "T1": Style(parse_color("#ed1c24"), WHITE, shape=Shape.RECT),
            "T2": Style(parse_color("#33b540"), WHITE, shape=Shape.RECT),
            "T3": Style(parse_color("#f79210"), WHITE, shape=Shape.RECT),
            "T4": Style(parse_color("#ef58a1"), WHITE, shape=Shape.RECT),
            "T5": Style(parse_color("#0994ce"), WHITE, shape=Shape.RECT),
            # Heilbronn night buses
            "N46": Style(parse_color("#28bda5"), WHITE),
            "N47": Style(parse_color("#d6de20"), WHITE),
        }
    ),
)

_LONG_DISTANCE_TYPES = ("EC", "IC", "ICE", "CNL", "THA", "TGV", "RJ", "WB", "HKX", "D")


def _long_distance_rule(train_type: str) -> LineRule:
    return LineRule(
        f"long-distance {train_type}",
        when(mode_hint=16, train_type=train_type, train_num=PRESENT),
        template_line(HIGH_SPEED, f"{train_type}{{train_num}}"),
    )


def _swm_tram(background: str, foreground: int = WHITE) -> Style:
    return Style(parse_color(background), foreground, shape=Shape.RECT)


def _swm_outline(color: str) -> Style:
    return Style(WHITE, parse_color(color), shape=Shape.RECT, border_color=parse_color(color))


def _swm_split(top: str, bottom: str) -> Style:
    return Style(
        parse_color(top), WHITE, shape=Shape.RECT, background_color2=parse_color(bottom)
    )


_NIGHT_TRAM = Style(parse_color("#999999"), parse_color("#ffff00"), shape=Shape.RECT)

BAYERN = AgencyConfig(
    agency_id=AgencyId.BAYERN,
    region="beg",
    timezone="Europe/Berlin",
    capabilities=EFA_CAPABILITIES,
    mode_table=EFA_MODE_TABLE,
    line_rules=(
        LineRule(
            "meridian",
            when(mode_hint=0, train_type="M", train_num=PRESENT, train_name=ends_with("Meridian")),
            template_line(REGIONAL, "M{train_num}"),
        ),
        LineRule(
            "zug",
            when(mode_hint=0, train_type="ZUG", train_num=PRESENT),
            template_line(REGIONAL, "{train_num}"),
        ),
        LineRule(
            "abellio",
            all_of(
                when(mode_hint=1),
                any_of(when(train_type="ABR"), when(train_name="ABELLIO Rail NRW GmbH")),
            ),
            template_line(SUBURBAN, "ABR{train_num}"),
        ),
        LineRule(
            "sbb",
            all_of(
                when(mode_hint=1),
                any_of(when(train_type="SBB"), when(train_name="SBB GmbH")),
            ),
            template_line(REGIONAL, "SBB{train_num}"),
        ),
        LineRule(
            "lindau-city-bus",
            when(mode_hint=5, name=starts_with("Stadtbus Linie ")),
            strip_field_prefix("name", "Stadtbus Linie "),
        ),
        *(_long_distance_rule(train_type) for train_type in _LONG_DISTANCE_TYPES),
        LineRule(
            "interregio",
            when(mode_hint=16, train_type="IR", train_num=PRESENT),
            template_line(REGIONAL, "IR{train_num}"),
        ),
    ),
    styles=StyleTable(
        {
            # Munich tram
            "swm|T12": _swm_tram("#96368b"),
            "swm|T15": _swm_outline("#f1919c"),
            "swm|T16": _swm_tram("#0065ae"),
            "swm|T17": _swm_tram("#8b563e"),
            "swm|T18": _swm_tram("#13a538"),
            "swm|T19": _swm_tram("#e30613"),
            "swm|T20": _swm_tram("#16bae7"),
            "swm|T21": _swm_tram("#bc7a00"),
            "swm|T22": _swm_outline("#16bae7"),
            "swm|T23": _swm_tram("#bccf00"),
            "swm|T25": _swm_tram("#f1919c"),
            "swm|T27": _swm_tram("#f7a600"),
            "swm|T28": _swm_outline("#f7a600"),
            "swm|T29": _swm_outline("#e30613"),
            "swm|T31": _swm_split("#e30613", "#bc7a00"),
            "swm|TN17": _NIGHT_TRAM,
            "swm|TN19": _NIGHT_TRAM,
            "swm|TN20": _NIGHT_TRAM,
            "swm|TN27": _NIGHT_TRAM,
            # Munich subway
            "swm|UU1": _swm_tram("#52822f"),
            "swm|UU2": _swm_tram("#c20831"),
            "swm|UU3": _swm_tram("#ec6726"),
            "swm|UU4": _swm_tram("#00a984"),
            "swm|UU5": _swm_tram("#bc7a00"),
            "swm|UU6": _swm_tram("#0065ae"),
            "swm|UU7": _swm_split("#52822f", "#c20831"),
            "swm|UU8": _swm_split("#c20831", "#ec6726"),
            # Munich bus
            "swm|B": _swm_tram("#005262"),
            "swm|BX": _swm_tram("#4e917a"),
            # Ingolstadt
            "inv|B10": Style(parse_color("#DA2510"), WHITE),
            "inv|B11": Style(parse_color("#EE9B78"), BLACK),
            "inv|B15": Style(parse_color("#84C326"), BLACK),
            "inv|B16": Style(parse_color("#5D452E"), WHITE),
            "inv|B17": Style(parse_color("#E81100"), BLACK),
            "inv|B18": Style(parse_color("#79316C"), WHITE),
            "inv|B20": Style(parse_color("#EA891C"), BLACK),
            "inv|BX109": Style(WHITE, BLACK, border_color=BLACK),
        }
    ),
)

MVG = AgencyConfig(
    agency_id=AgencyId.MVG,
    region="mvg",
    timezone="Europe/Berlin",
    capabilities=EFA_CAPABILITIES,
    mode_table=EFA_MODE_TABLE,
    position_rules=(strip_prefix(" - "),),
)

EFA_AGENCIES = (TFI, MERSEY, TLEM, NVBW, BAYERN, MVG)
