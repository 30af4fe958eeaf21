"""Agency identifier domain model."""

from enum import StrEnum

from transit_agencies.domain.exceptions import UnknownAgencyError


class AgencyId(StrEnum):
    """Stable identifier of a transit network.

    Members are never renumbered or reused for a different agency; new
    networks are appended.
    """

    # Europe
    RT = "RT"
    # Germany
    DB = "DB"
    BVG = "BVG"
    VBB = "VBB"
    NVV = "NVV"
    BAYERN = "BAYERN"
    MVV = "MVV"
    INVG = "INVG"
    AVV = "AVV"
    AVV_AACHEN = "AVV_AACHEN"
    VGN = "VGN"
    VVM = "VVM"
    VMV = "VMV"
    HVV = "HVV"
    SH = "SH"
    GVH = "GVH"
    BSVAG = "BSVAG"
    VBN = "VBN"
    NASA = "NASA"
    VMT = "VMT"
    VVO = "VVO"
    VMS = "VMS"
    VGS = "VGS"
    VRR = "VRR"
    VRS = "VRS"
    MVG = "MVG"
    VRN = "VRN"
    VVS = "VVS"
    DING = "DING"
    KVV = "KVV"
    VAGFR = "VAGFR"
    NVBW = "NVBW"
    VVV = "VVV"
    # Austria
    OEBB = "OEBB"
    VAO = "VAO"
    VOR = "VOR"
    WIEN = "WIEN"
    OOEVV = "OOEVV"
    LINZ = "LINZ"
    VVT = "VVT"
    IVB = "IVB"
    STV = "STV"
    # Switzerland
    SBB = "SBB"
    BVB = "BVB"
    VBL = "VBL"
    ZVV = "ZVV"
    # France
    PACA = "PACA"
    PARIS = "PARIS"
    # Belgium
    SNCB = "SNCB"
    # Netherlands
    NS = "NS"
    # Denmark
    DSB = "DSB"
    # Sweden
    SE = "SE"
    # Norway
    NRI = "NRI"
    # Finland
    HSL = "HSL"
    # Luxembourg
    LU = "LU"
    # United Kingdom
    TLEM = "TLEM"
    MERSEY = "MERSEY"
    # Ireland
    TFI = "TFI"
    EIREANN = "EIREANN"
    # Poland
    PL = "PL"
    # Italy
    IT = "IT"
    # United Arab Emirates
    DUB = "DUB"
    # Israel
    JET = "JET"
    # United States
    SF = "SF"
    BART = "BART"
    CMTA = "CMTA"
    SEPTA = "SEPTA"
    RTACHICAGO = "RTACHICAGO"
    # Canada
    ONTARIO = "ONTARIO"
    QUEBEC = "QUEBEC"
    # Australia
    SYDNEY = "SYDNEY"
    MET = "MET"

    @classmethod
    def parse(cls, value: "AgencyId | str") -> "AgencyId":
        """Resolve an agency identifier by name, case-insensitive.

        Raises:
            UnknownAgencyError: If the name is not part of the identifier set.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError):
            raise UnknownAgencyError(str(value)) from None
